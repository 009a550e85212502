"""Expiry collaborators, fired once when a countdown runs out on its own.

Every collaborator exposes a single ``notify_expiry()``. Failures are logged
and swallowed: the countdown is already over and nothing is retried.
"""

import subprocess
import sys
from countdown.common.logger import log

COMMAND_TIMEOUT = 15

_WINDOWS_COMMAND = [
    "powershell", "-NoProfile", "-Command",
    "(New-Object -ComObject Shell.Application).MinimizeAll()",
]
_MACOS_COMMAND = [
    "osascript", "-e",
    'tell application "System Events" to set visible of every application process whose visible is true to false',
]
_LINUX_COMMAND = ["wmctrl", "-k", "on"]


def minimize_all_command(platform=None):
    """Return the argv that minimizes every window on this platform."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return list(_WINDOWS_COMMAND)
    if platform == "darwin":
        return list(_MACOS_COMMAND)
    return list(_LINUX_COMMAND)


class MinimizeAllWindows:
    """Runs the OS "show desktop" command."""

    def __init__(self, command=None, timeout=COMMAND_TIMEOUT):
        self.command = command or minimize_all_command()
        self.timeout = timeout

    def notify_expiry(self):
        try:
            subprocess.run(
                self.command,
                check=True,
                capture_output=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError):
            log.warning(f"Error minimizing windows with {self.command[0]!r}", exc_info=True)
            return False
        log.info("Minimized all windows")
        return True


class NoExpiryAction:

    def notify_expiry(self):
        log.info("Countdown expired, no expiry action configured")
        return True


EXPIRY_ACTIONS = {
    "minimize_all": MinimizeAllWindows,
    "none": NoExpiryAction,
}

def build_expiry_action(name):
    if name not in EXPIRY_ACTIONS:
        log.warning(f"Unknown expiry action '{name}', falling back to 'minimize_all'")
        name = "minimize_all"
    return EXPIRY_ACTIONS[name]()
