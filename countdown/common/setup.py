import os
import sys
from pathlib import Path
from dataclasses import dataclass

_APP_DIR_NAME = "CountdownTimer"

# Lil helper function to create missing directories if missing, and optionally error out when a path
# doesn't exist.
def ensure_directory(path: Path,must_exist=False):
    if must_exist:
        if not path.exists():
            raise FileNotFoundError(f"Required directory is missing: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    else:
        path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the per-user base folder for this platform. COUNTDOWN_HOME always wins, so tests and portable installs can
# redirect everything.
def resolve_data_root(environ=None, platform=None) -> Path:
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    override = environ.get("COUNTDOWN_HOME")
    if override:
        return Path(override)

    if platform == "win32":
        appdata = environ.get("APPDATA")
        if not appdata:
            raise RuntimeError("Missing APPDATA environment variable, cannot determine data directories.")
        return Path(appdata) / _APP_DIR_NAME
    if platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR_NAME

    xdg = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "countdown-timer"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    data: Path
    logs: Path

    @staticmethod
    def build(environ=None, platform=None):
        # Folder for the package itself, only used to locate bundled files
        if getattr(sys, "frozen", False):
            root = Path(sys.executable).resolve().parent
        else:
            root = Path(__file__).resolve().parents[2]

        # Folder for settings and logs
        data = ensure_directory(resolve_data_root(environ, platform))
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            root = root,
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
