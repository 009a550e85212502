"""Countdown controller: input -> timer -> tick loop -> display, no UI toolkit.

The controller holds at most one active timer handle. Every display mutation
goes through ``dispatch``, which the window points at its UI-thread
dispatcher, so the tick loop thread never touches widgets itself.
"""

import threading
from datetime import timedelta

from countdown.common.logger import log
from countdown.core.parsing import resolve_duration
from countdown.core.ticker import DEFAULT_TICK_INTERVAL, TickLoop
from countdown.core.timer_state import CountdownTimer
from countdown.util.misc import IDLE_COUNTDOWN, IDLE_END_TIME, format_clock, format_countdown, now_local

# Upper bound for waiting on a cancelled loop. It wakes on the done event, so this is only hit if a dispatch blocks.
_JOIN_TIMEOUT = 2.0


def _run_inline(fn):
    fn()


class CountdownController:

    def __init__(self, display, expiry_action, dispatch=None, clock=None,
                 tick_interval=DEFAULT_TICK_INTERVAL):
        self.display = display
        self.expiry_action = expiry_action
        self.dispatch = dispatch or _run_inline
        self.clock = clock or now_local
        self.tick_interval = tick_interval

        # Inert until the user starts something
        self._timer = CountdownTimer(timedelta(0), clock=self.clock)
        self._loop = None
        self._name = ""

    @property
    def timer(self):
        return self._timer

    @property
    def loop(self):
        return self._loop

    @property
    def running(self):
        return self._timer.running

    @property
    def name(self):
        return self._name

    # ------------------------------------------------------------------ #
    #  Start / stop                                                        #
    # ------------------------------------------------------------------ #

    def start(self, name, minutes_text, hour_set_text):
        """Parse the inputs and start a fresh timer, replacing any active one.

        Raises InputError (nothing changes) when the inputs are invalid.
        """
        duration = resolve_duration(minutes_text, hour_set_text, self.clock())

        if self._timer.running:
            log.info("Replacing the running countdown with a new one")
            self._cancel_active()

        self._name = (name or "").strip()
        timer = CountdownTimer(duration, clock=self.clock, name=self._name)
        timer.start()
        self._timer = timer

        self.display.set_running(True, self._name)
        self.display.show_countdown(format_countdown(timer.remaining_time()))
        self.display.show_end_time(format_clock(timer.end_time))

        self._loop = TickLoop(timer, self._on_tick, self._on_expire, interval=self.tick_interval)
        self._loop.start()
        log.info(f"Started countdown '{self._name}' for {duration}, ending at {timer.end_time:%H:%M:%S}")
        return timer

    def stop(self):
        """Manual stop. Never fires the expiry action."""
        was_running = self._timer.running
        self._cancel_active()
        self._reset_display()
        if was_running:
            log.info(f"Stopped countdown '{self._name}' manually")

    # Stops the active timer and waits for its loop to observe the cancellation. If the timer was already stopped,
    # its loop has left the ticking phase (it may still be running the expiry action) and is not waited on.
    def _cancel_active(self):
        stopped_here = self._timer.stop()
        loop = self._loop
        self._loop = None
        if not stopped_here:
            return
        if loop is not None and loop.is_alive() and loop is not threading.current_thread():
            loop.join(_JOIN_TIMEOUT)
            if loop.is_alive():
                log.warning("Previous tick loop did not exit in time")

    def _reset_display(self):
        self.display.show_countdown(IDLE_COUNTDOWN)
        self.display.show_end_time(IDLE_END_TIME)
        self.display.set_running(False, self._name)

    # ------------------------------------------------------------------ #
    #  Tick loop callbacks (run on the loop thread)                        #
    # ------------------------------------------------------------------ #

    def _on_tick(self, timer, remaining, end_time):
        countdown_text = format_countdown(remaining)
        end_text = format_clock(end_time)

        def apply():
            # Stale loops from a replaced or stopped timer must not write
            if timer is not self._timer or not timer.running:
                return
            self.display.show_countdown(countdown_text)
            self.display.show_end_time(end_text)

        self.dispatch(apply)

    def _on_expire(self, timer):
        def apply():
            if timer is not self._timer:
                return
            self._loop = None
            self._reset_display()

        self.dispatch(apply)
        log.info(f"Countdown '{timer.name}' expired, running expiry action")
        self.expiry_action.notify_expiry()
