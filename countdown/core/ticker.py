import threading
from countdown.common.logger import log

DEFAULT_TICK_INTERVAL = 1.0


# Background polling loop for one running CountdownTimer. It waits on the timer's `done` event, so stop() wakes it
# immediately instead of at the next tick boundary.
class TickLoop(threading.Thread):

    def __init__(self, timer, on_tick, on_expire, interval=DEFAULT_TICK_INTERVAL):
        super().__init__(name="countdown-tick", daemon=True)
        self.timer = timer
        self.on_tick = on_tick
        self.on_expire = on_expire
        self.interval = interval
        # Captured once, a later restart of the same timer gets a fresh event and must not revive this loop
        self._done = timer.done

    def run(self):
        log.debug(f"Tick loop started for {self.timer!r}")
        while not self._done.wait(self.interval):
            if not self.tick():
                break
        log.debug(f"Tick loop finished for {self.timer!r}")

    # One iteration of the loop. Returns False once the loop should end.
    def tick(self):
        if self._done.is_set():
            return False
        remaining = self.timer.remaining_time()
        if remaining.total_seconds() > 0:
            self.on_tick(self.timer, remaining, self.timer.end_time)
            return True

        # Only the caller that actually performs the stop fires expiry, a racing manual stop wins silently
        if self.timer.stop():
            log.info("Countdown reached zero")
            self.on_expire(self.timer)
        return False
