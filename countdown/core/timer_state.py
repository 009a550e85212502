import threading
from datetime import timedelta
from countdown.common.logger import log
from countdown.util.misc import now_local

# This object handles a single countdown. Remaining time is always computed from the wall clock against an end time
# fixed at start, so clock changes do move the live countdown.
class CountdownTimer:

    # Duration is a timedelta, clock is any callable returning the current naive local datetime. The name is only a
    # label for display and logs.
    def __init__(self, duration=timedelta(0), clock=None, name=""):
        if duration < timedelta(0):
            raise ValueError(f"Countdown duration must be nonnegative, got {duration}")
        self.name = name
        self.duration = duration
        self.clock = clock or now_local
        self.end_time = None
        self.running = False
        # Set by stop(), the tick loop waits on it so cancellation is seen immediately
        self.done = threading.Event()
        self.done.set()
        self._lock = threading.Lock()

        log.debug(f"Initialized new countdown timer '{name}' with duration {duration}")

    # Start and stop methods for the timer. Both return True only when they actually changed state.
    def start(self):
        with self._lock:
            if self.running:
                return False
            self.end_time = self.clock() + self.duration
            self.done = threading.Event()
            self.running = True
        log.debug(f"Started countdown timer '{self.name}', ends at {self.end_time:%Y-%m-%d %H:%M:%S}")
        return True
    def stop(self):
        with self._lock:
            if not self.running:
                return False
            self.running = False
            self.done.set()
        log.debug(f"Stopped countdown timer '{self.name}'")
        return True

    # Returns end_time - now while running, zero otherwise. May be negative, callers treat <= 0 as expiry.
    def remaining_time(self):
        with self._lock:
            if not self.running:
                return timedelta(0)
            end_time = self.end_time
        return end_time - self.clock()

    def __repr__(self):
        state = "running" if self.running else "stopped"
        return f"CountdownTimer(name={self.name!r}, duration={self.duration}, {state}, end_time={self.end_time})"
