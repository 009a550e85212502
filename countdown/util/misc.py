from datetime import datetime, timedelta

# Display placeholders while no timer is running.
IDLE_COUNTDOWN = "00:00:00"
IDLE_END_TIME = "--:--"


# Simply returns the current local wall-clock time (naive). Used as the default clock everywhere.
def now_local():
    return datetime.now()


def format_countdown(remaining: timedelta) -> str:
    """Format a remaining span as HH:MM:SS. Hours never wrap, negatives clamp to zero."""
    seconds = max(0, int(remaining.total_seconds()))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


# Formats a wall-clock instant as HH:MM, for the end time label.
def format_clock(instant: datetime) -> str:
    return f"{instant.hour:02d}:{instant.minute:02d}"
