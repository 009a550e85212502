"""Input parsing: Minutes / Hour-Set text into a countdown duration.

Minutes always take priority over Hour-Set. Everything here is pure and
raises before any timer exists, so a bad input never half-starts anything.
"""

import math
import re
from datetime import timedelta

_HOUR_SET = re.compile(r"[0-9]{4}")
# ASCII decimals only, no exponents, underscores or non-ASCII digits
_MINUTES = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


class InputError(ValueError):
    """Base for every user-facing input problem. str(err) is the message shown."""


class InvalidMinutesError(InputError):
    pass


class InvalidHourSetError(InputError):
    pass


class MissingDurationError(InputError):
    pass


def parse_minutes(text):
    """Parse a positive (possibly fractional) number of minutes into a timedelta."""
    if not _MINUTES.fullmatch(text):
        raise InvalidMinutesError("Minutes must be a positive number")
    minutes = float(text)
    if not math.isfinite(minutes) or minutes <= 0:
        raise InvalidMinutesError("Minutes must be a positive number")
    try:
        return timedelta(minutes=minutes)
    except OverflowError:
        raise InvalidMinutesError("Minutes value is too large") from None


def parse_hour_set(text):
    """Parse HHMM into an (hour, minute) tuple."""
    if not _HOUR_SET.fullmatch(text):
        raise InvalidHourSetError("Hour set must be 4 digits (HHMM)")
    hour, minute = int(text[:2]), int(text[2:])
    if hour > 23 or minute > 59:
        raise InvalidHourSetError("Invalid time (HH:00-23:59)")
    return hour, minute


def duration_until(hour, minute, now):
    """Span from now until the next HH:MM. A time already reached today rolls to tomorrow."""
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return target - now


def resolve_duration(minutes_text, hour_set_text, now):
    minutes_text = (minutes_text or "").strip()
    hour_set_text = (hour_set_text or "").strip()

    if minutes_text:
        return parse_minutes(minutes_text)
    if hour_set_text:
        hour, minute = parse_hour_set(hour_set_text)
        return duration_until(hour, minute, now)
    raise MissingDurationError("Please enter minutes or hour set")


# Live field validators. Empty text is fine here, it's only an error at start time.
def validate_minutes(text):
    text = (text or "").strip()
    if not text:
        return None
    try:
        parse_minutes(text)
    except InputError as e:
        return str(e)
    return None

def validate_hour_set(text):
    text = (text or "").strip()
    if not text:
        return None
    try:
        parse_hour_set(text)
    except InputError as e:
        return str(e)
    return None
