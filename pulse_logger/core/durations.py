"""Uptime rendering: compact h/m/s text such as "1h2m3.5s" or "250ms"."""

from datetime import timedelta

_US_PER_SEC = 1_000_000
_US_PER_MS = 1_000


def truncate_to_seconds(delta: timedelta) -> timedelta:
    """Drop the sub-second part (toward zero)."""
    return timedelta(seconds=int(delta.total_seconds()))


def _fraction(value: int, unit: int) -> str:
    """value/unit as a decimal string without trailing zeros ("1.5", "2")."""
    whole, rest = divmod(value, unit)
    if not rest:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def format_duration(delta: timedelta) -> str:
    """
    Format a duration the way uptime is reported to humans and /health.

    Under one second: "0s", "750µs", "12.5ms". From one second: hours and minutes are
    included once non-zero, e.g. "42s", "1m5s", "2h0m3.25s".
    """
    us = delta // timedelta(microseconds=1)
    sign = ""
    if us < 0:
        sign, us = "-", -us
    if us == 0:
        return "0s"
    if us < _US_PER_MS:
        return f"{sign}{us}µs"
    if us < _US_PER_SEC:
        return f"{sign}{_fraction(us, _US_PER_MS)}ms"

    secs_us = us % (60 * _US_PER_SEC)
    total_min = us // (60 * _US_PER_SEC)
    hours, minutes = divmod(total_min, 60)
    out = f"{_fraction(secs_us, _US_PER_SEC)}s"
    if total_min:
        out = f"{minutes}m" + out
    if hours:
        out = f"{hours}h" + out
    return sign + out
