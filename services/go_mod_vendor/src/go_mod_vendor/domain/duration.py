"""Duration helpers for build-step timing output.

Durations are rounded to whole milliseconds before they are shown, and
rendered the way the Go toolchain prints them (``250ms``, ``1.5s``,
``2m5.25s``) so build logs read the same as the tools they wrap.
"""

from __future__ import annotations

from datetime import timedelta

_MILLISECOND = timedelta(milliseconds=1)


def round_to_millisecond(duration: timedelta) -> timedelta:
    """Round to the nearest millisecond, halves away from zero.

    Negative durations clamp to zero.
    """
    if duration <= timedelta(0):
        return timedelta(0)
    micros = duration // timedelta(microseconds=1)
    millis, remainder = divmod(micros, 1000)
    if remainder >= 500:
        millis += 1
    return millis * _MILLISECOND


def format_duration(duration: timedelta) -> str:
    millis = round_to_millisecond(duration) // _MILLISECOND
    if millis == 0:
        return "0s"
    if millis < 1000:
        return f"{millis}ms"

    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    seconds, millis = divmod(millis, 1000)

    text = str(seconds)
    if millis:
        text += f".{millis:03d}".rstrip("0")
    text += "s"
    if hours:
        return f"{hours}h{minutes}m{text}"
    if minutes:
        return f"{minutes}m{text}"
    return text
