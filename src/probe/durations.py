"""Parsing and formatting of durations written like ``1000ms`` or ``1m30s``."""
import re

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_duration(text: str) -> float:
    """Parse a duration string into seconds.

    Accepts a sequence of decimal numbers with unit suffixes (``ns``, ``us``,
    ``ms``, ``s``, ``m``, ``h``), e.g. ``300ms`` or ``1h15m``. A bare number is
    read as seconds.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    value = text.strip()
    if not value:
        raise ValueError("invalid duration: empty string")

    sign = 1.0
    if value[0] in "+-":
        sign = -1.0 if value[0] == "-" else 1.0
        value = value[1:]

    if _NUMBER.fullmatch(value):
        return sign * float(value)

    total = 0.0
    position = 0
    while position < len(value):
        match = _COMPONENT.match(value, position)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        position = match.end()
    return sign * total


def _fraction(whole: int, remainder: int, digits: int) -> str:
    if remainder == 0:
        return str(whole)
    return f"{whole}.{remainder:0{digits}d}".rstrip("0")


def format_duration(seconds: float) -> str:
    """Format seconds the way ``1.5s``, ``20ms`` or ``1m30s`` are written."""
    nanos = int(round(seconds * 1e9))
    if nanos == 0:
        return "0s"

    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return sign + _fraction(*divmod(nanos, 1_000), 3) + "µs"
    if nanos < 1_000_000_000:
        return sign + _fraction(*divmod(nanos, 1_000_000), 6) + "ms"

    total_seconds, remainder = divmod(nanos, 1_000_000_000)
    hours, total_seconds = divmod(total_seconds, 3600)
    minutes, secs = divmod(total_seconds, 60)

    text = _fraction(secs, remainder, 9) + "s"
    if hours:
        text = f"{hours}h{minutes}m" + text
    elif minutes:
        text = f"{minutes}m" + text
    return sign + text
