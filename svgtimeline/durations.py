"""Duration literals and compact duration labels.

Durations are ``datetime.timedelta`` values. Literals follow the familiar
``1h30m``, ``1.5s``, ``250ms``, ``12us`` notation and labels are written in
the same notation, e.g. ``2m30s`` or ``1.25s``.
"""

import re
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5
    "μs": MICROSECOND,  # U+03BC
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def to_nanoseconds(delta):
    return ((delta.days * 86400 + delta.seconds) * 1000000 + delta.microseconds) * 1000


def parse_duration(literal):
    """Parse a duration literal such as ``1.5s`` or ``1h2m`` into a timedelta.

    A leading sign is allowed. Values below the microsecond resolution of
    ``timedelta`` are rounded.
    """
    s = literal.strip()
    sign = 1
    if s[:1] in ("-", "+"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError("invalid duration %r" % literal)

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise ValueError("invalid duration %r" % literal)
        number, unit = match.groups()
        total += Decimal(number) * UNITS[unit]
        pos = match.end()

    micros = (total / 1000).to_integral_value(rounding=ROUND_HALF_UP)
    return timedelta(microseconds=sign * int(micros))


def round_to(ns, multiple):
    """Round ``ns`` to the nearest multiple, halfway values away from zero."""
    if multiple <= 0:
        return ns
    remainder = abs(ns) % multiple
    if remainder + remainder < multiple:
        rounded = abs(ns) - remainder
    else:
        rounded = abs(ns) + multiple - remainder
    return rounded if ns >= 0 else -rounded


def format_duration(delta, digits=2):
    """Return a compact label for ``delta`` rounded to ``digits`` sub-unit digits.

    The rounding unit is the coarsest of second, millisecond, microsecond and
    nanosecond that the value exceeds.
    """
    ns = to_nanoseconds(delta)
    div = 10 ** digits
    for unit in (SECOND, MILLISECOND, MICROSECOND, NANOSECOND):
        if ns > unit:
            ns = round_to(ns, unit // div)
            break
    return duration_string(ns)


def duration_string(ns):
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < MICROSECOND:
        return "%s%dns" % (sign, u)
    if u < MILLISECOND:
        return sign + _decimal(u, MICROSECOND) + "µs"
    if u < SECOND:
        return sign + _decimal(u, MILLISECOND) + "ms"

    hours, rest = divmod(u, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    seconds = _decimal(rest, SECOND) + "s"
    if hours:
        return "%s%dh%dm%s" % (sign, hours, minutes, seconds)
    if minutes:
        return "%s%dm%s" % (sign, minutes, seconds)
    return sign + seconds


def _decimal(value, unit):
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    return "%d.%s" % (whole, str(frac).zfill(width).rstrip("0"))
