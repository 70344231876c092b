"""Config file reader.

A config file is a list of sections::

    # comment
    @timeline
    width=800

    @row 30 5
    @era
    text=request
    duration=10s

    @row
    @task
    text=fetch
    duration=4s

``@row`` takes an optional height and separator height. Events opened by
``@era`` or ``@task`` are added to the last row once the next section starts
or the input ends.
"""

import io
import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .durations import parse_duration
from .errors import ParseError
from .model import Event, EventKind, Timeline
from .render import generate

logger = logging.getLogger(__name__)

DEFAULT_ROW_HEIGHT = 30
DEFAULT_ROW_SEPARATOR = 5

SECTIONS = ("@timeline", "@row", "@era", "@task")
EVENT_KINDS = {"@era": EventKind.ERA, "@task": EventKind.TASK}

TIMELINE_INT_KEYS = ("width", "num_ticks", "tick_height",
                     "margin_top", "margin_right", "margin_bottom", "margin_left")
EVENT_TEXT_KEYS = {"id": "id", "class": "css_class", "text": "text", "title": "title"}

# Most specific first.
TIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%a %b %d %H:%M:%S %Z %Y",   # Unix date
    "%a %b %d %H:%M:%S %Y",      # ANSI C
    "%Y-%m-%dT%H:%M:%S%z",       # RFC 3339
    "%a, %d %b %Y %H:%M:%S %Z",  # RFC 1123
    "%d %b %y %H:%M %Z",         # RFC 822
    "%A, %d-%b-%y %H:%M:%S %Z",  # RFC 850
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
    "%Y-%m-%d",
    "%d/%m/%Y",
    "%d %b %Y",
    "%d-%b-%Y",
    "%H:%M:%S.%f",
    "%H:%M:%S",
    "%H:%M",
)

# A zone abbreviation at the end of a time or just before its year.
ZONE_NAME = re.compile(r"\s+[A-Z]{3,5}(?=\s+\d{4}$|$)")


@dataclass(frozen=True)
class ParserState:
    section: Optional[str] = None
    pending: Optional[Event] = None
    settings: tuple = ()  # (lineno, key, value) read in the current @timeline section


def _without_zone_name(value, fmt):
    """Drop the ``%Z`` abbreviation from ``value`` and ``fmt``.

    strptime only knows UTC, GMT and the host's own zone names, so any
    abbreviation is accepted here and the time is read as UTC.
    """
    match = ZONE_NAME.search(value)
    if match is None:
        return None, None
    return value[:match.start()] + value[match.end():], fmt.replace(" %Z", "")


def parse_time(value):
    for fmt in TIME_FORMATS:
        text = value
        if "%Z" in fmt:
            text, fmt = _without_zone_name(value, fmt)
            if text is None:
                continue
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    raise ValueError("unrecognized time format: %s, use one of %s" % (value, ", ".join(TIME_FORMATS)))


def _int_or_default(parts, i, default):
    try:
        return int(parts[i])
    except (IndexError, ValueError):
        return default


def flush(timeline, state, lineno):
    """Add the pending event to the last row."""
    if state.pending is None:
        return state
    row = timeline.last_row
    if row is None:
        raise ParseError(lineno, "cannot add an event without a row")
    row.add_event(state.pending)
    logger.debug("line %d: added %s event %r", lineno, state.pending.kind.value,
                 state.pending.id or state.pending.text)
    return replace(state, pending=None)


def start_section(timeline, state, lineno, line):
    state = apply_settings(timeline, state)
    state = flush(timeline, state, lineno)
    parts = line.split()
    section = parts[0]

    if section not in SECTIONS:
        raise ParseError(lineno, "unknown section '%s'" % section)
    if section == "@row":
        timeline.add_row(_int_or_default(parts, 1, DEFAULT_ROW_HEIGHT),
                         _int_or_default(parts, 2, DEFAULT_ROW_SEPARATOR))

    pending = Event(EVENT_KINDS[section]) if section in EVENT_KINDS else None
    return ParserState(section=section, pending=pending)


def set_timeline_key(state, key, value, lineno):
    if key == "id":
        return replace(state, settings=state.settings + ((lineno, key, value),))
    if key not in TIMELINE_INT_KEYS:
        raise ParseError(lineno, "unknown property '%s'" % key)
    try:
        number = int(value)
    except ValueError as e:
        raise ParseError(lineno, "invalid %s: %s" % (key, e)) from e
    return replace(state, settings=state.settings + ((lineno, key, number),))


def apply_settings(timeline, state):
    """Configure ``timeline`` with every setting of the @timeline section.

    Settings are applied together, so a width may be given before the
    margins it has to fit. A rejected combination is reported on the line
    of the last setting.
    """
    if not state.settings:
        return state
    try:
        timeline.configure(**{key: value for _, key, value in state.settings})
    except ValueError as e:
        raise ParseError(state.settings[-1][0], "invalid @timeline settings: %s" % e) from e
    return replace(state, settings=())


def set_event_key(state, key, value, lineno):
    if key in EVENT_TEXT_KEYS:
        field = EVENT_TEXT_KEYS[key]
        return replace(state, pending=replace(state.pending, **{field: value}))

    if key == "duration":
        try:
            duration = parse_duration(value)
        except ValueError as e:
            raise ParseError(lineno, "error while parsing duration of event, %s" % e) from e
        return replace(state, pending=replace(state.pending, duration=duration))

    if key == "time":
        try:
            start = parse_time(value)
        except ValueError as e:
            raise ParseError(lineno, str(e)) from e
        return replace(state, pending=replace(state.pending, start=start))

    raise ParseError(lineno, "unknown event property '%s'" % key)


def parse_line(timeline, state, lineno, line):
    line = line.strip()
    if not line or line.startswith("#"):
        return state

    if line.startswith("@"):
        return start_section(timeline, state, lineno, line)

    key, sep, value = line.partition("=")
    if not sep:
        raise ParseError(lineno, "expected key=value, got '%s'" % line)
    key = key.strip()
    value = value.strip()

    if state.section is None:
        raise ParseError(lineno, "'%s' is set outside of a section" % key)
    if state.section == "@timeline":
        return set_timeline_key(state, key, value, lineno)
    if state.section == "@row":
        raise ParseError(lineno, "row has no configuration options")
    return set_event_key(state, key, value, lineno)


def parse_lines(lines):
    timeline = Timeline()
    state = ParserState()
    lineno = 0
    for lineno, line in enumerate(lines, 1):
        state = parse_line(timeline, state, lineno, line)
    state = apply_settings(timeline, state)
    flush(timeline, state, lineno)
    return timeline


def parse(text):
    # Lines end at \n, \r\n or \r only; other Unicode line breaks stay inside values.
    return parse_lines(io.StringIO(text, newline=None))


def load(path, style_path=None):
    """Read a timeline from the config file at ``path``.

    A stylesheet file, when given, replaces the configured style.
    """
    timeline = parse(Path(path).read_text(encoding="utf-8"))
    if style_path:
        timeline.configure(style=Path(style_path).read_text(encoding="utf-8"))
    return timeline


def generate_from_config(path, style_path=None):
    return generate(load(path, style_path))
