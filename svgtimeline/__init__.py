"""Render rows of timed events as an SVG timeline."""

from .assets import DEFAULT_STYLE
from .durations import format_duration, parse_duration
from .errors import (
    EmptyTimelineError,
    InconsistentTimeModeError,
    NegativeDurationError,
    NoPositiveDurationError,
    ParseError,
    TimelineError,
    ValidationError,
)
from .model import Event, EventKind, Row, Timeline, TimelineConfig
from .parser import generate_from_config, load, parse
from .render import generate, render

__all__ = [
    "DEFAULT_STYLE",
    "EmptyTimelineError",
    "Event",
    "EventKind",
    "InconsistentTimeModeError",
    "NegativeDurationError",
    "NoPositiveDurationError",
    "ParseError",
    "Row",
    "Timeline",
    "TimelineConfig",
    "TimelineError",
    "ValidationError",
    "format_duration",
    "generate",
    "generate_from_config",
    "load",
    "parse",
    "parse_duration",
    "render",
]
