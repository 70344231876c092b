"""Validation of a timeline and the scalar geometry every drawing step shares."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .errors import (
    EmptyTimelineError,
    InconsistentTimeModeError,
    NegativeDurationError,
    NoPositiveDurationError,
)

logger = logging.getLogger(__name__)

# Space between the tick marks and the baseline of their labels.
TICK_LABEL_MARGIN = 15


@dataclass(frozen=True)
class Geometry:
    origin: Optional[datetime]
    max_span: timedelta
    scale: float  # pixels per second
    margin_left: float
    content_width: float
    content_height: int
    width: int
    height: int
    axis_y: int

    @property
    def absolute(self):
        return self.origin is not None

    def x_at(self, offset):
        return self.margin_left + self.scale * offset.total_seconds()

    def width_of(self, duration):
        return self.scale * duration.total_seconds()


def validate(timeline):
    has_time = has_no_time = False
    zones = set()
    total = timedelta(0)

    for event in timeline.events():
        if event.duration < timedelta(0):
            raise NegativeDurationError(
                "duration of events cannot be negative (%s)" % (event.id or event.text or event.duration))
        total += event.duration
        if event.start is None:
            has_no_time = True
        else:
            has_time = True
            zones.add(event.start.tzinfo is not None)

    if has_time and has_no_time:
        raise InconsistentTimeModeError(
            "when a start time is set on any event, it must be set on all of them")
    if len(zones) > 1:
        raise InconsistentTimeModeError("start times cannot mix naive and timezone-aware values")

    if not timeline.rows:
        raise EmptyTimelineError("the timeline has no rows")

    if total == timedelta(0):
        raise NoPositiveDurationError("none of the events has a positive duration")


def compute_scale(timeline, config):
    origin = timeline.start_time()
    max_span = timeline.max_duration()

    content_width = config.width - config.margin_left - config.margin_right
    content_height = timeline.total_row_height()
    height = (content_height + config.margin_top + config.margin_bottom
              + config.tick_height + TICK_LABEL_MARGIN)

    if max_span > timedelta(0):
        scale = content_width / max_span.total_seconds()
    else:
        scale = 0.0

    geometry = Geometry(
        origin=origin,
        max_span=max_span,
        scale=scale,
        margin_left=config.margin_left,
        content_width=content_width,
        content_height=content_height,
        width=config.width,
        height=height,
        axis_y=config.margin_top + content_height + config.tick_height,
    )
    logger.debug("origin=%s max_span=%s scale=%.4f px/s size=%dx%d",
                 origin, max_span, scale, geometry.width, geometry.height)
    return geometry


def resolve(timeline, config):
    validate(timeline)
    return compute_scale(timeline, config)
