"""Placement of events, axis and ticks in document coordinates."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .durations import format_duration
from .geometry import TICK_LABEL_MARGIN
from .model import EventKind

logger = logging.getLogger(__name__)

# Approximate glyph width of the monospace label font, relative to its size.
TEXT_WIDTH_FACTOR = 0.7
# Labels smaller than this are not drawn at all.
MIN_FONT_SIZE = 3
TICK_FONT_SIZE = 12
TICK_LABEL_DIGITS = 2


@dataclass(frozen=True)
class Label:
    text: str
    x: float
    y: float
    font_size: int


@dataclass(frozen=True)
class EventShape:
    kind: EventKind
    id: Optional[str]
    css_class: str
    title: Optional[str]
    x: float
    y: int
    width: float
    height: int
    dasharray: Optional[str] = None
    label: Optional[Label] = None


@dataclass(frozen=True)
class Axis:
    x1: float
    x2: float
    y: int


@dataclass(frozen=True)
class Tick:
    x: float
    y1: int
    y2: int
    label: str
    label_y: int


def css_class(event):
    base = "tl-era" if event.kind is EventKind.ERA else "tl-event"
    if event.css_class:
        return base + " " + event.css_class
    return base


def label_size(text, width, row_height, kind):
    size = int(min(row_height // 2, width / (len(text) * TEXT_WIDTH_FACTOR)))
    if kind is EventKind.ERA:
        size -= 1
    return size


def layout_event(event, elapsed, y, row_height, geometry, config):
    x = geometry.x_at(elapsed)
    width = geometry.width_of(event.duration)

    if event.kind is EventKind.ERA:
        height = max(0, geometry.height - y - config.margin_bottom - 3 * config.tick_height)
        dasharray = "0,%s,%s,0" % (width, height)
        text_y = y + row_height / 3
    else:
        height = row_height
        dasharray = None
        text_y = y + row_height / 2

    label = None
    if event.text:
        size = label_size(event.text, width, row_height, event.kind)
        if size >= MIN_FONT_SIZE:
            label = Label(event.text, x + width / 2, text_y, size)
        else:
            logger.debug("label %r omitted, font size %d is too small", event.text, size)

    return EventShape(
        kind=event.kind,
        id=event.id,
        css_class=css_class(event),
        title=event.title,
        x=x,
        y=y,
        width=width,
        height=height,
        dasharray=dasharray,
        label=label,
    )


def layout_events(timeline, geometry, config):
    if geometry.max_span <= timedelta(0):
        logger.warning("timeline has no extent, rendering the axis only")
        return []

    shapes = []
    y = config.margin_top
    for row in timeline.rows:
        cursor = timedelta(0)
        for event in row.events:
            if geometry.absolute:
                elapsed = event.start - geometry.origin
            else:
                elapsed = cursor
            shapes.append(layout_event(event, elapsed, y, row.height, geometry, config))
            if not geometry.absolute:
                cursor += event.duration
        y += row.height + row.separator_height
    return shapes


def layout_axis(geometry):
    return Axis(geometry.margin_left, geometry.margin_left + geometry.content_width, geometry.axis_y)


def layout_ticks(geometry, config):
    if config.num_ticks <= 0 or geometry.max_span <= timedelta(0):
        return []

    axis_y = geometry.axis_y
    ticks = []
    for i in range(config.num_ticks + 1):
        offset = geometry.max_span * i / config.num_ticks
        if i == 0 or i == config.num_ticks:
            top = config.margin_top
        else:
            top = axis_y - config.tick_height
        ticks.append(Tick(
            x=geometry.x_at(offset),
            y1=top,
            y2=axis_y + config.tick_height,
            label=format_duration(offset, TICK_LABEL_DIGITS),
            label_y=axis_y + config.tick_height + TICK_LABEL_MARGIN,
        ))
    return ticks
