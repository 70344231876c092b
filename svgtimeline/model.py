import enum
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from .assets import DEFAULT_STYLE


class EventKind(enum.Enum):
    TASK = "task"  # drawn inside its row band
    ERA = "era"  # drawn as a bracket reaching down over the rows below


@dataclass(frozen=True)
class Event:
    kind: EventKind = EventKind.TASK
    id: Optional[str] = None
    css_class: Optional[str] = None
    text: Optional[str] = None
    title: Optional[str] = None
    duration: timedelta = timedelta(0)
    start: Optional[datetime] = None

    @property
    def end(self):
        if self.start is None:
            return None
        return self.start + self.duration


@dataclass(frozen=True)
class TimelineConfig:
    id: Optional[str] = None
    width: int = 1000
    num_ticks: int = 8
    tick_height: int = 5
    margin_top: int = 15
    margin_right: int = 30
    margin_bottom: int = 15
    margin_left: int = 10
    style: str = DEFAULT_STYLE

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError("width must be positive, got %d" % self.width)
        if self.num_ticks < 0:
            raise ValueError("num_ticks cannot be negative, got %d" % self.num_ticks)
        if self.tick_height < 0:
            raise ValueError("tick_height cannot be negative, got %d" % self.tick_height)
        if self.width <= self.margin_left + self.margin_right:
            raise ValueError("width %d leaves no room between margin_left %d and margin_right %d"
                             % (self.width, self.margin_left, self.margin_right))

    @property
    def margins(self):
        return (self.margin_top, self.margin_right, self.margin_bottom, self.margin_left)


class Row:
    def __init__(self, height, separator_height):
        self._height = height
        self._separator_height = separator_height
        self.events = []

    @property
    def height(self):
        return self._height

    @property
    def separator_height(self):
        return self._separator_height

    def add_event(self, event):
        self.events.append(event)
        return event

    def add_task(self, duration, **fields):
        return self.add_event(Event(EventKind.TASK, duration=duration, **fields))

    def add_era(self, duration, **fields):
        return self.add_event(Event(EventKind.ERA, duration=duration, **fields))

    def total_duration(self, origin=None):
        """Extent of the row: packed durations or furthest timed end, whichever is larger."""
        total = timedelta(0)
        by_time = timedelta(0)
        for event in self.events:
            total += event.duration
            if origin is not None and event.start is not None:
                by_time = max(by_time, event.start - origin + event.duration)
        return max(total, by_time)

    def start_time(self):
        starts = [e.start for e in self.events if e.start is not None]
        return min(starts) if starts else None

    def end_time(self):
        ends = [e.end for e in self.events if e.start is not None]
        return max(ends) if ends else None


class Timeline:
    """Rows of events plus the rendering configuration.

    Rows and events are only ever appended; generation reads the timeline
    without changing it.
    """

    def __init__(self, config=None):
        self.rows = []
        self.config = config or TimelineConfig()

    def configure(self, **settings):
        self.config = replace(self.config, **settings)
        return self.config

    def add_row(self, height=30, separator_height=5):
        row = Row(height, separator_height)
        self.rows.append(row)
        return row

    def row(self, index):
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    @property
    def last_row(self):
        return self.rows[-1] if self.rows else None

    def events(self):
        for row in self.rows:
            yield from row.events

    def start_time(self):
        starts = [s for s in (r.start_time() for r in self.rows) if s is not None]
        return min(starts) if starts else None

    def end_time(self):
        ends = [e for e in (r.end_time() for r in self.rows) if e is not None]
        return max(ends) if ends else None

    def max_duration(self):
        origin = self.start_time()
        return max((r.total_duration(origin) for r in self.rows), default=timedelta(0))

    def total_row_height(self):
        return sum(r.height + r.separator_height for r in self.rows)
