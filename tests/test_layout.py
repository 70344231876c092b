from datetime import datetime, timedelta

import pytest

from svgtimeline import EventKind, Timeline, TimelineConfig
from svgtimeline.geometry import compute_scale, resolve
from svgtimeline.layout import label_size, layout_axis, layout_events, layout_ticks

T0 = datetime(2025, 11, 1, 12, 20, 50)


def seconds(n):
    return timedelta(seconds=n)


def shapes_of(tl, config=None):
    config = config or tl.config
    return layout_events(tl, resolve(tl, config), config)


def scenario_b():
    tl = Timeline()
    tl.add_row().add_era(seconds(10), text="262_req", css_class="ctl-request")
    row = tl.add_row()
    row.add_task(seconds(4), text="Fetch")
    row.add_task(seconds(3), text="Process")
    return tl


def test_single_task_spans_content_width():
    tl = Timeline()
    tl.add_row().add_task(seconds(10))

    (shape,) = shapes_of(tl)

    assert shape.kind is EventKind.TASK
    assert shape.css_class == "tl-event"
    assert shape.x == pytest.approx(10)
    assert shape.width == pytest.approx(960)
    assert (shape.y, shape.height) == (15, 30)
    assert shape.dasharray is None


def test_era_and_sequential_tasks():
    era, fetch, process = shapes_of(scenario_b())

    assert era.kind is EventKind.ERA
    assert era.css_class == "tl-era ctl-request"
    assert era.x == pytest.approx(10)
    assert era.width == pytest.approx(960)

    assert fetch.x == pytest.approx(10)
    assert fetch.width == pytest.approx(0.4 * 960)
    assert process.x == pytest.approx(fetch.x + fetch.width)
    assert process.width == pytest.approx(0.3 * 960)
    assert fetch.y == process.y == 15 + 30 + 5


def test_era_reaches_down_over_the_rows_below():
    tl = scenario_b()
    config = tl.config
    geo = resolve(tl, config)
    era = layout_events(tl, geo, config)[0]

    assert era.y == 15
    assert era.height == geo.height - 15 - 15 - 3 * 5
    assert era.y + era.height == geo.axis_y
    assert era.dasharray == "0,%s,%s,0" % (era.width, era.height)


def test_labels_are_centered():
    era, fetch, _ = shapes_of(scenario_b())

    assert fetch.label.x == pytest.approx(fetch.x + fetch.width / 2)
    assert fetch.label.y == pytest.approx(50 + 15)
    assert era.label.y == pytest.approx(15 + 10)
    assert fetch.label.font_size == 15
    assert era.label.font_size == 14


def test_label_size_is_limited_by_width():
    assert label_size("abcdefghij", 36.0, 30, EventKind.TASK) == 5
    assert label_size("abcdefghij", 36.0, 30, EventKind.ERA) == 4
    assert label_size("ab", 1000.0, 30, EventKind.TASK) == 15


def test_narrow_label_is_omitted():
    tl = Timeline()
    row = tl.add_row()
    row.add_task(seconds(100))
    row.add_task(timedelta(milliseconds=100), text="a label far too long", title="still here")

    shapes = shapes_of(tl)

    assert shapes[1].label is None
    assert shapes[1].title == "still here"


def test_absolute_and_sequential_placement_match():
    sequential = Timeline()
    row = sequential.add_row()
    row.add_task(seconds(4), text="a")
    row.add_task(seconds(3), text="b")

    absolute = Timeline()
    row = absolute.add_row()
    row.add_task(seconds(4), text="a", start=T0)
    row.add_task(seconds(3), text="b", start=T0 + seconds(4))

    for seq, abs_ in zip(shapes_of(sequential), shapes_of(absolute)):
        assert seq.x == pytest.approx(abs_.x)
        assert seq.width == pytest.approx(abs_.width)
        assert seq.label == abs_.label


def test_absolute_placement_ignores_row_order():
    tl = Timeline()
    row = tl.add_row()
    row.add_task(seconds(2), start=T0 + seconds(6))
    row.add_task(seconds(2), start=T0)

    late, early = shapes_of(tl)

    assert early.x == pytest.approx(10)
    assert late.x == pytest.approx(10 + 960 * 6 / 8)


def test_each_row_starts_at_zero():
    tl = Timeline()
    tl.add_row().add_task(seconds(5))
    tl.add_row(20, 0).add_task(seconds(2))
    tl.add_row().add_task(seconds(1))

    first, second, third = shapes_of(tl)

    assert first.x == second.x == third.x
    assert [s.y for s in (first, second, third)] == [15, 50, 70]
    assert second.height == 20


def test_zero_span_draws_no_events():
    tl = Timeline()
    tl.add_row().add_task(timedelta(0), text="nothing")
    config = TimelineConfig()
    geo = compute_scale(tl, config)

    assert layout_events(tl, geo, config) == []
    assert layout_ticks(geo, config) == []


def test_ticks_are_evenly_spaced_and_labeled():
    tl = Timeline()
    tl.add_row().add_task(seconds(10))
    config = TimelineConfig()
    ticks = layout_ticks(resolve(tl, config), config)

    assert [t.label for t in ticks] == [
        "0s", "1.25s", "2.5s", "3.75s", "5s", "6.25s", "7.5s", "8.75s", "10s"]
    assert [t.x for t in ticks] == pytest.approx([10 + 120 * i for i in range(9)])


def test_endpoint_ticks_run_the_full_height():
    tl = Timeline()
    tl.add_row().add_task(seconds(10))
    config = TimelineConfig(num_ticks=4)
    geo = resolve(tl, config)
    ticks = layout_ticks(geo, config)

    assert len(ticks) == 5
    assert ticks[0].y1 == ticks[-1].y1 == 15
    assert all(t.y1 == geo.axis_y - 5 for t in ticks[1:-1])
    assert all(t.y2 == geo.axis_y + 5 for t in ticks)
    assert all(t.label_y == geo.axis_y + 5 + 15 for t in ticks)


def test_no_ticks_when_disabled():
    tl = Timeline()
    tl.add_row().add_task(seconds(10))
    config = TimelineConfig(num_ticks=0)
    assert layout_ticks(resolve(tl, config), config) == []


def test_axis_spans_content_width():
    tl = Timeline()
    tl.add_row().add_task(seconds(1))
    axis = layout_axis(resolve(tl, tl.config))
    assert (axis.x1, axis.x2, axis.y) == (10, 970, 15 + 35 + 5)
