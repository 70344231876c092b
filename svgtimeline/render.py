import svgwrite
from svgwrite.base import BaseElement

from . import serializer
from .assets import add_shared_defs
from .geometry import resolve
from .layout import TICK_FONT_SIZE, layout_axis, layout_events, layout_ticks

FONT_FAMILY = "monospace"


class Stylesheet(BaseElement):
    """A ``<style>`` element carrying the stylesheet as plain text."""

    elementname = "style"

    def __init__(self, content, **extra):
        super().__init__(**extra)
        self.content = content

    def get_xml(self):
        xml = super().get_xml()
        xml.text = self.content
        return xml


def draw_event(svg, shape):
    group = svg.g(id=shape.id, class_=shape.css_class)
    if shape.title:
        group.set_desc(title=shape.title)

    group.add(svg.rect(
        insert=(shape.x, shape.y),
        size=(shape.width, shape.height),
        stroke_dasharray=shape.dasharray))

    label = shape.label
    if label is not None:
        group.add(svg.text(
            label.text,
            insert=(label.x, label.y),
            font_family=FONT_FAMILY,
            font_size=label.font_size,
            dominant_baseline="middle",
            text_anchor="middle"))
    return group


def draw_ticks(svg, ticks):
    group = svg.g(class_="tl-ticks")
    for tick in ticks:
        group.add(svg.line(start=(tick.x, tick.y1), end=(tick.x, tick.y2)))
        group.add(svg.text(
            tick.label,
            insert=(tick.x, tick.label_y),
            font_family=FONT_FAMILY,
            font_size=TICK_FONT_SIZE,
            text_anchor="middle"))
    return group


def render(timeline, config=None):
    """Validate ``timeline`` and build its drawing.

    ``config`` defaults to the timeline's own configuration.
    """
    config = config or timeline.config
    geometry = resolve(timeline, config)

    svg = svgwrite.Drawing(
        size=(geometry.width, geometry.height),
        viewBox="0 0 %d %d" % (geometry.width, geometry.height),
        preserveAspectRatio="xMinYMin meet",
        id=config.id,
        debug=False)

    add_shared_defs(svg)
    if config.style:
        svg.defs.add(Stylesheet(config.style, factory=svg, type="text/css"))

    svg.add(svg.rect(insert=(0, 0), size=(geometry.width, geometry.height),
                     class_="tl-bg", fill="none"))

    for shape in layout_events(timeline, geometry, config):
        svg.add(draw_event(svg, shape))

    axis = layout_axis(geometry)
    svg.add(svg.line(start=(axis.x1, axis.y), end=(axis.x2, axis.y), class_="tl-axis"))

    svg.add(draw_ticks(svg, layout_ticks(geometry, config)))
    return svg


def generate(timeline, config=None):
    """Return the SVG document for ``timeline`` as text."""
    return serializer.tostring(render(timeline, config))
