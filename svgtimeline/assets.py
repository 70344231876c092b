"""Static resources shared by every generated document."""

from pathlib import Path

DEFAULT_STYLE = Path(__file__).with_name("default.css").read_text(encoding="utf-8")

# (id, (refX, refY), (markerWidth, markerHeight), path)
MARKERS = (
    ("tl-arrow", (0, 3), (6, 6), "M 0 0 L 6 3 L 0 6 z"),
)

# (id, tile size, rotation in degrees)
HATCHES = (
    ("tl-hatch", 6, 45),
)


def add_shared_defs(svg):
    """Add the shared marker and pattern definitions to ``svg.defs``."""
    for marker_id, ref, size, outline in MARKERS:
        marker = svg.marker(insert=ref, size=size, orient="auto", id=marker_id)
        marker.add(svg.path(d=outline, class_="tl-arrow-head"))
        svg.defs.add(marker)

    for pattern_id, tile, angle in HATCHES:
        pattern = svg.pattern(size=(tile, tile), id=pattern_id,
                              patternUnits="userSpaceOnUse",
                              patternTransform="rotate(%d)" % angle)
        pattern.add(svg.line(start=(0, 0), end=(0, tile), class_="tl-hatch-line"))
        svg.defs.add(pattern)
