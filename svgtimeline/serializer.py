"""Write an svgwrite element tree as indented markup."""

from xml.sax.saxutils import escape as _escape

_QUOTES = {'"': "&quot;", "'": "&apos;"}


def escape(value):
    """Escape the five reserved markup characters."""
    return _escape(value, _QUOTES)


def tostring(element, indent="  "):
    lines = []
    _write(lines, element.get_xml(), 0, indent)
    return "\n".join(lines) + "\n"


def _write(lines, node, level, indent):
    pad = indent * level
    attrs = "".join(' %s="%s"' % (name, escape(value)) for name, value in node.attrib.items())
    children = list(node)

    if not children:
        if node.text:
            lines.append("%s<%s%s>%s</%s>" % (pad, node.tag, attrs, escape(node.text), node.tag))
        else:
            lines.append("%s<%s%s/>" % (pad, node.tag, attrs))
        return

    lines.append("%s<%s%s>" % (pad, node.tag, attrs))
    if node.text:
        lines.append(pad + indent + escape(node.text))
    for child in children:
        _write(lines, child, level + 1, indent)
    lines.append("%s</%s>" % (pad, node.tag))
