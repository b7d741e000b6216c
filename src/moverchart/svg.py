"""Serialize a PageDocument into SVG markup."""

from moverchart.models import (
    Circle,
    Group,
    Image,
    PageDocument,
    PathShape,
    Rect,
    Text,
)
from moverchart.text import escape_xml

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float) -> str:
    """
    Format a coordinate without losing precision.

    Examples:
        format_number(70.0) -> "70"
        format_number(1234567.25) -> "1234567.25"
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def _attrs(**attrs) -> str:
    """Render attributes in call order, skipping None; underscores become dashes."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, float | int):
            value = format_number(value)
        parts.append(f'{key.replace("_", "-")}="{escape_xml(str(value))}"')
    return " ".join(parts)


def _rect(rect: Rect) -> str:
    return "<rect {} />".format(
        _attrs(
            x=rect.x,
            y=rect.y,
            width=rect.width,
            height=rect.height,
            rx=rect.rx,
            fill=rect.fill,
            stroke=rect.stroke,
            stroke_width=rect.stroke_width,
        )
    )


def _circle(circle: Circle) -> str:
    return "<circle {} />".format(
        _attrs(cx=circle.cx, cy=circle.cy, r=circle.r, fill=circle.fill)
    )


def _text(text: Text) -> str:
    attrs = _attrs(
        x=text.x,
        y=text.y,
        font_family=text.font_family,
        font_size=text.font_size,
        font_weight=text.font_weight,
        fill=text.fill,
        text_anchor=text.anchor,
        dominant_baseline=text.dominant_baseline,
    )
    if text.spans:
        body = "".join(
            f"<tspan {_attrs(x=span.x, dy=span.dy)}>{escape_xml(span.text)}</tspan>"
            for span in text.spans
        )
    else:
        body = escape_xml(text.content)
    return f"<text {attrs}>{body}</text>"


def _image(image: Image) -> str:
    lines = []
    clip_path = None
    if image.clip_id and image.clip_circle:
        clip = image.clip_circle
        lines.append(
            f'<defs><clipPath id="{escape_xml(image.clip_id)}">'
            f"<circle {_attrs(cx=clip.cx, cy=clip.cy, r=clip.r)} />"
            "</clipPath></defs>"
        )
        clip_path = f"url(#{image.clip_id})"
    lines.append(
        "<image {} />".format(
            _attrs(
                x=image.x,
                y=image.y,
                width=image.width,
                height=image.height,
                href=image.href,
                preserveAspectRatio=image.preserve_aspect_ratio,
                clip_path=clip_path,
            )
        )
    )
    return "\n".join(lines)


def render_element(element) -> str:
    if isinstance(element, Rect):
        return _rect(element)
    if isinstance(element, PathShape):
        return f"<path {_attrs(d=element.d, fill=element.fill)} />"
    if isinstance(element, Circle):
        return _circle(element)
    if isinstance(element, Text):
        return _text(element)
    if isinstance(element, Image):
        return _image(element)
    if isinstance(element, Group):
        inner = "\n".join(render_element(child) for child in element.children)
        return f"<g>\n{inner}\n</g>"
    raise TypeError(f"Unsupported primitive: {type(element).__name__}")


def render_svg(document: PageDocument) -> str:
    """Return the document as a standalone SVG string."""
    body = "\n".join(render_element(element) for element in document.elements)
    return (
        f'<svg width="{document.width}" height="{document.height}" '
        f'viewBox="0 0 {document.width} {document.height}" xmlns="{SVG_NS}">\n'
        f"{body}\n</svg>\n"
    )
