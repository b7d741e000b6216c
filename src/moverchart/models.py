"""Data models for moverchart.

Everything here is frozen: a request is validated once, split into pages,
laid out and composed, and no stage mutates what the previous one produced.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    📈 One mover: a ticker with its company name, logo, driver and move.

    The driver is the one-line cause of the move; it is wrapped into several
    lines at layout time.
    """

    model_config = ConfigDict(frozen=True)

    ticker: str = Field(..., description="Stock ticker symbol (e.g., 'CHEK')")
    name: str = Field(..., description="Company name (e.g., 'Check-cap')")
    logo_ref: str | None = Field(
        None, description="Logo URL or file path (None renders the fallback badge)"
    )
    driver: str = Field(..., description="Cause of the move, free text")
    change_pct: str = Field(..., description="Signed percent change (e.g., '+27.04%')")

    @property
    def is_negative(self) -> bool:
        """True when the change is a loss; zero and unsigned values count as gains."""
        return self.change_pct.lstrip().startswith(("-", "−"))


class ChartRequest(BaseModel):
    """📋 A full input document: two title lines and the ordered movers."""

    model_config = ConfigDict(frozen=True)

    title_main: str = Field(..., min_length=1, description="Main title (e.g., date)")
    title_sub: str = Field(..., min_length=1, description="Subtitle")
    records: tuple[Record, ...] = Field(..., min_length=1)


class Page(BaseModel):
    """A contiguous slice of a request's records sharing its titles."""

    model_config = ConfigDict(frozen=True)

    title_main: str
    title_sub: str
    records: tuple[Record, ...] = Field(..., min_length=1)
    number: int = Field(..., ge=1, description="1-based page number")
    count: int = Field(..., ge=1, description="Total number of pages")


class WrappedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()
    truncated: bool = False

    @property
    def line_count(self) -> int:
        return len(self.lines)


class RowLayout(BaseModel):
    """Geometry of one table row, in page units."""

    model_config = ConfigDict(frozen=True)

    origin_y: float
    height: float
    driver_line_count: int
    driver: WrappedText

    @property
    def center_y(self) -> float:
        return self.origin_y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.origin_y + self.height


class RowStack(BaseModel):
    """The contiguous rows of one page and their combined height."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[RowLayout, ...]

    @property
    def total_height(self) -> float:
        return sum(row.height for row in self.rows)


class AssetBundle(BaseModel):
    """
    🖼️ Pre-resolved images for one page.

    `logos` is aligned with the page's records; a None entry means the logo
    could not be resolved and the fallback badge is drawn instead.
    """

    model_config = ConfigDict(frozen=True)

    logos: tuple[str | None, ...] = ()
    background: str | None = None


# Draw primitives. Coordinates follow the SVG convention (y grows downward).


class Rect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: str
    rx: float | None = None
    stroke: str | None = None
    stroke_width: float | None = None


class PathShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    d: str
    fill: str


class Circle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float
    fill: str


class TextSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    dy: float = 0


class Text(BaseModel):
    """
    A text run. Either `content` or `spans` is set; spans stack lines
    below the first baseline using their `dy` offsets.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    x: float
    y: float
    content: str = ""
    spans: tuple[TextSpan, ...] = ()
    font_size: float
    fill: str
    font_weight: Literal["normal", "bold"] = "normal"
    font_family: str = "Arial, sans-serif"
    anchor: Literal["start", "middle", "end"] = "start"
    dominant_baseline: str | None = None


class Image(BaseModel):
    """An embedded image, optionally clipped to a circle."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    href: str
    x: float
    y: float
    width: float
    height: float
    preserve_aspect_ratio: str = "xMidYMid slice"
    clip_id: str | None = None
    clip_circle: Circle | None = None


class Group(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    children: tuple["Primitive", ...] = ()


Primitive = Annotated[
    Union[Rect, PathShape, Circle, Text, Image, Group],
    Field(discriminator="kind"),
]

Group.model_rebuild()


class PageDocument(BaseModel):
    """The back-to-front list of primitives for one page."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    elements: tuple[Primitive, ...]

    def walk(self):
        """Yield every primitive, descending into groups in drawing order."""
        stack = list(reversed(self.elements))
        while stack:
            element = stack.pop()
            yield element
            if isinstance(element, Group):
                stack.extend(reversed(element.children))
