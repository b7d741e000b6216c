"""Page composition: turn a page and its row layout into draw primitives."""

from moverchart.config import settings
from moverchart.errors import LayoutError
from moverchart.layout import (
    HEADER_HEIGHT,
    LINE_PITCH,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    TABLE_TOP,
    TABLE_WIDTH,
    TABLE_X,
)
from moverchart.logging import logger
from moverchart.models import (
    AssetBundle,
    Circle,
    Group,
    Image,
    Page,
    PageDocument,
    PathShape,
    Record,
    Rect,
    RowLayout,
    RowStack,
    Text,
    TextSpan,
)
from moverchart.svg import format_number
from moverchart.text import truncate_name

BACKGROUND = "#1a1d21"
ACCENT = "#7FF9C1"
HEADER_TEXT = "#002C18"
PRIMARY_TEXT = "#111827"
SECONDARY_TEXT = "#6B7280"
ROW_FILL = "#FFFFFF"
ROW_STRIPE = "#F3F4F6"
POSITIVE = "#1FBB73"
NEGATIVE = "#FF6B6B"
FALLBACK_LOGO = "#1E90FF"
FRAME_BORDER = "#E5E7EB"
TITLE_TEXT = "#FFFFFF"
LOGO_BACKING = "#D9D9D9"

TITLE_X = 92
TITLE_MAIN_Y = 345
TITLE_SUB_Y = 455
TITLE_SIZE = 90

FRAME_RADIUS = 16
HEADER_RADIUS = 10
LAST_ROW_RADIUS = 10

TICKER_COLUMN_X = 101
DRIVER_COLUMN_X = 435
CHANGE_COLUMN_X = 1070
HEADER_BASELINE = 39

LOGO_SIZE = 96
LOGO_X = 94
TEXT_X = 205


def _title_block(page: Page) -> Group:
    return Group(
        children=(
            Text(
                x=TITLE_X,
                y=TITLE_MAIN_Y,
                content=page.title_main,
                font_size=TITLE_SIZE,
                font_weight="bold",
                fill=TITLE_TEXT,
            ),
            Text(
                x=TITLE_X,
                y=TITLE_SUB_Y,
                content=page.title_sub,
                font_size=TITLE_SIZE,
                font_weight="bold",
                fill=ACCENT,
            ),
        )
    )


def _header() -> list:
    baseline = TABLE_TOP + HEADER_BASELINE
    label = dict(y=baseline, font_size=32, font_weight="bold", fill=HEADER_TEXT)
    return [
        Rect(
            x=TABLE_X,
            y=TABLE_TOP,
            width=TABLE_WIDTH,
            height=HEADER_HEIGHT,
            fill=ACCENT,
            rx=HEADER_RADIUS,
        ),
        Text(x=TICKER_COLUMN_X, content="Ticker", **label),
        Text(x=DRIVER_COLUMN_X, content="Driver", **label),
        Text(x=CHANGE_COLUMN_X, content="Intraday %", anchor="end", **label),
    ]


def rounded_bottom_path(x: float, y: float, w: float, h: float, r: float) -> str:
    """Outline of a rectangle whose two bottom corners are rounded by `r`."""
    n = format_number
    return (
        f"M {n(x)} {n(y)} H {n(x + w)} V {n(y + h - r)} "
        f"Q {n(x + w)} {n(y + h)} {n(x + w - r)} {n(y + h)} "
        f"H {n(x + r)} "
        f"Q {n(x)} {n(y + h)} {n(x)} {n(y + h - r)} "
        f"V {n(y)} Z"
    )


def _row_background(index: int, row: RowLayout, is_last: bool):
    fill = ROW_FILL if index % 2 == 0 else ROW_STRIPE
    if is_last:
        d = rounded_bottom_path(
            TABLE_X, row.origin_y, TABLE_WIDTH, row.height, LAST_ROW_RADIUS
        )
        return PathShape(d=d, fill=fill)
    return Rect(x=TABLE_X, y=row.origin_y, width=TABLE_WIDTH, height=row.height, fill=fill)


def _logo_badge(index: int, record: Record, row: RowLayout, logo: str | None) -> list:
    radius = LOGO_SIZE / 2
    cx = LOGO_X + radius
    cy = row.center_y

    if logo:
        clip = Circle(cx=cx, cy=cy, r=radius, fill="none")
        return [
            Circle(cx=cx, cy=cy, r=radius, fill=LOGO_BACKING),
            Image(
                href=logo,
                x=LOGO_X,
                y=cy - radius,
                width=LOGO_SIZE,
                height=LOGO_SIZE,
                clip_id=f"logoClip{index}",
                clip_circle=clip,
            ),
        ]

    return [
        Circle(cx=cx, cy=cy, r=radius, fill=FALLBACK_LOGO),
        Text(
            x=cx,
            y=cy,
            content=record.ticker,
            font_size=28,
            font_weight="bold",
            fill=TITLE_TEXT,
            anchor="middle",
            dominant_baseline="middle",
        ),
    ]


def driver_start_y(ticker_y: float, name_y: float, line_count: int) -> float:
    """First driver baseline, centering the block between ticker and name."""
    return (ticker_y + name_y) / 2 - (line_count - 1) * LINE_PITCH / 2


def _row_content(index: int, record: Record, row: RowLayout, logo: str | None) -> list:
    center = row.center_y
    ticker_y = center - 7
    name_y = center + 29

    elements = _logo_badge(index, record, row, logo)
    elements.append(
        Text(
            x=TEXT_X,
            y=ticker_y,
            content=record.ticker,
            font_size=32,
            font_weight="bold",
            fill=PRIMARY_TEXT,
        )
    )
    elements.append(
        Text(
            x=TEXT_X,
            y=name_y,
            content=truncate_name(record.name, settings.name_max_length),
            font_size=28,
            fill=SECONDARY_TEXT,
        )
    )

    lines = row.driver.lines
    elements.append(
        Text(
            x=DRIVER_COLUMN_X,
            y=driver_start_y(ticker_y, name_y, len(lines)),
            spans=tuple(
                TextSpan(text=line, x=DRIVER_COLUMN_X, dy=0 if i == 0 else LINE_PITCH)
                for i, line in enumerate(lines)
            ),
            font_size=31,
            fill=PRIMARY_TEXT,
        )
    )
    elements.append(
        Text(
            x=CHANGE_COLUMN_X,
            y=ticker_y,
            content=record.change_pct,
            font_size=32,
            font_weight="bold",
            fill=NEGATIVE if record.is_negative else POSITIVE,
            anchor="end",
        )
    )
    return elements


def compose_page(page: Page, stack: RowStack, assets: AssetBundle) -> PageDocument:
    """
    🎨 Build the full primitive tree of one page, back to front.

    Order: background fill, background art, titles, table frame, header bar,
    striped row backgrounds, then each row's badge and text.

    Args:
        page: The page to draw
        stack: Row geometry from layout_rows() for the same records
        assets: Resolved images; `assets.logos` is empty or one entry per record

    Raises:
        LayoutError: if the row or logo counts do not match the page's records
    """
    records = page.records
    if len(stack.rows) != len(records):
        raise LayoutError(
            f"page {page.number} has {len(records)} records but {len(stack.rows)} rows"
        )
    logos = assets.logos or (None,) * len(records)
    if len(logos) != len(records):
        raise LayoutError(
            f"page {page.number} has {len(records)} records but {len(logos)} logos"
        )

    elements: list = [Rect(x=0, y=0, width=PAGE_WIDTH, height=PAGE_HEIGHT, fill=BACKGROUND)]
    if assets.background:
        elements.append(
            Image(href=assets.background, x=0, y=0, width=PAGE_WIDTH, height=PAGE_HEIGHT)
        )
    elements.append(_title_block(page))
    elements.append(
        Rect(
            x=TABLE_X,
            y=TABLE_TOP,
            width=TABLE_WIDTH,
            height=HEADER_HEIGHT + stack.total_height,
            fill=ROW_FILL,
            rx=FRAME_RADIUS,
            stroke=FRAME_BORDER,
            stroke_width=1,
        )
    )
    elements.extend(_header())

    last = len(stack.rows) - 1
    for index, row in enumerate(stack.rows):
        elements.append(_row_background(index, row, index == last))

    for index, (record, row, logo) in enumerate(zip(records, stack.rows, logos)):
        elements.extend(_row_content(index, record, row, logo))

    logger.debug(
        "Composed page number={number} elements={elements} fallback_logos={fallbacks}",
        number=page.number,
        elements=len(elements),
        fallbacks=sum(1 for logo in logos if not logo),
    )
    return PageDocument(width=PAGE_WIDTH, height=PAGE_HEIGHT, elements=tuple(elements))
