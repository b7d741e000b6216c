"""Row layout: wrapped driver text decides each row's height and position."""

from collections.abc import Sequence

from moverchart.config import settings
from moverchart.errors import LayoutError
from moverchart.logging import logger
from moverchart.models import Record, RowLayout, RowStack
from moverchart.text import wrap_text

PAGE_WIDTH = 1180
PAGE_HEIGHT = 2080

TABLE_WIDTH = 1040
TABLE_X = (PAGE_WIDTH - TABLE_WIDTH) / 2
TABLE_TOP = 501
HEADER_HEIGHT = 55
FIRST_ROW_Y = TABLE_TOP + HEADER_HEIGHT

BASE_ROW_HEIGHT = 142
LINE_PITCH = 41

# Rows with up to this many driver lines keep the base height
BASE_LINES = 2


def row_height(
    driver_line_count: int,
    base_row_height: float = BASE_ROW_HEIGHT,
    extra_line_pitch: float = LINE_PITCH,
) -> float:
    """Height of a row whose driver wraps to `driver_line_count` lines."""
    extra_lines = max(0, driver_line_count - BASE_LINES)
    return base_row_height + extra_lines * extra_line_pitch


def layout_rows(
    records: Sequence[Record],
    first_row_y: float = FIRST_ROW_Y,
    base_row_height: float = BASE_ROW_HEIGHT,
    extra_line_pitch: float = LINE_PITCH,
    max_line_length: int | None = None,
    max_lines: int | None = None,
    max_total_length: int | None = None,
) -> RowStack:
    """
    Stack one row per record, top to bottom, with no gap between rows.

    Wrap limits default to the configured settings.

    Raises:
        LayoutError: if `records` is empty. Pages are never empty, so this
            means a caller bypassed the paginator.
    """
    if not records:
        raise LayoutError("cannot lay out a page without records")

    if max_line_length is None:
        max_line_length = settings.wrap_max_line_length
    if max_lines is None:
        max_lines = settings.wrap_max_lines
    if max_total_length is None:
        max_total_length = settings.wrap_max_total_length

    rows = []
    origin_y = first_row_y
    for record in records:
        driver = wrap_text(record.driver, max_line_length, max_lines, max_total_length)
        height = row_height(driver.line_count, base_row_height, extra_line_pitch)
        rows.append(
            RowLayout(
                origin_y=origin_y,
                height=height,
                driver_line_count=driver.line_count,
                driver=driver,
            )
        )
        origin_y += height

    stack = RowStack(rows=tuple(rows))
    logger.debug(
        "Laid out rows count={count} total_height={total_height}",
        count=len(rows),
        total_height=stack.total_height,
    )
    return stack
