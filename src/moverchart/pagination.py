"""Split a chart request into fixed-size pages."""

import math

from moverchart.config import settings
from moverchart.logging import logger
from moverchart.models import ChartRequest, Page


def page_count(record_count: int, page_capacity: int) -> int:
    return math.ceil(record_count / page_capacity)


def paginate(request: ChartRequest, page_capacity: int | None = None) -> list[Page]:
    """
    Chunk `request.records` into pages of at most `page_capacity` records.

    Order is preserved and only the last page may be short. Every page
    carries both titles of the request.

    Args:
        request: A validated request (always at least one record)
        page_capacity: Records per page; defaults to settings.page_capacity

    Returns:
        ceil(len(records) / page_capacity) pages, numbered from 1
    """
    capacity = settings.page_capacity if page_capacity is None else page_capacity
    if capacity < 1:
        raise ValueError(f"page_capacity must be at least 1, got {capacity}")

    records = request.records
    count = page_count(len(records), capacity)
    pages = [
        Page(
            title_main=request.title_main,
            title_sub=request.title_sub,
            records=records[start : start + capacity],
            number=index + 1,
            count=count,
        )
        for index, start in enumerate(range(0, len(records), capacity))
    ]
    logger.info(
        "Paginated request records={records} pages={pages} capacity={capacity}",
        records=len(records),
        pages=count,
        capacity=capacity,
    )
    return pages
