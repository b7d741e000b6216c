"""End-to-end rendering: request -> pages -> page documents."""

import sentry_sdk

from moverchart.assets import (
    ImageResolver,
    resolve_background,
    resolve_image,
    resolve_page_assets,
)
from moverchart.composer import compose_page
from moverchart.layout import layout_rows
from moverchart.logging import logger
from moverchart.models import ChartRequest, PageDocument
from moverchart.pagination import paginate


def offline_resolver(ref: str | None) -> str | None:
    """Resolver that never loads anything; every logo uses the fallback badge."""
    return None


def render_request(
    request: ChartRequest,
    resolver: ImageResolver = resolve_image,
    background_ref: str | None = None,
    page_capacity: int | None = None,
    background_resolver: ImageResolver = resolve_background,
) -> tuple[PageDocument, ...]:
    """
    📄 Render every page of a validated request.

    The background is resolved once and shared by all pages; logos are
    resolved per page before that page is composed.

    Args:
        request: Validated chart request
        resolver: Logo resolver; must return None rather than raise
        background_ref: Background image URL or path, or None for a plain fill
        page_capacity: Records per page; defaults to settings.page_capacity
        background_resolver: Resolver for `background_ref`; unlike logos it
            may read local files

    Returns:
        One PageDocument per page, in page order. A viewer's "current page"
        is an index into this tuple.
    """
    pages = paginate(request, page_capacity)
    background = background_resolver(background_ref) if background_ref else None

    documents = []
    for page in pages:
        sentry_sdk.add_breadcrumb(
            category="render",
            message="Rendering page",
            level="info",
            data={"page": page.number, "records": len(page.records)},
        )
        assets = resolve_page_assets(page, resolver=resolver)
        assets = assets.model_copy(update={"background": background})
        stack = layout_rows(page.records)
        documents.append(compose_page(page, stack, assets))

    logger.info(
        "Rendered request title={title} pages={pages}",
        title=request.title_main,
        pages=len(documents),
    )
    return tuple(documents)
