"""Fetch logo and background images and encode them as data URIs."""

import base64
import concurrent.futures
import http.client
import mimetypes
import urllib.error
import urllib.request
from collections.abc import Callable
from pathlib import Path

import sentry_sdk
import structlog

from moverchart.config import settings
from moverchart.errors import AssetError
from moverchart.logging import configure_structlog
from moverchart.models import AssetBundle, Page

configure_structlog()
logger = structlog.get_logger()

ImageResolver = Callable[[str | None], str | None]

USER_AGENT = "moverchart/1.0"


def _fetch_url(url: str, timeout: float) -> tuple[bytes, str | None]:
    try:
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        with urllib.request.urlopen(req, timeout=timeout) as response:
            content_type = response.headers.get_content_type()
            return response.read(), content_type
    except urllib.error.HTTPError as e:
        raise AssetError(f"HTTP Error: {e.code} - {e.reason}") from e
    except urllib.error.URLError as e:
        raise AssetError(f"URL Error: {e.reason}") from e
    except TimeoutError as e:
        raise AssetError("Timed out") from e
    except OSError as e:
        raise AssetError(f"Connection Error: {e}") from e
    except (ValueError, http.client.HTTPException) as e:
        raise AssetError(f"Bad response or URL: {e}") from e


def _read_file(path: str) -> tuple[bytes, str | None]:
    try:
        return Path(path).expanduser().read_bytes(), None
    except OSError as e:
        raise AssetError(f"Cannot read {path}: {e.strerror}") from e
    except ValueError as e:
        raise AssetError(f"Cannot read {path!r}: {e}") from e


def encode_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def load_image(
    ref: str, timeout: float | None = None, allow_files: bool = False
) -> str:
    """
    Load an image reference into a data URI.

    Args:
        ref: http(s) URL, file path, or an existing data URI (returned as-is)
        timeout: Network timeout in seconds; defaults to settings.asset_timeout
        allow_files: Read local paths. Only operator-supplied references
            (the background) may do this; logos come from input documents.

    Raises:
        AssetError: if the image cannot be loaded
    """
    if ref.startswith("data:"):
        return ref

    if ref.startswith(("http://", "https://")):
        data, mime_type = _fetch_url(ref, timeout or settings.asset_timeout)
    elif allow_files:
        data, mime_type = _read_file(ref)
    else:
        raise AssetError("Not an image URL")

    if not data:
        raise AssetError("Empty image")

    if not mime_type or not mime_type.startswith("image/"):
        guessed, _ = mimetypes.guess_type(ref.split("?", 1)[0])
        mime_type = guessed or "application/octet-stream"
    return encode_data_uri(data, mime_type)


def resolve_image(ref: str | None, allow_files: bool = False) -> str | None:
    """
    🖼️ Resolve an image reference, returning None instead of raising.

    An empty reference or any load failure yields None so the caller can draw
    its fallback.
    """
    if not ref or not ref.strip():
        return None

    try:
        return load_image(ref.strip(), allow_files=allow_files)
    except AssetError as e:
        logger.warning("Image could not be resolved", ref=ref[:80], error=str(e))
        sentry_sdk.add_breadcrumb(
            category="assets",
            message="Image resolution failed",
            level="warning",
            data={"ref": ref[:80], "error": str(e)},
        )
        return None


def resolve_background(ref: str | None) -> str | None:
    """Resolve the page background, which may also be a local file."""
    return resolve_image(ref, allow_files=True)


def resolve_page_assets(
    page: Page,
    background_ref: str | None = None,
    resolver: ImageResolver = resolve_image,
    workers: int | None = None,
    background_resolver: ImageResolver = resolve_background,
) -> AssetBundle:
    """
    Resolve every logo of a page in parallel, plus the background.

    The bundle is complete before it is returned, so composition never waits
    on the network.
    """
    refs = [record.logo_ref for record in page.records]
    max_workers = min(workers or settings.asset_workers, len(refs))

    logger.info("Resolving page assets", page=page.number, logos=len(refs))
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        logos = tuple(executor.map(resolver, refs))

    background = background_resolver(background_ref) if background_ref else None
    logger.info(
        "Page assets resolved",
        page=page.number,
        resolved=sum(1 for logo in logos if logo),
        background=background is not None,
    )
    return AssetBundle(logos=logos, background=background)
