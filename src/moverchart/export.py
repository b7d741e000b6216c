"""Write rendered pages to disk as SVG files or a zip archive."""

import re
import zipfile
from collections.abc import Sequence
from pathlib import Path

from moverchart.logging import logger
from moverchart.models import PageDocument
from moverchart.svg import render_svg

_UNSAFE_CHARS = re.compile(r"[^\w.-]+")


def slugify(title: str) -> str:
    """Make a title safe for use in a file name; falls back to 'chart'."""
    slug = _UNSAFE_CHARS.sub("_", title.strip()).strip("_.")
    return slug or "chart"


def page_filename(title: str, number: int, suffix: str = "svg") -> str:
    """
    Name of the file for one page.

    Examples:
        page_filename("Sep 15", 2) -> "movers_Sep_15_page2.svg"
    """
    return f"movers_{slugify(title)}_page{number}.{suffix}"


def archive_filename(title: str) -> str:
    return f"movers_{slugify(title)}_all_pages.zip"


def write_pages(
    documents: Sequence[PageDocument], out_dir: Path, title: str
) -> list[Path]:
    """Write one SVG file per page into `out_dir`, creating it if needed."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for number, document in enumerate(documents, start=1):
        path = out_dir / page_filename(title, number)
        path.write_text(render_svg(document), encoding="utf-8")
        paths.append(path)
        logger.info("Wrote page number={number} path={path}", number=number, path=str(path))
    return paths


def write_archive(documents: Sequence[PageDocument], path: Path, title: str) -> Path:
    """Write all pages into a zip archive under an `svg/` folder."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for number, document in enumerate(documents, start=1):
            archive.writestr(f"svg/{page_filename(title, number)}", render_svg(document))

    logger.info(
        "Wrote archive pages={pages} path={path}", pages=len(documents), path=str(path)
    )
    return path
