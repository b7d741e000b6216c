import json
from pathlib import Path

import sentry_sdk
import typer

from moverchart.assets import resolve_background, resolve_image
from moverchart.config import settings
from moverchart.errors import InputError
from moverchart.example import EXAMPLE_REQUEST
from moverchart.export import archive_filename, write_archive, write_pages
from moverchart.logging import logger
from moverchart.models import ChartRequest
from moverchart.pipeline import offline_resolver, render_request
from moverchart.svg import render_svg
from moverchart.validation import load_request
from moverchart.version import get_version_info

app = typer.Typer(add_completion=False, help="Render market movers into SVG pages.")


def _init_sentry() -> None:
    if not settings.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        integrations=[],
        attach_stacktrace=True,
    )
    logger.info(
        "Sentry initialized environment={environment} traces_sample_rate={traces_sample_rate}",
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
    )


def _load_or_exit(path: Path) -> ChartRequest:
    try:
        return load_request(path)
    except InputError as e:
        for message in e.errors:
            typer.echo(message, err=True)
        raise typer.Exit(code=1)


@app.callback()
def startup() -> None:
    _init_sentry()
    logger.debug("Starting moverchart {version}", version=get_version_info())


@app.command()
def render(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False),
    out: Path = typer.Option(Path(settings.output_dir), help="Output directory"),
    archive: bool = typer.Option(False, "--zip", help="Also write a zip of all pages"),
    page: int | None = typer.Option(
        None, min=1, help="Print only this page's SVG to stdout"
    ),
    background: str | None = typer.Option(
        settings.background_image, help="Background image URL or path"
    ),
    offline: bool = typer.Option(False, help="Skip fetching images"),
    page_capacity: int | None = typer.Option(None, min=1, help="Movers per page"),
) -> None:
    """Render an input JSON file into one SVG per page."""
    request = _load_or_exit(input_path)
    resolver = offline_resolver if offline else resolve_image
    background_resolver = offline_resolver if offline else resolve_background
    documents = render_request(
        request,
        resolver=resolver,
        background_ref=background,
        page_capacity=page_capacity,
        background_resolver=background_resolver,
    )

    if page is not None:
        if page > len(documents):
            typer.echo(f"Page {page} out of range (1-{len(documents)})", err=True)
            raise typer.Exit(code=1)
        typer.echo(render_svg(documents[page - 1]), nl=False)
        return

    paths = write_pages(documents, out, request.title_main)
    for path in paths:
        typer.echo(str(path))
    if archive:
        zip_path = out / archive_filename(request.title_main)
        typer.echo(str(write_archive(documents, zip_path, request.title_main)))


@app.command(name="validate")
def validate_command(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False),
) -> None:
    """Check an input JSON file and list every problem found."""
    request = _load_or_exit(input_path)
    typer.echo(f"OK: {len(request.records)} records")


@app.command()
def example() -> None:
    """Print the example input document."""
    typer.echo(json.dumps(EXAMPLE_REQUEST, indent=2, ensure_ascii=False))


@app.command()
def version() -> None:
    """Print version information."""
    typer.echo(get_version_info())


if __name__ == "__main__":  # pragma: no cover
    app()
