"""Showcase CLI - build a randomized project gallery."""

import asyncio
import json
import random
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import Settings, settings
from .exceptions import ShowcaseError
from .gallery import GalleryAssembler, GalleryPage
from .gatherers import EXTRACTORS, DocumentFetcher, Host, Project, upgrade_images
from .render import ProjectRenderer, ProjectTemplate
from .utils.console import console
from .utils.logging import get_logger, setup_logging
from .validation.models import SourceUsernameInput

logger = get_logger(__name__)


class Source(str, Enum):
    """Source names accepted on the command line."""

    github = "github"
    cults3d = "cults3d"
    boardgamegeek = "boardgamegeek"


def _validate_input(model_class: type, **kwargs: Any) -> None:
    """Validate input using Pydantic model, exit on validation error.

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


app = typer.Typer(
    name="showcase",
    help="Project gallery builder - collect public projects into one randomized page",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Showcase[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show debug logging on the console"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write full logs to this file"),
    ] = None,
) -> None:
    """Showcase - one gallery for everything you've made."""
    setup_logging(
        level="DEBUG",
        log_file=log_file,
        console_level="DEBUG" if debug else "WARNING",
    )


def _resolve_settings(
    github_user: str | None, cults3d_user: str | None, bgg_user: str | None
) -> Settings:
    """Apply validated command-line usernames over the configured ones."""
    overrides: dict[str, str] = {}
    for field, value in (
        ("github_username", github_user),
        ("cults3d_username", cults3d_user),
        ("bgg_username", bgg_user),
    ):
        if value:
            _validate_input(SourceUsernameInput, username=value)
            overrides[field] = value
    return settings.model_copy(update=overrides) if overrides else settings


async def _assemble(
    config: Settings, page: GalleryPage, renderer: ProjectRenderer, seed: int | None
) -> None:
    async with DocumentFetcher(
        timeout=config.request_timeout, user_agent=config.user_agent
    ) as fetcher:
        assembler = GalleryAssembler(fetcher, renderer, config, random.Random(seed))
        try:
            await assembler.assemble(page.container)
        finally:
            # Report the sources that finished before any failure
            _print_summary(assembler)


def _print_summary(assembler: GalleryAssembler) -> None:
    table = Table(title="Gallery")
    table.add_column("Source")
    table.add_column("Projects", justify="right")
    for host in Host:
        projects = assembler.results.get(host)
        table.add_row(host.value, str(len(projects)) if projects is not None else "-")
    console.print(table)


@app.command()
def build(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output HTML file (default: dist/index.html)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducible card order"),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option("--template", "-t", help="Card template file"),
    ] = None,
    github_user: Annotated[str | None, typer.Option("--github", help="GitHub username")] = None,
    cults3d_user: Annotated[
        str | None, typer.Option("--cults3d", help="Cults3D username")
    ] = None,
    bgg_user: Annotated[
        str | None, typer.Option("--bgg", help="BoardGameGeek username")
    ] = None,
) -> None:
    """Build the gallery page from GitHub, BoardGameGeek and Cults3D."""
    config = _resolve_settings(github_user, cults3d_user, bgg_user)
    output_file = output or config.output_file

    try:
        renderer = ProjectRenderer(
            ProjectTemplate.load(template or config.template_path),
            placeholder_image=config.placeholder_image,
        )
        page = GalleryPage()
    except ShowcaseError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    _print_panel("Building project gallery")
    failed = False
    try:
        with console.status("Loading projects..."):
            asyncio.run(_assemble(config, page, renderer, seed))
    except ShowcaseError as e:
        logger.error("Gallery assembly stopped: %s", e)
        console.print(f"[red]Gallery assembly stopped: {escape(str(e))}[/red]")
        failed = True

    page.write(output_file)
    console.print(f"  Saved to: {output_file}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def scrape(
    source: Annotated[Source, typer.Argument(help="Source site to extract")],
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read the page from a local file instead"),
    ] = None,
    details: Annotated[
        bool,
        typer.Option(
            "--details/--no-details",
            help="boardgamegeek: fetch each game's detail document to upgrade its image",
        ),
    ] = True,
) -> None:
    """Extract projects from one source and print them as JSON.

    Games are upgraded to their full-size image as in 'build', which needs
    one request per game even with --file; pass --no-details to skip it.
    """
    host = Host(source.value)
    location = {
        Host.GITHUB: settings.github_source,
        Host.CULTS3D: settings.cults3d_source,
        Host.BOARDGAMEGEEK: settings.bgg_source,
    }[host]

    if file is not None:
        try:
            location = file.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot read {file}: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)

    async def _scrape() -> list[Project]:
        async with DocumentFetcher(
            timeout=settings.request_timeout, user_agent=settings.user_agent
        ) as fetcher:
            projects = EXTRACTORS[host]().extract(await fetcher.fetch(location))
            if host is Host.BOARDGAMEGEEK and details:
                await upgrade_images(fetcher, projects, settings.bgg_detail_source)
            return projects

    try:
        projects = asyncio.run(_scrape())
    except ShowcaseError as e:
        logger.error("Scrape of %s failed: %s", host.value, e)
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print_json(json.dumps([project.to_dict() for project in projects]))


if __name__ == "__main__":
    app()
