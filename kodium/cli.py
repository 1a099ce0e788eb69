"""Command line entry point for publishing the Kodium website."""

import shutil
import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from .config import Config, load_config
from .content import FrontMatterError
from .ingest import ContentError, load_context
from .publisher import PublishResult, publish

console = Console()
app = typer.Typer(help="Kodium static website publisher.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file or project directory."),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Override the configured output directory."),
]


@app.command()
def build(
    config_path: ConfigPathOption = "kodium.yml",
    output: OutputOption = None,
) -> None:
    """Render every page of the site into the output directory."""
    config = _load(config_path)
    if output is not None:
        config.output_dir = output.resolve()

    start = time.perf_counter()
    try:
        context = load_context(config)
    except (FrontMatterError, ContentError) as error:
        console.print(f"[bold red]Content error[/]: {error}")
        raise typer.Exit(code=1) from error

    try:
        result = publish(context, config)
    except ValueError as error:
        console.print(f"[bold red]Publishing failed[/]: {error}")
        raise typer.Exit(code=1) from error

    _print_publish_summary(result, config, time.perf_counter() - start)


@app.command()
def clean(config_path: ConfigPathOption = "kodium.yml") -> None:
    """Remove the generated site."""
    config = _load(config_path)
    if config.output_dir.exists():
        shutil.rmtree(config.output_dir)
        console.print(f"[bold green]Removed[/]: {_display_path(config.output_dir)}")
    else:
        console.print(f"[bold yellow]Skipping[/]: {_display_path(config.output_dir)} not found")


def _print_publish_summary(result: PublishResult, config: Config, duration: float) -> None:
    console.print(
        "[bold green]Pages[/]: "
        f"{len(result.pages)} written to {_display_path(config.output_dir)}"
    )
    if result.skipped:
        console.print(
            "[bold yellow]Skipped[/]: "
            f"{', '.join(result.skipped)} (no content to show)"
        )
    if result.resources:
        names = ", ".join(path.name for path in result.resources)
        console.print(f"[bold green]Resources[/]: {names}")
    if result.feed is not None:
        console.print(f"[bold green]Feed[/]: {_display_path(result.feed)}")
    if result.sitemap is not None:
        console.print(f"[bold green]Sitemap[/]: {_display_path(result.sitemap)}")
    console.print(f"[bold blue]Done[/]: {result.total_files} file(s) in {duration:.2f}s")


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()
