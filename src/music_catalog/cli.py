"""Command line interface for music catalog."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .application.catalog_app import CatalogApplication
from .application.queries import CatalogStatisticsQuery
from .exceptions import MusicCatalogError
from .models.config import CatalogConfig, LoggingConfig, load_config, create_default_config
from .script import OperationOutcome, load_script, run_operations, validate_script_json

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(logging_config: LoggingConfig, verbose: bool = False) -> None:
    """Route library logging through rich."""
    level = logging.DEBUG if verbose else logging.getLevelName(logging_config.level.upper())
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=logging_config.rich_tracebacks)],
        force=True,
    )


def _describe(data) -> str:
    if data is None or data == {}:
        return ""
    if isinstance(data, str):
        return data
    return json.dumps(data, default=str)


def _outcome_table(outcomes: List[OperationOutcome]) -> Table:
    table = Table(title="Operations")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Operation", style="cyan")
    table.add_column("Status")
    table.add_column("Result")

    for outcome in outcomes:
        if outcome.success:
            status = "[green]ok[/green]"
            detail = escape(outcome.message or _describe(outcome.data))
        else:
            status = f"[red]{outcome.error_kind or 'failed'}[/red]"
            detail = escape(outcome.message)
        table.add_row(str(outcome.index), outcome.op, status, detail)

    return table


def _summary_panel(app: CatalogApplication) -> Panel:
    stats = app.ask(CatalogStatisticsQuery()).data
    lines = [
        f"Users: {stats['users']}   Artists: {stats['artists']}   Albums: {stats['albums']}",
        f"Songs: {stats['songs']}   Playlists: {stats['playlists']}",
        f"Song likes: {stats['total_song_likes']}   Playlist listens: {stats['total_listens']}",
        f"Most popular artist: [bold]{escape(stats['most_popular_artist'])}[/bold]",
        f"Most popular song: [bold]{escape(stats['most_popular_song'])}[/bold]",
    ]
    return Panel("\n".join(lines), title="Catalog", border_style="cyan")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Replay and inspect music-streaming catalog operations."""
    pass


@cli.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--stop-on-error',
    is_flag=True,
    help='Stop at the first operation that fails'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
def run(script: Path, config: Optional[Path], stop_on_error: bool, verbose: bool):
    """Replay the operations in SCRIPT against a fresh catalog."""
    try:
        cfg = load_config(config) if config else CatalogConfig.default()
        configure_logging(cfg.logging, verbose)

        operations = load_script(script)
        logger.debug("Loaded %d operations from %s", len(operations), script)

        app = CatalogApplication(cfg)
        outcomes = run_operations(app, operations, stop_on_error=stop_on_error)
    except MusicCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(_outcome_table(outcomes))
    console.print(_summary_panel(app))

    failed = sum(1 for outcome in outcomes if not outcome.success)
    if failed:
        console.print(f"[yellow]{failed} of {len(outcomes)} operations failed[/yellow]")
        sys.exit(1)
    console.print(f"[green]All {len(outcomes)} operations succeeded[/green]")


@cli.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(script: Path):
    """Check that SCRIPT is a well-formed operation script."""
    try:
        with open(script, 'r', encoding='utf-8') as f:
            script_data = json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"[red]JSON parsing error: {e.msg} at line {e.lineno}, column {e.colno}[/red]")
        sys.exit(1)

    errors = validate_script_json(script_data)
    if errors:
        for error in errors:
            console.print(f"[red]{escape(error)}[/red]")
        sys.exit(1)

    count = len(script_data["operations"])
    console.print(f"[green]Valid script with {count} operations[/green]")


@cli.command('init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init_config(path: Path, force: bool):
    """Write a default configuration file to PATH."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists; use --force to overwrite[/yellow]")
        sys.exit(1)
    create_default_config(path)
    console.print(f"[green]Wrote default configuration to {path}[/green]")


def main():
    cli()


if __name__ == '__main__':
    main()
