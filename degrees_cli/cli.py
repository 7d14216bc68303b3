"""Typer-based CLI for degrees-of-separation queries."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__, config
from .config_manager import clear_run_config, load_config, save_run_config
from .graph import build_graph
from .ingest import clean_file, read_edges, remove_duplicates
from .paths import NodeNotFoundError, shortest_path
from .pipeline import prepare_graph, run_separation
from .sampling import choose_start

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="🔗 Degrees CLI — shortest-path degrees of separation between characters.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# ── Configuration group ──────────────────────────────────────
config_app = typer.Typer(
    help="⚙️  Configuration — run defaults stored in config.toml.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(config_app, name="config")


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Degrees CLI v{__version__}")
        raise typer.Exit()


def _configure_logging() -> None:
    package_logger = logging.getLogger("degrees_cli")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline progress to stderr."),
):
    """Degrees CLI: build a character graph from relationship records and measure separation."""
    if verbose:
        _configure_logging()


@app.command("clean")
def clean(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Edge file: one 'name, name' record per line."),
    output_path: Path = typer.Argument(..., dir_okay=False, help="Where to write the deduplicated edges."),
):
    """Remove duplicate relationships and write a cleaned edge file."""
    written = clean_file(input_path, output_path)
    typer.echo(f"Cleaned '{input_path}' -> '{output_path}'.")
    typer.echo(f"Edges: {written}")


@app.command("stats")
def stats(input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Edge file: one 'name, name' record per line.")):
    """Show node, edge, duplicate, and skipped-line counts for an edge file."""
    result = read_edges(input_path)
    unique = remove_duplicates(result.edges)
    graph = build_graph(unique)

    table = Table(title=f"📊 {escape(input_path.name)}", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(graph.node_count))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Duplicates", str(len(result.edges) - len(unique)))
    table.add_row("Skipped lines", str(result.skipped))
    console.print(table)


@app.command("run")
def run(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Edge file: one 'name, name' record per line."),
    start: Optional[str] = typer.Option(None, "--start", "-s", help="Start character (random if omitted)."),
    sample_size: Optional[int] = typer.Option(None, "--sample-size", "-n", min=1, help="Candidates sampled before picking a random start."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random start selection."),
    include_start: Optional[bool] = typer.Option(
        None,
        "--include-start/--exclude-start",
        help="Report the start character itself at distance 0.",
    ),
    cleaned: Optional[Path] = typer.Option(None, "--cleaned", "-c", dir_okay=False, help="Also write the deduplicated edges here."),
):
    """Compute degrees of separation from one character to every reachable character."""
    settings = load_config()
    if sample_size is None:
        sample_size = settings["sample_size"]
    if seed is None:
        seed = settings["seed"]
    if include_start is None:
        include_start = settings["include_start"]

    graph = prepare_graph(input_path, cleaned_path=cleaned)
    typer.echo(f"Graph loaded: {graph.node_count} nodes, {graph.edge_count} edges.")

    if start is None:
        if not len(graph):
            err_console.print("[red]❌ No characters found in input.[/red]")
            raise typer.Exit(code=1)
        start = choose_start(graph, sample_size, random.Random(seed))
        typer.echo(f"Randomly selected start character: {start}")

    try:
        report = run_separation(graph, start, include_start=include_start)
    except NodeNotFoundError as exc:
        err_console.print(f"[red]❌ {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Degrees of separation from '{escape(report.start)}'")
    table.add_column("Character", style="cyan")
    table.add_column("Degrees", justify="right", style="green")
    for name, distance in report.ranked():
        table.add_row(escape(name), str(distance))
    console.print(table)

    typer.echo(f"Reachable: {report.reachable} of {report.node_count}")
    typer.echo(f"Execution time: {report.elapsed_us} microseconds")


@app.command("path")
def path(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Edge file: one 'name, name' record per line."),
    start: str = typer.Argument(..., help="Start character."),
    target: str = typer.Argument(..., help="Target character."),
):
    """Show one shortest chain of relationships between two characters."""
    graph = prepare_graph(input_path)
    try:
        names = shortest_path(graph, start, target)
    except NodeNotFoundError as exc:
        err_console.print(f"[red]❌ {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if names is None:
        typer.echo(f"No path from '{start}' to '{target}'.")
        raise typer.Exit(code=1)

    typer.echo(" -> ".join(names))
    typer.echo(f"Degrees: {len(names) - 1}")


@config_app.command("show")
def config_show():
    """Print the effective run configuration."""
    settings = load_config()
    table = Table(title=f"⚙️  {escape(str(config.CONFIG_FILE))}", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in settings.items():
        table.add_row(key, "-" if value is None else escape(str(value)))
    console.print(table)


@config_app.command("set")
def config_set(
    sample_size: Optional[int] = typer.Option(None, "--sample-size", "-n", min=1, help="Default candidate sample size."),
    include_start: Optional[bool] = typer.Option(None, "--include-start/--exclude-start", help="Default start inclusion."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Default random seed."),
):
    """Store run defaults in config.toml."""
    if sample_size is None and include_start is None and seed is None:
        raise typer.BadParameter("Nothing to set. Pass --sample-size, --seed, or --include-start/--exclude-start.")
    section = save_run_config(sample_size=sample_size, include_start=include_start, seed=seed)
    for key, value in section.items():
        typer.echo(f"{key} = {value}")
    typer.echo(f"Saved to {config.CONFIG_FILE}")


@config_app.command("reset")
def config_reset():
    """Drop stored run defaults."""
    clear_run_config()
    typer.echo("Run configuration reset to defaults.")


if __name__ == "__main__":
    app()
