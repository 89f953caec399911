"""Command line interface for fortunes."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from fortunes.config import build_config
from fortunes.errors import FortuneError
from fortunes.runner import run


err_console = Console(stderr=True)
app = typer.Typer(help="fortunes - print a random or matching fortune")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _package_version() -> str:
    try:
        return version("fortunes")
    except PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fortunes {_package_version()}")
        raise typer.Exit()


@app.command()
def main(
    sources: List[str] = typer.Argument(..., metavar="SOURCE...", help="Fortune files or directories ('-' for stdin)."),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-m", help="Print all fortunes matching this regex."),
    insensitive: bool = typer.Option(False, "--insensitive", "-i", help="Case-insensitive pattern matching."),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Random seed (unsigned 64-bit integer)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Print a random fortune, or every fortune matching a pattern."""
    _setup_logging(verbose)
    try:
        config = build_config(sources, pattern=pattern, insensitive=insensitive, seed=seed)
        run(config)
    except FortuneError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(code=1) from exc
