"""
CLI entry point: one-shot preview of the fuzzy filename typeahead.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from . import fuzzy
from .config import APP_NAME, VERSION
from .filename_prompt import ROW_PADDING
from .pattern_mode import PROMPT_GLYPH, pluralize
from .render import highlight_fuzzy, trim_and_format_path
from .terminal import get_terminal_width
from .types import ProjectConfig, SearchSource

app = typer.Typer(
    name=APP_NAME,
    help="Fuzzy-filter project file paths the way the watch typeahead does",
    no_args_is_help=True,
)

console = Console(highlight=False)


def discover_files(root: str, show_hidden: bool = False) -> list[str]:
    """Absolute paths of all files under ``root``, in a stable order."""
    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        if not show_hidden:
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            filenames = [name for name in filenames if not name.startswith(".")]
        dirnames.sort(key=str.lower)
        for filename in sorted(filenames, key=str.lower):
            files.append(os.path.join(dirpath, filename))
    return files


@app.command()
def search(
    root: str = typer.Argument(..., help="Project root to search"),
    pattern: str = typer.Argument("", help="Fuzzy filename pattern"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Terminal columns (default: detected)"),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum rows to print"),
    hidden: bool = typer.Option(False, "--hidden", help="Include dot files and directories"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the ranked, highlighted files matching PATTERN under ROOT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    root_dir = os.path.abspath(root)
    if not os.path.isdir(root_dir):
        typer.echo(f"Not a directory: {root}", err=True)
        raise typer.Exit(1)

    if not pattern:
        console.print("[italic yellow]Start typing to filter by a filename regex pattern.[/italic yellow]")
        return

    source = SearchSource(config=ProjectConfig(root_dir=root_dir), test_paths=discover_files(root_dir, hidden))
    matched = fuzzy.match_sources([source], pattern)
    total = len(matched)
    if not total:
        console.print(f"Pattern matches no {pluralize('file', 0)}")
        return

    columns = width if width is not None else get_terminal_width()
    console.print(f"Pattern matches {total} {pluralize('file', total)}")
    for item in matched[:max(0, limit)]:
        file_path = trim_and_format_path(ROW_PADDING, item.config, item.path, columns)
        row = highlight_fuzzy(item.path, file_path, item.config.base_dir, item.matches)
        console.print(Text.assemble(f" {PROMPT_GLYPH} ", Text.from_ansi(row)), soft_wrap=True)
    if total > limit:
        console.print(f"[dim]   ...and {total - limit} more {pluralize('file', total - limit)}[/dim]")


@app.command()
def version() -> None:
    """Show the version."""
    console.print(f"{APP_NAME} {VERSION}")


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
