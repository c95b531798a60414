"""Command-line interface for docfmt."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

from docfmt import __version__
from docfmt.config import get_settings
from docfmt.core.formatter import DocumentationCommentFormatter, MalformedInputError
from docfmt.formatting.ir import DisplayFormat, Run, RunKind, TypeQualification
from docfmt.symbols import (
    SemanticModel,
    SymbolDisplayRenderer,
    SymbolTableError,
    SymbolTableResolver,
    load_symbols,
)

app = typer.Typer(
    name="docfmt",
    help="Format XML documentation comments as plain text or display runs.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

RUN_STYLES: dict[RunKind, str] = {
    RunKind.TEXT: "white",
    RunKind.SPACE: "dim",
    RunKind.LINE_BREAK: "dim",
    RunKind.KEYWORD: "blue",
    RunKind.PUNCTUATION: "bright_black",
    RunKind.NAMESPACE_NAME: "cyan",
    RunKind.TYPE_NAME: "green",
    RunKind.MEMBER_NAME: "yellow",
    RunKind.PARAMETER_NAME: "magenta",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"docfmt v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    rich_handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(log_level)

    logger = logging.getLogger("docfmt")
    logger.handlers.clear()
    logger.addHandler(rich_handler)
    logger.setLevel(log_level)


def read_input(path: Optional[Path]) -> str:
    """Read comment text from ``path``, or stdin if None."""
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def render_runs(runs: list[Run]) -> Text:
    """One line per run: its kind, then its text, coloured by kind."""
    output = Text()
    for run in runs:
        style = RUN_STYLES.get(run.kind, "white")
        output.append(f"{run.kind.value:<15}", style="bold " + style)
        output.append(repr(run.text), style=style)
        output.append("\n")
    return output


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="File holding the comment XML (default: read stdin)",
        exists=True,
        dir_okay=False,
    ),
    symbols: Optional[Path] = typer.Option(
        None,
        "--symbols",
        "-s",
        help="JSON symbol table used to resolve <see cref=...> references",
    ),
    runs: bool = typer.Option(
        False,
        "--runs",
        "-r",
        help="Print the typed display runs instead of plain text",
    ),
    position: int = typer.Option(
        0,
        "--position",
        "-p",
        min=0,
        help="Position used for minimal qualification (with --runs)",
    ),
    qualification: Optional[TypeQualification] = typer.Option(
        None,
        "--qualification",
        "-q",
        help="How much of a resolved symbol's name to show",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Format a documentation comment.

    Examples:

        docfmt summary.xml

        echo 'See <see cref="T:My.Widget"/>.' | docfmt --symbols symbols.json

        docfmt summary.xml --symbols symbols.json --runs --position 120
    """
    setup_logging(verbose)
    settings = get_settings()

    symbols_path = symbols or settings.symbols_path
    semantic_model: Optional[SemanticModel] = None

    try:
        if symbols_path is not None:
            semantic_model = load_symbols(symbols_path)

        formatter = DocumentationCommentFormatter(
            resolver=SymbolTableResolver(),
            renderer=SymbolDisplayRenderer(),
            display_format=DisplayFormat(
                qualification=qualification or settings.qualification
            ),
        )
        raw = read_input(path)

        if runs:
            result = formatter.format_to_runs(raw, semantic_model, position)
            console.print(render_runs(result or []), end="", soft_wrap=True)
        else:
            compilation = semantic_model.compilation if semantic_model else None
            text = formatter.format_to_string(raw, compilation)
            console.print(text, markup=False, highlight=False, soft_wrap=True)
    except (MalformedInputError, SymbolTableError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
