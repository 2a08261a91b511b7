"""Command-line interface for codetally"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import __version__
from .config import load_config
from .core import CodebaseAnalyzer
from .exceptions import CodeTallyError
from .formatters import get_formatter
from .logging_config import setup_logging

app = typer.Typer(
    name="codetally",
    help="codetally - source line counts and project dependencies per file",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

DEFAULT_INPUT_DIR = Path("..") / "CodeExamples" / "src" / "main" / "java"


@app.command()
def main(
    input_dir: Path = typer.Option(
        DEFAULT_INPUT_DIR,
        "--input-dir",
        "-i",
        help="Source root; its first-level directories are the projects",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table (default), json, csv",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the formatted result to this file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    no_enhanced: bool = typer.Option(
        False,
        "--no-enhanced",
        help="Skip the count without getters and block comments",
    ),
    keep_accessors: bool = typer.Option(
        False,
        "--keep-accessors",
        help="Count trivial getters/setters in the enhanced count",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob pattern of files to skip (repeatable)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Count source lines and resolve project dependencies of every file.

    [bold cyan]Examples:[/bold cyan]

      codetally -i src/main/java

      codetally -i src/main/java --format json | jq .

      codetally -i src/main/java -x "*/generated/*" -o report.csv -f csv
    """
    if version:
        console.print(f"[bold cyan]codetally[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    try:
        formatter = get_formatter(fmt)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    overrides = {"verbose": verbose, "quiet": quiet}
    if no_enhanced:
        overrides["enhanced"] = False
    if keep_accessors:
        overrides["exclude_accessors"] = False
    if exclude:
        overrides["exclude_patterns"] = list(exclude)

    try:
        settings = load_config(config_file=config, **overrides)
    except CodeTallyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
        log_file=str(log_file) if log_file else None,
    )
    logger.debug(f"Loaded settings: {settings}")

    try:
        result = CodebaseAnalyzer(input_dir, config=settings).analyze()

        if output is not None:
            output.write_text(formatter.format(result), encoding="utf-8")
            if fmt == "table":
                console.print(f"[green]Result written to[/green] {output}")
        else:
            formatter.render(result)

    except CodeTallyError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
