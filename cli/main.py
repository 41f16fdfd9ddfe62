"""CLI entry point for the Data Allocation Categorizer.

Usage:
    allocation-categorizer process allocations.txt
    allocation-categorizer process allocations.txt --output json --save results/summary
    cat allocations.txt | allocation-categorizer process
    allocation-categorizer count allocations.txt
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from allocation_categorizer.aggregator import summarize
from allocation_categorizer.core.config import AppConfig, get_config
from allocation_categorizer.core.exceptions import (
    CategorizerError,
    InputReadError,
    ValidationError,
)
from allocation_categorizer.core.types import OutputFormat
from allocation_categorizer.output.formatters import get_formatter
from allocation_categorizer.parser import count_records

# Initialize app
app = typer.Typer(
    name="allocation-categorizer",
    help="Parse pasted allocation records and summarize them by size",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def read_input(source: Optional[Path]) -> str:
    """Read raw text from ``source``, or stdin when it is None or ``-``."""
    if source is None or str(source) == "-":
        return sys.stdin.read()

    try:
        return source.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise InputReadError(str(source), "file not found")
    except IsADirectoryError:
        raise InputReadError(str(source), "is a directory")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(source), str(e))


def resolve_output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.lower())
    except ValueError:
        raise ValidationError(
            "output", value, f"expected one of: {', '.join(f.value for f in OutputFormat)}"
        )


def load_settings(config: Optional[Path]) -> AppConfig:
    if config:
        return AppConfig.from_yaml(config)
    return get_config()


@app.command()
def process(
    input_file: Optional[Path] = typer.Argument(
        None, help="File with one record per line (stdin if omitted or '-')"
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output format: table, json, csv",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to YAML settings file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Parse records and print the allocation summary.

    Examples:
        allocation-categorizer process allocations.txt
        allocation-categorizer process allocations.txt --output csv
    """
    setup_logging(verbose)

    try:
        settings = load_settings(config)
        output_format = resolve_output_format(output or settings.default_output)
        raw = read_input(input_file)
    except CategorizerError as e:
        console.print(f"[red]Error: {e.message}[/]", soft_wrap=True)
        raise typer.Exit(1)

    summary = summarize(raw)
    formatter = get_formatter(
        output_format,
        decimals=settings.percentage_decimals,
        use_rich=console.is_terminal,
    )

    # Piped json/csv output must stay free of rich markup
    typer.echo(formatter.format(summary).rstrip("\n"))

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(output_format.file_suffix)
        formatter.format_to_file(summary, str(save_path))
        console.print(f"[green]Saved to {save_path}[/]")


@app.command()
def count(
    input_file: Optional[Path] = typer.Argument(
        None, help="File with one record per line (stdin if omitted or '-')"
    ),
) -> None:
    """Print the number of non-blank lines detected in the input."""
    try:
        raw = read_input(input_file)
    except CategorizerError as e:
        console.print(f"[red]Error: {e.message}[/]", soft_wrap=True)
        raise typer.Exit(1)

    console.print(f"{count_records(raw)} lines detected")


@app.command()
def version() -> None:
    """Show version information."""
    from allocation_categorizer import __version__
    console.print(f"Data Allocation Categorizer v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
