"""Inspect an existing details document.

Commands:
    show   Parse a details.json file and print it
"""

from enum import Enum
from pathlib import Path

import typer
from pydantic import ValidationError

from local_details_common import DocumentReadError, get_logger
from local_details_contracts import Details

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output format options."""

    summary = "summary"
    json = "json"


def read_details(path: Path) -> Details:
    """Load and validate a details document.

    Raises:
        DocumentReadError: If the file is missing, unreadable or invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentReadError(f"Could not read {path}: {e.strerror or e}") from e

    try:
        details = Details.from_json(raw)
    except ValidationError as e:
        raise DocumentReadError(
            f"{path} is not a valid details document ({e.error_count()} errors)"
        ) from e

    logger.info("details_loaded", path=str(path))
    return details


def format_summary(details: Details) -> str:
    """Format a document for reading in the terminal."""
    lines = [
        f"{'Title:':12} {details.title}",
        f"{'Author(s):':12} {details.author}",
        f"{'Artist(s):':12} {details.artist}",
        f"{'Genre(s):':12} {', '.join(details.genre)}",
        f"{'Status:':12} {details.status.label} ({details.status.value})",
        "Description:",
    ]
    lines.extend(f"  {line}" for line in details.description.splitlines())
    return "\n".join(lines)


def show(
    path: Path = typer.Argument(
        Path("details.json"),
        help="Document to read",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.summary,
        "--format",
        "-f",
        help="Output format",
    ),
):
    """Print an existing details document.

    Examples:

        local-details show

        local-details show path/to/details.json --format json
    """
    try:
        details = read_details(path)
    except DocumentReadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if format == OutputFormat.json:
        typer.echo(details.to_json())
    else:
        typer.echo(format_summary(details))
