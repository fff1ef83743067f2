"""Output sink: render a Details document, optionally write it, always echo it."""

from pathlib import Path
from typing import Optional

import typer

from local_details_common import OutputWriteError, get_logger
from local_details_contracts import Details

from local_details_cli import prompts
from local_details_cli.prompts import answer_or_default

logger = get_logger(__name__)

DEFAULT_FILENAME = "details.json"


def render(details: Details) -> str:
    return details.to_json()


def write_details(text: str, path: Path) -> Path:
    """Create or truncate ``path`` and write ``text`` to it.

    Raises:
        OutputWriteError: If the file cannot be created or written.
    """
    try:
        # newline="" keeps the file byte-identical to what is echoed.
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        logger.error("details_write_failed", path=str(path), error=str(e))
        raise OutputWriteError(f"Could not write {path}: {e.strerror or e}") from e

    logger.info("details_written", path=str(path), size=len(text.encode("utf-8")))
    return path


def display_path(path: Path) -> str:
    """Show ``path`` relative to the working directory when it lies inside it."""
    try:
        relative = path.resolve().relative_to(Path.cwd().resolve())
    except ValueError:
        return str(path)
    return f"./{relative.as_posix()}"


def emit(
    details: Details,
    filename: str = DEFAULT_FILENAME,
    directory: Optional[Path] = None,
) -> bool:
    """Offer to write the document, then print it.

    Args:
        details: Assembled document
        filename: File created in ``directory`` on confirmation
        directory: Target directory (default: current working directory)

    Returns:
        True if the file was written.

    Raises:
        OutputWriteError: If confirmed and the write fails. Nothing is
            printed in that case.
    """
    text = render(details)
    target = (directory or Path.cwd()) / filename
    shown = display_path(target)
    written = False

    wants_file = answer_or_default(
        lambda: prompts.confirm(f"Write to file? [{shown}]", default=False),
        False,
        field="confirm_write",
    )
    if wants_file:
        write_details(text, target)
        typer.echo(f"Written to {shown}")
        written = True

    typer.echo(text)
    return written
