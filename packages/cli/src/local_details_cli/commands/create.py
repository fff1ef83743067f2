"""Interactive form command.

Commands:
    create   Prompt for each field, then print (and optionally save) details.json
"""

from enum import Enum
from typing import Optional

import typer

from local_details_common import OutputWriteError, get_settings

from local_details_cli.output import emit
from local_details_cli.pipeline import collect_details


class GenreMode(str, Enum):
    """How the genre field is prompted.

    - text: one comma-separated answer, free text
    - enum: multi-select over the built-in genre list
    """

    text = "text"
    enum = "enum"


def create(
    genre_mode: Optional[GenreMode] = typer.Option(
        None,
        "--genre-mode",
        "-g",
        help="Genre prompt style (default: GENRE_MODE setting, 'text')",
        case_sensitive=False,
    ),
):
    """Fill in publication details interactively.

    Cancelling a prompt (Ctrl-C or end of input) keeps that field's default.

    Examples:

        local-details create

        local-details create --genre-mode enum
    """
    settings = get_settings()
    mode = genre_mode.value if genre_mode else settings.genre_mode

    details = collect_details(genre_mode=mode, editor_cmd=settings.editor)

    try:
        emit(details, filename=settings.details_filename)
    except OutputWriteError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
