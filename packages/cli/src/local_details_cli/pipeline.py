"""Prompt pipeline: ask for each field in turn and assemble a Details document.

The pipeline never aborts. A cancelled prompt leaves its field at the default
and the next prompt is shown.
"""

from typing import Optional

from local_details_common import get_logger
from local_details_contracts import Details, Genre, Status

from local_details_cli import prompts
from local_details_cli.prompts import answer_or_default

logger = get_logger(__name__)

TITLE_PLACEHOLDER = "Sousou no Frieren"
NAMES_HELP = "Names must be separated with a comma (name1, name2, etc)"
GENRE_HELP = "Genres must be separated with a comma (genre1, genre2, etc)"
GENRE_PICK_HELP = "Pick by name or number, separated with a comma (1, 4, Drama)"


def split_genres(raw: str) -> list[str]:
    """Split comma-separated genre text into trimmed tokens.

    Order and duplicates are kept and no token is dropped, so an empty
    string gives ``[""]``.
    """
    return [token.strip() for token in raw.split(",")]


def _prompt_genres(genre_mode: str) -> list[str]:
    if genre_mode == "enum":
        chosen = answer_or_default(
            lambda: prompts.multiselect("Genre(s)", list(Genre), help=GENRE_PICK_HELP),
            [],
            field="genre",
        )
        return [genre.value for genre in chosen]

    raw = answer_or_default(
        lambda: prompts.text("Genre(s)", help=GENRE_HELP),
        None,
        field="genre",
    )
    if raw is None:
        return []
    return split_genres(raw)


def collect_details(genre_mode: str = "text", editor_cmd: Optional[str] = None) -> Details:
    """Prompt for every field in order and return the assembled document.

    Args:
        genre_mode: "text" for a comma-separated answer, "enum" for a
            multi-select over ``Genre``
        editor_cmd: Editor for the description prompt (None uses $EDITOR)

    Returns:
        Details with defaults in place of any cancelled answers
    """
    title = answer_or_default(
        lambda: prompts.text("Title", placeholder=TITLE_PLACEHOLDER),
        "",
        field="title",
    )
    author = answer_or_default(
        lambda: prompts.text("Author(s)", help=NAMES_HELP),
        "",
        field="author",
    )
    artist = answer_or_default(
        lambda: prompts.text("Artist(s)", help=NAMES_HELP),
        "",
        field="artist",
    )
    description = answer_or_default(
        lambda: prompts.editor("Description", editor_cmd=editor_cmd),
        "",
        field="description",
    )
    genre = _prompt_genres(genre_mode)
    status = answer_or_default(
        lambda: prompts.select("Status", Status.selectable(), default=Status.UNKNOWN),
        Status.UNKNOWN,
        field="status",
    )

    details = Details(
        title=title,
        author=author,
        artist=artist,
        description=description,
        genre=genre,
        status=status,
    )
    logger.info(
        "details_assembled",
        genre_mode=genre_mode,
        genre_count=len(details.genre),
        status=details.status.label,
    )
    return details
