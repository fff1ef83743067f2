"""Pydantic schemas for publication details documents.

A ``Details`` document is what one run of the form produces and what
``details.json`` holds on disk. Enumerated fields keep explicit, stable codes.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Status(IntEnum):
    """Publication status.

    Serialized as the integer code. Codes are part of the file format and
    must never be renumbered.
    """

    UNKNOWN = 0
    ONGOING = 1
    COMPLETED = 2
    LICENSED = 3
    FINISHED = 4
    CANCELLED = 5
    HIATUS = 6

    @classmethod
    def selectable(cls) -> list["Status"]:
        """Statuses offered to the operator, in display order.

        FINISHED stays a valid code when reading documents but is not offered.
        """
        return [
            cls.UNKNOWN,
            cls.ONGOING,
            cls.COMPLETED,
            cls.LICENSED,
            cls.CANCELLED,
            cls.HIATUS,
        ]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> "Status":
        """Look up a status by its display name (case-insensitive).

        Raises:
            ValueError: If no status has that name.
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown status: {label!r}") from None

    def __str__(self) -> str:
        return self.label


class Genre(str, Enum):
    """Closed genre list for the multi-select genre prompt.

    Values are the names written to the document.
    """

    ACTION = "Action"
    ADVENTURE = "Adventure"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    ECCHI = "Ecchi"
    FANTASY = "Fantasy"
    HISTORICAL = "Historical"
    HORROR = "Horror"
    ISEKAI = "Isekai"
    MECHA = "Mecha"
    MUSIC = "Music"
    MYSTERY = "Mystery"
    PSYCHOLOGICAL = "Psychological"
    ROMANCE = "Romance"
    SCHOOL_LIFE = "SchoolLife"
    SCI_FI = "SciFi"
    SLICE_OF_LIFE = "SliceOfLife"
    SPORTS = "Sports"
    SUPERNATURAL = "Supernatural"
    THRILLER = "Thriller"

    def __str__(self) -> str:
        return self.value


class Details(BaseModel):
    """Publication metadata collected in one run.

    Field order is the key order of the serialized document.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    author: str = Field(default="", description="Comma-separated author names")
    artist: str = Field(default="", description="Comma-separated artist names")
    description: str = ""
    genre: list[str] = Field(default_factory=list)
    status: Status = Status.UNKNOWN

    def to_json(self) -> str:
        """Render as pretty-printed JSON (2-space indent, status as int)."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Details":
        """Parse a document produced by ``to_json``.

        Raises:
            pydantic.ValidationError: On malformed JSON or an unknown status code.
        """
        return cls.model_validate_json(text)
