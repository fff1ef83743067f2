"""Local Details Contracts - Pure Pydantic schemas.

This package contains ONLY Pydantic schemas with no business logic.
Dependencies: pydantic only (no logging, no terminal I/O).
"""

from local_details_contracts.models import (
    Details,
    Genre,
    Status,
)

__version__ = "0.1.0"

__all__ = [
    "Details",
    "Genre",
    "Status",
]
