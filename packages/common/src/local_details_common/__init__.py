"""Local Details Common - errors, logging and settings shared by all packages."""

from local_details_common.config import Settings, get_settings
from local_details_common.errors import (
    DocumentReadError,
    LocalDetailsError,
    OutputWriteError,
    PromptCancelled,
)
from local_details_common.logging import configure_logging, get_logger

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LocalDetailsError",
    "PromptCancelled",
    "OutputWriteError",
    "DocumentReadError",
    # Logging
    "configure_logging",
    "get_logger",
]
