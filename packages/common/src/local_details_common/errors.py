"""Custom error types for local-details.

Prompt failures are recovered where they occur; file failures are not.
"""


class LocalDetailsError(Exception):
    """Base exception for all local-details errors."""

    pass


class PromptCancelled(LocalDetailsError):
    """Operator cancelled a prompt, or the prompt could not be shown.

    Covers Ctrl-C, a closed input stream and editor failures. Callers
    substitute the field's default value.
    """

    pass


class OutputWriteError(LocalDetailsError):
    """Error creating or writing the details document."""

    pass


class DocumentReadError(LocalDetailsError):
    """Error reading or parsing an existing details document."""

    pass
