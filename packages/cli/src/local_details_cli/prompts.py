"""Terminal prompt primitives.

Every primitive either returns the operator's answer or raises
``PromptCancelled`` (Ctrl-C, closed input, editor failure). Callers decide
the fallback with ``answer_or_default``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence, TypeVar

import click
import typer

from local_details_common import PromptCancelled, get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Abort covers KeyboardInterrupt and EOFError raised while reading input. typer
# may carry its own click, so its Abort is listed next to click's (used by edit).
_PROMPT_FAILURES = (typer.Abort, click.Abort, click.ClickException, OSError)


@contextmanager
def _cancellable(label: str) -> Iterator[None]:
    try:
        yield
    except _PROMPT_FAILURES as e:
        reason = e.format_message() if isinstance(e, click.ClickException) else type(e).__name__
        raise PromptCancelled(f"{label}: {reason}") from e


def _show_hints(placeholder: Optional[str], help: Optional[str]) -> None:
    if placeholder:
        typer.secho(f"  e.g. {placeholder}", dim=True)
    if help:
        typer.secho(f"  {help}", dim=True)


def _list_options(options: Sequence[object]) -> None:
    for index, option in enumerate(options, start=1):
        typer.echo(f"  {index:>2}) {option}")


def _option_lookup(options: Sequence[T]) -> Callable[[str], T]:
    """Build a resolver accepting an option's name or its 1-based number."""
    by_name = {str(option).lower(): option for option in options}

    def resolve(token: str) -> T:
        key = token.strip().lower()
        if key.isdigit() and 1 <= int(key) <= len(options):
            return options[int(key) - 1]
        if key in by_name:
            return by_name[key]
        raise typer.BadParameter(f"{token.strip()!r} is not one of the listed options")

    return resolve


def text(label: str, placeholder: Optional[str] = None, help: Optional[str] = None) -> str:
    """Single-line free text. Empty input is a valid answer."""
    _show_hints(placeholder, help)
    with _cancellable(label):
        return typer.prompt(label, default="", show_default=False)


def editor(label: str, help: Optional[str] = None, editor_cmd: Optional[str] = None) -> str:
    """Multi-line text entered in an external editor.

    Closing the editor without saving counts as a cancellation. The single
    trailing newline most editors append is removed.
    """
    typer.echo(f"{label}: opening editor...")
    _show_hints(None, help)
    with _cancellable(label):
        content = click.edit(editor=editor_cmd, require_save=True)
    if content is None:
        raise PromptCancelled(f"{label}: editor closed without saving")
    if content.endswith("\r\n"):
        return content[:-2]
    if content.endswith("\n"):
        return content[:-1]
    return content


def select(label: str, options: Sequence[T], default: T) -> T:
    """Choose exactly one option by name or list number."""
    _list_options(options)
    resolve = _option_lookup(options)
    with _cancellable(label):
        return typer.prompt(label, default=str(default), value_proc=resolve)


def multiselect(label: str, options: Sequence[T], help: Optional[str] = None) -> list[T]:
    """Choose any number of options, comma-separated, kept in the order typed."""
    _list_options(options)
    _show_hints(None, help)
    resolve = _option_lookup(options)

    def resolve_all(value: str) -> list[T]:
        return [resolve(token) for token in value.split(",") if token.strip()]

    with _cancellable(label):
        return typer.prompt(label, default="", show_default=False, value_proc=resolve_all)


def confirm(label: str, default: bool = False) -> bool:
    with _cancellable(label):
        return typer.confirm(label, default=default)


def answer_or_default(prompt: Callable[[], T], default: T, field: str) -> T:
    """Run a prompt, substituting ``default`` if it is cancelled."""
    try:
        return prompt()
    except PromptCancelled as e:
        logger.debug("prompt_cancelled", field=field, reason=str(e))
        return default
