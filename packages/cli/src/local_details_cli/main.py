"""Local Details CLI - Main entry point.

Provides the ``local-details`` command-line interface.

Usage:
    local-details create
    local-details create --genre-mode enum
    local-details show details.json --format json
"""

import typer
from pydantic import ValidationError

from local_details_common import configure_logging, get_settings

from local_details_cli.commands.create import create
from local_details_cli.commands.show import show

# ---------------------------------------------------------------------------
# Root Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="local-details",
    help="Collect publication details (title, authors, genres, status) into details.json.",
    add_completion=False,
)


@app.callback()
def setup():
    """Collect publication details into details.json."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid settings: {e}", err=True)
        raise typer.Exit(1)
    configure_logging(settings.log_level, settings.log_format)


# Register commands
app.command(name="create")(create)
app.command(name="show")(show)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
