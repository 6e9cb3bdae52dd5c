from pathlib import Path

import typer

from fileinject.cli.utils import run_cli_command
from fileinject.commands.preview import command

# Module-level constants for Typer options to avoid B008
PREVIEW_FILE_ARG = typer.Argument(
    ...,
    help='Path to the YAML preview file (template, target, sources, options)',
)
SHOW_GROUPS_OPTION = typer.Option(
    default=False,
    help='Show which tag pair each source file resolves to',
)


def preview(
    preview_file: Path = PREVIEW_FILE_ARG,
    *,
    show_groups: bool = SHOW_GROUPS_OPTION,
) -> None:
    """Preview an injection without writing any file."""
    # Logging is already configured by setup_logging in the app callback
    run_cli_command(lambda: command(preview_file, show_groups=show_groups))
