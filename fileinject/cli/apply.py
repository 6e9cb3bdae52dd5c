from pathlib import Path

import typer

from fileinject.cli.utils import run_cli_command
from fileinject.commands.apply import command

# Module-level constants for Typer options to avoid B008
DEFAULT_CONFIG = Path('fileinject.yaml')
CONFIG_OPTION = typer.Option(
    DEFAULT_CONFIG,
    '--config',
    help='Path to the fileinject YAML configuration file',
)
CHECK_OPTION = typer.Option(
    default=False,
    help='Report targets that would change instead of writing them',
)


def apply(
    config: Path = CONFIG_OPTION,
    *,
    check: bool = CHECK_OPTION,
) -> None:
    """Inject source files into the configured targets."""
    run_cli_command(lambda: command(config, check_only=check))
