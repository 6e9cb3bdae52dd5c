import typer
from hotlog import verbosity_option

from fileinject.cli.apply import apply
from fileinject.cli.preview import preview
from fileinject.cli.utils import setup_logging
from fileinject.version import __version__

app = typer.Typer(no_args_is_help=True)

VERSION_OPTION = typer.Option(
    default=False,
    help='Show version and exit',
)


@app.callback(invoke_without_command=True)
def main_callback(
    *,
    verbose: int = verbosity_option,
    version: bool = VERSION_OPTION,
) -> None:
    """fileinject - keep file references in templates in sync."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    setup_logging(verbose)


app.command()(apply)
app.command()(preview)


if __name__ == '__main__':
    app()
