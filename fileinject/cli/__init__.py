"""CLI module for fileinject.

The CLI layer stays thin: each command module defines a Typer function that
parses arguments and calls the matching business logic in
`fileinject.commands.*` through `run_cli_command`, which turns exceptions
into exit code 1 and returned integers into the process exit code.

- `main.py`: the Typer app, global options and command registration.
- `apply.py`, `preview.py`: individual commands.
"""
