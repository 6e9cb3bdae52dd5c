from rich.console import Console
from rich.syntax import Syntax


def rich_print_diffs(diffs: list[tuple[str, str]]) -> None:
    """Show what ``apply --check`` would write, one unified diff per target.

    ``diffs`` pairs each target's path relative to the config directory with
    the diff between its current and injected contents.
    """
    console = Console(force_terminal=True)
    for target, diff in diffs:
        console.rule(f'[bold]{target}')
        console.print(Syntax(diff, 'diff', theme='ansi_dark', word_wrap=False), soft_wrap=True)
