"""Interactive prompts for ``pyseed create``."""

from __future__ import annotations

import sys

from rich.console import Console
from simple_term_menu import TerminalMenu

from pyseed.core import DEFAULT_PROJECT_NAME, OverwritePolicy

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _answered(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()


def prompt_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Prompt user for the project name, blank input keeps the default."""
    question = "Enter project name"
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    _console.print("[dim]│[/]  ", end="")
    result = input(f"(default: '{default}') ").strip() or default

    # question, bar and input line
    _clear_lines(3)
    _answered(question, result)
    return result


def prompt_overwrite_policy(directory: str) -> OverwritePolicy:
    """Ask what to do with an existing, non-empty project directory."""
    question = f"'{directory}' already exists"
    policies = list(OverwritePolicy)
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        [p.label for p in policies],
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    index = menu.show()
    if index is None:
        raise SystemExit(1)

    selected = policies[int(index)]
    _clear_lines(2)
    _answered(question, selected.label)
    return selected
