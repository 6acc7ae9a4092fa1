"""Typer CLI application for pyseed."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated
import warnings

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import pyseed
from pyseed.cli._prompts import prompt_overwrite_policy, prompt_project_name
from pyseed.core import (
    GeneratorConfig,
    InvalidProjectName,
    OverwritePolicy,
    PathConflict,
    PermissionWarning,
    WriteFailure,
    default_registry,
    materialize,
    resolve_project_name,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """pyseed — generate a minimal, runnable Python project skeleton."""


_FILE_DESCRIPTIONS: dict[str, str] = {
    "main.py": "main script",
    "install.sh": "installation script",
    "requirements.txt": "Python dependencies",
    "config.json": "configuration file",
    ".gitignore": "Git ignore file",
    "README.md": "project documentation",
    "data/": "data directory",
}


def _print_files() -> None:
    registry = default_registry()
    _console.print()
    _console.print("[bold cyan]◆[/]  Generated files")
    _console.print("[dim]│[/]")
    for template in registry:
        mode = "[bold green]x[/]" if template.executable else " "
        desc = _FILE_DESCRIPTIONS.get(template.relative_path, "")
        _console.print(f"[dim]│[/]  {mode} [bold cyan]{template.relative_path:<18}[/] [dim]{desc}[/]")
    for directory in registry.directories:
        entry = f"{directory}/"
        desc = _FILE_DESCRIPTIONS.get(entry, "")
        _console.print(f"[dim]│[/]    [bold cyan]{entry:<18}[/] [dim]{desc}[/]")
    _console.print()


def _list_files_callback(value: bool) -> None:
    if value:
        _print_files()
        raise Exit()


def _enable_verbose_logging() -> None:
    logger = logging.getLogger("pyseed")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_console, show_time=False, show_path=False))
    logger.setLevel(logging.DEBUG)


def _is_populated(path: Path) -> bool:
    return path.is_dir() and any(path.iterdir())


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(help="Name for the new project directory. Prompted for when omitted.", show_default=False),
    ] = None,
    directory: Annotated[
        Path,
        Option("--directory", "-d", help="Directory the project is created in.", file_okay=False),
    ] = Path("."),
    on_existing: Annotated[
        OverwritePolicy | None,
        Option(
            "--on-existing",
            help="What to do when the project directory already has content. [default: overwrite]",
            show_default=False,
        ),
    ] = None,
    strict_names: Annotated[
        bool,
        Option("--strict-names/--lax-names", help="Reject names that are not a single safe directory name."),
    ] = True,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log every filesystem operation.")] = False,
    list_files: Annotated[
        bool,
        Option(
            "--list-files",
            "-l",
            help="List the generated files and exit.",
            callback=_list_files_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Python project skeleton."""
    if verbose:
        _enable_verbose_logging()

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  pyseed v{pyseed.__version__}")
    _console.print("[dim]│[/]")

    interactive = project_name is None
    if interactive:
        project_name = prompt_project_name()
    else:
        _console.print("[bold green]◇[/]  Enter project name")
        _console.print(f"[dim]│[/]  {escape(project_name)}")
        _console.print("[dim]│[/]")

    try:
        name = resolve_project_name(project_name, strict=strict_names)
    except InvalidProjectName as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    policy = on_existing
    if policy is None:
        if interactive and _is_populated(directory / name):
            policy = prompt_overwrite_policy(name)
        else:
            policy = OverwritePolicy.OVERWRITE

    config = GeneratorConfig(base_dir=directory, policy=policy, strict_names=strict_names)

    # Render
    _console.print(f"[bold green]◇[/]  Creating {escape(name)}/...")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", PermissionWarning)
            result = materialize(name, config=config)
    except PathConflict as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        if policy is OverwritePolicy.REFUSE:
            _console.print("[dim]Use --on-existing overwrite or clean to reuse the directory.[/]")
        raise Exit(code=1) from None
    except WriteFailure as exc:
        reason = escape(str(exc.__cause__))
        _console.print(f"[bold red]Error:[/] could not write [bold]{escape(str(exc.path))}[/]: {reason}")
        if exc.written:
            _console.print("[dim]Written before the failure:[/]")
            for path in exc.written:
                _console.print(f"[dim]│[/]  {escape(str(path))}")
        raise Exit(code=1) from None

    for entry in result.entries():
        desc = _FILE_DESCRIPTIONS.get(entry, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {escape(entry)}{desc_str}")

    for warning in result.warnings:
        _console.print(f"[dim]│[/]  [bold yellow]Warning:[/] {escape(str(warning))}")

    _console.print("[dim]│[/]")
    _console.print(f"[bold green]◇[/]  Set up the environment: cd {escape(str(result.root))} && ./install.sh")
    _console.print("[dim]│[/]  Run the application: ./main.py")
    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! Project '{escape(name)}' created.")
    _console.print()
