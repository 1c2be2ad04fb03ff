"""CLI commands using Typer."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from scaffold_files import __version__
from scaffold_files.errors import FilesError
from scaffold_files.files import Files
from scaffold_files.scanner import Target
from scaffold_files.settings import FilesSettings

app = typer.Typer(
    name="scaffold-files",
    help="Structural line edits for scaffolded source files",
    no_args_is_help=True,
)

console = Console()

PathArg = Annotated[Path, typer.Argument(help="File to edit")]
TargetArg = Annotated[str, typer.Argument(help="Substring (or pattern with --regex) locating the line")]
ContentsArg = Annotated[list[str], typer.Argument(help="Line(s) to insert, one per argument")]
RegexOpt = Annotated[
    bool, typer.Option("--regex", "-e", help="Treat the target as a regular expression")
]
ConfigOpt = Annotated[
    Path | None, typer.Option("--config", "-c", help="Settings file (YAML or JSON)")
]
LastOpt = Annotated[bool, typer.Option("--last", help="Use the last matching line")]


def show_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def show_error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"scaffold-files v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log every edit")] = False,
) -> None:
    """Structural line edits for scaffolded source files."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# ============================================================================
# Helpers
# ============================================================================


def _create_files(config: Path | None) -> Files:
    """Create a Files instance on the real filesystem.

    Raises:
        typer.Exit: If the settings file can't be loaded.
    """
    if config is None:
        return Files.create()
    try:
        settings = FilesSettings.from_file(config)
    except (FileNotFoundError, ValueError) as e:
        show_error(f"Invalid settings: {e}")
        raise typer.Exit(2) from e
    return Files.create(settings=settings)


def _parse_target(target: str, regex: bool) -> Target:
    """Compile the target when it is a regular expression.

    Raises:
        typer.Exit: If the pattern doesn't compile.
    """
    if not regex:
        return target
    try:
        return re.compile(target)
    except re.error as e:
        show_error(f"Invalid pattern '{target}': {e}")
        raise typer.Exit(2) from e


def _run(message: str, operation: Callable[[], None]) -> None:
    """Run an edit, reporting success or failure.

    Raises:
        typer.Exit: If the edit fails.
    """
    try:
        operation()
    except FilesError as e:
        show_error(str(e))
        raise typer.Exit(1) from e
    show_success(message)


# ============================================================================
# Whole File Commands
# ============================================================================


@app.command("append")
def append(path: PathArg, contents: ContentsArg, config: ConfigOpt = None) -> None:
    """Append line(s) at the bottom of a file, creating it if missing."""
    files = _create_files(config)
    _run(f"Appended to {path}", lambda: files.append(path, contents))


@app.command("unshift")
def unshift(path: PathArg, contents: ContentsArg, config: ConfigOpt = None) -> None:
    """Add line(s) at the top of a file."""
    files = _create_files(config)
    _run(f"Prepended to {path}", lambda: files.unshift(path, contents))


# ============================================================================
# Line Commands
# ============================================================================


@app.command("replace-first")
def replace_first(
    path: PathArg,
    target: TargetArg,
    replacement: ContentsArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Replace the first line matching the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(
        f"Replaced first '{target}' in {path}",
        lambda: files.replace_first_line(path, matcher, replacement),
    )


@app.command("replace-last")
def replace_last(
    path: PathArg,
    target: TargetArg,
    replacement: ContentsArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Replace the last line matching the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(
        f"Replaced last '{target}' in {path}",
        lambda: files.replace_last_line(path, matcher, replacement),
    )


@app.command("inject-before")
def inject_before(
    path: PathArg,
    target: TargetArg,
    contents: ContentsArg,
    last: LastOpt = False,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Insert line(s) before the first (or last) line matching the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    inject = files.inject_line_before_last if last else files.inject_line_before
    _run(f"Injected before '{target}' in {path}", lambda: inject(path, matcher, contents))


@app.command("inject-after")
def inject_after(
    path: PathArg,
    target: TargetArg,
    contents: ContentsArg,
    last: LastOpt = False,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Insert line(s) after the first (or last) line matching the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    inject = files.inject_line_after_last if last else files.inject_line_after
    _run(f"Injected after '{target}' in {path}", lambda: inject(path, matcher, contents))


@app.command("remove-line")
def remove_line(
    path: PathArg,
    target: TargetArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Remove the first line matching the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(f"Removed '{target}' from {path}", lambda: files.remove_line(path, matcher))


# ============================================================================
# Block Commands
# ============================================================================


@app.command("inject-block-top")
def inject_block_top(
    path: PathArg,
    target: TargetArg,
    contents: ContentsArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Insert line(s) at the top of the block opened by the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(
        f"Injected at top of '{target}' in {path}",
        lambda: files.inject_line_at_block_top(path, matcher, contents),
    )


@app.command("inject-block-bottom")
def inject_block_bottom(
    path: PathArg,
    target: TargetArg,
    contents: ContentsArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Insert line(s) at the bottom of the block opened by the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(
        f"Injected at bottom of '{target}' in {path}",
        lambda: files.inject_line_at_block_bottom(path, matcher, contents),
    )


@app.command("remove-block")
def remove_block(
    path: PathArg,
    target: TargetArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Remove the block opened by the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(f"Removed block '{target}' from {path}", lambda: files.remove_block(path, matcher))


@app.command("inject-class-bottom")
def inject_class_bottom(
    path: PathArg,
    target: TargetArg,
    contents: ContentsArg,
    regex: RegexOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Insert line(s) at the bottom of the class or module named by the target."""
    files = _create_files(config)
    matcher = _parse_target(target, regex)
    _run(
        f"Injected at bottom of class '{target}' in {path}",
        lambda: files.inject_line_at_class_bottom(path, matcher, contents),
    )
