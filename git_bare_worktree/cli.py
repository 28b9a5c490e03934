"""Typer CLI entrypoint for git-bare-worktree."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ._version import version_string
from .clone import clone_repository
from .config import config_path, load_global_config
from .exceptions import GitBareWorktreeError
from .interactive import open_config
from .worktrees import add_worktree, remove_worktree, select_worktree

app = typer.Typer(
    help="A worktree management tool based on bare clones",
    add_completion=False,
    no_args_is_help=True,
)
# stdout is reserved for command results (list selection, --version).
console = Console(stderr=True, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_string())
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit.",
    ),
) -> None:
    _ = version  # handled via callback


@app.command(help="Clone a repository as bare with a worktree-friendly structure")
def get(
    repo: str = typer.Argument(
        ...,
        help="Repository URL or path (e.g., github.com/user/repo, git@github.com:user/repo.git).",
    ),
    ssh: bool = typer.Option(False, "--ssh", help="Clone over SSH (default unless config says otherwise)."),
    https: bool = typer.Option(False, "--https", help="Clone over HTTPS."),
    suffix: str | None = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Suffix for the project directory name (e.g., .work -> repo.work).",
    ),
) -> None:
    with _reported_errors():
        config = load_global_config(config_path())
        clone_repository(repo, config=config, ssh=ssh, https=https, suffix=suffix, console=console)


@app.command("config", help="Open the config file in $EDITOR, creating it first if needed")
def config_cmd() -> None:
    with _reported_errors():
        open_config(os.environ, Path.home(), console=console)


@app.command(help="Add a new worktree with a new or existing branch")
def add(
    branch: str | None = typer.Argument(
        None,
        help="Branch name (e.g., feature/000). If omitted, wip/MMDD-HHmmss is generated.",
    ),
    base: str | None = typer.Option(
        None,
        "--base",
        "-b",
        help="Base branch to create from (overrides gbw.toml).",
    ),
) -> None:
    with _reported_errors():
        add_worktree(Path.cwd(), branch, base=base, console=console)


@app.command("list", help="List worktrees and pick one with fzf")
def list_cmd() -> None:
    with _reported_errors():
        selection = select_worktree(Path.cwd(), console=console)
    if selection:
        typer.echo(selection)


@app.command(help="Remove a worktree")
def remove(
    name: str = typer.Argument(..., help="Worktree name (branch or directory name)."),
    force: bool = typer.Option(False, "--force", "-f", help="Force removal even if the worktree is dirty."),
) -> None:
    with _reported_errors():
        remove_worktree(Path.cwd(), name, force=force, console=console)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except (GitBareWorktreeError, OSError) as exc:
        _fail(str(exc))


def _fail(message: str, code: int = 1) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code)


__all__ = ["app"]
