"""Bare clone into the configured root with a worktree-friendly layout."""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import git
from .config import resolve_root
from .exceptions import CloneError, GitCommandError, PostCloneCommandError, RepositoryAlreadyExistsError
from .fs import BARE_DIRNAME, build_project_dir, write_marker
from .interactive import run_shell_script
from .models import GlobalConfig
from .urls import determine_clone_url, parse_repo_url


def clone_repository(
    repo: str,
    *,
    config: GlobalConfig,
    ssh: bool = False,
    https: bool = False,
    suffix: str | None = None,
    home: Path | None = None,
    console: Console,
) -> Path:
    info = parse_repo_url(repo)
    console.print(f"Repository: {escape(info.to_local_path())}")

    clone_url = determine_clone_url(info, ssh, https, default=config.clone_method)
    console.print(f"Clone URL: {escape(clone_url)}")

    effective_suffix = suffix if suffix is not None else config.suffix
    project_dir = build_project_dir(resolve_root(config, home=home), info, effective_suffix)
    if project_dir.exists():
        raise RepositoryAlreadyExistsError(f"Repository already exists: {project_dir}")

    project_dir.mkdir(parents=True)
    console.print(f"Created: {escape(str(project_dir))}")

    bare_dir = project_dir / BARE_DIRNAME
    try:
        with console.status(f"Cloning into {escape(str(bare_dir))}…"):
            git.bare_clone(clone_url, bare_dir)
    except GitCommandError as exc:
        shutil.rmtree(project_dir, ignore_errors=True)
        raise CloneError(f"Clone failed: {exc}") from exc

    run_post_clone_commands(config.post_clone_commands, project_dir, console)

    write_marker(project_dir)
    console.print("Created .envrc")
    console.print(f"\n[green]Done! Repository cloned to: {escape(str(project_dir))}[/green]")
    return project_dir


def run_post_clone_commands(commands: str, project_dir: Path, console: Console) -> None:
    if not commands.strip():
        return
    console.print("Running post-clone commands...")
    try:
        returncode = run_shell_script(commands, project_dir)
    except OSError as exc:
        raise PostCloneCommandError(f"Post-clone commands failed to start: {exc}") from exc
    if returncode != 0:
        raise PostCloneCommandError(f"Post-clone commands failed (exit {returncode})")


__all__ = ["clone_repository", "run_post_clone_commands"]
