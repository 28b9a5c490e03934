"""High-level orchestration for worktree operations."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import git
from .config import load_repo_config
from .exceptions import GitCommandError, WorktreeAlreadyExistsError, WorktreeError
from .fs import find_repo_root
from .interactive import fuzzy_select, run_shell_script
from .naming import branch_to_dirname, generate_wip_branch_name


def add_worktree(
    cwd: Path,
    branch: str | None = None,
    *,
    base: str | None = None,
    console: Console,
) -> Path:
    repo_root = find_repo_root(cwd)
    console.print(f"Repository root: {escape(str(repo_root))}")

    prune_worktrees_if_needed(repo_root, console)

    config = load_repo_config(repo_root)
    base_branch = base or config.base_branch

    if not branch:
        branch = generate_wip_branch_name()
        console.print(f"Auto-generated branch name: {escape(branch)}")

    dirname = branch_to_dirname(branch)
    target = repo_root / dirname
    if target.exists():
        raise WorktreeAlreadyExistsError(f"Worktree already exists: {target}")

    console.print(f"Creating worktree: {escape(dirname)} (branch: {escape(branch)}, base: {escape(base_branch)})")
    with console.status(f"Adding worktree '{escape(dirname)}'…"):
        if git.branch_exists(repo_root, branch):
            git.worktree_add_existing(repo_root, target, branch)
        else:
            git.worktree_add_new(repo_root, target, branch, base_branch)

    if config.post_add_commands.strip():
        run_post_add_commands(config.post_add_commands, target, console)

    console.print(f"\n[green]Done! Worktree created at: {escape(str(target))}[/green]")
    return target


def list_worktree_paths(repo_root: Path) -> list[Path]:
    # The bare backing store shows up as a worktree entry but is not a checkout.
    return [entry.path for entry in git.worktree_list(repo_root) if not entry.is_bare]


def select_worktree(cwd: Path, *, console: Console) -> str | None:
    repo_root = find_repo_root(cwd)
    paths = list_worktree_paths(repo_root)
    if not paths:
        console.print("No worktrees found")
        return None
    return fuzzy_select([str(path) for path in paths])


def remove_worktree(cwd: Path, name: str, *, force: bool = False, console: Console) -> Path:
    repo_root = find_repo_root(cwd)
    target = repo_root / branch_to_dirname(name)
    if not target.exists():
        raise WorktreeError(f"Worktree not found: {name}")

    console.print(f"Removing worktree: {escape(str(target))}")
    with console.status(f"Removing worktree '{escape(name)}'…"):
        git.worktree_remove(repo_root, target, force=force)
    console.print(f"[green]Done! Worktree removed: {escape(name)}[/green]")
    return target


def prune_worktrees_if_needed(repo_root: Path, console: Console) -> None:
    """Drop stale worktree registrations. Failures are ignored."""

    try:
        if not git.worktree_prune_pending(repo_root):
            return
        console.print("Pruning stale worktree entries...")
        git.worktree_prune(repo_root)
    except GitCommandError:
        return


def run_post_add_commands(commands: str, worktree_path: Path, console: Console) -> None:
    console.print("Running post-add commands...")
    try:
        returncode = run_shell_script(commands, worktree_path)
    except OSError as exc:
        raise WorktreeError(f"Failed to execute post-add commands: {exc}") from exc
    if returncode != 0:
        raise WorktreeError(f"Post-add commands failed (exit {returncode})")


__all__ = [
    "add_worktree",
    "list_worktree_paths",
    "select_worktree",
    "remove_worktree",
    "prune_worktrees_if_needed",
    "run_post_add_commands",
]
