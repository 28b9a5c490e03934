"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import GitCommandError
from .models import WorktreeEntry


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            text=True,
            errors="replace",
            capture_output=True,
        )
    except OSError as exc:
        raise GitCommandError(command, -1, stderr=str(exc)) from exc
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def bare_clone(url: str, target: Path) -> None:
    run_git(["clone", "--bare", url, str(target)], cwd=target.parent)


def branch_exists(repo_path: Path, branch: str) -> bool:
    result = run_git(
        ["show-ref", "--verify", "--quiet", f"refs/heads/{branch}"],
        cwd=repo_path,
        check=False,
    )
    return result.returncode == 0


def worktree_list(repo_path: Path) -> list[WorktreeEntry]:
    output = run_git(["worktree", "list", "--porcelain"], cwd=repo_path)
    return parse_worktree_porcelain(output.stdout)


def worktree_prune_pending(repo_path: Path) -> bool:
    """Return True when ``git worktree prune --dry-run`` reports stale entries."""

    result = run_git(["worktree", "prune", "--dry-run"], cwd=repo_path, check=False)
    return bool(result.stdout.strip() or result.stderr.strip())


def worktree_prune(repo_path: Path) -> None:
    run_git(["worktree", "prune"], cwd=repo_path)


def worktree_add_existing(repo_path: Path, target: Path, branch: str) -> None:
    run_git(["worktree", "add", str(target), branch], cwd=repo_path)


def worktree_add_new(repo_path: Path, target: Path, branch: str, start_point: str) -> None:
    run_git(["worktree", "add", "-b", branch, str(target), start_point], cwd=repo_path)


def worktree_remove(repo_path: Path, target: Path, force: bool = False) -> None:
    args = ["worktree", "remove"]
    if force:
        args.append("--force")
    args.append(str(target))
    run_git(args, cwd=repo_path)


def parse_worktree_porcelain(text: str) -> list[WorktreeEntry]:
    entries: list[WorktreeEntry] = []
    path: str | None = None
    is_bare = False
    for line in text.splitlines() + [""]:
        if not line.strip():
            if path:
                entries.append(WorktreeEntry(path=Path(path), is_bare=is_bare))
            path, is_bare = None, False
            continue
        key, _, value = line.partition(" ")
        if key == "worktree":
            path = value.strip()
        elif key == "bare":
            is_bare = True
    return entries


__all__ = [
    "run_git",
    "bare_clone",
    "branch_exists",
    "worktree_list",
    "worktree_prune_pending",
    "worktree_prune",
    "worktree_add_existing",
    "worktree_add_new",
    "worktree_remove",
    "parse_worktree_porcelain",
]
