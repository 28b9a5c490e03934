"""Branch and worktree directory naming."""

from __future__ import annotations

from datetime import datetime

WIP_PREFIX = "wip/"


def branch_to_dirname(branch: str) -> str:
    """Map a branch name to the worktree directory name used on disk.

    ``feature/x`` and ``feature-x`` map to the same directory.
    """

    return branch.replace("/", "-")


def generate_wip_branch_name(now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%m%d-%H%M%S")
    return f"{WIP_PREFIX}{stamp}"


__all__ = ["branch_to_dirname", "generate_wip_branch_name"]
