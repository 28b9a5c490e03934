"""Filesystem helpers for git-bare-worktree."""

from __future__ import annotations

from pathlib import Path

from .exceptions import RepoRootNotFoundError
from .models import RepoInfo

BARE_DIRNAME = ".bare"
MARKER_FILENAME = ".envrc"


def find_repo_root(start: Path) -> Path:
    """Walk upward from ``start`` to the first directory holding ``.bare``."""

    for candidate in (start, *start.parents):
        if (candidate / BARE_DIRNAME).is_dir():
            return candidate
    raise RepoRootNotFoundError()


def build_project_dir(root: Path, info: RepoInfo, suffix: str | None = None) -> Path:
    local_path = info.to_local_path()
    if suffix:
        local_path = f"{local_path}{suffix}"
    return root / local_path


def write_marker(project_dir: Path) -> Path:
    marker = project_dir / MARKER_FILENAME
    marker.write_text("", encoding="utf-8")
    return marker


__all__ = ["BARE_DIRNAME", "MARKER_FILENAME", "find_repo_root", "build_project_dir", "write_marker"]
