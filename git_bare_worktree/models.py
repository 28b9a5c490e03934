"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RepoInfo:
    """Canonical location of a remote repository."""

    host: str
    owner: str
    repo: str

    def to_ssh_url(self) -> str:
        return f"git@{self.host}:{self.owner}/{self.repo}.git"

    def to_https_url(self) -> str:
        return f"https://{self.host}/{self.owner}/{self.repo}.git"

    def to_local_path(self) -> str:
        return f"{self.host}/{self.owner}/{self.repo}"


@dataclass(frozen=True)
class GlobalConfig:
    """Settings read from the user's config.toml."""

    root: str
    clone_method: str
    post_clone_commands: str
    suffix: str | None = None


@dataclass(frozen=True)
class RepoConfig:
    """Per-repository settings read from gbw.toml at the repository root."""

    base_branch: str = "main"
    post_add_commands: str = ""


@dataclass(slots=True)
class WorktreeEntry:
    """Represents a single worktree tracked by git."""

    path: Path
    is_bare: bool = False


__all__ = [
    "RepoInfo",
    "GlobalConfig",
    "RepoConfig",
    "WorktreeEntry",
]
