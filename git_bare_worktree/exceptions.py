"""Custom error hierarchy for git-bare-worktree."""

from __future__ import annotations


class GitBareWorktreeError(RuntimeError):
    """Base error for the CLI."""


class UrlParseError(GitBareWorktreeError):
    """Raised when a repository URL cannot be normalized."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Failed to parse repository URL: {value}")


class ConfigNotFoundError(GitBareWorktreeError):
    """Raised when the global config file does not exist."""


class ConfigParseError(GitBareWorktreeError):
    """Raised when a config file is not valid TOML or has bad values."""


class EditorNotFoundError(GitBareWorktreeError):
    """Raised when $EDITOR is not set."""

    def __init__(self) -> None:
        super().__init__("$EDITOR environment variable is not set")


class CloneError(GitBareWorktreeError):
    """Raised when the bare clone fails."""


class PostCloneCommandError(GitBareWorktreeError):
    """Raised when the post-clone script exits non-zero."""


class RepositoryAlreadyExistsError(GitBareWorktreeError):
    """Raised when the clone target directory is already present."""


class RepoRootNotFoundError(GitBareWorktreeError):
    """Raised when no parent directory holds a .bare repository."""

    def __init__(self) -> None:
        super().__init__("Repository root not found (no .bare directory)")


class WorktreeError(GitBareWorktreeError):
    """Raised when a worktree operation fails."""


class WorktreeAlreadyExistsError(WorktreeError):
    """Raised when the target worktree directory is already present."""


class GitCommandError(WorktreeError):
    """Raised when an underlying git command fails or cannot be started."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = "\n".join(
            section
            for section in (self.stdout.strip(), self.stderr.strip())
            if section
        )
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


__all__ = [
    "GitBareWorktreeError",
    "UrlParseError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "EditorNotFoundError",
    "CloneError",
    "PostCloneCommandError",
    "RepositoryAlreadyExistsError",
    "RepoRootNotFoundError",
    "WorktreeError",
    "WorktreeAlreadyExistsError",
    "GitCommandError",
]
