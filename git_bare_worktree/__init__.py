"""Top-level package for git-bare-worktree."""

from ._version import __version__

__all__ = ["__version__"]
