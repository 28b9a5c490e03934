"""Version and build revision lookup."""

from __future__ import annotations

import subprocess
from importlib import metadata
from pathlib import Path

DIST_NAME = "git-bare-worktree"

try:  # pragma: no cover - best effort metadata lookup
    __version__ = metadata.version(DIST_NAME)
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


def build_revision() -> str:
    """Short commit hash of the source checkout, or ``unknown`` outside one."""

    checkout = Path(__file__).resolve().parent.parent
    if not (checkout / ".git").exists():
        return "unknown"
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=str(checkout),
            capture_output=True,
            text=True,
        )
    except OSError:
        return "unknown"
    revision = result.stdout.strip()
    if result.returncode != 0 or not revision:
        return "unknown"
    return revision


def version_string() -> str:
    return f"{DIST_NAME} version {__version__} (rev:{build_revision()})"
