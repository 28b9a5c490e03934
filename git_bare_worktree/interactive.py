"""Helpers for the external processes the user interacts with: fzf, $EDITOR and sh."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from .config import config_path, ensure_config_file
from .exceptions import EditorNotFoundError, WorktreeError


def fuzzy_select(candidates: Sequence[str]) -> str | None:
    """Pipe ``candidates`` through fzf and return the chosen line.

    Returns None when the picker is cancelled or nothing matched.
    """

    payload = "".join(f"{item}\n" for item in candidates)
    try:
        result = subprocess.run(
            ["fzf"],
            input=payload,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise WorktreeError(f"Failed to start fzf: {exc}") from exc
    if result.returncode != 0:
        return None
    selected = result.stdout.strip()
    return selected or None


def resolve_editor(env: Mapping[str, str]) -> list[str]:
    raw = env.get("EDITOR", "").strip()
    if not raw:
        raise EditorNotFoundError()
    return shlex.split(raw)


def open_editor(editor: Sequence[str], path: Path) -> int:
    return subprocess.run([*editor, str(path)]).returncode


def run_shell_script(script: str, cwd: Path) -> int:
    """Run user-provided shell text verbatim with ``sh -c`` inside ``cwd``."""

    return subprocess.run(["sh", "-c", script], cwd=str(cwd)).returncode


def open_config(env: Mapping[str, str], home: Path | None = None, *, console: Console) -> Path:
    """Create the global config if missing, then open it in $EDITOR.

    A non-zero editor exit is reported as a warning only.
    """

    path = config_path(env, home)
    if not path.parent.exists():
        path.parent.mkdir(parents=True)
        console.print(f"Created config directory: {escape(str(path.parent))}")
    if ensure_config_file(path):
        console.print(f"Created config file: {escape(str(path))}")
    editor = resolve_editor(env)
    if open_editor(editor, path) != 0:
        console.print("[yellow]Editor exited with non-zero status[/yellow]")
    return path


__all__ = ["fuzzy_select", "resolve_editor", "open_editor", "run_shell_script", "open_config"]
