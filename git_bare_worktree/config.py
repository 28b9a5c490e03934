"""Global and per-repository configuration loading."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from .exceptions import ConfigNotFoundError, ConfigParseError
from .models import GlobalConfig, RepoConfig
from .urls import CLONE_METHODS

APP_NAME = "git-bare-worktree"
CONFIG_FILENAME = "config.toml"
REPO_CONFIG_FILENAME = "gbw.toml"

DEFAULT_POST_CLONE_COMMANDS = """\
echo 'gitdir: .bare' > .git
git config --file .bare/config remote.origin.fetch '+refs/heads/*:refs/remotes/origin/*'
git fetch origin
HEAD_BRANCH=$(git symbolic-ref refs/remotes/origin/HEAD 2>/dev/null | sed 's@^refs/remotes/origin/@@'); \
[ -n "$HEAD_BRANCH" ] && git worktree add "$HEAD_BRANCH" "$HEAD_BRANCH"
"""

_DEFAULT_CONFIG_TEMPLATE = """\
# {app} configuration file

# Repository root directory (required)
root = "~/repos"

# Default clone method: "ssh" or "https"
clone_method = "ssh"

# Commands to run after bare clone (executed with sh in the project directory)
post_clone_commands = '''
{post_clone}'''

# Optional: suffix for cloned directory (e.g., ".work" -> repo.work)
# suffix = ".work"
"""


def config_dir(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path:
    env = os.environ if env is None else env
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    home = home or Path.home()
    return home / ".config" / APP_NAME


def config_path(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path:
    return config_dir(env, home) / CONFIG_FILENAME


def default_config_content() -> str:
    return _DEFAULT_CONFIG_TEMPLATE.format(app=APP_NAME, post_clone=DEFAULT_POST_CLONE_COMMANDS)


def ensure_config_file(path: Path) -> bool:
    """Write the default config to ``path`` unless it already exists.

    Returns True when a new file was created.
    """

    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(default_config_content(), encoding="utf-8")
    return True


def load_global_config(path: Path) -> GlobalConfig:
    if not path.exists():
        raise ConfigNotFoundError(
            f"Config not found: {path}\nRun '{APP_NAME} config' to create it."
        )
    data = _read_toml(path)
    root = data.get("root")
    if not root:
        raise ConfigParseError(f"Missing 'root' in {path}")
    clone_method = _optional_str(data, "clone_method", path) or "ssh"
    if clone_method not in CLONE_METHODS:
        raise ConfigParseError(
            f"Invalid clone_method {clone_method!r} in {path}: expected one of {', '.join(CLONE_METHODS)}"
        )
    post_clone = _optional_str(data, "post_clone_commands", path)
    return GlobalConfig(
        root=_require_str(root, "root", path),
        clone_method=clone_method,
        post_clone_commands=DEFAULT_POST_CLONE_COMMANDS if post_clone is None else post_clone,
        suffix=_optional_str(data, "suffix", path),
    )


def load_repo_config(repo_root: Path) -> RepoConfig:
    path = repo_root / REPO_CONFIG_FILENAME
    if not path.exists():
        return RepoConfig()
    data = _read_toml(path)
    defaults = RepoConfig()
    return RepoConfig(
        base_branch=_optional_str(data, "base_branch", path) or defaults.base_branch,
        post_add_commands=_optional_str(data, "post_add_commands", path) or defaults.post_add_commands,
    )


def expand_tilde(path: str, home: Path | None = None) -> Path:
    if path == "~":
        return home or Path.home()
    if path.startswith("~/"):
        return (home or Path.home()) / path[2:]
    return Path(path)


def resolve_root(config: GlobalConfig, home: Path | None = None) -> Path:
    return expand_tilde(config.root, home=home)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"{path}: {exc}") from exc


def _optional_str(data: Mapping[str, Any], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return _require_str(value, key, path)


def _require_str(value: Any, key: str, path: Path) -> str:
    if not isinstance(value, str):
        raise ConfigParseError(f"'{key}' in {path} must be a string")
    return value


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "REPO_CONFIG_FILENAME",
    "DEFAULT_POST_CLONE_COMMANDS",
    "config_dir",
    "config_path",
    "default_config_content",
    "ensure_config_file",
    "load_global_config",
    "load_repo_config",
    "expand_tilde",
    "resolve_root",
]
