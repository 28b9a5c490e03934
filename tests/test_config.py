"""Tests for global and per-repository configuration loading."""

from __future__ import annotations

import tempfile
import tomllib
import unittest
from pathlib import Path

from git_bare_worktree.config import (
    DEFAULT_POST_CLONE_COMMANDS,
    config_dir,
    config_path,
    default_config_content,
    ensure_config_file,
    expand_tilde,
    load_global_config,
    load_repo_config,
    resolve_root,
)
from git_bare_worktree.exceptions import ConfigNotFoundError, ConfigParseError
from git_bare_worktree.models import RepoConfig


class ExpandTildeTests(unittest.TestCase):
    def test_expands_against_home(self) -> None:
        self.assertEqual(expand_tilde("~/repos"), Path.home() / "repos")
        self.assertEqual(expand_tilde("~"), Path.home())

    def test_explicit_home(self) -> None:
        home = Path("/home/someone")
        self.assertEqual(expand_tilde("~/repos", home=home), home / "repos")
        self.assertEqual(expand_tilde("~", home=home), home)

    def test_other_paths_unchanged(self) -> None:
        self.assertEqual(expand_tilde("/absolute/path"), Path("/absolute/path"))
        self.assertEqual(expand_tilde("relative/dir"), Path("relative/dir"))
        self.assertEqual(expand_tilde("~other/dir"), Path("~other/dir"))


class ConfigLocationTests(unittest.TestCase):
    def test_xdg_override(self) -> None:
        env = {"XDG_CONFIG_HOME": "/xdg"}
        self.assertEqual(config_dir(env, Path("/home/u")), Path("/xdg/git-bare-worktree"))
        self.assertEqual(config_path(env, Path("/home/u")), Path("/xdg/git-bare-worktree/config.toml"))

    def test_home_default(self) -> None:
        for env in ({}, {"XDG_CONFIG_HOME": ""}):
            with self.subTest(env=env):
                self.assertEqual(config_dir(env, Path("/home/u")), Path("/home/u/.config/git-bare-worktree"))


class GlobalConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "config.toml"

    def test_default_content_is_valid(self) -> None:
        data = tomllib.loads(default_config_content())
        self.assertEqual(data["root"], "~/repos")
        self.assertEqual(data["clone_method"], "ssh")
        self.assertEqual(data["post_clone_commands"], DEFAULT_POST_CLONE_COMMANDS)
        self.assertNotIn("suffix", data)

    def test_missing_file(self) -> None:
        with self.assertRaises(ConfigNotFoundError) as ctx:
            load_global_config(self.path)
        self.assertIn("git-bare-worktree config", str(ctx.exception))

    def test_ensure_then_load(self) -> None:
        nested = Path(self._tmp.name) / "nested" / "config.toml"
        self.assertTrue(ensure_config_file(nested))
        self.assertFalse(ensure_config_file(nested))
        config = load_global_config(nested)
        self.assertEqual(config.root, "~/repos")
        self.assertEqual(config.clone_method, "ssh")
        self.assertIsNone(config.suffix)
        self.assertEqual(resolve_root(config, home=Path("/h")), Path("/h/repos"))

    def test_defaults_for_optional_fields(self) -> None:
        self.path.write_text('root = "/srv/repos"\n', encoding="utf-8")
        config = load_global_config(self.path)
        self.assertEqual(config.root, "/srv/repos")
        self.assertEqual(config.clone_method, "ssh")
        self.assertEqual(config.post_clone_commands, DEFAULT_POST_CLONE_COMMANDS)
        self.assertIsNone(config.suffix)

    def test_explicit_values_and_unknown_keys(self) -> None:
        self.path.write_text(
            'root = "~/src"\nclone_method = "https"\npost_clone_commands = ""\nsuffix = ".work"\nextra = 1\n',
            encoding="utf-8",
        )
        config = load_global_config(self.path)
        self.assertEqual(config.clone_method, "https")
        self.assertEqual(config.post_clone_commands, "")
        self.assertEqual(config.suffix, ".work")

    def test_parse_errors(self) -> None:
        for content in (
            "root = ",
            'clone_method = "ssh"\n',
            "root = 42\n",
            'root = "~/r"\nclone_method = "ftp"\n',
            'root = "~/r"\nsuffix = true\n',
        ):
            with self.subTest(content=content):
                self.path.write_text(content, encoding="utf-8")
                with self.assertRaises(ConfigParseError):
                    load_global_config(self.path)

    def test_non_utf8_file(self) -> None:
        self.path.write_bytes(b'root = "\xff\xfe"\n')
        with self.assertRaises(ConfigParseError) as ctx:
            load_global_config(self.path)
        self.assertIn("not valid UTF-8", str(ctx.exception))
        self.assertIn(str(self.path), str(ctx.exception))


class RepoConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_missing_file_uses_defaults(self) -> None:
        config = load_repo_config(self.root)
        self.assertEqual(config, RepoConfig(base_branch="main", post_add_commands=""))

    def test_reads_values(self) -> None:
        (self.root / "gbw.toml").write_text(
            'base_branch = "develop"\npost_add_commands = """\nnpm install\n"""\n',
            encoding="utf-8",
        )
        config = load_repo_config(self.root)
        self.assertEqual(config.base_branch, "develop")
        self.assertEqual(config.post_add_commands, "npm install\n")

    def test_partial_file(self) -> None:
        (self.root / "gbw.toml").write_text('post_add_commands = "make"\n', encoding="utf-8")
        config = load_repo_config(self.root)
        self.assertEqual(config.base_branch, "main")
        self.assertEqual(config.post_add_commands, "make")

    def test_invalid_toml(self) -> None:
        (self.root / "gbw.toml").write_text("base_branch = [\n", encoding="utf-8")
        with self.assertRaises(ConfigParseError):
            load_repo_config(self.root)

    def test_non_utf8_file(self) -> None:
        (self.root / "gbw.toml").write_bytes(b'base_branch = "\xe9t\xe9"\n')
        with self.assertRaises(ConfigParseError) as ctx:
            load_repo_config(self.root)
        self.assertIn("gbw.toml", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
