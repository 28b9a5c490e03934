"""Tests for repository URL parsing and clone URL selection."""

from __future__ import annotations

import unittest

from git_bare_worktree.exceptions import UrlParseError
from git_bare_worktree.models import RepoInfo
from git_bare_worktree.urls import determine_clone_url, parse_repo_url

EXPECTED = RepoInfo(host="github.com", owner="user", repo="repo")


class ParseRepoUrlTests(unittest.TestCase):
    def test_supported_forms_normalize_to_same_triple(self) -> None:
        for value in (
            "github.com/user/repo",
            "github.com/user/repo.git",
            "git@github.com:user/repo.git",
            "git@github.com:user/repo",
            "https://github.com/user/repo",
            "https://github.com/user/repo.git",
            "http://github.com/user/repo.git",
            "ssh://git@github.com/user/repo.git",
            "  github.com/user/repo  ",
        ):
            with self.subTest(value=value):
                self.assertEqual(parse_repo_url(value), EXPECTED)

    def test_ssh_protocol_drops_port(self) -> None:
        info = parse_repo_url("ssh://git@gitlab.example.com:2222/team/project.git")
        self.assertEqual(info, RepoInfo(host="gitlab.example.com", owner="team", repo="project"))

    def test_url_forms_keep_nested_path_in_repo(self) -> None:
        info = parse_repo_url("https://gitlab.com/group/sub/project.git")
        self.assertEqual(info.owner, "group")
        self.assertEqual(info.repo, "sub/project")

        info = parse_repo_url("git@gitlab.com:group/sub/project.git")
        self.assertEqual(info.repo, "sub/project")

    def test_shorthand_requires_exactly_three_segments(self) -> None:
        with self.assertRaises(UrlParseError):
            parse_repo_url("gitlab.com/group/sub/project")
        with self.assertRaises(UrlParseError):
            parse_repo_url("github.com/user")

    def test_invalid_inputs_raise(self) -> None:
        for value in (
            "invalid",
            "",
            "git@github.com",
            "git@github.com:repo.git",
            "https://github.com/user",
            "https:///user/repo",
            "github.com//repo",
        ):
            with self.subTest(value=value):
                with self.assertRaises(UrlParseError):
                    parse_repo_url(value)

    def test_error_carries_input(self) -> None:
        with self.assertRaises(UrlParseError) as ctx:
            parse_repo_url("invalid")
        self.assertEqual(ctx.exception.value, "invalid")
        self.assertIn("invalid", str(ctx.exception))


class RepoInfoSerializationTests(unittest.TestCase):
    def test_urls_and_local_path(self) -> None:
        self.assertEqual(EXPECTED.to_ssh_url(), "git@github.com:user/repo.git")
        self.assertEqual(EXPECTED.to_https_url(), "https://github.com/user/repo.git")
        self.assertEqual(EXPECTED.to_local_path(), "github.com/user/repo")


class DetermineCloneUrlTests(unittest.TestCase):
    def test_ssh_flag(self) -> None:
        self.assertEqual(determine_clone_url(EXPECTED, True, False), "git@github.com:user/repo.git")

    def test_https_flag(self) -> None:
        self.assertEqual(determine_clone_url(EXPECTED, False, True), "https://github.com/user/repo.git")

    def test_defaults_to_ssh(self) -> None:
        self.assertEqual(determine_clone_url(EXPECTED, False, False), "git@github.com:user/repo.git")

    def test_configured_default_used_without_flags(self) -> None:
        url = determine_clone_url(EXPECTED, False, False, default="https")
        self.assertEqual(url, "https://github.com/user/repo.git")
        self.assertEqual(
            determine_clone_url(EXPECTED, True, False, default="https"),
            "git@github.com:user/repo.git",
        )

    def test_both_flags_rejected(self) -> None:
        with self.assertRaises(UrlParseError):
            determine_clone_url(EXPECTED, True, True)


if __name__ == "__main__":
    unittest.main()
