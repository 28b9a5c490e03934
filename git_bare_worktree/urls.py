"""Normalize git remote locations into a host/owner/repo triple."""

from __future__ import annotations

from urllib.parse import urlparse

from .exceptions import UrlParseError
from .models import RepoInfo

CLONE_METHODS = ("ssh", "https")


def parse_repo_url(value: str) -> RepoInfo:
    """Parse any supported repository location into a RepoInfo.

    Accepted forms:

    * ``git@host:owner/repo[.git]``
    * ``https://host/owner/repo[.git]`` (``http://`` too)
    * ``ssh://[user@]host[:port]/owner/repo[.git]``
    * ``host/owner/repo[.git]``
    """

    text = value.strip()
    if text.startswith("git@"):
        return _parse_scp_like(text)
    if text.startswith(("https://", "http://")):
        return _parse_standard_url(text)
    if text.startswith("ssh://"):
        return _parse_standard_url(text)
    return _parse_shorthand(text)


def determine_clone_url(info: RepoInfo, ssh: bool, https: bool, default: str = "ssh") -> str:
    if ssh and https:
        raise UrlParseError("Cannot specify both --ssh and --https")
    if ssh:
        return info.to_ssh_url()
    if https:
        return info.to_https_url()
    if default == "https":
        return info.to_https_url()
    return info.to_ssh_url()


def _parse_scp_like(text: str) -> RepoInfo:
    host, sep, path = text[len("git@") :].partition(":")
    if not sep or not host:
        raise UrlParseError(text)
    return _split_owner_repo(_strip_git_suffix(path), host, text)


def _parse_standard_url(text: str) -> RepoInfo:
    try:
        parsed = urlparse(text)
        host = parsed.hostname
    except ValueError as exc:
        raise UrlParseError(text) from exc
    if not host:
        raise UrlParseError(text)
    path = parsed.path
    if path.startswith("/"):
        path = path[1:]
    return _split_owner_repo(_strip_git_suffix(path), host, text)


def _parse_shorthand(text: str) -> RepoInfo:
    parts = _strip_git_suffix(text).split("/")
    # owner and repo cannot contain "/" in this form
    if len(parts) != 3 or not all(parts):
        raise UrlParseError(text)
    host, owner, repo = parts
    return RepoInfo(host=host, owner=owner, repo=repo)


def _split_owner_repo(path: str, host: str, original: str) -> RepoInfo:
    owner, sep, repo = path.partition("/")
    if not sep or not owner or not repo:
        raise UrlParseError(original)
    return RepoInfo(host=host, owner=owner, repo=repo)


def _strip_git_suffix(path: str) -> str:
    if path.endswith(".git"):
        return path[: -len(".git")]
    return path


__all__ = ["CLONE_METHODS", "parse_repo_url", "determine_clone_url"]
