"""GitHub REST API provider."""

from __future__ import annotations

import logging
import time

import requests

from ArcTree.models import PathEntry, RepoInfo
from ArcTree.providers.base import RepoProvider, directory_entry

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Raised for GitHub API errors."""


class RateLimitError(GitHubError):
    """Raised when GitHub rate limit is exceeded."""

    def __init__(self, reset_at: int):
        self.reset_at = reset_at
        wait = max(0, reset_at - int(time.time()))
        super().__init__(
            f"GitHub API rate limit exceeded. Resets in {wait} seconds."
        )


class GitHubProvider(RepoProvider):
    """Lists GitHub branches through the git trees API."""

    API_BASE = "https://api.github.com"
    TIMEOUT = 30

    def __init__(self, token: str | None = None):
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/vnd.github+json"
        self.session.headers["User-Agent"] = "ArcTree/1.0"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _check_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None and int(remaining) == 0:
            reset_at = int(response.headers.get("X-RateLimit-Reset", 0))
            raise RateLimitError(reset_at)

    def _api_get(self, path: str, params: dict | None = None) -> dict:
        url = f"{self.API_BASE}{path}"
        resp = self.session.get(url, params=params, timeout=self.TIMEOUT)
        self._check_rate_limit(resp)

        if resp.status_code == 404:
            raise GitHubError(
                "Repository not found. Check the URL, or provide a token for private repos."
            )
        if resp.status_code == 401:
            raise GitHubError("Authentication failed. Check your GitHub token.")
        if resp.status_code == 403:
            raise GitHubError(
                "Access denied. The token may lack permissions, or rate limit exceeded."
            )
        resp.raise_for_status()
        return resp.json()

    def _tree(self, repo_info: RepoInfo, ref: str, recursive: bool) -> dict:
        params = {"recursive": "1"} if recursive else None
        return self._api_get(
            f"/repos/{repo_info.owner}/{repo_info.repo}/git/trees/{ref}",
            params=params,
        )

    def get_default_branch(self, repo_info: RepoInfo) -> str:
        data = self._api_get(f"/repos/{repo_info.owner}/{repo_info.repo}")
        return data["default_branch"]

    def list_entries(self, repo_info: RepoInfo) -> list[PathEntry]:
        branch = self.resolve_branch(repo_info)
        data = self._tree(repo_info, branch, recursive=True)

        if data.get("truncated"):
            logger.warning(
                "Tree of %s/%s is truncated; walking sub-trees individually",
                repo_info.owner,
                repo_info.repo,
            )
            return self._list_entries_by_level(repo_info, data)

        entries, _ = _convert_items(data.get("tree", []), prefix="")
        return entries

    def _list_entries_by_level(
        self, repo_info: RepoInfo, initial_data: dict
    ) -> list[PathEntry]:
        """Complete a truncated listing by fetching one tree level at a time."""
        # Only the top level of a truncated response is complete
        top_level = [i for i in initial_data.get("tree", []) if "/" not in i["path"]]
        entries, pending = _convert_items(top_level, prefix="")

        while pending:
            prefix, sha = pending.pop()
            try:
                items = self._tree(repo_info, sha, recursive=False).get("tree", [])
            except RateLimitError:
                raise
            except GitHubError as exc:
                logger.warning("Skipping sub-tree %s: %s", prefix, exc)
                continue

            level, subtrees = _convert_items(items, prefix)
            entries.extend(level)
            pending.extend(subtrees)

        return entries


def _convert_items(
    items: list[dict], prefix: str
) -> tuple[list[PathEntry], list[tuple[str, str]]]:
    """Map git tree items to entries; also return (prefix, sha) of sub-trees."""
    entries: list[PathEntry] = []
    subtrees: list[tuple[str, str]] = []
    for item in items:
        path = prefix + item["path"]
        if item["type"] == "tree":
            entry = directory_entry(path)
            entries.append(entry)
            subtrees.append((entry.path, item.get("sha", "")))
        elif item["type"] == "blob":
            entries.append(PathEntry(path=path, size=item.get("size", 0)))
        # "commit" items are submodules and have no content of their own
    return entries, subtrees
