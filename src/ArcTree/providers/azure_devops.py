"""Azure DevOps REST API provider."""

from __future__ import annotations

import requests

from ArcTree.models import PathEntry, RepoInfo
from ArcTree.providers.base import RepoProvider, directory_entry


class AzureDevOpsError(Exception):
    """Raised for Azure DevOps API errors."""


class AzureDevOpsProvider(RepoProvider):
    """Lists Azure DevOps branches through the items API."""

    API_VERSION = "7.1-preview.1"
    TIMEOUT = 30

    def __init__(self, pat: str | None = None):
        self.session = requests.Session()
        self.session.headers["User-Agent"] = "ArcTree/1.0"
        if pat:
            self.session.auth = ("", pat)

    def _api_base(self, repo_info: RepoInfo) -> str:
        return (
            f"https://dev.azure.com/{repo_info.owner}/{repo_info.project}"
            f"/_apis/git/repositories/{repo_info.repo}"
        )

    def _api_get(
        self,
        repo_info: RepoInfo,
        path: str,
        params: dict | None = None,
    ) -> dict:
        url = f"{self._api_base(repo_info)}{path}"
        params = dict(params or {})
        params["api-version"] = self.API_VERSION

        resp = self.session.get(url, params=params, timeout=self.TIMEOUT)

        if resp.status_code == 404:
            raise AzureDevOpsError(
                "Repository not found. Check the URL, or provide a PAT for private repos."
            )
        if resp.status_code == 401:
            raise AzureDevOpsError(
                "Authentication failed. Check your Personal Access Token."
            )
        if resp.status_code == 403:
            raise AzureDevOpsError(
                "Access denied. The PAT may lack permissions."
            )
        resp.raise_for_status()
        return resp.json()

    def get_default_branch(self, repo_info: RepoInfo) -> str:
        data = self._api_get(repo_info, "")
        default = data.get("defaultBranch", "refs/heads/main")
        return default.removeprefix("refs/heads/")

    def list_entries(self, repo_info: RepoInfo) -> list[PathEntry]:
        branch = self.resolve_branch(repo_info)
        params = {
            "recursionLevel": "Full",
            "versionDescriptor.version": branch,
            "versionDescriptor.versionType": "branch",
        }
        data = self._api_get(repo_info, "/items", params=params)

        entries: list[PathEntry] = []
        for item in data.get("value", []):
            path = item.get("path", "").lstrip("/")
            if not path:
                # The repository root folder itself
                continue
            if item.get("isFolder"):
                entries.append(directory_entry(path))
            else:
                entries.append(PathEntry(path=path, size=item.get("size", 0)))
        return entries
