"""Repository URL parsing and source auto-detection."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from ArcTree.models import RepoInfo, SourceType


class URLParseError(Exception):
    """Raised when a URL cannot be parsed."""


_AZDO_BRANCH = re.compile(r"(?:^|&)version=GB([^&]+)")


def parse_repo_url(url: str) -> RepoInfo:
    """Parse a repository URL and return RepoInfo.

    Supported formats:
      - https://github.com/owner/repo[.git]
      - https://github.com/owner/repo/tree/branch/with/slashes
      - https://dev.azure.com/org/project/_git/repo[?version=GBbranch]
      - https://org.visualstudio.com/project/_git/repo[?version=GBbranch]
    """
    url = url.strip()
    if not url:
        raise URLParseError("URL is empty.")

    parsed = urlparse(url)
    if not parsed.scheme:
        raise URLParseError(f"Invalid URL (no scheme): {url}")
    if parsed.scheme not in ("http", "https"):
        raise URLParseError(f"Unsupported scheme: {parsed.scheme}")

    host = parsed.hostname or ""
    segments = [s for s in parsed.path.split("/") if s]

    if host == "github.com":
        return _parse_github(segments, url)
    if host == "dev.azure.com":
        if not segments:
            raise URLParseError(f"Azure DevOps URL must include an organization: {url}")
        return _parse_azure_devops(segments[0], segments[1:], parsed.query, url)
    if host.endswith(".visualstudio.com"):
        org = host.removesuffix(".visualstudio.com")
        return _parse_azure_devops(org, segments, parsed.query, url)
    raise URLParseError(f"Unsupported host: {host}")


def _parse_github(segments: list[str], raw_url: str) -> RepoInfo:
    # owner/repo[/tree/branch...]
    if len(segments) < 2:
        raise URLParseError(f"GitHub URL must include owner/repo: {raw_url}")

    branch = None
    if len(segments) >= 4 and segments[2] == "tree":
        branch = "/".join(segments[3:])

    return RepoInfo(
        source=SourceType.GITHUB,
        owner=segments[0],
        repo=segments[1].removesuffix(".git"),
        branch=branch,
        raw_url=raw_url,
    )


def _parse_azure_devops(
    org: str, segments: list[str], query: str, raw_url: str
) -> RepoInfo:
    # project/_git/repo
    if len(segments) < 3 or segments[1] != "_git":
        raise URLParseError(
            f"Azure DevOps URL must match project/_git/repo: {raw_url}"
        )

    match = _AZDO_BRANCH.search(query)
    return RepoInfo(
        source=SourceType.AZURE_DEVOPS,
        owner=org,
        repo=segments[2],
        branch=match.group(1) if match else None,
        project=segments[0],
        raw_url=raw_url,
    )
