"""Glue between entry sources, the tree builder and the renderers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable

from ArcTree.file_filter import filter_entries
from ArcTree.markdown_renderer import render_markdown
from ArcTree.models import PathEntry, RepoInfo, SourceType, TreeStats
from ArcTree.providers.azure_devops import AzureDevOpsProvider
from ArcTree.providers.base import RepoProvider
from ArcTree.providers.github import GitHubProvider
from ArcTree.strategies import MissingDirectoryPolicy, StrategyType
from ArcTree.tree_builder import TreeBuilder
from ArcTree.tree_node import TreeNode
from ArcTree.tree_renderer import tree_stats
from ArcTree.url_parser import parse_repo_url

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    title: str
    root: TreeNode
    stats: TreeStats
    markdown: str


def make_provider(
    repo_info: RepoInfo,
    github_token: str | None = None,
    azdo_pat: str | None = None,
) -> RepoProvider:
    """Return the provider for *repo_info*, ignoring blank tokens."""
    if repo_info.source == SourceType.GITHUB:
        return GitHubProvider(token=(github_token or "").strip() or None)
    return AzureDevOpsProvider(pat=(azdo_pat or "").strip() or None)


def list_repo_entries(
    url: str,
    github_token: str | None = None,
    azdo_pat: str | None = None,
) -> tuple[RepoInfo, list[PathEntry]]:
    """Parse *url* and list the repository branch as path entries."""
    repo_info = parse_repo_url(url)
    provider = make_provider(repo_info, github_token, azdo_pat)
    entries = provider.list_entries(repo_info)
    logger.info(
        "Listed %d entries from %s/%s@%s",
        len(entries),
        repo_info.owner,
        repo_info.repo,
        repo_info.branch,
    )
    return repo_info, entries


def build_report(
    title: str,
    entries: Iterable[Any],
    strategy: StrategyType | str = StrategyType.DIRECTORY_FLAG,
    missing_directories: MissingDirectoryPolicy | str = MissingDirectoryPolicy.TOLERATE,
    patterns: list[re.Pattern[str]] | None = None,
) -> BuildReport:
    """Filter *entries*, rebuild their tree and render it.

    Tree construction errors propagate unchanged.
    """
    selected = filter_entries(entries, patterns or [])
    builder = TreeBuilder(strategy, missing_directories=missing_directories)
    root = builder.build_tree(selected)
    return BuildReport(
        title=title,
        root=root,
        stats=tree_stats(root),
        markdown=render_markdown(title, root),
    )
