"""Abstract base class for repository providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ArcTree.models import PathEntry, RepoInfo
from ArcTree.path_utils import SEPARATOR


class RepoProvider(ABC):
    """Base class for Git hosting services that list a branch as flat entries."""

    @abstractmethod
    def get_default_branch(self, repo_info: RepoInfo) -> str:
        """Return the default branch name for the repository."""

    @abstractmethod
    def list_entries(self, repo_info: RepoInfo) -> list[PathEntry]:
        """List every file and directory of the branch as path entries."""

    def resolve_branch(self, repo_info: RepoInfo) -> str:
        """Return the requested branch, looking up the default one if unset."""
        if not repo_info.branch:
            repo_info.branch = self.get_default_branch(repo_info)
        return repo_info.branch


def directory_entry(path: str) -> PathEntry:
    """Directory entry in archive convention (trailing separator)."""
    if not path.endswith(SEPARATOR):
        path += SEPARATOR
    return PathEntry(path=path, is_directory=True)
