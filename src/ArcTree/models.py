"""Data classes for ArcTree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SourceType(Enum):
    GITHUB = "github"
    AZURE_DEVOPS = "azure_devops"


@dataclass
class RepoInfo:
    source: SourceType
    owner: str
    repo: str
    branch: str | None = None
    project: str | None = None  # Azure DevOps only
    raw_url: str = ""


@dataclass(frozen=True)
class PathEntry:
    """One flat archive entry: a ``/``-separated path and its directory flag."""

    path: str
    is_directory: bool = False
    size: int = 0


@dataclass
class TreeStats:
    entries: int = 0
    directories: int = 0
    synthesized: int = 0
    roots: int = 0
    max_depth: int = 1
