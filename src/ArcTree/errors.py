"""Errors raised while reconstructing a tree from flat entries.

Every error aborts the current build; no partial tree is returned.
"""

from __future__ import annotations


class TreeBuildError(Exception):
    """Base class for all tree construction errors."""


class InvalidInputError(TreeBuildError, ValueError):
    """Raised when an entry or its path is missing, or a path is empty."""


class DuplicateDirectoryError(TreeBuildError, ValueError):
    """Raised when two directory entries share a path in a DirectoryIndex."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Duplicate directory entry: '{path}'")


class InconsistentHierarchyError(TreeBuildError):
    """Raised when a path implies a directory that has no directory entry."""

    def __init__(self, path: str, implied_directory: str):
        self.path = path
        self.implied_directory = implied_directory
        super().__init__(
            f"'{path}' is nested in '{implied_directory}', "
            "but no directory entry exists for it."
        )


class InternalInvariantError(TreeBuildError, RuntimeError):
    """Raised when a bounded loop overruns. Always a bug, never bad input."""
