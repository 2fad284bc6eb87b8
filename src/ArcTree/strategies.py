"""Parent resolution strategies used by the tree builders.

A strategy answers two questions for the builder: may ``candidate`` be the
parent of ``child``, and how is ``child`` hung below a chosen parent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ArcTree.errors import InconsistentHierarchyError
from ArcTree.path_utils import SEPARATOR, relative_name, substring_to_last
from ArcTree.tree_node import TreeNode


class StrategyType(Enum):
    DIRECTORY_FLAG = "directory_flag"
    SEPARATOR_SYNTHESIS = "separator_synthesis"


class MissingDirectoryPolicy(Enum):
    """What the strict strategy does with separators inside a relative name."""

    TOLERATE = "tolerate"
    RAISE = "raise"


class ResolutionStrategy(ABC):
    """Base class for parent resolution strategies."""

    strategy_type: StrategyType

    @abstractmethod
    def is_valid_parent(self, candidate: TreeNode, child: TreeNode) -> bool:
        """Return True if *child* may be placed somewhere below *candidate*."""

    @abstractmethod
    def attach(self, candidate: TreeNode, child: TreeNode) -> TreeNode:
        """Hang *child* below *candidate*.

        Returns the node that became the direct child of *candidate*, which
        is *child* itself unless intermediate nodes were created.
        """

    def attach_root(self, root: TreeNode, child: TreeNode) -> TreeNode:
        """Place *child* at the root level (no valid parent was found)."""
        root.add_child(child)
        return child

    def create_node(self, entry: Any) -> TreeNode:
        """Return the node the builder places for *entry*."""
        return TreeNode.from_entry(entry)


def _is_proper_prefix(prefix: str, path: str) -> bool:
    return len(path) > len(prefix) and path.startswith(prefix)


class DirectoryFlagStrategy(ResolutionStrategy):
    """Parents must be explicit directory entries.

    A parent is a directory entry whose path ends with the separator and is a
    proper prefix of the child path. Separators inside the rest of the path
    are not boundaries, so basenames may contain ``/`` as long as every
    structural directory has its own entry. With
    ``MissingDirectoryPolicy.RAISE`` a separator inside a relative name is
    treated as an undeclared directory.
    """

    strategy_type = StrategyType.DIRECTORY_FLAG

    def __init__(
        self,
        missing_directories: MissingDirectoryPolicy = MissingDirectoryPolicy.TOLERATE,
    ):
        self.missing_directories = MissingDirectoryPolicy(missing_directories)

    def is_valid_parent(self, candidate: TreeNode, child: TreeNode) -> bool:
        return (
            candidate.is_directory
            and candidate.path.endswith(SEPARATOR)
            and _is_proper_prefix(candidate.path, child.path)
        )

    def attach(self, candidate: TreeNode, child: TreeNode) -> TreeNode:
        self._check_relative_name(candidate.path, child)
        candidate.add_child(child)
        return child

    def attach_root(self, root: TreeNode, child: TreeNode) -> TreeNode:
        self._check_relative_name(root.path, child)
        return super().attach_root(root, child)

    def _check_relative_name(self, parent_path: str, child: TreeNode) -> None:
        if self.missing_directories is MissingDirectoryPolicy.TOLERATE:
            return
        name = relative_name(child.path, parent_path)
        implied = substring_to_last(name, SEPARATOR, 1)
        if implied:
            raise InconsistentHierarchyError(child.path, parent_path + implied)


class SeparatorSynthesisStrategy(ResolutionStrategy):
    """Every separator is a hierarchy boundary; missing directories are made up.

    The directory flag is not consulted: any entry whose path ends with the
    separator is placed as a directory. Synthesized directories carry no
    payload.
    """

    strategy_type = StrategyType.SEPARATOR_SYNTHESIS

    def create_node(self, entry: Any) -> TreeNode:
        node = TreeNode.from_entry(entry)
        if node.path.endswith(SEPARATOR):
            node.is_directory = True
        return node

    def is_valid_parent(self, candidate: TreeNode, child: TreeNode) -> bool:
        return candidate.path.endswith(SEPARATOR) and _is_proper_prefix(
            candidate.path, child.path
        )

    def attach(self, candidate: TreeNode, child: TreeNode) -> TreeNode:
        top = child
        # Walk the relative name right to left, one segment per step
        remaining = substring_to_last(relative_name(child.path, candidate.path), SEPARATOR, 1)
        while remaining:
            directory = TreeNode.synthetic(candidate.path + remaining)
            directory.add_child(top)
            top = directory
            remaining = substring_to_last(remaining, SEPARATOR, 1)
        candidate.add_child(top)
        return top


def create_strategy(
    strategy: StrategyType | str = StrategyType.DIRECTORY_FLAG,
    missing_directories: MissingDirectoryPolicy | str = MissingDirectoryPolicy.TOLERATE,
) -> ResolutionStrategy:
    """Return the strategy implementation for *strategy*."""
    strategy = StrategyType(strategy)
    if strategy is StrategyType.DIRECTORY_FLAG:
        return DirectoryFlagStrategy(MissingDirectoryPolicy(missing_directories))
    return SeparatorSynthesisStrategy()
