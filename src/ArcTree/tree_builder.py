"""Rebuild the directory hierarchy implied by flat archive entry paths.

Archives key their entries by path string only; there is no parent/child
relation. Sorting the entries by path puts every directory right before the
run of paths nested inside it, which lets a single linear pass find each
entry's parent by walking up from the previously placed node.

Example::

    >>> root = build_tree([PathEntry("docs/", True), PathEntry("docs/a.md")])
    >>> [child.path for child in root.children]
    ['docs/']
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Iterable

from ArcTree.directory_index import DirectoryIndex
from ArcTree.errors import InternalInvariantError, InvalidInputError
from ArcTree.strategies import (
    MissingDirectoryPolicy,
    ResolutionStrategy,
    StrategyType,
    create_strategy,
)
from ArcTree.tree_node import TreeNode

logger = logging.getLogger(__name__)

# Above this many entries the directory index beats walking parent chains
LARGE_INPUT_THRESHOLD = 10_000

_entry_path = attrgetter("path")


def validate_entries(entries: list[Any]) -> None:
    """Raise InvalidInputError unless every entry has a non-empty string path."""
    for position, entry in enumerate(entries):
        if entry is None:
            raise InvalidInputError(f"Entry #{position} is None")
        path = getattr(entry, "path", None)
        if path is None:
            raise InvalidInputError(f"Entry #{position} has no path")
        if not isinstance(path, str):
            raise InvalidInputError(f"Entry #{position} path is not a string: {path!r}")
        if not path:
            # "" is reserved for the synthetic root
            raise InvalidInputError(f"Entry #{position} has an empty path")
        if getattr(entry, "is_directory", None) is None:
            raise InvalidInputError(f"Entry '{path}' has no directory flag")


def sort_entries(entries: Iterable[Any]) -> list[Any]:
    """Sort entries by path, in place when *entries* is a list.

    ``list.sort`` is a stable Timsort, which runs in linear time on the
    already (or mostly) sorted listings archive writers usually produce.
    Any other iterable is copied into a new list first.
    """
    if not isinstance(entries, list):
        entries = list(entries)
    entries.sort(key=_entry_path)
    return entries


class TreeBuilder:
    """Builds trees of :class:`TreeNode` from path entries.

    The builder only holds configuration. Each call keeps its walk state and
    directory index to itself, so an instance can be shared freely.

    Args:
        strategy: Which parent resolution strategy to use.
        missing_directories: Policy of the directory flag strategy for
            relative names that contain separators.
        use_index: ``True`` resolves parents through a :class:`DirectoryIndex`
            (directory flag strategy only), ``False`` walks ancestor chains,
            ``None`` picks the index for inputs above
            ``LARGE_INPUT_THRESHOLD`` entries.
    """

    def __init__(
        self,
        strategy: StrategyType | str = StrategyType.DIRECTORY_FLAG,
        *,
        missing_directories: MissingDirectoryPolicy | str = MissingDirectoryPolicy.TOLERATE,
        use_index: bool | None = None,
    ):
        self.strategy: ResolutionStrategy = create_strategy(strategy, missing_directories)
        if use_index and self.strategy.strategy_type is not StrategyType.DIRECTORY_FLAG:
            raise ValueError("The directory index requires the directory flag strategy")
        self.use_index = use_index

    def build_tree(self, entries: Iterable[Any]) -> TreeNode:
        """Return a synthetic root (empty path, no payload) holding the tree.

        Side effect: a list passed as *entries* is sorted in place.
        """
        if not isinstance(entries, list):
            entries = list(entries)
        validate_entries(entries)
        sort_entries(entries)

        root = TreeNode.synthetic("")
        indexed = self._should_index(len(entries))
        if indexed:
            self._build_indexed(entries, root)
        else:
            self._build_by_walking(entries, root)

        logger.debug(
            "Built tree from %d entries with %s (%s): %d root nodes",
            len(entries),
            self.strategy.strategy_type.value,
            "index" if indexed else "ancestor walk",
            len(root.children),
        )
        return root

    def build_roots(self, entries: Iterable[Any]) -> list[TreeNode]:
        """Like :meth:`build_tree` but return the parentless root-level nodes."""
        root = self.build_tree(entries)
        roots = root.children
        root.children = []
        for node in roots:
            node.parent = None
        return roots

    def _should_index(self, entry_count: int) -> bool:
        if self.use_index is not None:
            return self.use_index
        return (
            self.strategy.strategy_type is StrategyType.DIRECTORY_FLAG
            and entry_count > LARGE_INPUT_THRESHOLD
        )

    def _build_by_walking(self, entries: list[Any], root: TreeNode) -> None:
        previous = root
        for entry in entries:
            node = self.strategy.create_node(entry)
            parent = self._find_parent(previous, node, root)
            if parent is root:
                self.strategy.attach_root(root, node)
            else:
                self.strategy.attach(parent, node)
            # Continue from the entry itself, not from nodes synthesized above it
            previous = node

    def _find_parent(self, start: TreeNode, node: TreeNode, root: TreeNode) -> TreeNode:
        current = start
        # Paths shrink strictly on the way up, so the chain has at most len + 1 nodes
        for _ in range(len(start.path) + 1):
            if current is root or self.strategy.is_valid_parent(current, node):
                return current
            current = current.parent
        raise InternalInvariantError(
            f"Ancestor walk from '{start.path}' for '{node.path}' did not reach the root"
        )

    def _build_indexed(self, entries: list[Any], root: TreeNode) -> None:
        index = DirectoryIndex(entries)
        for entry in entries:
            node = index.node_for(entry)
            parent = index.find_parent(entry.path)
            if parent is None:
                self.strategy.attach_root(root, node)
            else:
                self.strategy.attach(parent, node)


def build_tree(
    entries: Iterable[Any],
    strategy: StrategyType | str = StrategyType.DIRECTORY_FLAG,
    **options: Any,
) -> TreeNode:
    """Shortcut for ``TreeBuilder(strategy, **options).build_tree(entries)``."""
    return TreeBuilder(strategy, **options).build_tree(entries)
