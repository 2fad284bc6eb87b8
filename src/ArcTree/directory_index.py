"""Hash index from directory path to node, used for longest-prefix lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ArcTree.errors import DuplicateDirectoryError, InternalInvariantError, InvalidInputError
from ArcTree.path_utils import SEPARATOR, substring_to_last
from ArcTree.tree_node import TreeNode


@dataclass
class _LookupCache:
    """Remembers the most recent successful lookup."""

    key: str | None = None
    node: TreeNode | None = None

    def get(self, key: str) -> TreeNode | None:
        return self.node if key == self.key else None

    def put(self, key: str, node: TreeNode) -> None:
        self.key = key
        self.node = node


class DirectoryIndex:
    """Maps every directory entry path to a fresh TreeNode.

    Built once per build call from all entries and only read afterwards.
    Runs of siblings usually resolve to the same parent, so the last hit is
    kept in a single-slot cache that is consulted before the dict.
    """

    def __init__(self, entries: Iterable[Any]):
        self._nodes: dict[str, TreeNode] = {}
        self._cache = _LookupCache()
        for entry in entries:
            if not entry.is_directory:
                continue
            path = entry.path
            if not path:
                raise InvalidInputError("Directory entry path must not be empty")
            if path in self._nodes:
                raise DuplicateDirectoryError(path)
            self._nodes[path] = TreeNode.from_entry(entry)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, path: str) -> bool:
        return path in self._nodes

    def get(self, path: str, allow_caching: bool = False) -> TreeNode | None:
        node = self._cache.get(path)
        if node is not None:
            return node
        node = self._nodes.get(path)
        if node is not None and allow_caching:
            self._cache.put(path, node)
        return node

    def node_for(self, entry: Any) -> TreeNode:
        """Return the indexed node of a directory entry, or a new leaf node."""
        if entry.is_directory:
            node = self._nodes.get(entry.path)
            if node is None:
                raise InternalInvariantError(f"Directory '{entry.path}' missing from index")
            return node
        return TreeNode.from_entry(entry)

    def find_parent(self, path: str) -> TreeNode | None:
        """Return the directory node with the longest proper prefix of *path*.

        Trailing segments are stripped one at a time (a directory's own
        trailing separator included, so it never resolves to itself).
        Returns None when nothing matches and the entry belongs to the root.
        """
        if not path:
            raise InvalidInputError("Entry path must not be empty")
        candidate = substring_to_last(path, SEPARATOR, 1)
        # Each step removes at least one character
        for _ in range(len(path) + 1):
            if not candidate:
                return None
            node = self.get(candidate, allow_caching=True)
            if node is not None:
                return node
            candidate = substring_to_last(candidate, SEPARATOR, 1)
        raise InternalInvariantError(f"Prefix search for '{path}' did not terminate")
