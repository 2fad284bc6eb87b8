"""Mutable tree nodes produced by the tree builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ArcTree.errors import InvalidInputError


@dataclass(eq=False)
class TreeNode:
    """A directory or file in a reconstructed archive hierarchy.

    ``payload`` is the originating entry, or ``None`` for directories that
    were synthesized from separators and for the synthetic root (whose path
    is the empty string). ``path`` never changes after creation; only
    ``parent`` and ``children`` are updated while a tree is built.
    """

    payload: Any
    path: str
    is_directory: bool = False
    parent: TreeNode | None = field(default=None, repr=False)
    children: list[TreeNode] = field(default_factory=list, repr=False)

    @classmethod
    def from_entry(cls, entry: Any) -> TreeNode:
        return cls(payload=entry, path=entry.path, is_directory=bool(entry.is_directory))

    @classmethod
    def synthetic(cls, path: str) -> TreeNode:
        return cls(payload=None, path=path, is_directory=True)

    @property
    def is_synthetic(self) -> bool:
        return self.payload is None

    def add_child(self, child: TreeNode) -> None:
        """Append *child* and point its parent back at this node."""
        if not self.is_directory:
            raise InvalidInputError(
                f"'{self.path}' is not a directory and cannot own '{child.path}'"
            )
        if not child.path.startswith(self.path):
            raise InvalidInputError(
                f"'{child.path}' does not start with its parent path '{self.path}'"
            )
        self.children.append(child)
        child.parent = self

    def basename(self) -> str:
        """Path relative to the parent (the full path for root-level nodes)."""
        if self.parent is None:
            return self.path
        return self.path[len(self.parent.path):]
