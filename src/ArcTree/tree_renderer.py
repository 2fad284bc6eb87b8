"""ASCII rendering and statistics for reconstructed trees."""

from __future__ import annotations

from typing import Iterable, Iterator

from ArcTree.models import TreeStats
from ArcTree.tree_node import TreeNode


def iter_nodes(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield *nodes* and all their descendants depth-first, parents first."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def max_depth(nodes: Iterable[TreeNode]) -> int:
    """Return the number of levels below and including the archive root.

    An empty forest has depth 1 (only the root level itself).
    """
    deepest = 1
    stack = [(node, 2) for node in nodes]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in node.children)
    return deepest


def tree_stats(root: TreeNode) -> TreeStats:
    """Count entries, directories and synthesized nodes below *root*."""
    stats = TreeStats(roots=len(root.children), max_depth=max_depth(root.children))
    for node in iter_nodes(root.children):
        if node.is_synthetic:
            stats.synthesized += 1
            continue
        stats.entries += 1
        if node.is_directory:
            stats.directories += 1
    return stats


def render_tree(nodes: Iterable[TreeNode]) -> str:
    """Render nodes as an ASCII tree, children in insertion order.

    Example output:
        ├── docs/
        │   ├── index.md
        │   └── guide.md
        └── README.md
    """
    lines: list[str] = []
    stack = _with_connectors(list(nodes), prefix="")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{node.basename()}")

        if node.children:
            extension = "    " if is_last else "│   "
            stack.extend(_with_connectors(node.children, prefix + extension))
    return "\n".join(lines)


def _with_connectors(
    nodes: list[TreeNode], prefix: str
) -> list[tuple[TreeNode, str, bool]]:
    """Stack frames for *nodes*, reversed so the first one pops first."""
    last = len(nodes) - 1
    return [(node, prefix, i == last) for i, node in reversed(list(enumerate(nodes)))]
