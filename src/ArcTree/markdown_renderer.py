"""Markdown report assembly."""

from __future__ import annotations

from ArcTree.tree_node import TreeNode
from ArcTree.tree_renderer import render_tree, tree_stats


def render_markdown(title: str, root: TreeNode) -> str:
    """Render a built tree as a Markdown document.

    Args:
        title: e.g. "owner/repo" or an archive file name
        root: synthetic root returned by ``TreeBuilder.build_tree``
    """
    stats = tree_stats(root)
    parts: list[str] = []

    parts.append(f"# Archive: {title}\n")

    parts.append("## Summary\n")
    parts.append(f"- Entries: {stats.entries}")
    parts.append(f"- Directories: {stats.directories}")
    parts.append(f"- Synthesized directories: {stats.synthesized}")
    parts.append(f"- Root nodes: {stats.roots}")
    parts.append(f"- Depth: {stats.max_depth}\n")

    parts.append("## File Structure\n")
    parts.append("```")
    parts.append(render_tree(root.children))
    parts.append("```\n")

    return "\n".join(parts)
