"""Tests for markdown_renderer module."""

from ArcTree.markdown_renderer import render_markdown
from ArcTree.models import PathEntry
from ArcTree.tree_builder import build_tree


class TestRenderMarkdown:
    def test_basic_output_structure(self):
        root = build_tree([PathEntry("docs/", True), PathEntry("docs/index.md")])
        result = render_markdown("owner/repo", root)

        assert "# Archive: owner/repo" in result
        assert "## Summary" in result
        assert "## File Structure" in result
        assert "└── docs/" in result
        assert "    └── index.md" in result

    def test_summary_counts(self):
        root = build_tree([
            PathEntry("a/", True),
            PathEntry("a/b/c"),
            PathEntry("d"),
        ], "separator_synthesis")
        result = render_markdown("demo.zip", root)

        assert "- Entries: 3" in result
        assert "- Directories: 1" in result
        assert "- Synthesized directories: 1" in result
        assert "- Root nodes: 2" in result
        assert "- Depth: 4" in result

    def test_structure_is_fenced(self):
        root = build_tree([PathEntry("x")])
        lines = render_markdown("t", root).split("\n")
        start = lines.index("## File Structure")
        assert lines[start + 2] == "```"
        assert lines[start + 3] == "└── x"
        assert lines[start + 4] == "```"

    def test_empty_tree(self):
        result = render_markdown("empty.zip", build_tree([]))
        assert "- Entries: 0" in result
        assert "- Depth: 1" in result
