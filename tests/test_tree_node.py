"""Tests for tree_node module."""

import pytest

from ArcTree.errors import InvalidInputError
from ArcTree.models import PathEntry
from ArcTree.tree_node import TreeNode


class TestFromEntry:
    def test_copies_path_and_flag(self):
        entry = PathEntry("docs/", is_directory=True)
        node = TreeNode.from_entry(entry)
        assert node.payload is entry
        assert node.path == "docs/"
        assert node.is_directory is True
        assert node.parent is None
        assert node.children == []

    def test_synthetic_has_no_payload(self):
        node = TreeNode.synthetic("a/b/")
        assert node.is_synthetic
        assert node.is_directory


class TestAddChild:
    def test_sets_back_reference(self):
        parent = TreeNode.synthetic("a/")
        child = TreeNode.from_entry(PathEntry("a/file"))
        parent.add_child(child)
        assert parent.children == [child]
        assert child.parent is parent

    def test_keeps_insertion_order(self):
        parent = TreeNode.synthetic("")
        names = ["z", "a", "m"]
        for name in names:
            parent.add_child(TreeNode.from_entry(PathEntry(name)))
        assert [c.path for c in parent.children] == names

    def test_file_cannot_own_children(self):
        leaf = TreeNode.from_entry(PathEntry("a"))
        with pytest.raises(InvalidInputError, match="not a directory"):
            leaf.add_child(TreeNode.from_entry(PathEntry("ab")))

    def test_child_must_extend_parent_path(self):
        parent = TreeNode.synthetic("a/")
        with pytest.raises(InvalidInputError, match="does not start with"):
            parent.add_child(TreeNode.from_entry(PathEntry("b/file")))


class TestBasename:
    def test_root_level_uses_full_path(self):
        assert TreeNode.from_entry(PathEntry("a/directory/d")).basename() == "a/directory/d"

    def test_relative_to_parent(self):
        parent = TreeNode.synthetic("directory/")
        child = TreeNode.from_entry(PathEntry("directory/f/f"))
        parent.add_child(child)
        assert child.basename() == "f/f"

    def test_identity_equality(self):
        entry = PathEntry("x")
        assert TreeNode.from_entry(entry) != TreeNode.from_entry(entry)
