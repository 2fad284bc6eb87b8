"""Tests for file_filter module."""

from ArcTree.file_filter import (
    compile_patterns,
    filter_entries,
    matches_any_pattern,
    parse_pattern_input,
    validate_patterns,
)
from ArcTree.models import PathEntry


class TestParsePatternInput:
    def test_empty_string(self):
        assert parse_pattern_input("") == []

    def test_whitespace_only(self):
        assert parse_pattern_input("   ") == []

    def test_splits_and_strips(self):
        assert parse_pattern_input(r" \.py$ , ^docs/ ,, ") == [r"\.py$", "^docs/"]


class TestValidatePatterns:
    def test_valid(self):
        assert validate_patterns([r"\.py$", "^src/"]) == []

    def test_invalid(self):
        errors = validate_patterns(["(unclosed", r"\.md$"])
        assert len(errors) == 1
        assert "(unclosed" in errors[0]


class TestCompilePatterns:
    def test_skips_invalid(self):
        compiled = compile_patterns(["[bad", r"\.txt$"])
        assert len(compiled) == 1
        assert compiled[0].pattern == r"\.txt$"


class TestMatchesAnyPattern:
    def test_no_patterns_match_everything(self):
        assert matches_any_pattern("anything", []) is True

    def test_search_anywhere(self):
        compiled = compile_patterns(["lib"])
        assert matches_any_pattern("src/lib/util.py", compiled) is True
        assert matches_any_pattern("src/main.py", compiled) is False


class TestFilterEntries:
    def test_keeps_directories(self):
        entries = [
            PathEntry("src/", True),
            PathEntry("src/main.py"),
            PathEntry("src/README.md"),
            PathEntry("docs/", True),
        ]
        kept = filter_entries(entries, compile_patterns([r"\.py$"]))
        assert [e.path for e in kept] == ["src/", "src/main.py", "docs/"]

    def test_no_patterns_keeps_all(self):
        entries = [PathEntry("a"), PathEntry("b/", True)]
        assert filter_entries(entries, []) == entries
