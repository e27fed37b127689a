"""Tests for vault path helpers."""

import pytest

from archiver.paths import (
    is_excluded,
    is_under_root,
    join,
    normalize,
    split_dir_and_name,
    strip_root_prefix,
)


class TestNormalize:
    
    @pytest.mark.parametrize("raw, expected", [
        ("Task/TASK-1.md", "Task/TASK-1.md"),
        ("Task\\Sub\\a.md", "Task/Sub/a.md"),
        ("Task//Sub///a.md", "Task/Sub/a.md"),
        ("/Archive/", "Archive"),
        ("Archive///", "Archive"),
        ("", ""),
        (None, ""),
    ])
    def test_normalize(self, raw, expected):
        assert normalize(raw) == expected
    
    def test_non_breaking_space_becomes_space(self):
        assert normalize("My\u00a0Notes/a.md") == "My Notes/a.md"


class TestIsUnderRoot:
    
    def test_root_itself(self):
        assert is_under_root("Archive", "Archive") is True
    
    def test_child(self):
        assert is_under_root("Archive/Task/a.md", "Archive") is True
    
    def test_trailing_separator_on_root(self):
        assert is_under_root("Archive/a.md", "Archive/") is True
    
    def test_sibling_with_common_prefix(self):
        assert is_under_root("Archived/a.md", "Archive") is False
    
    def test_outside(self):
        assert is_under_root("Task/a.md", "Archive") is False


class TestIsExcluded:
    
    def test_under_prefix(self):
        assert is_excluded("Templates/daily.md", ["Daily", "Templates"]) is True
    
    def test_common_prefix_is_not_excluded(self):
        assert is_excluded("TemplatesOld/daily.md", ["Templates"]) is False
    
    def test_empty_prefixes_are_ignored(self):
        assert is_excluded("note.md", ["", "/"]) is False
    
    def test_no_prefixes(self):
        assert is_excluded("note.md", []) is False


class TestSplitting:
    
    def test_strip_root_prefix(self):
        assert strip_root_prefix("Archive/Task/a.md", "Archive/") == "Task/a.md"
    
    def test_split_with_dir(self):
        assert split_dir_and_name("Task/Sub/a.md") == ("Task/Sub", "a.md")
    
    def test_split_without_dir(self):
        assert split_dir_and_name("a.md") == ("", "a.md")
    
    def test_join_skips_empty_parts(self):
        assert join("Archive", "", "a.md") == "Archive/a.md"
