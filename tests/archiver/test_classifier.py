"""Tests for the archive classifier."""

import pytest

from archiver import DocumentSnapshot, RuleConfig, collect_tags, is_truthy, should_archive


@pytest.fixture
def rules():
    return RuleConfig.create(extra_truthy_values=["yes"])


def snap(fields=None, tags=None):
    return DocumentSnapshot.build("Task/TASK-1.md", fields, tags)


class TestIsTruthy:
    
    @pytest.mark.parametrize("value, expected", [
        (True, True),
        (False, False),
        (1, True),
        (1.0, True),
        (2, False),
        (0, False),
        ("TRUE", True),
        ("true", True),
        (" True ", True),
        ("1", True),
        ("yes", True),
        ("YES", True),
        ("no", False),
        ("", False),
        (None, False),
        ([True], False),
        ({"a": 1}, False),
    ])
    def test_truthy_matrix(self, rules, value, expected):
        assert is_truthy(value, rules) is expected
    
    def test_yes_needs_configuration(self):
        rules = RuleConfig.create(extra_truthy_values=[])
        assert is_truthy("yes", rules) is False


class TestFields:
    
    def test_field_name_is_case_insensitive(self, rules):
        assert should_archive(snap({"archived": True}), rules) is True
        assert should_archive(snap({"ARCHIVED": "true"}), rules) is True
    
    def test_falsy_field(self, rules):
        assert should_archive(snap({"Archived": False}), rules) is False
        assert should_archive(snap({"Archived": 2}), rules) is False
    
    def test_unconfigured_field_is_ignored(self, rules):
        assert should_archive(snap({"Status": True}), rules) is False
    
    def test_any_configured_field_matches(self):
        rules = RuleConfig.create(property_names=["Archived", "Done"])
        assert should_archive(snap({"Archived": False, "Done": "y"}), rules) is True
    
    def test_no_metadata(self, rules):
        assert should_archive(snap(), rules) is False


class TestTags:
    
    @pytest.mark.parametrize("tags", [["#Archived"], ["archived"], [" Archived "]])
    def test_inline_tag_variants(self, rules, tags):
        assert should_archive(snap(tags=tags), rules) is True
    
    def test_front_matter_list(self, rules):
        assert should_archive(snap({"tags": ["project", "#ARCHIVED"]}), rules) is True
    
    def test_front_matter_string_with_commas_and_spaces(self, rules):
        assert should_archive(snap({"tags": "project,  archived"}), rules) is True
        assert should_archive(snap({"tags": "project archived"}), rules) is True
    
    def test_tags_field_name_is_case_insensitive(self, rules):
        assert should_archive(snap({"Tags": "archived"}), rules) is True
    
    def test_configured_tag_with_marker(self):
        rules = RuleConfig.create(tags=["#Done"])
        assert should_archive(snap(tags=["done"]), rules) is True
    
    def test_other_tags_do_not_match(self, rules):
        assert should_archive(snap({"tags": ["archive-later"]}, tags=["archivedx"]), rules) is False
    
    def test_no_trigger_tags_configured(self):
        rules = RuleConfig.create(tags=[])
        assert should_archive(snap(tags=["archived"]), rules) is False
    
    def test_collect_tags_merges_sources(self):
        tags = collect_tags(snap({"tags": "A, b", "other": "c"}, tags=["#C", "a"]))
        assert tags == {"a", "b", "c"}
    
    def test_collect_tags_ignores_non_strings(self):
        assert collect_tags(snap({"tags": 5})) == set()
        assert collect_tags(snap({"tags": [1, None, "x"]})) == {"x"}
