"""Tests for loading and saving archive rules."""

import pytest

from archiver import RuleConfig, is_truthy
from storage import LocalDriver
from workflows import SETTINGS_FILE, SettingsError, load_rules, rules_from_dict, save_rules


@pytest.fixture
def driver(temp_dir):
    return LocalDriver(temp_dir)


class TestLoadRules:
    
    def test_missing_file_gives_defaults(self, driver):
        assert load_rules(driver) == RuleConfig.create()
    
    def test_empty_file_gives_defaults(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "")
        assert load_rules(driver) == RuleConfig.create()
    
    def test_partial_file(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "archive_root: Old\ntags: done, finished\ndry_run: 'yes'\n")
        rules = load_rules(driver)
        assert rules.archive_root == "Old"
        assert rules.tags == ("done", "finished")
        assert rules.dry_run is True
        assert rules.property_names == ("Archived",)
    
    def test_empty_root_is_normalized(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "archive_root: ''\n")
        assert load_rules(driver).archive_root == "Archive"
    
    def test_custom_path(self, driver, write_doc):
        write_doc("config/rules.yaml", "archive_root: Attic\n")
        assert load_rules(driver, "config/rules.yaml").archive_root == "Attic"
    
    def test_invalid_yaml_raises(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "archive_root: [Old\n")
        with pytest.raises(SettingsError):
            load_rules(driver)
    
    def test_non_mapping_raises(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "- Archive\n")
        with pytest.raises(SettingsError):
            load_rules(driver)


class TestSaveRules:
    
    def test_save_then_load(self, driver):
        rules = RuleConfig.create(
            property_names=["Archived", "Done"],
            tags=["old"],
            archive_root="Attic",
            excluded_roots=["Templates"],
            unarchive_on_missing_all=False,
        )
        save_rules(driver, rules)
        assert load_rules(driver) == rules
    
    def test_overwrites_existing(self, driver):
        save_rules(driver, RuleConfig.create(archive_root="One"))
        save_rules(driver, RuleConfig.create(archive_root="Two"))
        assert load_rules(driver).archive_root == "Two"


class TestRulesFromDict:
    
    def test_scalar_list_value(self):
        assert rules_from_dict({"excluded_roots": "Daily"}).excluded_roots == ("Daily",)
    
    def test_null_list_uses_default(self):
        assert rules_from_dict({"tags": None}).tags == ("archived",)


class TestPlainScalars:
    
    def test_documented_example_loads_as_written(self, driver, write_doc):
        write_doc(SETTINGS_FILE, (
            "property_names: [Archived]\n"
            "extra_truthy_values: [yes, y, archived, done]\n"
            "tags: [archived]\n"
            "archive_root: Archive\n"
            "excluded_roots: [No, Templates]\n"
            "dry_run: false\n"
            "show_notice: true\n"
            "unarchive_on_missing_all: true\n"
        ))
        rules = load_rules(driver)
        assert rules.extra_truthy_values == ("yes", "y", "archived", "done")
        assert rules.excluded_roots == ("No", "Templates")
        assert rules.dry_run is False
        assert rules.show_notice is True
        assert rules == RuleConfig.create(excluded_roots=["No", "Templates"])
    
    def test_loaded_yes_is_truthy(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "extra_truthy_values: [yes, done]\n")
        assert is_truthy("yes", load_rules(driver))
    
    def test_unquoted_flags(self, driver, write_doc):
        write_doc(SETTINGS_FILE, "dry_run: yes\nshow_notice: off\n")
        rules = load_rules(driver)
        assert rules.dry_run is True
        assert rules.show_notice is False
