"""Tests for the header text of the terminal UI."""

from archiver import RuleConfig
from textui import describe_flags, describe_rules


class TestHeaderText:
    
    def test_default_rules(self):
        assert describe_rules(RuleConfig()) == "Archive when Archived: true or #archived"
    
    def test_no_rules(self):
        assert describe_rules(RuleConfig.create(property_names=[], tags=[])) == "Archive when (no rules)"
    
    def test_flags(self):
        rules = RuleConfig.create(excluded_roots=["Templates", "Daily"], unarchive_on_missing_all=False)
        assert describe_flags(rules) == (
            "Excluded: Templates, Daily  |  Unarchive when unmatched: off  |  Dry run: off"
        )
    
    def test_dry_run_flag_is_highlighted(self):
        assert "Dry run: [bold red]on[/bold red]" in describe_flags(RuleConfig(dry_run=True))
