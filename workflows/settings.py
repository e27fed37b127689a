"""Persisted archive rules.

Rules live in a YAML file inside the vault (default '.autoarchiver.yaml'):

    property_names: [Archived]
    extra_truthy_values: [yes, y, archived, done]
    tags: [archived]
    archive_root: Archive
    excluded_roots: [Templates]
    dry_run: false
    show_notice: true
    unarchive_on_missing_all: true

Missing keys take their defaults. List values may also be written as a
comma-separated string. Values are read as plain strings (no YAML 1.1
booleans), so "yes" in a list stays "yes".
"""

import os
import tempfile
from typing import Any, Dict

import yaml

from archiver import RuleConfig
from storage import StorageDriver

SETTINGS_FILE = ".autoarchiver.yaml"

_LIST_KEYS = ("property_names", "extra_truthy_values", "tags", "excluded_roots")
_BOOL_KEYS = ("dry_run", "show_notice", "unarchive_on_missing_all")


class SettingsError(Exception):
    """Settings file exists but can't be parsed."""
    pass


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "y", "1", "on")
    return bool(value)


def _as_list(value: Any):
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def rules_to_dict(rules: RuleConfig) -> Dict[str, Any]:
    """Flat record of a RuleConfig, suitable for YAML."""
    return {
        "property_names": list(rules.property_names),
        "extra_truthy_values": list(rules.extra_truthy_values),
        "tags": list(rules.tags),
        "archive_root": rules.archive_root,
        "excluded_roots": list(rules.excluded_roots),
        "dry_run": rules.dry_run,
        "show_notice": rules.show_notice,
        "unarchive_on_missing_all": rules.unarchive_on_missing_all,
    }


def rules_from_dict(data: Dict[str, Any]) -> RuleConfig:
    """Build a RuleConfig from a (possibly partial) record."""
    defaults = RuleConfig()
    lists = {key: _as_list(data.get(key)) for key in _LIST_KEYS}
    flags = {key: _as_bool(data.get(key), getattr(defaults, key)) for key in _BOOL_KEYS}
    root = data.get("archive_root")
    return RuleConfig.create(
        archive_root=str(root) if root is not None else None,
        **lists,
        **flags,
    )


def load_rules(driver: StorageDriver, path: str = SETTINGS_FILE) -> RuleConfig:
    """Load rules from the vault, or defaults if the file doesn't exist.
    
    Raises:
        SettingsError: If the file isn't valid YAML or isn't a mapping
        StorageError: If the file can't be read
    """
    if not driver.file_exists(path):
        return RuleConfig.create()
    
    text = driver.read_text(path)
    try:
        # BaseLoader keeps every scalar a string, so "yes" and "No" survive
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid settings file {path}: {e}")
    
    if data is None:
        return RuleConfig.create()
    if not isinstance(data, dict):
        raise SettingsError(f"Invalid settings file {path}: expected a mapping")
    return rules_from_dict(data)


def save_rules(driver: StorageDriver, rules: RuleConfig, path: str = SETTINGS_FILE) -> None:
    """Write rules to the vault, replacing the existing file."""
    content = yaml.safe_dump(rules_to_dict(rules), sort_keys=False, allow_unicode=True)
    fd, temp_path = tempfile.mkstemp(suffix='.yaml', text=True)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        driver.upload(temp_path, path)
    finally:
        os.unlink(temp_path)
