"""Decide from front matter and tags whether a document should be archived."""

import re
from typing import Any, Set

from .rules import RuleConfig, fold, normalize_tag
from .snapshot import DocumentSnapshot

# Front matter field holding the document's tags
TAGS_FIELD = "tags"

_TAG_SPLIT = re.compile(r"[,\s]+")


def is_truthy(value: Any, rules: RuleConfig) -> bool:
    """Interpret a raw field value as an archive flag.
    
    True for boolean true, the number 1, and the strings "true", "1" or any
    configured extra truthy value (case-insensitive). Everything else,
    including other numbers, lists and missing values, is false.
    """
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        s = fold(value)
        return s in ("true", "1") or s in rules.truthy_keys
    return False


def collect_tags(snapshot: DocumentSnapshot) -> Set[str]:
    """Merge front matter tags with the snapshot's inline tags.
    
    Front matter tags may be a list or a single string separated by commas
    and/or whitespace.
    """
    tags = set(snapshot.tags)
    for key, value in snapshot.fields.items():
        if fold(str(key)) != TAGS_FIELD:
            continue
        if isinstance(value, str):
            raw = [t for t in _TAG_SPLIT.split(value) if t]
        elif isinstance(value, (list, tuple)):
            raw = [t for t in value if isinstance(t, str)]
        else:
            raw = []
        tags.update(t for t in (normalize_tag(r) for r in raw) if t)
    return tags


def should_archive(snapshot: DocumentSnapshot, rules: RuleConfig) -> bool:
    """Return True if any configured field is truthy or any trigger tag is present."""
    if rules.property_keys:
        for key, value in snapshot.fields.items():
            if fold(str(key)) in rules.property_keys and is_truthy(value, rules):
                return True
    
    if rules.tag_keys and not rules.tag_keys.isdisjoint(collect_tags(snapshot)):
        return True
    
    return False
