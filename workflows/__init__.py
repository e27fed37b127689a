"""Workflow layer for autoarchiver.

Contains the store-facing side of archiving:
- Vault: Markdown documents on a storage driver
- Transition: archive/unarchive a single document
- Scanner: process the whole vault
- Watcher: process documents as they change
- Settings: load and save archive rules
"""

from .frontmatter import parse_document, split_front_matter, find_inline_tags
from .vault import Vault, DocumentRef, DOCUMENT_EXTENSION
from .transition import OutcomeKind, TransitionOutcome, process_document
from .scanner import ScanResult, scan_all
from .watcher import VaultWatcher, VaultEventHandler, DEFAULT_SETTLE_DELAY
from .settings import (
    SETTINGS_FILE,
    SettingsError,
    load_rules,
    save_rules,
    rules_to_dict,
    rules_from_dict,
)


__all__ = [
    # Documents
    'parse_document',
    'split_front_matter',
    'find_inline_tags',
    'Vault',
    'DocumentRef',
    'DOCUMENT_EXTENSION',
    
    # Transitions
    'OutcomeKind',
    'TransitionOutcome',
    'process_document',
    'ScanResult',
    'scan_all',
    
    # Events
    'VaultWatcher',
    'VaultEventHandler',
    'DEFAULT_SETTLE_DELAY',
    
    # Settings
    'SETTINGS_FILE',
    'SettingsError',
    'load_rules',
    'save_rules',
    'rules_to_dict',
    'rules_from_dict',
]
