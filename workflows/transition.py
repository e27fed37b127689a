"""Archive or unarchive a single document when its rules say so."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from autoarchiver import AutoArchiver
from archiver import (
    Direction,
    RuleConfig,
    TargetDecision,
    is_excluded,
    is_under_root,
    resolve_archive_target,
    resolve_collision,
    resolve_unarchive_target,
    should_archive,
    split_dir_and_name,
)
from storage import StorageError
from .vault import DocumentRef, Vault


class OutcomeKind(Enum):
    NO_ACTION = "no_action"
    WOULD_ARCHIVE = "would_archive"
    WOULD_UNARCHIVE = "would_unarchive"
    ARCHIVED = "archived"
    UNARCHIVED = "unarchived"
    ERROR = "error"


@dataclass(frozen=True)
class TransitionOutcome:
    """Result of processing one document.
    
    Attributes:
        kind: What happened
        path: Destination path for (would-)moves
        reason: Error message for ERROR outcomes
    """
    kind: OutcomeKind
    path: Optional[str] = None
    reason: Optional[str] = None
    
    @classmethod
    def no_action(cls) -> "TransitionOutcome":
        return cls(OutcomeKind.NO_ACTION)
    
    @classmethod
    def would_archive(cls, path: str) -> "TransitionOutcome":
        return cls(OutcomeKind.WOULD_ARCHIVE, path)
    
    @classmethod
    def would_unarchive(cls, path: str) -> "TransitionOutcome":
        return cls(OutcomeKind.WOULD_UNARCHIVE, path)
    
    @classmethod
    def archived(cls, path: str) -> "TransitionOutcome":
        return cls(OutcomeKind.ARCHIVED, path)
    
    @classmethod
    def unarchived(cls, path: str) -> "TransitionOutcome":
        return cls(OutcomeKind.UNARCHIVED, path)
    
    @classmethod
    def error(cls, reason: str) -> "TransitionOutcome":
        return cls(OutcomeKind.ERROR, reason=reason)


def process_document(doc: DocumentRef, vault: Optional[Vault] = None,
                     rules: Optional[RuleConfig] = None) -> TransitionOutcome:
    """Classify a document and move it across the archive boundary if needed.
    
    Whether a document is archived is derived from its path alone: it is
    archived if and only if it lies under the archive root. Calling this
    again with unchanged metadata is a no-op.
    
    Args:
        doc: Document to process; its path is updated after a move
        vault: Document store (default: AutoArchiver.vault)
        rules: Rules to apply (default: the rules active when the call starts)
    
    Returns:
        TransitionOutcome describing what happened
    """
    rules = rules or AutoArchiver.current_rules()
    vault = vault or AutoArchiver.vault
    
    if not vault.is_document(doc):
        return TransitionOutcome.no_action()
    if is_excluded(doc.path, rules.excluded_roots):
        return TransitionOutcome.no_action()
    
    try:
        snapshot = vault.snapshot(doc)
    except StorageError as e:
        AutoArchiver.print_right(f"[red]✗ Failed to read {doc.path}: {e}[/red]")
        return TransitionOutcome.error(str(e))
    
    want_archive = should_archive(snapshot, rules)
    in_archive = is_under_root(doc.path, rules.archive_root)
    
    if want_archive and not in_archive:
        target = resolve_archive_target(doc.path, rules.archive_root)
        return _transition(doc, target, vault, rules)
    
    if not want_archive and in_archive and rules.unarchive_on_missing_all:
        target = resolve_unarchive_target(doc.path, rules.archive_root)
        if target is None:
            return TransitionOutcome.no_action()
        return _transition(doc, target, vault, rules)
    
    return TransitionOutcome.no_action()


def _transition(doc: DocumentRef, target: TargetDecision, vault: Vault,
                rules: RuleConfig) -> TransitionOutcome:
    """Perform (or simulate) the move described by target."""
    archiving = target.direction is Direction.ARCHIVE
    verb = "archive" if archiving else "unarchive"
    source = doc.path
    
    if rules.dry_run:
        AutoArchiver.print_right(f"(Dry run) Would {verb} '{source}' -> '{target.full_path}'")
        if rules.show_notice:
            _log_move(f"(Dry run) Would {verb}", source, target.full_path)
        if archiving:
            return TransitionOutcome.would_archive(target.full_path)
        return TransitionOutcome.would_unarchive(target.full_path)
    
    try:
        if target.dir:
            vault.ensure_folder(target.dir)
        dest = resolve_collision(target.full_path, vault.exists)
        vault.move(doc, dest)
    except StorageError as e:
        AutoArchiver.print_right(f"[red]✗ Failed to {verb} {source}: {e}[/red]")
        return TransitionOutcome.error(str(e))
    
    if rules.show_notice:
        _log_move("Archived" if archiving else "Unarchived", source, dest)
    
    if archiving:
        return TransitionOutcome.archived(dest)
    return TransitionOutcome.unarchived(dest)


def _log_move(action: str, old_path: str, new_path: str) -> None:
    """Log a move to the left panel."""
    timestamp = datetime.now().strftime("%H:%M")
    old_dir, name = split_dir_and_name(old_path)
    new_dir, _ = split_dir_and_name(new_path)
    line1 = f"{timestamp} {action}: {name}"
    line2 = f"  {old_dir or '/'} → {new_dir or '/'}"
    AutoArchiver.print_left(line1, line2)
