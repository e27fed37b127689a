"""Run the transition workflow over every document in the vault."""

from dataclasses import dataclass
from typing import Iterable, Optional

from autoarchiver import AutoArchiver
from archiver import RuleConfig, is_under_root
from .transition import OutcomeKind, process_document
from .vault import DocumentRef, Vault


@dataclass
class ScanResult:
    """Tally of a full scan.
    
    archived/unarchived count documents whose path crossed the archive
    boundary during the scan, so dry runs report zero moves.
    """
    archived: int = 0
    unarchived: int = 0
    errors: int = 0
    processed: int = 0


def scan_all(documents: Optional[Iterable[DocumentRef]] = None,
             vault: Optional[Vault] = None,
             rules: Optional[RuleConfig] = None) -> ScanResult:
    """Process every document and count archive/unarchive moves.
    
    A failing document is reported and counted in errors; the scan goes on.
    
    Args:
        documents: Documents to scan (default: all documents in the vault)
        vault: Document store (default: AutoArchiver.vault)
        rules: Rules for the whole scan (default: the rules active now)
    """
    rules = rules or AutoArchiver.current_rules()
    vault = vault or AutoArchiver.vault
    if documents is None:
        documents = vault.list_documents()
    documents = list(documents)
    
    if not documents:
        AutoArchiver.print_right("No documents found")
    else:
        AutoArchiver.print_right(f"Found {len(documents)} documents")
    AutoArchiver.set_total_files(len(documents))
    
    result = ScanResult()
    
    for i, doc in enumerate(documents, 1):
        AutoArchiver.set_progress(i, len(documents))
        was_in_archive = is_under_root(doc.path, rules.archive_root)
        
        try:
            outcome = process_document(doc, vault=vault, rules=rules)
        except Exception as e:
            AutoArchiver.print_right(f"[red]Error processing {doc.path}: {e}[/red]")
            result.errors += 1
            continue
        
        result.processed += 1
        if outcome.kind is OutcomeKind.ERROR:
            result.errors += 1
        
        # A successful move updates doc.path in place
        now_in_archive = is_under_root(doc.path, rules.archive_root)
        if not was_in_archive and now_in_archive:
            result.archived += 1
        elif was_in_archive and not now_in_archive:
            result.unarchived += 1
    
    if rules.show_notice:
        prefix = "(Dry run) " if rules.dry_run else ""
        summary = f"{prefix}Archived: {result.archived}, Unarchived: {result.unarchived}"
        if result.errors:
            summary += f", Errors: {result.errors}"
        AutoArchiver.print_right(summary)
    AutoArchiver.show_result(result.archived, result.unarchived, result.errors, rules.dry_run)
    return result
