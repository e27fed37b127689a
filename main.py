#!/usr/bin/env python3
"""AutoArchiver - Move Markdown notes in and out of an archive folder."""

import argparse
import os
import time

import yaml

from autoarchiver import AutoArchiver
from workflows import (
    DocumentRef,
    Vault,
    VaultWatcher,
    SettingsError,
    SETTINGS_FILE,
    load_rules,
    save_rules,
    rules_to_dict,
    process_document,
    scan_all,
)
from archiver import normalize
from storage import create_storage, StorageError


def open_vault(vault_uri: str) -> Vault:
    """Create a vault for a storage URI.
    
    Args:
        vault_uri: Storage URI (e.g., 'local:/home/me/notes')
    """
    return Vault(create_storage(vault_uri))


def run_scan() -> None:
    """Scan the whole vault once."""
    rules = AutoArchiver.current_rules()
    AutoArchiver.print_right(f"Vault: {AutoArchiver.vault.display_name}")
    AutoArchiver.print_right(f"Archive root: {rules.archive_root}")
    if rules.dry_run:
        AutoArchiver.print_right("Dry run: enabled (no files will be moved)")
    
    scan_all()
    AutoArchiver.print_right("\n[green]Scan complete![/green]")


def run_file(path: str) -> None:
    """Process a single document given by its vault-relative path."""
    doc = DocumentRef(normalize(path))
    if not AutoArchiver.vault.exists(doc.path):
        print(f"Error: document not found in vault: {doc.path}")
        return
    
    outcome = process_document(doc)
    if outcome.path:
        print(f"{outcome.kind.value}: {outcome.path}")
    elif outcome.reason:
        print(f"{outcome.kind.value}: {outcome.reason}")
    else:
        print(outcome.kind.value)


def run_watch(watcher: VaultWatcher, initial_scan: bool = True) -> None:
    """Scan once, then keep processing documents as they change."""
    if initial_scan:
        run_scan()
    watcher.start()


def main(args: argparse.Namespace) -> None:
    """Main entry point. Without --file, --watch or a config flag the vault
    is scanned once. Configuration comes from the environment:
    
    VAULT           storage URI of the vault (required)
    ARCHIVER_CONFIG settings file inside the vault (default .autoarchiver.yaml)
    """
    vault_uri = os.environ.get('VAULT')
    settings_path = os.environ.get('ARCHIVER_CONFIG', SETTINGS_FILE)
    
    if not vault_uri:
        print("Error: VAULT environment variable not set")
        print("Example: VAULT=local:/home/me/notes")
        return
    
    try:
        vault = open_vault(vault_uri)
        rules = load_rules(vault.driver, settings_path)
    except (StorageError, SettingsError, ValueError) as e:
        print(f"Error: {e}")
        return
    
    AutoArchiver.configure(args, vault=vault, rules=rules)
    
    if args.init_config:
        save_rules(vault.driver, rules, settings_path)
        print(f"Wrote settings to {settings_path}")
    
    elif args.show_config:
        print(f"Vault: {vault.display_name}")
        print(yaml.safe_dump(rules_to_dict(AutoArchiver.current_rules()), sort_keys=False))
    
    elif args.file:
        run_file(args.file)
    
    elif args.watch:
        watcher = VaultWatcher(vault)
        if args.cli:
            run_watch(watcher)
            try:
                while True:
                    time.sleep(1)
            except KeyboardInterrupt:
                pass
            finally:
                watcher.stop()
        else:
            from textui import AutoArchiverApp
            app = AutoArchiverApp(
                vault=vault.display_name,
                rules=AutoArchiver.current_rules(),
                scan_func=run_scan,
                watch_func=watcher.start,
                stop_func=watcher.stop,
            )
            app.run()
    
    elif args.cli:
        run_scan()
    
    else:
        from textui import AutoArchiverApp
        app = AutoArchiverApp(
            vault=vault.display_name,
            rules=AutoArchiver.current_rules(),
            scan_func=run_scan,
        )
        app.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Archive and unarchive Markdown notes by front matter and tags")
    parser.add_argument("--file", type=str,
                       help="Process a single document (vault-relative path) and exit")
    parser.add_argument("--watch", action="store_true",
                       help="Scan, then process documents whenever they change")
    parser.add_argument("--dry-run", action="store_true",
                       help="Report moves without performing them")
    parser.add_argument("--show-config", action="store_true",
                       help="Print the active rules")
    parser.add_argument("--init-config", action="store_true",
                       help="Write the active rules to the vault settings file")
    parser.add_argument("--cli", action="store_true",
                       help="Use CLI output instead of TextUI (default is TextUI)")
    return parser


def cli() -> None:
    """Console script entry point."""
    main(build_parser().parse_args())


if __name__ == "__main__":
    cli()
