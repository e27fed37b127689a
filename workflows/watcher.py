"""Re-check documents when they change on disk.

Watches a local vault with watchdog. Each created, modified or moved-in
Markdown file is processed after a short settle delay so that editors can
finish writing; further events for the same path restart the delay.
Processing runs one document at a time.
"""

import os
import threading
from typing import Callable, Dict, List, Optional

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from autoarchiver import AutoArchiver
from archiver import normalize
from storage import StorageError
from .transition import OutcomeKind, TransitionOutcome, process_document
from .vault import DOCUMENT_EXTENSION, DocumentRef, Vault

DEFAULT_SETTLE_DELAY = 0.05


class VaultEventHandler(FileSystemEventHandler):
    """Translate filesystem events into vault-relative document paths."""
    
    def __init__(self, root_path: str, on_document: Callable[[str], None]) -> None:
        super().__init__()
        self.root_path = os.path.realpath(root_path)
        self.on_document = on_document
    
    def on_created(self, event) -> None:
        self._handle(event.src_path, event.is_directory)
    
    def on_modified(self, event) -> None:
        self._handle(event.src_path, event.is_directory)
    
    def on_moved(self, event) -> None:
        self._handle(event.dest_path, event.is_directory)
    
    def _handle(self, abs_path, is_directory: bool) -> None:
        if is_directory:
            return
        if isinstance(abs_path, bytes):
            abs_path = os.fsdecode(abs_path)
        rel_path = os.path.relpath(os.path.realpath(abs_path), self.root_path)
        rel_path = normalize(rel_path.replace(os.sep, "/"))
        if rel_path.startswith(".."):
            return
        if not rel_path.lower().endswith(DOCUMENT_EXTENSION):
            return
        if any(part.startswith(".") for part in rel_path.split("/")):
            return
        self.on_document(rel_path)


class VaultWatcher:
    """Schedule process_document() for changed documents.
    
    Args:
        vault: Vault backed by a LocalDriver
        delay: Seconds to wait after the last event before processing
        process: Callable used to process a document (default: process_document)
    """
    
    def __init__(self, vault: Vault, delay: float = DEFAULT_SETTLE_DELAY,
                 process: Optional[Callable[..., TransitionOutcome]] = None) -> None:
        root_path = getattr(vault.driver, "root_path", None)
        if not root_path:
            raise StorageError(f"{vault.display_name} can't be watched (not a local vault)")
        self.vault = vault
        self.root_path = root_path
        self.delay = delay
        self._process = process or process_document
        self._timers: Dict[str, threading.Timer] = {}
        self._timers_lock = threading.Lock()
        self._process_lock = threading.Lock()
        self._observer: Optional[Observer] = None
    
    def schedule(self, path: str) -> None:
        """Process path after the settle delay, replacing a pending run."""
        with self._timers_lock:
            pending = self._timers.pop(path, None)
            if pending is not None:
                pending.cancel()
            timer = threading.Timer(self.delay, self._fire, args=(path,))
            timer.daemon = True
            self._timers[path] = timer
            timer.start()
    
    def pending(self) -> List[str]:
        """Paths waiting for their settle delay to expire."""
        with self._timers_lock:
            return list(self._timers)
    
    def _fire(self, path: str) -> None:
        with self._timers_lock:
            if self._timers.get(path) is threading.current_thread():
                del self._timers[path]
        self.process_path(path)
    
    def process_path(self, path: str) -> Optional[TransitionOutcome]:
        """Process one document now. Returns None if it no longer exists."""
        with self._process_lock:
            if not self.vault.exists(path):
                return None
            try:
                outcome = self._process(DocumentRef(path), vault=self.vault)
            except Exception as e:
                AutoArchiver.print_right(f"[red]Error processing {path}: {e}[/red]")
                return TransitionOutcome.error(str(e))
            if outcome.kind is OutcomeKind.ERROR:
                AutoArchiver.print_right(f"[red]✗ {path}: {outcome.reason}[/red]")
            return outcome
    
    def start(self) -> None:
        """Start watching the vault in a background thread."""
        if self._observer is not None:
            return
        handler = VaultEventHandler(self.root_path, self.schedule)
        self._observer = Observer()
        self._observer.schedule(handler, self.root_path, recursive=True)
        self._observer.start()
        AutoArchiver.print_right(f"Watching {self.vault.display_name}")
    
    def stop(self) -> None:
        """Stop watching and drop pending runs."""
        with self._timers_lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None
    
    def __enter__(self) -> "VaultWatcher":
        self.start()
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
