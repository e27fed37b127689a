"""AutoArchiver - Application state and configuration."""

import re
import threading
from typing import Optional, Any, TYPE_CHECKING

from archiver import RuleConfig

if TYPE_CHECKING:
    import argparse
    from workflows.vault import Vault

__version__ = "0.1.0"


def _strip_rich_markup(text: str) -> str:
    """Remove Rich markup tags like [red], [/red], [bold], etc."""
    return re.sub(r'\[/?[a-zA-Z_]+\]', '', text)


class AutoArchiver:
    """Central configuration and state for AutoArchiver."""
    
    # Active rules; replaced as a whole by update_rules()
    rules: RuleConfig = RuleConfig()
    
    # Global resources
    vault: Optional["Vault"] = None
    
    # UI app reference (None = CLI mode)
    _app: Optional[Any] = None
    _rules_lock = threading.Lock()
    
    # Progress tracking
    _total_files: int = 0
    _current_file: int = 0
    
    @classmethod
    def configure(cls, args: "argparse.Namespace", vault: Optional["Vault"] = None,
                  rules: Optional[RuleConfig] = None) -> None:
        """Initialize state from parsed CLI args and loaded rules."""
        cls.vault = vault
        if rules is not None:
            if getattr(args, 'dry_run', False):
                rules = rules.with_dry_run(True)
            cls.update_rules(rules)
    
    @classmethod
    def update_rules(cls, rules: RuleConfig) -> None:
        """Swap the active rules. Calls already running keep their copy."""
        with cls._rules_lock:
            cls.rules = rules
    
    @classmethod
    def current_rules(cls) -> RuleConfig:
        with cls._rules_lock:
            return cls.rules
    
    @classmethod
    def set_app(cls, app: Any) -> None:
        """Set the Textual app reference for UI updates."""
        cls._app = app
    
    @classmethod
    def print_left(cls, line1: str, line2: str) -> None:
        """Add entry to moves log (left panel in TUI, stdout in CLI)."""
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.add_move, line1, line2)
        else:
            print(_strip_rich_markup(line1))
            print(_strip_rich_markup(line2))
    
    @classmethod
    def print_right(cls, message: str) -> None:
        """Add line to debug log (right panel in TUI, stdout in CLI)."""
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.add_debug, message)
        else:
            print(_strip_rich_markup(message))
    
    @classmethod
    def set_progress(cls, current: int, total: int) -> None:
        """Update progress bar and label."""
        cls._current_file = current
        cls._total_files = total
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.set_progress, current, total)
    
    @classmethod
    def set_total_files(cls, total: int) -> None:
        """Set total file count for progress tracking."""
        cls._total_files = total
        cls._current_file = 0
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.set_progress, 0, total)
    
    @classmethod
    def show_result(cls, archived: int, unarchived: int, errors: int,
                    dry_run: bool = False) -> None:
        """Show a finished scan's tally in the TUI status bar (no-op in CLI)."""
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.show_result, archived, unarchived, errors, dry_run)
