"""TextUI - Textual-based terminal UI for AutoArchiver."""

import threading
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer, Static, RichLog, ProgressBar, Label
from textual.binding import Binding

from autoarchiver import AutoArchiver, __version__
from archiver import RuleConfig


def describe_rules(rules: RuleConfig) -> str:
    """One-line summary of the rules that decide what gets moved."""
    triggers = [f"{name}: true" for name in rules.property_names]
    triggers += [f"#{tag}" for tag in rules.tags]
    return "Archive when " + (" or ".join(triggers) if triggers else "(no rules)")


def describe_flags(rules: RuleConfig) -> str:
    excluded = ", ".join(rules.excluded_roots) or "none"
    return (f"Excluded: {excluded}  |  "
            f"Unarchive when unmatched: {'on' if rules.unarchive_on_missing_all else 'off'}  |  "
            f"Dry run: {'[bold red]on[/bold red]' if rules.dry_run else 'off'}")


class HeaderInfo(Static):
    """Vault, archive root and the active rules."""

    def __init__(self, vault: str, rules: RuleConfig, watching: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.vault = vault
        self.rules = rules
        self.watching = watching

    def compose(self) -> ComposeResult:
        mode = "watching" if self.watching else "single scan"
        yield Static(f"Vault: {self.vault} ({mode})  ->  {self.rules.archive_root}/")
        yield Static(describe_rules(self.rules))
        yield Static(describe_flags(self.rules), id="flags-line")


class AutoArchiverApp(App):
    """Moves on the left, log on the right, scan tally at the bottom.

    Args:
        vault: Display name of the vault
        rules: Rules shown in the header
        scan_func: Runs one scan of the vault; started on mount and on 'r'
        watch_func: Optional, started after the first scan (watch mode)
        stop_func: Optional, called when the app exits
    """

    CSS = """
    #header-info {
        height: auto;
        padding: 0 1;
        background: $surface;
        border-bottom: solid $primary;
    }

    #flags-line {
        color: $text-muted;
    }

    .pane {
        width: 1fr;
    }

    .pane-title {
        background: $primary;
        text-align: center;
        text-style: bold;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }

    #scan-result {
        width: 1fr;
    }

    #progress-label {
        min-width: 16;
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "rescan", "Rescan"),
    ]

    def __init__(self, vault: str, rules: RuleConfig,
                 scan_func: Callable[[], None],
                 watch_func: Optional[Callable[[], None]] = None,
                 stop_func: Optional[Callable[[], None]] = None) -> None:
        super().__init__()
        self.vault = vault
        self.rules = rules
        self._scan_func = scan_func
        self._watch_func = watch_func
        self._stop_func = stop_func
        self._scanning = threading.Event()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield HeaderInfo(self.vault, self.rules, watching=self._watch_func is not None,
                         id="header-info")

        with Horizontal():
            with Vertical(classes="pane"):
                yield Static("MOVES", classes="pane-title")
                yield RichLog(id="moves-log", markup=True)
            with Vertical(classes="pane"):
                yield Static("LOG", classes="pane-title")
                yield RichLog(id="debug-log", markup=True, wrap=True)

        with Horizontal(id="status-bar"):
            yield Label("Scanning...", id="scan-result")
            yield ProgressBar(id="progress-bar", show_eta=False)
            yield Label("0/0 documents", id="progress-label")

        yield Footer()

    def on_mount(self) -> None:
        self.title = f"AutoArchiver v{__version__}"
        AutoArchiver.set_app(self)
        self._start_scan(then=self._watch_func)

    def on_unmount(self) -> None:
        if self._stop_func:
            self._stop_func()
        AutoArchiver.set_app(None)

    def action_rescan(self) -> None:
        if self._scanning.is_set():
            self.add_debug("[yellow]Scan already running[/yellow]")
            return
        self._start_scan()

    def _start_scan(self, then: Optional[Callable[[], None]] = None) -> None:
        self._scanning.set()
        self.query_one("#scan-result", Label).update("Scanning...")

        def run() -> None:
            try:
                self._scan_func()
            finally:
                self._scanning.clear()
            if then:
                then()

        threading.Thread(target=run, daemon=True).start()

    def add_move(self, line1: str, line2: str) -> None:
        self.query_one("#moves-log", RichLog).write(f"{line1}\n{line2}")

    def add_debug(self, message: str) -> None:
        self.query_one("#debug-log", RichLog).write(message)

    def set_progress(self, current: int, total: int) -> None:
        self.query_one("#progress-bar", ProgressBar).update(total=total, progress=current)
        self.query_one("#progress-label", Label).update(f"{current}/{total} documents")

    def show_result(self, archived: int, unarchived: int, errors: int, dry_run: bool) -> None:
        """Show the tally of the last finished scan."""
        text = f"Archived {archived}, unarchived {unarchived}"
        if errors:
            text += f", [red]{errors} errors[/red]"
        if dry_run:
            text = f"(Dry run) {text}"
        self.query_one("#scan-result", Label).update(text)
