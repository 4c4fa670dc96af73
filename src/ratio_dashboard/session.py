import logging
import shlex

from rich.console import Console

from ratio_dashboard.config import DashboardConfig
from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.inputs import FinancialInputs, resolve_field
from ratio_dashboard.models.ratios import RatioResult
from ratio_dashboard.output.renderer import DashboardRenderer
from ratio_dashboard.output.view import build_dashboard
from ratio_dashboard.store import InputStore

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  set <field> <value>   Update an input (e.g. set revenue 120000)
  tab <name>            Switch tab: liquidity, profitability, efficiency
  reset                 Restore the starting figures
  show                  Redraw the dashboard
  help                  Show this message
  quit                  Leave the dashboard"""


def parse_command(line: str) -> tuple[str, list[str]]:
    try:
        parts = shlex.split(line)
    except ValueError:
        parts = line.split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


class DashboardSession:
    """One interactive dashboard: a store, the active tab and a renderer.

    The renderer is subscribed to the store, so every edit redraws the
    dashboard before the next command is read.
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or DashboardConfig()
        self.console = console or Console()
        self.store = InputStore(self.config.initial_inputs)
        self.active_tab = self.config.default_tab
        self.renderer = DashboardRenderer(self.console, self.config.currency_symbol)
        self._unsubscribe = self.store.subscribe(self._on_change)

    def _on_change(self, inputs: FinancialInputs, ratios: RatioResult) -> None:
        self.renderer.render(build_dashboard(inputs, ratios, self.active_tab))

    def refresh(self) -> None:
        self._on_change(self.store.inputs, self.store.ratios)

    def switch_tab(self, tab: Tab) -> None:
        self.active_tab = tab
        self.refresh()

    def handle(self, line: str) -> bool:
        """Run one command; returns False when the session should end."""
        command, args = parse_command(line)
        if not command:
            return True
        if command in ("quit", "exit", "q"):
            return False

        if command == "set":
            if len(args) < 1:
                self.console.print("[red]Usage: set <field> <value>[/red]")
                return True
            try:
                field = resolve_field(args[0])
            except KeyError as e:
                self.console.print(f"[red]Error: {e.args[0]}[/red]")
                return True
            # A missing value is treated like an emptied input field.
            raw = args[1] if len(args) > 1 else ""
            self.store.set_field(field, raw)
        elif command == "tab":
            if not args:
                self.console.print("[red]Usage: tab <name>[/red]")
                return True
            try:
                tab = Tab(args[0].strip().lower())
            except ValueError:
                valid = ", ".join(t.value for t in Tab)
                self.console.print(f"[red]Unknown tab. Choose one of: {valid}[/red]")
                return True
            self.switch_tab(tab)
        elif command == "reset":
            self.store.reset()
        elif command == "show":
            self.refresh()
        elif command == "help":
            self.console.print(HELP_TEXT)
        else:
            self.console.print(f"[red]Unknown command: {command}[/red]")
        return True

    def close(self) -> None:
        self._unsubscribe()
