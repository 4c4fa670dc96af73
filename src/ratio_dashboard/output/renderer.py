from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.dashboard import DashboardView, TabPanel
from ratio_dashboard.models.inputs import INPUT_FIELDS
from ratio_dashboard.output.formatters import (
    bar,
    fmt_amount,
    progress_bar,
    trend_color,
)


class DashboardRenderer:
    def __init__(self, console: Console | None = None, currency: str = "₵") -> None:
        self.console = console or Console()
        self.currency = currency

    def render(self, view: DashboardView) -> None:
        self._render_header()
        self._render_inputs(view)
        self._render_cards(view)
        self._render_tab_bar(view.active_tab)
        self._render_panel(view.active_panel)

    def _render_header(self) -> None:
        self.console.print()
        self.console.print(
            Panel(
                "[bold]Financial Ratio Dashboard[/bold]\n"
                "[dim]Analyze liquidity, profitability, and efficiency metrics "
                "in real-time.[/dim]",
                title="Ratio Analyzer",
                style="cyan",
            )
        )

    def _render_inputs(self, view: DashboardView) -> None:
        table = Table(title="Inputs", show_header=True)
        table.add_column("Group", style="dim")
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")

        for field in INPUT_FIELDS:
            value = getattr(view.inputs, field.name)
            table.add_row(
                field.group,
                f"{field.label} ({self.currency})",
                fmt_amount(value),
            )

        self.console.print(table)

    def _render_cards(self, view: DashboardView) -> None:
        panels = []
        for card in view.cards:
            body = Text()
            body.append(card.value, style="bold")
            if card.trend is not None:
                body.append(f"  {card.trend.label}", style=trend_color(card.trend))
            panels.append(Panel(body, title=card.title, width=26))
        self.console.print(Columns(panels))

    def _render_tab_bar(self, active: Tab) -> None:
        bar_text = Text()
        for tab in Tab:
            style = "bold underline magenta" if tab == active else "dim"
            bar_text.append(f" {tab.heading} ", style=style)
            bar_text.append(" ")
        self.console.print(bar_text)

    def _render_panel(self, panel: TabPanel) -> None:
        table = Table(show_header=False, box=None)
        table.add_column("Metric", style="bold cyan")
        table.add_column("Value", justify="right", style="bold")
        table.add_column("Note", style="dim")
        for box in panel.boxes:
            table.add_row(box.label, box.value, box.description)

        parts: list[RenderableType] = [Text(panel.description, style="dim"), table]

        if panel.bars:
            parts.append(self._bar_chart(panel))

        if panel.headline is not None:
            headline = Text()
            headline.append(f"\n{panel.headline.value}", style="bold green")
            headline.append(f"  {panel.headline.label}\n", style="dim")
            headline.append(progress_bar(panel.headline.progress), style="green")
            parts.append(headline)

        self.console.print(Panel(Group(*parts), title=panel.title))

    def _bar_chart(self, panel: TabPanel) -> Table:
        chart = Table(show_header=False, box=None, padding=(0, 1))
        chart.add_column("Name")
        chart.add_column("Bar")
        chart.add_column("Value", justify="right")

        max_value = max((b.value for b in panel.bars), default=0.0)
        for b in panel.bars:
            chart.add_row(
                b.name,
                Text(bar(b.value, max_value), style=b.color),
                f"{b.value:.2f}",
            )
        return chart
