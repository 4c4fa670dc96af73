import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from ratio_dashboard.config import DashboardConfig
from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.inputs import INPUT_FIELDS
from ratio_dashboard.output.renderer import DashboardRenderer
from ratio_dashboard.output.view import build_dashboard
from ratio_dashboard.session import HELP_TEXT, DashboardSession
from ratio_dashboard.store import InputStore

logger = logging.getLogger(__name__)
console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ratio-dash",
        description="Financial ratio dashboard",
    )
    sub = p.add_subparsers(dest="command")

    # --- show ---
    show = sub.add_parser("show", help="Render the dashboard once")
    for field in INPUT_FIELDS:
        show.add_argument(
            f"--{field.name.replace('_', '-')}",
            dest=field.name,
            default=None,
            metavar="AMOUNT",
            help=f"{field.label} ({field.group})",
        )
    show.add_argument(
        "--tab",
        choices=[t.value for t in Tab],
        default=Tab.LIQUIDITY.value,
        help="Tab to display",
    )
    show.add_argument(
        "--charts-dir",
        type=Path,
        default=None,
        help="Write PNG bar charts for each tab into this directory",
    )
    show.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    # --- interactive ---
    interactive = sub.add_parser("interactive", help="Edit inputs and watch ratios")
    interactive.add_argument(
        "--tab",
        choices=[t.value for t in Tab],
        default=Tab.LIQUIDITY.value,
        help="Tab to display first",
    )
    interactive.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return p


def _run_show(args: argparse.Namespace) -> None:
    """Execute the show subcommand."""
    config = DashboardConfig(default_tab=Tab(args.tab), charts_dir=args.charts_dir)
    store = InputStore(config.initial_inputs)

    # Raw flag text goes through the same parsing as typed input.
    for field in INPUT_FIELDS:
        raw = getattr(args, field.name)
        if raw is not None:
            store.set_field(field.name, raw)

    view = build_dashboard(store.inputs, store.ratios, config.default_tab)
    DashboardRenderer(console, config.currency_symbol).render(view)

    if config.charts_dir is not None:
        from ratio_dashboard.output.charts import generate_all_charts

        chart_paths = generate_all_charts(view, config.charts_dir)
        if chart_paths:
            console.print(
                f"\n[green]Generated {len(chart_paths)} chart(s) "
                f"in {config.charts_dir}[/green]"
            )


def _run_interactive(args: argparse.Namespace) -> None:
    """Execute the interactive subcommand."""
    config = DashboardConfig(default_tab=Tab(args.tab))
    session = DashboardSession(config, console)
    session.refresh()
    console.print(f"[dim]{HELP_TEXT}[/dim]")

    try:
        while session.handle(Prompt.ask("[cyan]ratio-dash[/cyan]", console=console)):
            pass
    except EOFError:
        pass
    finally:
        session.close()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        if args.command == "show":
            _run_show(args)
        elif args.command == "interactive":
            _run_interactive(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
