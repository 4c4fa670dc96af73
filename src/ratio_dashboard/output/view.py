from ratio_dashboard.analysis.trends import classify
from ratio_dashboard.config import BAR_COLORS
from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.dashboard import (
    ChartBar,
    DashboardView,
    Headline,
    InfoBox,
    MetricCard,
    TabPanel,
)
from ratio_dashboard.models.inputs import FinancialInputs
from ratio_dashboard.models.ratios import RatioResult
from ratio_dashboard.output.formatters import fmt_pct, fmt_ratio


def build_dashboard(
    inputs: FinancialInputs,
    ratios: RatioResult,
    active_tab: Tab = Tab.LIQUIDITY,
) -> DashboardView:
    """Assemble the sidebar, cards and tab panels for one input snapshot."""
    return DashboardView(
        inputs=inputs,
        cards=_build_cards(ratios),
        panels=[
            _liquidity_panel(ratios),
            _profitability_panel(ratios),
            _efficiency_panel(ratios),
        ],
        active_tab=active_tab,
    )


def _build_cards(ratios: RatioResult) -> list[MetricCard]:
    specs = [
        ("Net Profit Margin", "net_margin", fmt_pct(ratios.net_margin)),
        ("Current Ratio", "current_ratio", fmt_ratio(ratios.current_ratio)),
        ("ROA", "roa", fmt_pct(ratios.roa)),
        ("Asset Turnover", "asset_turnover", fmt_ratio(ratios.asset_turnover)),
    ]
    return [
        MetricCard(
            title=title,
            metric=metric,
            value=value,
            trend=classify(metric, getattr(ratios, metric)),
        )
        for title, metric, value in specs
    ]


def _liquidity_panel(ratios: RatioResult) -> TabPanel:
    return TabPanel(
        tab=Tab.LIQUIDITY,
        title="Liquidity Analysis",
        description=(
            "Liquidity ratios measure a company's ability to pay debt obligations."
        ),
        boxes=[
            InfoBox(
                label="Current Ratio",
                value=fmt_ratio(ratios.current_ratio),
                description="Target: > 1.5. Ability to pay short-term obligations.",
            ),
            InfoBox(
                label="Quick Ratio",
                value=fmt_ratio(ratios.quick_ratio),
                description="Target: > 1.0. Ability to pay without selling inventory.",
            ),
        ],
        bars=[
            ChartBar(
                name="Current Ratio",
                value=ratios.current_ratio,
                color=BAR_COLORS["current_ratio"],
            ),
            ChartBar(
                name="Quick Ratio",
                value=ratios.quick_ratio,
                color=BAR_COLORS["quick_ratio"],
            ),
        ],
    )


def _profitability_panel(ratios: RatioResult) -> TabPanel:
    return TabPanel(
        tab=Tab.PROFITABILITY,
        title="Profitability Analysis",
        description=(
            "Measures ability to generate earnings relative to revenue and assets."
        ),
        boxes=[
            InfoBox(label="Gross Margin", value=fmt_pct(ratios.gross_margin)),
            InfoBox(label="Net Margin", value=fmt_pct(ratios.net_margin)),
            InfoBox(label="Return on Assets (ROA)", value=fmt_pct(ratios.roa)),
        ],
        headline=Headline(
            label="Net Profit Margin",
            value=fmt_pct(ratios.net_margin, 1),
            progress=min(max(ratios.net_margin, 0.0), 100.0),
        ),
    )


def _efficiency_panel(ratios: RatioResult) -> TabPanel:
    return TabPanel(
        tab=Tab.EFFICIENCY,
        title="Efficiency Analysis",
        description=(
            "Efficiency ratios measure how effectively a company uses its assets."
        ),
        boxes=[
            InfoBox(
                label="Asset Turnover",
                value=fmt_ratio(ratios.asset_turnover),
                description="Higher is better. Revenue generated per dollar of assets.",
            ),
            InfoBox(
                label="Inventory Turnover",
                value=fmt_ratio(ratios.inventory_turnover),
                description="Higher is better. Times inventory is sold and replaced.",
            ),
        ],
        bars=[
            ChartBar(
                name="Asset Turnover",
                value=ratios.asset_turnover,
                color=BAR_COLORS["asset_turnover"],
            ),
            ChartBar(
                name="Inv. Turnover",
                value=ratios.inventory_turnover,
                color=BAR_COLORS["inventory_turnover"],
            ),
        ],
    )
