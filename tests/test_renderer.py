from rich.console import Console

from ratio_dashboard.analysis.ratios import compute_ratios
from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.inputs import FinancialInputs
from ratio_dashboard.output.renderer import DashboardRenderer
from ratio_dashboard.output.view import build_dashboard


def _render(tab: Tab, **overrides) -> str:
    console = Console(record=True, width=140, color_system=None)
    inputs = FinancialInputs(**overrides)
    DashboardRenderer(console).render(build_dashboard(inputs, compute_ratios(inputs), tab))
    return console.export_text()


class TestDashboardRenderer:
    def test_header_and_inputs(self):
        out = _render(Tab.LIQUIDITY)
        assert "Financial Ratio Dashboard" in out
        assert "Revenue (₵)" in out
        assert "Current Liabilities (₵)" in out
        assert "100000" in out

    def test_cards(self):
        out = _render(Tab.LIQUIDITY)
        assert "Net Profit Margin" in out
        assert "20.00%" in out
        assert "Good" in out

    def test_liquidity_tab(self):
        out = _render(Tab.LIQUIDITY)
        assert "Liquidity Analysis" in out
        assert "Quick Ratio" in out
        assert "1.67" in out
        assert "Target: > 1.5" in out

    def test_profitability_tab(self):
        out = _render(Tab.PROFITABILITY)
        assert "Profitability Analysis" in out
        assert "60.00%" in out
        assert "20.0%" in out

    def test_efficiency_tab(self):
        out = _render(Tab.EFFICIENCY)
        assert "Efficiency Analysis" in out
        assert "Inv. Turnover" in out
        assert "8.00" in out

    def test_all_zero_inputs_render(self):
        out = _render(
            Tab.EFFICIENCY,
            revenue=0,
            cogs=0,
            net_income=0,
            total_assets=0,
            current_assets=0,
            inventory=0,
            current_liabilities=0,
        )
        assert "0.00" in out
        assert "Alert" in out
