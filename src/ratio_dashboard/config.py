from pathlib import Path

from pydantic import BaseModel, Field

from ratio_dashboard.models.common import Tab
from ratio_dashboard.models.inputs import FinancialInputs

BAR_COLORS: dict[str, str] = {
    "current_ratio": "#4CAF50",
    "quick_ratio": "#2196F3",
    "asset_turnover": "#FF9800",
    "inventory_turnover": "#FF5722",
}


class DashboardConfig(BaseModel):
    currency_symbol: str = "₵"
    initial_inputs: FinancialInputs = Field(default_factory=FinancialInputs)
    default_tab: Tab = Tab.LIQUIDITY
    charts_dir: Path | None = None
