from ratio_dashboard.models.common import Tab, Trend
from ratio_dashboard.models.inputs import FinancialInputs
from ratio_dashboard.models.ratios import RatioResult

__all__ = [
    "FinancialInputs",
    "RatioResult",
    "Tab",
    "Trend",
]
