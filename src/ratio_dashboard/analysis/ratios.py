import math

from ratio_dashboard.models.inputs import FinancialInputs
from ratio_dashboard.models.ratios import RatioResult


def _finite(value: float) -> float:
    # Overflow is treated like a zero denominator: the ratio reads 0.
    return value if math.isfinite(value) else 0.0


def _safe_div(numerator: float, denominator: float) -> float:
    # Only an exact zero is guarded; tiny denominators pass through.
    if not denominator:
        return 0.0
    return _finite(numerator / denominator)


def compute_ratios(inputs: FinancialInputs) -> RatioResult:
    """Derive the liquidity, profitability and efficiency ratios.

    Total over any snapshot: a zero denominator or a result that overflows
    yields 0 for that ratio instead of raising or returning a non-finite value.
    """
    gross_profit = _finite(inputs.revenue - inputs.cogs)

    return RatioResult(
        current_ratio=_safe_div(inputs.current_assets, inputs.current_liabilities),
        quick_ratio=_safe_div(
            _finite(inputs.current_assets - inputs.inventory),
            inputs.current_liabilities,
        ),
        gross_profit=gross_profit,
        gross_margin=_finite(_safe_div(gross_profit, inputs.revenue) * 100.0),
        net_margin=_finite(_safe_div(inputs.net_income, inputs.revenue) * 100.0),
        roa=_finite(_safe_div(inputs.net_income, inputs.total_assets) * 100.0),
        asset_turnover=_safe_div(inputs.revenue, inputs.total_assets),
        inventory_turnover=_safe_div(inputs.cogs, inputs.inventory),
    )
