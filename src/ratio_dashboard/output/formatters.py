import math

from ratio_dashboard.models.common import Trend


def _clean(value: float, decimals: int) -> float:
    # Adding 0.0 turns -0.0 into 0.0 so values rounding to zero print unsigned.
    return round(value, decimals) + 0.0


def fmt_pct(value: float, decimals: int = 2) -> str:
    return f"{_clean(value, decimals):.{decimals}f}%"


def fmt_ratio(value: float, decimals: int = 2) -> str:
    return f"{_clean(value, decimals):.{decimals}f}"


def fmt_amount(value: float, currency: str = "") -> str:
    value = float(value) + 0.0
    if value.is_integer() and abs(value) < 1e15:
        text = f"{value:.0f}"
    else:
        text = repr(value)
    return f"{currency}{text}"


def trend_color(trend: Trend | None) -> str:
    colors = {
        Trend.POSITIVE: "green",
        Trend.NEGATIVE: "red",
        Trend.NEUTRAL: "grey50",
    }
    return colors.get(trend, "white")


def progress_bar(percent: float, width: int = 20) -> str:
    clamped = min(max(percent, 0.0), 100.0)
    filled = round(clamped / 100.0 * width)
    return "█" * filled + "░" * (width - filled)


def bar(value: float, max_value: float, width: int = 30) -> str:
    if not (math.isfinite(value) and math.isfinite(max_value)):
        return ""
    if max_value <= 0 or value <= 0:
        return ""
    filled = round(min(value / max_value, 1.0) * width)
    return "█" * filled
