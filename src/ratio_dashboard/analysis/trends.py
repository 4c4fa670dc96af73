import operator
from collections.abc import Callable

from pydantic import BaseModel

from ratio_dashboard.models.common import Trend
from ratio_dashboard.models.ratios import RatioResult

COMPARISONS: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


class TrendRule(BaseModel):
    metric: str
    threshold: float
    comparison: str = ">"
    label_if_true: Trend = Trend.POSITIVE
    label_otherwise: Trend = Trend.NEUTRAL

    def evaluate(self, value: float) -> Trend:
        compare = COMPARISONS[self.comparison]
        if compare(value, self.threshold):
            return self.label_if_true
        return self.label_otherwise


TREND_RULES: tuple[TrendRule, ...] = (
    TrendRule(
        metric="current_ratio",
        threshold=1.5,
        label_if_true=Trend.POSITIVE,
        label_otherwise=Trend.NEGATIVE,
    ),
    TrendRule(metric="net_margin", threshold=15.0),
    TrendRule(metric="roa", threshold=5.0),
)


def classify(
    metric: str, value: float, rules: tuple[TrendRule, ...] = TREND_RULES
) -> Trend | None:
    """Return the trend tag for ``metric``, or None when no rule covers it."""
    for rule in rules:
        if rule.metric == metric:
            return rule.evaluate(value)
    return None


def classify_all(
    ratios: RatioResult, rules: tuple[TrendRule, ...] = TREND_RULES
) -> dict[str, Trend]:
    return {rule.metric: rule.evaluate(getattr(ratios, rule.metric)) for rule in rules}
