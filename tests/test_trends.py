from ratio_dashboard.analysis.ratios import compute_ratios
from ratio_dashboard.analysis.trends import (
    TREND_RULES,
    TrendRule,
    classify,
    classify_all,
)
from ratio_dashboard.models.common import Trend
from ratio_dashboard.models.inputs import FinancialInputs


class TestTrend:
    def test_labels(self):
        assert Trend.POSITIVE.label == "Good"
        assert Trend.NEGATIVE.label == "Alert"
        assert Trend.NEUTRAL.label == "Neutral"


class TestClassify:
    def test_current_ratio_above_threshold(self):
        assert classify("current_ratio", 2.0) == Trend.POSITIVE

    def test_current_ratio_at_threshold_is_alert(self):
        assert classify("current_ratio", 1.5) == Trend.NEGATIVE

    def test_net_margin(self):
        assert classify("net_margin", 15.01) == Trend.POSITIVE
        assert classify("net_margin", 15.0) == Trend.NEUTRAL

    def test_roa(self):
        assert classify("roa", 40.0) == Trend.POSITIVE
        assert classify("roa", -10.0) == Trend.NEUTRAL

    def test_untagged_metric(self):
        assert classify("asset_turnover", 2.0) is None

    def test_custom_rules(self):
        rules = (
            TrendRule(
                metric="asset_turnover",
                threshold=1.0,
                comparison="<",
                label_if_true=Trend.NEGATIVE,
            ),
        )
        assert classify("asset_turnover", 0.5, rules) == Trend.NEGATIVE
        assert classify("asset_turnover", 2.0, rules) == Trend.NEUTRAL


class TestClassifyAll:
    def test_default_inputs(self):
        trends = classify_all(compute_ratios(FinancialInputs()))
        assert trends == {
            "current_ratio": Trend.POSITIVE,
            "net_margin": Trend.POSITIVE,
            "roa": Trend.POSITIVE,
        }

    def test_rule_table_covers_three_metrics(self):
        assert [r.metric for r in TREND_RULES] == ["current_ratio", "net_margin", "roa"]
