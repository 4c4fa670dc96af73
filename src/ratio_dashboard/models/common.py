from enum import StrEnum


class Trend(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @property
    def label(self) -> str:
        mapping = {
            Trend.POSITIVE: "Good",
            Trend.NEGATIVE: "Alert",
            Trend.NEUTRAL: "Neutral",
        }
        return mapping[self]


class Tab(StrEnum):
    LIQUIDITY = "liquidity"
    PROFITABILITY = "profitability"
    EFFICIENCY = "efficiency"

    @property
    def heading(self) -> str:
        icons = {
            Tab.LIQUIDITY: "💧",
            Tab.PROFITABILITY: "💰",
            Tab.EFFICIENCY: "⚙️",
        }
        return f"{icons[self]} {self.value.capitalize()}"
