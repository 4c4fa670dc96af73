from pydantic import BaseModel, ConfigDict


class RatioResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Liquidity
    current_ratio: float = 0.0
    quick_ratio: float = 0.0

    # Profitability
    gross_profit: float = 0.0
    gross_margin: float = 0.0
    net_margin: float = 0.0
    roa: float = 0.0

    # Efficiency
    asset_turnover: float = 0.0
    inventory_turnover: float = 0.0
