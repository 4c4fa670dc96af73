from pydantic import BaseModel, ConfigDict


class FinancialInputs(BaseModel):
    """Raw figures for a single period, as entered by the user.

    No cross-field checks are applied: negative revenue or inventory above
    current assets are accepted as-is.
    """

    model_config = ConfigDict(frozen=True)

    revenue: float = 100000.0
    cogs: float = 40000.0
    net_income: float = 20000.0
    total_assets: float = 50000.0
    current_assets: float = 30000.0
    inventory: float = 5000.0
    current_liabilities: float = 15000.0


class InputField(BaseModel):
    name: str
    alias: str
    label: str
    group: str


PROFITABILITY_GROUP = "Profitability Inputs"
BALANCE_SHEET_GROUP = "Balance Sheet Inputs"

INPUT_FIELDS: tuple[InputField, ...] = (
    InputField(
        name="revenue", alias="revenue", label="Revenue", group=PROFITABILITY_GROUP
    ),
    InputField(name="cogs", alias="cogs", label="COGS", group=PROFITABILITY_GROUP),
    InputField(
        name="net_income",
        alias="netIncome",
        label="Net Income",
        group=PROFITABILITY_GROUP,
    ),
    InputField(
        name="total_assets",
        alias="totalAssets",
        label="Total Assets",
        group=BALANCE_SHEET_GROUP,
    ),
    InputField(
        name="current_assets",
        alias="currentAssets",
        label="Current Assets",
        group=BALANCE_SHEET_GROUP,
    ),
    InputField(
        name="inventory",
        alias="inventory",
        label="Inventory",
        group=BALANCE_SHEET_GROUP,
    ),
    InputField(
        name="current_liabilities",
        alias="currentLiabilities",
        label="Current Liabilities",
        group=BALANCE_SHEET_GROUP,
    ),
)

_LOOKUP: dict[str, str] = {
    key: f.name
    for f in INPUT_FIELDS
    for key in (f.name, f.alias, f.name.replace("_", "-"))
}


def resolve_field(name: str) -> str:
    """Map a snake_case, kebab-case or camelCase field name to the model field."""
    try:
        return _LOOKUP[name.strip()]
    except KeyError:
        raise KeyError(f"Unknown input field: {name}") from None
