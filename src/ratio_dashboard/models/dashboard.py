from pydantic import BaseModel

from ratio_dashboard.models.common import Tab, Trend
from ratio_dashboard.models.inputs import FinancialInputs


class MetricCard(BaseModel):
    title: str
    metric: str
    value: str
    trend: Trend | None = None


class InfoBox(BaseModel):
    label: str
    value: str
    description: str = ""


class ChartBar(BaseModel):
    name: str
    value: float
    color: str


class Headline(BaseModel):
    label: str
    value: str
    progress: float = 0.0


class TabPanel(BaseModel):
    tab: Tab
    title: str
    description: str
    boxes: list[InfoBox] = []
    bars: list[ChartBar] = []
    headline: Headline | None = None


class DashboardView(BaseModel):
    inputs: FinancialInputs
    cards: list[MetricCard]
    panels: list[TabPanel]
    active_tab: Tab = Tab.LIQUIDITY

    @property
    def active_panel(self) -> TabPanel:
        for panel in self.panels:
            if panel.tab == self.active_tab:
                return panel
        return self.panels[0]

    def panel(self, tab: Tab) -> TabPanel:
        return next(p for p in self.panels if p.tab == tab)
