import logging
import math
from collections.abc import Callable

from ratio_dashboard.analysis.ratios import compute_ratios
from ratio_dashboard.models.inputs import FinancialInputs, resolve_field
from ratio_dashboard.models.ratios import RatioResult

logger = logging.getLogger(__name__)

Subscriber = Callable[[FinancialInputs, RatioResult], None]


def parse_amount(raw_text: str) -> float:
    """Parse user-entered text, falling back to 0 for anything unusable."""
    try:
        value = float(raw_text.strip())
    except (AttributeError, ValueError):
        logger.debug("Could not parse %r as a number, using 0", raw_text)
        return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite amount %r replaced with 0", raw_text)
        return 0.0
    return value


class InputStore:
    """Owns the current input snapshot and the ratios derived from it.

    Every mutation recomputes the ratios and notifies subscribers, in the
    order they subscribed, before returning.
    """

    def __init__(self, initial: FinancialInputs | None = None) -> None:
        self._initial = initial or FinancialInputs()
        self._inputs = self._initial
        self._ratios = compute_ratios(self._inputs)
        self._subscribers: list[Subscriber] = []

    @property
    def inputs(self) -> FinancialInputs:
        return self._inputs

    @property
    def ratios(self) -> RatioResult:
        return self._ratios

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_field(self, name: str, raw_text: str) -> FinancialInputs:
        field = resolve_field(name)
        value = parse_amount(raw_text)
        logger.debug("Setting %s to %s", field, value)
        return self.replace(self._inputs.model_copy(update={field: value}))

    def replace(self, inputs: FinancialInputs) -> FinancialInputs:
        self._inputs = inputs
        self._ratios = compute_ratios(inputs)
        for callback in list(self._subscribers):
            callback(self._inputs, self._ratios)
        return self._inputs

    def reset(self) -> FinancialInputs:
        return self.replace(self._initial)
