import pytest

from ratio_dashboard.models.inputs import FinancialInputs, resolve_field
from ratio_dashboard.store import InputStore, parse_amount


class TestParseAmount:
    def test_plain_number(self):
        assert parse_amount("1234.5") == 1234.5

    def test_whitespace(self):
        assert parse_amount("  42 ") == 42.0

    def test_negative(self):
        assert parse_amount("-5000") == -5000.0

    def test_empty(self):
        assert parse_amount("") == 0.0

    def test_text(self):
        assert parse_amount("abc") == 0.0

    def test_non_finite(self):
        assert parse_amount("nan") == 0.0
        assert parse_amount("inf") == 0.0


class TestResolveField:
    def test_snake_case(self):
        assert resolve_field("net_income") == "net_income"

    def test_camel_case_alias(self):
        assert resolve_field("currentLiabilities") == "current_liabilities"

    def test_kebab_case(self):
        assert resolve_field("total-assets") == "total_assets"

    def test_unknown(self):
        with pytest.raises(KeyError):
            resolve_field("ebitda")


class TestInputStore:
    def test_defaults_computed_on_init(self):
        store = InputStore()
        assert store.inputs == FinancialInputs()
        assert store.ratios.current_ratio == pytest.approx(2.0)

    def test_set_field_replaces_only_named_field(self):
        store = InputStore()
        before = store.inputs
        after = store.set_field("revenue", "200000")
        assert after.revenue == 200000.0
        assert after.model_dump(exclude={"revenue"}) == before.model_dump(
            exclude={"revenue"}
        )
        assert before.revenue == 100000.0

    def test_set_field_recomputes(self):
        store = InputStore()
        store.set_field("currentLiabilities", "0")
        assert store.ratios.current_ratio == 0
        assert store.ratios.quick_ratio == 0

    @pytest.mark.parametrize("raw", ["", "abc"])
    def test_bad_text_same_as_zero(self, raw):
        coerced = InputStore().set_field("inventory", raw)
        zero = InputStore().set_field("inventory", "0")
        assert coerced == zero

    def test_unknown_field_raises(self):
        store = InputStore()
        with pytest.raises(KeyError):
            store.set_field("ebitda", "10")

    def test_subscribers_notified_in_order(self):
        store = InputStore()
        seen = []
        store.subscribe(lambda i, r: seen.append(("first", i.cogs, r.gross_profit)))
        store.subscribe(lambda i, r: seen.append(("second", i.cogs, r.gross_profit)))

        store.set_field("cogs", "50000")

        assert seen == [
            ("first", 50000.0, 50000.0),
            ("second", 50000.0, 50000.0),
        ]

    def test_unsubscribe(self):
        store = InputStore()
        calls = []
        unsubscribe = store.subscribe(lambda i, r: calls.append(i))
        store.set_field("cogs", "1")
        unsubscribe()
        store.set_field("cogs", "2")
        assert len(calls) == 1

    def test_replace_and_reset(self):
        initial = FinancialInputs(revenue=10.0)
        store = InputStore(initial)
        store.replace(FinancialInputs(revenue=0.0))
        assert store.ratios.net_margin == 0
        store.reset()
        assert store.inputs == initial
