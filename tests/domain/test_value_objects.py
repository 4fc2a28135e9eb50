"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money, Percentage, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(999.99).amount == Decimal("999.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_factory_rejects_infinity(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("inf")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition_is_exact(self):
        assert Money.of("999.99") + Money.of("59.98") == Money.of("1059.97")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_decimal(self):
        assert Money.of("50") * Decimal("0.2") == Money.of("10")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 0.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_str_rounds_half_up(self):
        assert str(Money.of("0.125")) == "$0.13"
        assert str(Money.of("2.375")) == "$2.38"
        assert str(Money.of("0.124")) == "$0.12"

    def test_equality_ignores_trailing_zeros(self):
        assert Money.of("999.99") == Money.of("999.990")
        assert hash(Money.of("999.99")) == hash(Money.of("999.990"))


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    @pytest.mark.parametrize("value", ["0", "12.5", "100"])
    def test_bounds_inclusive(self, value):
        assert Percentage.of(value).value == Decimal(value)

    @pytest.mark.parametrize("value", [-0.01, 100.01, -1, 150])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.of(value)

    def test_applied_to(self):
        assert Percentage.of(20).applied_to(Money.of("999.99")) == Money.of("199.998")

    def test_none_is_zero(self):
        assert Percentage.none().applied_to(Money.of("10")) == Money.zero()
