"""
Тесты для value object Money.
"""

from decimal import Decimal

import pytest

from catalog_api.core.errors import CurrencyMismatchError, InvalidMoneyError
from catalog_api.domain.catalog_context.value_objects import Money


class TestMoneyCreation:
    """Тесты создания Money"""

    def test_currency_is_normalized(self):
        """Тест нормализации кода валюты"""
        money = Money(Decimal("9.99"), " usd ")
        assert money.currency == "USD"
        assert money.amount == Decimal("9.99")

    def test_float_amount_is_exact(self):
        """Тест точного преобразования float"""
        assert Money(9.99, "USD").amount == Decimal("9.99")

    def test_zero_amount_allowed(self):
        assert Money.zero("eur") == Money(0, "EUR")

    def test_negative_amount_rejected(self):
        """Тест отрицательной суммы"""
        with pytest.raises(InvalidMoneyError):
            Money(Decimal("-0.01"), "USD")

    @pytest.mark.parametrize("currency", ["", "   ", None])
    def test_blank_currency_rejected(self, currency):
        with pytest.raises(InvalidMoneyError):
            Money(Decimal("1"), currency)

    def test_invalid_money_is_value_error(self):
        """InvalidMoneyError совместим с ValueError"""
        with pytest.raises(ValueError):
            Money("abc", "USD")

    def test_immutable(self):
        money = Money(Decimal("1"), "USD")
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")


class TestMoneyArithmetic:
    """Тесты арифметики Money"""

    def test_add(self):
        assert Money(Decimal("1.50"), "USD") + Money(Decimal("2.25"), "usd") == Money(Decimal("3.75"), "USD")

    @pytest.mark.parametrize("a, b, c", [
        ("0", "0", "0"),
        ("0.01", "9.99", "100"),
        ("1.50", "2.25", "3.125"),
        ("123456789.99", "0.01", "987654321"),
        ("7", "0.10", "0.20"),
    ])
    def test_add_is_commutative_and_associative(self, a, b, c):
        x, y, z = Money(Decimal(a), "USD"), Money(Decimal(b), "USD"), Money(Decimal(c), "USD")

        assert x + y == y + x
        assert (x + y) + z == x + (y + z)
        assert x.add(y).add(z) == z.add(y).add(x)

    @pytest.mark.parametrize("amount", ["0", "0.01", "9.99", "1000"])
    def test_zero_is_additive_identity(self, amount):
        money = Money(Decimal(amount), "usd")
        zero = Money.zero("USD")

        assert zero.amount == Decimal("0")
        assert zero.currency == "USD"
        assert money + zero == money
        assert zero + money == money
        assert money - money == zero

    def test_subtract(self):
        result = Money(Decimal("5"), "USD").subtract(Money(Decimal("2"), "USD"))
        assert result == Money(Decimal("3"), "USD")

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(InvalidMoneyError):
            Money(Decimal("1"), "USD") - Money(Decimal("2"), "USD")

    def test_multiply(self):
        assert Money(Decimal("9.99"), "USD") * 2 == Money(Decimal("19.98"), "USD")
        assert 3 * Money(Decimal("1.10"), "USD") == Money(Decimal("3.30"), "USD")

    def test_currency_mismatch(self):
        """Тест операций с разными валютами"""
        with pytest.raises(CurrencyMismatchError):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "EUR")

    def test_add_non_money_raises_type_error(self):
        with pytest.raises(TypeError):
            Money(Decimal("1"), "USD") + 1


class TestMoneyComparison:
    """Тесты сравнения Money"""

    def test_ordering(self):
        cheap = Money(Decimal("1"), "USD")
        expensive = Money(Decimal("2"), "USD")
        assert cheap < expensive
        assert expensive >= cheap
        assert cheap <= Money(Decimal("1.00"), "USD")

    def test_ordering_across_currencies_rejected(self):
        with pytest.raises(CurrencyMismatchError):
            Money(Decimal("1"), "USD") < Money(Decimal("2"), "EUR")

    def test_equality_and_hash(self):
        a = Money(Decimal("1.0"), "usd")
        b = Money(Decimal("1.00"), "USD")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Money(Decimal("1"), "EUR")
        assert a != "1.00 USD"

    def test_str(self):
        assert str(Money(Decimal("9.9"), "usd")) == "9.90 USD"
