"""
Money Value Object.

Represents a non-negative amount in a single currency.
"""

from decimal import Decimal, InvalidOperation
from typing import Tuple, Union

from catalog_api.core.errors import CurrencyMismatchError, InvalidMoneyError
from catalog_api.domain.shared.value_object import ValueObject


Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number, field: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps float literals such as 9.99 exact
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidMoneyError(field=field, reason=f"Invalid amount: {value!r}") from e


class Money(ValueObject):
    """
    Value object representing an amount of money.

    Principles:
    - Immutable: Cannot be changed after creation
    - Self-validating: Amount is never negative, currency is never blank
    - Normalized: Currency code is stored upper-cased and trimmed

    Arithmetic and ordering are only defined for the same currency;
    mixing currencies raises CurrencyMismatchError.

    Usage:
        >>> price = Money(Decimal("9.99"), "usd")
        >>> str(price)
        '9.99 USD'
        >>> str(price.multiply(2))
        '19.98 USD'
    """

    def __init__(self, amount: Number, currency: str):
        """
        Create money value.

        Args:
            amount: Non-negative amount
            currency: Currency code (case-insensitive)

        Raises:
            InvalidMoneyError: If amount is negative or currency is blank
        """
        value = _to_decimal(amount, "amount")
        if value < 0:
            raise InvalidMoneyError(field="amount", reason="Amount cannot be negative")
        if currency is None or not str(currency).strip():
            raise InvalidMoneyError(field="currency", reason="Currency cannot be empty")

        self.amount = value
        self.currency = str(currency).strip().upper()

    @classmethod
    def zero(cls, currency: str) -> "Money":
        """Zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    def _ensure_same_currency(self, other: "Money", operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {operation} Money and {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(operation, self.currency, other.currency)

    def add(self, other: "Money") -> "Money":
        """Sum of two amounts in the same currency."""
        self._ensure_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """
        Difference of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ
            InvalidMoneyError: If the result would be negative
        """
        self._ensure_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: Number) -> "Money":
        """Amount scaled by a non-negative factor."""
        return Money(self.amount * _to_decimal(factor, "factor"), self.currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: Number) -> "Money":
        return self.multiply(factor)

    __rmul__ = __mul__

    def __lt__(self, other: "Money") -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount >= other.amount

    def _components(self) -> Tuple[Decimal, str]:
        return self.amount, self.currency

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
