"""
Transaction record model.

Transactions are immutable; the with_* methods return updated copies and
leave the original untouched.
"""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Union

AmountLike = Union[Decimal, int, str, float]


@dataclass(frozen=True)
class Transaction:
    """A single dated payment from a customer."""
    date: date          # Booking date
    customer_id: str    # Customer identifier
    amount: Decimal     # Non-negative currency amount

    def __post_init__(self):
        """Normalize the amount to Decimal and check invariants."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", to_amount(self.amount))

        if not self.amount.is_finite() or self.amount < 0:
            raise ValueError(f"Amount must be a non-negative finite value, got {self.amount}")

        if not self.customer_id:
            raise ValueError("customer_id must not be empty")

    def with_amount(self, amount: AmountLike) -> "Transaction":
        """Copy with a different amount."""
        return replace(self, amount=to_amount(amount))

    def with_customer(self, customer_id: str) -> "Transaction":
        """Copy with a different customer."""
        return replace(self, customer_id=customer_id)

    def with_date(self, new_date: date) -> "Transaction":
        """Copy with a different date."""
        return replace(self, date=new_date)


def to_amount(value: AmountLike) -> Decimal:
    """Convert a number or numeric string to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
