"""Derived views built from pipeline stages."""

from decimal import Decimal
from typing import Iterable

from .models import AmountLike, Transaction, to_amount
from .pipeline import Pipeline, group_totals, sort_by_descending, where


def large_transactions(min_amount: AmountLike) -> Pipeline:
    """Transactions strictly above min_amount, newest first."""
    threshold = to_amount(min_amount)
    return Pipeline.of(
        where(lambda t: t.amount > threshold),
        sort_by_descending(lambda t: t.date),
        name="large_transactions",
    )


def customer_totals(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Total amount per customer in first-seen order."""
    totals = group_totals(lambda t: t.customer_id, lambda t: t.amount, start=Decimal("0"))
    return totals(transactions)
