"""Fixture transactions used by the tour and its tests."""

from datetime import date
from decimal import Decimal

from .models import Transaction


def sample_transactions() -> tuple[Transaction, ...]:
    """Three transactions across two customers, in booking order."""
    return (
        Transaction(date(2024, 8, 2), "Acme", Decimal("2400.00")),
        Transaction(date(2024, 8, 3), "LoonyTunes", Decimal("1500.00")),
        Transaction(date(2024, 8, 3), "Acme", Decimal("1800.00")),
    )
