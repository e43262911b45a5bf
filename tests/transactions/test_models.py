"""Tests for the Transaction model"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

from fptour_app.transactions.models import Transaction, to_amount


class TestTransaction:
    """Test Transaction records"""

    def test_creation(self):
        """Test basic construction"""
        t = Transaction(date(2024, 8, 2), "Acme", Decimal("2400.00"))

        assert t.date == date(2024, 8, 2)
        assert t.customer_id == "Acme"
        assert t.amount == Decimal("2400.00")

    def test_amount_normalized_to_decimal(self):
        """Test numeric and string amounts become Decimal"""
        assert Transaction(date(2024, 1, 1), "A", 10).amount == Decimal("10")
        assert Transaction(date(2024, 1, 1), "A", "12.50").amount == Decimal("12.50")
        assert Transaction(date(2024, 1, 1), "A", 0.1).amount == Decimal("0.1")

    def test_negative_amount_rejected(self):
        """Test amounts must be non-negative"""
        with pytest.raises(ValueError):
            Transaction(date(2024, 1, 1), "Acme", Decimal("-0.01"))

    def test_non_finite_amount_rejected(self):
        """Test NaN and infinity are rejected"""
        with pytest.raises(ValueError):
            Transaction(date(2024, 1, 1), "Acme", Decimal("NaN"))
        with pytest.raises(ValueError):
            Transaction(date(2024, 1, 1), "Acme", Decimal("Infinity"))

    def test_empty_customer_rejected(self):
        """Test customer_id is required"""
        with pytest.raises(ValueError):
            Transaction(date(2024, 1, 1), "", Decimal("1"))

    def test_immutable(self, transactions):
        """Test fields cannot be reassigned"""
        with pytest.raises(FrozenInstanceError):
            transactions[0].amount = Decimal("1")

    def test_with_amount_returns_copy(self, transactions):
        """Test copy-with-update leaves the original untouched"""
        original = transactions[0]
        updated = original.with_amount("2500.00")

        assert updated.amount == Decimal("2500.00")
        assert updated.customer_id == original.customer_id
        assert updated.date == original.date
        assert original.amount == Decimal("2400.00")
        assert updated is not original

    def test_with_customer_and_date(self, transactions):
        """Test other copy-with-update helpers"""
        moved = transactions[0].with_customer("Globex").with_date(date(2024, 9, 1))

        assert moved == Transaction(date(2024, 9, 1), "Globex", Decimal("2400.00"))
        assert transactions[0].customer_id == "Acme"

    def test_with_amount_validates(self, transactions):
        """Test updates still enforce invariants"""
        with pytest.raises(ValueError):
            transactions[0].with_amount(-5)

    def test_value_equality(self):
        """Test records with equal fields are equal and hash alike"""
        a = Transaction(date(2024, 1, 1), "Acme", Decimal("1.00"))
        b = Transaction(date(2024, 1, 1), "Acme", Decimal("1.00"))

        assert a == b
        assert len({a, b}) == 1


class TestToAmount:
    """Test amount conversion"""

    def test_invalid_string(self):
        """Test non-numeric strings"""
        with pytest.raises(ValueError):
            to_amount("lots")

    def test_bool_rejected(self):
        """Test booleans are not amounts"""
        with pytest.raises(ValueError):
            to_amount(True)
