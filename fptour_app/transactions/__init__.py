"""Immutable transaction records and composable query pipelines"""

from .models import Transaction
from .pipeline import (
    Pipeline,
    average_by,
    compose,
    count,
    find,
    group_totals,
    pipe,
    select,
    sort_by,
    sort_by_descending,
    sum_by,
    take,
    try_find,
    where,
)
from .sample import sample_transactions
from .views import customer_totals, large_transactions

__all__ = [
    "Transaction",
    "Pipeline",
    "average_by",
    "compose",
    "count",
    "find",
    "group_totals",
    "pipe",
    "select",
    "sort_by",
    "sort_by_descending",
    "sum_by",
    "take",
    "try_find",
    "where",
    "sample_transactions",
    "customer_totals",
    "large_transactions",
]
