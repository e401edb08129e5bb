"""Mini README: Income, expense and balance totals for a ledger snapshot.

``summarize`` walks the records once. Totals are left unrounded; formatting
belongs to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .store import Transaction, TransactionType


@dataclass(frozen=True, slots=True)
class Summary:
    """Derived totals; ``balance`` is always ``income - expense``."""

    income: float = 0.0
    expense: float = 0.0

    @property
    def balance(self) -> float:
        """Net position: income minus expense."""

        return self.income - self.expense

    def __add__(self, other: "Summary") -> "Summary":
        """Combine two summaries field by field."""

        if not isinstance(other, Summary):
            return NotImplemented
        return Summary(income=self.income + other.income, expense=self.expense + other.expense)

    def as_dict(self) -> Dict[str, float]:
        """Export totals, including the balance, for JSON responses."""

        return {"income": self.income, "expense": self.expense, "balance": self.balance}


def contribution(transaction: Transaction) -> Summary:
    """Return the totals a single record adds to a summary."""

    if transaction.transaction_type is TransactionType.INCOME:
        return Summary(income=transaction.amount)
    return Summary(expense=transaction.amount)


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """Sum incomes and expenses in a single pass."""

    income = 0.0
    expense = 0.0
    for transaction in transactions:
        if transaction.transaction_type is TransactionType.INCOME:
            income += transaction.amount
        else:
            expense += transaction.amount
    return Summary(income=income, expense=expense)
