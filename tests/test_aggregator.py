"""Mini README: Tests for income, expense and balance totals."""

from __future__ import annotations

from datetime import date

import pytest

from expensetracker.ledger import LedgerStore, Summary, TransactionType, contribution, summarize


def _store_with(*entries):
    store = LedgerStore()
    for amount, transaction_type in entries:
        store.add_transaction("Entry", amount, transaction_type, date(2026, 1, 1))
    return store


def test_summarize_empty_is_all_zero() -> None:
    summary = summarize([])
    assert summary == Summary(0.0, 0.0)
    assert summary.as_dict() == {"income": 0.0, "expense": 0.0, "balance": 0.0}


def test_summarize_splits_by_type_and_balances() -> None:
    store = _store_with(
        (1000.0, TransactionType.INCOME),
        (250.5, TransactionType.EXPENSE),
        (49.5, TransactionType.EXPENSE),
        (20.0, TransactionType.INCOME),
    )

    summary = summarize(store.list_transactions())
    assert summary.income == pytest.approx(1020.0)
    assert summary.expense == pytest.approx(300.0)
    assert summary.balance == pytest.approx(summary.income - summary.expense)


def test_summarize_is_additive_per_record() -> None:
    """Adding one record changes exactly one of the two totals by its amount."""

    store = _store_with((500.0, TransactionType.INCOME), (120.0, TransactionType.EXPENSE))
    before = summarize(store.list_transactions())

    added = store.add_transaction("Bonus", 80.0, TransactionType.INCOME, date(2026, 1, 3))
    after = summarize(store.list_transactions())

    assert after == before + contribution(added)
    assert after.expense == before.expense
    assert contribution(added) == Summary(income=80.0)


def test_negative_balance_when_expenses_exceed_income() -> None:
    store = _store_with((100.0, TransactionType.INCOME), (350.0, TransactionType.EXPENSE))

    assert summarize(store.list_transactions()).balance == pytest.approx(-250.0)
