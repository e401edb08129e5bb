"""Mini README: Turns ledger data into display-ready view records.

Structure:
    * RowView - one table row, newest transaction first.
    * ViewModel - rows plus summary cards, count badge and empty state.
    * project - builds a ViewModel from a ledger snapshot and its summary.
    * format_currency / format_date / format_count_label - text helpers.

Values are plain strings and are NOT escaped; the template layer escapes
free text when it writes markup.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..ledger.aggregator import Summary
from ..ledger.store import Transaction

EMPTY_STATE_MESSAGE = "No transactions yet. Add one above!"
MISSING_DATE = "—"

# Fixed English abbreviations so output does not depend on the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True, slots=True)
class RowView:
    """Table row for a single transaction."""

    serial: int
    transaction_id: int
    description: str
    transaction_type: str
    icon: str
    amount_display: str
    date_display: str
    date_iso: str

    def as_dict(self) -> Dict[str, object]:
        """Export the row for JSON clients."""

        return {
            "serial": self.serial,
            "id": self.transaction_id,
            "description": self.description,
            "type": self.transaction_type,
            "icon": self.icon,
            "amount": self.amount_display,
            "date": self.date_display,
            "date_iso": self.date_iso,
        }


@dataclass(frozen=True, slots=True)
class ViewModel:
    """Everything the dashboard needs to draw the ledger."""

    rows: Tuple[RowView, ...]
    count_label: str
    income_display: str
    expense_display: str
    balance_display: str
    balance_negative: bool
    empty_state: Optional[str]

    @property
    def is_empty(self) -> bool:
        """True when the empty-state marker replaces the rows."""

        return self.empty_state is not None

    def as_dict(self) -> Dict[str, object]:
        """Export the whole view for JSON clients."""

        return {
            "rows": [row.as_dict() for row in self.rows],
            "count_label": self.count_label,
            "income": self.income_display,
            "expense": self.expense_display,
            "balance": self.balance_display,
            "balance_negative": self.balance_negative,
            "empty_state": self.empty_state,
        }


def format_currency(value: float, symbol: str = "$") -> str:
    """Format ``value`` with two decimals, thousands separators and a leading minus."""

    rounded = round(value, 2)
    prefix = f"-{symbol}" if rounded < 0 else symbol
    return f"{prefix}{abs(rounded):,.2f}"


def format_date(value: Union[date, str, None]) -> str:
    """Render a calendar date as ``Feb 23, 2026``."""

    if not value:
        return MISSING_DATE
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def format_count_label(count: int) -> str:
    """Return "1 record" for a single entry and "N records" otherwise."""

    return "1 record" if count == 1 else f"{count} records"


def project(
    transactions: Iterable[Transaction],
    summary: Summary,
    *,
    currency_symbol: str = "$",
) -> ViewModel:
    """Build the dashboard view from records in insertion order."""

    records = list(transactions)
    rows: List[RowView] = []
    for serial, transaction in enumerate(reversed(records), start=1):
        rows.append(
            RowView(
                serial=serial,
                transaction_id=transaction.transaction_id,
                description=transaction.description,
                transaction_type=transaction.transaction_type.value,
                icon="down" if transaction.is_income else "up",
                amount_display=format_currency(transaction.amount, currency_symbol),
                date_display=format_date(transaction.occurred_on),
                date_iso=transaction.occurred_on.isoformat() if transaction.occurred_on else "",
            )
        )
    return ViewModel(
        rows=tuple(rows),
        count_label=format_count_label(len(records)),
        income_display=format_currency(summary.income, currency_symbol),
        expense_display=format_currency(summary.expense, currency_symbol),
        balance_display=format_currency(summary.balance, currency_symbol),
        balance_negative=round(summary.balance, 2) < 0,
        empty_state=None if records else EMPTY_STATE_MESSAGE,
    )
