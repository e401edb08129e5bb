"""Mini README: Ledger domain for the expense tracker.

Groups the record store, the totals aggregator and the input validator.
None of these modules touch the web stack, so they can be exercised directly
from tests or a REPL.
"""

from .aggregator import Summary, contribution, summarize
from .store import LedgerStore, Transaction, TransactionType
from .validation import MAX_DESCRIPTION_LENGTH, ValidationResult, parse_amount, parse_date, validate

__all__ = [
    "LedgerStore",
    "MAX_DESCRIPTION_LENGTH",
    "Summary",
    "Transaction",
    "TransactionType",
    "ValidationResult",
    "contribution",
    "parse_amount",
    "parse_date",
    "summarize",
    "validate",
]
