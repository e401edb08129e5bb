"""Mini README: Command handlers tying the ledger to its views.

Structure:
    * SubmissionResult - outcome of a submit, with validation detail.
    * DeletionResult - outcome of a delete-by-id.
    * ExpenseTracker - owns one ``LedgerStore`` and runs validate, mutate,
      summarise and project for each command.

Both the HTML dashboard and the JSON API drive the ledger through this class,
so they share the same rules and the same view of the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .ledger import (
    LedgerStore,
    Summary,
    Transaction,
    TransactionType,
    ValidationResult,
    parse_amount,
    parse_date,
    summarize,
    validate,
)
from .ledger.validation import AmountInput, DateInput
from .logging_utils import get_logger
from .presentation import ViewModel, project

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Result of ``ExpenseTracker.submit``."""

    validation: ValidationResult
    transaction: Optional[Transaction]
    summary: Summary
    view: ViewModel

    @property
    def accepted(self) -> bool:
        """True when the submission produced a stored transaction."""

        return self.transaction is not None


@dataclass(frozen=True)
class DeletionResult:
    """Result of ``ExpenseTracker.delete``; ``removed`` is False for unknown ids."""

    transaction_id: int
    removed: bool
    summary: Summary
    view: ViewModel


class ExpenseTracker:
    """Single-ledger application service."""

    def __init__(self, store: Optional[LedgerStore] = None, *, currency_symbol: str = "$") -> None:
        self._store = store if store is not None else LedgerStore()
        self.currency_symbol = currency_symbol

    @property
    def store(self) -> LedgerStore:
        """Underlying store; the web layer uses it for single-record lookups."""

        return self._store

    def transactions(self) -> Tuple[Transaction, ...]:
        """Return the ledger snapshot in insertion order."""

        return self._store.list_transactions()

    def summary(self) -> Summary:
        """Totals for the current ledger."""

        return summarize(self._store.list_transactions())

    def view(self) -> ViewModel:
        """Project the current ledger for the dashboard."""

        transactions = self._store.list_transactions()
        return project(transactions, summarize(transactions), currency_symbol=self.currency_symbol)

    def submit(
        self,
        description: Optional[str],
        amount: AmountInput,
        transaction_type: Union[TransactionType, str],
        occurred_on: DateInput,
    ) -> SubmissionResult:
        """Validate raw input and, when it passes, record the transaction."""

        validation = validate(description, amount, occurred_on)
        transaction: Optional[Transaction] = None
        if validation.valid:
            if not isinstance(transaction_type, TransactionType):
                transaction_type = TransactionType.from_str(transaction_type)
            transaction = self._store.add_transaction(
                description.strip(),
                parse_amount(amount),
                transaction_type,
                parse_date(occurred_on),
            )
        else:
            LOGGER.info("Rejected submission; invalid fields: %s", ", ".join(sorted(validation.failed_fields)))
        return SubmissionResult(
            validation=validation,
            transaction=transaction,
            summary=self.summary(),
            view=self.view(),
        )

    def delete(self, transaction_id: int) -> DeletionResult:
        """Remove a transaction by id; unknown ids leave the ledger untouched."""

        removed = self._store.remove_transaction(transaction_id)
        return DeletionResult(
            transaction_id=transaction_id,
            removed=removed,
            summary=self.summary(),
            view=self.view(),
        )
