"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable record stored by the ledger.
    * LedgerStore - owns the ordered record list and the id counter.

The store trusts its callers: input is validated by
``expensetracker.ledger.validation`` before ``add_transaction`` is reached.
Identifiers increase monotonically and are never handed out twice, even
after the record holding them has been removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single ledger entry; the amount is always positive."""

    transaction_id: int
    description: str
    amount: float
    transaction_type: TransactionType
    occurred_on: date
    created_at: datetime

    @property
    def is_income(self) -> bool:
        """True for income entries."""

        return self.transaction_type is TransactionType.INCOME

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.transaction_id,
            "description": self.description,
            "amount": self.amount,
            "type": self.transaction_type.value,
            "date": self.occurred_on.isoformat(),
            "created_at": self.created_at.isoformat(),
        }


def _utc_now() -> datetime:
    """Default clock for ``created_at`` stamps."""

    return datetime.now(timezone.utc)


class LedgerStore:
    """Ordered, append-mostly collection of transactions."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._transactions: List[Transaction] = []
        self._sequence = 0
        self._clock = clock or _utc_now
        LOGGER.debug("Ledger store initialised")

    def __len__(self) -> int:
        """Number of records currently held."""

        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        """True when a record with ``transaction_id`` is held."""

        return any(
            transaction.transaction_id == transaction_id
            for transaction in self._transactions
        )

    def _next_id(self) -> int:
        """Advance the sequence; ids are never handed out twice."""

        self._sequence += 1
        return self._sequence

    def add_transaction(
        self,
        description: str,
        amount: float,
        transaction_type: Union[TransactionType, str],
        occurred_on: date,
    ) -> Transaction:
        """Append a new record and return it."""

        if not isinstance(transaction_type, TransactionType):
            transaction_type = TransactionType.from_str(transaction_type)
        transaction = Transaction(
            transaction_id=self._next_id(),
            description=description,
            amount=float(amount),
            transaction_type=transaction_type,
            occurred_on=occurred_on,
            created_at=self._clock(),
        )
        self._transactions.append(transaction)
        LOGGER.info(
            "Recorded %s %s of %.2f (%s records)",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
            len(self._transactions),
        )
        return transaction

    def remove_transaction(self, transaction_id: int) -> bool:
        """Remove the matching record; unknown ids are a no-op returning False."""

        remaining = [
            transaction
            for transaction in self._transactions
            if transaction.transaction_id != transaction_id
        ]
        if len(remaining) == len(self._transactions):
            LOGGER.debug("Ignoring removal of unknown transaction %s", transaction_id)
            return False
        self._transactions = remaining
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def list_transactions(self) -> Tuple[Transaction, ...]:
        """Return records in insertion order.

        Display code wanting newest-first reverses this itself.
        """

        return tuple(self._transactions)

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.transaction_id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def seed_demo_transactions(self) -> None:
        """Populate the store with deterministic demo data."""

        demo_transactions = [
            ("Monthly salary", 4200.0, TransactionType.INCOME, date(2026, 1, 1)),
            ("Rent", 1450.0, TransactionType.EXPENSE, date(2026, 1, 2)),
            ("Groceries", 186.35, TransactionType.EXPENSE, date(2026, 1, 4)),
            ("Freelance invoice", 750.0, TransactionType.INCOME, date(2026, 1, 9)),
        ]
        for description, amount, transaction_type, occurred_on in demo_transactions:
            self.add_transaction(description, amount, transaction_type, occurred_on)
        LOGGER.debug("Seeded %s demo transactions", len(demo_transactions))
