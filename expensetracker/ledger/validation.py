"""Mini README: Field rules applied to raw form input before it hits the ledger.

Structure:
    * ValidationResult - outcome listing every failed field with a message.
    * validate - checks description, amount and date independently.
    * parse_amount / parse_date - shared coercion helpers.

Every rule runs on every call so the caller can flag all bad fields at once.
The transaction type is not checked here; the input surfaces only ever offer
the two ``TransactionType`` values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, FrozenSet, Optional, Union

MAX_DESCRIPTION_LENGTH = 100

DESCRIPTION = "description"
AMOUNT = "amount"
DATE = "date"

AmountInput = Union[str, int, float, None]
DateInput = Union[str, date, None]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass."""

    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """True when no field failed."""

        return not self.errors

    @property
    def failed_fields(self) -> FrozenSet[str]:
        """Names of the fields that failed."""

        return frozenset(self.errors)

    def as_dict(self) -> Dict[str, object]:
        """Export the outcome for JSON responses."""

        return {
            "valid": self.valid,
            "failed_fields": sorted(self.errors),
            "errors": dict(self.errors),
        }


def parse_amount(value: AmountInput) -> float:
    """Parse numeric text or a number into a finite float."""

    if value is None or isinstance(value, bool):
        raise ValueError("Amount is required.")
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        try:
            parsed = float(str(value).strip())
        except ValueError as error:
            raise ValueError(f"Amount '{value}' is not a number.") from error
    if not math.isfinite(parsed):
        raise ValueError(f"Amount '{value}' is not a finite number.")
    return parsed


def parse_date(value: DateInput) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def _check_description(description: Optional[str]) -> Optional[str]:
    """Return an error message for a blank or overlong description."""

    text = (description or "").strip()
    if not text:
        return "Description is required."
    if len(text) > MAX_DESCRIPTION_LENGTH:
        return f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters."
    return None


def _check_amount(amount: AmountInput) -> Optional[str]:
    """Return an error message unless the amount is a positive number."""

    try:
        parsed = parse_amount(amount)
    except ValueError:
        return "Amount must be a number."
    if parsed <= 0:
        return "Amount must be greater than zero."
    return None


def _check_date(occurred_on: DateInput) -> Optional[str]:
    """Return an error message for a missing or malformed date."""

    if occurred_on is None or (isinstance(occurred_on, str) and not occurred_on.strip()):
        return "Date is required."
    try:
        parse_date(occurred_on)
    except ValueError:
        return "Date must be a valid calendar date (YYYY-MM-DD)."
    return None


def validate(
    description: Optional[str],
    amount: AmountInput,
    occurred_on: DateInput,
) -> ValidationResult:
    """Check a candidate transaction and report every failing field."""

    checks = (
        (DESCRIPTION, _check_description(description)),
        (AMOUNT, _check_amount(amount)),
        (DATE, _check_date(occurred_on)),
    )
    return ValidationResult(errors={name: message for name, message in checks if message})
