"""Mini README: Core package initializer for the expense tracker.

Re-exports the command-handler service and the logger factory so callers
can drive a ledger without knowing the module layout.
"""

from .logging_utils import get_logger
from .tracker import DeletionResult, ExpenseTracker, SubmissionResult

__all__ = ["DeletionResult", "ExpenseTracker", "SubmissionResult", "get_logger"]
