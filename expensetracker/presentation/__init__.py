"""Mini README: Presentation helpers shared by the HTML and JSON surfaces."""

from .projector import (
    EMPTY_STATE_MESSAGE,
    MISSING_DATE,
    RowView,
    ViewModel,
    format_count_label,
    format_currency,
    format_date,
    project,
)

__all__ = [
    "EMPTY_STATE_MESSAGE",
    "MISSING_DATE",
    "RowView",
    "ViewModel",
    "format_count_label",
    "format_currency",
    "format_date",
    "project",
]
