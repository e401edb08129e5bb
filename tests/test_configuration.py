"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from expensetracker.configuration import ExpenseTrackerSettings


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_INTERFACE_PORT", "9100")
    monkeypatch.setenv("EXPENSE_TRACKER_CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "debug")

    settings = ExpenseTrackerSettings()

    assert settings.interface_port == 9100
    assert settings.currency_symbol == "€"
    assert settings.log_level == "DEBUG"


def test_settings_reject_bad_values() -> None:
    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(interface_port=70000)
    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(log_level="chatty")
