"""Mini README: Tests for the FastAPI dashboard and JSON routes.

Uses FastAPI's ``TestClient`` against a fresh application per test so each
case starts from an empty ledger.
"""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from expensetracker.configuration import ExpenseTrackerSettings
from expensetracker.interface import create_application
from expensetracker.logging_utils import configure_root_logger


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application(ExpenseTrackerSettings()))


def test_dashboard_renders_empty_state(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "No transactions yet. Add one above!" in response.text
    assert "0 records" in response.text


def test_dashboard_escapes_descriptions(client: TestClient) -> None:
    client.post(
        "/transactions",
        json={"description": "<script>alert(1)</script>", "amount": 5, "type": "expense", "date": "2026-01-01"},
    )

    body = client.get("/").text
    assert "<script>alert(1)</script>" not in body
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body


def test_form_submission_redirects_and_lists_row(client: TestClient) -> None:
    response = client.post(
        "/submit",
        data={"description": "Salary", "amount": "1234.5", "type": "income", "date": "2026-02-23"},
        follow_redirects=False,
    )
    assert response.status_code == 303

    body = client.get("/").text
    assert "Salary" in body
    assert "$1,234.50" in body
    assert "Feb 23, 2026" in body
    assert "1 record" in body


def test_invalid_form_submission_marks_fields(client: TestClient) -> None:
    response = client.post(
        "/submit",
        data={"description": "", "amount": "-5", "type": "expense", "date": ""},
    )

    assert response.status_code == 422
    assert response.text.count("is-invalid") == 3
    assert client.get("/transactions").json()["transactions"] == []


def test_form_delete_redirects(client: TestClient) -> None:
    created = client.post(
        "/transactions",
        json={"description": "Lunch", "amount": "12", "type": "expense", "date": "2026-01-01"},
    ).json()["transaction"]

    response = client.post(f"/delete/{created['id']}", follow_redirects=False)

    assert response.status_code == 303
    assert client.get("/transactions").json()["transactions"] == []


def test_rest_create_list_and_delete(client: TestClient) -> None:
    first = client.post(
        "/transactions",
        json={"description": "Salary", "amount": 1000, "type": "income", "date": "2026-01-01"},
    )
    second = client.post(
        "/transactions",
        json={"description": "Rent", "amount": "300", "type": "expense", "date": "2026-01-02"},
    )
    assert first.status_code == 201
    assert second.status_code == 201
    assert second.json()["summary"] == {"income": 1000.0, "expense": 300.0, "balance": 700.0}

    listing = client.get("/transactions").json()
    assert [entry["description"] for entry in listing["transactions"]] == ["Salary", "Rent"]
    assert listing["count_label"] == "2 records"

    rent_id = second.json()["transaction"]["id"]
    deleted = client.delete(f"/transactions/{rent_id}")
    repeated = client.delete(f"/transactions/{rent_id}")
    assert deleted.json()["removed"] is True
    assert repeated.status_code == 200
    assert repeated.json()["removed"] is False
    assert repeated.json()["summary"]["balance"] == 1000.0


def test_rest_create_rejects_invalid_fields(client: TestClient) -> None:
    response = client.post(
        "/transactions",
        json={"description": "x" * 101, "amount": "0", "type": "income", "date": "2026-01-01"},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["failed_fields"] == ["amount", "description"]
    assert client.get("/transactions").json()["transactions"] == []


def test_rest_create_rejects_unknown_type(client: TestClient) -> None:
    response = client.post(
        "/transactions",
        json={"description": "Move", "amount": "10", "type": "transfer", "date": "2026-01-01"},
    )

    assert response.status_code == 422


def test_get_missing_transaction_is_404(client: TestClient) -> None:
    assert client.get("/transactions/42").status_code == 404


def test_summary_and_health(client: TestClient) -> None:
    client.post(
        "/transactions",
        json={"description": "Rent", "amount": "250", "type": "expense", "date": "2026-01-02"},
    )

    summary = client.get("/summary").json()
    assert summary["balance"] == -250.0
    assert summary["display"]["balance"] == "-$250.00"
    assert client.get("/health").json() == {"status": "ok", "environment": "development"}


def test_seeded_application_starts_with_demo_rows() -> None:
    client = TestClient(create_application(ExpenseTrackerSettings(seed_demo_data=True)))

    assert len(client.get("/transactions").json()["transactions"]) == 4


def test_rest_create_rejects_boolean_amount(client: TestClient) -> None:
    """JSON booleans must reach the amount rule instead of becoming 1.0."""

    response = client.post(
        "/transactions",
        json={"description": "Refund", "amount": True, "type": "income", "date": "2026-01-01"},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["failed_fields"] == ["amount"]
    assert client.get("/transactions").json()["transactions"] == []


def test_form_keeps_padded_description_within_limit(client: TestClient) -> None:
    """The form leaves length checks to the server, which trims first."""

    body = client.get("/").text
    assert "maxlength" not in body

    padded = "  " + "x" * 100 + "  "
    response = client.post(
        "/submit",
        data={"description": padded, "amount": "1", "type": "expense", "date": "2026-01-01"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert client.get("/transactions").json()["transactions"][0]["description"] == "x" * 100


def test_application_applies_configured_log_level() -> None:
    create_application(ExpenseTrackerSettings(log_level="DEBUG"))
    try:
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_root_logger(logging.INFO)
