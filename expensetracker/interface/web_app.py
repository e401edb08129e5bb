"""Mini README: FastAPI-powered dashboard and JSON API for the expense tracker.

Structure:
    * create_application - application factory wiring routes and templates.
    * TransactionPayload - JSON body accepted by ``POST /transactions``.

Each application instance owns a single ``ExpenseTracker``. HTML routes
render ``dashboard.html`` through Jinja2 with autoescaping enabled, which is
where user supplied descriptions are escaped. JSON routes expose the same
ledger under ``/transactions``.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Optional, Union

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from ..configuration import ExpenseTrackerSettings, get_settings
from ..ledger import LedgerStore, TransactionType
from ..logging_utils import configure_root_logger, get_logger
from ..tracker import ExpenseTracker

LOGGER = get_logger(__name__)


class TransactionPayload(BaseModel):
    """Raw transaction fields as submitted by API clients."""

    description: str = ""
    # Strict members keep booleans intact so the amount rule can reject them.
    amount: Union[StrictFloat, StrictInt, StrictStr, StrictBool, None] = None
    type: TransactionType = TransactionType.INCOME
    date: str = Field("", description="ISO calendar date, YYYY-MM-DD.")


def create_application(settings: Optional[ExpenseTrackerSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Expense Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    store = LedgerStore()
    if settings.seed_demo_data:
        store.seed_demo_transactions()
    tracker = ExpenseTracker(store, currency_symbol=settings.currency_symbol)
    app.state.tracker = tracker

    def render_dashboard(
        request: Request,
        *,
        form: Optional[Dict[str, str]] = None,
        errors: Optional[Dict[str, str]] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render the dashboard with optional form values and field errors."""

        form_values = {
            "description": "",
            "amount": "",
            "type": TransactionType.INCOME.value,
            "date": date.today().isoformat(),
        }
        form_values.update(form or {})
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "view": tracker.view(),
                "form": form_values,
                "errors": errors or {},
                "transaction_types": [member.value for member in TransactionType],
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the form, summary cards and transaction table."""

        return render_dashboard(request)

    @app.post("/submit", response_class=HTMLResponse)
    async def submit_form(
        request: Request,
        description: str = Form(""),
        amount: str = Form(""),
        transaction_type: TransactionType = Form(TransactionType.INCOME, alias="type"),
        occurred_on: str = Form("", alias="date"),
    ):
        """Handle the dashboard form, re-rendering it when fields fail."""

        result = tracker.submit(description, amount, transaction_type, occurred_on)
        if not result.accepted:
            return render_dashboard(
                request,
                form={
                    "description": description,
                    "amount": amount,
                    "type": transaction_type.value,
                    "date": occurred_on,
                },
                errors=result.validation.errors,
                status_code=422,
            )
        return RedirectResponse(url="/", status_code=303)

    @app.post("/delete/{transaction_id}")
    async def delete_from_form(transaction_id: int) -> RedirectResponse:
        """Delete the row bound to the clicked button and redraw the dashboard."""

        tracker.delete(transaction_id)
        return RedirectResponse(url="/", status_code=303)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return every transaction in insertion order with current totals."""

        view = tracker.view()
        return JSONResponse(
            {
                "transactions": [transaction.as_dict() for transaction in tracker.transactions()],
                "summary": tracker.summary().as_dict(),
                "count_label": view.count_label,
            }
        )

    @app.post("/transactions")
    async def create_transaction(payload: TransactionPayload) -> JSONResponse:
        """Create a transaction from a JSON body."""

        result = tracker.submit(payload.description, payload.amount, payload.type, payload.date)
        if not result.accepted:
            raise HTTPException(
                status_code=422,
                detail={
                    "failed_fields": sorted(result.validation.failed_fields),
                    "errors": result.validation.errors,
                },
            )
        return JSONResponse(
            {
                "transaction": result.transaction.as_dict(),
                "summary": result.summary.as_dict(),
            },
            status_code=201,
        )

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: int) -> JSONResponse:
        """Return a single transaction."""

        try:
            transaction = tracker.store.get_transaction(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"transaction": transaction.as_dict()})

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: int) -> JSONResponse:
        """Delete by id; repeating the call reports ``removed: false``."""

        result = tracker.delete(transaction_id)
        return JSONResponse(
            {
                "id": result.transaction_id,
                "removed": result.removed,
                "summary": result.summary.as_dict(),
            }
        )

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return raw totals alongside the formatted dashboard values."""

        view = tracker.view()
        return JSONResponse(
            {
                **tracker.summary().as_dict(),
                "display": {
                    "income": view.income_display,
                    "expense": view.expense_display,
                    "balance": view.balance_display,
                    "count_label": view.count_label,
                },
            }
        )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        """Report liveness and the configured environment."""

        return {"status": "ok", "environment": settings.environment}

    LOGGER.debug("Application created (environment=%s)", settings.environment)
    return app
