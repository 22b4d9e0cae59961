"""Data loading utilities for exported household state."""

from __future__ import annotations

import json
import logging
import math
from datetime import date
from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from core.models import HouseholdState

__all__ = ["HouseholdDataError", "load_household_state", "parse_household_state"]

logger = logging.getLogger(__name__)


class HouseholdDataError(ValueError):
    """Raised when a household state export cannot be parsed."""


def _optional_amount(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def _optional_date(value: Any) -> Optional[str]:
    # Left as text; the analytics layer skips dates it cannot parse.
    if isinstance(value, date):
        return value.isoformat()
    return value if isinstance(value, str) else None


def _optional_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _optional_flag(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


Amount = Annotated[Optional[float], BeforeValidator(_optional_amount)]
DateText = Annotated[Optional[str], BeforeValidator(_optional_date)]
Text = Annotated[Optional[str], BeforeValidator(_optional_text)]
Flag = Annotated[Optional[bool], BeforeValidator(_optional_flag)]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class _TransactionRecord(_Record):
    description: Text = None
    merchant: Text = None
    item: Text = None
    category: Text = None
    amount: Amount = None
    date: DateText = None


class _RecurringExpenseRecord(_Record):
    description: Text = None
    category: Text = None
    amount: Amount = None
    active: Flag = True


class _DebtRecord(_Record):
    name: Text = None
    monthly_repayment: Amount = Field(default=None, alias="monthlyRepayment")


class _StateRecord(_Record):
    transactions: list[_TransactionRecord] = Field(default_factory=list)
    recurring_expenses: list[_RecurringExpenseRecord] = Field(
        default_factory=list, alias="recurringExpenses"
    )
    debts: list[_DebtRecord] = Field(default_factory=list)


def parse_household_state(payload: Any) -> HouseholdState:
    """Validate a household state blob and return plain snake_case records.

    Accepts either the bare state or the ``{"state": {...}}`` envelope
    returned by the persistence API. A ``null`` state yields empty lists.
    Malformed field values become ``None``; only a state that is not an
    object, or a collection that is not a list of objects, is rejected.
    """

    if isinstance(payload, dict) and "state" in payload:
        payload = payload["state"]
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise HouseholdDataError("Household state must be a JSON object.")

    try:
        state = _StateRecord.model_validate(payload)
    except ValidationError as exc:
        raise HouseholdDataError(f"Invalid household state: {exc}") from exc

    return {
        "transactions": [record.model_dump() for record in state.transactions],
        "recurring_expenses": [record.model_dump() for record in state.recurring_expenses],
        "debts": [record.model_dump() for record in state.debts],
    }


def load_household_state(json_path: str | Path) -> HouseholdState:
    """Return the household state stored in a JSON export at ``json_path``."""

    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"Household state file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise HouseholdDataError(f"Household state is not valid JSON: {path}") from exc

    state = parse_household_state(payload)
    logger.debug(
        "Loaded %d transactions, %d recurring expenses and %d debts from %s",
        len(state["transactions"]),
        len(state["recurring_expenses"]),
        len(state["debts"]),
        path,
    )
    return state
