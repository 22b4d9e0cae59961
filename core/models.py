"""Shared data model definitions for the Ledgerly dashboard."""

from __future__ import annotations

from datetime import date
from typing import Literal, TypedDict

SourceType = Literal["recurring", "debt", "subscription"]
Urgency = Literal["high", "medium", "low"]


class Transaction(TypedDict, total=False):
    description: str | None
    merchant: str | None
    item: str | None
    category: str | None
    amount: float | None
    date: str | date | None


class RecurringExpense(TypedDict, total=False):
    description: str | None
    category: str | None
    amount: float | None
    active: bool


class Debt(TypedDict, total=False):
    name: str | None
    monthly_repayment: float | None


class HouseholdState(TypedDict):
    transactions: list[Transaction]
    recurring_expenses: list[RecurringExpense]
    debts: list[Debt]


class DetectedSubscription(TypedDict):
    """A recurring charge inferred from transaction history."""

    key: str
    display_name: str
    amount: float
    day_of_month: int


class ForecastEntry(TypedDict):
    name: str
    amount: float
    days_until: int
    category: str
    source_type: SourceType
    urgency: Urgency


class UpcomingForecast(TypedDict):
    entries: list[ForecastEntry]
    total: float


class SubscriptionSummary(TypedDict):
    merchant: str
    cost: float
    annual_cost: float
    last_used: date | None
    transaction_count: int
    is_least_used: bool
    kind: Literal["average", "actual"]


__all__ = [
    "SourceType",
    "Urgency",
    "Transaction",
    "RecurringExpense",
    "Debt",
    "HouseholdState",
    "DetectedSubscription",
    "ForecastEntry",
    "UpcomingForecast",
    "SubscriptionSummary",
]
