"""Upcoming-payment forecast built from expenses, debts and detected subscriptions."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping

import pandas as pd

from analytics.recurring import coerce_amount, detect_subscriptions
from analytics.schedule import as_calendar_day, days_until, estimate_due_day
from config.rules import ForecastRules
from core.models import ForecastEntry, SourceType, UpcomingForecast, Urgency

__all__ = [
    "forecast_upcoming_payments",
    "urgency_for",
]

logger = logging.getLogger(__name__)

_ENTRY_COLUMNS = ["name", "amount", "days_until", "category", "source_type"]


def urgency_for(days: int, rules: ForecastRules | None = None) -> Urgency:
    """Bucket ``days`` into the high / medium / low urgency tiers."""

    rules = rules or ForecastRules()
    if days <= rules.high_urgency_days:
        return "high"
    if days <= rules.medium_urgency_days:
        return "medium"
    return "low"


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _recurring_rows(
    expenses: Iterable[Mapping[str, Any]],
    today: date,
    rules: ForecastRules,
) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for expense in expenses:
        if expense.get("active") is False:
            continue
        category = _text(expense.get("category"))
        rows.append(
            {
                "name": _text(expense.get("description")) or category,
                "amount": coerce_amount(expense.get("amount")),
                "days_until": days_until(today, estimate_due_day(expense, rules)),
                "category": category,
                "source_type": "recurring",
            }
        )
    return rows


def _debt_rows(debts: Iterable[Mapping[str, Any]], today: date, rules: ForecastRules) -> list[dict[str, Any]]:
    due_in = days_until(today, rules.debt_due_day)
    return [
        {
            "name": _text(debt.get("name")),
            "amount": coerce_amount(debt.get("monthly_repayment")),
            "days_until": due_in,
            "category": rules.debt_category,
            "source_type": "debt",
        }
        for debt in debts
    ]


def _subscription_rows(
    transactions: Iterable[Mapping[str, Any]],
    today: date,
    rules: ForecastRules,
) -> list[dict[str, Any]]:
    return [
        {
            "name": subscription["display_name"],
            "amount": subscription["amount"],
            "days_until": days_until(today, subscription["day_of_month"]),
            "category": rules.subscription_category,
            "source_type": "subscription",
        }
        for subscription in detect_subscriptions(transactions, rules)
    ]


def forecast_upcoming_payments(
    recurring_expenses: Iterable[Mapping[str, Any]] | None,
    debts: Iterable[Mapping[str, Any]] | None,
    transactions: Iterable[Mapping[str, Any]] | None,
    reference_date: date | datetime | pd.Timestamp | str,
    *,
    window_days: int | None = None,
    rules: ForecastRules | None = None,
) -> UpcomingForecast:
    """Return payments falling due within the lookahead window of ``reference_date``.

    Parameters
    ----------
    recurring_expenses:
        Configured recurring expenses. Entries with ``active`` set to ``False``
        are skipped; due days come from ``rules.due_day_rules``.
    debts:
        Debt definitions, each assumed due on ``rules.debt_due_day``.
    transactions:
        Transaction history scanned for subscriptions.
    reference_date:
        The day treated as "today". Only its calendar day is used.
    window_days:
        Inclusive lookahead horizon. Defaults to ``rules.window_days``.
    rules:
        Heuristic tables and thresholds. Defaults to :class:`ForecastRules`.

    Returns
    -------
    UpcomingForecast
        Entries sorted by ``days_until`` (ties keep recurring, debt,
        subscription order) and the sum of their amounts.
    """

    rules = rules or ForecastRules()
    window = rules.window_days if window_days is None else int(window_days)
    today = as_calendar_day(reference_date)

    rows = [
        *_recurring_rows(recurring_expenses or [], today, rules),
        *_debt_rows(debts or [], today, rules),
        *_subscription_rows(transactions or [], today, rules),
    ]
    if not rows:
        return {"entries": [], "total": 0.0}

    frame = pd.DataFrame(rows, columns=_ENTRY_COLUMNS)
    frame = frame[frame["days_until"] <= window]
    logger.debug("Forecast for %s: %d of %d obligations within %d days", today, len(frame), len(rows), window)
    if frame.empty:
        return {"entries": [], "total": 0.0}

    frame = frame.sort_values("days_until", kind="stable")
    frame["urgency"] = frame["days_until"].map(lambda days: urgency_for(int(days), rules))

    entries: list[ForecastEntry] = []
    for record in frame.to_dict(orient="records"):
        source_type: SourceType = record["source_type"]
        urgency: Urgency = record["urgency"]
        entries.append(
            {
                "name": str(record["name"]),
                "amount": float(record["amount"]),
                "days_until": int(record["days_until"]),
                "category": str(record["category"]),
                "source_type": source_type,
                "urgency": urgency,
            }
        )

    total = float(round(frame["amount"].sum(), 2))
    return {"entries": entries, "total": total}
