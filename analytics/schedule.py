"""Due-date projection helpers for monthly payment obligations."""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping

import pandas as pd

from config.rules import ForecastRules

__all__ = [
    "as_calendar_day",
    "days_until",
    "due_label",
    "estimate_due_day",
]


def as_calendar_day(value: date | datetime | pd.Timestamp | str) -> date:
    """Return the calendar day of ``value``, dropping any time component."""

    return pd.Timestamp(value).date()


def _clamped_due_date(period: pd.Period, target_day: int) -> date:
    day = min(max(int(target_day), 1), int(period.days_in_month))
    return date(period.year, period.month, day)


def days_until(reference_date: date | datetime | pd.Timestamp | str, target_day: int) -> int:
    """Return whole days from ``reference_date`` to the next ``target_day`` of a month.

    A target day equal to the reference day yields ``0``. Days that have
    already passed roll over into the following month. The target day is
    clamped to the length of the month it lands in, so day 31 falls on the
    30th in a 30-day month.
    """

    today = as_calendar_day(reference_date)
    period = pd.Period(today, freq="M")

    candidate = _clamped_due_date(period, target_day)
    if candidate < today:
        candidate = _clamped_due_date(period + 1, target_day)

    return max((candidate - today).days, 0)


def estimate_due_day(expense: Mapping[str, object], rules: ForecastRules | None = None) -> int:
    """Return the estimated due day for a recurring expense.

    The first rule whose category or description keyword matches wins;
    everything else falls back to ``rules.default_due_day``.
    """

    rules = rules or ForecastRules()
    category = expense.get("category")
    description = expense.get("description")
    category = category if isinstance(category, str) else None
    description = description if isinstance(description, str) else None

    for rule in rules.due_day_rules:
        if rule.matches(category, description):
            return rule.day
    return rules.default_due_day


def due_label(days: int) -> str:
    if days <= 0:
        return "Due Today"
    if days == 1:
        return "Due Tomorrow"
    return f"Due in {days} days"
