"""Core logic for assembling the Ledgerly upcoming-payments view."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, TypedDict

from analytics.forecasting import forecast_upcoming_payments
from analytics.subscriptions import summarize_subscriptions
from config.settings import Settings, get_settings
from core.data_loader import load_household_state
from core.models import SubscriptionSummary, Transaction, UpcomingForecast

__all__ = ["DashboardData", "prepare_upcoming_payments"]


class DashboardData(TypedDict):
    reference_date: date
    window_days: int
    forecast: UpcomingForecast
    subscriptions: list[SubscriptionSummary]
    transactions: list[Transaction]


def prepare_upcoming_payments(
    json_path: str | Path,
    reference_date: date,
    settings: Optional[Settings] = None,
) -> DashboardData:
    """Load household state from ``json_path`` and forecast payments due after ``reference_date``."""

    settings = settings or get_settings()
    rules = settings.forecast_rules()
    state = load_household_state(json_path)

    forecast = forecast_upcoming_payments(
        state["recurring_expenses"],
        state["debts"],
        state["transactions"],
        reference_date,
        rules=rules,
    )
    subscriptions = summarize_subscriptions(state["transactions"], rules=rules)

    return {
        "reference_date": reference_date,
        "window_days": rules.window_days,
        "forecast": forecast,
        "subscriptions": subscriptions,
        "transactions": state["transactions"],
    }
