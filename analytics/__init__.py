"""Analytics helpers shared across Ledgerly services."""

from analytics.categorize import merchant_group, normalize_merchant
from analytics.forecasting import forecast_upcoming_payments, urgency_for
from analytics.recurring import detect_subscriptions
from analytics.schedule import days_until, due_label, estimate_due_day
from analytics.subscriptions import (
    average_cost,
    cancellation_savings,
    summarize_subscriptions,
)

__all__ = [
    "merchant_group",
    "normalize_merchant",
    "detect_subscriptions",
    "days_until",
    "due_label",
    "estimate_due_day",
    "forecast_upcoming_payments",
    "urgency_for",
    "average_cost",
    "cancellation_savings",
    "summarize_subscriptions",
]
