"""Core domain package for the Ledgerly application."""

from .data_loader import HouseholdDataError, load_household_state, parse_household_state
from .models import (
    DetectedSubscription,
    Debt,
    ForecastEntry,
    HouseholdState,
    RecurringExpense,
    SubscriptionSummary,
    Transaction,
    UpcomingForecast,
)

__all__ = [
    "DetectedSubscription",
    "Debt",
    "ForecastEntry",
    "HouseholdState",
    "RecurringExpense",
    "SubscriptionSummary",
    "Transaction",
    "UpcomingForecast",
    "HouseholdDataError",
    "load_household_state",
    "parse_household_state",
]
