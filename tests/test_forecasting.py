"""Tests for the upcoming-payment forecast."""

from __future__ import annotations

import copy
from datetime import date

import pytest

from analytics.forecasting import forecast_upcoming_payments, urgency_for
from config.rules import ForecastRules

REFERENCE = date(2024, 9, 10)


@pytest.fixture()
def household() -> dict[str, list[dict[str, object]]]:
    return {
        "recurring_expenses": [
            {"description": "Power & water", "category": "Utilities", "amount": 50, "active": True},
        ],
        "debts": [
            {"name": "Credit card", "monthly_repayment": 200},
        ],
        "transactions": [
            {"description": "Netflix", "amount": -15, "date": "2024-08-25"},
            {"description": "Spotify PTY LTD", "amount": -12},
        ],
    }


def test_forecast_end_to_end(household):
    result = forecast_upcoming_payments(
        household["recurring_expenses"],
        household["debts"],
        household["transactions"],
        REFERENCE,
    )

    assert result["entries"] == [
        {
            "name": "Credit card",
            "amount": 200.0,
            "days_until": 5,
            "category": "Debt Payment",
            "source_type": "debt",
            "urgency": "medium",
        },
        {
            "name": "Power & water",
            "amount": 50.0,
            "days_until": 10,
            "category": "Utilities",
            "source_type": "recurring",
            "urgency": "low",
        },
    ]
    assert result["total"] == pytest.approx(250.0)


def test_zero_inputs_produce_empty_forecast():
    assert forecast_upcoming_payments([], [], [], REFERENCE) == {"entries": [], "total": 0.0}
    assert forecast_upcoming_payments(None, None, None, REFERENCE) == {"entries": [], "total": 0.0}


def test_window_boundary_is_inclusive():
    transactions = [
        {"description": "Netflix", "amount": -15, "date": "2024-08-24"},
        {"description": "Spotify", "amount": -12, "date": "2024-08-25"},
    ]

    result = forecast_upcoming_payments([], [], transactions, REFERENCE)

    assert [(row["name"], row["days_until"]) for row in result["entries"]] == [("Netflix", 14)]
    assert result["total"] == pytest.approx(15.0)


def test_window_days_can_be_narrowed(household):
    result = forecast_upcoming_payments(
        household["recurring_expenses"],
        household["debts"],
        household["transactions"],
        REFERENCE,
        window_days=5,
    )

    assert [row["source_type"] for row in result["entries"]] == ["debt"]


def test_ties_keep_source_precedence():
    result = forecast_upcoming_payments(
        [{"description": "Car insurance", "category": "Insurance", "amount": -96.5}],
        [{"name": "Car loan", "monthly_repayment": 680}],
        [{"description": "Anytime Fitness", "amount": -19.95, "date": "2024-07-15"}],
        REFERENCE,
    )

    assert [row["source_type"] for row in result["entries"]] == ["recurring", "debt", "subscription"]
    assert {row["days_until"] for row in result["entries"]} == {5}
    assert result["total"] == pytest.approx(796.45)


def test_entries_sorted_by_days_until():
    result = forecast_upcoming_payments(
        [{"description": "Apartment rent", "category": "Housing", "amount": -2150}],
        [{"name": "Car loan", "monthly_repayment": 680}],
        [{"description": "Hulu", "amount": -8, "date": "2024-08-11"}],
        date(2024, 9, 20),
    )

    assert [(row["name"], row["days_until"]) for row in result["entries"]] == [
        ("Apartment rent", 11),
    ]

    result = forecast_upcoming_payments(
        [{"description": "Apartment rent", "category": "Housing", "amount": -2150}],
        [{"name": "Car loan", "monthly_repayment": 680}],
        [{"description": "Hulu", "amount": -8, "date": "2024-08-11"}],
        date(2024, 9, 5),
    )

    assert [(row["name"], row["days_until"]) for row in result["entries"]] == [
        ("Hulu", 6),
        ("Car loan", 10),
    ]


def test_inactive_expenses_are_skipped():
    result = forecast_upcoming_payments(
        [
            {"description": "Old gym plan", "category": "Health", "amount": -45, "active": False},
            {"description": "Phone", "category": "Phone", "amount": -40},
        ],
        [],
        [],
        REFERENCE,
    )

    assert [row["name"] for row in result["entries"]] == ["Phone"]
    assert result["entries"][0]["amount"] == 40.0


def test_recurring_name_falls_back_to_category():
    result = forecast_upcoming_payments([{"category": "Utilities", "amount": 75}], [], [], REFERENCE)

    assert result["entries"][0]["name"] == "Utilities"


def test_missing_debt_repayment_counts_as_zero():
    result = forecast_upcoming_payments([], [{"name": "Store card"}], [], REFERENCE)

    assert result["entries"][0]["amount"] == 0.0
    assert result["total"] == 0.0


@pytest.mark.parametrize(
    ("reference", "urgency"),
    [
        (date(2024, 9, 15), "high"),
        (date(2024, 9, 12), "high"),
        (date(2024, 9, 11), "medium"),
        (date(2024, 9, 8), "medium"),
        (date(2024, 9, 7), "low"),
    ],
)
def test_urgency_tiers_follow_days_until(reference, urgency):
    result = forecast_upcoming_payments([], [{"name": "Loan", "monthly_repayment": 10}], [], reference)

    assert result["entries"][0]["urgency"] == urgency


def test_urgency_for_thresholds_are_configurable():
    rules = ForecastRules(high_urgency_days=1, medium_urgency_days=2)

    assert urgency_for(1, rules) == "high"
    assert urgency_for(2, rules) == "medium"
    assert urgency_for(3, rules) == "low"
    assert urgency_for(7) == "medium"


def test_forecast_is_deterministic_and_leaves_inputs_untouched(household):
    snapshot = copy.deepcopy(household)
    args = (household["recurring_expenses"], household["debts"], household["transactions"], REFERENCE)

    first = forecast_upcoming_payments(*args)
    second = forecast_upcoming_payments(*args)

    assert first == second
    assert household == snapshot
