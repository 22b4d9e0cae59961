"""Subscription cost lookups keyed by normalised merchant name."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from analytics.categorize import merchant_group
from analytics.recurring import coerce_amount, coerce_date
from config.rules import ForecastRules
from core.models import SubscriptionSummary

__all__ = [
    "average_cost",
    "cancellation_savings",
    "subscription_frame",
    "summarize_subscriptions",
]

_NAME_COLUMNS: tuple[str, ...] = ("description", "item", "category")


def _merchant_label(row: Mapping[str, Any]) -> str:
    for column in _NAME_COLUMNS:
        value = row.get(column)
        if isinstance(value, str) and value.strip():
            return value
    return "Unknown"


def subscription_frame(
    transactions: Iterable[Mapping[str, Any]],
    rules: ForecastRules | None = None,
) -> pd.DataFrame:
    """Return subscription-category transactions with merchant keys, spend and dates."""

    rows: list[dict[str, Any]] = []
    for row in transactions:
        category = row.get("category")
        if not isinstance(category, str) or "subscription" not in category.strip().lower():
            continue
        rows.append(
            {
                "merchant": merchant_group(_merchant_label(row), rules),
                "spend": coerce_amount(row.get("amount")),
                "date": coerce_date(row.get("date")),
            }
        )
    return pd.DataFrame(rows, columns=["merchant", "spend", "date"])


def average_cost(
    transactions: Iterable[Mapping[str, Any]],
    merchant_key: str,
    rules: ForecastRules | None = None,
) -> float:
    """Return the mean charge for ``merchant_key``, or ``0.0`` when nothing matches.

    Transactions are compared through the same normaliser that produced the
    key, so ``"Spotify PTY LTD"`` charges are found under ``"Spotify"``.
    """

    frame = subscription_frame(transactions, rules)
    spend = frame.loc[frame["merchant"] == merchant_key, "spend"]
    if spend.empty:
        return 0.0
    return float(spend.sum() / max(1, len(spend)))


def cancellation_savings(
    transactions: Iterable[Mapping[str, Any]],
    merchant_keys: Iterable[str],
    rules: ForecastRules | None = None,
) -> float:
    """Return the monthly amount freed by cancelling ``merchant_keys``."""

    records = list(transactions)
    return float(sum(average_cost(records, key, rules) for key in set(merchant_keys)))


def _month_key(value: Any) -> str | None:
    return value.strftime("%Y-%m") if isinstance(value, date) else None


def summarize_subscriptions(
    transactions: Iterable[Mapping[str, Any]],
    month: str | None = None,
    rules: ForecastRules | None = None,
) -> list[SubscriptionSummary]:
    """Summarise subscription spend per merchant.

    Parameters
    ----------
    transactions:
        Transaction records; only those categorised as subscriptions count.
    month:
        ``YYYY-MM`` to report actual charges for a single month. When omitted,
        costs are per-charge averages across the whole history.
    rules:
        Normalisation tables. Defaults to :class:`ForecastRules`.

    Returns
    -------
    list[SubscriptionSummary]
        Rows sorted by monthly cost, most expensive first.
    """

    frame = subscription_frame(transactions, rules)
    if frame.empty:
        return []

    frame["month"] = frame["date"].map(_month_key)
    history_months = frame["month"].dropna().nunique()
    if month is not None:
        frame = frame[frame["month"] == month]
        if frame.empty:
            return []

    summaries: list[SubscriptionSummary] = []
    for merchant, group_df in frame.groupby("merchant", sort=False):
        count = int(len(group_df))
        dates = [value for value in group_df["date"] if isinstance(value, date)]
        last_used = max(dates) if dates else None

        if month is None:
            cost = float(group_df["spend"].sum() / max(1, count))
            frequency = count / history_months if history_months else 0.0
            is_least_used = bool(frequency < 1)
            kind = "average"
        else:
            cost = float(group_df["spend"].sum())
            is_least_used = False
            kind = "actual"

        summaries.append(
            {
                "merchant": str(merchant),
                "cost": cost,
                "annual_cost": float(np.round(cost * 12, 2)),
                "last_used": last_used,
                "transaction_count": count,
                "is_least_used": is_least_used,
                "kind": kind,
            }
        )

    summaries.sort(key=lambda row: (-row["cost"], row["merchant"]))
    return summaries
