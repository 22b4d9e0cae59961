"""Subscription detection from raw transaction history."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from analytics.categorize import merchant_group
from config.rules import ForecastRules
from core.models import DetectedSubscription

__all__ = [
    "LABEL_COLUMNS",
    "coerce_amount",
    "coerce_date",
    "detect_subscriptions",
    "transaction_frame",
]

LABEL_COLUMNS: tuple[str, ...] = ("description", "merchant", "item")
_FRAME_COLUMNS: tuple[str, ...] = (*LABEL_COLUMNS, "category", "amount", "date")


def coerce_date(value: Any) -> date | None:
    """Return the calendar day for ``value`` or ``None`` when it cannot be parsed."""

    if value is None or value == "":
        return None
    try:
        stamp = pd.Timestamp(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(stamp):
        return None
    return stamp.date()


def coerce_amount(value: Any) -> float:
    """Return ``abs(value)`` as a float, treating missing or malformed amounts as zero."""

    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if pd.isna(amount):
        return 0.0
    return abs(amount)


def _clean_label(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def transaction_frame(transactions: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """Return a working copy of ``transactions`` with parsed labels, amounts and dates.

    The ``descriptor`` column holds the first non-empty of ``description``,
    ``merchant`` and ``item``.
    """

    records = [dict(row) for row in transactions]
    frame = pd.DataFrame.from_records(records).reindex(columns=list(_FRAME_COLUMNS))
    if frame.empty:
        return frame.assign(descriptor=pd.Series(dtype=object), spend=pd.Series(dtype=float))

    descriptor = pd.Series("", index=frame.index, dtype=object)
    for column in reversed(LABEL_COLUMNS):
        labels = frame[column].map(_clean_label)
        descriptor = labels.where(labels != "", descriptor)

    frame["descriptor"] = descriptor
    frame["spend"] = frame["amount"].map(coerce_amount).astype(float)
    frame["date"] = frame["date"].map(coerce_date).astype(object)
    return frame


def _first_keyword(descriptor: str, keywords: Sequence[str]) -> str | None:
    lowered = descriptor.lower()
    for keyword in keywords:
        if keyword in lowered:
            return keyword
    return None


def detect_subscriptions(
    transactions: Iterable[Mapping[str, Any]],
    rules: ForecastRules | None = None,
) -> list[DetectedSubscription]:
    """Infer subscriptions from keyword-matched, dated transactions.

    Parameters
    ----------
    transactions:
        Transaction records in any order. They are never mutated.
    rules:
        Supplies the keyword stems, tested in order as case-insensitive
        substrings, and the tables used to normalise merchant keys.

    Returns
    -------
    list[DetectedSubscription]
        One entry per normalised merchant key. The first dated matching
        transaction provides the display name, amount and day of month;
        later charges for the same key are ignored.
    """

    frame = transaction_frame(transactions)
    if frame.empty:
        return []

    rules = rules or ForecastRules()
    lowered_keywords = [keyword.lower() for keyword in rules.subscription_keywords if keyword]
    frame["keyword"] = frame["descriptor"].map(lambda text: _first_keyword(text, lowered_keywords))

    matched = frame[frame["keyword"].notna() & frame["date"].notna()].copy()
    if matched.empty:
        return []

    matched["key"] = matched["descriptor"].map(lambda text: merchant_group(text, rules))
    matched = matched.drop_duplicates(subset="key", keep="first")

    subscriptions: list[DetectedSubscription] = []
    for record in matched.to_dict(orient="records"):
        subscriptions.append(
            {
                "key": str(record["key"]),
                "display_name": str(record["descriptor"]),
                "amount": float(record["spend"]),
                "day_of_month": int(record["date"].day),
            }
        )
    return subscriptions
