"""Heuristic tables used by the upcoming-payment forecast."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_DUE_DAY_RULES",
    "DEFAULT_LEGAL_SUFFIXES",
    "DEFAULT_PROCESSOR_PREFIXES",
    "DEFAULT_SUBSCRIPTION_KEYWORDS",
    "DueDayRule",
    "ForecastRules",
]


@dataclass(frozen=True, slots=True)
class DueDayRule:
    """Estimated due day for expenses matching a category or description keyword."""

    day: int
    categories: tuple[str, ...] = ()
    description_keywords: tuple[str, ...] = ()

    def matches(self, category: str | None, description: str | None) -> bool:
        if category and category in self.categories:
            return True
        lowered = (description or "").lower()
        return any(keyword in lowered for keyword in self.description_keywords)


DEFAULT_DUE_DAY_RULES: tuple[DueDayRule, ...] = (
    DueDayRule(day=1, categories=("Housing",), description_keywords=("rent",)),
    DueDayRule(day=20, categories=("Utilities",)),
)

DEFAULT_SUBSCRIPTION_KEYWORDS: tuple[str, ...] = (
    "netflix",
    "spotify",
    "apple",
    "amazon prime",
    "disney",
    "hulu",
    "youtube premium",
    "gym",
    "fitness",
)

# Regex fragments, matched at the start of the lower-cased descriptor.
DEFAULT_PROCESSOR_PREFIXES: tuple[str, ...] = (
    r"paypal",
    r"sq \*",
    r"sp \*",
    r"apple\.com/bill",
    r"google \*",
    r"dd \d+ ",
    r"direct debit ",
)

DEFAULT_LEGAL_SUFFIXES: tuple[str, ...] = (" pty ltd", " ltd")


@dataclass(frozen=True, slots=True)
class ForecastRules:
    """Immutable bundle of forecast thresholds and lookup tables."""

    window_days: int = 14
    high_urgency_days: int = 3
    medium_urgency_days: int = 7
    default_due_day: int = 15
    debt_due_day: int = 15
    due_day_rules: tuple[DueDayRule, ...] = DEFAULT_DUE_DAY_RULES
    subscription_keywords: tuple[str, ...] = DEFAULT_SUBSCRIPTION_KEYWORDS
    processor_prefixes: tuple[str, ...] = DEFAULT_PROCESSOR_PREFIXES
    legal_suffixes: tuple[str, ...] = DEFAULT_LEGAL_SUFFIXES
    debt_category: str = "Debt Payment"
    subscription_category: str = "Subscriptions"
