"""Merchant normalisation helpers used across analytics pipelines."""

from __future__ import annotations

import re
from functools import lru_cache

from config.rules import DEFAULT_LEGAL_SUFFIXES, DEFAULT_PROCESSOR_PREFIXES, ForecastRules

__all__ = [
    "normalize_merchant",
    "merchant_group",
]

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9 ]")
_REFERENCE_SUFFIX = re.compile(r"\*.*$")
_WORD_START = re.compile(r"\b\w")


@lru_cache(maxsize=64)
def _prefix_pattern(prefixes: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"^(?:" + "|".join(prefixes) + ")")


def _clean(name: str, prefix_pattern: re.Pattern[str] | None, suffixes: tuple[str, ...]) -> str:
    if prefix_pattern is not None:
        name = prefix_pattern.sub("", name, count=1)
    name = _REFERENCE_SUFFIX.sub("", name)
    for suffix in suffixes:
        name = name.replace(suffix, "")
    name = _NON_ALPHANUMERIC.sub(" ", name)
    name = re.sub(r"\s+", " ", name)
    return name.strip()


@lru_cache(maxsize=512)
def normalize_merchant(
    raw_name: str | None,
    prefixes: tuple[str, ...] = DEFAULT_PROCESSOR_PREFIXES,
    suffixes: tuple[str, ...] = DEFAULT_LEGAL_SUFFIXES,
) -> str:
    """Return the canonical, title-cased merchant key for a raw descriptor.

    Parameters
    ----------
    raw_name:
        Raw transaction descriptor. Falsy values are treated as ``"Unknown"``.
    prefixes:
        Regex fragments for payment-processor prefixes stripped from the start.
    suffixes:
        Legal-entity suffixes removed wherever they occur.

    Returns
    -------
    str
        Title-cased key with processor noise, reference suffixes and
        punctuation removed. When cleaning leaves nothing, the trimmed raw
        string is returned unchanged. Only ASCII letters and digits survive
        cleaning, so accented letters split words (``"Café Nero"`` becomes
        ``"Caf Nero"``).
    """

    if not isinstance(raw_name, str):
        raw_name = None
    raw = (raw_name or "Unknown").strip() or "Unknown"
    prefix_pattern = _prefix_pattern(prefixes) if prefixes else None

    # Repeat until stable so stacked prefixes are all removed; input that is
    # nothing but processor noise (e.g. "paypal paypal") then cleans to empty
    # and falls back to the raw text instead of a single processor name.
    name = raw.lower()
    while True:
        cleaned = _clean(name, prefix_pattern, suffixes)
        if cleaned == name:
            break
        name = cleaned

    if not name:
        return raw
    return _WORD_START.sub(lambda match: match.group(0).upper(), name)


def merchant_group(raw_name: str | None, rules: ForecastRules | None = None) -> str:
    """Return the grouping key for ``raw_name`` using the tables of ``rules``."""

    if rules is None:
        return normalize_merchant(raw_name)
    return normalize_merchant(raw_name, rules.processor_prefixes, rules.legal_suffixes)
