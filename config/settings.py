"""Centralised configuration handling for Ledgerly."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.rules import DEFAULT_SUBSCRIPTION_KEYWORDS, ForecastRules

DEFAULT_DATA_PATH = Path("data") / "household_state.json"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    data_path: Path = DEFAULT_DATA_PATH
    window_days: int = 14
    high_urgency_days: int = 3
    medium_urgency_days: int = 7
    default_due_day: int = 15
    debt_due_day: int = 15
    subscription_keywords: tuple[str, ...] = DEFAULT_SUBSCRIPTION_KEYWORDS

    model_config = SettingsConfigDict(env_prefix="LEDGERLY_", extra="ignore")

    def forecast_rules(self) -> ForecastRules:
        return ForecastRules(
            window_days=self.window_days,
            high_urgency_days=self.high_urgency_days,
            medium_urgency_days=self.medium_urgency_days,
            default_due_day=self.default_due_day,
            debt_due_day=self.debt_due_day,
            subscription_keywords=tuple(keyword.lower() for keyword in self.subscription_keywords),
        )


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("forecast")
    if secrets_section:
        overrides = {
            "data_path": secrets_section.get("data_path"),
            "window_days": secrets_section.get("window_days"),
            "subscription_keywords": secrets_section.get("subscription_keywords"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
