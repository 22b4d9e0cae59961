"""Ledgerly upcoming-payments dashboard."""

from __future__ import annotations

from datetime import date

import streamlit as st

from app.layout import inject_css
from app.pages import render_upcoming_page
from config.settings import get_settings
from core.data_loader import HouseholdDataError
from core.forecast_service import DashboardData, prepare_upcoming_payments


@st.cache_data(show_spinner=False)
def _load_dashboard_data(data_path: str, reference_date: date) -> DashboardData:
    """Load and cache the forecast for a household export and reference day."""

    return prepare_upcoming_payments(data_path, reference_date)


def main() -> None:
    """Application entrypoint for the Ledgerly dashboard."""

    st.set_page_config(
        page_title="Ledgerly | Upcoming payments",
        page_icon="📅",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    inject_css()

    settings = get_settings()
    reference_date = st.sidebar.date_input("Forecast from", value=date.today())

    try:
        data = _load_dashboard_data(str(settings.data_path), reference_date)
    except FileNotFoundError:
        st.info(f"No household export found at {settings.data_path}.")
        return
    except HouseholdDataError as exc:
        st.warning(f"Household data could not be read: {exc}")
        return

    render_upcoming_page(data)


if __name__ == "__main__":
    main()
