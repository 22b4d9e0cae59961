"""Upcoming payments page layout."""

from __future__ import annotations

import html

import streamlit as st

from analytics.schedule import due_label
from analytics.subscriptions import cancellation_savings
from app.layout import URGENCY_CLASSES, card
from core.forecast_service import DashboardData
from core.models import ForecastEntry, SubscriptionSummary, Transaction


def _render_payment_row(entry: ForecastEntry) -> None:
    urgency_class = URGENCY_CLASSES.get(entry["urgency"], URGENCY_CLASSES["low"])
    name = html.escape(entry["name"])
    category = html.escape(entry["category"])
    st.markdown(
        (
            "<div class='ld-payment-row'>"
            f"<span><strong>{name}</strong><br/><small>{category}</small></span>"
            f"<span>${entry['amount']:,.2f} "
            f"<span class='ld-urgency {urgency_class}'>{due_label(entry['days_until'])}</span></span>"
            "</div>"
        ),
        unsafe_allow_html=True,
    )


def _window_label(window_days: int) -> str:
    return "1 day" if window_days == 1 else f"{window_days} days"


def _render_upcoming_card(data: DashboardData) -> None:
    forecast = data["forecast"]
    entries = forecast["entries"]
    window = _window_label(data["window_days"])
    if not entries:
        st.info(f"No upcoming payments in the next {window}.")
        return

    st.metric(f"Due in the next {window}", f"${forecast['total']:,.2f}")
    for entry in entries:
        _render_payment_row(entry)
    st.caption(f"Relative to {data['reference_date']:%d %b %Y}")


def _render_subscriptions_card(
    subscriptions: list[SubscriptionSummary],
    transactions: list[Transaction],
) -> None:
    if not subscriptions:
        st.info("No subscription charges recorded yet.")
        return

    monthly_total = sum(row["cost"] for row in subscriptions)
    metric_cols = st.columns((1, 1, 1))
    metric_cols[0].metric("Monthly subscriptions", f"${monthly_total:,.2f}")
    metric_cols[1].metric("Annualised", f"${monthly_total * 12:,.0f}")

    least_used = [row["merchant"] for row in subscriptions if row["is_least_used"]]
    to_cancel = st.multiselect(
        "Cancel",
        options=[row["merchant"] for row in subscriptions],
        default=least_used,
        help="Subscriptions you could cancel; the least used are preselected.",
    )
    savings = cancellation_savings(transactions, to_cancel)
    metric_cols[2].metric("Monthly savings", f"${savings:,.2f}", delta=f"${savings * 12:,.0f} a year")

    st.dataframe(
        [
            {
                "Merchant": row["merchant"],
                "Avg cost": round(row["cost"], 2),
                "Annual": row["annual_cost"],
                "Charges": row["transaction_count"],
                "Last used": row["last_used"],
                "Least used": row["is_least_used"],
            }
            for row in subscriptions
        ],
        hide_index=True,
        use_container_width=True,
    )


def render_page(data: DashboardData) -> None:
    """Render the upcoming payments page."""

    st.title("Upcoming payments")
    with card("Upcoming Payments", suffix=f"Next {_window_label(data['window_days'])}"):
        _render_upcoming_card(data)
    with card("Subscriptions", suffix="Average per charge"):
        _render_subscriptions_card(data["subscriptions"], data["transactions"])


__all__ = ["render_page"]
