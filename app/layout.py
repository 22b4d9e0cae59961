"""Shared layout primitives for the Ledgerly Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager

import streamlit as st

URGENCY_CLASSES: dict[str, str] = {
    "high": "ld-urgency--high",
    "medium": "ld-urgency--medium",
    "low": "ld-urgency--low",
}


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          .block-container {
            max-width: 960px;
            padding-top: 2.5rem;
          }

          .ld-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .ld-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            gap: 12px;
          }

          .ld-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            font-weight: 600;
            color: #111827;
          }

          .ld-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
          }

          .ld-payment-row {
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 6px 0;
            border-bottom: 1px solid var(--border);
          }

          .ld-urgency {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 6px;
          }

          .ld-urgency--high { color: #DC2626; background: #FEF2F2; }
          .ld-urgency--medium { color: #EA580C; background: #FFF7ED; }
          .ld-urgency--low { color: #4B5563; background: #F9FAFB; }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable Ledgerly card."""

    chip_html = f'<span class="ld-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="ld-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="ld-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield
