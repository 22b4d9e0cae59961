"""Page modules for the Ledgerly Streamlit application."""

from .upcoming import render_page as render_upcoming_page

__all__ = [
    "render_upcoming_page",
]
