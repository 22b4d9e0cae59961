"""Streamlit application package for Ledgerly."""

from .main import main

__all__ = ["main"]
