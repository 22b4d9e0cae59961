"""Application configuration utilities.

``config.settings`` pulls in Streamlit and pydantic-settings, so it is only
imported when one of its names is first requested from this package.
"""

from .rules import DueDayRule, ForecastRules

__all__ = [
    "DEFAULT_DATA_PATH",
    "DueDayRule",
    "ForecastRules",
    "Settings",
    "get_settings",
]

_SETTINGS_EXPORTS = ("DEFAULT_DATA_PATH", "Settings", "get_settings")


def __getattr__(name):
    if name in _SETTINGS_EXPORTS:
        from . import settings

        return getattr(settings, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
