"""Configuration management."""

from .settings import (
    ListSettings,
    Settings,
    SettingsManager,
    WindowSettings,
    get_settings,
)

__all__ = [
    "ListSettings",
    "Settings",
    "SettingsManager",
    "WindowSettings",
    "get_settings",
]
