"""Configuration package."""

from finance_portal.config.settings import (
    ApiSettings,
    AppSettings,
    ClientSettings,
    MongoSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "ClientSettings",
    "MongoSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
