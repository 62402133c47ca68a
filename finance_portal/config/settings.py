"""
Configuration Management for Finance Portal

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The service needs exactly two external values (where the store lives and
which browser origin may call it); the UI needs one (where the service lives).
Everything else has a working default.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    """MongoDB document store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONGODB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    uri: str = Field(
        default="mongodb://localhost:27017",
        description="Connection string (host and credentials)"
    )
    database: str = Field(
        default="financeportal",
        min_length=1,
        description="Database holding the transactions collection"
    )
    collection: str = Field(
        default="transactions",
        min_length=1,
        description="Collection name for transactions"
    )
    server_selection_timeout_ms: int = Field(
        default=5000,
        ge=100,
        description="How long the driver waits for a reachable server"
    )

    @field_validator('uri')
    @classmethod
    def validate_uri_scheme(cls, v: str) -> str:
        """Only accept MongoDB connection strings."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "MONGODB_URI must start with mongodb:// or mongodb+srv://"
            )
        return v


class ApiSettings(BaseSettings):
    """REST service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    frontend_url: str = Field(
        default="http://localhost:8501",
        description="The only origin allowed to call the API from a browser"
    )
    host: str = Field(
        default="127.0.0.1",
        description="Interface to bind"
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    @field_validator('frontend_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Browsers send the Origin header without a trailing slash."""
        return v.rstrip("/")


class ClientSettings(BaseSettings):
    """Settings for the Streamlit client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend_url: str = Field(
        default="http://localhost:8080",
        description="Base address of the REST service (BACKEND_URL)"
    )

    @field_validator('backend_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily so the UI process does not need
    # store configuration and vice versa.

    @property
    def mongo(self) -> MongoSettings:
        return MongoSettings()

    @property
    def api(self) -> ApiSettings:
        return ApiSettings()

    @property
    def client(self) -> ClientSettings:
        return ClientSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<setting_name>_error" entry for each group that failed.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("mongo", "api", "client", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
