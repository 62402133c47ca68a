"""REST API package."""

from finance_portal.api.app import create_app

__all__ = ["create_app"]
