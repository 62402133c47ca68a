"""
Service Entry Point for Finance Portal

Builds the Record Store Service from configuration and serves it:

    settings -> MongoStoreClient -> MongoTransactionStorage -> create_app()

DESIGN DECISION: This is the only place where components are constructed.
Everything below it receives its collaborators as arguments.
"""

from typing import Optional

import structlog
from flask import Flask

from finance_portal.api import create_app
from finance_portal.audit import AuditLogger, configure_logging
from finance_portal.config import Settings, get_settings
from finance_portal.services.storage import (
    MongoStoreClient,
    MongoTransactionStorage,
    StorageConnectionError,
)


def create_app_components(
    settings: Optional[Settings] = None,
) -> tuple[Flask, MongoStoreClient]:
    """
    Factory function to create the service and its store client.

    Returns:
        (flask_app, store_client)
    """
    settings = settings or get_settings()

    store_client = MongoStoreClient(settings.mongo)
    storage = MongoTransactionStorage(store_client.get_collection())

    app = create_app(
        storage=storage,
        api_settings=settings.api,
        audit_logger=AuditLogger(),
    )
    return app, store_client


def main() -> int:
    """Run the REST service (console script: finance-portal-api)."""
    settings = get_settings()
    configure_logging(settings.app.log_level)
    logger = structlog.get_logger(__name__)

    app, store_client = create_app_components(settings)

    # A store that is down at startup is not fatal: each request reports it
    try:
        store_client.ping()
        logger.info("store_reachable", database=settings.mongo.database)
    except StorageConnectionError as e:
        logger.warning("store_unreachable", error=str(e))

    api = settings.api
    logger.info(
        "service_starting",
        host=api.host,
        port=api.port,
        frontend_url=api.frontend_url,
    )
    try:
        app.run(host=api.host, port=api.port, debug=settings.app.debug_mode)
    finally:
        store_client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
