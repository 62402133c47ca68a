"""
Flask Application Factory

Wires the transactions blueprint, CORS and error handling together.

DESIGN DECISION: Nothing is discovered or injected implicitly.
create_app() receives the storage it should use; the process entry point
(finance_portal.server) decides which storage that is.
"""

from typing import Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS

from finance_portal.api.transactions import create_transactions_blueprint
from finance_portal.audit import AuditLogger, create_correlation_id
from finance_portal.config import ApiSettings, get_settings
from finance_portal.services.storage import (
    StorageConnectionError,
    StorageError,
    TransactionStorageInterface,
)


def create_app(
    storage: TransactionStorageInterface,
    api_settings: Optional[ApiSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> Flask:
    """
    Create the REST service.

    Args:
        storage: Where transactions are listed from and created in
        api_settings: CORS origin and bind settings (defaults to environment)
        audit_logger: Event logger (defaults to a local structlog logger)

    Returns:
        A configured Flask application
    """
    api_settings = api_settings or get_settings().api
    audit_logger = audit_logger or AuditLogger()

    app = Flask(__name__)

    # Only the configured frontend may call the API from a browser
    CORS(app, resources={r"/api/*": {"origins": [api_settings.frontend_url]}})

    @app.before_request
    def assign_correlation_id():
        g.correlation_id = create_correlation_id()

    @app.errorhandler(StorageError)
    def handle_storage_error(error: StorageError):
        audit_logger.log_storage_error(
            operation=f"{request.method} {request.path}",
            error_message=str(error),
            correlation_id=g.get("correlation_id"),
        )
        if isinstance(error, StorageConnectionError):
            return jsonify({"error": "Store unavailable"}), 503
        return jsonify({"error": "Store error"}), 500

    app.register_blueprint(create_transactions_blueprint(storage, audit_logger))

    return app
