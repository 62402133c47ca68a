"""
Transactions REST Endpoints

    GET  /api/transactions  -> JSON array of every stored transaction
    POST /api/transactions  -> create one transaction, returns it with its id

The blueprint is a pure translator between JSON and the storage interface.
It keeps no state of its own: the storage handle is passed in when the
blueprint is built.
"""

import json
from decimal import Decimal

from flask import Blueprint, g, jsonify, request
from pydantic import ValidationError

from finance_portal.audit import AuditLogger
from finance_portal.models.transaction import TransactionCreate
from finance_portal.services.storage import TransactionStorageInterface


def _validation_errors(error: ValidationError) -> list[dict]:
    """Flatten pydantic errors into {field, message} pairs."""
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]) or "body",
            "message": detail["msg"],
        }
        for detail in error.errors()
    ]


def create_transactions_blueprint(
    storage: TransactionStorageInterface,
    audit_logger: AuditLogger,
) -> Blueprint:
    """Build the /api/transactions blueprint around an explicit storage."""
    blueprint = Blueprint("transactions", __name__, url_prefix="/api/transactions")

    @blueprint.get("")
    def list_transactions():
        transactions = storage.list_transactions()
        audit_logger.log_transactions_listed(
            count=len(transactions),
            correlation_id=g.correlation_id,
        )
        return jsonify([transaction.to_wire() for transaction in transactions])

    def reject(errors: list[dict]):
        audit_logger.log_request_rejected(
            reason="malformed transaction",
            errors=errors,
            correlation_id=g.correlation_id,
        )
        return jsonify({"error": "Malformed transaction", "details": errors}), 400

    @blueprint.post("")
    def add_transaction():
        # JSON numbers become Decimal directly, keeping scale and precision
        try:
            payload = json.loads(request.get_data(), parse_float=Decimal)
        except ValueError as e:
            return reject([{"field": "body", "message": f"Invalid JSON: {e}"}])

        try:
            submitted = TransactionCreate.model_validate(payload)
        except ValidationError as e:
            return reject(_validation_errors(e))

        created = storage.create_transaction(submitted)
        audit_logger.log_transaction_created(
            transaction_id=created.id,
            amount=str(created.amount) if created.amount is not None else None,
            transaction_type=created.type,
            correlation_id=g.correlation_id,
        )
        return jsonify(created.to_wire()), 201

    return blueprint
