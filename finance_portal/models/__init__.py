"""
Data Models Package

This package contains all Pydantic models used in Finance Portal.
Every transaction crossing the API or the store conforms to these schemas.
"""

from finance_portal.models.transaction import (
    TaxCategory,
    Transaction,
    TransactionCreate,
    TransactionType,
)
from finance_portal.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "TaxCategory",
    "Transaction",
    "TransactionCreate",
    "TransactionType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
