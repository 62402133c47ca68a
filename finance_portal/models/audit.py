"""
Audit Models for Finance Portal

Every request the service handles, and every request the UI makes,
produces one audit event. This provides:
1. Traceability of every transaction that was created
2. Debugging information when the store or the network fails
3. A correlation id that ties the events of one request together

DESIGN DECISION: Audit events go to the structured log only.
They are never written to the transactions store.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Service side
    TRANSACTIONS_LISTED = "transactions_listed"
    TRANSACTION_CREATED = "transaction_created"
    REQUEST_REJECTED = "request_rejected"
    STORAGE_ERROR = "storage_error"

    # Client side
    CLIENT_TRANSACTIONS_LOADED = "client_transactions_loaded"
    CLIENT_TRANSACTION_ADDED = "client_transaction_added"
    CLIENT_REQUEST_FAILED = "client_request_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context
    entity_id: Optional[str] = Field(
        default=None,
        description="Id of the transaction this event relates to"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlates the events of one request"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_created(
            transaction_id="65c4...", amount="2500.00", correlation_id=cid
        )
    """

    @staticmethod
    def transactions_listed(
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTIONS_LISTED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Listed {count} transactions",
            details={"count": count},
        )

    @staticmethod
    def transaction_created(
        transaction_id: str,
        amount: Optional[str],
        transaction_type: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_CREATED,
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description="Transaction created",
            details={"amount": amount, "type": transaction_type},
        )

    @staticmethod
    def request_rejected(
        reason: str,
        errors: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REQUEST_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Request rejected: {reason}",
            details={"errors": errors},
        )

    @staticmethod
    def storage_error(
        operation: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"Store failed during {operation}",
            details={"operation": operation},
            error_message=error_message,
        )

    @staticmethod
    def client_transactions_loaded(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CLIENT_TRANSACTIONS_LOADED,
            description=f"Loaded {count} transactions",
            details={"count": count},
        )

    @staticmethod
    def client_transaction_added(transaction_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CLIENT_TRANSACTION_ADDED,
            entity_id=transaction_id,
            description="Transaction added",
        )

    @staticmethod
    def client_request_failed(operation: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CLIENT_REQUEST_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Error during {operation}",
            details={"operation": operation},
            error_message=error_message,
        )
