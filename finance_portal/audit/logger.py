"""
Audit Logger

DESIGN DECISION: Every request is logged as a structured event.
This provides:
1. Traceability of created transactions
2. Debugging capability when the store or network fails
3. One JSON line per event, easy to ship to any log collector

The audit logger:
- Is synchronous (Flask and Streamlit both handle one request per thread)
- Never raises into the caller if logging itself fails
- Supports correlation IDs to trace related events
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from finance_portal.models.audit import AuditEvent, AuditEventBuilder


def configure_logging(level: str = "INFO") -> None:
    """
    Configure stdlib logging and structlog for the process.

    Call once at process start (service entry point, Streamlit page).
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Writes every event to the structured local log.
    """

    def __init__(self, name: str = "finance_portal.audit"):
        self._logger = structlog.get_logger(name)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was written.
        """
        log_dict = event.to_log_dict()

        try:
            severity = event.severity.value
            if severity == "error":
                self._logger.error("audit_event", **log_dict)
            elif severity == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif severity == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception:
            # Never fail a request because a log line could not be written
            logging.getLogger(__name__).exception("audit logging failed")
            return False

        return True

    def log_transactions_listed(
        self,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a List request."""
        self.log(AuditEventBuilder.transactions_listed(
            count=count,
            correlation_id=correlation_id,
        ))

    def log_transaction_created(
        self,
        transaction_id: str,
        amount: Optional[str],
        transaction_type: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful Create."""
        self.log(AuditEventBuilder.transaction_created(
            transaction_id=transaction_id,
            amount=amount,
            transaction_type=transaction_type,
            correlation_id=correlation_id,
        ))

    def log_request_rejected(
        self,
        reason: str,
        errors: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a malformed request."""
        self.log(AuditEventBuilder.request_rejected(
            reason=reason,
            errors=errors,
            correlation_id=correlation_id,
        ))

    def log_storage_error(
        self,
        operation: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a store failure."""
        self.log(AuditEventBuilder.storage_error(
            operation=operation,
            error_message=error_message,
            correlation_id=correlation_id,
        ))

    def log_client_transactions_loaded(self, count: int) -> None:
        self.log(AuditEventBuilder.client_transactions_loaded(count=count))

    def log_client_transaction_added(self, transaction_id: str) -> None:
        self.log(AuditEventBuilder.client_transaction_added(
            transaction_id=transaction_id,
        ))

    def log_client_request_failed(self, operation: str, error_message: str) -> None:
        self.log(AuditEventBuilder.client_request_failed(
            operation=operation,
            error_message=error_message,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    The service creates one per incoming request.
    """
    return uuid4()
