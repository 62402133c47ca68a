"""Client package: HTTP client and view state for the Streamlit page."""

from finance_portal.client.api_client import ApiClientError, TransactionApiClient
from finance_portal.client.ledger import LedgerSession, format_gbp

__all__ = [
    "ApiClientError",
    "LedgerSession",
    "TransactionApiClient",
    "format_gbp",
]
