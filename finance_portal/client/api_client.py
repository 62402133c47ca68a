"""
HTTP Client for the Record Store Service

Thin wrapper over requests used by the Streamlit page.
There is no retry and no timeout beyond the transport default;
every failure surfaces as ApiClientError.
"""

from typing import Optional

import requests
from pydantic import ValidationError

from finance_portal.config import get_settings
from finance_portal.models.transaction import Transaction, TransactionCreate


class ApiClientError(Exception):
    """A request to the service failed (network, HTTP status or payload)."""
    pass


class TransactionApiClient:
    """
    Client for /api/transactions.

    Args:
        base_url: Service address; defaults to BACKEND_URL
        session: requests session to use (one is created if omitted)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        base_url = base_url or get_settings().client.backend_url
        self._transactions_url = f"{base_url.rstrip('/')}/api/transactions"
        self._session = session or requests.Session()

    @property
    def transactions_url(self) -> str:
        return self._transactions_url

    def list_transactions(self) -> list[Transaction]:
        """GET /api/transactions."""
        try:
            response = self._session.get(self._transactions_url)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ApiClientError(f"Failed to fetch transactions: {e}")

        if not isinstance(payload, list):
            raise ApiClientError("Expected a JSON array of transactions")
        try:
            return [Transaction.model_validate(item) for item in payload]
        except ValidationError as e:
            raise ApiClientError(f"Service returned a malformed transaction: {e}")

    def create_transaction(self, transaction: TransactionCreate) -> Transaction:
        """POST /api/transactions; returns the stored transaction with its id."""
        try:
            response = self._session.post(
                self._transactions_url,
                json=transaction.to_wire(),
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ApiClientError(f"Failed to add transaction: {e}")

        try:
            return Transaction.model_validate(payload)
        except ValidationError as e:
            raise ApiClientError(f"Service returned a malformed transaction: {e}")
