"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the REST layer free of driver code
2. Hand the service its store explicitly at startup
3. Run the service against an in-memory MongoDB in tests

The interface is intentionally tiny: the ledger only ever lists
everything or appends one record. There is no update or delete.
"""

from abc import ABC, abstractmethod

from finance_portal.models.transaction import Transaction, TransactionCreate


class TransactionStorageInterface(ABC):
    """
    Abstract interface for transaction storage operations.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """
        Return every stored transaction, in the store's natural order.

        Returns:
            List of transactions (empty if the store holds none)

        Raises:
            StorageConnectionError: If the store cannot be reached
            StorageError: If the read fails for any other reason
        """
        pass

    @abstractmethod
    def create_transaction(self, transaction: TransactionCreate) -> Transaction:
        """
        Persist a new transaction.

        Args:
            transaction: The submitted transaction (no id)

        Returns:
            The same transaction with its newly assigned id

        Raises:
            StorageConnectionError: If the store cannot be reached
            StorageError: If the write fails for any other reason
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageConnectionError(StorageError):
    """Could not connect to storage backend."""
    pass
