"""Services package."""

from finance_portal.services.storage import (
    MongoStoreClient,
    MongoTransactionStorage,
    StorageConnectionError,
    StorageError,
    TransactionStorageInterface,
)

__all__ = [
    # Storage services
    "MongoStoreClient",
    "MongoTransactionStorage",
    "StorageConnectionError",
    "StorageError",
    "TransactionStorageInterface",
]
