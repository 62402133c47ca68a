"""
Storage Services Package

Provides the abstract storage interface and its MongoDB implementation.
"""

from finance_portal.services.storage.interface import (
    StorageConnectionError,
    StorageError,
    TransactionStorageInterface,
)
from finance_portal.services.storage.mongo import (
    MongoStoreClient,
    MongoTransactionStorage,
)

__all__ = [
    # Interfaces
    "TransactionStorageInterface",
    # Exceptions
    "StorageConnectionError",
    "StorageError",
    # MongoDB implementation
    "MongoStoreClient",
    "MongoTransactionStorage",
]
