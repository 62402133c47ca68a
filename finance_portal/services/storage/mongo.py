"""
MongoDB Storage Implementation

DESIGN DECISION: Transactions live in a single MongoDB collection,
one document per transaction:

    {
        "_id": ObjectId("65c4..."),
        "description": "Client Payment",
        "amount": "2500.00",
        "type": "INCOME",
        "taxCategory": "NONE",
        "date": "2026-02-08"
    }

- _id is generated by the driver on insert and exposed as the hex string id
- amount is stored as a string so the Decimal reads back unchanged
- date is stored as an ISO date string

TRADEOFFS:
- No multi-document transactions (each Create is a single insert)
- No idempotency: submitting the same payload twice stores two documents
"""

from typing import Optional

from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, PyMongoError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from finance_portal.config import MongoSettings, get_settings
from finance_portal.models.transaction import Transaction, TransactionCreate
from finance_portal.services.storage.interface import (
    StorageConnectionError,
    StorageError,
    TransactionStorageInterface,
)


class MongoStoreClient:
    """
    Low-level MongoDB client wrapper.

    Owns the driver client and hands out the transactions collection.
    The driver connects lazily, so building this never blocks.
    """

    def __init__(
        self,
        settings: Optional[MongoSettings] = None,
        client: Optional[MongoClient] = None,
    ):
        self._settings = settings or get_settings().mongo
        self._client = client

    def connect(self) -> MongoClient:
        """Create the driver client on first use."""
        if self._client is None:
            try:
                self._client = MongoClient(
                    self._settings.uri,
                    serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                )
            except PyMongoError as e:
                raise StorageConnectionError(f"Invalid MongoDB configuration: {e}")
        return self._client

    def get_collection(self) -> Collection:
        """Get the configured transactions collection."""
        client = self.connect()
        return client[self._settings.database][self._settings.collection]

    @retry(
        retry=retry_if_exception_type(StorageConnectionError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    def ping(self) -> bool:
        """
        Check that the store is reachable.

        Used as a readiness check at startup. Request handling never retries.
        """
        client = self.connect()
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            raise StorageConnectionError(f"MongoDB is unreachable: {e}")
        return True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class MongoTransactionStorage(TransactionStorageInterface):
    """
    MongoDB implementation of transaction storage.

    Takes the collection explicitly; it holds no other state.
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    def list_transactions(self) -> list[Transaction]:
        """Return every stored transaction (db.transactions.find({}))."""
        try:
            documents = list(self._collection.find({}))
        except ConnectionFailure as e:
            raise StorageConnectionError(f"Failed to list transactions: {e}")
        except PyMongoError as e:
            raise StorageError(f"Failed to list transactions: {e}")

        try:
            return [Transaction.from_document(document) for document in documents]
        except (ValidationError, KeyError) as e:
            raise StorageError(f"Stored transaction is malformed: {e}")

    def create_transaction(self, transaction: TransactionCreate) -> Transaction:
        """Insert one document and return the transaction with its new id."""
        document = transaction.to_document()
        try:
            result = self._collection.insert_one(document)
        except ConnectionFailure as e:
            raise StorageConnectionError(f"Failed to save transaction: {e}")
        except PyMongoError as e:
            raise StorageError(f"Failed to save transaction: {e}")

        document["_id"] = result.inserted_id
        return Transaction.from_document(document)
