"""
Transaction Data Model for Finance Portal

One model family describes a ledger line everywhere it appears:
- on the wire (camelCase JSON: taxCategory, date)
- in the store (one MongoDB document per transaction)
- in the UI (rows of the table)

DESIGN DECISION: amount is a Decimal end to end. JSON output renders it as a
string so no float ever touches it. The store keeps it as a string as well.

KNOWN GAP: type and taxCategory are documented as closed sets (see the
enums below) but are accepted as free text. Callers that need the closed
set can compare against the enum values themselves.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Direction of money flow."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TaxCategory(str, Enum):
    """Tax treatment of a transaction, used for tax reporting."""
    NONE = "NONE"
    TAX_DEDUCTIBLE = "TAX_DEDUCTIBLE"
    VAT = "VAT"


class TransactionCreate(BaseModel):
    """
    A transaction as submitted for creation.

    Any "id" in the payload is dropped, together with any other unknown
    property. Every field may be absent; only its type is checked.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    description: Optional[str] = Field(
        default=None,
        description="Free-form text, e.g. 'Client Payment'"
    )
    amount: Optional[Decimal] = Field(
        default=None,
        allow_inf_nan=False,
        description="Exact amount in GBP"
    )
    type: Optional[str] = Field(
        default=None,
        description="INCOME or EXPENSE (not enforced)"
    )
    tax_category: Optional[str] = Field(
        default=None,
        alias="taxCategory",
        description="NONE, TAX_DEDUCTIBLE or VAT (not enforced)"
    )
    transaction_date: Optional[date] = Field(
        default=None,
        alias="date",
        description="Calendar date of the transaction"
    )

    def to_document(self) -> dict[str, Any]:
        """
        Convert to a MongoDB document (without _id).

        Decimal and date are stored as strings, so the document
        reads back exactly.
        """
        return {
            "description": self.description,
            "amount": str(self.amount) if self.amount is not None else None,
            "type": self.type,
            "taxCategory": self.tax_category,
            "date": self.transaction_date.isoformat() if self.transaction_date else None,
        }

    def to_wire(self) -> dict[str, Any]:
        """Convert to the JSON shape used by the REST API."""
        return self.model_dump(mode="json", by_alias=True)


class Transaction(TransactionCreate):
    """A stored transaction. The id is assigned by the store."""

    id: str = Field(
        ...,
        min_length=1,
        description="Store-assigned identifier (hex ObjectId)"
    )

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Transaction":
        """Create a Transaction from a MongoDB document."""
        return cls.model_validate({
            "id": str(document["_id"]),
            "description": document.get("description"),
            "amount": document.get("amount"),
            "type": document.get("type"),
            "taxCategory": document.get("taxCategory"),
            "date": document.get("date"),
        })

    def to_wire(self) -> dict[str, Any]:
        """Convert to the JSON shape used by the REST API, id first."""
        wire = {"id": self.id}
        wire.update(super().to_wire())
        return wire
