"""
Ledger Session: the state behind the single list-and-form view.

State lives in a mutable mapping so the same code drives both
Streamlit's st.session_state and a plain dict in tests:

    transactions        last list fetched from the service
    draft_description   form values for the next transaction
    draft_amount
    draft_type          defaults to EXPENSE
    draft_tax_category  defaults to NONE
    draft_date          defaults to today

Failures are logged and leave the state as it was.
"""

from collections.abc import MutableMapping
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional

from finance_portal.audit import AuditLogger
from finance_portal.client.api_client import ApiClientError, TransactionApiClient
from finance_portal.models.transaction import (
    TaxCategory,
    Transaction,
    TransactionCreate,
    TransactionType,
)


TRANSACTIONS_KEY = "transactions"
DESCRIPTION_KEY = "draft_description"
AMOUNT_KEY = "draft_amount"
TYPE_KEY = "draft_type"
TAX_CATEGORY_KEY = "draft_tax_category"
DATE_KEY = "draft_date"

TYPE_COLOURS = {
    TransactionType.INCOME.value: "green",
    TransactionType.EXPENSE.value: "red",
}


def format_gbp(amount: Optional[Decimal]) -> str:
    """Format an amount as GBP, e.g. 2500 -> '£2,500.00'."""
    if amount is None:
        return ""
    sign = "-" if amount < 0 else ""
    # Half away from zero, like a currency display
    pence = abs(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{sign}£{pence:,.2f}"


def _to_decimal(value: Any) -> Decimal:
    # number_input hands back floats; go through str to keep 150.1 as 150.1
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class LedgerSession:
    """
    Drives the ledger view.

    Args:
        state: Mapping holding the view state (st.session_state in the app)
        client: HTTP client for the service
        audit_logger: Where failures and successes are logged
        today: Supplies the default draft date
    """

    def __init__(
        self,
        state: MutableMapping,
        client: TransactionApiClient,
        audit_logger: Optional[AuditLogger] = None,
        today: Callable[[], date] = date.today,
    ):
        self._state = state
        self._client = client
        self._audit_logger = audit_logger or AuditLogger("finance_portal.client")
        self._today = today

    @property
    def transactions(self) -> list[Transaction]:
        return self._state.get(TRANSACTIONS_KEY, [])

    def mount(self) -> None:
        """
        Initialise the view once per session.

        Sets the draft defaults and fetches the list. Later reruns
        of the page leave the state alone.
        """
        if TRANSACTIONS_KEY in self._state:
            return

        self._state[TRANSACTIONS_KEY] = []
        self._state.setdefault(DESCRIPTION_KEY, "")
        self._state.setdefault(AMOUNT_KEY, 0.0)
        self._state.setdefault(TYPE_KEY, TransactionType.EXPENSE.value)
        self._state.setdefault(TAX_CATEGORY_KEY, TaxCategory.NONE.value)
        self._state.setdefault(DATE_KEY, self._today())
        self.refresh()

    def refresh(self) -> bool:
        """Replace the list with a fresh copy from the service."""
        try:
            transactions = self._client.list_transactions()
        except ApiClientError as e:
            self._audit_logger.log_client_request_failed("fetching data", str(e))
            return False

        self._state[TRANSACTIONS_KEY] = transactions
        self._audit_logger.log_client_transactions_loaded(len(transactions))
        return True

    def draft(self) -> TransactionCreate:
        """Build the transaction to submit from the current form values."""
        return TransactionCreate(
            description=self._state.get(DESCRIPTION_KEY, ""),
            amount=_to_decimal(self._state.get(AMOUNT_KEY, 0)),
            type=self._state.get(TYPE_KEY),
            tax_category=self._state.get(TAX_CATEGORY_KEY),
            transaction_date=self._state.get(DATE_KEY),
        )

    def submit(self) -> bool:
        """
        Create the draft, then reload the full list.

        On success description and amount are cleared; type, tax
        category and date stay as they were for the next entry.
        """
        try:
            created = self._client.create_transaction(self.draft())
        except ApiClientError as e:
            self._audit_logger.log_client_request_failed("adding transaction", str(e))
            return False

        self._audit_logger.log_client_transaction_added(created.id)
        self.refresh()

        self._state[DESCRIPTION_KEY] = ""
        self._state[AMOUNT_KEY] = 0.0
        return True

    def table_rows(self) -> list[dict[str, str]]:
        """Rows for the transactions table, in the order they were fetched."""
        return [
            {
                "date": t.transaction_date.isoformat() if t.transaction_date else "",
                "description": t.description or "",
                "type": t.type or "",
                "type_colour": TYPE_COLOURS.get(t.type, "red"),
                "tax_category": t.tax_category or "",
                "amount": format_gbp(t.amount),
            }
            for t in self.transactions
        ]
