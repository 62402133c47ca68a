"""
Streamlit Frontend for Finance Portal

A single page: a form for a new income/expense entry above a table of
every recorded transaction.

    streamlit run app/main.py

The page talks to the Record Store Service over HTTP (BACKEND_URL).
It loads the list once per session, and after each successful add it
reloads the whole list. Request failures are logged, not shown.
"""

from html import escape

import streamlit as st

from finance_portal.audit import configure_logging
from finance_portal.client import LedgerSession, TransactionApiClient
from finance_portal.client.ledger import (
    AMOUNT_KEY,
    DATE_KEY,
    DESCRIPTION_KEY,
    TAX_CATEGORY_KEY,
    TYPE_KEY,
)
from finance_portal.config import get_settings
from finance_portal.models.transaction import TaxCategory, TransactionType


# Page configuration
st.set_page_config(
    page_title="Finance Portal",
    page_icon="💰",
    layout="centered",
)

st.markdown("""
<style>
    .ledger-table {
        width: 100%;
        border-collapse: collapse;
    }
    .ledger-table th, .ledger-table td {
        padding: 10px;
        text-align: left;
        border: 1px solid #ddd;
    }
</style>
""", unsafe_allow_html=True)


TYPE_LABELS = {
    TransactionType.INCOME.value: "Income",
    TransactionType.EXPENSE.value: "Expense",
}

TAX_CATEGORY_LABELS = {
    TaxCategory.NONE.value: "No Tax Impact",
    TaxCategory.TAX_DEDUCTIBLE.value: "Tax Deductible",
    TaxCategory.VAT.value: "VAT",
}


@st.cache_resource
def get_client() -> TransactionApiClient:
    """Get or create the HTTP client (cached for the server process)."""
    settings = get_settings()
    configure_logging(settings.app.log_level)
    return TransactionApiClient(settings.client.backend_url)


def render_form(session: LedgerSession) -> None:
    """Render the new-transaction form."""
    with st.form("new_transaction"):
        st.subheader("New Transaction")

        col1, col2 = st.columns(2)
        with col1:
            st.text_input(
                "Description",
                key=DESCRIPTION_KEY,
                placeholder="Description (e.g. Server Cost)",
            )
            st.selectbox(
                "Type",
                options=list(TYPE_LABELS),
                format_func=TYPE_LABELS.get,
                key=TYPE_KEY,
            )
            st.date_input("Date", key=DATE_KEY)
        with col2:
            st.number_input(
                "Amount (£)",
                key=AMOUNT_KEY,
                step=0.01,
                format="%.2f",
            )
            st.selectbox(
                "Tax",
                options=list(TAX_CATEGORY_LABELS),
                format_func=TAX_CATEGORY_LABELS.get,
                key=TAX_CATEGORY_KEY,
            )

        # Submitting runs session.submit before the page re-renders
        st.form_submit_button("Add Entry", type="primary", on_click=session.submit)


def render_table(session: LedgerSession) -> None:
    """Render the transactions table."""
    rows = []
    for row in session.table_rows():
        rows.append(
            "<tr>"
            f"<td>{escape(row['date'])}</td>"
            f"<td>{escape(row['description'])}</td>"
            f"<td style=\"color: {row['type_colour']}\">{escape(row['type'])}</td>"
            f"<td>{escape(row['tax_category'])}</td>"
            f"<td>{escape(row['amount'])}</td>"
            "</tr>"
        )

    st.markdown(
        "<table class=\"ledger-table\">"
        "<thead><tr><th>Date</th><th>Description</th><th>Type</th>"
        "<th>Tax</th><th>Amount</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>",
        unsafe_allow_html=True,
    )


def main():
    """Main application entry point."""
    session = LedgerSession(st.session_state, get_client())
    session.mount()

    st.title("💰 Finance Portal")
    render_form(session)
    render_table(session)


if __name__ == "__main__":
    main()
