"""Tests for the /api/transactions REST endpoints."""

import json
from unittest.mock import MagicMock

import pytest

from finance_portal.api import create_app
from finance_portal.services.storage import (
    StorageConnectionError,
    StorageError,
    TransactionStorageInterface,
)


URL = "/api/transactions"


def post_raw(client, body: str):
    return client.post(URL, data=body, content_type="application/json")


class TestListTransactions:
    """Tests for GET /api/transactions."""

    def test_empty_store_returns_empty_array(self, client):
        response = client.get(URL)
        assert response.status_code == 200
        assert response.get_json() == []

    def test_lists_every_created_transaction(self, client, client_payment):
        client.post(URL, json=client_payment)
        client.post(URL, json={**client_payment, "description": "Office Supplies"})
        descriptions = {t["description"] for t in client.get(URL).get_json()}
        assert descriptions == {"Client Payment", "Office Supplies"}


class TestCreateTransaction:
    """Tests for POST /api/transactions."""

    def test_client_payment_end_to_end(self, client, client_payment):
        """Test create then list for the example entry."""
        response = client.post(URL, json=client_payment)
        assert response.status_code == 201
        created = response.get_json()
        assert created["id"]
        assert {k: v for k, v in created.items() if k != "id"} == client_payment

        listed = client.get(URL).get_json()
        assert listed == [created]

    @pytest.mark.parametrize("amount", [
        "150.00",
        "2500.00",
        "0.1",
        "12345678901234567.89",
    ])
    def test_numeric_amount_is_exact(self, client, amount):
        """Test a JSON number amount keeps its scale and every digit."""
        response = post_raw(client, f'{{"description": "Office Supplies", "amount": {amount}}}')
        assert response.status_code == 201
        assert response.get_json()["amount"] == amount

        [listed] = client.get(URL).get_json()
        assert listed["amount"] == amount

    def test_client_payment_with_numeric_amount(self, client, client_payment):
        """Test the example entry posted with amount as the JSON number 2500.00."""
        body = json.dumps({**client_payment, "amount": "__amount__"})
        response = post_raw(client, body.replace('"__amount__"', "2500.00"))
        assert response.status_code == 201
        created = response.get_json()
        assert created["id"]
        assert {k: v for k, v in created.items() if k != "id"} == client_payment

        assert client.get(URL).get_json() == [created]

    def test_string_amount_round_trips_unchanged(self, client):
        response = post_raw(client, '{"amount": "150.00"}')
        assert response.get_json()["amount"] == "150.00"

    def test_submitted_id_is_ignored(self, client, client_payment):
        response = client.post(URL, json={**client_payment, "id": "my-own-id"})
        assert response.status_code == 201
        assert response.get_json()["id"] != "my-own-id"

    def test_identical_posts_create_two_records(self, client, client_payment):
        first = client.post(URL, json=client_payment).get_json()
        second = client.post(URL, json=client_payment).get_json()
        assert first["id"] != second["id"]
        assert len(client.get(URL).get_json()) == 2

    def test_unknown_type_is_accepted(self, client):
        """Test that type/taxCategory are stored as given."""
        response = client.post(URL, json={"type": "TRANSFER", "taxCategory": "ZERO_RATED"})
        assert response.status_code == 201
        assert response.get_json()["type"] == "TRANSFER"

    def test_unknown_properties_are_ignored(self, client, client_payment):
        response = client.post(URL, json={**client_payment, "currency": "GBP"})
        assert response.status_code == 201
        assert "currency" not in response.get_json()


class TestMalformedPayloads:
    """Malformed payloads are rejected before reaching the store."""

    def test_non_numeric_amount_rejected(self, client, collection, client_payment):
        response = client.post(URL, json={**client_payment, "amount": "abc"})
        assert response.status_code == 400
        body = response.get_json()
        assert body["error"] == "Malformed transaction"
        assert [d["field"] for d in body["details"]] == ["amount"]
        assert collection.count_documents({}) == 0

    def test_invalid_date_rejected(self, client, client_payment):
        response = client.post(URL, json={**client_payment, "date": "08/02/2026"})
        assert response.status_code == 400
        assert response.get_json()["details"][0]["field"] == "date"

    def test_invalid_json_rejected(self, client):
        response = post_raw(client, "{not json")
        assert response.status_code == 400
        assert response.get_json()["details"][0]["field"] == "body"

    def test_empty_body_rejected(self, client):
        response = post_raw(client, "")
        assert response.status_code == 400

    def test_array_body_rejected(self, client, client_payment):
        response = post_raw(client, json.dumps([client_payment]))
        assert response.status_code == 400
        assert response.get_json()["details"][0]["field"] == "body"

    def test_nan_amount_rejected(self, client, collection):
        response = post_raw(client, '{"amount": NaN}')
        assert response.status_code == 400
        assert collection.count_documents({}) == 0

    def test_store_not_called(self, api_settings):
        storage = MagicMock(spec=TransactionStorageInterface)
        client = create_app(storage=storage, api_settings=api_settings).test_client()
        response = client.post(URL, json={"amount": "twelve"})
        assert response.status_code == 400
        storage.create_transaction.assert_not_called()


class TestStorageFailures:
    """Store failures surface as server errors."""

    def _client(self, api_settings, **side_effects):
        storage = MagicMock(spec=TransactionStorageInterface)
        for name, error in side_effects.items():
            getattr(storage, name).side_effect = error
        return create_app(storage=storage, api_settings=api_settings).test_client()

    def test_unreachable_store_on_list(self, api_settings):
        client = self._client(
            api_settings,
            list_transactions=StorageConnectionError("timed out"),
        )
        response = client.get(URL)
        assert response.status_code == 503
        assert response.get_json() == {"error": "Store unavailable"}

    def test_store_error_on_create(self, api_settings, client_payment):
        client = self._client(
            api_settings,
            create_transaction=StorageError("write failed"),
        )
        response = client.post(URL, json=client_payment)
        assert response.status_code == 500
        assert response.get_json() == {"error": "Store error"}

    def test_failure_does_not_affect_next_request(self, api_settings):
        storage = MagicMock(spec=TransactionStorageInterface)
        storage.list_transactions.side_effect = [StorageConnectionError("down"), []]
        client = create_app(storage=storage, api_settings=api_settings).test_client()
        assert client.get(URL).status_code == 503
        assert client.get(URL).status_code == 200


class TestCors:
    """Only the configured frontend may call the API cross-origin."""

    def test_allowed_origin(self, client, api_settings):
        origin = api_settings.frontend_url
        response = client.get(URL, headers={"Origin": origin})
        assert response.headers["Access-Control-Allow-Origin"] == origin

    def test_other_origin(self, client):
        response = client.get(URL, headers={"Origin": "http://evil.example"})
        assert "Access-Control-Allow-Origin" not in response.headers
