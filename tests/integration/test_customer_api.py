"""
Integration tests for the customer and invoice endpoints.

Tests cover:
- Customer creation acknowledgment
- Invoice append and listing in insertion order
- 401 "Invalid username." for unknown customers
- Line item validation
"""

import pytest
from bson import ObjectId

ADA = {"firstName": "Ada", "lastName": "Lovelace", "userName": "alovelace"}


def invoice(subtotal: float) -> dict:
    return {
        "subtotal": subtotal,
        "tax": 0.8,
        "dateCreated": "2023-07-06",
        "dateShipped": "2023-07-08",
        "lineItems": [{"name": "Sheet music", "price": subtotal, "quantity": 1}],
    }


@pytest.fixture
def customer(client):
    response = client.post("/api/customers", json=ADA)
    assert response.status_code == 200
    return ADA


class TestCustomerApi:
    """Tests for /api/customers."""

    def test_create_customer(self, client, database):
        response = client.post("/api/customers", json=ADA)

        assert response.status_code == 200
        assert response.json() == {"message": "Customer added to MongoDB."}
        stored = database["customers"].documents[0]
        assert stored["userName"] == "alovelace"
        assert stored["invoices"] == []

    def test_create_customer_requires_user_name(self, client):
        response = client.post("/api/customers", json={"firstName": "Ada", "lastName": "Lovelace"})

        assert response.status_code == 501
        assert "userName" in response.json()["message"]


class TestInvoiceApi:
    """Tests for /api/customers/{username}/invoices."""

    def test_list_invoices_starts_empty(self, client, customer):
        response = client.get("/api/customers/alovelace/invoices")

        assert response.status_code == 200
        assert response.json() == []

    def test_add_invoices_in_order(self, client, customer):
        first = client.post("/api/customers/alovelace/invoices", json=invoice(10.0))
        second = client.post("/api/customers/alovelace/invoices", json=invoice(20.0))

        assert first.status_code == 200
        assert first.json() == {"message": "Invoice added to MongoDB."}
        assert second.status_code == 200

        response = client.get("/api/customers/alovelace/invoices")
        assert response.json() == [invoice(10.0), invoice(20.0)]

    def test_add_invoice_unknown_customer(self, client, database):
        response = client.post("/api/customers/nobody/invoices", json=invoice(10.0))

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username."}
        assert database["customers"].documents == []

    def test_list_invoices_unknown_customer(self, client):
        response = client.get("/api/customers/nobody/invoices")

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username."}

    def test_negative_quantity_rejected(self, client, customer, database):
        bad = invoice(10.0)
        bad["lineItems"][0]["quantity"] = -1

        response = client.post("/api/customers/alovelace/invoices", json=bad)

        assert response.status_code == 501
        assert "quantity" in response.json()["message"]
        assert database["customers"].documents[0]["invoices"] == []

    def test_fractional_quantity_accepted(self, client, customer):
        half = invoice(10.0)
        half["lineItems"][0]["quantity"] = 0.5

        response = client.post("/api/customers/alovelace/invoices", json=half)

        assert response.status_code == 200
        listed = client.get("/api/customers/alovelace/invoices").json()
        assert listed[0]["lineItems"][0]["quantity"] == 0.5


class TestNullInvoiceList:
    """Tests for customers stored with ``invoices: null``."""

    @pytest.fixture
    def legacy_customer(self, database):
        database["customers"].documents.append({
            "_id": ObjectId(),
            "firstName": "Ada",
            "lastName": "Lovelace",
            "userName": "legacy",
            "invoices": None,
        })

    def test_list_invoices_returns_empty(self, client, legacy_customer):
        response = client.get("/api/customers/legacy/invoices")

        assert response.status_code == 200
        assert response.json() == []

    def test_add_invoice_starts_new_list(self, client, legacy_customer, database):
        response = client.post("/api/customers/legacy/invoices", json=invoice(10.0))

        assert response.status_code == 200
        assert client.get("/api/customers/legacy/invoices").json() == [invoice(10.0)]
        assert len(database["customers"].documents[0]["invoices"]) == 1
