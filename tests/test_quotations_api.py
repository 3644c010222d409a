"""Quotation endpoints: pricing, numbering, updates and PDF export."""
import re

import pytest


@pytest.fixture
def quotation_payload():
    return {
        "customerName": "Meera Traders",
        "email": "meera@example.com",
        "items": [{"itemName": "Steel rack", "qty": 3, "price": 50, "tax": 18}],
    }


def test_create_quotation_prices_items_and_assigns_number(client, quotation_payload):
    response = client.post("/api/quotations", json=quotation_payload)

    assert response.status_code == 201
    body = response.json()
    assert re.fullmatch(r"Q-\d{5}", body["quotationNumber"])
    assert body["quotationId"] == 1
    assert body["items"][0]["subtotal"] == 177.0
    assert body["items"][0]["unitPrice"] == 50
    assert body["totalAmount"] == 177.0
    assert body["status"] == "Draft"


def test_numbers_increase(client, quotation_payload):
    first = client.post("/api/quotations", json=quotation_payload).json()
    second = client.post("/api/quotations", json=quotation_payload).json()
    assert (first["quotationNumber"], second["quotationNumber"]) == ("Q-00001", "Q-00002")


def test_client_subtotal_is_ignored(client, quotation_payload):
    quotation_payload["items"][0]["subtotal"] = 1
    assert client.post("/api/quotations", json=quotation_payload).json()["items"][0]["subtotal"] == 177.0


def test_total_within_tolerance_is_accepted(client, quotation_payload):
    quotation_payload["totalAmount"] = 177.005
    assert client.post("/api/quotations", json=quotation_payload).status_code == 201


def test_total_mismatch_is_rejected(client, quotation_payload):
    quotation_payload["totalAmount"] = 150
    response = client.post("/api/quotations", json=quotation_payload)

    assert response.status_code == 400
    assert "does not match" in response.json()["error"]
    assert client.get("/api/quotations").json() == []


def test_items_are_required(client, quotation_payload):
    quotation_payload["items"] = []
    assert client.post("/api/quotations", json=quotation_payload).status_code == 400


def test_negative_price_is_rejected(client, quotation_payload):
    quotation_payload["items"][0]["price"] = -1
    assert client.post("/api/quotations", json=quotation_payload).status_code == 400


def test_get_quotation(client, quotation_payload):
    created = client.post("/api/quotations", json=quotation_payload).json()

    response = client.get(f"/api/quotations/{created['_id']}")
    assert response.status_code == 200
    assert response.json()["quotationNumber"] == created["quotationNumber"]

    assert client.get("/api/quotations/65f000000000000000000000").status_code == 404


def test_update_recomputes_total_and_keeps_number(client, quotation_payload):
    created = client.post("/api/quotations", json=quotation_payload).json()

    response = client.put(f"/api/quotations/{created['_id']}", json={
        "status": "Sent",
        "items": [{"itemName": "Desk", "quantity": 2, "unitPrice": 100, "discountPercent": 10}],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["totalAmount"] == 180.0
    assert body["status"] == "Sent"
    assert body["quotationNumber"] == created["quotationNumber"]
    assert body["updatedAt"]


def test_update_with_wrong_total_is_rejected(client, quotation_payload):
    created = client.post("/api/quotations", json=quotation_payload).json()
    response = client.put(f"/api/quotations/{created['_id']}", json={"totalAmount": 1})
    assert response.status_code == 400


def test_update_unknown_quotation(client):
    response = client.put("/api/quotations/65f000000000000000000000", json={"status": "Sent"})
    assert response.status_code == 404
    assert response.json() == {"error": "Quotation not found"}


def test_export_pdf(client, quotation_payload):
    created = client.post("/api/quotations", json=quotation_payload).json()

    response = client.get(f"/api/quotations/{created['_id']}/export")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert f"quotation-{created['_id']}.pdf" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.parametrize("field", ["status", "customerName", "items", "customFields"])
def test_null_cannot_clear_a_required_field(client, quotation_payload, field):
    created = client.post("/api/quotations", json=quotation_payload).json()

    response = client.put(f"/api/quotations/{created['_id']}", json={field: None})

    assert response.status_code == 400
    assert client.get(f"/api/quotations/{created['_id']}").json()["status"] == "Draft"
    assert client.get("/api/quotations").status_code == 200


def test_null_clears_an_optional_field(client, quotation_payload):
    created = client.post("/api/quotations", json=quotation_payload).json()
    response = client.put(f"/api/quotations/{created['_id']}", json={"email": None})
    assert response.status_code == 200
    assert response.json()["email"] is None
