import pytest

from shared.utils.app_status_code import AppStatusCode
from tests.helpers import data_of


@pytest.fixture
def booking(make_room_type, make_booking):
    room_type = make_room_type()
    return data_of(make_booking(room_type["id"]))


@pytest.fixture
def make_bill(client, headers):
    def _make(booking_id, **charges):
        payload = {"booking_id": booking_id, "room_charges": 4000, **charges}
        response = client.post("/api/bills/", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return data_of(response)

    return _make


def test_create_bill_sums_charges(booking, make_bill):
    bill = make_bill(booking["id"], food_charges=500, tax_amount=200)

    assert bill["bill_number"] == "BILL-0001"
    assert bill["total_amount"] == 4700
    assert bill["payment_status"] == "pending"
    assert bill["guest_id"] == booking["guest_id"]
    assert bill["items"] == []


def test_bill_numbers_are_sequential(booking, make_bill):
    first = make_bill(booking["id"])
    second = make_bill(booking["id"])

    assert (first["bill_number"], second["bill_number"]) == ("BILL-0001", "BILL-0002")


def test_create_bill_for_unknown_booking(client, headers):
    response = client.post("/api/bills/", json={"booking_id": 999, "room_charges": 10}, headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Booking not found"


def test_item_mutations_keep_total_in_step(client, headers, booking, make_bill):
    bill = make_bill(booking["id"], food_charges=500, tax_amount=200)
    base = f"/api/bills/{bill['id']}"

    added = client.post(f"{base}/items", json={
        "description": "Laundry", "amount": 150, "quantity": 2, "item_type": "service"
    }, headers=headers)
    item = data_of(added)
    assert added.status_code == 201
    assert item["total_price"] == 300
    assert data_of(client.get(base, headers=headers))["total_amount"] == 5000

    client.put(f"{base}/items/{item['id']}", json={
        "description": "Laundry", "unit_price": 150, "quantity": 1, "item_type": "service"
    }, headers=headers)
    assert data_of(client.get(base, headers=headers))["total_amount"] == 4850

    deleted = client.delete(f"{base}/items/{item['id']}", headers=headers)
    assert deleted.status_code == 200
    assert data_of(deleted)["total_amount"] == 4700
    assert data_of(deleted)["items"] == []


def test_item_must_belong_to_bill(client, headers, booking, make_bill):
    first = make_bill(booking["id"])
    second = make_bill(booking["id"])
    item = data_of(client.post(f"/api/bills/{first['id']}/items", json={
        "description": "Dinner", "unit_price": 800
    }, headers=headers))

    wrong_bill = client.delete(f"/api/bills/{second['id']}/items/{item['id']}", headers=headers)
    missing = client.delete(f"/api/bills/{first['id']}/items/777", headers=headers)

    assert wrong_bill.status_code == 400
    assert wrong_bill.json()["status_code"] == AppStatusCode.INVALID_INPUT
    assert missing.status_code == 404
    assert data_of(client.get(f"/api/bills/{first['id']}", headers=headers))["total_amount"] == 4800


def test_item_on_unknown_bill(client, headers):
    response = client.post("/api/bills/55/items", json={"description": "Tea", "unit_price": 50},
                           headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Bill not found"


def test_payment_status(client, headers, booking, make_bill):
    bill = make_bill(booking["id"])

    paid = client.put(f"/api/bills/{bill['id']}/payment", json={
        "payment_status": "PAID", "payment_method": "card", "transaction_id": "TXN-1"
    }, headers=headers)
    bogus = client.put(f"/api/bills/{bill['id']}/payment", json={"payment_status": "refunded"},
                       headers=headers)

    assert data_of(paid)["payment_status"] == "paid"
    assert data_of(paid)["payment_method"] == "card"
    assert bogus.status_code == 400
    assert bogus.json()["message"] == "Invalid payment status: refunded"


def test_bills_by_booking_and_guest(client, headers, booking, make_bill):
    bill = make_bill(booking["id"])

    by_booking = data_of(client.get(f"/api/bills/booking/{booking['id']}", headers=headers))
    by_guest = data_of(client.get(f"/api/bills/guest/{booking['guest_id']}", headers=headers))
    everything = data_of(client.get("/api/bills/", headers=headers))

    assert [b["id"] for b in by_booking] == [bill["id"]]
    assert [b["id"] for b in by_guest] == [bill["id"]]
    assert len(everything) == 1
