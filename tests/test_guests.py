from shared.utils.app_status_code import AppStatusCode
from tests.helpers import data_of


def test_create_and_search_guests(client, headers):
    created = client.post("/api/guests/", json={
        "name": " Asha Rao ", "phone": "9000000001", "email": "asha@example.com", "address": ""
    }, headers=headers)
    client.post("/api/guests/", json={"name": "Vikram Sen", "phone": "9000000002"}, headers=headers)

    guest = data_of(created)
    assert created.status_code == 201
    assert guest["name"] == "Asha Rao"
    assert guest["address"] == ""

    by_email = data_of(client.get("/api/guests/", params={"search": "EXAMPLE.com"}, headers=headers))
    by_phone = data_of(client.get("/api/guests/", params={"search": "0002"}, headers=headers))
    everyone = data_of(client.get("/api/guests/", headers=headers))

    assert [g["name"] for g in by_email] == ["Asha Rao"]
    assert [g["name"] for g in by_phone] == ["Vikram Sen"]
    assert len(everyone) == 2


def test_duplicate_phone_is_rejected(client, headers):
    client.post("/api/guests/", json={"name": "Asha Rao", "phone": "9000000001"}, headers=headers)

    response = client.post("/api/guests/", json={"name": "A. Rao", "phone": "9000000001"},
                           headers=headers)

    assert response.status_code == 400
    assert response.json()["status_code"] == AppStatusCode.DUPLICATE_ADD_ERROR


def test_invalid_email_fails_validation(client, headers):
    response = client.post("/api/guests/", json={
        "name": "Asha Rao", "phone": "9000000001", "email": "not-an-email"
    }, headers=headers)

    assert response.status_code == 422
    assert response.json()["status_code"] == AppStatusCode.INVALID_INPUT


def test_get_guest_and_bookings(client, headers, make_room_type, make_booking):
    room_type = make_room_type()
    booking = data_of(make_booking(room_type["id"]))

    guest = data_of(client.get(f"/api/guests/{booking['guest_id']}", headers=headers))
    bookings = data_of(client.get(f"/api/guests/{booking['guest_id']}/bookings", headers=headers))

    assert guest["phone"] == "9000000001"
    assert [b["id"] for b in bookings] == [booking["id"]]


def test_unknown_guest(client, headers):
    assert client.get("/api/guests/77", headers=headers).status_code == 404
    assert client.get("/api/guests/77/bookings", headers=headers).status_code == 404
