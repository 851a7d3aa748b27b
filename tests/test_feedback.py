import pytest

from tests.helpers import data_of


@pytest.fixture
def guest(client, headers):
    response = client.post("/api/guests/", json={"name": "Asha Rao", "phone": "9000000001"},
                           headers=headers)
    return data_of(response)


def test_create_feedback(client, headers, guest):
    response = client.post("/api/feedback/", json={
        "guest_id": guest["id"], "room_rating": 5, "service_rating": 4,
        "overall_rating": "", "comments": "Lovely stay", "feedback_type": "General"
    }, headers=headers)

    feedback = data_of(response)
    assert response.status_code == 201
    assert feedback["room_rating"] == 5
    assert feedback["overall_rating"] == ""
    assert feedback["feedback_type"] == "general"

    listed = data_of(client.get("/api/feedback/", headers=headers))
    fetched = data_of(client.get(f"/api/feedback/{feedback['id']}", headers=headers))
    assert [f["id"] for f in listed] == [feedback["id"]]
    assert fetched["comments"] == "Lovely stay"


@pytest.mark.parametrize("field,label", [
    ("room_rating", "Room rating"),
    ("service_rating", "Service rating"),
    ("overall_rating", "Overall rating"),
])
@pytest.mark.parametrize("value", [0, 6])
def test_ratings_outside_range_are_rejected(client, headers, guest, field, label, value):
    response = client.post("/api/feedback/", json={"guest_id": guest["id"], field: value},
                           headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == f"{label} must be between 1 and 5"


def test_feedback_needs_known_guest_and_booking(client, headers, guest):
    no_guest = client.post("/api/feedback/", json={"guest_id": 404}, headers=headers)
    no_booking = client.post("/api/feedback/", json={"guest_id": guest["id"], "room_booking_id": 404},
                             headers=headers)

    assert no_guest.status_code == 404
    assert no_guest.json()["message"] == "Guest not found"
    assert no_booking.status_code == 404
    assert no_booking.json()["message"] == "Booking not found"


def test_unknown_feedback(client, headers):
    assert client.get("/api/feedback/12", headers=headers).status_code == 404
