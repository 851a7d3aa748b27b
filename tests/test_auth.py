from shared.utils.app_status_code import AppStatusCode
from tests.helpers import data_of


def _register(auth_client, username="frontdesk", password="secret123", role="receptionist"):
    return auth_client.post("/api/auth/register", json={
        "username": username, "password": password, "role": role
    })


def test_register_and_login(auth_client):
    registered = _register(auth_client, role="Manager")
    login = auth_client.post("/api/auth/login", json={"username": "frontdesk", "password": "secret123"})

    assert registered.status_code == 201
    assert data_of(registered)["message"] == "User created successfully"
    assert isinstance(data_of(registered)["user_id"], int)
    assert login.status_code == 200
    assert data_of(login)["token_type"] == "bearer"
    assert data_of(login)["role"] == "manager"


def test_duplicate_username(auth_client):
    _register(auth_client)

    response = _register(auth_client)

    assert response.status_code == 400
    assert response.json()["status_code"] == AppStatusCode.DUPLICATE_ADD_ERROR


def test_unknown_role(auth_client):
    response = _register(auth_client, role="janitor")

    assert response.status_code == 400
    assert response.json()["status_code"] == AppStatusCode.INVALID_INPUT


def test_bad_credentials_share_one_message(auth_client):
    _register(auth_client)

    wrong_password = auth_client.post("/api/auth/login", json={"username": "frontdesk", "password": "nope123"})
    unknown_user = auth_client.post("/api/auth/login", json={"username": "ghost", "password": "secret123"})

    for response in (wrong_password, unknown_user):
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"
        assert response.json()["status_code"] == AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID


def test_me_returns_token_user(auth_client, headers):
    response = auth_client.get("/api/auth/me", headers=headers)

    assert data_of(response)["username"] == "desk1"
    assert data_of(response)["role"] == "receptionist"


def test_hotel_routes_need_a_valid_token(client):
    missing = client.get("/api/bookings/")
    garbage = client.get("/api/bookings/", headers={"Authorization": "Bearer not-a-jwt"})

    assert missing.status_code in (401, 403)
    assert garbage.status_code == 401
    assert garbage.json()["status"] == "Failure"
