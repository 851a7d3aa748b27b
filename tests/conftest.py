import os
import tempfile
from datetime import date, timedelta

# Settings are read at import time, so the environment goes first
os.environ["AUTH_DATABASE_URL"] = "sqlite://"
os.environ["HOTEL_DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="hotel-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import AuthBase, Base, get_auth_db, get_hotel_db
from auth_service.app.main import app as auth_app
from hotel_service.app.main import app as hotel_app
from hotel_service.util.file_storage import LocalFileStorage, get_file_storage
from tests.helpers import data_of


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    AuthBase.metadata.create_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(str(tmp_path), "/uploads")


@pytest.fixture
def overrides(session_factory, storage):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    for app in (auth_app, hotel_app):
        app.dependency_overrides[get_auth_db] = _get_db
        app.dependency_overrides[get_hotel_db] = _get_db
    hotel_app.dependency_overrides[get_file_storage] = lambda: storage

    yield

    auth_app.dependency_overrides.clear()
    hotel_app.dependency_overrides.clear()


@pytest.fixture
def auth_client(overrides):
    with TestClient(auth_app) as client:
        yield client


@pytest.fixture
def client(overrides):
    with TestClient(hotel_app) as client:
        yield client


def _login_headers(auth_client, username, role):
    auth_client.post("/api/auth/register", json={
        "username": username, "password": "secret123", "role": role
    })
    response = auth_client.post("/api/auth/login", json={
        "username": username, "password": "secret123"
    })
    token = data_of(response)["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(auth_client):
    return _login_headers(auth_client, "manager1", "admin")


@pytest.fixture
def headers(auth_client):
    return _login_headers(auth_client, "desk1", "receptionist")


@pytest.fixture
def make_room_type(client, admin_headers):
    def _make(name="Deluxe", base_price=2000, capacity=2, rooms=("101", "102")):
        response = client.post("/api/room-types/", json={
            "name": name, "base_price": base_price, "capacity": capacity
        }, headers=admin_headers)
        assert response.status_code == 201, response.text
        room_type = data_of(response)

        for number in rooms:
            created = client.post("/api/rooms/", json={
                "room_number": number, "room_type_id": room_type["id"]
            }, headers=admin_headers)
            assert created.status_code == 201, created.text
        return room_type

    return _make


@pytest.fixture
def make_booking(client, headers):
    def _make(room_type_id, check_in=None, nights=2, phone="9000000001",
              name="Asha Rao", adults=2, children=0, **extra):
        check_in = check_in or date.today()
        payload = {
            "guest_name": name,
            "guest_phone": phone,
            "room_type_id": room_type_id,
            "check_in_date": check_in.isoformat(),
            "check_out_date": (check_in + timedelta(days=nights)).isoformat(),
            "adults": adults,
            "children": children,
            **extra,
        }
        return client.post("/api/bookings/", json=payload, headers=headers)

    return _make
