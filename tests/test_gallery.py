import os

import pytest

from tests.helpers import data_of


@pytest.fixture
def upload(client, headers):
    def _upload(name="lobby.jpg", description="Lobby"):
        response = client.post(
            "/api/gallery/upload",
            files={"file": (name, b"\xff\xd8\xff fake jpeg", "image/jpeg")},
            data={"description": description},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return data_of(response)

    return _upload


def _stored_path(storage, image):
    return os.path.join(storage.upload_dir, image["image_url"].rsplit("/", 1)[-1])


def test_upload_stores_file_and_url(upload, storage):
    image = upload()

    assert image["image_url"].startswith("/uploads/")
    assert image["image_url"].endswith(".jpg")
    assert image["description"] == "Lobby"
    assert os.path.exists(_stored_path(storage, image))


def test_listing_is_public(client, upload):
    image = upload()

    response = client.get("/api/gallery/")

    assert response.status_code == 200
    assert [i["id"] for i in data_of(response)] == [image["id"]]


def test_get_image_requires_token(client, headers, upload):
    image = upload()

    assert client.get(f"/api/gallery/{image['id']}").status_code in (401, 403)
    assert data_of(client.get(f"/api/gallery/{image['id']}", headers=headers))["id"] == image["id"]


def test_delete_removes_file_and_row(client, headers, upload, storage):
    image = upload()

    response = client.delete(f"/api/gallery/{image['id']}", headers=headers)

    assert response.status_code == 200
    assert not os.path.exists(_stored_path(storage, image))
    assert client.get(f"/api/gallery/{image['id']}", headers=headers).status_code == 404


def test_delete_with_missing_file_still_removes_row(client, headers, upload, storage):
    image = upload()
    os.remove(_stored_path(storage, image))

    response = client.delete(f"/api/gallery/{image['id']}", headers=headers)

    assert response.status_code == 200
    assert data_of(client.get("/api/gallery/")) == []


def test_bulk_delete_skips_unknown_ids(client, headers, upload):
    first = upload("a.jpg")
    second = upload("b.png")
    kept = upload("c.jpg")

    response = client.post("/api/gallery/bulk-delete",
                           json={"image_ids": [first["id"], second["id"], 999]},
                           headers=headers)

    assert response.status_code == 200
    assert data_of(response)["deleted"] == 2
    assert [i["id"] for i in data_of(client.get("/api/gallery/"))] == [kept["id"]]


def test_delete_unknown_image(client, headers):
    assert client.delete("/api/gallery/5", headers=headers).status_code == 404
