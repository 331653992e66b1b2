# mypy: ignore-errors
# tests/v1/test_learning_resources.py
"""Tests for learning resource endpoints."""

from fastapi import status


def _payload(owner_id, **overrides):
    payload = {
        "title": "Pydantic docs",
        "description": "Models and validation",
        "contentURL": "https://docs.pydantic.dev",
        "tags": ["python", "validation"],
        "postOwnerID": owner_id,
    }
    payload.update(overrides)
    return payload


def test_create_resource(client, test_user) -> None:
    response = client.post("/learningSystem", json=_payload(test_user.id))
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["contentURL"] == "https://docs.pydantic.dev"
    assert data["postOwnerName"] == test_user.fullname
    assert data["likes"] == {}


def test_create_resource_missing_url(client, test_user) -> None:
    payload = _payload(test_user.id)
    del payload["contentURL"]
    response = client.post("/learningSystem", json=payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_resources_by_tag(client, test_user) -> None:
    tagged = client.post("/learningSystem", json=_payload(test_user.id)).json()
    client.post("/learningSystem", json=_payload(test_user.id, tags=["design"]))

    assert len(client.get("/learningSystem").json()) == 2
    filtered = client.get("/learningSystem", params={"tag": "validation"}).json()
    assert [r["id"] for r in filtered] == [tagged["id"]]


def test_update_resource(client, test_user) -> None:
    created = client.post("/learningSystem", json=_payload(test_user.id)).json()

    response = client.put(
        f"/learningSystem/{created['id']}",
        json={"title": "Pydantic v2 docs", "tags": ["python"]},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == "Pydantic v2 docs"
    assert data["tags"] == ["python"]
    assert data["description"] == "Models and validation"


def test_update_unknown_resource(client) -> None:
    response = client.put("/learningSystem/missing", json={"title": "x"})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Learning resource not found"}


def test_delete_resource(client, test_user) -> None:
    created = client.post("/learningSystem", json=_payload(test_user.id)).json()
    assert client.delete(f"/learningSystem/{created['id']}").status_code == status.HTTP_200_OK
    assert client.get(f"/learningSystem/{created['id']}").status_code == status.HTTP_404_NOT_FOUND
