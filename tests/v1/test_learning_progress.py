# mypy: ignore-errors
# tests/v1/test_learning_progress.py
"""Tests for learning progress endpoints."""

from fastapi import status


def _payload(owner_id, **overrides):
    payload = {
        "skillTitle": "Rust",
        "description": "Work through the book",
        "field": "Programming",
        "startDate": "2024-01-01",
        "endDate": "2024-03-01",
        "level": "Beginner",
        "postOwnerID": owner_id,
    }
    payload.update(overrides)
    return payload


def test_create_progress(client, test_user) -> None:
    response = client.post("/learningProgress", json=_payload(test_user.id))
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["skillTitle"] == "Rust"
    assert data["startDate"] == "2024-01-01"
    assert data["endDate"] == "2024-03-01"
    assert data["postOwnerID"] == test_user.id
    assert data["postOwnerName"] == test_user.fullname


def test_create_progress_rejects_reversed_dates(client, test_user) -> None:
    response = client.post(
        "/learningProgress",
        json=_payload(test_user.id, startDate="2024-05-01", endDate="2024-04-01"),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "End date cannot be before start date"}


def test_create_progress_same_day_allowed(client, test_user) -> None:
    response = client.post(
        "/learningProgress",
        json=_payload(test_user.id, startDate="2024-05-01", endDate="2024-05-01"),
    )
    assert response.status_code == status.HTTP_201_CREATED


def test_create_progress_missing_field(client, test_user) -> None:
    payload = _payload(test_user.id)
    del payload["field"]
    response = client.post("/learningProgress", json=payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Missing required fields"}


def test_create_progress_invalid_date(client, test_user) -> None:
    response = client.post("/learningProgress", json=_payload(test_user.id, startDate="soon"))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"].startswith("Invalid request")


def test_create_progress_unknown_owner(client) -> None:
    response = client.post("/learningProgress", json=_payload("ghost"))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_progress_filters_by_owner(client, test_user, other_user) -> None:
    mine = client.post("/learningProgress", json=_payload(test_user.id)).json()
    theirs = client.post("/learningProgress", json=_payload(other_user.id)).json()

    everything = client.get("/learningProgress").json()
    assert [r["id"] for r in everything] == [theirs["id"], mine["id"]]

    filtered = client.get("/learningProgress", params={"postOwnerID": test_user.id}).json()
    assert [r["id"] for r in filtered] == [mine["id"]]


def test_update_progress_partial(client, test_user) -> None:
    created = client.post("/learningProgress", json=_payload(test_user.id)).json()

    response = client.put(f"/learningProgress/{created['id']}", json={"level": "Intermediate"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["level"] == "Intermediate"
    assert data["skillTitle"] == "Rust"


def test_update_progress_rejects_end_before_existing_start(client, test_user) -> None:
    """The merged record must keep its dates in order."""
    created = client.post("/learningProgress", json=_payload(test_user.id)).json()

    response = client.put(f"/learningProgress/{created['id']}", json={"endDate": "2023-12-31"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/learningProgress/{created['id']}").json()["endDate"] == "2024-03-01"


def test_delete_progress(client, test_user) -> None:
    created = client.post("/learningProgress", json=_payload(test_user.id)).json()

    response = client.delete(f"/learningProgress/{created['id']}")
    assert response.status_code == status.HTTP_200_OK
    missing = client.get(f"/learningProgress/{created['id']}")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"message": "Learning progress not found"}
