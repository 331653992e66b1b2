# mypy: ignore-errors
# tests/v1/test_comments.py
"""Tests for comment endpoints."""

from fastapi import status


def _comment(client, post_id, user_id, content="Nice post"):
    return client.post(f"/posts/{post_id}/comment", json={"userID": user_id, "content": content})


def test_add_comment_returns_full_list(client, test_post, other_user) -> None:
    response = _comment(client, test_post.id, other_user.id)
    assert response.status_code == status.HTTP_200_OK
    [comment] = response.json()["comments"]
    assert comment["userID"] == other_user.id
    assert comment["userFullName"] == other_user.fullname
    assert comment["content"] == "Nice post"
    assert comment["id"]


def test_add_comment_notifies_post_owner(client, test_user, test_post, other_user) -> None:
    _comment(client, test_post.id, other_user.id)
    _comment(client, test_post.id, test_user.id, "Thanks")

    inbox = client.get(f"/notifications/{test_user.id}").json()
    assert [n["message"] for n in inbox] == [f'{other_user.fullname} commented on your post "T".']


def test_add_comment_missing_content(client, test_post, other_user) -> None:
    response = client.post(f"/posts/{test_post.id}/comment", json={"userID": other_user.id})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "userID and content are required"}


def test_add_comment_unknown_post(client, other_user) -> None:
    response = _comment(client, "missing", other_user.id)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_edit_comment_by_author(client, test_post, other_user) -> None:
    [comment] = _comment(client, test_post.id, other_user.id).json()["comments"]

    response = client.put(
        f"/posts/{test_post.id}/comment/{comment['id']}",
        json={"userID": other_user.id, "content": "Edited"},
    )
    assert response.status_code == status.HTTP_200_OK
    [edited] = response.json()["comments"]
    assert edited["content"] == "Edited"
    assert edited["updatedAt"] is not None


def test_edit_comment_by_other_user_forbidden(client, test_user, test_post, other_user) -> None:
    """Only the author may change a comment, even the post owner may not."""
    [comment] = _comment(client, test_post.id, other_user.id).json()["comments"]

    response = client.put(
        f"/posts/{test_post.id}/comment/{comment['id']}",
        json={"userID": test_user.id, "content": "Hijacked"},
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "Not authorized to edit this comment"}
    stored = client.get(f"/posts/{test_post.id}").json()["comments"][0]
    assert stored["content"] == "Nice post"


def test_delete_comment_by_author(client, test_post, other_user) -> None:
    [comment] = _comment(client, test_post.id, other_user.id).json()["comments"]

    response = client.delete(
        f"/posts/{test_post.id}/comment/{comment['id']}", params={"userID": other_user.id}
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"comments": []}


def test_delete_comment_by_other_user_forbidden(client, test_user, test_post, other_user) -> None:
    [comment] = _comment(client, test_post.id, other_user.id).json()["comments"]

    response = client.delete(
        f"/posts/{test_post.id}/comment/{comment['id']}", params={"userID": test_user.id}
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "Not authorized to delete this comment"}


def test_delete_unknown_comment(client, test_post, test_user) -> None:
    response = client.delete(
        f"/posts/{test_post.id}/comment/missing", params={"userID": test_user.id}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Comment not found"}
