# mypy: ignore-errors
# tests/test_store.py
"""Tests for the JSON document store."""

import json

import pytest

from skillhub.db.store import JsonStore, StoreError
from skillhub.db.time import newest_first
from skillhub.models import Post, User


def _user(user_id: str = "u1") -> User:
    return User(id=user_id, fullname="Ada", email=f"{user_id}@x.com", password="hash")


def test_load_creates_missing_document(tmp_path) -> None:
    """A missing file yields an empty document that is immediately written out."""
    path = tmp_path / "nested" / "db.json"
    store = JsonStore(path)
    store.load()

    assert path.exists()
    data = json.loads(path.read_text())
    assert data == {
        "users": [],
        "posts": [],
        "learningProgress": [],
        "learningResources": [],
        "notifications": [],
    }


def test_transaction_persists_and_reloads(tmp_path) -> None:
    path = tmp_path / "db.json"
    store = JsonStore(path)
    store.load()
    with store.transaction() as doc:
        doc.users.append(_user())

    reloaded = JsonStore(path)
    reloaded.load()
    assert [u.id for u in reloaded.document.users] == ["u1"]


def test_failed_transaction_is_rolled_back(tmp_path) -> None:
    """Raising inside a transaction leaves both the file and memory untouched."""
    path = tmp_path / "db.json"
    store = JsonStore(path)
    store.load()
    before = path.read_text()

    with pytest.raises(ValueError):
        with store.transaction() as doc:
            doc.users.append(_user())
            raise ValueError("boom")

    assert path.read_text() == before
    assert store.document.users == []

    with store.transaction():
        pass
    assert json.loads(path.read_text())["users"] == []


def test_likes_are_written_as_true_only_mapping(tmp_path) -> None:
    path = tmp_path / "db.json"
    store = JsonStore(path)
    store.load()
    with store.transaction() as doc:
        post = Post(id="p1", user_id="u1", title="T", description="D")
        post.toggle_like("u2")
        post.toggle_like("u3")
        post.toggle_like("u3")
        doc.posts.append(post)

    data = json.loads(path.read_text())
    assert data["posts"][0]["likes"] == {"u2": True}
    assert data["posts"][0]["userID"] == "u1"


def test_legacy_false_like_entries_are_dropped_on_load(tmp_path) -> None:
    path = tmp_path / "db.json"
    path.write_text(
        json.dumps(
            {
                "posts": [
                    {
                        "id": "p1",
                        "userID": "u1",
                        "title": "T",
                        "description": "D",
                        "likes": {"u2": True, "u3": False},
                    }
                ]
            }
        )
    )
    store = JsonStore(path)
    store.load()
    assert store.document.posts[0].likes == {"u2"}
    assert store.document.users == []


def test_corrupt_document_raises_store_error(tmp_path) -> None:
    path = tmp_path / "db.json"
    path.write_text("{not json")
    store = JsonStore(path)
    with pytest.raises(StoreError):
        store.load()


def test_persist_failure_returns_false(tmp_path) -> None:
    """Write failures are reported but do not raise."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = JsonStore(blocker / "db.json")
    assert store.persist() is False


def test_persist_leaves_no_temporary_files(tmp_path) -> None:
    directory = tmp_path / "isolated"
    store = JsonStore(directory / "db.json")
    store.load()
    with store.transaction() as doc:
        doc.users.append(_user())
    assert sorted(p.name for p in directory.iterdir()) == ["db.json"]


def test_newest_first_breaks_ties_by_insertion() -> None:
    stamp = _user("a").created_at
    users = [_user("a"), _user("b"), _user("c")]
    for user in users:
        user.created_at = stamp
    assert [u.id for u in newest_first(users, key=lambda u: u.created_at)] == ["c", "b", "a"]


def test_failed_transaction_restores_nested_changes(tmp_path) -> None:
    """Edits to existing records are undone along with appended ones."""
    store = JsonStore(tmp_path / "db.json")
    store.load()
    with store.transaction() as doc:
        doc.users.append(_user())

    with pytest.raises(RuntimeError):
        with store.transaction() as doc:
            doc.find_user("u1").fullname = "Changed"
            doc.find_user("u1").following.append("u2")
            raise RuntimeError("boom")

    restored = store.document.find_user("u1")
    assert restored.fullname == "Ada"
    assert restored.following == []


def test_init_store_accepts_string_path(tmp_path, monkeypatch) -> None:
    """The shared store can be pointed at a plain string path."""
    from skillhub.db import session

    monkeypatch.setattr(session, "_store", None)
    path = tmp_path / "shared" / "db.json"
    store = session.init_store(str(path))

    assert store.path == path
    assert path.exists()
    assert session.get_store() is store
