import sqlite3

import pytest

from lassdb.schema import UserV1, UserV2
from lassdb.store import UserStore
from lassdb.user import User


@pytest.fixture
def store(tmp_path):
    with UserStore(tmp_path / "db") as s:
        yield s


def test_creates_directory(tmp_path):
    with UserStore(tmp_path / "db"):
        pass
    assert (tmp_path / "db").is_dir()


def test_put_then_get_round_trip(store):
    user = User(UserV2(id=1, name="alice", email="alice@example.com"))
    store.put("alice", user)
    assert store.get("alice") == user


def test_get_missing_is_none(store):
    assert store.get("nobody") is None


def test_put_overwrites(store):
    store.put("k", User(UserV2(id=1, name="a", email="a@example.com")))
    newer = User(UserV2(id=2, name="b", email="b@example.com"))
    store.put("k", newer)
    assert store.get("k") == newer


def test_v1_user_keeps_its_version(store):
    user = User(UserV1(id=3, name="old"))
    store.put("old", user)
    fetched = store.get("old")
    assert fetched == user
    assert fetched.current_version() == "1"


def test_delete_reports_presence(store):
    store.put("k", User(UserV1(id=1, name="x")))
    assert store.delete("k") is True
    assert store.delete("k") is False
    assert store.get("k") is None


def test_data_persists_across_reopen(tmp_path):
    user = User(UserV2(id=7, name="bob", email="bob@example.com"))
    with UserStore(tmp_path / "db") as first:
        first.put("bob", user)
    with UserStore(tmp_path / "db") as second:
        assert second.get("bob") == user


def test_put_rejects_non_user(store):
    with pytest.raises(TypeError):
        store.put("k", {"version": "V1", "data": {"id": 1, "name": "x"}})


def test_closed_store_cannot_be_used(tmp_path):
    s = UserStore(tmp_path / "db")
    s.close()
    with pytest.raises(sqlite3.ProgrammingError):
        s.get("k")