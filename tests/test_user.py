import json

import pytest

from lassdb.schema import UserV1, UserV2
from lassdb.user import DEFAULT_EMAIL, User


def test_migrate_v1_fills_default_email():
    migrated = User(UserV1(id=3, name="carl")).migrate()
    assert migrated == User(UserV2(id=3, name="carl", email="unknown@example.com"))


def test_migrate_v2_is_unchanged():
    user = User(UserV2(id=3, name="carl", email="carl@example.com"))
    assert user.migrate() == user


def test_migrate_changes_version():
    user = User(UserV1(id=1, name="a"))
    assert user.current_version() == "1"
    assert user.migrate().current_version() == "2"


def test_default_email_used_by_migration():
    assert DEFAULT_EMAIL == "unknown@example.com"
    migrated = User(UserV1(id=4, name="dan")).migrate()
    assert migrated == User(UserV2(id=4, name="dan", email=DEFAULT_EMAIL))


def test_to_dict_tagged_layout():
    user = User(UserV1(id=5, name="dora"))
    assert user.to_dict() == {"version": "V1", "data": {"id": 5, "name": "dora"}}


@pytest.mark.parametrize(
    "record",
    [UserV1(id=0, name="x"), UserV2(id=2**32 - 1, name="y", email="y@example.com")],
)
def test_dict_round_trip(record):
    user = User(record)
    assert User.from_dict(user.to_dict()) == user


def test_json_round_trip():
    user = User(UserV2(id=9, name="eve", email="eve@example.com"))
    assert User.from_json(user.to_json()) == user


def test_to_json_is_compact_and_ordered():
    text = User(UserV1(id=1, name="a")).to_json()
    assert " " not in text
    assert list(json.loads(text)) == ["version", "data"]


def test_from_json_ignores_extra_fields():
    text = '{"version":"V1","data":{"id":1,"name":"a","extra":true}}'
    assert User.from_json(text) == User(UserV1(id=1, name="a"))


@pytest.mark.parametrize(
    "payload",
    [
        {"data": {"id": 1, "name": "a"}},
        {"version": "V1"},
        {"version": "V3", "data": {"id": 1, "name": "a"}},
        {"version": "V2", "data": {"id": 1, "name": "a"}},
        {"version": "V1", "data": {"id": "one", "name": "a"}},
        {"version": "V1", "data": {"id": -1, "name": "a"}},
        {"version": "V1", "data": [1, "a"]},
        ["V1"],
    ],
)
def test_from_dict_rejects_bad_input(payload):
    with pytest.raises(ValueError):
        User.from_dict(payload)


def test_from_json_rejects_invalid_json():
    with pytest.raises(ValueError):
        User.from_json("{not json")


def test_user_requires_known_record():
    with pytest.raises(TypeError):
        User({"id": 1})  # type: ignore[arg-type]