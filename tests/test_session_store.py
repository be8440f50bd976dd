from __future__ import annotations

import json
import logging

import pytest

from tests.conftest import BROWSER_ID, OTHER_BROWSER_ID, make_session
from workforce.models import Role
from workforce.session_store import SessionStore, is_browser_id, session_path


def test_load_from_empty_store_is_none(store):
    assert store.load() is None
    assert store.token() is None


def test_save_then_load_round_trips(store):
    session = make_session(role=Role.MANAGER, token="t1")
    store.save(session)

    assert store.load() == session
    assert store.token() == "t1"


def test_save_overwrites_previous_session(store):
    store.save(make_session(role=Role.ADMIN, token="old"))
    store.save(make_session(role=Role.EMPLOYEE, token="new"))

    assert store.load().role is Role.EMPLOYEE
    assert store.token() == "new"


def test_save_writes_both_slots(store):
    store.save(make_session(token="abc"))

    with open(store.path, encoding="utf-8") as fh:
        data = json.load(fh)
    assert data["token"] == "abc"
    assert data["session"]["userId"] == 7
    assert data["session"]["role"] == "EMPLOYEE"


@pytest.mark.parametrize("populated", [True, False])
def test_clear_then_load_is_none(store, populated):
    if populated:
        store.save(make_session())
    store.clear()

    assert store.load() is None
    assert store.token() is None


def test_clear_is_idempotent(store):
    store.save(make_session())
    store.clear()
    store.clear()
    assert store.load() is None


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '"just a string"',
        json.dumps({"token": "t", "session": {"token": "t", "role": "OWNER"}}),
        json.dumps({"token": "t", "session": {"role": "ADMIN"}}),
        json.dumps({"token": "t"}),
    ],
)
def test_malformed_file_loads_as_none(store, content, caplog):
    store.save(make_session())
    with open(store.path, "w", encoding="utf-8") as fh:
        fh.write(content)

    with caplog.at_level(logging.WARNING, logger="workforce.session_store"):
        assert store.load() is None
    assert caplog.records


def test_no_temporary_files_left_behind(store, tmp_path):
    store.save(make_session())
    store.save(make_session(token="again"))

    leftovers = [p.name for p in (tmp_path / "sessions").iterdir() if p.name != f"{BROWSER_ID}.json"]
    assert leftovers == []


def test_each_browser_has_its_own_slot(store, tmp_path):
    other = SessionStore(session_path(str(tmp_path / "sessions"), OTHER_BROWSER_ID))
    store.save(make_session(role=Role.ADMIN, token="admin-token"))

    assert other.load() is None
    assert other.token() is None

    other.save(make_session(role=Role.EMPLOYEE, token="bob-token"))
    other.clear()

    assert store.token() == "admin-token"


def test_session_path_is_named_after_the_browser(tmp_path):
    path = session_path(str(tmp_path), BROWSER_ID)

    assert path == str(tmp_path / f"{BROWSER_ID}.json")


@pytest.mark.parametrize(
    "browser_id",
    ["", "../../etc/passwd", "0F" * 16, "0f" * 15, "0f" * 17, None, 42],
)
def test_session_path_rejects_anything_but_an_issued_id(tmp_path, browser_id):
    assert not is_browser_id(browser_id)
    with pytest.raises(ValueError):
        session_path(str(tmp_path), browser_id)
