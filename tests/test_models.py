from __future__ import annotations

import dataclasses

import pytest

from tests.conftest import auth_record, make_session
from workforce.models import Role, Session


def test_from_record_maps_wire_fields():
    session = Session.from_record(auth_record(role="ADMIN", token="tok", userId="12"))

    assert session.token == "tok"
    assert session.role is Role.ADMIN
    assert session.user_id == 12
    assert session.email == "alice@example.com"


def test_to_record_round_trips():
    session = make_session(role=Role.MANAGER)
    assert Session.from_record(session.to_record()) == session


@pytest.mark.parametrize("role", ["SUPERVISOR", "admin", None, ""])
def test_unknown_role_is_rejected(role):
    with pytest.raises(ValueError):
        Session.from_record(auth_record(role=role))


@pytest.mark.parametrize("token", [None, "", "   ", 42])
def test_missing_token_is_rejected(token):
    with pytest.raises(ValueError):
        Session.from_record(auth_record(token=token))


def test_non_mapping_is_rejected():
    with pytest.raises(ValueError):
        Session.from_record(["token", "role"])


def test_session_is_immutable():
    session = make_session()
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.role = Role.ADMIN
