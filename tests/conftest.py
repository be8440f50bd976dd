from __future__ import annotations

import json
from dataclasses import dataclass, field

import pytest
import requests
from requests.adapters import BaseAdapter

from workforce.models import Role, Session
from workforce.session_store import SessionStore, session_path

BROWSER_ID = "0f" * 16
OTHER_BROWSER_ID = "a1" * 16


@dataclass
class RecordingNavigator:
    visited: list[str] = field(default_factory=list)

    def go(self, path: str) -> None:
        self.visited.append(path)

    @property
    def last(self) -> str | None:
        return self.visited[-1] if self.visited else None


class FakeBackend(BaseAdapter):
    """
    Transport adapter that answers from a routing table instead of the network.

    routes maps (METHOD, path) to (status, body).  Every prepared request is
    kept in .requests for assertions.
    """

    def __init__(self, routes: dict | None = None):
        super().__init__()
        self.routes = routes or {}
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        path = request.path_url.split("?", 1)[0]
        status, body = self.routes.get((request.method, path), (404, {"error": "Not found"}))

        response = requests.Response()
        response.status_code = status
        response.request = request
        response.url = request.url
        if body is None:
            response._content = b""
        elif isinstance(body, bytes):
            response._content = body
        else:
            response._content = json.dumps(body).encode()
            response.headers["Content-Type"] = "application/json"
        return response

    def close(self):
        pass


@pytest.fixture
def store(tmp_path) -> SessionStore:
    return SessionStore(session_path(str(tmp_path / "sessions"), BROWSER_ID))


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


def make_session(role: Role = Role.EMPLOYEE, token: str = "t-123", **overrides) -> Session:
    values = {
        "token": token,
        "role": role,
        "name": "Alice Smith",
        "email": "alice@example.com",
        "user_id": 7,
    }
    values.update(overrides)
    return Session(**values)


def auth_record(role: str = "EMPLOYEE", token: str = "t-123", **overrides) -> dict:
    record = {
        "token": token,
        "role": role,
        "name": "Alice Smith",
        "email": "alice@example.com",
        "userId": 7,
    }
    record.update(overrides)
    return record
