"""
workforce/api.py
Shared REST client for the workforce backend.
All backend access goes through this module.

Two cross-cutting behaviours live here so pages never repeat them:
  - outbound: the signed-in session's bearer token is attached to every request
  - inbound:  a 401 outside /auth/ while signed in clears the stored session
              and sends the user to the login page
"""

import logging
from collections.abc import Callable
from datetime import date
from urllib.parse import urlsplit

import requests
from requests.auth import AuthBase

logger = logging.getLogger(__name__)

AUTH_PREFIX = "/auth/"


# ─── Errors ──────────────────────────────────────────────────────────────────

class ApiError(Exception):
    """
    A request the backend refused or could not serve.

    status is the HTTP status code, or None when no response arrived.
    Pages catch this and render str(error) inline.
    """

    def __init__(self, status: int | None, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class SessionExpired(Exception):
    """
    The backend rejected the stored credential.

    Deliberately not an ApiError: by the time this propagates the session has
    been cleared and navigation to the login page has been requested, so no
    page should catch it for display.
    """


def error_message(response: requests.Response, fallback: str = "Request failed.") -> str:
    """
    Extract a human-readable message from an error response body.

    The backend sends {"error": "..."} for business errors and a
    {field: message} map for validation errors.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body:
        if isinstance(body.get("error"), str):
            return body["error"]
        return " | ".join(str(value) for value in body.values())
    if isinstance(body, str) and body:
        return body
    return fallback


# ─── Request / response hooks ────────────────────────────────────────────────

class BearerAuth(AuthBase):
    """Attach the current session's token as a bearer credential, if there is one."""

    def __init__(self, token_source: Callable[[], str | None]):
        self._token_source = token_source

    def __call__(self, request):
        token = self._token_source()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return request


class ApiClient:
    """
    One requests.Session per client, pre-wired with BearerAuth and the
    authentication-failure hook.  Return values are the decoded JSON bodies
    exactly as the backend sends them.
    """

    def __init__(
        self,
        base_url: str,
        token_source: Callable[[], str | None],
        on_auth_failure: Callable[[], None],
        timeout: float = 15.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._base_path = urlsplit(self.base_url).path
        self._token_source = token_source
        self._on_auth_failure = on_auth_failure

        self.http = requests.Session()
        self.http.auth = BearerAuth(token_source)
        self.http.headers["Content-Type"] = "application/json"
        self.http.headers["Accept"] = "application/json"
        self.http.hooks["response"].append(self._check_auth)

    def _endpoint(self, request) -> str:
        """Request path relative to base_url, e.g. /auth/login."""
        path = urlsplit(request.url).path
        if self._base_path and path.startswith(self._base_path):
            path = path[len(self._base_path):]
        return path or "/"

    def _check_auth(self, response, *args, **kwargs):
        """
        Response hook: enforce the global authentication-failure policy.

        A 401 from an /auth/ endpoint is the answer to what the user typed
        (a wrong password) and stays an ordinary ApiError.  Any other 401 while
        a session is held, or on a request that carried a bearer credential,
        ends the session.  on_auth_failure clears the store before it
        navigates, so the login page never rehydrates a stale session.
        """
        if response.status_code != 401:
            return response
        request = response.request
        if self._endpoint(request).startswith(AUTH_PREFIX):
            return response
        if not self._token_source() and "Authorization" not in request.headers:
            return response

        logger.warning(
            "Credential rejected on %s %s; ending session",
            request.method,
            request.path_url,
        )
        self._on_auth_failure()
        raise SessionExpired("Your session has expired. Please sign in again.")

    # ─── Generic verbs ───────────────────────────────────────────────────────

    def request(self, method: str, path: str, **kwargs):
        """
        Send a request and return the decoded JSON body (None when empty).

        Raises ApiError for non-2xx responses and transport failures, and
        SessionExpired (from the response hook) for a rejected credential.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.http.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as error:
            logger.warning("%s %s failed: %s", method, path, error)
            raise ApiError(None, "Could not reach the server. Please try again.") from error

        if not response.ok:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise ApiError(response.status_code, error_message(response))

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as error:
            raise ApiError(response.status_code, "Unexpected response from server.") from error

    def get(self, path: str, params: dict | None = None):
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: dict | None = None):
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: dict | None = None):
        return self.request("PUT", path, json=payload)

    def delete(self, path: str):
        return self.request("DELETE", path)

    # ─── Auth ────────────────────────────────────────────────────────────────

    def login(self, email: str, password: str) -> dict:
        return self.post("/auth/login", {"email": email, "password": password})

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: str,
        department: str | None = None,
    ) -> dict:
        payload = {"name": name, "email": email, "password": password, "role": role}
        if department:
            payload["department"] = department
        return self.post("/auth/register", payload)

    def forgot_password(self, email: str) -> dict:
        return self.post("/auth/forgot-password", {"email": email})

    def reset_password(self, token: str, new_password: str) -> dict:
        return self.post("/auth/reset-password", {"token": token, "newPassword": new_password})

    # ─── Users ───────────────────────────────────────────────────────────────

    def me(self) -> dict:
        return self.get("/users/me")

    def list_users(self) -> list[dict]:
        return self.get("/api/users") or []

    def get_user(self, user_id: int) -> dict:
        return self.get(f"/api/users/{user_id}")

    def update_user(self, user_id: int, payload: dict) -> dict:
        return self.put(f"/api/users/{user_id}", payload)

    def delete_user(self, user_id: int) -> None:
        self.delete(f"/api/users/{user_id}")

    # ─── Tasks ───────────────────────────────────────────────────────────────

    def list_tasks(self) -> list[dict]:
        return self.get("/api/tasks") or []

    def create_task(self, payload: dict) -> dict:
        return self.post("/api/tasks", payload)

    def update_task(self, task_id: int, payload: dict) -> dict:
        return self.put(f"/api/tasks/{task_id}", payload)

    def delete_task(self, task_id: int) -> None:
        self.delete(f"/api/tasks/{task_id}")

    # ─── Attendance ──────────────────────────────────────────────────────────

    def list_attendance(self) -> list[dict]:
        return self.get("/api/attendance") or []

    def attendance_on(self, day: date) -> list[dict]:
        return self.get(f"/api/attendance/date/{day.isoformat()}") or []

    def attendance_range(self, user_id: int, start: date, end: date) -> list[dict]:
        params = {"userId": user_id, "from": start.isoformat(), "to": end.isoformat()}
        return self.get("/api/attendance/range", params=params) or []

    def record_attendance(self, payload: dict) -> dict:
        return self.post("/api/attendance", payload)

    def update_attendance(self, record_id: int, payload: dict) -> dict:
        return self.put(f"/api/attendance/{record_id}", payload)

    def delete_attendance(self, record_id: int) -> None:
        self.delete(f"/api/attendance/{record_id}")
