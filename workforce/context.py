"""
workforce/context.py
Auth Context: the single source of truth for who is logged in.

The context is provided once into a scope (Streamlit's session state in the
running app, a plain dict in tests) and read back from that scope by every
consumer.  Reading it before it has been provided is a wiring error and is
never recovered from.
"""

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Protocol

from workforce.models import Role, Session
from workforce.routes import LOGIN_PATH, landing_page
from workforce.session_store import SessionStore

logger = logging.getLogger(__name__)

SCOPE_KEY = "auth_context"


class AuthContextError(RuntimeError):
    """Raised when the Auth Context is read from a scope it was never provided to."""


class Navigator(Protocol):
    def go(self, path: str) -> None: ...


class AuthContext:
    """
    Holds the current Session and performs the two state-changing operations,
    login and logout.  Neither makes a network call: the caller obtains the
    auth record from the backend and hands it over.
    """

    def __init__(self, store: SessionStore, navigator: Navigator):
        self._store = store
        self._navigator = navigator
        self._session = store.load()

    # ─── Session accessors ───────────────────────────────────────────────────

    @property
    def session(self) -> Session | None:
        return self._session

    def is_authenticated(self) -> bool:
        return self._session is not None

    def token(self) -> str | None:
        """Bearer token of the in-memory session, read by the API client on every request."""
        return self._session.token if self._session is not None else None

    # ─── Role predicates ─────────────────────────────────────────────────────

    def is_role(self, candidate) -> bool:
        """
        Return True if the current session has the given role.

        False when logged out or when candidate is not a known role; never
        raises.
        """
        if self._session is None:
            return False
        try:
            return self._session.role is Role.parse(candidate)
        except ValueError:
            return False

    def is_admin(self) -> bool:
        return self.is_role(Role.ADMIN)

    def is_manager(self) -> bool:
        return self.is_role(Role.MANAGER)

    def is_employee(self) -> bool:
        return self.is_role(Role.EMPLOYEE)

    def can_manage(self) -> bool:
        """ADMIN and MANAGER may create and delete tasks and attendance records."""
        return self.is_admin() or self.is_manager()

    # ─── State changes ───────────────────────────────────────────────────────

    def login(self, record: Mapping | Session) -> Session:
        """
        Start a session from a successful login or registration response.

        Persists the session, updates in-memory state, then navigates to the
        landing page for its role.  A record with an unknown role raises
        ValueError before anything is stored.
        """
        session = record if isinstance(record, Session) else Session.from_record(record)
        target = landing_page(session.role)

        self._store.save(session)
        self._session = session
        logger.info("Signed in %s as %s", session.email, session.role.value)
        self._navigator.go(target)
        return session

    def logout(self) -> None:
        """
        End the session locally and return to the login page.

        Also used as the API client's authentication-failure callback; clearing
        an already-empty store is harmless.
        """
        self._store.clear()
        if self._session is not None:
            logger.info("Signed out %s", self._session.email)
        self._session = None
        self._navigator.go(LOGIN_PATH)


# ─── Provider / consumer ──────────────────────────────────────────────────────

def provide_auth(
    scope: MutableMapping, factory: Callable[[], AuthContext]
) -> AuthContext:
    """
    Install an Auth Context into scope if there is none yet, and return it.

    factory runs at most once per scope, so rehydration from the store
    happens once at startup and not on every rerun.
    """
    context = scope.get(SCOPE_KEY)
    if context is None:
        context = factory()
        scope[SCOPE_KEY] = context
    return context


def use_auth(scope: Mapping) -> AuthContext:
    """Return the Auth Context provided to scope, or raise AuthContextError."""
    context = scope.get(SCOPE_KEY)
    if context is None:
        raise AuthContextError(
            "Auth context read before it was provided; call init_auth() at the "
            "top of the page."
        )
    return context
