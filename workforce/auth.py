"""
workforce/auth.py
Streamlit bindings for session management and route guarding.
Wraps the Auth Context and API client so pages never construct them directly.

Every browser is told apart by an opaque random id kept in the swms_sid
cookie.  The cookie carries no credential; it only names the session file
that browser's Auth Context rehydrates from.
"""

import uuid
from datetime import datetime, timedelta

import extra_streamlit_components as stx
import streamlit as st

from workforce.api import ApiClient
from workforce.config import api_base_url, api_timeout, session_cookie_days, session_dir
from workforce.context import AuthContext, provide_auth, use_auth
from workforce.guard import check_route
from workforce.routes import resolve
from workforce.session_store import SessionStore, is_browser_id, session_path

BROWSER_COOKIE = "swms_sid"
BROWSER_ID_KEY = "browser_id"
API_CLIENT_KEY = "api_client"


class StreamlitNavigator:
    """Navigate by switching to the page script that renders a route."""

    def go(self, path: str) -> None:
        st.switch_page(resolve(path).page)


# ─── Browser identity ─────────────────────────────────────────────────────────

def _cookie_browser_id() -> str | None:
    """
    Return the browser id the browser sent when it connected, if any.

    st.context.cookies only reflects the cookies of the initial request, so
    an id issued during this browser session shows up from the next
    connection on.
    """
    try:
        value = st.context.cookies.get(BROWSER_COOKIE)
    except Exception:
        return None
    return value if is_browser_id(value) else None


def _remember_browser(browser_id: str) -> None:
    cookies = stx.CookieManager(key="swms_cookie_manager")
    cookies.set(
        BROWSER_COOKIE,
        browser_id,
        expires_at=datetime.now() + timedelta(days=session_cookie_days()),
        key="swms_cookie_set",
    )


def browser_id() -> str:
    """
    Return this browser's id, issuing one on its first visit.

    The id sticks to the Streamlit session once chosen.  While the browser
    has not yet sent it back in a cookie, the cookie is written again on
    every run.
    """
    sent = _cookie_browser_id()
    current = st.session_state.get(BROWSER_ID_KEY) or sent or uuid.uuid4().hex
    st.session_state[BROWSER_ID_KEY] = current
    if sent != current:
        _remember_browser(current)
    return current


def get_store() -> SessionStore:
    """Return the session store belonging to this browser."""
    return SessionStore(session_path(session_dir(), browser_id()))


# ─── Context provider / consumer ──────────────────────────────────────────────

def init_auth() -> AuthContext:
    """
    Provide the Auth Context for this browser session.

    Call at the top of every page.  The first call rehydrates from this
    browser's session file; later reruns reuse the same context.
    """
    store = get_store()
    return provide_auth(
        st.session_state,
        lambda: AuthContext(store, StreamlitNavigator()),
    )


def current_auth() -> AuthContext:
    """Return the provided Auth Context; raises AuthContextError if init_auth() was skipped."""
    return use_auth(st.session_state)


def get_api() -> ApiClient:
    """
    Return the API client for this browser session.

    Its authentication-failure callback logs the current context out, which
    also sends the user to the login page.
    """
    client = st.session_state.get(API_CLIENT_KEY)
    if client is None:
        auth = current_auth()
        client = ApiClient(
            api_base_url(),
            auth.token,
            on_auth_failure=auth.logout,
            timeout=api_timeout(),
        )
        st.session_state[API_CLIENT_KEY] = client
    return client


# ─── Auth guard ───────────────────────────────────────────────────────────────

def require_route(path: str) -> AuthContext:
    """
    Guard for page scripts.

    Call at the top of any page with the route path it renders.  Redirects to
    the login page (no session) or to the user's own dashboard (wrong role);
    st.switch_page stops the rest of the page from running.
    """
    auth = init_auth()
    decision = check_route(auth.session, path)
    if not decision.permitted:
        StreamlitNavigator().go(decision.redirect_to)
        st.stop()
    return auth
