"""
workforce/guard.py
Route guard: decide whether a navigation target may render.

evaluate() is a pure function of (session, allow-list).  It holds no state
and is re-run on every page load.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from workforce.models import Role, Session
from workforce.routes import LOGIN_PATH, landing_page, normalize, resolve


@dataclass(frozen=True)
class Decision:
    permitted:   bool
    redirect_to: str | None = None

    @classmethod
    def permit(cls) -> "Decision":
        return cls(permitted=True)

    @classmethod
    def redirect(cls, path: str) -> "Decision":
        return cls(permitted=False, redirect_to=path)


def evaluate(session: Session | None, allowed_roles: Iterable | None = None) -> Decision:
    """
    Apply the guard rules in order, first match wins:

      1. no session                        → redirect to /login
      2. allow-list given, role not in it  → redirect to the role's landing page
      3. otherwise                         → permit

    A missing or empty allow-list means any authenticated session is enough.
    The wrong-role redirect never points at the requested page, so typing
    another role's URL cannot grant access.
    """
    if session is None:
        return Decision.redirect(LOGIN_PATH)

    allowed = {Role.parse(role) for role in (allowed_roles or ())}
    if allowed and session.role not in allowed:
        return Decision.redirect(landing_page(session.role))

    return Decision.permit()


def check_route(session: Session | None, path: str) -> Decision:
    """
    Evaluate the guard for a route path.

    Public routes always render.  "/" and unknown paths redirect to /login.
    """
    route = resolve(path)
    if route.path != normalize(path):
        return Decision.redirect(LOGIN_PATH)
    if route.public:
        return Decision.permit()
    return evaluate(session, route.allowed_roles)
