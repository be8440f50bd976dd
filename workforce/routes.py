"""
workforce/routes.py
Route table for the dashboard and the role → landing-page mapping.

Paths are the logical routes of the application; each maps to the Streamlit
page script that renders it.  Nothing here touches Streamlit, so redirect
targets can be computed (and tested) without navigating anywhere.
"""

from dataclasses import dataclass

from workforce.models import Role

LOGIN_PATH = "/login"

_LANDING_PAGES = {
    Role.ADMIN:    "/admin/dashboard",
    Role.MANAGER:  "/manager/dashboard",
    Role.EMPLOYEE: "/employee/dashboard",
}


@dataclass(frozen=True)
class Route:
    path:          str
    page:          str
    title:         str
    allowed_roles: tuple = ()
    public:        bool = False


def _role_routes(role: Role, sections: list[tuple[str, str]]) -> list[Route]:
    prefix = role.value.lower()
    return [
        Route(
            path=f"/{prefix}/{section}",
            page=f"pages/{prefix}_{section}.py",
            title=title,
            allowed_roles=(role,),
        )
        for section, title in sections
    ]


ROUTES = [
    Route("/login",          "pages/login.py",          "Sign In",        public=True),
    Route("/register",       "pages/register.py",       "Register",       public=True),
    Route("/reset-password", "pages/reset_password.py", "Reset Password", public=True),
    Route("/profile",        "pages/profile.py",        "My Profile"),
    *_role_routes(Role.ADMIN, [
        ("dashboard",  "Dashboard"),
        ("users",      "Users"),
        ("tasks",      "Tasks"),
        ("attendance", "Attendance"),
    ]),
    *_role_routes(Role.MANAGER, [
        ("dashboard",  "Dashboard"),
        ("tasks",      "Tasks"),
        ("attendance", "Attendance"),
    ]),
    *_role_routes(Role.EMPLOYEE, [
        ("dashboard",  "Dashboard"),
        ("tasks",      "My Tasks"),
        ("attendance", "My Attendance"),
    ]),
]

_BY_PATH = {route.path: route for route in ROUTES}


def normalize(path: str | None) -> str:
    """Return path with a single leading slash and no trailing slash."""
    path = (path or "").strip()
    return "/" + path.strip("/")


def resolve(path: str | None) -> Route:
    """
    Return the Route for a path.

    "/" and any path not in the table resolve to the login route.
    """
    return _BY_PATH.get(normalize(path), _BY_PATH[LOGIN_PATH])


def landing_page(role) -> str:
    """
    Return the default dashboard path for a role.

    Raises ValueError for an unrecognised role; there is no fallback page.
    """
    return _LANDING_PAGES[Role.parse(role)]


def role_path(role, section: str) -> str:
    """Return the role-prefixed path for a section, e.g. /manager/tasks."""
    return f"/{Role.parse(role).value.lower()}/{section}"


def nav_links(role) -> list[tuple[str, str]]:
    """Return the (path, label) sidebar entries for a role, in display order."""
    role = Role.parse(role)
    return [
        (route.path, route.title)
        for route in ROUTES
        if route.allowed_roles == (role,)
    ]
