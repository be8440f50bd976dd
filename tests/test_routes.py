from __future__ import annotations

import pytest

from workforce.models import Role
from workforce.routes import ROUTES, landing_page, nav_links, normalize, resolve, role_path


def test_landing_pages():
    assert landing_page(Role.ADMIN) == "/admin/dashboard"
    assert landing_page("MANAGER") == "/manager/dashboard"
    assert landing_page(Role.EMPLOYEE) == "/employee/dashboard"


def test_landing_page_rejects_unknown_role():
    with pytest.raises(ValueError):
        landing_page("SUPERVISOR")


def test_every_route_has_a_unique_page_script():
    pages = [route.page for route in ROUTES]
    assert len(pages) == len(set(pages))
    assert all(page.startswith("pages/") and page.endswith(".py") for page in pages)


def test_admin_users_is_admin_only():
    route = resolve("/admin/users")
    assert route.allowed_roles == (Role.ADMIN,)
    assert route.page == "pages/admin_users.py"


def test_normalize_strips_trailing_slash():
    assert normalize("/admin/tasks/") == "/admin/tasks"
    assert normalize("admin/tasks") == "/admin/tasks"
    assert normalize(None) == "/"


def test_unknown_and_root_resolve_to_login():
    assert resolve("/").path == "/login"
    assert resolve("/does/not/exist").path == "/login"


def test_role_path():
    assert role_path(Role.MANAGER, "tasks") == "/manager/tasks"


def test_nav_links_are_role_specific():
    assert nav_links(Role.ADMIN) == [
        ("/admin/dashboard", "Dashboard"),
        ("/admin/users", "Users"),
        ("/admin/tasks", "Tasks"),
        ("/admin/attendance", "Attendance"),
    ]
    assert [label for _, label in nav_links(Role.EMPLOYEE)] == [
        "Dashboard",
        "My Tasks",
        "My Attendance",
    ]
    assert all(path.startswith("/manager/") for path, _ in nav_links(Role.MANAGER))
