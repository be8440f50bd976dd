from __future__ import annotations

import pytest

from tests.conftest import make_session
from workforce.guard import Decision, check_route, evaluate
from workforce.models import Role


ALL_ROLES = [Role.ADMIN, Role.MANAGER, Role.EMPLOYEE]
ALLOW_LISTS = [None, [], [Role.ADMIN], [Role.MANAGER], [Role.ADMIN, Role.MANAGER], ALL_ROLES]


@pytest.mark.parametrize("allowed", ALLOW_LISTS)
def test_no_session_always_redirects_to_login(allowed):
    assert evaluate(None, allowed) == Decision.redirect("/login")


@pytest.mark.parametrize("role", ALL_ROLES)
@pytest.mark.parametrize("allowed", ALLOW_LISTS)
def test_permits_iff_allow_list_empty_or_role_member(role, allowed):
    decision = evaluate(make_session(role=role), allowed)

    if not allowed or role in allowed:
        assert decision == Decision.permit()
    else:
        assert decision.permitted is False
        assert decision.redirect_to == f"/{role.value.lower()}/dashboard"


def test_allow_list_accepts_wire_strings():
    assert evaluate(make_session(role=Role.MANAGER), ["MANAGER"]).permitted


def test_anonymous_visit_to_admin_users_goes_to_login():
    assert check_route(None, "/admin/users") == Decision.redirect("/login")


def test_employee_visit_to_admin_users_goes_to_own_dashboard():
    decision = check_route(make_session(role=Role.EMPLOYEE), "/admin/users")
    assert decision == Decision.redirect("/employee/dashboard")


def test_manager_cannot_reach_admin_tasks():
    decision = check_route(make_session(role=Role.MANAGER), "/admin/tasks")
    assert decision.redirect_to == "/manager/dashboard"


def test_profile_is_open_to_every_signed_in_role():
    for role in ALL_ROLES:
        assert check_route(make_session(role=role), "/profile").permitted
    assert check_route(None, "/profile") == Decision.redirect("/login")


@pytest.mark.parametrize("path", ["/login", "/register", "/reset-password"])
def test_public_routes_render_without_session(path):
    assert check_route(None, path).permitted


@pytest.mark.parametrize("path", ["/", "", "/nowhere", "/admin/payroll"])
def test_root_and_unknown_paths_redirect_to_login(path):
    assert check_route(make_session(role=Role.ADMIN), path) == Decision.redirect("/login")
