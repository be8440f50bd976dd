"""
workforce/views/dashboard.py
Role-aware summary dashboard, rendered at every role's landing page.
"""

import html
import logging

import streamlit as st

from workforce.api import ApiClient, ApiError
from workforce.context import AuthContext
from workforce.routes import resolve, role_path
from workforce.views.layout import render_chrome

logger = logging.getLogger(__name__)


def _count(fetch) -> int:
    """
    Return len(fetch()), or 0 when the request fails.

    Stat tiles are non-critical; one failing endpoint must not blank the
    others.
    """
    try:
        return len(fetch())
    except ApiError as error:
        logger.warning("Dashboard stat unavailable: %s", error)
        return 0


def stat_tile(label: str, value: int, bg_color: str) -> str:
    return f"""
    <div style="background:{bg_color}; border-radius:0.6rem; padding:1.2rem 1.4rem;
                color:#FFFFFF;">
        <div style="font-size:2.4rem; font-weight:800;">{value}</div>
        <div style="font-size:0.85rem; opacity:0.85; margin-top:0.2rem;">{label}</div>
    </div>
    """


def render(auth: AuthContext, api: ApiClient) -> None:
    session = auth.session
    render_chrome(auth, key="dashboard")

    st.markdown(f"# Welcome back, {html.escape(session.name or session.email)}!")
    st.caption(f"Here is your {session.role.value.lower()} overview for today.")

    tiles = []
    if auth.is_admin():
        tiles.append(("Total Users", _count(api.list_users), "#E74C3C"))
    tiles.append((
        "All Tasks" if auth.can_manage() else "My Tasks",
        _count(api.list_tasks),
        "#0F3460",
    ))
    tiles.append(("Attendance Records", _count(api.list_attendance), "#27AE60"))

    cols = st.columns(len(tiles))
    for col, (label, value, colour) in zip(cols, tiles):
        col.markdown(stat_tile(label, value, colour), unsafe_allow_html=True)

    st.divider()
    st.markdown("#### Quick Actions")

    actions = []
    if auth.is_admin():
        actions.append(("/admin/users", "Manage Users"))
    if auth.can_manage():
        actions.append((role_path(session.role, "tasks"), "Manage Tasks"))
    actions.append((
        role_path(session.role, "attendance"),
        "View Attendance" if auth.can_manage() else "My Attendance",
    ))

    action_cols = st.columns(len(actions))
    for col, (path, label) in zip(action_cols, actions):
        with col:
            st.page_link(resolve(path).page, label=label)
