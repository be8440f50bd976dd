"""
workforce/views/layout.py
Sidebar shown on every authenticated page.
"""

import html

import streamlit as st

from workforce.context import AuthContext
from workforce.routes import nav_links, resolve

ROLE_COLOURS = {
    "ADMIN":    "#E74C3C",
    "MANAGER":  "#F39C12",
    "EMPLOYEE": "#27AE60",
}


def role_badge(role: str) -> str:
    """Return badge HTML for a role string."""
    colour = ROLE_COLOURS.get(role, "#555555")
    return (
        f'<span style="background:{colour}; color:#FFFFFF; padding:0.15rem 0.6rem; '
        f'border-radius:4px; font-weight:600; font-size:0.75rem;">{html.escape(role)}</span>'
    )


def render_chrome(auth: AuthContext, key: str) -> None:
    """
    Render the role-aware sidebar: navigation, signed-in user, sign out.

    key disambiguates the Sign Out button between pages.
    """
    session = auth.session
    if session is None:
        return

    with st.sidebar:
        st.markdown("### SWMS")
        for path, label in nav_links(session.role):
            st.page_link(resolve(path).page, label=label)
        st.page_link(resolve("/profile").page, label="My Profile")
        st.divider()
        if session.name:
            st.markdown(f"**{html.escape(session.name)}**")
        st.caption(session.email)
        st.markdown(role_badge(session.role.value), unsafe_allow_html=True)
        if st.button("Sign Out", key=f"sidebar_signout_{key}"):
            auth.logout()
