"""
app.py
SWMS — Smart Workforce Management dashboard
Entry point. Initialises logging and the auth context, then routes "/" to
the login page.  The login page forwards signed-in users to their dashboard.
"""

import streamlit as st

from workforce.auth import init_auth
from workforce.config import configure_logging
from workforce.routes import resolve

st.set_page_config(
    page_title   = "SWMS",
    layout       = "wide",
    initial_sidebar_state = "expanded",
)

configure_logging()

# ── Session state initialisation ─────────────────────────────────────────────
init_auth()

# ── Routing ───────────────────────────────────────────────────────────────────
st.switch_page(resolve("/").page)
