"""
pages/employee_dashboard.py
Employee landing page.
"""

import streamlit as st

from workforce.auth import get_api, require_route
from workforce.config import configure_logging
from workforce.views import dashboard

st.set_page_config(page_title="SWMS · Dashboard", layout="wide")
configure_logging()

auth = require_route("/employee/dashboard")
dashboard.render(auth, get_api())
