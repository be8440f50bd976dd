"""
pages/admin_users.py
User management, admin only.
"""

import streamlit as st

from workforce.auth import get_api, require_route
from workforce.config import configure_logging
from workforce.views import users

st.set_page_config(page_title="SWMS · Users", layout="wide")
configure_logging()

auth = require_route("/admin/users")
users.render(auth, get_api())
