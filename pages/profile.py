"""
pages/profile.py
Own profile, available to every signed-in role.
"""

import streamlit as st

from workforce.api import ApiError
from workforce.auth import get_api, require_route
from workforce.config import configure_logging
from workforce.views.common import BLANK
from workforce.views.layout import render_chrome, role_badge

st.set_page_config(page_title="SWMS · My Profile", layout="wide")
configure_logging()

auth = require_route("/profile")
render_chrome(auth, key="profile")

st.markdown("# My Profile")

try:
    profile = get_api().me()
except ApiError as error:
    st.error(f"Failed to load profile: {error}")
    st.stop()

st.markdown(f"### {profile.get('name') or BLANK}")
st.markdown(role_badge(profile.get("role") or ""), unsafe_allow_html=True)
st.write("")

c1, c2, c3 = st.columns(3)
c1.metric("User ID", profile.get("id") or BLANK)
c2.metric("Email", profile.get("email") or BLANK)
c3.metric("Department", profile.get("department") or BLANK)
