"""
pages/employee_attendance.py
Attendance as seen by the employee role.
"""

import streamlit as st

from workforce.auth import get_api, require_route
from workforce.config import configure_logging
from workforce.views import attendance

st.set_page_config(page_title="SWMS · Attendance", layout="wide")
configure_logging()

auth = require_route("/employee/attendance")
attendance.render(auth, get_api())
