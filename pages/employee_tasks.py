"""
pages/employee_tasks.py
Tasks as seen by the employee role.
"""

import streamlit as st

from workforce.auth import get_api, require_route
from workforce.config import configure_logging
from workforce.views import tasks

st.set_page_config(page_title="SWMS · Tasks", layout="wide")
configure_logging()

auth = require_route("/employee/tasks")
tasks.render(auth, get_api())
