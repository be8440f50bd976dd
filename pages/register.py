"""
pages/register.py
Registration page.  The backend returns a token on success, so the new user
is signed in immediately.
"""

import streamlit as st

from workforce.api import ApiError
from workforce.auth import get_api, init_auth
from workforce.config import configure_logging
from workforce.models import Role
from workforce.routes import landing_page, resolve

st.set_page_config(page_title="SWMS · Register", layout="centered")
configure_logging()

auth = init_auth()

if auth.is_authenticated():
    st.switch_page(resolve(landing_page(auth.session.role)).page)

st.markdown("# Create your SWMS account")

_ROLE_LABELS = {
    "Employee": Role.EMPLOYEE.value,
    "Manager":  Role.MANAGER.value,
    "Admin":    Role.ADMIN.value,
}

with st.form("register_form"):
    name = st.text_input("Full Name *", placeholder="Alice Smith")
    email = st.text_input("Email *", placeholder="alice@company.com")
    password = st.text_input("Password *", type="password", placeholder="min 6 characters")
    department = st.text_input("Department", placeholder="Engineering (optional)")
    role_label = st.selectbox("Role", list(_ROLE_LABELS))
    submitted = st.form_submit_button("Register", use_container_width=True)

if submitted:
    if not all([name, email, password]):
        st.warning("Name, email and password are required.")
    elif len(password) < 6:
        st.warning("Password must be at least 6 characters.")
    else:
        try:
            record = get_api().register(
                name.strip(),
                email.strip(),
                password,
                role=_ROLE_LABELS[role_label],
                department=department.strip() or None,
            )
        except ApiError as error:
            st.error(str(error) or "Registration failed.")
        else:
            try:
                auth.login(record)
            except ValueError as error:
                st.error(f"Registration response was rejected: {error}")

st.page_link(resolve("/login").page, label="Already have an account? Sign in")
