"""
pages/login.py
Sign-in page.
"""

import streamlit as st

from workforce.api import ApiError
from workforce.auth import get_api, init_auth
from workforce.config import configure_logging
from workforce.routes import landing_page, resolve

st.set_page_config(page_title="SWMS · Sign In", layout="centered")
configure_logging()

auth = init_auth()

if auth.is_authenticated():
    st.switch_page(resolve(landing_page(auth.session.role)).page)

st.markdown(
    """
    <style>
        .stButton > button, .stFormSubmitButton > button {
            background-color: #0F3460;
            color: #FFFFFF;
            border: 1px solid #0F3460;
            font-weight: 600;
        }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown("# SWMS")
st.caption("Smart Workforce Management System")

with st.form("sign_in_form"):
    email = st.text_input("Email", placeholder="you@example.com", key="sign_in_email")
    password = st.text_input("Password", type="password", key="sign_in_password")
    submitted = st.form_submit_button("Sign In", use_container_width=True)

if submitted:
    if not email or not password:
        st.warning("Email and password are required.")
    else:
        try:
            record = get_api().login(email.strip(), password)
        except ApiError as error:
            if error.status in (400, 401, 403):
                st.error("Invalid credentials. Please try again.")
            else:
                st.error(str(error))
        else:
            try:
                auth.login(record)
            except ValueError as error:
                st.error(f"Sign-in response was rejected: {error}")

col_register, col_reset = st.columns(2)
with col_register:
    st.page_link(resolve("/register").page, label="No account? Register here")
with col_reset:
    st.page_link(resolve("/reset-password").page, label="Forgot your password?")
