"""
pages/reset_password.py
Password reset: request a one-time token, then set a new password with it.
"""

import streamlit as st

from workforce.api import ApiError
from workforce.auth import get_api, init_auth
from workforce.config import configure_logging
from workforce.routes import resolve

st.set_page_config(page_title="SWMS · Reset Password", layout="centered")
configure_logging()

init_auth()

st.markdown("# Reset your password")

request_tab, reset_tab = st.tabs(["Request Token", "Set New Password"])

with request_tab:
    with st.form("forgot_password_form"):
        email = st.text_input("Email", key="forgot_email")
        requested = st.form_submit_button("Request Reset Token", use_container_width=True)

    if requested:
        if not email:
            st.warning("Email is required.")
        else:
            try:
                result = get_api().forgot_password(email.strip())
            except ApiError as error:
                st.error(str(error))
            else:
                st.success(result.get("message") or "Reset token generated.")
                # Development backends return the token instead of emailing it.
                if result.get("token"):
                    st.code(result["token"], language=None)

with reset_tab:
    with st.form("reset_password_form"):
        token = st.text_input("Reset token", key="reset_token")
        new_password = st.text_input("New password", type="password", key="reset_new_password")
        confirm_password = st.text_input("Confirm password", type="password", key="reset_confirm")
        reset = st.form_submit_button("Set New Password", use_container_width=True)

    if reset:
        if not all([token, new_password, confirm_password]):
            st.warning("All fields are required.")
        elif new_password != confirm_password:
            st.warning("Passwords must match.")
        elif len(new_password) < 6:
            st.warning("Password must be at least 6 characters.")
        else:
            try:
                result = get_api().reset_password(token.strip(), new_password)
            except ApiError as error:
                st.error(str(error))
            else:
                st.success(result.get("message") or "Password reset successfully.")

st.page_link(resolve("/login").page, label="Back to sign in")
