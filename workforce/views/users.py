"""
workforce/views/users.py
User management page (ADMIN only).
"""

import streamlit as st

from workforce.api import ApiClient, ApiError
from workforce.context import AuthContext
from workforce.models import Role
from workforce.views.common import records_frame, user_payload
from workforce.views.layout import render_chrome

_COLUMNS = {
    "id":         "ID",
    "name":       "Name",
    "email":      "Email",
    "department": "Department",
    "role":       "Role",
}

_ROLES = [role.value for role in Role]


def _user_label(user: dict) -> str:
    return f"#{user.get('id')} — {user.get('name') or user.get('email')}"


def _render_edit(api: ApiClient, users: list[dict]) -> None:
    st.markdown("#### Edit User")
    by_label = {_user_label(u): u for u in users}
    label = st.selectbox("User", list(by_label), key="edit_user")
    user_id = by_label[label].get("id")
    try:
        user = api.get_user(user_id)
    except ApiError as error:
        st.error(f"Failed to load user: {error}")
        return

    with st.form(f"edit_user_form_{user_id}"):
        department = st.text_input("Department", value=user.get("department") or "")
        role_index = _ROLES.index(user["role"]) if user.get("role") in _ROLES else _ROLES.index("EMPLOYEE")
        role = st.selectbox("Role", _ROLES, index=role_index)
        password = st.text_input(
            "Password *",
            type="password",
            help="Required by the backend's validation; the stored password is not changed.",
        )
        submitted = st.form_submit_button("Save Changes", use_container_width=True)

    if submitted:
        if not password:
            st.warning("Password is required to save changes.")
            return
        payload = user_payload(user, department, role, password)
        try:
            api.update_user(user_id, payload)
            st.rerun()
        except ApiError as error:
            st.error(f"Failed to update user: {error}")


def _render_delete(api: ApiClient, users: list[dict], own_id: int | None) -> None:
    st.markdown("#### Delete User")
    candidates = [u for u in users if u.get("id") != own_id]
    if not candidates:
        return
    by_label = {_user_label(u): u for u in candidates}
    col_user, col_delete = st.columns([4, 1])
    with col_user:
        label = st.selectbox("User", list(by_label), key="delete_user")
    user = by_label[label]
    delete_flag_key = f"confirm_delete_user_{user.get('id')}"
    with col_delete:
        st.write("")
        if st.button("Delete", key="delete_user_btn", use_container_width=True):
            st.session_state[delete_flag_key] = True

    if st.session_state.get(delete_flag_key, False):
        st.warning(
            f"Delete user \"{user.get('name')}\"? This will also delete their tasks and attendance."
        )
        col_confirm, col_cancel = st.columns(2)
        with col_confirm:
            if st.button("Confirm Delete", key=f"confirm_delete_user_btn_{user['id']}"):
                try:
                    api.delete_user(user["id"])
                    st.session_state.pop(delete_flag_key, None)
                    st.rerun()
                except ApiError as error:
                    st.error(f"Failed to delete user: {error}")
        with col_cancel:
            if st.button("Cancel", key=f"cancel_delete_user_btn_{user['id']}"):
                st.session_state.pop(delete_flag_key, None)
                st.rerun()


def render(auth: AuthContext, api: ApiClient) -> None:
    render_chrome(auth, key="users")
    st.markdown("# User Management")

    try:
        users = api.list_users()
    except ApiError as error:
        st.error(f"Failed to load users: {error}")
        st.stop()

    if not users:
        st.info("No users found.")
        return

    st.dataframe(records_frame(users, _COLUMNS), use_container_width=True, hide_index=True)

    st.divider()
    _render_edit(api, users)
    st.divider()
    _render_delete(api, users, auth.session.user_id)
