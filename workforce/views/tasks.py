"""
workforce/views/tasks.py
Task management page.

ADMIN/MANAGER see all tasks and can create and delete them.
EMPLOYEE sees only their assigned tasks (filtered by the backend).
Everyone can move a visible task to another status.
"""

from datetime import date

import streamlit as st

from workforce.api import ApiClient, ApiError
from workforce.context import AuthContext
from workforce.models import TASK_STATUSES
from workforce.views.common import first_present, records_frame, task_payload
from workforce.views.layout import render_chrome

_COLUMNS = {
    "id":          "#",
    "title":       "Title",
    "description": "Description",
    "assignee":    "Assigned To",
    "creator":     "Created By",
    "status":      "Status",
    "deadline":    "Deadline",
}


def _task_label(task: dict) -> str:
    return f"#{task.get('id')} — {task.get('title') or 'Untitled'}"


def _render_create_form(api: ApiClient) -> None:
    with st.expander("+ New Task", expanded=False):
        with st.form("new_task_form", clear_on_submit=True):
            title = st.text_input("Title *", max_chars=200)
            description = st.text_area("Description", height=80)
            assigned_to = st.number_input("Assigned To (User ID) *", min_value=0, step=1, value=0)
            set_deadline = st.checkbox("Set a deadline")
            deadline = st.date_input("Deadline", value=date.today())
            status = st.selectbox("Status", TASK_STATUSES)
            submitted = st.form_submit_button("Create Task", use_container_width=True)

    if submitted:
        payload, errors = task_payload(
            title,
            int(assigned_to),
            description=description,
            deadline=deadline if set_deadline else None,
            status=status,
        )
        if errors:
            for e in errors:
                st.error(e)
            return
        try:
            api.create_task(payload)
            st.rerun()
        except ApiError as error:
            st.error(f"Failed to create task: {error}")


def _render_status_update(api: ApiClient, tasks: list[dict]) -> None:
    st.markdown("#### Update Status")
    by_label = {_task_label(t): t for t in tasks}
    col_task, col_status, col_save = st.columns([3, 2, 1])
    with col_task:
        label = st.selectbox("Task", list(by_label), key="status_task")
    task = by_label[label]
    current = task.get("status") if task.get("status") in TASK_STATUSES else TASK_STATUSES[0]
    with col_status:
        new_status = st.selectbox(
            "Status",
            TASK_STATUSES,
            index=TASK_STATUSES.index(current),
            key=f"status_value_{task.get('id')}",
        )
    with col_save:
        st.write("")
        save = st.button("Save", key="status_save", use_container_width=True)

    if save:
        payload, errors = task_payload(
            task.get("title") or "",
            task.get("assignedToId"),
            description=task.get("description") or "",
            deadline=date.fromisoformat(task["deadline"]) if task.get("deadline") else None,
            status=new_status,
        )
        if errors:
            for e in errors:
                st.error(e)
            return
        try:
            api.update_task(task["id"], payload)
            st.rerun()
        except ApiError as error:
            st.error(f"Failed to update task: {error}")


def _render_delete(api: ApiClient, tasks: list[dict]) -> None:
    st.markdown("#### Delete Task")
    by_label = {_task_label(t): t for t in tasks}
    col_task, col_delete = st.columns([4, 1])
    with col_task:
        label = st.selectbox("Task", list(by_label), key="delete_task")
    task = by_label[label]
    delete_flag_key = f"confirm_delete_task_{task.get('id')}"
    with col_delete:
        st.write("")
        if st.button("Delete", key="delete_task_btn", use_container_width=True):
            st.session_state[delete_flag_key] = True

    if st.session_state.get(delete_flag_key, False):
        st.warning(f"Delete task {_task_label(task)}?")
        col_confirm, col_cancel = st.columns(2)
        with col_confirm:
            if st.button("Confirm Delete", key=f"confirm_delete_task_btn_{task['id']}"):
                try:
                    api.delete_task(task["id"])
                    st.session_state.pop(delete_flag_key, None)
                    st.rerun()
                except ApiError as error:
                    st.error(f"Failed to delete task: {error}")
        with col_cancel:
            if st.button("Cancel", key=f"cancel_delete_task_btn_{task['id']}"):
                st.session_state.pop(delete_flag_key, None)
                st.rerun()


def render(auth: AuthContext, api: ApiClient) -> None:
    render_chrome(auth, key="tasks")
    st.markdown("# Tasks")

    can_manage = auth.can_manage()
    if can_manage:
        _render_create_form(api)

    try:
        tasks = api.list_tasks()
    except ApiError as error:
        st.error(f"Failed to load tasks: {error}")
        st.stop()

    if not tasks:
        st.info("No tasks found.")
        return

    rows = [
        {
            **t,
            "assignee": first_present(t, "assignedToName", "assignedToId"),
            "creator":  first_present(t, "createdByName", "createdById"),
        }
        for t in tasks
    ]
    st.dataframe(records_frame(rows, _COLUMNS), use_container_width=True, hide_index=True)

    st.divider()
    _render_status_update(api, tasks)

    if can_manage:
        st.divider()
        _render_delete(api, tasks)
