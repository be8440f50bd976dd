"""
workforce/views/attendance.py
Attendance tracking page.

ADMIN/MANAGER: see all records, record attendance for any user, filter by
one day or by one user over a date range, delete.  EMPLOYEE: sees and
records only their own attendance.
"""

from datetime import date, datetime, timedelta

import streamlit as st

from workforce.api import ApiClient, ApiError
from workforce.context import AuthContext
from workforce.models import ATTENDANCE_STATUSES
from workforce.views.common import (
    attendance_payload,
    date_span,
    first_present,
    parse_time,
    records_frame,
)
from workforce.views.layout import render_chrome

_COLUMNS = {
    "id":       "#",
    "employee": "Employee",
    "date":     "Date",
    "checkIn":  "Check-In",
    "checkOut": "Check-Out",
    "status":   "Status",
    "notes":    "Notes",
}

_AUTO_STATUS = "(automatic)"

_ALL        = "All records"
_ONE_DAY    = "One day"
_USER_RANGE = "One user, date range"


def _record_label(record: dict) -> str:
    who = first_present(record, "userName", "userId")
    return f"#{record.get('id')} — {who} on {record.get('date')}"


def _render_record_form(auth: AuthContext, api: ApiClient) -> None:
    can_manage = auth.can_manage()
    own_id = auth.session.user_id or 0

    with st.expander("+ Check In", expanded=False):
        with st.form("new_attendance_form", clear_on_submit=True):
            user_id = st.number_input(
                "User ID *",
                min_value=0,
                step=1,
                value=0 if can_manage else own_id,
                disabled=not can_manage,
            )
            day = st.date_input("Date *", value=date.today())
            set_check_in = st.checkbox("Record check-in time", value=True)
            check_in = st.time_input("Check-In Time", value=datetime.now().time().replace(microsecond=0))
            status = st.selectbox("Status", [_AUTO_STATUS] + ATTENDANCE_STATUSES)
            notes = st.text_input("Notes", placeholder="Optional note or reason")
            submitted = st.form_submit_button("Save", use_container_width=True)

    if submitted:
        payload, errors = attendance_payload(
            int(user_id) if can_manage else own_id,
            day,
            check_in=check_in if set_check_in else None,
            status=None if status == _AUTO_STATUS else status,
            notes=notes,
        )
        if errors:
            for e in errors:
                st.error(e)
            return
        try:
            api.record_attendance(payload)
            st.rerun()
        except ApiError as error:
            st.error(f"Failed to record attendance: {error}")


def _render_check_out(api: ApiClient, records: list[dict]) -> None:
    open_records = [r for r in records if r.get("checkIn") and not r.get("checkOut")]
    if not open_records:
        return

    st.markdown("#### Check Out")
    by_label = {_record_label(r): r for r in open_records}
    col_record, col_time, col_save = st.columns([3, 2, 1])
    with col_record:
        label = st.selectbox("Record", list(by_label), key="checkout_record")
    record = by_label[label]
    with col_time:
        check_out = st.time_input(
            "Check-Out Time",
            value=datetime.now().time().replace(microsecond=0),
            key="checkout_time",
        )
    with col_save:
        st.write("")
        save = st.button("Check Out", key="checkout_save", use_container_width=True)

    if save:
        payload, errors = attendance_payload(
            record.get("userId"),
            date.fromisoformat(record["date"]) if record.get("date") else None,
            check_in=parse_time(record.get("checkIn")),
            check_out=check_out,
            status=record.get("status"),
            notes=record.get("notes") or "",
        )
        if errors:
            for e in errors:
                st.error(e)
            return
        try:
            api.update_attendance(record["id"], payload)
            st.rerun()
        except ApiError as error:
            st.error(f"Failed to check out: {error}")


def _render_delete(api: ApiClient, records: list[dict]) -> None:
    st.markdown("#### Delete Record")
    by_label = {_record_label(r): r for r in records}
    col_record, col_delete = st.columns([4, 1])
    with col_record:
        label = st.selectbox("Record", list(by_label), key="delete_record")
    record = by_label[label]
    delete_flag_key = f"confirm_delete_attendance_{record.get('id')}"
    with col_delete:
        st.write("")
        if st.button("Delete", key="delete_record_btn", use_container_width=True):
            st.session_state[delete_flag_key] = True

    if st.session_state.get(delete_flag_key, False):
        st.warning(f"Delete record {_record_label(record)}?")
        col_confirm, col_cancel = st.columns(2)
        with col_confirm:
            if st.button("Confirm Delete", key=f"confirm_delete_attendance_btn_{record['id']}"):
                try:
                    api.delete_attendance(record["id"])
                    st.session_state.pop(delete_flag_key, None)
                    st.rerun()
                except ApiError as error:
                    st.error(f"Failed to delete record: {error}")
        with col_cancel:
            if st.button("Cancel", key=f"cancel_delete_attendance_btn_{record['id']}"):
                st.session_state.pop(delete_flag_key, None)
                st.rerun()


def _load_records(auth: AuthContext, api: ApiClient) -> list[dict]:
    """
    Fetch the records the filter row asks for.

    Only ADMIN and MANAGER see the filters; the day and range queries are
    closed to employees on the backend.
    """
    if not auth.can_manage():
        return api.list_attendance()

    modes = [_ALL, _ONE_DAY, _USER_RANGE]
    fc1, fc2, fc3 = st.columns([2, 2, 2])
    with fc1:
        mode = st.selectbox("Show", modes, key="attendance_filter_mode")

    if mode == _ONE_DAY:
        with fc2:
            day = st.date_input("Date", value=date.today(), key="attendance_filter_day")
        return api.attendance_on(day)

    if mode == _USER_RANGE:
        with fc2:
            user_id = st.number_input(
                "User ID",
                min_value=0,
                step=1,
                value=0,
                key="attendance_filter_user",
            )
        with fc3:
            span = st.date_input(
                "From / To",
                value=(date.today() - timedelta(days=30), date.today()),
                key="attendance_filter_range",
            )
        start, end = date_span(span)
        if not user_id or start is None:
            st.info("Pick a user and both ends of the date range.")
            return []
        return api.attendance_range(int(user_id), start, end)

    return api.list_attendance()


def render(auth: AuthContext, api: ApiClient) -> None:
    render_chrome(auth, key="attendance")
    st.markdown("# Attendance")

    can_manage = auth.can_manage()
    _render_record_form(auth, api)

    try:
        records = _load_records(auth, api)
    except ApiError as error:
        st.error(f"Failed to load attendance records: {error}")
        st.stop()

    if not records:
        st.info("No records found.")
        return

    rows = [{**r, "employee": first_present(r, "userName", "userId")} for r in records]
    st.dataframe(records_frame(rows, _COLUMNS), use_container_width=True, hide_index=True)

    st.divider()
    _render_check_out(api, records)

    if can_manage:
        st.divider()
        _render_delete(api, records)
