"""
workforce/views/common.py
Table and form helpers shared by the page views.
"""

from datetime import date, time

import pandas as pd

BLANK = "—"


def records_frame(records: list[dict], columns: dict[str, str]) -> pd.DataFrame:
    """
    Return a display DataFrame for a list of backend records.

    columns maps backend field → column heading, in display order.  Missing
    fields and empty values show as an em dash.  Always returns a frame with
    every heading present, even for an empty list.
    """
    df = pd.DataFrame(records or [], columns=list(columns))
    df = df.rename(columns=columns)
    return df.astype(object).where(df.notna() & (df != ""), BLANK)


def first_present(record: dict, *keys, default=BLANK):
    """Return the first non-empty value among keys, e.g. a name before its id."""
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return default


def task_payload(
    title: str,
    assigned_to_id,
    description: str = "",
    deadline: date | None = None,
    status: str = "TODO",
) -> tuple[dict | None, list[str]]:
    """
    Build a create/update body for /api/tasks.

    Returns (payload, errors).  payload is None whenever errors is non-empty.
    """
    errors = []
    if not (title or "").strip():
        errors.append("Title is required.")
    if assigned_to_id in (None, "", 0):
        errors.append("Assigned user id is required.")
    if errors:
        return None, errors

    payload = {
        "title":        title.strip(),
        "description":  (description or "").strip(),
        "assignedToId": int(assigned_to_id),
        "status":       status,
    }
    if deadline is not None:
        payload["deadline"] = deadline.isoformat()
    return payload, []


def _time_text(value: time | None) -> str | None:
    return value.strftime("%H:%M:%S") if value is not None else None


def attendance_payload(
    user_id,
    day: date | None,
    check_in: time | None = None,
    check_out: time | None = None,
    status: str | None = None,
    notes: str = "",
) -> tuple[dict | None, list[str]]:
    """
    Build a create/update body for /api/attendance.

    Status may be left None; the backend derives it from the check-in time.
    Returns (payload, errors) like task_payload.
    """
    errors = []
    if user_id in (None, "", 0):
        errors.append("User id is required.")
    if day is None:
        errors.append("Date is required.")
    if errors:
        return None, errors

    payload = {
        "userId":   int(user_id),
        "date":     day.isoformat(),
        "checkIn":  _time_text(check_in),
        "checkOut": _time_text(check_out),
        "notes":    (notes or "").strip(),
    }
    if status:
        payload["status"] = status
    return payload, []


def parse_time(value) -> time | None:
    """Parse an HH:MM[:SS] string from the backend; None when blank or invalid."""
    if not value:
        return None
    try:
        return time.fromisoformat(str(value))
    except ValueError:
        return None


def date_span(value) -> tuple[date | None, date | None]:
    """
    Normalise the value of a range st.date_input.

    Returns (start, end), or (None, None) while only one end has been picked.
    """
    if isinstance(value, (list, tuple)) and len(value) == 2 and all(value):
        start, end = value
        return (start, end) if start <= end else (end, start)
    return None, None


def user_payload(user: dict, department: str, role: str, password: str) -> dict:
    """
    Build an update body for /api/users/{id}.

    Name and email go back unchanged.  An emptied department is sent as ""
    because the backend reads null as "keep the current value".
    """
    return {
        "name":       user.get("name"),
        "email":      user.get("email"),
        "password":   password,
        "department": (department or "").strip(),
        "role":       role,
    }
