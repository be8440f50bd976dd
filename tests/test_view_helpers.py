from __future__ import annotations

from datetime import date, time

from workforce.views.common import (
    BLANK,
    attendance_payload,
    date_span,
    first_present,
    parse_time,
    records_frame,
    task_payload,
    user_payload,
)


def test_records_frame_selects_renames_and_blanks():
    records = [
        {"id": 1, "name": "Alice", "department": None, "password": "x"},
        {"id": 2, "name": "Bob", "department": ""},
    ]

    df = records_frame(records, {"id": "ID", "name": "Name", "department": "Department"})

    assert list(df.columns) == ["ID", "Name", "Department"]
    assert df["Department"].tolist() == [BLANK, BLANK]
    assert df["Name"].tolist() == ["Alice", "Bob"]


def test_records_frame_empty_keeps_headings():
    df = records_frame([], {"id": "#", "title": "Title"})
    assert df.empty
    assert list(df.columns) == ["#", "Title"]


def test_first_present_prefers_names_over_ids():
    assert first_present({"assignedToName": "Bob", "assignedToId": 3}, "assignedToName", "assignedToId") == "Bob"
    assert first_present({"assignedToName": "", "assignedToId": 3}, "assignedToName", "assignedToId") == 3
    assert first_present({}, "a", "b") == BLANK


def test_task_payload_requires_title_and_assignee():
    payload, errors = task_payload("  ", 0)
    assert payload is None
    assert errors == ["Title is required.", "Assigned user id is required."]


def test_task_payload_shape():
    payload, errors = task_payload(
        " Fix login bug ", "5", description="Session expires", deadline=date(2025, 12, 31)
    )

    assert errors == []
    assert payload == {
        "title": "Fix login bug",
        "description": "Session expires",
        "assignedToId": 5,
        "status": "TODO",
        "deadline": "2025-12-31",
    }


def test_attendance_payload_formats_times_and_omits_auto_status():
    payload, errors = attendance_payload(7, date(2025, 11, 1), check_in=time(8, 45))

    assert errors == []
    assert payload == {
        "userId": 7,
        "date": "2025-11-01",
        "checkIn": "08:45:00",
        "checkOut": None,
        "notes": "",
    }


def test_attendance_payload_requires_user_and_date():
    payload, errors = attendance_payload(None, None)
    assert payload is None
    assert len(errors) == 2


def test_parse_time():
    assert parse_time("08:45:00") == time(8, 45)
    assert parse_time("08:45") == time(8, 45)
    assert parse_time("") is None
    assert parse_time("later") is None


def test_user_payload_clears_emptied_department():
    user = {"id": 4, "name": "Bob", "email": "bob@example.com", "department": "Ops"}

    payload = user_payload(user, "   ", "MANAGER", "secret1")

    assert payload["department"] == ""
    assert payload == {
        "name": "Bob",
        "email": "bob@example.com",
        "password": "secret1",
        "department": "",
        "role": "MANAGER",
    }


def test_user_payload_trims_department():
    payload = user_payload({"name": "Bob", "email": "bob@example.com"}, " Sales ", "EMPLOYEE", "pw")

    assert payload["department"] == "Sales"


def test_date_span_orders_both_ends():
    assert date_span((date(2025, 11, 30), date(2025, 11, 1))) == (date(2025, 11, 1), date(2025, 11, 30))
    assert date_span([date(2025, 11, 1), date(2025, 11, 2)]) == (date(2025, 11, 1), date(2025, 11, 2))


def test_date_span_waits_for_second_end():
    assert date_span((date(2025, 11, 1),)) == (None, None)
    assert date_span(()) == (None, None)
    assert date_span(date(2025, 11, 1)) == (None, None)
