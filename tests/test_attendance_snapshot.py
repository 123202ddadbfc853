from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from portal.utils.attendance_snapshot import (
    build_snapshot,
    mark_all,
    set_mark,
    summarize,
    to_insertable_rows,
    toggle,
)


@dataclass
class Person:
    id: str
    name: str = ""


BENEFICIARIES = [Person("A"), Person("B"), Person("C")]


def test_unmarked_beneficiaries_are_left_out_of_snapshot():
    snapshot = build_snapshot(BENEFICIARIES, [{"beneficiary_id": "A", "present": True}])

    assert snapshot == {"A": True}
    assert "B" not in snapshot
    assert "C" not in snapshot


def test_explicit_absence_is_kept():
    records = [{"beneficiary_id": "A", "present": True}, {"beneficiary_id": "B", "present": False}]

    assert build_snapshot(BENEFICIARIES, records) == {"A": True, "B": False}


def test_records_for_unknown_beneficiaries_are_ignored():
    snapshot = build_snapshot(["A"], [{"beneficiary_id": "Z", "present": True}])

    assert snapshot == {}


def test_mark_all_overwrites_previous_marks():
    assert mark_all(BENEFICIARIES) == {"A": True, "B": True, "C": True}
    assert mark_all(["A", "B", "C"]) == {"A": True, "B": True, "C": True}


def test_rows_are_only_built_for_marked_entries():
    rows = to_insertable_rows({"A": True, "B": False}, date(2024, 6, 15), "staff-1")

    assert len(rows) == 2
    assert {r["beneficiary_id"] for r in rows} == {"A", "B"}
    assert all(r["marked_by"] == "staff-1" for r in rows)
    assert all(r["date"] == date(2024, 6, 15) for r in rows)


def test_rows_carry_notes():
    rows = to_insertable_rows({"A": False}, date(2024, 6, 15), "staff-1", notes={"A": "Fever"})

    assert rows[0]["notes"] == "Fever"
    assert rows[0]["present"] is False


def test_marks_move_between_present_and_absent():
    snapshot = set_mark({}, "A", False)
    assert snapshot == {"A": False}

    snapshot = toggle(snapshot, "A")
    assert snapshot == {"A": True}

    snapshot = toggle(snapshot, "A")
    assert snapshot == {"A": False}


def test_toggle_marks_unmarked_as_present():
    original = {}
    snapshot = toggle(original, "B")

    assert snapshot == {"B": True}
    assert original == {}


def test_summary_counts_unmarked():
    assert summarize(BENEFICIARIES, {"A": True, "B": False}) == {
        "total": 3,
        "present": 1,
        "absent": 1,
        "unmarked": 1,
    }
