"""
Attendance snapshot helpers.

A snapshot maps beneficiary id to an explicit present flag for one date.
Beneficiaries missing from the map are unmarked, which is not the same as
absent: unmarked entries produce no attendance row on save.
"""
from datetime import date
from typing import Any, Dict, Iterable, List, Optional


def _beneficiary_id(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return item["id"]
    return item.id


def _record_field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record[name]
    return getattr(record, name)


def build_snapshot(beneficiaries: Iterable[Any], existing_records: Iterable[Any]) -> Dict[str, bool]:
    """
    Build the snapshot for a date from the rows already stored for it.

    Every beneficiary starts unmarked; stored records are overlaid.
    """
    snapshot: Dict[str, bool] = {}
    known = {_beneficiary_id(b) for b in beneficiaries}
    for record in existing_records:
        beneficiary_id = _record_field(record, "beneficiary_id")
        if beneficiary_id in known:
            snapshot[beneficiary_id] = bool(_record_field(record, "present"))
    return snapshot


def mark_all(beneficiaries: Iterable[Any]) -> Dict[str, bool]:
    """Every known beneficiary present, replacing any previous marks."""
    return {_beneficiary_id(b): True for b in beneficiaries}


def set_mark(snapshot: Dict[str, bool], beneficiary_id: str, present: bool) -> Dict[str, bool]:
    updated = dict(snapshot)
    updated[beneficiary_id] = present
    return updated


def toggle(snapshot: Dict[str, bool], beneficiary_id: str) -> Dict[str, bool]:
    """Flip a mark; an unmarked beneficiary becomes present."""
    return set_mark(snapshot, beneficiary_id, not snapshot.get(beneficiary_id, False))


def to_insertable_rows(
    snapshot: Dict[str, bool],
    day: date,
    marked_by: str,
    notes: Optional[Dict[str, str]] = None
) -> List[Dict[str, Any]]:
    """Rows for the explicitly marked entries only."""
    notes = notes or {}
    rows = []
    for beneficiary_id, present in snapshot.items():
        if present is None:
            continue
        rows.append({
            "beneficiary_id": beneficiary_id,
            "date": day,
            "present": bool(present),
            "notes": notes.get(beneficiary_id) or None,
            "marked_by": marked_by,
        })
    return rows


def summarize(beneficiaries: Iterable[Any], snapshot: Dict[str, bool]) -> Dict[str, int]:
    """Present / absent / unmarked counts over the beneficiary list."""
    ids = [_beneficiary_id(b) for b in beneficiaries]
    present = sum(1 for i in ids if snapshot.get(i) is True)
    absent = sum(1 for i in ids if snapshot.get(i) is False)
    return {
        "total": len(ids),
        "present": present,
        "absent": absent,
        "unmarked": len(ids) - present - absent,
    }
