"""
Attendance service - daily attendance sheets.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from portal.dependencies import ActorContext
from portal.exceptions import ValidationError
from portal.models.attendance import AttendanceRecord
from portal.models.beneficiary import Beneficiary
from portal.utils.attendance_snapshot import build_snapshot, mark_all, summarize, to_insertable_rows

logger = logging.getLogger(__name__)


class AttendanceService:
    """Business logic for attendance snapshots."""

    def __init__(self, db: Session):
        self.db = db

    def _beneficiaries(self) -> List[Beneficiary]:
        return self.db.query(Beneficiary).order_by(Beneficiary.name).all()

    def _records_for_date(self, day: date) -> List[AttendanceRecord]:
        return self.db.query(AttendanceRecord).filter(AttendanceRecord.date == day).all()

    def get_day(self, day: date) -> Dict[str, Any]:
        """Beneficiaries and the stored snapshot for ``day``."""
        beneficiaries = self._beneficiaries()
        snapshot = build_snapshot(beneficiaries, self._records_for_date(day))
        return {
            "date": day,
            "beneficiaries": beneficiaries,
            "attendance": snapshot,
            "summary": summarize(beneficiaries, snapshot),
        }

    def mark_all_for_day(self) -> Dict[str, Any]:
        """All-present snapshot. Nothing is stored until the day is saved."""
        beneficiaries = self._beneficiaries()
        snapshot = mark_all(beneficiaries)
        return {"attendance": snapshot, "summary": summarize(beneficiaries, snapshot)}

    def save_day(
        self,
        day: date,
        snapshot: Dict[str, bool],
        actor: ActorContext,
        notes: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Replace the stored attendance for ``day`` with ``snapshot``.

        Rows are upserted by (beneficiary_id, date) and rows for beneficiaries
        no longer in the snapshot are removed, all in one transaction. On any
        failure the transaction is rolled back and the previous rows remain.
        """
        beneficiaries = self._beneficiaries()
        known = {b.id for b in beneficiaries}
        unknown = sorted(set(snapshot) - known)
        if unknown:
            raise ValidationError(f"Unknown beneficiary: {unknown[0]}")

        rows = to_insertable_rows(snapshot, day, actor.user_id, notes)

        try:
            existing = {r.beneficiary_id: r for r in self._records_for_date(day)}
            for row in rows:
                record = existing.pop(row["beneficiary_id"], None)
                if record is None:
                    self.db.add(AttendanceRecord(**row))
                else:
                    record.present = row["present"]
                    record.notes = row["notes"]
                    record.marked_by = row["marked_by"]
            for stale in existing.values():
                self.db.delete(stale)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception(f"Failed to save attendance for {day}")
            raise

        logger.info(f"Attendance for {day} saved by {actor.user_id}: {len(rows)} records")
        return {
            "date": day,
            "saved": len(rows),
            "summary": summarize(beneficiaries, snapshot),
        }

    def day_summary(self, day: date) -> Dict[str, int]:
        beneficiaries = self._beneficiaries()
        return summarize(beneficiaries, build_snapshot(beneficiaries, self._records_for_date(day)))

    def count_for_date(self, day: date, present_only: bool = False) -> int:
        query = self.db.query(AttendanceRecord).filter(AttendanceRecord.date == day)
        if present_only:
            query = query.filter(AttendanceRecord.present.is_(True))
        return query.count()
