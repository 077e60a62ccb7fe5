from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schemas import SaveAttendanceRequest, SubjectDateQuery

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: a teacher's daily marks for one subject."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_marks(self, query: SubjectDateQuery) -> Sequence[AttendanceRecord]:
        records = self._attendance.list_for_subject_date(
            subject_id=query.subject_id,
            attendance_date=query.attendance_date,
        )
        if not records:
            raise NotFoundError("No attendance records found for this date.")
        return records

    def save(self, req: SaveAttendanceRequest) -> int:
        saved = self._attendance.save_marks(
            subject_id=req.subject_id,
            attendance_date=req.attendance_date,
            teacher_id=req.teacher_id,
            marks=req.marks,
        )
        logger.info(
            "Saved %d marks for subject %s on %s (teacher %s)",
            saved,
            req.subject_id,
            req.attendance_date.isoformat(),
            req.teacher_id,
        )
        return saved
