from __future__ import annotations

import logging

from ..core.exceptions import NotFoundError
from .aggregation import AttendanceSummary, summarize
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schemas import AttendanceUpdateInput

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: store a validated counter pair for one of the caller's subjects."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def update(self, user_id: int, data: AttendanceUpdateInput) -> AttendanceRecord:
        record = self._attendance.upsert_for_owner(
            user_id=user_id,
            subject_id=data.subject_id,
            session_type=data.session_type,
            total_classes=data.total_classes,
            attended_classes=data.attended_classes,
        )
        if record is None:
            raise NotFoundError("Subject not found.")

        logger.info(
            "user %s set %s attendance of subject %s to %s/%s",
            user_id,
            data.session_type.value,
            data.subject_id,
            data.attended_classes,
            data.total_classes,
        )
        return record


class ReportService:
    """Use case: overall attendance across every subject of a user."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_report(self, user_id: int) -> AttendanceSummary:
        return summarize(self._attendance.list_for_user(user_id))
