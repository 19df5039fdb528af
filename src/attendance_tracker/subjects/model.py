from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..attendance.aggregation import AttendanceSummary, summarize
from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class Subject:
    """Domain entity: a course owned by one user, with its attendance rows."""

    subject_id: int
    subject_name: str
    user_id: int
    attendance: Tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    def summary(self) -> AttendanceSummary:
        return summarize(self.attendance)

    def to_dict(self, *, with_summary: bool = False) -> dict:
        out = {
            "id": self.subject_id,
            "subject_name": self.subject_name,
            "user_id": self.user_id,
            "attendance": [a.to_dict() for a in self.attendance],
        }
        if with_summary:
            out["summary"] = self.summary().to_dict()
        return out
