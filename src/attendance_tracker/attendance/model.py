from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..core.enums import SessionType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: counters for one session type within a subject."""

    attendance_id: int
    subject_id: int
    session_type: SessionType
    total_classes: int
    attended_classes: int

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "subject_id": self.subject_id,
            "type": self.session_type.value,
            "total_classes": self.total_classes,
            "attended_classes": self.attended_classes,
        }


def _lenient_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 0
    return n if n > 0 else 0


@dataclass(frozen=True)
class AttendanceCounts:
    """Editable counter pair; every update returns a new value.

    Edits never produce ``attended > total``: raising attended past total
    stops at total, lowering total below attended pulls attended down.
    Unparseable or negative input counts as 0.
    """

    total: int = 0
    attended: int = 0

    @classmethod
    def of(cls, record: AttendanceRecord) -> "AttendanceCounts":
        return cls(total=record.total_classes, attended=record.attended_classes)

    def with_total(self, value: Any) -> "AttendanceCounts":
        total = _lenient_count(value)
        return replace(self, total=total, attended=min(self.attended, total))

    def with_attended(self, value: Any) -> "AttendanceCounts":
        return replace(self, attended=min(_lenient_count(value), self.total))
