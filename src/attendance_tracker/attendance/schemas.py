from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_count, require_id, require_object
from ..core.enums import SessionType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceUpdateInput:
    subject_id: int
    session_type: SessionType
    total_classes: int
    attended_classes: int

    @classmethod
    def from_payload(cls, payload: Any) -> "AttendanceUpdateInput":
        data = require_object(payload)
        subject_id = data.get("subjectId", data.get("subject_id"))
        raw_type = data.get("type")
        if subject_id is None or not raw_type:
            raise ValidationError("All fields are required.")

        try:
            session_type = SessionType(raw_type)
        except ValueError:
            raise ValidationError("Type must be 'class' or 'lab'.")

        total = require_count(data.get("total_classes"), "total_classes")
        attended = require_count(data.get("attended_classes"), "attended_classes")
        if attended > total:
            raise ValidationError("Attended classes cannot be more than total classes.")

        return cls(
            subject_id=require_id(subject_id, "subjectId"),
            session_type=session_type,
            total_classes=total,
            attended_classes=attended,
        )
