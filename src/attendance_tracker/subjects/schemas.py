from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_object
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CreateSubjectInput:
    subject_name: str

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateSubjectInput":
        name = require_object(payload).get("subject_name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Subject name is required.")
        return cls(subject_name=name.strip())
