from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SessionType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert_for_owner(
        self,
        *,
        user_id: int,
        subject_id: int,
        session_type: SessionType,
        total_classes: int,
        attended_classes: int,
    ) -> Optional[AttendanceRecord]:
        """Create or overwrite the row keyed by (subject_id, session_type) atomically.

        Returns None, writing nothing, when ``user_id`` does not own the subject.
        """

        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        """All attendance rows of all subjects owned by ``user_id``."""

        raise NotImplementedError
