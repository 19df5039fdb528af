from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def create_with_attendance(self, *, user_id: int, subject_name: str) -> Subject:
        """Insert the subject and its zero-count class/lab rows in one transaction."""

        raise NotImplementedError

    def list_for_owner(self, user_id: int) -> Sequence[Subject]:
        raise NotImplementedError

    def delete_for_owner(self, *, subject_id: int, user_id: int) -> bool:
        """Delete children then the subject; False when nothing owned matched."""

        raise NotImplementedError
