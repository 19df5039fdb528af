from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import Subject
from .repository import SubjectRepository
from .schemas import CreateSubjectInput

logger = logging.getLogger(__name__)


class SubjectService:
    """Use cases: create, list and delete the caller's subjects."""

    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def create(self, user_id: int, data: CreateSubjectInput) -> Subject:
        subject = self._subjects.create_with_attendance(user_id=user_id, subject_name=data.subject_name)
        logger.info("user %s created subject %s", user_id, subject.subject_id)
        return subject

    def list_for(self, user_id: int) -> Sequence[Subject]:
        return self._subjects.list_for_owner(user_id)

    def delete(self, user_id: int, subject_id: int) -> None:
        if not self._subjects.delete_for_owner(subject_id=subject_id, user_id=user_id):
            raise NotFoundError("Subject not found.")
        logger.info("user %s deleted subject %s", user_id, subject_id)
