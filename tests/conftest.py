from __future__ import annotations

from dataclasses import replace
from datetime import timedelta
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.container import assemble
from attendance_tracker.core.enums import SessionType
from attendance_tracker.core.exceptions import ConflictError
from attendance_tracker.main import create_app
from attendance_tracker.subjects.model import Subject
from attendance_tracker.users.model import User
from attendance_tracker.users.tokens import TokenService

TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdefghij"


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, name: str, email: str, password_hash: str) -> int:
        if self.get_by_email(email):
            raise ConflictError("User with this email already exists.")
        uid = self._next_id
        self._next_id += 1
        self._by_id[uid] = User(user_id=uid, name=name, email=email, password_hash=password_hash)
        return uid


class InMemoryStore:
    """Subjects and attendance sharing one table set, keyed like the MySQL schema."""

    def __init__(self):
        self.subjects: dict[int, tuple[str, int]] = {}
        self.attendance: dict[tuple[int, SessionType], AttendanceRecord] = {}
        self._subject_seq = 0
        self._attendance_seq = 0

    def _children(self, subject_id: int) -> tuple[AttendanceRecord, ...]:
        return tuple(self.attendance[(subject_id, t)] for t in SessionType if (subject_id, t) in self.attendance)

    def _subject(self, subject_id: int) -> Subject:
        name, owner = self.subjects[subject_id]
        return Subject(subject_id=subject_id, subject_name=name, user_id=owner, attendance=self._children(subject_id))

    # SubjectRepository
    def create_with_attendance(self, *, user_id: int, subject_name: str) -> Subject:
        self._subject_seq += 1
        sid = self._subject_seq
        self.subjects[sid] = (subject_name, user_id)
        for t in SessionType:
            self._put(subject_id=sid, session_type=t, total_classes=0, attended_classes=0)
        return self._subject(sid)

    def list_for_owner(self, user_id: int):
        return [self._subject(sid) for sid in sorted(self.subjects) if self.subjects[sid][1] == user_id]

    def _owns(self, subject_id: int, user_id: int) -> bool:
        return subject_id in self.subjects and self.subjects[subject_id][1] == user_id

    def delete_for_owner(self, *, subject_id: int, user_id: int) -> bool:
        if not self._owns(subject_id, user_id):
            return False
        for key in [k for k in self.attendance if k[0] == subject_id]:
            del self.attendance[key]
        del self.subjects[subject_id]
        return True

    def _put(self, *, subject_id: int, session_type: SessionType, total_classes: int, attended_classes: int):
        key = (subject_id, session_type)
        existing = self.attendance.get(key)
        if existing:
            rec = replace(existing, total_classes=total_classes, attended_classes=attended_classes)
        else:
            self._attendance_seq += 1
            rec = AttendanceRecord(
                attendance_id=self._attendance_seq,
                subject_id=subject_id,
                session_type=session_type,
                total_classes=total_classes,
                attended_classes=attended_classes,
            )
        self.attendance[key] = rec
        return rec

    # AttendanceRepository
    def upsert_for_owner(self, *, user_id: int, subject_id: int, session_type: SessionType, total_classes: int, attended_classes: int):
        if not self._owns(subject_id, user_id):
            return None
        return self._put(
            subject_id=subject_id,
            session_type=session_type,
            total_classes=total_classes,
            attended_classes=attended_classes,
        )

    def list_for_user(self, user_id: int):
        out = []
        for sid in sorted(self.subjects):
            if self.subjects[sid][1] == user_id:
                out.extend(self._children(sid))
        return out


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def token_service():
    return TokenService(TEST_JWT_SECRET, ttl=timedelta(hours=1))


@pytest.fixture
def container(users_repo, store, token_service):
    return assemble(
        users_repo=users_repo,
        subjects_repo=store,
        attendance_repo=store,
        token_service=token_service,
    )


@pytest.fixture
def app(container):
    return create_app("attendance_tracker.config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register_user(client):
    """Sign up and log in; returns the Authorization header for that user."""

    def _register(email: str = "ada@example.com", password: str = "secret-pw", name: str = "Ada"):
        resp = client.post("/auth/signup", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 201
        resp = client.post("/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _register
