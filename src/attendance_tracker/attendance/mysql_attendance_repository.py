from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import SessionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row["id"]),
        subject_id=int(row["subject_id"]),
        session_type=SessionType(row["type"]),
        total_classes=int(row["total_classes"]),
        attended_classes=int(row["attended_classes"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_for_owner(
        self,
        *,
        user_id: int,
        subject_id: int,
        session_type: SessionType,
        total_classes: int,
        attended_classes: int,
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Ownership filter and uq_attendance_subject_type in one statement;
            # the SELECT share-locks the subject row until commit.
            cur.execute(
                """
                INSERT INTO attendance(subject_id, type, total_classes, attended_classes)
                SELECT s.id, %s, %s, %s
                FROM subjects s
                WHERE s.id=%s AND s.user_id=%s
                ON DUPLICATE KEY UPDATE
                    total_classes=VALUES(total_classes),
                    attended_classes=VALUES(attended_classes)
                """,
                (session_type.value, total_classes, attended_classes, subject_id, user_id),
            )
            cur.execute(
                """
                SELECT a.id, a.subject_id, a.type, a.total_classes, a.attended_classes
                FROM attendance a
                JOIN subjects s ON s.id = a.subject_id
                WHERE a.subject_id=%s AND a.type=%s AND s.user_id=%s
                """,
                (subject_id, session_type.value, user_id),
            )
            row = fetchone(cur)
            return to_record(row) if row else None

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.subject_id, a.type, a.total_classes, a.attended_classes
                FROM attendance a
                JOIN subjects s ON s.id = a.subject_id
                WHERE s.user_id=%s
                ORDER BY a.subject_id, a.type
                """,
                (user_id,),
            )
            return [to_record(r) for r in fetchall(cur)]
