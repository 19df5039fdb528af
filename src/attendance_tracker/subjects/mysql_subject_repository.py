from __future__ import annotations

from typing import Sequence

from ..attendance.mysql_attendance_repository import to_record
from ..core.enums import SessionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Subject
from .repository import SubjectRepository

_ATTENDANCE_COLUMNS = "id, subject_id, type, total_classes, attended_classes"


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_with_attendance(self, *, user_id: int, subject_name: str) -> Subject:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO subjects(subject_name, user_id) VALUES(%s,%s)",
                (subject_name, user_id),
            )
            subject_id = int(cur.lastrowid)
            cur.executemany(
                """
                INSERT INTO attendance(subject_id, type, total_classes, attended_classes)
                VALUES(%s,%s,0,0)
                """,
                [(subject_id, t.value) for t in SessionType],
            )
            cur.execute(
                f"SELECT {_ATTENDANCE_COLUMNS} FROM attendance WHERE subject_id=%s ORDER BY type",
                (subject_id,),
            )
            children = tuple(to_record(r) for r in fetchall(cur))
            return Subject(subject_id=subject_id, subject_name=subject_name, user_id=user_id, attendance=children)

    def list_for_owner(self, user_id: int) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.id AS s_id, s.subject_name, s.user_id,
                       a.id, a.subject_id, a.type, a.total_classes, a.attended_classes
                FROM subjects s
                LEFT JOIN attendance a ON a.subject_id = s.id
                WHERE s.user_id=%s
                ORDER BY s.id, a.type
                """,
                (user_id,),
            )
            rows = fetchall(cur)

        grouped: dict[int, dict] = {}
        for r in rows:
            entry = grouped.setdefault(
                int(r["s_id"]),
                {"subject_name": r["subject_name"], "user_id": int(r["user_id"]), "attendance": []},
            )
            if r.get("id") is not None:
                entry["attendance"].append(to_record(r))

        return [
            Subject(
                subject_id=sid,
                subject_name=e["subject_name"],
                user_id=e["user_id"],
                attendance=tuple(e["attendance"]),
            )
            for sid, e in grouped.items()
        ]

    def delete_for_owner(self, *, subject_id: int, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE a FROM attendance a
                JOIN subjects s ON s.id = a.subject_id
                WHERE s.id=%s AND s.user_id=%s
                """,
                (subject_id, user_id),
            )
            cur.execute("DELETE FROM subjects WHERE id=%s AND user_id=%s", (subject_id, user_id))
            return cur.rowcount > 0
