from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService, ReportService
from .database.connection import DBConfig, DatabaseConnection
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    token_service: TokenService
    auth_service: AuthService
    subject_service: SubjectService
    attendance_service: AttendanceService
    report_service: ReportService


def assemble(
    *,
    users_repo: UserRepository,
    subjects_repo: SubjectRepository,
    attendance_repo: AttendanceRepository,
    token_service: TokenService,
) -> Container:
    """Wire services on top of the given repositories."""
    return Container(
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        subject_service=SubjectService(subjects_repo),
        attendance_service=AttendanceService(attendance_repo),
        report_service=ReportService(attendance_repo),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_hours: int) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return assemble(
        users_repo=MySQLUserRepository(conn),
        subjects_repo=MySQLSubjectRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        token_service=TokenService(jwt_secret, ttl=timedelta(hours=int(token_ttl_hours))),
    )
