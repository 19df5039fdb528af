from __future__ import annotations

from typing import Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, email, password_hash FROM users WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, name: str, email: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO users(name, email, password_hash) VALUES(%s,%s,%s)",
                    (name, email, password_hash),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == errorcode.ER_DUP_ENTRY:
                    raise ConflictError("User with this email already exists.") from e
                raise
            return int(cur.lastrowid)
