from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits when the block finishes, rolls back on any exception. Driver
    errors surface as :class:`StorageError`; domain errors raised inside the
    block propagate unchanged.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("database connection failed: %s", e)
        raise StorageError("Database unavailable.") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("database operation failed: %s", e)
        raise StorageError("Database operation failed.") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
