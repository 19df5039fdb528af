from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a registered student.

    Plain data object; no database access here.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
