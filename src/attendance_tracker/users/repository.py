from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this protocol rather than on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, name: str, email: str, password_hash: str) -> int:
        """Insert a user; raises ConflictError when the email is taken."""

        raise NotImplementedError
