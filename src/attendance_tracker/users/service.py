from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, ConflictError
from .repository import UserRepository
from .schemas import LoginInput, SignupInput
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Use cases: sign up and log in."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def signup(self, data: SignupInput) -> int:
        if self._users.get_by_email(data.email):
            raise ConflictError("User with this email already exists.")

        user_id = self._users.create_user(
            name=data.name,
            email=data.email,
            password_hash=generate_password_hash(data.password),
        )
        logger.info("user %s signed up", user_id)
        return user_id

    def login(self, data: LoginInput) -> str:
        user = self._users.get_by_email(data.email)
        if not user:
            logger.warning("login failed: unknown email")
            raise AuthenticationError("Invalid email or password.")

        try:
            ok = check_password_hash(user.password_hash, data.password)
        except ValueError:
            # corrupted or placeholder hashes
            ok = False

        if not ok:
            logger.warning("login failed for user %s", user.user_id)
            raise AuthenticationError("Invalid email or password.")

        return self._tokens.issue(user.user_id)
