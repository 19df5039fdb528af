from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_non_empty, require_object
from ..core.exceptions import ValidationError


def _normalize_email(value: Any) -> str:
    email = require_non_empty(value, "Email").lower()
    if "@" not in email:
        raise ValidationError("Email is not valid.")
    return email


@dataclass(frozen=True)
class SignupInput:
    name: str
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Any) -> "SignupInput":
        data = require_object(payload)
        name, email, password = data.get("name"), data.get("email"), data.get("password")
        if not name or not email or not password:
            raise ValidationError("All fields are required.")
        if not isinstance(password, str):
            raise ValidationError("Password must be a string.")
        return cls(
            name=require_non_empty(name, "Name"),
            email=_normalize_email(email),
            password=password,
        )


@dataclass(frozen=True)
class LoginInput:
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Any) -> "LoginInput":
        data = require_object(payload)
        email, password = data.get("email"), data.get("password")
        if not email or not password or not isinstance(password, str):
            raise ValidationError("Email and password are required.")
        return cls(email=require_non_empty(email, "Email").lower(), password=password)
