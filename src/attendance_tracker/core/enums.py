from __future__ import annotations

from enum import Enum


class SessionType(str, Enum):
    """Kind of session an attendance counter pair tracks."""

    CLASS = "class"
    LAB = "lab"
