"""Attendance aggregation.

Sums counter pairs and derives the attendance percentage together with the
number of additional attended classes needed to reach the target.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from ..core.constants import TARGET_PERCENTAGE


class HasCounts(Protocol):
    total_classes: int
    attended_classes: int


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    attended: int
    percentage: float
    needed: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "attended": self.attended,
            "percentage": self.percentage,
            "needed": self.needed,
        }


def classes_needed(total: int, attended: int, *, target: int = TARGET_PERCENTAGE) -> int:
    """Smallest n >= 0 with (attended + n) / (total + n) >= target / 100.

    Closed form: ceil((target * total - 100 * attended) / (100 - target)).
    Integer arithmetic keeps the threshold check exact.
    """
    if total <= 0 or 100 * attended >= target * total:
        return 0
    deficit = target * total - 100 * attended
    return -(-deficit // (100 - target))


def summarize(records: Iterable[HasCounts]) -> AttendanceSummary:
    total = 0
    attended = 0
    for r in records:
        total += r.total_classes
        attended += r.attended_classes

    percentage = (attended / total) * 100 if total > 0 else 0.0
    return AttendanceSummary(
        total=total,
        attended=attended,
        percentage=percentage,
        needed=classes_needed(total, attended),
    )
