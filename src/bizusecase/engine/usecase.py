from __future__ import annotations

import itertools
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

# ---------------------------------------------------------------------------
# Scoring metadata
# ---------------------------------------------------------------------------

PRIORITIES = ("low", "medium", "high", "critical")
FEASIBILITIES = ("easy", "moderate", "complex", "very-complex")

PRIORITY_WEIGHTS: Dict[str, int] = {"low": 1, "medium": 2, "high": 3, "critical": 4}

# Easier to implement scores higher.
FEASIBILITY_WEIGHTS: Dict[str, int] = {
    "easy": 4,
    "moderate": 3,
    "complex": 2,
    "very-complex": 1,
}

PRIORITY_FACTOR = 0.4
FEASIBILITY_FACTOR = 0.3
BENEFIT_FACTOR = 0.3

DEFAULT_PRIORITY = "medium"
DEFAULT_FEASIBILITY = "moderate"

_SEQUENCE = itertools.count(1)


def new_use_case_id() -> str:
    """``UC-<epoch ms>-<process sequence>-<random>``; the sequence keeps ids ordered."""
    millis = int(time.time() * 1000)
    return f"UC-{millis}-{next(_SEQUENCE):06d}-{uuid.uuid4().hex[:8]}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UseCase:
    """
    A proposed AI-adoption opportunity for one business domain.

    ``priority`` and ``feasibility`` only ever hold one of their enumerated
    values: assigning anything else leaves the current value in place. The
    score is derived from the current state on every call, never cached.
    """

    def __init__(
        self,
        title: str,
        domain: str,
        description: str,
        benefits: Optional[Iterable[str]] = None,
        requirements: Optional[Iterable[str]] = None,
        *,
        created_at: Optional[datetime] = None,
    ):
        self.id = new_use_case_id()
        self.title = title
        self.domain = domain
        self.description = description
        self.benefits: List[str] = list(benefits or [])
        self.requirements: List[str] = list(requirements or [])
        self.created_at = created_at or utcnow()
        self._priority = DEFAULT_PRIORITY
        self._feasibility = DEFAULT_FEASIBILITY

    @property
    def priority(self) -> str:
        return self._priority

    @priority.setter
    def priority(self, value: str) -> None:
        if value in PRIORITIES:
            self._priority = value

    @property
    def feasibility(self) -> str:
        return self._feasibility

    @feasibility.setter
    def feasibility(self, value: str) -> None:
        if value in FEASIBILITIES:
            self._feasibility = value

    def set_priority(self, value: str) -> "UseCase":
        self.priority = value
        return self

    def set_feasibility(self, value: str) -> "UseCase":
        self.feasibility = value
        return self

    def calculate_score(self) -> float:
        priority_score = PRIORITY_WEIGHTS.get(self._priority, 2)
        feasibility_score = FEASIBILITY_WEIGHTS.get(self._feasibility, 3)
        # Uncapped: every listed benefit adds to the score.
        benefit_score = len(self.benefits)
        return (
            priority_score * PRIORITY_FACTOR
            + feasibility_score * FEASIBILITY_FACTOR
            + benefit_score * BENEFIT_FACTOR
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "domain": self.domain,
            "description": self.description,
            "benefits": list(self.benefits),
            "requirements": list(self.requirements),
            "priority": self._priority,
            "feasibility": self._feasibility,
            "score": self.calculate_score(),
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"UseCase(id={self.id!r}, title={self.title!r}, domain={self.domain!r}, "
            f"priority={self._priority!r}, feasibility={self._feasibility!r})"
        )


__all__ = [
    "UseCase",
    "PRIORITIES",
    "FEASIBILITIES",
    "PRIORITY_WEIGHTS",
    "FEASIBILITY_WEIGHTS",
    "new_use_case_id",
    "utcnow",
]
