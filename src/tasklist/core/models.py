# src/tasklist/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class Priority(IntEnum):
    """Ordinal urgency level. Higher value means more urgent."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, raw: str) -> Priority | None:
        """Accept "high", "H", "3" etc. Returns None for anything else."""
        s = raw.strip().lower()
        if not s:
            return None
        if s.isdigit():
            try:
                return cls(int(s))
            except ValueError:
                return None
        for p in cls:
            if p.name.lower().startswith(s):
                return p
        return None


class SortKey(StrEnum):
    """Field used to derive display order (always descending)."""

    CREATED_AT = "createdAt"
    PRIORITY = "priority"

    @property
    def label(self) -> str:
        return "Time Created" if self is SortKey.CREATED_AT else "Priority"

    @classmethod
    def parse(cls, raw: str | None) -> SortKey | None:
        if not raw:
            return None
        s = raw.strip().lower()
        if s in ("createdat", "created", "created_at", "time", "date"):
            return cls.CREATED_AT
        if s in ("priority", "prio", "p"):
            return cls.PRIORITY
        return None


@dataclass(slots=True)
class Task:
    id: int
    text: str
    created_at: int  # ms timestamp, strictly increasing within a session
    completed: bool = False
    priority: int = Priority.LOW

    @property
    def priority_label(self) -> str:
        try:
            return Priority(self.priority).label
        except ValueError:
            return str(self.priority)
