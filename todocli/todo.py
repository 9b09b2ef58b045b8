"""Todo items and their lifecycle timestamps."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

ACTIVE_ICON = "📝"
COMPLETED_ICON = "✅"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_time(value: str) -> datetime:
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass
class Todo:
    """A single todo item with a subject, a description and timestamps."""

    id: str
    subject: str
    description: str
    created_at: datetime
    last_modified_at: datetime
    closed_at: datetime | None = None

    @classmethod
    def create(cls, subject: str, description: str) -> Todo:
        """Make a new, active todo with a fresh identifier."""
        now = _now()
        return cls(
            id=str(uuid.uuid4()),
            subject=subject,
            description=description,
            created_at=now,
            last_modified_at=now,
        )

    def is_completed(self) -> bool:
        return self.closed_at is not None

    def toggle_completion(self) -> None:
        """Close an active todo or reopen a closed one."""
        now = _now()
        self.closed_at = None if self.is_completed() else now
        self.last_modified_at = now

    def update(self, subject: str, description: str) -> None:
        self.subject = subject
        self.description = description
        self.last_modified_at = _now()

    def status_icon(self) -> str:
        return COMPLETED_ICON if self.is_completed() else ACTIVE_ICON

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of this todo."""
        return {
            "id": self.id,
            "subject": self.subject,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "closed_at": self.closed_at.isoformat() if self.closed_at else None,
            "last_modified_at": self.last_modified_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        """Build a todo from a mapping produced by :meth:`to_dict`."""
        closed = data.get("closed_at")
        return cls(
            id=str(data["id"]),
            subject=str(data["subject"]),
            description=str(data["description"]),
            created_at=_parse_time(data["created_at"]),
            last_modified_at=_parse_time(data["last_modified_at"]),
            closed_at=_parse_time(closed) if closed is not None else None,
        )