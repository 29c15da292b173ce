"""
Domain records for Forzeit.

Users own weeks; a week has cards (tasks). Sessions belong to a user and are
associated with a week by falling inside its 7-day window. AvaInsights is
derived data and is never persisted by the store.

to_dict()/from_dict() use the camelCase wire names of the public API.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class CardStatus(StrEnum):
    """Card lifecycle status."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(id=str(data["id"]), email=data.get("email", ""), name=data.get("name", ""))


@dataclass(frozen=True)
class Principal:
    """Authenticated requester, resolved from credentials."""

    id: str
    email: str = ""
    name: str = ""

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(id=user.id, email=user.email, name=user.name)


@dataclass(frozen=True)
class Week:
    id: str
    user_id: str
    start_iso: str  # ISO date, e.g. "2025-08-25"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Week":
        return cls(id=str(data["id"]), user_id=str(data["userId"]), start_iso=data["startISO"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "userId": self.user_id, "startISO": self.start_iso}


@dataclass(frozen=True)
class Card:
    id: str
    user_id: str
    week_id: str
    title: str
    status: CardStatus
    minutes: int
    created_at: str  # ISO datetime

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            week_id=str(data["weekId"]),
            title=data["title"],
            status=CardStatus(data.get("status", CardStatus.TODO)),
            minutes=int(data.get("minutes", 0)),
            created_at=data.get("createdAt", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "weekId": self.week_id,
            "title": self.title,
            "status": self.status.value,
            "minutes": self.minutes,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class Session:
    """Tracked work interval. Timestamps are kept as received and may be malformed."""

    id: str
    user_id: str
    started_at: str
    ended_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Session":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            started_at=data.get("startedAt", ""),
            ended_at=data.get("endedAt", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "startedAt": self.started_at,
            "endedAt": self.ended_at,
        }


@dataclass(frozen=True)
class AvaInsights:
    """Analytics derived from a week's cards and sessions."""

    total_minutes: int
    done_count: int
    focus_score: int
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMinutes": self.total_minutes,
            "doneCount": self.done_count,
            "focusScore": self.focus_score,
            "recommendations": list(self.recommendations),
        }
