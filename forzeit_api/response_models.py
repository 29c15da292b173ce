"""
Pydantic request and response models for the HTTP API.

Field aliases keep the camelCase wire names of the public API
(userId, weekId, startISO, ...). Routes serialise with by_alias.
"""

from pydantic import BaseModel, ConfigDict, Field

from forzeit.cache import CacheStats
from forzeit.models import AvaInsights, Card, Week
from forzeit.weeks import SessionView


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ==== Requests ====


class CreateCardRequest(_WireModel):
    week_id: str = Field(alias="weekId")
    title: str
    minutes: int


class UpdateCardStatusRequest(_WireModel):
    status: str = Field(description="TODO, IN_PROGRESS or DONE")


class IssueTokenRequest(_WireModel):
    user_id: str | None = Field(default=None, alias="userId")


# ==== Responses ====


class WeekResponse(_WireModel):
    id: str
    user_id: str = Field(alias="userId")
    start_iso: str = Field(alias="startISO")

    @classmethod
    def from_week(cls, week: Week) -> "WeekResponse":
        return cls.model_validate(week.to_dict())


class CardResponse(_WireModel):
    id: str
    user_id: str = Field(alias="userId")
    week_id: str = Field(alias="weekId")
    title: str
    status: str
    minutes: int
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls.model_validate(card.to_dict())


class SessionResponse(_WireModel):
    id: str
    user_id: str = Field(alias="userId")
    started_at: str = Field(alias="startedAt")
    ended_at: str = Field(alias="endedAt")
    duration_minutes: int = Field(alias="durationMinutes")

    @classmethod
    def from_view(cls, view: SessionView) -> "SessionResponse":
        return cls.model_validate(view.to_dict())


class AvaInsightsResponse(_WireModel):
    total_minutes: int = Field(alias="totalMinutes")
    done_count: int = Field(alias="doneCount")
    focus_score: int = Field(alias="focusScore", ge=0, le=100)
    recommendations: list[str]

    @classmethod
    def from_insights(cls, insights: AvaInsights) -> "AvaInsightsResponse":
        return cls.model_validate(insights.to_dict())


class CacheStatsResponse(_WireModel):
    total_entries: int = Field(alias="totalEntries")
    valid_entries: int = Field(alias="validEntries")
    expired_entries: int = Field(alias="expiredEntries")
    timestamp: str

    @classmethod
    def from_stats(cls, stats: CacheStats, timestamp: str) -> "CacheStatsResponse":
        return cls.model_validate({**stats.to_dict(), "timestamp": timestamp})


class HealthResponse(_WireModel):
    status: str = Field(description="ok")
    timestamp: str = Field(description="ISO timestamp")
    service: str


class TokenResponse(_WireModel):
    token: str
    user_id: str = Field(alias="userId")
    message: str


class ErrorResponse(_WireModel):
    error: str
    code: str
