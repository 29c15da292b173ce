"""Read operations on weeks and their cards and sessions."""

from dataclasses import dataclass

from forzeit import config
from forzeit.auth.gate import require_ownership
from forzeit.errors import NotFound
from forzeit.insights.engine import session_duration_minutes
from forzeit.models import Card, Principal, Session, Week
from forzeit.store import RecordStore


@dataclass(frozen=True)
class SessionView:
    """Session with its computed duration."""

    session: Session
    duration_minutes: int

    def to_dict(self) -> dict:
        return {**self.session.to_dict(), "durationMinutes": self.duration_minutes}


def clamp_page(limit: int | None, offset: int | None) -> tuple[int, int]:
    """Default limit 10, capped at 50; offset defaults to 0."""
    if limit is None or limit <= 0:
        actual_limit = config.WEEKS_DEFAULT_LIMIT
    else:
        actual_limit = min(limit, config.WEEKS_MAX_LIMIT)
    actual_offset = offset if offset is not None and offset >= 0 else 0
    return actual_limit, actual_offset


class WeekQueries:
    """Ownership-gated week reads. NotFound is reported before authorization."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_week(self, week_id: str, principal: Principal | None) -> Week:
        week = self.store.get_week_by_id(week_id)
        if week is None:
            raise NotFound(f"Week with id {week_id} not found")
        require_ownership(principal, week.user_id)
        return week

    def weeks_by_user(
        self,
        user_id: str,
        principal: Principal | None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Week]:
        require_ownership(principal, user_id)
        actual_limit, actual_offset = clamp_page(limit, offset)
        return self.store.get_weeks_by_user_id(user_id, actual_limit, actual_offset)

    def cards_for_week(self, week_id: str, principal: Principal | None) -> list[Card]:
        week = self.get_week(week_id, principal)
        return self.store.get_cards_by_week_id(week.id)

    def sessions_for_week(self, week_id: str, principal: Principal | None) -> list[SessionView]:
        week = self.get_week(week_id, principal)
        sessions = self.store.get_sessions_by_week_range(week.user_id, week.start_iso)
        return [SessionView(s, session_duration_minutes(s)) for s in sessions]
