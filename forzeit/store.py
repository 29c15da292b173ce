"""
In-memory record store for users, weeks, cards and sessions.

Features:
- Point lookups by id and filtered scans (by user, by week, by time range)
- Thread-safe operations with RLock
- Card ids from a counter, so concurrent creates never collide
- Loadable from a JSON seed file

Records are frozen dataclasses; updates replace the stored record instead of
mutating one a caller may already hold.
"""

import json
import logging
import re
import threading
from dataclasses import replace
from pathlib import Path
from typing import Any

from forzeit.models import Card, CardStatus, Session, User, Week
from forzeit.timeutil import parse_instant, utc_now_iso, week_window

logger = logging.getLogger(__name__)

_CARD_ID_RE = re.compile(r"^c(\d+)$")


class RecordStore:
    """Collection-backed repository keyed by id."""

    def __init__(
        self,
        users: list[User] | None = None,
        weeks: list[Week] | None = None,
        cards: list[Card] | None = None,
        sessions: list[Session] | None = None,
    ):
        self._lock = threading.RLock()
        self._users: list[User] = list(users or [])
        self._weeks: list[Week] = list(weeks or [])
        self._cards: list[Card] = list(cards or [])
        self._sessions: list[Session] = list(sessions or [])
        self._card_counter = self._initial_card_counter(self._cards)

    @staticmethod
    def _initial_card_counter(cards: list[Card]) -> int:
        numbers = [int(m.group(1)) for m in (_CARD_ID_RE.match(c.id) for c in cards) if m]
        return max(numbers + [len(cards)])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecordStore":
        """Build a store from the camelCase seed layout."""
        return cls(
            users=[User.from_dict(u) for u in data.get("users", [])],
            weeks=[Week.from_dict(w) for w in data.get("weeks", [])],
            cards=[Card.from_dict(c) for c in data.get("cards", [])],
            sessions=[Session.from_dict(s) for s in data.get("sessions", [])],
        )

    @classmethod
    def from_seed_file(cls, path: Path | str) -> "RecordStore":
        """
        Load a store from a JSON seed file.

        A missing or malformed file is logged and yields an empty store.
        """
        try:
            with open(path, encoding="utf-8") as f:
                store = cls.from_dict(json.load(f))
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to load seed data from {path}: {e}")
            return cls()

        logger.info(f"Seed data loaded from {path}: {store.counts()}")
        return store

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "users": len(self._users),
                "weeks": len(self._weeks),
                "cards": len(self._cards),
                "sessions": len(self._sessions),
            }

    # ==== Users ====

    def get_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    # ==== Weeks ====

    def get_week_by_id(self, week_id: str) -> Week | None:
        with self._lock:
            return next((w for w in self._weeks if w.id == week_id), None)

    def get_weeks_by_user_id(
        self, user_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[Week]:
        """Weeks of a user, newest first, then offset, then limit."""
        with self._lock:
            weeks = [w for w in self._weeks if w.user_id == user_id]

        weeks.sort(key=lambda w: w.start_iso, reverse=True)
        if offset:
            weeks = weeks[offset:]
        if limit:
            weeks = weeks[:limit]
        return weeks

    # ==== Cards ====

    def get_card_by_id(self, card_id: str) -> Card | None:
        with self._lock:
            return next((c for c in self._cards if c.id == card_id), None)

    def get_cards_by_week_id(self, week_id: str) -> list[Card]:
        with self._lock:
            return [c for c in self._cards if c.week_id == week_id]

    def create_card(self, week_id: str, title: str, minutes: int, user_id: str) -> Card:
        """Append a new TODO card. Id allocation and insert happen under one lock."""
        with self._lock:
            self._card_counter += 1
            card = Card(
                id=f"c{self._card_counter}",
                user_id=user_id,
                week_id=week_id,
                title=title,
                status=CardStatus.TODO,
                minutes=minutes,
                created_at=utc_now_iso(),
            )
            self._cards.append(card)

        logger.debug(f"Card {card.id} created in week {week_id}")
        return card

    def update_card_status(self, card_id: str, status: CardStatus) -> Card | None:
        with self._lock:
            for idx, card in enumerate(self._cards):
                if card.id == card_id:
                    updated = replace(card, status=status)
                    self._cards[idx] = updated
                    return updated
        return None

    # ==== Sessions ====

    def get_sessions_by_user_id(self, user_id: str) -> list[Session]:
        with self._lock:
            return [s for s in self._sessions if s.user_id == user_id]

    def get_sessions_by_week_range(self, user_id: str, week_start_iso: str) -> list[Session]:
        """
        Sessions of a user whose start falls in [week start, week start + 7 days).

        A week start that cannot be parsed selects no sessions.
        """
        try:
            start, end = week_window(week_start_iso)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable week start {week_start_iso!r}, no sessions selected")
            return []
        selected = []
        for session in self.get_sessions_by_user_id(user_id):
            started = parse_instant(session.started_at)
            if started is None:
                logger.warning(f"Session {session.id} has unparseable start, skipped for week range")
                continue
            if start <= started < end:
                selected.append(session)
        return selected
