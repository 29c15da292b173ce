"""
Card mutations: create a card, change its status.

Each write is followed by invalidation of the owner's cached insights for the
affected week. The invalidation hook is injected, so this module has no
dependency on the cache.
"""

import logging
from collections.abc import Callable

from forzeit import config
from forzeit.auth.gate import require_authenticated, require_ownership
from forzeit.errors import InvalidInput, NotFound
from forzeit.models import Card, CardStatus, Principal
from forzeit.store import RecordStore

logger = logging.getLogger(__name__)

InvalidateFn = Callable[[str, str], bool]


def validate_card_input(title: str | None, minutes) -> str:
    """Return the stripped title or raise InvalidInput."""
    if not isinstance(title, str) or not title.strip():
        raise InvalidInput("Card title cannot be empty")

    if len(title) > config.CARD_TITLE_MAX_LENGTH:
        raise InvalidInput(
            f"Card title is too long (max {config.CARD_TITLE_MAX_LENGTH} characters)"
        )

    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidInput("Minutes must be an integer")

    if minutes < 0:
        raise InvalidInput("Minutes cannot be negative")

    return title.strip()


def parse_card_status(status) -> CardStatus:
    try:
        return CardStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in CardStatus)
        raise InvalidInput(f"Invalid status. Must be one of: {valid}") from None


class CardMutations:
    """Write operations on cards."""

    def __init__(self, store: RecordStore, invalidate: InvalidateFn):
        self.store = store
        self._invalidate = invalidate

    def create_card(
        self, principal: Principal | None, week_id: str, title: str, minutes: int
    ) -> Card:
        principal = require_authenticated(principal)
        clean_title = validate_card_input(title, minutes)

        week = self.store.get_week_by_id(week_id)
        if week is None:
            raise NotFound(f"Week with id {week_id} not found")

        require_ownership(principal, week.user_id)

        card = self.store.create_card(week_id, clean_title, minutes, principal.id)
        self._invalidate(week_id, principal.id)

        logger.info(f"Card {card.id} created by {principal.id} in week {week_id}")
        return card

    def update_card_status(self, principal: Principal | None, card_id: str, status) -> Card:
        principal = require_authenticated(principal)
        new_status = parse_card_status(status)

        card = self.store.get_card_by_id(card_id)
        if card is None:
            raise NotFound(f"Card with id {card_id} not found")

        require_ownership(principal, card.user_id)

        updated = self.store.update_card_status(card_id, new_status)
        if updated is None:
            raise NotFound(f"Card with id {card_id} not found")

        self._invalidate(updated.week_id, principal.id)

        logger.info(f"Card {card_id} status {card.status} -> {new_status}")
        return updated
