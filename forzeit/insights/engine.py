"""
Ava insights computation.

Pure function of a week's cards and sessions: no I/O, no hidden state.

Focus score:
    min(100, round_half_up(done_count * 10 + total_session_minutes / 60 * 5))

Session duration is floor((end - start) / 60s). A session with an unparseable
timestamp or with end before start counts as 0 minutes and is logged; the
same rule applies wherever a duration is shown.
"""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from forzeit.models import AvaInsights, Card, CardStatus, Session
from forzeit.timeutil import parse_instant

logger = logging.getLogger(__name__)

MAX_FOCUS_SCORE = 100
LOW_FOCUS_THRESHOLD = 30
HIGH_FOCUS_THRESHOLD = 80
PENDING_TASKS_THRESHOLD = 3

MSG_BREAK_DOWN_TASKS = "Consider breaking down large tasks into smaller, manageable chunks"
MSG_PRIORITIZE_PENDING = (
    "You have many pending tasks. Try to prioritize and focus on 2-3 key items"
)
MSG_START_TRACKING = "Start tracking your work sessions to get better insights"
MSG_GREAT_WORK = "Great work! You're maintaining excellent focus and productivity"
MSG_ESTIMATE_TIME = "Consider estimating time for your tasks to improve planning"
MSG_KEEP_GOING = "Keep up the good work! Stay consistent with your task management"


def session_duration_minutes(session: Session) -> int:
    """Whole minutes between start and end; 0 for malformed or inverted sessions."""
    start = parse_instant(session.started_at)
    end = parse_instant(session.ended_at)

    if start is None or end is None:
        logger.warning(f"Invalid date format in session {session.id}")
        return 0

    if end < start:
        logger.warning(f"End time before start time in session {session.id}")
        return 0

    return int((end - start).total_seconds() // 60)


def focus_score(done_count: int, total_session_minutes: int) -> int:
    """Score in 0..100, rounded half up (10.5 -> 11)."""
    raw = Decimal(done_count * 10) + Decimal(total_session_minutes) / Decimal(60) * 5
    rounded = int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return min(MAX_FOCUS_SCORE, rounded)


def generate_recommendations(
    cards: list[Card], sessions: list[Session], score: int
) -> list[str]:
    """Every matching rule fires, in fixed order; the fallback only when none did."""
    recommendations = []

    if score < LOW_FOCUS_THRESHOLD:
        recommendations.append(MSG_BREAK_DOWN_TASKS)

    todo_count = sum(1 for card in cards if card.status == CardStatus.TODO)
    if todo_count > PENDING_TASKS_THRESHOLD:
        recommendations.append(MSG_PRIORITIZE_PENDING)

    if not sessions:
        recommendations.append(MSG_START_TRACKING)

    if score >= HIGH_FOCUS_THRESHOLD:
        recommendations.append(MSG_GREAT_WORK)

    if any(card.minutes == 0 for card in cards):
        recommendations.append(MSG_ESTIMATE_TIME)

    if not recommendations:
        recommendations.append(MSG_KEEP_GOING)

    return recommendations


def compute_insights(cards: Iterable[Card], sessions: Iterable[Session]) -> AvaInsights:
    """Derive AvaInsights from a week's cards and the owner's sessions in that week."""
    cards = list(cards)
    sessions = list(sessions)

    total_minutes = sum(card.minutes for card in cards)
    done_count = sum(1 for card in cards if card.status == CardStatus.DONE)
    total_session_minutes = sum(session_duration_minutes(s) for s in sessions)

    score = focus_score(done_count, total_session_minutes)

    return AvaInsights(
        total_minutes=total_minutes,
        done_count=done_count,
        focus_score=score,
        recommendations=tuple(generate_recommendations(cards, sessions, score)),
    )
