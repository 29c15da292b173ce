"""
Ava insights: focus score and recommendations for a week.

Provides:
- compute_insights: pure derivation from cards and sessions
- session_duration_minutes: the single duration rule used everywhere
- InsightsService: authorization-gated, cached access
"""

from .engine import compute_insights, focus_score, session_duration_minutes
from .service import InsightsLookup, InsightsService

__all__ = [
    "compute_insights",
    "focus_score",
    "session_duration_minutes",
    "InsightsLookup",
    "InsightsService",
]
