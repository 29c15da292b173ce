"""
Test fixtures for deterministic testing.

This module provides:
- FakeClock: hand-advanced clock for cache TTL tests
- make_seed: pinned seed data for record stores
- auth_header: bearer header for a user id
"""

from .clock import FakeClock
from .seed import auth_header, make_seed

__all__ = ["FakeClock", "make_seed", "auth_header"]
