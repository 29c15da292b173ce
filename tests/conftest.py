"""
Test configuration: ensures repo root is in sys.path and provides isolated
store/cache instances plus a controllable clock.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import forzeit.*, forzeit_api.*, tests.fixtures
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from forzeit.cache import CacheManager  # noqa: E402
from forzeit.insights import InsightsService  # noqa: E402
from forzeit.models import Principal  # noqa: E402
from forzeit.store import RecordStore  # noqa: E402
from tests.fixtures import FakeClock, make_seed  # noqa: E402


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return RecordStore.from_dict(make_seed())


@pytest.fixture
def cache(clock):
    return CacheManager(default_ttl=60, clock=clock)


@pytest.fixture
def insights_service(store, cache):
    return InsightsService(store, cache)


@pytest.fixture
def alice():
    return Principal(id="u1", email="alice@example.com", name="Alice")


@pytest.fixture
def bob():
    return Principal(id="u2", email="bob@example.com", name="Bob")
