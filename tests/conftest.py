from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from gridpulse.core.rng import SeededRandomSource

TZ = "America/New_York"


@pytest.fixture
def now():
    # Thursday afternoon in daylight time
    return datetime(2025, 3, 20, 14, 30, tzinfo=ZoneInfo(TZ))


@pytest.fixture
def rng():
    return SeededRandomSource(123)


@pytest.fixture
def make_rng():
    def _make(seed: int = 0):
        return SeededRandomSource(seed)

    return _make
