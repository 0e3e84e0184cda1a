from datetime import datetime

import pytest

from rentcal.clock import FixedClock
from rentcal.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test starts from default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock():
    """Wall clock pinned to 2025-06-10 08:30 local time."""
    return FixedClock(datetime(2025, 6, 10, 8, 30))
