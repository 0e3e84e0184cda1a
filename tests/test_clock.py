"""Tests for wall-clock sources."""

from datetime import date, datetime

import pandas as pd
import pytest

from rentcal.clock import Clock, FixedClock, SystemClock


class TestFixedClock:
    """Tests for FixedClock."""

    def test_accepts_datetime_and_date(self):
        """Test building from datetimes and dates."""
        assert FixedClock(datetime(2025, 6, 10, 8, 30)).now() == datetime(2025, 6, 10, 8, 30)
        assert FixedClock(date(2025, 6, 10)).now() == datetime(2025, 6, 10)

    def test_accepts_strings_and_timestamps(self):
        """Test building from strings and pandas Timestamps."""
        assert FixedClock("2025-06-10T08:30").now() == datetime(2025, 6, 10, 8, 30)
        assert FixedClock(pd.Timestamp("2025-06-10 08:30")).now() == datetime(2025, 6, 10, 8, 30)

    def test_aware_values_keep_wall_clock(self):
        """Test that aware values keep their wall-clock time."""
        stamp = pd.Timestamp("2025-06-10 23:30", tz="Asia/Ho_Chi_Minh")
        assert FixedClock(stamp).now() == datetime(2025, 6, 10, 23, 30)

    def test_rejects_other_types(self):
        """Test rejecting unsupported input types."""
        with pytest.raises(TypeError):
            FixedClock(1718000000)


class TestProtocol:
    """Tests for the Clock protocol."""

    def test_clocks_satisfy_protocol(self):
        """Test that both clocks satisfy Clock."""
        assert isinstance(SystemClock(), Clock)
        assert isinstance(FixedClock("2025-06-10"), Clock)
        assert isinstance(SystemClock().now(), datetime)
