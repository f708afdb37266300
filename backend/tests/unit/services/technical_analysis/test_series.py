"""Tests for price series normalization and time conversion."""

from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from chart_analyst.core.exceptions import PriceDataValidationError
from chart_analyst.services.technical_analysis import PriceBar
from chart_analyst.services.technical_analysis.series import (
    bars_from_dataframe,
    normalize_bars,
    to_unix_seconds,
)
from tests.utils.mock_data import START_TIMESTAMP


def record(time, close=100.0, **overrides):
    data = {"time": time, "open": close, "high": close + 1, "low": close - 1, "close": close}
    data.update(overrides)
    return data


class TestToUnixSeconds:
    """Tests for bar time conversion."""

    def test_integer_passthrough(self):
        assert to_unix_seconds(1704153600) == 1704153600

    def test_float_kept_as_given(self):
        """Fractional seconds are not truncated."""
        assert to_unix_seconds(1704153600.7) == 1704153600.7

    def test_iso_date_string(self):
        """Dates are midnight UTC."""
        assert to_unix_seconds("2024-01-02") == START_TIMESTAMP

    def test_iso_datetime_string_with_offset(self):
        assert to_unix_seconds("2024-01-02T02:00:00+02:00") == START_TIMESTAMP

    def test_date_object(self):
        assert to_unix_seconds(date(2024, 1, 2)) == START_TIMESTAMP

    def test_naive_datetime_treated_as_utc(self):
        assert to_unix_seconds(datetime(2024, 1, 2)) == START_TIMESTAMP

    def test_aware_datetime(self):
        eastern = timezone(timedelta(hours=-5))
        value = datetime(2024, 1, 1, 19, 0, tzinfo=eastern)

        assert to_unix_seconds(value) == START_TIMESTAMP

    @pytest.mark.parametrize("value", ["yesterday", "", "2024-13-45"])
    def test_invalid_string(self, value):
        with pytest.raises(PriceDataValidationError, match="Invalid bar time"):
            to_unix_seconds(value)

    def test_bool_rejected(self):
        with pytest.raises(PriceDataValidationError):
            to_unix_seconds(True)

    def test_unsupported_type(self):
        with pytest.raises(PriceDataValidationError, match="Unsupported bar time type"):
            to_unix_seconds([2024, 1, 2])


class TestNormalizeBars:
    """Tests for cleaning raw price records."""

    def test_sorts_by_time(self):
        bars = normalize_bars([record(300), record(100), record(200)])

        assert [bar.time for bar in bars] == [100, 200, 300]

    def test_duplicates_keep_first_occurrence(self):
        bars = normalize_bars([record(100, close=10.0), record(100, close=20.0), record(50)])

        assert [bar.time for bar in bars] == [50, 100]
        assert bars[1].close == 10.0

    def test_fractional_times_are_distinct(self):
        """Bars a fraction of a second apart are not duplicates."""
        bars = normalize_bars([record(100.7), record(100.2)])

        assert [bar.time for bar in bars] == [100.2, 100.7]

    def test_duplicates_across_time_formats(self):
        """An ISO date and its Unix timestamp are the same bar."""
        bars = normalize_bars([record("2024-01-02", close=10.0), record(START_TIMESTAMP, close=20.0)])

        assert len(bars) == 1
        assert bars[0].close == 10.0

    def test_incomplete_records_dropped(self):
        records = [
            record(100),
            {"time": 200, "open": 1.0, "high": 2.0, "low": 0.5, "close": None},
            {"time": 300, "open": 1.0, "high": 2.0, "low": 0.5},
            record(None),
        ]

        bars = normalize_bars(records)

        assert [bar.time for bar in bars] == [100]

    def test_volume_optional(self):
        bars = normalize_bars([record(100, volume=1500), record(200)])

        assert bars[0].volume == 1500.0
        assert bars[1].volume is None

    def test_price_bars_pass_through(self):
        bar = PriceBar(time=100, open=1.0, high=2.0, low=0.5, close=1.5)

        assert normalize_bars([bar]) == (bar,)

    def test_malformed_price_raises(self):
        with pytest.raises(PriceDataValidationError, match="Invalid price values"):
            normalize_bars([record(100, open="abc")])

    def test_malformed_time_raises(self):
        with pytest.raises(PriceDataValidationError):
            normalize_bars([record("not-a-date")])

    def test_empty_input(self):
        assert normalize_bars([]) == ()


class TestBarsFromDataFrame:
    """Tests for DataFrame conversion."""

    def test_provider_style_columns_with_datetime_index(self):
        index = pd.date_range("2024-01-02", periods=3, freq="D", tz="UTC")
        df = pd.DataFrame(
            {
                "Open": [1.0, 2.0, 3.0],
                "High": [1.5, 2.5, 3.5],
                "Low": [0.5, 1.5, 2.5],
                "Close": [1.2, 2.2, 3.2],
                "Volume": [100, 200, 300],
            },
            index=index,
        )

        bars = bars_from_dataframe(df)

        assert len(bars) == 3
        assert to_unix_seconds(bars[0].time) == START_TIMESTAMP
        assert bars[2].close == 3.2
        assert bars[1].volume == 200.0

    def test_lowercase_columns_with_time_column(self):
        df = pd.DataFrame(
            {
                "time": [300, 100],
                "open": [3.0, 1.0],
                "high": [3.5, 1.5],
                "low": [2.5, 0.5],
                "close": [3.2, 1.2],
            }
        )

        bars = bars_from_dataframe(df)

        assert [bar.time for bar in bars] == [100, 300]
        assert bars[0].volume is None

    def test_nan_rows_dropped(self):
        df = pd.DataFrame(
            {
                "date": ["2024-01-02", "2024-01-03"],
                "open": [1.0, 2.0],
                "high": [1.5, float("nan")],
                "low": [0.5, 1.5],
                "close": [1.2, 2.2],
            }
        )

        bars = bars_from_dataframe(df)

        assert [bar.time for bar in bars] == ["2024-01-02"]

    def test_missing_columns_raise(self):
        df = pd.DataFrame({"open": [1.0], "close": [1.0]})

        with pytest.raises(PriceDataValidationError, match="high, low"):
            bars_from_dataframe(df)
