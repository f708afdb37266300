"""Tests for the five-step price projections."""

import pytest

from chart_analyst.services.technical_analysis.predictions import (
    forecast_times,
    generate_predictions,
    linear_regression_forecast,
    mean_reversion_forecast,
    momentum_decay_forecast,
)
from tests.utils.mock_data import DAY_SECONDS, START_TIMESTAMP, MockDataGenerator

LAST_TIME = 1_700_000_000
CLOSES = [100.0 + i for i in range(20)]


def values(method) -> list[float]:
    return [point.value for point in method.points]


class TestForecastTimes:
    """Tests for forecast timestamps."""

    def test_five_daily_steps(self):
        """Step k lands k days after the last bar."""
        assert forecast_times(LAST_TIME) == [LAST_TIME + k * DAY_SECONDS for k in range(1, 6)]


class TestMomentumDecay:
    """Tests for the decaying momentum projection."""

    def test_known_path(self):
        """Momentum 0.9 decays by a tenth per step."""
        method = momentum_decay_forecast(CLOSES, LAST_TIME)

        assert values(method) == pytest.approx([119.81, 120.53, 121.16, 121.70, 122.15])
        assert method.name == "Momentum Decay"

    def test_uses_tenth_most_recent_close(self):
        """Only close[-1] and close[-10] determine the momentum."""
        closes = [500.0] * 5 + CLOSES

        assert values(momentum_decay_forecast(closes, LAST_TIME)) == pytest.approx(
            values(momentum_decay_forecast(CLOSES, LAST_TIME))
        )

    def test_flat_series_stays_flat(self):
        method = momentum_decay_forecast([50.0] * 20, LAST_TIME)

        assert values(method) == pytest.approx([50.0] * 5)


class TestLinearRegressionForecast:
    """Tests for the least-squares projection."""

    def test_extends_perfect_line(self):
        """Closes 100..119 continue at 121..125."""
        method = linear_regression_forecast(CLOSES, LAST_TIME)

        assert values(method) == pytest.approx([121.0, 122.0, 123.0, 124.0, 125.0])
        assert method.name == "Linear Regression"

    def test_only_last_20_closes_fitted(self):
        """Older closes do not affect the fit."""
        closes = [1.0, 9999.0, 3.0] + CLOSES

        assert values(linear_regression_forecast(closes, LAST_TIME)) == pytest.approx(
            [121.0, 122.0, 123.0, 124.0, 125.0]
        )


class TestMeanReversion:
    """Tests for the pull toward MA20."""

    def test_moves_tenth_of_gap_per_step(self):
        """Close 110 with MA20 at 100 walks down by 1 per step."""
        method = mean_reversion_forecast([110.0], ma20=100.0, last_time=LAST_TIME)

        assert values(method) == pytest.approx([109.0, 108.0, 107.0, 106.0, 105.0])
        assert method.name == "Mean Reversion"

    def test_covers_half_the_gap(self):
        """After five steps the price is halfway to MA20."""
        method = mean_reversion_forecast([80.0], ma20=100.0, last_time=LAST_TIME)

        assert method.points[-1].value == pytest.approx(90.0)

    def test_monotone_toward_ma20(self):
        """Every step moves in the direction of MA20."""
        path = [120.0] + values(mean_reversion_forecast([120.0], ma20=100.0, last_time=LAST_TIME))

        assert all(later < earlier for earlier, later in zip(path, path[1:]))


class TestGeneratePredictions:
    """Tests for the combined forecast output."""

    def test_method_order_and_shape(self, rising_bars):
        predictions = generate_predictions(rising_bars, ma20=1495.0)

        assert [p.name for p in predictions] == [
            "Momentum Decay",
            "Linear Regression",
            "Mean Reversion",
        ]
        for method in predictions:
            assert len(method.points) == 5
            assert method.description

    def test_rising_series_paths(self, rising_bars):
        """Closes 1000..1590 in steps of 10."""
        momentum, regression, reversion = generate_predictions(rising_bars, ma20=1495.0)

        assert values(momentum) == pytest.approx([1598.1, 1605.3, 1611.6, 1617.0, 1621.5])
        assert values(regression) == pytest.approx([1610.0, 1620.0, 1630.0, 1640.0, 1650.0])
        assert values(reversion) == pytest.approx([1580.5, 1571.0, 1561.5, 1552.0, 1542.5])

    def test_timestamps_follow_last_bar(self, rising_bars):
        last_time = START_TIMESTAMP + 59 * DAY_SECONDS

        for method in generate_predictions(rising_bars, ma20=1495.0):
            assert [p.time for p in method.points] == forecast_times(last_time)

    def test_iso_dated_bars_use_unix_seconds(self):
        """ISO date strings are converted before adding the daily step."""
        bars = MockDataGenerator.dated_bars(60)
        last_time = START_TIMESTAMP + 59 * DAY_SECONDS

        for method in generate_predictions(bars, ma20=1495.0):
            assert method.points[0].time == last_time + DAY_SECONDS
