"""Short-horizon price projections.

Three independent extrapolations, each five daily steps ahead of the last bar:
momentum decay, linear regression and mean reversion toward MA20.
"""

from collections.abc import Sequence

from chart_analyst.core.constants import (
    LINEAR_REGRESSION_DESCRIPTION,
    LINEAR_REGRESSION_NAME,
    MEAN_REVERSION_DESCRIPTION,
    MEAN_REVERSION_NAME,
    MOMENTUM_DECAY_DESCRIPTION,
    MOMENTUM_DECAY_NAME,
    ForecastSettings,
)
from chart_analyst.indicators.technical import linear_regression

from .series import to_unix_seconds
from .types import PredictionMethod, PredictionPoint, PriceBar, UnixTime


def forecast_times(last_time: UnixTime) -> list[UnixTime]:
    """Timestamps of the forecast steps, one day apart after last_time."""
    return [
        last_time + step * ForecastSettings.STEP_SECONDS
        for step in range(1, ForecastSettings.STEPS + 1)
    ]


def momentum_decay_forecast(closes: Sequence[float], last_time: UnixTime) -> PredictionMethod:
    """Extrapolate the average daily move of the last 10 bars with linear decay.

    momentum = (close[-1] - close[-10]) / 10; step k adds momentum * (1 - 0.1k).
    """
    lookback = ForecastSettings.MOMENTUM_LOOKBACK
    latest_close = closes[-1]
    momentum = (latest_close - closes[-lookback]) / lookback

    points = []
    price = latest_close
    for step, timestamp in enumerate(forecast_times(last_time), start=1):
        price += momentum * (1 - step * ForecastSettings.MOMENTUM_DECAY_PER_STEP)
        points.append(PredictionPoint(time=timestamp, value=price))

    return PredictionMethod(
        name=MOMENTUM_DECAY_NAME,
        description=MOMENTUM_DECAY_DESCRIPTION,
        points=tuple(points),
    )


def linear_regression_forecast(closes: Sequence[float], last_time: UnixTime) -> PredictionMethod:
    """Extend the least-squares line fitted to the last 20 closes.

    Point k is intercept + slope * (20 + k).
    """
    lookback = ForecastSettings.REGRESSION_LOOKBACK
    slope, intercept = linear_regression(list(closes[-lookback:]))

    points = tuple(
        PredictionPoint(time=timestamp, value=intercept + slope * (lookback + step))
        for step, timestamp in enumerate(forecast_times(last_time), start=1)
    )

    return PredictionMethod(
        name=LINEAR_REGRESSION_NAME,
        description=LINEAR_REGRESSION_DESCRIPTION,
        points=points,
    )


def mean_reversion_forecast(
    closes: Sequence[float], ma20: float, last_time: UnixTime
) -> PredictionMethod:
    """Pull price toward MA20 by a tenth of the initial gap per step.

    MA20 is fixed at its value at calculation time, so after five steps
    price has covered half the gap.
    """
    latest_close = closes[-1]
    step_size = (ma20 - latest_close) / ForecastSettings.REVERSION_GAP_DIVISOR

    points = []
    price = latest_close
    for timestamp in forecast_times(last_time):
        price += step_size
        points.append(PredictionPoint(time=timestamp, value=price))

    return PredictionMethod(
        name=MEAN_REVERSION_NAME,
        description=MEAN_REVERSION_DESCRIPTION,
        points=tuple(points),
    )


def generate_predictions(
    bars: Sequence[PriceBar], ma20: float
) -> tuple[PredictionMethod, ...]:
    """
    Generate the three forecasts for a series.

    Requires at least 20 bars, which the analyzer's minimum length guarantees.

    Args:
        bars: Price series, oldest first
        ma20: Latest 20-period moving average

    Returns:
        Momentum decay, linear regression and mean reversion forecasts
    """
    closes = [bar.close for bar in bars]
    last_time = to_unix_seconds(bars[-1].time)

    return (
        momentum_decay_forecast(closes, last_time),
        linear_regression_forecast(closes, last_time),
        mean_reversion_forecast(closes, ma20, last_time),
    )
