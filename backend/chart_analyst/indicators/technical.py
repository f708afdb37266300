"""Technical indicators implementation for Chart Analyst.

This module provides NumPy-based implementations of the indicators used by
the analysis engine. The MACD here is a simplified proxy: its "EMAs" are
plain means over the last 12/26 closes and its signal line is a fixed
fraction of the MACD value.

Functions degrade to neutral values (50 for RSI, 0 for means) instead of
raising when there is not enough data.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from chart_analyst.core.constants import AnalysisWindows, IndicatorDefaults


@dataclass(frozen=True)
class MacdValues:
    """Simplified MACD oscillator output."""
    value: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0


def simple_moving_average(
    prices: list[float] | NDArray[np.float64], period: int
) -> NDArray[np.float64]:
    """Calculate Simple Moving Average (SMA).

    The SMA is calculated as the arithmetic mean of the last n periods.
    Formula: SMA = (P1 + P2 + ... + Pn) / n

    Args:
        prices: Price data as list or numpy array
        period: Number of periods for the average (must be > 0)

    Returns:
        Array aligned with prices. NaN for the first period - 1 points.

    Raises:
        ValueError: If period <= 0

    Example:
        >>> prices = [1, 2, 3, 4, 5]
        >>> sma = simple_moving_average(prices, 3)
        >>> # Returns [NaN, NaN, 2.0, 3.0, 4.0]
    """
    if period <= 0:
        raise ValueError("Period must be greater than 0")

    prices_array = np.array(prices, dtype=float)

    sma = np.full(len(prices_array), np.nan)
    if len(prices_array) < period:
        return sma

    # Rolling sums via convolution, divided afterwards so flat series stay exact
    window_sums = np.convolve(prices_array, np.ones(period), mode="valid")
    sma[period - 1 :] = window_sums / period

    return sma


def mean_of_last(prices: list[float] | NDArray[np.float64], period: int) -> float:
    """Mean of the last `period` prices, or 0 when fewer are available."""
    prices_array = np.array(prices, dtype=float)
    if period <= 0 or len(prices_array) < period:
        return IndicatorDefaults.EMPTY_MEAN
    return float(np.mean(prices_array[-period:]))


def relative_strength_index(
    prices: list[float] | NDArray[np.float64],
    period: int = AnalysisWindows.RSI_PERIOD,
) -> float:
    """Calculate the latest Relative Strength Index (RSI).

    Uses the last period + 1 prices (period deltas). Gains and losses are
    summed over the window, not smoothed.
    Formula: RSI = 100 - (100 / (1 + RS))
    where RS = (gains / period) / (losses / period), with the denominator
    replaced by 1 when there are no losses.

    Args:
        prices: Price data as list or numpy array
        period: RSI calculation period (default 14)

    Returns:
        RSI value (0-100). 50 when fewer than `period` deltas exist or when
        price did not move at all over the window.
    """
    prices_array = np.array(prices, dtype=float)
    window = prices_array[-(period + 1):]

    if len(window) - 1 < period:
        return IndicatorDefaults.NEUTRAL_RSI

    delta = np.diff(window)
    gains = float(np.sum(delta[delta > 0]))
    losses = float(-np.sum(delta[delta < 0]))

    if gains == 0 and losses == 0:
        return IndicatorDefaults.NEUTRAL_RSI

    average_loss = losses / period
    rs = (gains / period) / (average_loss if average_loss != 0 else 1.0)
    return 100.0 - (100.0 / (1.0 + rs))


def macd_oscillator(
    prices: list[float] | NDArray[np.float64],
    fast_period: int = AnalysisWindows.MACD_FAST_PERIOD,
    slow_period: int = AnalysisWindows.MACD_SLOW_PERIOD,
) -> MacdValues:
    """Calculate the simplified MACD oscillator.

    value = mean(last fast_period) - mean(last slow_period)
    signal = 0.8 * value
    histogram = value - signal

    Args:
        prices: Closing prices, oldest first
        fast_period: Window for the fast mean (default 12)
        slow_period: Window for the slow mean (default 26)

    Returns:
        MacdValues with value, signal and histogram
    """
    value = mean_of_last(prices, fast_period) - mean_of_last(prices, slow_period)
    signal = value * IndicatorDefaults.MACD_SIGNAL_RATIO
    return MacdValues(value=value, signal=signal, histogram=value - signal)


def linear_regression(values: list[float] | NDArray[np.float64]) -> tuple[float, float]:
    """Ordinary least-squares fit of values against their index 0..n-1.

    slope = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
    intercept = (Sy - slope*Sx) / n

    Args:
        values: At least two observations

    Returns:
        Tuple of (slope, intercept)

    Raises:
        ValueError: If fewer than two values are given
    """
    y = np.array(values, dtype=float)
    n = len(y)
    if n < 2:
        raise ValueError("Need at least 2 values for a regression fit")

    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept
