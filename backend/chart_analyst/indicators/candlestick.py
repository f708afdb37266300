"""Candlestick pattern detection for Chart Analyst.

Scans the most recent candles for reversal and indecision patterns:
- Bullish reversal (hammer geometry or bullish engulfing)
- Bearish reversal (shooting star geometry or bearish engulfing)
- Doji

The two reversal checks are independent and may both fire on one candle.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from chart_analyst.core.constants import (
    BEARISH_REVERSAL_LABEL,
    BEARISH_REVERSAL_PATTERN,
    BULLISH_REVERSAL_LABEL,
    BULLISH_REVERSAL_PATTERN,
    DOJI_LABEL,
    AnalysisWindows,
    PatternThresholds,
)

# Calendar date, ISO string, datetime or Unix timestamp in seconds
BarTime = int | float | str | date | datetime


class MarkerPosition(str, Enum):
    """Where a marker sits relative to its candle."""
    ABOVE = "above"
    BELOW = "below"
    WITHIN = "within"


class MarkerPolarity(str, Enum):
    """Signal polarity of a marker."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class MarkerShape(str, Enum):
    """Signal type tag of a marker."""
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    CIRCLE = "circle"


@dataclass(frozen=True)
class Marker:
    """A pattern detected on one candle."""
    time: BarTime
    position: MarkerPosition
    polarity: MarkerPolarity
    shape: MarkerShape
    label: str


@dataclass(frozen=True)
class CandleGeometry:
    """Absolute body and wick sizes of a candle.

    Attributes:
        body: |close - open|
        upper_wick: high - max(open, close)
        lower_wick: min(open, close) - low
        total_range: high - low
    """
    body: float
    upper_wick: float
    lower_wick: float
    total_range: float


@dataclass(frozen=True)
class CandleScan:
    """Result of scanning a price series for candlestick patterns.

    Attributes:
        markers: Every marker in the scan window, oldest candle first
        latest_patterns: Reversal pattern names detected on the final candle
    """
    markers: tuple[Marker, ...]
    latest_patterns: tuple[str, ...]


def measure_candle(open_price: float, high: float, low: float, close: float) -> CandleGeometry:
    """Measure body and wicks of a single candle."""
    return CandleGeometry(
        body=abs(close - open_price),
        upper_wick=high - max(open_price, close),
        lower_wick=min(open_price, close) - low,
        total_range=high - low,
    )


def is_bullish_reversal(
    open_price: float,
    high: float,
    low: float,
    close: float,
    prev_open: float,
    prev_close: float,
) -> bool:
    """Detect a hammer-shaped candle or a bullish engulfing pair.

    Hammer: lower wick longer than twice the body and upper wick shorter than
    half the body. Engulfing: red candle followed by a green candle that opens
    at or below the previous close and closes at or above the previous open.
    """
    candle = measure_candle(open_price, high, low, close)

    is_hammer = (
        candle.lower_wick > candle.body * PatternThresholds.REVERSAL_WICK_TO_BODY
        and candle.upper_wick < candle.body * PatternThresholds.REVERSAL_OPPOSITE_WICK_TO_BODY
    )
    is_engulfing = (
        close > open_price
        and prev_close < prev_open
        and open_price <= prev_close
        and close >= prev_open
    )
    return is_hammer or is_engulfing


def is_bearish_reversal(
    open_price: float,
    high: float,
    low: float,
    close: float,
    prev_open: float,
    prev_close: float,
) -> bool:
    """Detect a shooting-star-shaped candle or a bearish engulfing pair."""
    candle = measure_candle(open_price, high, low, close)

    is_shooting_star = (
        candle.upper_wick > candle.body * PatternThresholds.REVERSAL_WICK_TO_BODY
        and candle.lower_wick < candle.body * PatternThresholds.REVERSAL_OPPOSITE_WICK_TO_BODY
    )
    is_engulfing = (
        close < open_price
        and prev_close > prev_open
        and open_price >= prev_close
        and close <= prev_open
    )
    return is_shooting_star or is_engulfing


def is_doji(open_price: float, high: float, low: float, close: float) -> bool:
    """Detect a doji: body strictly below 10% of the candle's range.

    A flat candle (high == low) is never a doji since 0 < 0 is false.
    """
    candle = measure_candle(open_price, high, low, close)
    return candle.body < candle.total_range * PatternThresholds.DOJI_BODY_TO_RANGE


def scan_candles(
    times: Sequence[BarTime],
    opens: list[float] | NDArray[np.float64],
    highs: list[float] | NDArray[np.float64],
    lows: list[float] | NDArray[np.float64],
    closes: list[float] | NDArray[np.float64],
    window: int = AnalysisWindows.PATTERN_SCAN_BARS,
) -> CandleScan:
    """
    Scan the most recent candles and emit pattern markers.

    Scans the last `window` candles but never the first two candles of the
    series, so at most min(window, len - 2) candles are examined.

    Args:
        times: Candle timestamps, copied onto markers
        opens: Array of opening prices
        highs: Array of high prices
        lows: Array of low prices
        closes: Array of closing prices
        window: Number of most recent candles to scan

    Returns:
        CandleScan with all markers and the final candle's pattern names
    """
    opens = np.array(opens, dtype=float)
    highs = np.array(highs, dtype=float)
    lows = np.array(lows, dtype=float)
    closes = np.array(closes, dtype=float)

    count = len(closes)
    last_index = count - 1
    start = max(AnalysisWindows.PATTERN_SCAN_START, count - window)

    markers: list[Marker] = []
    latest_patterns: list[str] = []

    for i in range(start, count):
        o, h, l, c = float(opens[i]), float(highs[i]), float(lows[i]), float(closes[i])
        prev_open, prev_close = float(opens[i - 1]), float(closes[i - 1])

        if is_bullish_reversal(o, h, l, c, prev_open, prev_close):
            markers.append(Marker(
                time=times[i],
                position=MarkerPosition.BELOW,
                polarity=MarkerPolarity.BULLISH,
                shape=MarkerShape.ARROW_UP,
                label=BULLISH_REVERSAL_LABEL,
            ))
            if i == last_index:
                latest_patterns.append(BULLISH_REVERSAL_PATTERN)

        if is_bearish_reversal(o, h, l, c, prev_open, prev_close):
            markers.append(Marker(
                time=times[i],
                position=MarkerPosition.ABOVE,
                polarity=MarkerPolarity.BEARISH,
                shape=MarkerShape.ARROW_DOWN,
                label=BEARISH_REVERSAL_LABEL,
            ))
            if i == last_index:
                latest_patterns.append(BEARISH_REVERSAL_PATTERN)

        if is_doji(o, h, l, c):
            markers.append(Marker(
                time=times[i],
                position=MarkerPosition.WITHIN,
                polarity=MarkerPolarity.NEUTRAL,
                shape=MarkerShape.CIRCLE,
                label=DOJI_LABEL,
            ))

    return CandleScan(markers=tuple(markers), latest_patterns=tuple(latest_patterns))
