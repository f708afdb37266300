"""Indicator snapshot and moving-average lines for a price series."""

from collections.abc import Sequence

import numpy as np

from chart_analyst.core.constants import AnalysisWindows
from chart_analyst.indicators.technical import (
    macd_oscillator,
    relative_strength_index,
    simple_moving_average,
)
from chart_analyst.indicators.trend import detect_trend

from .types import Indicators, LinePoint, MovingAverageLines, PriceBar


def moving_average_line(bars: Sequence[PriceBar], period: int) -> tuple[LinePoint, ...]:
    """Simple moving average of closes for every bar with a full window.

    The line starts at index period - 1, so it is period - 1 points shorter
    than the series, and empty when the series is shorter than period.
    """
    if len(bars) < period:
        return ()

    sma = simple_moving_average([bar.close for bar in bars], period)
    return tuple(
        LinePoint(time=bars[i].time, value=float(sma[i]))
        for i in range(period - 1, len(bars))
    )


def calculate_moving_average_lines(bars: Sequence[PriceBar]) -> MovingAverageLines:
    """MA20 and MA50 lines for charting."""
    return MovingAverageLines(
        ma20=moving_average_line(bars, AnalysisWindows.MA_SHORT_PERIOD),
        ma50=moving_average_line(bars, AnalysisWindows.MA_LONG_PERIOD),
    )


def calculate_indicators(
    bars: Sequence[PriceBar],
    ma_lines: MovingAverageLines,
    allow_sideways: bool = False,
) -> Indicators:
    """Compute the indicator snapshot for the latest bar.

    Args:
        bars: Price series, oldest first
        ma_lines: Moving average lines for the same series
        allow_sideways: Report SIDEWAYS trend when MA20 equals MA50

    Returns:
        Indicators with RSI(14), latest MA20/MA50, MACD proxy and trend
    """
    closes = np.array([bar.close for bar in bars], dtype=float)

    ma20 = ma_lines.ma20[-1].value if ma_lines.ma20 else 0.0
    ma50 = ma_lines.ma50[-1].value if ma_lines.ma50 else 0.0

    return Indicators(
        rsi=relative_strength_index(closes, AnalysisWindows.RSI_PERIOD),
        ma20=ma20,
        ma50=ma50,
        macd=macd_oscillator(closes),
        trend=detect_trend(ma20, ma50, allow_sideways=allow_sideways),
    )
