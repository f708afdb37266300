"""Trend analysis for Chart Analyst.

Classifies trend direction by comparing the short (20-period) and long
(50-period) simple moving averages.
"""

from enum import Enum


class TrendDirection(str, Enum):
    """Trend direction classification."""
    UP = "UP"
    DOWN = "DOWN"
    SIDEWAYS = "SIDEWAYS"


def detect_trend(
    ma_short: float,
    ma_long: float,
    allow_sideways: bool = False,
) -> TrendDirection:
    """Detect trend from the latest short and long moving averages.

    The comparison is strict and binary: UP when the short MA is above the
    long MA, DOWN otherwise (including when they are equal).

    Args:
        ma_short: Latest 20-period moving average
        ma_long: Latest 50-period moving average
        allow_sideways: Report SIDEWAYS instead of DOWN when both MAs are equal

    Returns:
        TrendDirection (UP, DOWN, or SIDEWAYS when allowed)
    """
    if ma_short > ma_long:
        return TrendDirection.UP
    if allow_sideways and ma_short == ma_long:
        return TrendDirection.SIDEWAYS
    return TrendDirection.DOWN
