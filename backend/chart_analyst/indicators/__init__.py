"""Technical indicators package for Chart Analyst.

This package provides the indicator and pattern building blocks of the
analysis engine.

Available indicators:
- Simple Moving Average (SMA)
- Relative Strength Index (RSI)
- Simplified MACD oscillator
- Linear regression fit
- Candlestick reversal and doji detection
- MA20/MA50 trend
"""

from .technical import MacdValues
from .technical import linear_regression
from .technical import macd_oscillator
from .technical import mean_of_last
from .technical import relative_strength_index
from .technical import simple_moving_average
from .candlestick import (
    BarTime,
    CandleGeometry,
    CandleScan,
    Marker,
    MarkerPolarity,
    MarkerPosition,
    MarkerShape,
    is_bearish_reversal,
    is_bullish_reversal,
    is_doji,
    measure_candle,
    scan_candles,
)
from .trend import TrendDirection, detect_trend

__all__ = [
    # Technical indicators
    "MacdValues",
    "linear_regression",
    "macd_oscillator",
    "mean_of_last",
    "relative_strength_index",
    "simple_moving_average",
    # Candlestick patterns
    "BarTime",
    "CandleGeometry",
    "CandleScan",
    "Marker",
    "MarkerPolarity",
    "MarkerPosition",
    "MarkerShape",
    "is_bearish_reversal",
    "is_bullish_reversal",
    "is_doji",
    "measure_candle",
    "scan_candles",
    # Trend
    "TrendDirection",
    "detect_trend",
]
