"""Technical analysis and price-projection engine."""

from .analyzer import analyze, insufficient_data_result
from .series import bars_from_dataframe, normalize_bars, to_unix_seconds
from .types import (
    AnalysisResult,
    HorizonLevels,
    Indicators,
    LinePoint,
    MacdValues,
    Marker,
    MarkerPolarity,
    MarkerPosition,
    MarkerShape,
    MovingAverageLines,
    PredictionMethod,
    PredictionPoint,
    PriceBar,
    Recommendation,
    TradeLevels,
)

__all__ = [
    "analyze",
    "insufficient_data_result",
    "bars_from_dataframe",
    "normalize_bars",
    "to_unix_seconds",
    "AnalysisResult",
    "HorizonLevels",
    "Indicators",
    "LinePoint",
    "MacdValues",
    "Marker",
    "MarkerPolarity",
    "MarkerPosition",
    "MarkerShape",
    "MovingAverageLines",
    "PredictionMethod",
    "PredictionPoint",
    "PriceBar",
    "Recommendation",
    "TradeLevels",
]
