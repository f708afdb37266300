"""Type definitions for the technical analysis engine."""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from chart_analyst.indicators.candlestick import (
    BarTime,
    Marker,
    MarkerPolarity,
    MarkerPosition,
    MarkerShape,
)
from chart_analyst.indicators.technical import MacdValues
from chart_analyst.indicators.trend import TrendDirection

# Unix seconds, fractional values kept as given
UnixTime = int | float


@dataclass(frozen=True)
class PriceBar:
    """One daily OHLC(V) record. Supplied by the caller, never mutated."""

    time: BarTime
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None


class Recommendation(str, Enum):
    """Discrete trade recommendation."""

    STRONG_BUY = "STRONG_BUY"
    BUY = "BUY"
    HOLD = "HOLD"
    SELL = "SELL"
    STRONG_SELL = "STRONG_SELL"  # only reachable with extended signals


@dataclass(frozen=True)
class Indicators:
    """Indicator snapshot for the latest bar.

    Attributes:
        rsi: Relative strength index (0-100)
        ma20: Latest 20-period simple moving average (0 if unavailable)
        ma50: Latest 50-period simple moving average (0 if unavailable)
        macd: Mean-based MACD proxy
        trend: MA20 vs MA50 trend direction
    """

    rsi: float
    ma20: float
    ma50: float
    macd: MacdValues
    trend: TrendDirection

    @classmethod
    def neutral(cls) -> "Indicators":
        """Indicators reported when there is not enough history."""
        return cls(
            rsi=50.0,
            ma20=0.0,
            ma50=0.0,
            macd=MacdValues(),
            trend=TrendDirection.SIDEWAYS,
        )


@dataclass(frozen=True)
class HorizonLevels:
    """Entry, target and stop prices for one trading horizon."""

    buy: float
    target: float
    stop_loss: float


@dataclass(frozen=True)
class TradeLevels:
    """Price bands for the three trading horizons."""

    scalping: HorizonLevels
    day_trade: HorizonLevels
    swing: HorizonLevels

    @classmethod
    def zero(cls) -> "TradeLevels":
        """All-zero levels used when no analysis was possible."""
        empty = HorizonLevels(buy=0.0, target=0.0, stop_loss=0.0)
        return cls(scalping=empty, day_trade=empty, swing=empty)


@dataclass(frozen=True)
class PredictionPoint:
    """A forecast value at a Unix timestamp (seconds)."""

    time: UnixTime
    value: float


@dataclass(frozen=True)
class PredictionMethod:
    """One named forecast path."""

    name: str
    description: str
    points: tuple[PredictionPoint, ...]


@dataclass(frozen=True)
class LinePoint:
    """A charting point keyed by the originating bar's time."""

    time: BarTime
    value: float


@dataclass(frozen=True)
class MovingAverageLines:
    """MA20 and MA50 lines over their full computable range."""

    ma20: tuple[LinePoint, ...] = ()
    ma50: tuple[LinePoint, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate output of one analysis run.

    Attributes:
        recommendation: Discrete recommendation derived from score
        patterns: Headline pattern names detected on the final bar
        markers: Every pattern marker detected in the scan window
        indicators: Indicator snapshot for the latest bar
        levels: Entry/target/stop bands per trading horizon
        predictions: Three independent 5-step forecasts
        advice: Short templated commentary
        ma_lines: Moving average lines for charting
        score: Integer score behind the recommendation
    """

    recommendation: Recommendation
    patterns: tuple[str, ...]
    markers: tuple[Marker, ...]
    indicators: Indicators
    levels: TradeLevels
    predictions: tuple[PredictionMethod, ...]
    advice: str
    ma_lines: MovingAverageLines = field(default_factory=MovingAverageLines)
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain JSON-compatible data."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
