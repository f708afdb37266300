"""Schemas for the technical analysis API."""

from typing import Any

from pydantic import Field, field_validator, model_validator

from chart_analyst.schemas.base import StrictBaseModel
from chart_analyst.services.technical_analysis import AnalysisResult, PriceBar

# Unix seconds or an ISO-8601 date/datetime string
TimeValue = int | float | str

# Upper bound on prices so window sums stay finite
MAX_PRICE = 1e12


class PriceBarIn(StrictBaseModel):
    """One daily OHLC(V) bar supplied by the caller."""

    time: TimeValue = Field(..., description="Unix timestamp (seconds) or ISO date")
    open: float = Field(..., gt=0, lt=MAX_PRICE, description="Opening price")
    high: float = Field(..., gt=0, lt=MAX_PRICE, description="High price")
    low: float = Field(..., gt=0, lt=MAX_PRICE, description="Low price")
    close: float = Field(..., gt=0, lt=MAX_PRICE, description="Closing price")
    volume: float | None = Field(None, ge=0, description="Traded volume")

    @model_validator(mode="after")
    def check_price_range(self) -> "PriceBarIn":
        """Ensure low <= open, close <= high."""
        if self.low > self.high:
            raise ValueError("low must not exceed high")
        for name in ("open", "close"):
            value = getattr(self, name)
            if not self.low <= value <= self.high:
                raise ValueError(f"{name} must lie between low and high")
        return self

    def to_price_bar(self) -> PriceBar:
        """Convert to the engine's PriceBar."""
        return PriceBar(
            time=self.time,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            volume=self.volume,
        )


class AnalysisRequest(StrictBaseModel):
    """Request body for the analysis endpoint."""

    symbol: str | None = Field(None, max_length=10, description="Optional ticker symbol")
    bars: list[PriceBarIn] = Field(..., description="Daily price bars, any order")

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, value: str | None) -> str | None:
        """Uppercase and strip the symbol; allow A-Z, 0-9 and . - ^ characters."""
        if value is None:
            return None
        value = value.upper().strip()
        cleaned = value.replace("^", "").replace(".", "").replace("-", "")
        if not cleaned.isalnum():
            raise ValueError(f"Invalid symbol format: {value}")
        return value

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "symbol": "AAPL",
                    "bars": [
                        {
                            "time": 1735862400,
                            "open": 243.36,
                            "high": 244.18,
                            "low": 241.89,
                            "close": 243.85,
                            "volume": 40244100,
                        }
                    ],
                }
            ]
        }
    }


class MarkerOut(StrictBaseModel):
    """Candlestick pattern marker."""

    time: TimeValue
    position: str = Field(..., description="above, below or within the bar")
    polarity: str = Field(..., description="bullish, bearish or neutral")
    shape: str = Field(..., description="arrow_up, arrow_down or circle")
    label: str


class MacdOut(StrictBaseModel):
    """Simplified MACD oscillator values."""

    value: float
    signal: float
    histogram: float


class IndicatorsOut(StrictBaseModel):
    """Indicator snapshot for the latest bar."""

    rsi: float = Field(..., ge=0, le=100)
    ma20: float
    ma50: float
    macd: MacdOut
    trend: str = Field(..., description="UP, DOWN or SIDEWAYS")


class HorizonLevelsOut(StrictBaseModel):
    """Entry, target and stop prices for one horizon."""

    buy: float
    target: float
    stop_loss: float


class TradeLevelsOut(StrictBaseModel):
    """Price bands per trading horizon."""

    scalping: HorizonLevelsOut
    day_trade: HorizonLevelsOut
    swing: HorizonLevelsOut


class PredictionPointOut(StrictBaseModel):
    """Forecast value at a Unix timestamp."""

    time: int | float
    value: float


class PredictionMethodOut(StrictBaseModel):
    """Named forecast path."""

    name: str
    description: str
    points: list[PredictionPointOut]


class LinePointOut(StrictBaseModel):
    """Moving average point."""

    time: TimeValue
    value: float


class MovingAverageLinesOut(StrictBaseModel):
    """MA20 and MA50 lines for charting."""

    ma20: list[LinePointOut]
    ma50: list[LinePointOut]


class AnalysisResponse(StrictBaseModel):
    """Response of the analysis endpoint."""

    symbol: str | None = Field(None, description="Ticker symbol, echoed from the request")
    bar_count: int = Field(..., description="Number of bars analyzed after normalization")
    recommendation: str = Field(
        ..., description="STRONG_BUY, BUY, HOLD, SELL or STRONG_SELL"
    )
    score: int = Field(..., description="Integer score behind the recommendation")
    patterns: list[str] = Field(..., description="Patterns detected on the final bar")
    markers: list[MarkerOut]
    indicators: IndicatorsOut
    levels: TradeLevelsOut
    predictions: list[PredictionMethodOut]
    advice: str
    ma_lines: MovingAverageLinesOut

    @classmethod
    def from_result(
        cls, result: AnalysisResult, symbol: str | None, bar_count: int
    ) -> "AnalysisResponse":
        """Build the response from an engine result."""
        data: dict[str, Any] = result.to_dict()
        return cls.model_validate({"symbol": symbol, "bar_count": bar_count, **data})
