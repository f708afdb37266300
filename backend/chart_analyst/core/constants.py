"""Fixed constants for the technical analysis engine.

These values define the heuristics of the engine. They are not tunable
through settings: recommendation scoring and forecasts are calibrated
against exactly these numbers.
"""


class AnalysisWindows:
    """Lookback lengths used across the analysis pipeline."""

    MIN_BARS = 50
    """
    Minimum series length for a full analysis.
    Shorter series return the insufficient-data result.
    """

    PATTERN_SCAN_BARS = 60
    """Number of most recent bars scanned for candlestick patterns."""

    PATTERN_SCAN_START = 2
    """First bar index eligible for pattern scanning."""

    MA_SHORT_PERIOD = 20
    MA_LONG_PERIOD = 50

    RSI_PERIOD = 14

    MACD_FAST_PERIOD = 12
    MACD_SLOW_PERIOD = 26


class PatternThresholds:
    """Candle geometry ratios for reversal and doji detection."""

    # Hammer / shooting star: long wick > 2x body, opposite wick < 0.5x body
    REVERSAL_WICK_TO_BODY = 2.0
    REVERSAL_OPPOSITE_WICK_TO_BODY = 0.5

    DOJI_BODY_TO_RANGE = 0.1
    """Body must be strictly below 10% of the high-low range."""


class IndicatorDefaults:
    """Neutral values returned when a lookback cannot be satisfied."""

    NEUTRAL_RSI = 50.0
    EMPTY_MEAN = 0.0

    MACD_SIGNAL_RATIO = 0.8
    """Signal line approximated as a fixed fraction of the MACD value."""


class ScoreThresholds:
    """RSI bands and score cut-offs for the recommendation mapping."""

    RSI_OVERSOLD = 35.0
    RSI_OVERBOUGHT = 70.0
    OVERBOUGHT_PENALTY = 2

    STRONG_BUY_MIN_SCORE = 3
    BUY_MIN_SCORE = 1
    SELL_MAX_SCORE = -2


class TradeLevelMultipliers:
    """Multipliers applied to the latest close, as (buy, target, stop_loss)."""

    SCALPING = (0.995, 1.015, 0.99)
    DAY_TRADE = (0.985, 1.04, 0.97)
    SWING = (0.96, 1.12, 0.93)


class ForecastSettings:
    """Constants for the forward price projections."""

    STEPS = 5
    STEP_SECONDS = 86400

    MOMENTUM_LOOKBACK = 10
    MOMENTUM_DECAY_PER_STEP = 0.1

    REGRESSION_LOOKBACK = 20

    # Each step moves price by gap / 10 toward MA20
    REVERSION_GAP_DIVISOR = 10


INSUFFICIENT_DATA_ADVICE = "Need at least 50 points of data for accurate analysis."

BULLISH_REVERSAL_LABEL = "BULLISH REV"
BEARISH_REVERSAL_LABEL = "BEARISH REV"
DOJI_LABEL = "DOJI"

BULLISH_REVERSAL_PATTERN = "Bullish Reversal"
BEARISH_REVERSAL_PATTERN = "Bearish Reversal"

MOMENTUM_DECAY_NAME = "Momentum Decay"
MOMENTUM_DECAY_DESCRIPTION = (
    "Projects the average daily move of the last 10 days forward, slowing it "
    "down a little each day. Suited to short-term trends."
)

LINEAR_REGRESSION_NAME = "Linear Regression"
LINEAR_REGRESSION_DESCRIPTION = (
    "Extends the statistical best-fit line of the last 20 days to show the "
    "direction implied by recent price action."
)

MEAN_REVERSION_NAME = "Mean Reversion"
MEAN_REVERSION_DESCRIPTION = (
    "Assumes price drifts back toward its 20-day moving average after "
    "moving too far above or below it."
)
