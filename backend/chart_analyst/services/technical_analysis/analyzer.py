"""Technical analysis pipeline.

analyze() runs the four stages over one price series:

1. Candlestick pattern scan over the most recent bars
2. Indicators (MA20/MA50 lines, RSI, MACD proxy, trend)
3. Recommendation score, trade levels and advice
4. Three five-day price projections

Every stage is a pure function of the series; nothing is cached between calls.
"""

from collections.abc import Sequence

from chart_analyst.core.constants import INSUFFICIENT_DATA_ADVICE, AnalysisWindows
from chart_analyst.indicators.candlestick import scan_candles
from chart_analyst.utils.structured_logging import get_logger

from .indicator_calculator import calculate_indicators, calculate_moving_average_lines
from .predictions import generate_predictions
from .scoring import (
    build_advice,
    calculate_trade_levels,
    map_score_to_recommendation,
    score_indicators,
)
from .types import (
    AnalysisResult,
    Indicators,
    MovingAverageLines,
    PriceBar,
    Recommendation,
    TradeLevels,
)

logger = get_logger(__name__)


def insufficient_data_result() -> AnalysisResult:
    """Fixed result returned for series shorter than the minimum length."""
    return AnalysisResult(
        recommendation=Recommendation.HOLD,
        patterns=(),
        markers=(),
        indicators=Indicators.neutral(),
        levels=TradeLevels.zero(),
        predictions=(),
        advice=INSUFFICIENT_DATA_ADVICE,
        ma_lines=MovingAverageLines(),
        score=0,
    )


def analyze(bars: Sequence[PriceBar], *, extended_signals: bool = False) -> AnalysisResult:
    """
    Analyze a daily price series for one security.

    Args:
        bars: Price bars, oldest first
        extended_signals: Use the extended recommendation mapping and allow a
            SIDEWAYS trend when MA20 equals MA50

    Returns:
        AnalysisResult. Series shorter than 50 bars get the insufficient-data
        result instead of an error.
    """
    if len(bars) < AnalysisWindows.MIN_BARS:
        logger.info(
            "Insufficient price history for analysis",
            bar_count=len(bars),
            min_bars=AnalysisWindows.MIN_BARS,
        )
        return insufficient_data_result()

    scan = scan_candles(
        [bar.time for bar in bars],
        [bar.open for bar in bars],
        [bar.high for bar in bars],
        [bar.low for bar in bars],
        [bar.close for bar in bars],
    )

    ma_lines = calculate_moving_average_lines(bars)
    indicators = calculate_indicators(bars, ma_lines, allow_sideways=extended_signals)

    latest_close = bars[-1].close
    score = score_indicators(indicators, latest_close)
    recommendation = map_score_to_recommendation(score, extended=extended_signals)

    result = AnalysisResult(
        recommendation=recommendation,
        patterns=scan.latest_patterns,
        markers=scan.markers,
        indicators=indicators,
        levels=calculate_trade_levels(latest_close),
        predictions=generate_predictions(bars, indicators.ma20),
        advice=build_advice(indicators, latest_close),
        ma_lines=ma_lines,
        score=score,
    )

    logger.debug(
        "Analysis complete",
        bar_count=len(bars),
        score=score,
        recommendation=recommendation.value,
        trend=indicators.trend.value,
        marker_count=len(scan.markers),
    )

    return result
