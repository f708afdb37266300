"""Recommendation scoring and trade levels.

The score is a small integer built from four bullish checks and one
overbought penalty:

    +1 MACD histogram > 0
    +1 trend is UP
    +1 latest close > MA20
    +1 RSI < 35 (oversold)
    -2 RSI > 70 (overbought)

The default mapping never yields STRONG_SELL. The extended mapping adds the
SELL/STRONG_SELL bands below zero.
"""

from chart_analyst.core.constants import ScoreThresholds, TradeLevelMultipliers
from chart_analyst.indicators.trend import TrendDirection

from .types import HorizonLevels, Indicators, Recommendation, TradeLevels


def score_indicators(indicators: Indicators, latest_close: float) -> int:
    """Accumulate the recommendation score for the latest bar."""
    score = 0
    if indicators.macd.histogram > 0:
        score += 1
    if indicators.trend == TrendDirection.UP:
        score += 1
    if latest_close > indicators.ma20:
        score += 1
    if indicators.rsi < ScoreThresholds.RSI_OVERSOLD:
        score += 1
    if indicators.rsi > ScoreThresholds.RSI_OVERBOUGHT:
        score -= ScoreThresholds.OVERBOUGHT_PENALTY
    return score


def map_score_to_recommendation(score: int, extended: bool = False) -> Recommendation:
    """Map a score to a recommendation, first matching band from the top.

    Args:
        score: Integer score from score_indicators
        extended: Use the extended mapping (0 HOLD, -1 SELL, <= -2 STRONG_SELL)

    Returns:
        Recommendation for the score
    """
    if score >= ScoreThresholds.STRONG_BUY_MIN_SCORE:
        return Recommendation.STRONG_BUY
    if score >= ScoreThresholds.BUY_MIN_SCORE:
        return Recommendation.BUY

    if extended:
        if score <= ScoreThresholds.SELL_MAX_SCORE:
            return Recommendation.STRONG_SELL
        if score < 0:
            return Recommendation.SELL
        return Recommendation.HOLD

    if score <= ScoreThresholds.SELL_MAX_SCORE:
        return Recommendation.SELL
    return Recommendation.HOLD


def _horizon(latest_close: float, multipliers: tuple[float, float, float]) -> HorizonLevels:
    buy, target, stop_loss = multipliers
    return HorizonLevels(
        buy=latest_close * buy,
        target=latest_close * target,
        stop_loss=latest_close * stop_loss,
    )


def calculate_trade_levels(latest_close: float) -> TradeLevels:
    """Derive fixed-percentage entry/target/stop bands from the latest close."""
    return TradeLevels(
        scalping=_horizon(latest_close, TradeLevelMultipliers.SCALPING),
        day_trade=_horizon(latest_close, TradeLevelMultipliers.DAY_TRADE),
        swing=_horizon(latest_close, TradeLevelMultipliers.SWING),
    )


def build_advice(indicators: Indicators, latest_close: float) -> str:
    """Two fixed phrases: price vs MA20 and MACD histogram sign."""
    side = "above" if latest_close > indicators.ma20 else "below"
    momentum = "Positive" if indicators.macd.histogram > 0 else "Negative"
    return f"Price is {side} MA20. MACD is {momentum}. "
