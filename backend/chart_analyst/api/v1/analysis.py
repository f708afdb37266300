"""Technical analysis endpoint for caller-supplied price history."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from chart_analyst.core.config import Settings, get_settings
from chart_analyst.schemas.analysis import AnalysisRequest, AnalysisResponse
from chart_analyst.services.technical_analysis import analyze, normalize_bars
from chart_analyst.utils.structured_logging import analysis_log_context

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/analysis",
    response_model=AnalysisResponse,
    summary="Analyze Price History",
    description="Run candlestick pattern detection, indicators, recommendation scoring, "
    "trade levels and three 5-day price projections over a daily price series. "
    "Bars are sorted by time and duplicate timestamps are dropped before analysis. "
    "Series shorter than 50 bars return a neutral HOLD result.",
    operation_id="analyze_price_history",
    responses={
        400: {"description": "Invalid bar times or too many bars"},
        422: {"description": "Malformed request body"},
        500: {"description": "Internal Server Error"},
    },
)
async def analyze_price_history(
    request: AnalysisRequest,
    settings: Settings = Depends(get_settings),
) -> AnalysisResponse:
    """Analyze a daily price series.

    Args:
        request: Symbol and price bars
        settings: Application settings dependency

    Returns:
        AnalysisResponse: Patterns, indicators, recommendation, levels and forecasts

    Raises:
        HTTPException: If the request holds more bars than allowed
        PriceDataValidationError: If a bar time cannot be interpreted
    """
    if len(request.bars) > settings.max_bars_per_request:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many bars: {len(request.bars)} (maximum {settings.max_bars_per_request})",
        )

    # PriceDataValidationError is mapped to 400 by the application handler
    bars = normalize_bars(bar.to_price_bar() for bar in request.bars)

    logger.info(f"Analyzing {len(bars)} bars for {request.symbol or 'unnamed series'}")

    with analysis_log_context(request.symbol, len(bars)):
        result = analyze(bars, extended_signals=settings.extended_signals)
    return AnalysisResponse.from_result(result, symbol=request.symbol, bar_count=len(bars))
