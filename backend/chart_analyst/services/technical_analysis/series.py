"""Price series preparation helpers.

The analysis engine consumes a series as given. These helpers turn raw
market-data records (mappings or DataFrames) into a clean, ordered tuple of
PriceBar before analysis: incomplete bars are dropped, bars are sorted by
time, and duplicate timestamps are removed keeping the first occurrence.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime, time as dt_time
from typing import Any

import pandas as pd

from chart_analyst.core.exceptions import PriceDataValidationError

from .types import BarTime, PriceBar, UnixTime

logger = logging.getLogger(__name__)

_PRICE_FIELDS = ("open", "high", "low", "close")


def to_unix_seconds(value: BarTime) -> UnixTime:
    """Convert a bar time to Unix seconds.

    Args:
        value: Unix seconds, a date (UTC midnight), a datetime (naive values
            are treated as UTC) or an ISO-8601 date/datetime string

    Returns:
        Seconds since the epoch. Numeric input is returned unchanged, so
        fractional timestamps keep their fraction. Dates and datetimes give
        whole seconds.

    Raises:
        PriceDataValidationError: If the value cannot be interpreted as a time
    """
    if isinstance(value, bool):
        raise PriceDataValidationError(f"Invalid bar time: {value!r}")

    if isinstance(value, (int, float)):
        return value

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise PriceDataValidationError(f"Invalid bar time: {value!r}") from e

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return int(value.timestamp())

    if isinstance(value, date):
        return int(datetime.combine(value, dt_time.min, tzinfo=UTC).timestamp())

    raise PriceDataValidationError(f"Unsupported bar time type: {type(value).__name__}")


def _record_to_bar(record: PriceBar | Mapping[str, Any]) -> PriceBar | None:
    """Build a PriceBar from a record, or None when OHLC values are missing."""
    if isinstance(record, PriceBar):
        return record

    if record.get("time") is None:
        return None

    values = [record.get(name) for name in _PRICE_FIELDS]
    if any(v is None for v in values):
        return None

    volume = record.get("volume")
    try:
        open_price, high, low, close = (float(v) for v in values)
        return PriceBar(
            time=record["time"],
            open=open_price,
            high=high,
            low=low,
            close=close,
            volume=float(volume) if volume is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise PriceDataValidationError(f"Invalid price values in record: {record!r}") from e


def normalize_bars(records: Iterable[PriceBar | Mapping[str, Any]]) -> tuple[PriceBar, ...]:
    """Clean raw price records into an ordered, de-duplicated series.

    Args:
        records: PriceBar objects or mappings with time/open/high/low/close
            and optional volume keys

    Returns:
        Tuple of PriceBar sorted by time, oldest first

    Raises:
        PriceDataValidationError: If a time or price value is malformed
    """
    keyed: list[tuple[UnixTime, PriceBar]] = []
    dropped = 0

    for record in records:
        bar = _record_to_bar(record)
        if bar is None:
            dropped += 1
            continue
        keyed.append((to_unix_seconds(bar.time), bar))

    # Stable sort keeps the first of any duplicated timestamps in front
    keyed.sort(key=lambda item: item[0])

    seen: set[UnixTime] = set()
    bars: list[PriceBar] = []
    for timestamp, bar in keyed:
        if timestamp in seen:
            dropped += 1
            continue
        seen.add(timestamp)
        bars.append(bar)

    if dropped:
        logger.debug(f"Dropped {dropped} incomplete or duplicate price records")

    return tuple(bars)


def bars_from_dataframe(df: pd.DataFrame) -> tuple[PriceBar, ...]:
    """Convert an OHLCV DataFrame into a normalized price series.

    Accepts provider-style columns (Open, High, Low, Close, Volume) or their
    lowercase forms. Times come from a `time` or `date` column when present,
    otherwise from the index.

    Args:
        df: DataFrame with one row per bar

    Returns:
        Tuple of PriceBar sorted by time, oldest first

    Raises:
        PriceDataValidationError: If required price columns are missing
    """
    columns = {str(column).lower(): column for column in df.columns}

    missing = [name for name in _PRICE_FIELDS if name not in columns]
    if missing:
        raise PriceDataValidationError(f"Missing price columns: {', '.join(missing)}")

    if "time" in columns:
        times = df[columns["time"]].tolist()
    elif "date" in columns:
        times = df[columns["date"]].tolist()
    else:
        times = df.index.tolist()

    volumes = df[columns["volume"]] if "volume" in columns else None

    records = []
    for position, bar_time in enumerate(times):
        if isinstance(bar_time, pd.Timestamp):
            bar_time = bar_time.to_pydatetime()

        record: dict[str, Any] = {"time": bar_time}
        for name in _PRICE_FIELDS:
            value = df[columns[name]].iloc[position]
            record[name] = None if pd.isna(value) else float(value)

        if volumes is not None:
            volume = volumes.iloc[position]
            record["volume"] = None if pd.isna(volume) else float(volume)

        records.append(record)

    return normalize_bars(records)
