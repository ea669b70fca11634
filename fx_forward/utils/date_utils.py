"""Date helpers shared by the rate store, engine and reporting layers."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from fx_forward.models.errors import InvalidDateFormat, InvalidInput


def to_timestamp(value: pd.Timestamp | datetime | date | str) -> pd.Timestamp:
    """Convert an input value to a timezone-naive pandas Timestamp.

    Strings are read as ISO dates (`2025-02-10`). Anything that does not
    resolve to a real point in time raises `InvalidInput`.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInput('Invalid target date provided.')
    if not isinstance(value, (pd.Timestamp, datetime, date, str)):
        raise InvalidInput(f'Invalid target date provided: {value!r}.')
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f'Invalid target date provided: {value!r}.') from exc
    if pd.isna(ts):
        raise InvalidInput('Invalid target date provided.')
    if ts.tz is not None:
        ts = ts.tz_localize(None)
    return ts


def parse_date(text: str) -> pd.Timestamp:
    """Parse a `DD/MM/YYYY` string into a midnight Timestamp."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidDateFormat('Invalid date string provided.')

    parts = text.strip().split('/')
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidDateFormat(f'Invalid date format `{text}`. Expected DD/MM/YYYY.')

    try:
        day, month, year = (int(p) for p in parts)
        return pd.Timestamp(year=year, month=month, day=day)
    except ValueError as exc:
        raise InvalidDateFormat(f'Invalid date values in `{text}`.') from exc


def format_date(value: pd.Timestamp | datetime | date) -> str:
    """Render a date back to the `DD/MM/YYYY` text form."""
    return pd.Timestamp(value).strftime('%d/%m/%Y')


def add_days(value: pd.Timestamp | datetime | date | str, days: int) -> pd.Timestamp:
    """Return `value` shifted by a whole number of calendar days."""
    return to_timestamp(value) + pd.Timedelta(days=int(days))
