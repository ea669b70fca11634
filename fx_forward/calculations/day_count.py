"""Day-count utilities."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from fx_forward.models.errors import InvalidBracket

SECONDS_PER_DAY = 24 * 60 * 60


def _to_ts(value: pd.Timestamp | datetime | date | str) -> pd.Timestamp:
    return pd.Timestamp(value)


def days_between(
    start_date: pd.Timestamp | datetime | date | str,
    end_date: pd.Timestamp | datetime | date | str,
) -> float:
    """Elapsed days from start to end, keeping any fractional part."""
    delta = _to_ts(end_date) - _to_ts(start_date)
    return delta.total_seconds() / SECONDS_PER_DAY


def interpolation_weights(
    prior_date: pd.Timestamp | datetime | date | str,
    next_date: pd.Timestamp | datetime | date | str,
    target_date: pd.Timestamp | datetime | date | str,
) -> tuple[float, float]:
    """Linear weights of the prior and next observations for a target date.

    The weights always sum to one. A zero-width bracket has no defined
    weights and raises `InvalidBracket`.
    """
    total_span = days_between(prior_date, next_date)
    if total_span == 0:
        raise InvalidBracket(
            f'Prior and next observation share the date {_to_ts(prior_date).date().isoformat()}.'
        )
    elapsed = days_between(prior_date, target_date)
    return (total_span - elapsed) / total_span, elapsed / total_span
