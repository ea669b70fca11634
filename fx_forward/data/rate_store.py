"""Per-currency view over a raw observation collection."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import pandas as pd

from fx_forward.data.validator import coerce_observation
from fx_forward.models.errors import InvalidInput, InvalidRateValue
from fx_forward.models.observation import ParsedRate, RateObservation
from fx_forward.utils.date_utils import parse_date

_DECIMAL_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$', re.ASCII)


def iter_observations(records: Iterable[Any] | pd.DataFrame) -> Iterator[RateObservation]:
    """Yield validated observations from records, mappings or a DataFrame."""
    if records is None or isinstance(records, (str, bytes, Mapping)):
        raise InvalidInput('Observation records must be a collection of records.')
    if isinstance(records, pd.DataFrame):
        records = records.to_dict('records')
    try:
        iterator = iter(records)
    except TypeError as exc:
        raise InvalidInput('Observation records must be iterable.') from exc
    for record in iterator:
        yield coerce_observation(record)


def parse_rate(close_text: str) -> float:
    """Parse a close value, rejecting anything that is not a finite number."""
    text = close_text.strip()
    if not _DECIMAL_RE.match(text):
        raise InvalidRateValue(f'Close value `{close_text}` is not a number.')
    value = float(text)
    if not math.isfinite(value):
        raise InvalidRateValue(f'Close value `{close_text}` is not finite.')
    return value


def filter_and_sort(records: Iterable[Any] | pd.DataFrame, currency_pair: str) -> list[ParsedRate]:
    """Return one currency's observations as parsed rates in date order.

    Matching is exact and case-sensitive. Equal dates keep their input order.
    An empty result is returned as-is; callers decide what "no data" means.
    """
    parsed = [
        ParsedRate(date=parse_date(obs.date_text), rate=parse_rate(obs.close_text))
        for obs in iter_observations(records)
        if obs.currency_pair == currency_pair
    ]
    return sorted(parsed, key=lambda r: r.date)


def rates_frame(records: Iterable[Any] | pd.DataFrame, currency_pair: str) -> pd.DataFrame:
    """Tabular form of `filter_and_sort` with `date` and `rate` columns."""
    rates = filter_and_sort(records, currency_pair)
    return pd.DataFrame(
        {
            'date': pd.to_datetime(pd.Series([r.date for r in rates], dtype=object)),
            'rate': pd.Series([r.rate for r in rates], dtype=float),
        }
    )


def available_currencies(records: Iterable[Any] | pd.DataFrame) -> list[str]:
    """Distinct currency pairs present in the records, sorted."""
    return sorted({obs.currency_pair for obs in iter_observations(records)})
