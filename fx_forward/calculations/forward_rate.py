"""Forward-rate interpolation and hedge-cost calculations.

Two families of entry points are exposed:

- `forward_rate_details`, `hedge_cost_details` and `current_rate` raise a
  `ForwardRateError` subclass describing why no value could be produced.
- `forward_rate` and `hedge_cost` are total: any `ForwardRateError` is
  collapsed to `NO_RESULT`. `try_forward_rate` / `try_hedge_cost` return a
  `RateOutcome` for callers that want the failure kind without exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

import pandas as pd

from fx_forward.calculations.day_count import interpolation_weights
from fx_forward.calculations.outcome import RateOutcome
from fx_forward.data.rate_store import filter_and_sort
from fx_forward.models.errors import (
    ForwardRateError,
    InvalidInput,
    InvalidRateValue,
    NoDataForCurrency,
    NoPosteriorObservation,
    NoPriorObservation,
)
from fx_forward.models.observation import BracketResult, ForwardRateResult, ParsedRate
from fx_forward.utils.date_utils import to_timestamp
from fx_forward.utils.logging import get_logger

LOGGER = get_logger(__name__)

DateLike = pd.Timestamp | datetime | date | str


def _validate_records(records: Any) -> Sequence[Any] | pd.DataFrame:
    if records is None or isinstance(records, (str, bytes, Mapping)):
        raise InvalidInput('Invalid or empty data provided.')
    if isinstance(records, pd.DataFrame):
        if records.empty:
            raise InvalidInput('Invalid or empty data provided.')
        return records
    try:
        materialized = list(records)
    except TypeError as exc:
        raise InvalidInput('Invalid or empty data provided.') from exc
    if not materialized:
        raise InvalidInput('Invalid or empty data provided.')
    return materialized


def _validate_currency(currency_pair: Any) -> str:
    if not isinstance(currency_pair, str) or not currency_pair:
        raise InvalidInput('Invalid currency provided.')
    return currency_pair


def _sorted_rates(records: Sequence[Any] | pd.DataFrame, currency_pair: str) -> list[ParsedRate]:
    rates = filter_and_sort(records, currency_pair)
    if not rates:
        raise NoDataForCurrency(f'No data found for currency: {currency_pair}')
    return rates


def bracket(sorted_rates: Sequence[ParsedRate], target_date: DateLike) -> BracketResult:
    """Find the observations immediately around `target_date`.

    An observation dated exactly on the target counts as the prior one, so a
    target on the last available date has no posterior observation.
    """
    if not sorted_rates:
        raise NoDataForCurrency('No observations to bracket.')
    target = to_timestamp(target_date)

    prior: ParsedRate | None = None
    posterior: ParsedRate | None = None
    for obs in sorted_rates:
        if obs.date <= target:
            prior = obs
        else:
            posterior = obs
            break

    if prior is None:
        raise NoPriorObservation('No prior date found - target date is before all available dates.')
    if posterior is None:
        raise NoPosteriorObservation('No posterior date found - target date is after all available dates.')

    return BracketResult(
        prior_date=prior.date,
        next_date=posterior.date,
        prior_rate=prior.rate,
        next_rate=posterior.rate,
    )


def forward_rate_details(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> ForwardRateResult:
    """Interpolated forward rate with its bracket; raises on failure."""
    rows = _validate_records(records)
    currency = _validate_currency(currency_pair)
    target = to_timestamp(target_date)

    rates = _sorted_rates(rows, currency)
    br = bracket(rates, target)
    weight_prior, weight_next = interpolation_weights(br.prior_date, br.next_date, target)
    value = weight_prior * br.prior_rate + weight_next * br.next_rate
    return ForwardRateResult.from_bracket(value, br)


def current_rate(records: Iterable[Any] | pd.DataFrame, currency_pair: str) -> float:
    """Rate of the earliest observation for the currency in this data set."""
    rows = _validate_records(records)
    currency = _validate_currency(currency_pair)
    return _sorted_rates(rows, currency)[0].rate


def hedge_cost_details(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> float:
    """Proportional cost of locking the forward rate versus the current rate."""
    rows = _validate_records(records)
    forward = forward_rate_details(rows, currency_pair, target_date).forward_rate
    baseline = current_rate(rows, currency_pair)
    if baseline == 0:
        raise InvalidRateValue(f'Current rate for {currency_pair} is zero.')
    return forward / baseline - 1


def try_forward_rate(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> RateOutcome:
    try:
        return RateOutcome.success(forward_rate_details(records, currency_pair, target_date).forward_rate)
    except ForwardRateError as exc:
        LOGGER.debug('Forward rate unavailable for %s (%s): %s', currency_pair, exc.kind.value, exc)
        return RateOutcome.failure(exc)


def try_hedge_cost(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> RateOutcome:
    try:
        return RateOutcome.success(hedge_cost_details(records, currency_pair, target_date))
    except ForwardRateError as exc:
        LOGGER.debug('Hedge cost unavailable for %s (%s): %s', currency_pair, exc.kind.value, exc)
        return RateOutcome.failure(exc)


def forward_rate(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> float | None:
    """Forward rate, or `NO_RESULT` when it cannot be computed."""
    return try_forward_rate(records, currency_pair, target_date).to_nullable()


def hedge_cost(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    target_date: DateLike,
) -> float | None:
    """Hedge cost, or `NO_RESULT` when it cannot be computed."""
    return try_hedge_cost(records, currency_pair, target_date).to_nullable()
