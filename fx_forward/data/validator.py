"""Input validation for rate observation records and tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from fx_forward.models.errors import InvalidInput
from fx_forward.models.observation import RateObservation

OBSERVATION_REQUIRED_COLUMNS = ['currency_pair', 'date_text', 'close_text']

# Source headers are matched after strip().lower(), so the legacy
# `"Date "` export key resolves to `date`.
OBSERVATION_COLUMN_MAP = {
    'currency': 'currency_pair',
    'currency_pair': 'currency_pair',
    'currencypair': 'currency_pair',
    'date': 'date_text',
    'date_text': 'date_text',
    'close': 'close_text',
    'close_text': 'close_text',
}


def normalize_key(key: object) -> str | None:
    """Map a raw field/column name onto its observation field, if any."""
    return OBSERVATION_COLUMN_MAP.get(str(key).strip().lower())


def _missing_columns(df: pd.DataFrame, required: list[str]) -> list[str]:
    cols = set(df.columns)
    return [col for col in required if col not in cols]


def coerce_observation(record: Any) -> RateObservation:
    """Validate one raw record and return it as a `RateObservation`."""
    if isinstance(record, RateObservation):
        return record
    if not isinstance(record, Mapping):
        raise InvalidInput(f'Unsupported observation record type: {type(record).__name__}.')

    fields: dict[str, Any] = {}
    for key, value in record.items():
        name = normalize_key(key)
        if name is not None:
            fields[name] = value

    missing = [col for col in OBSERVATION_REQUIRED_COLUMNS if col not in fields]
    if missing:
        raise InvalidInput(f'Observation record is missing fields: {missing}')
    for name in OBSERVATION_REQUIRED_COLUMNS:
        if not isinstance(fields[name], str):
            raise InvalidInput(f'Observation field {name} must be a string, got {fields[name]!r}.')

    return RateObservation(
        currency_pair=fields['currency_pair'],
        date_text=fields['date_text'],
        close_text=fields['close_text'],
    )


def validate_observations(df: pd.DataFrame) -> list[str]:
    """Validate a normalized observation table and return non-fatal warnings."""
    missing = _missing_columns(df, OBSERVATION_REQUIRED_COLUMNS)
    if missing:
        raise ValueError(f'Missing required observation columns: {missing}')

    warnings: list[str] = []

    if df[OBSERVATION_REQUIRED_COLUMNS].isna().any().any():
        raise ValueError('Observations contain nulls in required columns.')

    dupes = int(df.duplicated(subset=['currency_pair', 'date_text']).sum())
    if dupes:
        warnings.append(f'{dupes} duplicate observations found (currency_pair, date_text).')

    closes = pd.to_numeric(df['close_text'], errors='coerce')
    bad_close = int(closes.isna().sum())
    if bad_close:
        warnings.append(f'{bad_close} observations have a non-numeric close value.')

    return warnings
