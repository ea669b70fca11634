"""JSON/CSV/Excel loader and schema normalization for rate observations."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pandas as pd

from fx_forward.data.validator import (
    OBSERVATION_REQUIRED_COLUMNS,
    normalize_key,
    validate_observations,
)
from fx_forward.models.observation import RateObservation
from fx_forward.utils.date_utils import format_date
from fx_forward.utils.logging import get_logger

LOGGER = get_logger(__name__)

SUPPORTED_SUFFIXES = ('.json', '.csv', '.xlsx')


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    renamed = {}
    for col in out.columns:
        target = normalize_key(col)
        renamed[col] = target if target is not None else str(col).strip().lower()
    out.columns = [renamed[c] for c in out.columns]
    return out


def _stringify_cell(value: object) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return format_date(value)
    return str(value).strip()


def _read_raw(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == '.json':
        return pd.read_json(path, orient='records', dtype=False, convert_dates=False)
    if suffix == '.csv':
        return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[''])
    if suffix == '.xlsx':
        return pd.read_excel(path)
    raise ValueError(f'Unsupported observation file type `{suffix}`; expected one of {SUPPORTED_SUFFIXES}.')


def load_observations_frame(path: str | Path) -> pd.DataFrame:
    """Load, normalize, and validate an observation table from disk."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    raw = _read_raw(p)
    df = _normalize_columns(raw)
    missing = [col for col in OBSERVATION_REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f'Missing required observation columns: {missing}')

    df = df[OBSERVATION_REQUIRED_COLUMNS].copy()
    for col in OBSERVATION_REQUIRED_COLUMNS:
        df[col] = df[col].map(_stringify_cell).astype(object)

    blank_mask = df.isna().any(axis=1) | (df == '').any(axis=1)
    if blank_mask.any():
        LOGGER.warning(
            '%s observations have blank required fields and were excluded.',
            int(blank_mask.sum()),
        )
        df = df.loc[~blank_mask].copy()

    for warning in validate_observations(df):
        LOGGER.warning(warning)

    LOGGER.info('Loaded %s rate observations from %s.', len(df), p.name)
    return df.reset_index(drop=True)


def load_observations(path: str | Path) -> list[RateObservation]:
    """Load observation records from a `.json`, `.csv` or `.xlsx` file."""
    df = load_observations_frame(path)
    return [
        RateObservation(
            currency_pair=row.currency_pair,
            date_text=row.date_text,
            close_text=row.close_text,
        )
        for row in df.itertuples(index=False)
    ]
