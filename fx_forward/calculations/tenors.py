"""Forward rate and hedge cost across a ladder of standard tenors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np
import pandas as pd

from fx_forward.calculations.forward_rate import DateLike, try_forward_rate, try_hedge_cost
from fx_forward.utils.date_utils import add_days

DEFAULT_TENOR_DAYS = (7, 30, 60, 90, 180, 270, 365)

LADDER_COLUMNS = ['tenor_days', 'target_date', 'forward_rate', 'hedge_cost', 'error']


def build_hedge_ladder(
    records: Iterable[Any] | pd.DataFrame,
    currency_pair: str,
    as_of: DateLike,
    tenor_days: Sequence[int] = DEFAULT_TENOR_DAYS,
) -> pd.DataFrame:
    """Return one row per tenor with its forward rate and hedge cost.

    Tenors that fall outside the observation range keep NaN values and the
    failure kind in `error`.
    """
    rows_in = list(records) if isinstance(records, Iterator) else records
    rows: list[dict[str, object]] = []
    for days in tenor_days:
        if int(days) <= 0:
            raise ValueError(f'Tenor must be a positive number of days, got {days}.')
        target = add_days(as_of, int(days))
        fwd = try_forward_rate(rows_in, currency_pair, target)
        cost = try_hedge_cost(rows_in, currency_pair, target)
        rows.append(
            {
                'tenor_days': int(days),
                'target_date': target,
                'forward_rate': fwd.value if fwd.ok else np.nan,
                'hedge_cost': cost.value if cost.ok else np.nan,
                'error': None if cost.ok else cost.error.value,
            }
        )
    out = pd.DataFrame(rows, columns=LADDER_COLUMNS)
    out['error'] = pd.Series([r['error'] for r in rows], index=out.index, dtype=object)
    return out
