"""Currency summaries, yield formatting and Excel export of hedge ladders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from io import BytesIO
import re
from typing import Any

import numpy as np
import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from fx_forward.calculations.forward_rate import DateLike, current_rate, try_forward_rate, try_hedge_cost
from fx_forward.models.errors import ForwardRateError

SUMMARY_COLUMNS = ['currency_pair', 'forward_rate', 'current_rate', 'hedge_cost', 'error']


def format_percentage(value: float) -> str:
    """Render a fraction as a percentage with four decimals (0.0123 -> 1.2300%)."""
    return f'{value * 100:.4f}%'


def net_yield_pct(apy_pct: float, cost: float) -> float:
    """Yield in percent left after paying a proportional hedge cost."""
    return float(apy_pct) - float(cost) * 100.0


def build_currency_summary(
    records: Iterable[Any] | pd.DataFrame,
    currencies: Sequence[str],
    target_date: DateLike,
) -> pd.DataFrame:
    """One row per currency with forward rate, current rate and hedge cost."""
    rows_in = list(records) if isinstance(records, Iterator) else records
    rows: list[dict[str, object]] = []
    for currency in currencies:
        fwd = try_forward_rate(rows_in, currency, target_date)
        cost = try_hedge_cost(rows_in, currency, target_date)
        try:
            spot = current_rate(rows_in, currency)
        except ForwardRateError:
            spot = np.nan
        rows.append(
            {
                'currency_pair': currency,
                'forward_rate': fwd.value if fwd.ok else np.nan,
                'current_rate': spot,
                'hedge_cost': cost.value if cost.ok else np.nan,
                'error': None if fwd.ok else fwd.error.value,
            }
        )
    out = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    out['error'] = pd.Series([r['error'] for r in rows], index=out.index, dtype=object)
    return out


def default_ladder_filename(currency_pair: str, as_of: DateLike) -> str:
    """Return a deterministic export filename."""
    safe_ccy = re.sub(r'[^A-Za-z0-9_-]+', '_', str(currency_pair or 'currency')).strip('_') or 'currency'
    return f'hedge_ladder_{safe_ccy}_{pd.Timestamp(as_of).date().isoformat()}.xlsx'


def _format_worksheet(ws) -> None:
    ws.freeze_panes = 'A2'
    max_row = ws.max_row
    max_col = ws.max_column
    if max_row <= 0 or max_col <= 0:
        return

    headers: dict[int, str] = {}
    for col_idx in range(1, max_col + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = Font(bold=True)
        headers[col_idx] = str(cell.value or '').strip().lower()

    for row_idx in range(2, max_row + 1):
        for col_idx in range(1, max_col + 1):
            cell = ws.cell(row=row_idx, column=col_idx)
            if isinstance(cell.value, (pd.Timestamp, datetime)):
                cell.number_format = 'YYYY-MM-DD'
                continue
            if isinstance(cell.value, (float, np.floating)):
                header = headers.get(col_idx, '')
                cell.number_format = '0.0000%' if 'cost' in header else '0.000000'

    for col_idx in range(1, max_col + 1):
        max_len = 0
        for row_idx in range(1, min(max_row, 200) + 1):
            val = ws.cell(row=row_idx, column=col_idx).value
            text = '' if val is None else str(val)
            max_len = max(max_len, len(text))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max(10, max_len + 2), 60)


def build_ladder_workbook_bytes(ladder: pd.DataFrame, currency_pair: str) -> bytes:
    """Serialize a hedge ladder into a single-sheet Excel workbook."""
    output = BytesIO()
    sheet_name = f'Ladder_{currency_pair}'[:31]
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        pd.DataFrame(ladder).to_excel(writer, sheet_name=sheet_name, index=False)
        writer.book.properties.title = f'Hedge ladder {currency_pair}'
        _format_worksheet(writer.sheets[sheet_name])
    return output.getvalue()
