"""Command-line report of forward rates and hedge costs.

Usage:
    fx-forward --data forward_rates.json --date 2025-02-10
    fx-forward --data forward_rates.json --date 2025-02-10 --currency EURUSD --tenors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from fx_forward.calculations.tenors import build_hedge_ladder
from fx_forward.data.loader import load_observations
from fx_forward.data.rate_store import available_currencies
from fx_forward.models.errors import ForwardRateError
from fx_forward.reporting.summary import build_currency_summary, format_percentage
from fx_forward.utils.date_utils import to_timestamp
from fx_forward.utils.logging import get_logger, set_level

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fx-forward',
        description='Interpolated forward FX rates and hedge costs from historical closes.',
    )
    parser.add_argument('--data', required=True, type=Path,
                        help='Observation file (.json, .csv or .xlsx)')
    parser.add_argument('--date', required=True,
                        help='Target date (YYYY-MM-DD); with --tenors, the as-of date')
    parser.add_argument('--currency', action='append', default=None,
                        help='Currency pair to report; repeatable (default: all in the file)')
    parser.add_argument('--tenors', action='store_true',
                        help='Print the standard tenor ladder instead of a single date')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def _render_summary(summary: pd.DataFrame) -> list[str]:
    lines: list[str] = []
    for row in summary.itertuples(index=False):
        lines.append(f'{row.currency_pair}:')
        if pd.isna(row.forward_rate):
            lines.append('Could not calculate forward rate')
        else:
            lines.append(f'Forward Rate: {row.forward_rate:.6f}')
            lines.append(f'Current Rate: {row.current_rate:.6f}')
            if not pd.isna(row.hedge_cost):
                lines.append(f'Cost: {format_percentage(row.hedge_cost)}')
        lines.append('')
    return lines


def _render_ladder(currency: str, ladder: pd.DataFrame) -> list[str]:
    lines = [f'{currency}:']
    for row in ladder.itertuples(index=False):
        label = f'{row.tenor_days:>4}d {row.target_date.date().isoformat()}'
        if pd.isna(row.forward_rate):
            lines.append(f'{label}  -- ({row.error})')
        elif pd.isna(row.hedge_cost):
            lines.append(f'{label}  {row.forward_rate:.6f}  -- ({row.error})')
        else:
            lines.append(f'{label}  {row.forward_rate:.6f}  {format_percentage(row.hedge_cost)}')
    lines.append('')
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        target = to_timestamp(args.date)
    except ForwardRateError as exc:
        parser.error(str(exc))
    try:
        records = load_observations(args.data)
    except (OSError, ValueError) as exc:
        parser.error(f'Could not load {args.data}: {exc}')

    currencies = args.currency or available_currencies(records)
    LOGGER.debug('Reporting %s currencies for %s.', len(currencies), target.date().isoformat())

    if args.tenors:
        lines: list[str] = [f'As-of Date: {target.date().isoformat()}', '']
        for currency in currencies:
            lines.extend(_render_ladder(currency, build_hedge_ladder(records, currency, target)))
    else:
        lines = [f'Target Date: {target.date().isoformat()}', '']
        lines.extend(_render_summary(build_currency_summary(records, currencies, target)))

    print('\n'.join(lines))
    return 0


if __name__ == '__main__':
    sys.exit(main())
