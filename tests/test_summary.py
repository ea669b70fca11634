from io import BytesIO
import math

import pandas as pd
import pytest

from fx_forward.calculations.tenors import build_hedge_ladder
from fx_forward.reporting.summary import (
    build_currency_summary,
    build_ladder_workbook_bytes,
    default_ladder_filename,
    format_percentage,
    net_yield_pct,
)


def _records() -> list[dict[str, str]]:
    return [
        {'Date ': '01/02/2025', 'Close': '1.0393', 'Currency': 'EURUSD'},
        {'Date ': '17/02/2025', 'Close': '1.03902', 'Currency': 'EURUSD'},
        {'Date ': '01/02/2025', 'Close': '0.171218', 'Currency': 'BRLUSD'},
        {'Date ': '04/03/2025', 'Close': '0.17051', 'Currency': 'BRLUSD'},
    ]


def test_format_percentage() -> None:
    assert format_percentage(0.0123) == '1.2300%'
    assert format_percentage(-0.00015154) == '-0.0152%'


def test_net_yield_pct() -> None:
    assert net_yield_pct(5.78, 0.0123) == pytest.approx(4.55)
    assert net_yield_pct(3.98, -0.001) == pytest.approx(4.08)


def test_currency_summary_rows() -> None:
    summary = build_currency_summary(_records(), ['EURUSD', 'BRLUSD', 'INVALID'], '2025-02-10')
    assert summary['currency_pair'].tolist() == ['EURUSD', 'BRLUSD', 'INVALID']

    eur = summary.iloc[0]
    assert eur['forward_rate'] == pytest.approx(1.0391425)
    assert eur['current_rate'] == 1.0393
    assert abs(eur['hedge_cost']) < 0.01
    assert eur['error'] is None
    assert summary['error'].dtype == object
    assert summary['error'].iloc[:2].isna().all()

    invalid = summary.iloc[2]
    assert math.isnan(invalid['forward_rate'])
    assert math.isnan(invalid['current_rate'])
    assert invalid['error'] == 'NoDataForCurrency'


def test_default_ladder_filename() -> None:
    assert default_ladder_filename('EUR/USD', '2025-02-10') == 'hedge_ladder_EUR_USD_2025-02-10.xlsx'


def test_ladder_workbook_roundtrip() -> None:
    ladder = build_hedge_ladder(_records(), 'EURUSD', '2025-02-01', tenor_days=[7, 30])
    data = build_ladder_workbook_bytes(ladder, 'EURUSD')
    assert isinstance(data, bytes)

    xls = pd.ExcelFile(BytesIO(data))
    assert xls.sheet_names == ['Ladder_EURUSD']
    back = pd.read_excel(xls, sheet_name='Ladder_EURUSD')
    assert back['tenor_days'].tolist() == [7, 30]
    assert back['forward_rate'].iloc[0] == pytest.approx(1.0393 * 9 / 16 + 1.03902 * 7 / 16)
    assert pd.isna(back['forward_rate'].iloc[1])
