import json
import logging

import pandas as pd
import pytest

from fx_forward.data.loader import load_observations, load_observations_frame
from fx_forward.data.validator import coerce_observation, validate_observations
from fx_forward.models.errors import InvalidInput
from fx_forward.models.observation import RateObservation


def _payload() -> list[dict[str, str]]:
    return [
        {'Date ': '01/02/2025', 'Close': '1.0393', 'Currency': 'EURUSD'},
        {'Date ': '17/02/2025', 'Close': '1.03902', 'Currency': 'EURUSD'},
        {'Date ': '01/02/2025', 'Close': '0.171218', 'Currency': 'BRLUSD'},
    ]


def test_loader_reads_legacy_json_export(tmp_path) -> None:
    path = tmp_path / 'forward_rates.json'
    path.write_text(json.dumps(_payload()), encoding='utf-8')

    records = load_observations(path)

    assert records[0] == RateObservation('EURUSD', '01/02/2025', '1.0393')
    assert [r.currency_pair for r in records] == ['EURUSD', 'EURUSD', 'BRLUSD']
    assert all(isinstance(r.close_text, str) for r in records)


def test_loader_reads_csv_and_drops_blank_rows(tmp_path, caplog) -> None:
    path = tmp_path / 'rates.csv'
    path.write_text(
        'Currency,Date,Close\n'
        'EURUSD,01/02/2025,1.0393\n'
        'EURUSD,17/02/2025,\n'
        'BRLUSD,01/02/2025,0.171218\n',
        encoding='utf-8',
    )

    with caplog.at_level(logging.WARNING):
        df = load_observations_frame(str(path))

    assert list(df.columns) == ['currency_pair', 'date_text', 'close_text']
    assert df['close_text'].tolist() == ['1.0393', '0.171218']
    assert 'blank required fields' in caplog.text


def test_loader_renders_excel_cells_as_text(tmp_path) -> None:
    path = tmp_path / 'rates.xlsx'
    raw = pd.DataFrame(
        {
            'Currency': ['EURUSD', 'EURUSD'],
            'Date': pd.to_datetime(['2025-02-01', '2025-02-17']),
            'Close': [1.0393, 1.03902],
        }
    )
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        raw.to_excel(writer, sheet_name='Rates', index=False)

    records = load_observations(path)

    assert records == [
        RateObservation('EURUSD', '01/02/2025', '1.0393'),
        RateObservation('EURUSD', '17/02/2025', '1.03902'),
    ]


def test_loader_rejects_unknown_suffix(tmp_path) -> None:
    path = tmp_path / 'rates.txt'
    path.write_text('x', encoding='utf-8')
    with pytest.raises(ValueError, match='Unsupported observation file type'):
        load_observations(path)


def test_loader_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_observations(tmp_path / 'missing.json')


def test_loader_missing_columns(tmp_path) -> None:
    path = tmp_path / 'rates.csv'
    path.write_text('Currency,Close\nEURUSD,1.0\n', encoding='utf-8')
    with pytest.raises(ValueError, match='Missing required observation columns'):
        load_observations(path)


def test_validator_warns_on_duplicates_and_bad_close() -> None:
    df = pd.DataFrame(
        {
            'currency_pair': ['EURUSD', 'EURUSD', 'EURUSD'],
            'date_text': ['01/02/2025', '01/02/2025', '17/02/2025'],
            'close_text': ['1.0393', '1.0394', 'n/a'],
        }
    )
    warnings = validate_observations(df)
    assert any('duplicate observations' in w for w in warnings)
    assert any('non-numeric close' in w for w in warnings)


def test_validator_rejects_nulls() -> None:
    df = pd.DataFrame({'currency_pair': ['EURUSD'], 'date_text': [None], 'close_text': ['1.0']})
    with pytest.raises(ValueError, match='nulls'):
        validate_observations(df)


def test_coerce_observation_accepts_legacy_keys() -> None:
    obs = coerce_observation({'Date ': '01/02/2025', 'Close': '1.0393', 'Currency': 'EURUSD', 'Extra': 1})
    assert obs == RateObservation('EURUSD', '01/02/2025', '1.0393')


def test_coerce_observation_rejects_other_shapes() -> None:
    with pytest.raises(InvalidInput):
        coerce_observation(['EURUSD', '01/02/2025', '1.0393'])
    with pytest.raises(InvalidInput, match='missing fields'):
        coerce_observation({'Currency': 'EURUSD'})
