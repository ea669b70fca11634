"""Rate observation and forward-rate result models."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class RateObservation:
    """One raw closing-rate row as delivered by the data source."""

    currency_pair: str
    date_text: str
    close_text: str


@dataclass(frozen=True)
class ParsedRate:
    """Observation reduced to a parsed date and a numeric rate."""

    date: pd.Timestamp
    rate: float


@dataclass(frozen=True)
class BracketResult:
    """Nearest observations at-or-before and strictly after a target date."""

    prior_date: pd.Timestamp
    next_date: pd.Timestamp
    prior_rate: float
    next_rate: float


@dataclass(frozen=True)
class ForwardRateResult:
    """Interpolated forward rate together with the bracket it came from."""

    forward_rate: float
    prior_date: pd.Timestamp
    next_date: pd.Timestamp
    prior_rate: float
    next_rate: float

    @classmethod
    def from_bracket(cls, forward_rate: float, bracket: BracketResult) -> 'ForwardRateResult':
        return cls(
            forward_rate=float(forward_rate),
            prior_date=bracket.prior_date,
            next_date=bracket.next_date,
            prior_rate=bracket.prior_rate,
            next_rate=bracket.next_rate,
        )
