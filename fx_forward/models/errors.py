"""Failure taxonomy for forward-rate and hedge-cost calculations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable identifiers for every calculation failure."""

    INVALID_INPUT = 'InvalidInput'
    INVALID_DATE_FORMAT = 'InvalidDateFormat'
    INVALID_RATE_VALUE = 'InvalidRateValue'
    NO_DATA_FOR_CURRENCY = 'NoDataForCurrency'
    NO_PRIOR_OBSERVATION = 'NoPriorObservation'
    NO_POSTERIOR_OBSERVATION = 'NoPosteriorObservation'
    INVALID_BRACKET = 'InvalidBracket'


class ForwardRateError(ValueError):
    """Base class for deterministic calculation failures."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT


class InvalidInput(ForwardRateError):
    kind = ErrorKind.INVALID_INPUT


class InvalidDateFormat(ForwardRateError):
    kind = ErrorKind.INVALID_DATE_FORMAT


class InvalidRateValue(ForwardRateError):
    kind = ErrorKind.INVALID_RATE_VALUE


class NoDataForCurrency(ForwardRateError):
    kind = ErrorKind.NO_DATA_FOR_CURRENCY


class NoPriorObservation(ForwardRateError):
    kind = ErrorKind.NO_PRIOR_OBSERVATION


class NoPosteriorObservation(ForwardRateError):
    kind = ErrorKind.NO_POSTERIOR_OBSERVATION


class InvalidBracket(ForwardRateError):
    kind = ErrorKind.INVALID_BRACKET
