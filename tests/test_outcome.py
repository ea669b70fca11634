import pytest

from fx_forward.calculations.outcome import NO_RESULT, RateOutcome
from fx_forward.models.errors import ErrorKind, NoPriorObservation


def test_success_outcome() -> None:
    out = RateOutcome.success(1.25)
    assert out.ok
    assert out.unwrap() == 1.25
    assert out.to_nullable() == 1.25


def test_failure_outcome_from_error() -> None:
    out = RateOutcome.failure(NoPriorObservation('before all data'))
    assert not out.ok
    assert out.error is ErrorKind.NO_PRIOR_OBSERVATION
    assert out.message == 'before all data'
    assert out.to_nullable() is NO_RESULT
    with pytest.raises(ValueError, match='NoPriorObservation: before all data'):
        out.unwrap()


def test_outcome_requires_exactly_one_side() -> None:
    with pytest.raises(ValueError):
        RateOutcome()
    with pytest.raises(ValueError):
        RateOutcome(value=1.0, error=ErrorKind.INVALID_INPUT)


def test_zero_value_is_still_a_success() -> None:
    out = RateOutcome.success(0.0)
    assert out.ok
    assert out.to_nullable() == 0.0
