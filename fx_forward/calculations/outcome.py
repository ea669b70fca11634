"""Success-or-failure value for calculations that must not raise."""

from __future__ import annotations

from dataclasses import dataclass

from fx_forward.models.errors import ErrorKind, ForwardRateError

NO_RESULT = None


@dataclass(frozen=True)
class RateOutcome:
    """Either a numeric value or the kind of failure that prevented it."""

    value: float | None = None
    error: ErrorKind | None = None
    message: str = ''

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError('RateOutcome needs exactly one of value or error.')

    @classmethod
    def success(cls, value: float) -> 'RateOutcome':
        return cls(value=float(value))

    @classmethod
    def failure(cls, exc: ForwardRateError) -> 'RateOutcome':
        return cls(error=exc.kind, message=str(exc))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value or raise `ValueError` carrying the failure."""
        if self.value is None:
            raise ValueError(f'{self.error.value}: {self.message}')
        return self.value

    def to_nullable(self) -> float | None:
        """Collapse to the value or `NO_RESULT` for callers wanting a total function."""
        return self.value if self.ok else NO_RESULT
