"""Exceptions for exchange-envelope."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .status import Status


class ExchangeError(Exception):
    """Root exception for the exchange-envelope library."""


class EnvelopeSerializationError(ExchangeError):
    """Raised when an envelope cannot be encoded to or decoded from the wire."""


class EnvelopeContractError(ExchangeError):
    """Base class for protocol violations observed between two hops.

    Never raised by the envelope itself. ``TransitionValidator`` returns or
    raises these when a received envelope is not a valid successor of the
    one that was sent.
    """


class CorrelationMismatchError(EnvelopeContractError):
    """Raised when a received envelope carries a different correlation id."""

    def __init__(self, expected: str | None, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Correlation id changed between hops: expected {expected!r}, "
            f"got {actual!r}"
        )


class StatusTransitionError(EnvelopeContractError):
    """Raised when an envelope's status moves backward or out of a terminal state."""

    def __init__(
        self,
        corr_id: str | None,
        previous: Status | None,
        current: Status | None,
    ) -> None:
        self.corr_id = corr_id
        self.previous = previous
        self.current = current
        super().__init__(
            f"Invalid status transition for {corr_id!r}: "
            f"{_name(previous)} -> {_name(current)}"
        )


class TimestampMismatchError(EnvelopeContractError):
    """Raised when the creation time of an exchange changed between hops."""

    def __init__(self, corr_id: str | None, expected: int, actual: int) -> None:
        self.corr_id = corr_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Creation time changed for {corr_id!r}: expected {expected}, "
            f"got {actual}"
        )


def _name(status: Status | None) -> str:
    return "None" if status is None else status.value
