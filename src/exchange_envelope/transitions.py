"""TransitionValidator — checks a received envelope against the one that was sent."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import (
    CorrelationMismatchError,
    EnvelopeContractError,
    StatusTransitionError,
    TimestampMismatchError,
)
from .status import is_forward_transition

if TYPE_CHECKING:
    from .envelope import Event

_log = logging.getLogger(__name__)


class TransitionValidator:
    """Verify the lifecycle contract where envelopes come off the bus.

    The envelope is a passive record and accepts any status. Collaborators
    that want to catch protocol bugs compare the envelope they sent
    (*previous*) with the one they received (*current*):

    * the correlation id must be unchanged,
    * the creation time must be unchanged,
    * the status must move forward (see ``is_forward_transition``).
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log

    def check(
        self, previous: Event[Any], current: Event[Any]
    ) -> EnvelopeContractError | None:
        """Return the violation found, or ``None`` for a valid successor."""
        error = self._classify(previous, current)
        if error is not None:
            self._log.warning(
                "Envelope contract violation for %s (%s -> %s): %s",
                previous.corr_id,
                previous.status,
                current.status,
                error,
            )
        return error

    def validate(self, previous: Event[Any], current: Event[Any]) -> Event[Any]:
        """Return *current*, or raise the violation found."""
        error = self.check(previous, current)
        if error is not None:
            raise error
        return current

    @staticmethod
    def _classify(
        previous: Event[Any], current: Event[Any]
    ) -> EnvelopeContractError | None:
        if previous.corr_id != current.corr_id:
            return CorrelationMismatchError(previous.corr_id, current.corr_id)
        if previous.time != current.time:
            return TimestampMismatchError(previous.corr_id, previous.time, current.time)
        if (
            previous.status is None
            or current.status is None
            or not is_forward_transition(previous.status, current.status)
        ):
            return StatusTransitionError(
                previous.corr_id, previous.status, current.status
            )
        return None
