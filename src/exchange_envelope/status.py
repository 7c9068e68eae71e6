"""Status vocabulary and the forward-only lifecycle of an exchange."""

from __future__ import annotations

from enum import Enum, IntEnum


class StatusPhase(IntEnum):
    """Ordered lifecycle phases. A status may only move to a later phase."""

    INITIAL = 0
    PENDING = 1
    TERMINAL = 2


class Status(str, Enum):
    """Possible lifecycle states of an exchange.

    * ``NEW`` — set by the originator at construction, never afterwards.
    * ``IN_PROGRESS`` / ``ADDED_TO_CACHE`` — accepted by a provider or the
      cache, not yet completed.
    * ``SUCCESS`` — completed, ``data`` holds the result.
    * ``ERROR`` — processing failed, ``message`` holds the detail.
    * ``REJECTED`` / ``TIMEOUT`` — failures decided outside the processor,
      e.g. an unsupported action or a gateway-side timeout.
    """

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    ADDED_TO_CACHE = "ADDED_TO_CACHE"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    REJECTED = "REJECTED"
    TIMEOUT = "TIMEOUT"

    @property
    def phase(self) -> StatusPhase:
        """Return the lifecycle phase this status belongs to."""
        return _PHASES[self]

    @property
    def is_terminal(self) -> bool:
        """Return *True* if no further transition is allowed."""
        return self.phase is StatusPhase.TERMINAL

    @property
    def is_failure(self) -> bool:
        """Return *True* for terminal states that carry no usable result."""
        return self in _FAILURES


_PHASES: dict[Status, StatusPhase] = {
    Status.NEW: StatusPhase.INITIAL,
    Status.IN_PROGRESS: StatusPhase.PENDING,
    Status.ADDED_TO_CACHE: StatusPhase.PENDING,
    Status.SUCCESS: StatusPhase.TERMINAL,
    Status.ERROR: StatusPhase.TERMINAL,
    Status.REJECTED: StatusPhase.TERMINAL,
    Status.TIMEOUT: StatusPhase.TERMINAL,
}

_FAILURES = frozenset({Status.ERROR, Status.REJECTED, Status.TIMEOUT})


def is_forward_transition(before: Status, after: Status) -> bool:
    """Return *True* if moving from *before* to *after* honours the lifecycle.

    Re-observing the same status is allowed (redelivery). Pending states may
    hand over to each other, e.g. the cache passing an exchange on to a
    provider. Terminal states never change.
    """
    if before is after:
        return True
    if before.is_terminal:
        return False
    if before.phase is StatusPhase.PENDING and after.phase is StatusPhase.PENDING:
        return True
    return after.phase > before.phase
