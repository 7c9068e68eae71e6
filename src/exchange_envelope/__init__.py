"""Message envelope and status lifecycle for eventually-consistent exchanges."""

from __future__ import annotations

from .actions import CACHE_CLIENT, DefaultActions
from .envelope import Event
from .exceptions import (
    CorrelationMismatchError,
    EnvelopeContractError,
    EnvelopeSerializationError,
    ExchangeError,
    StatusTransitionError,
    TimestampMismatchError,
)
from .id_generator import IIDGenerator, UUID4Generator
from .registry import PayloadTypeRegistry
from .serialization import EventSerializer
from .status import Status, StatusPhase, is_forward_transition
from .transitions import TransitionValidator

__all__ = [
    "CACHE_CLIENT",
    "CorrelationMismatchError",
    "DefaultActions",
    "EnvelopeContractError",
    "EnvelopeSerializationError",
    "Event",
    "EventSerializer",
    "ExchangeError",
    "IIDGenerator",
    "PayloadTypeRegistry",
    "Status",
    "StatusPhase",
    "StatusTransitionError",
    "TimestampMismatchError",
    "TransitionValidator",
    "UUID4Generator",
    "is_forward_transition",
]
