"""Shared fixtures for exchange-envelope tests."""

from __future__ import annotations

import pytest

from exchange_envelope import Event, EventSerializer


class FixedIdGenerator:
    """Deterministic correlation ids: corr-1, corr-2, ..."""

    def __init__(self) -> None:
        self._n = 0

    def next_id(self) -> str:
        self._n += 1
        return f"corr-{self._n}"


@pytest.fixture
def id_generator() -> FixedIdGenerator:
    return FixedIdGenerator()


@pytest.fixture
def new_event() -> Event:
    return Event.new("org1", "svc", "GET_ALL_EMPLOYEES", "tokenA")


@pytest.fixture
def serializer() -> EventSerializer:
    return EventSerializer()
