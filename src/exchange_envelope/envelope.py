"""Event — the envelope that travels between gateway, cache and provider."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .actions import CACHE_CLIENT, DefaultActions
from .id_generator import IIDGenerator, UUID4Generator
from .status import Status

T = TypeVar("T")

_default_id_generator = UUID4Generator()


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


class Event(BaseModel, Generic[T]):
    """Immutable envelope for one logical request/response exchange.

    The gateway creates it with :meth:`new` and publishes it. The cache or a
    provider derives a new value from it (same ``corr_id``), typically with
    :meth:`with_status`, :meth:`append_data` or :meth:`fail`, and publishes
    that back. The gateway matches the reply to the pending request by
    ``corr_id``.

    ``T`` is the payload element type. ``Event()`` (no parameter) carries
    decoded JSON; ``Event[Employee]`` validates items into ``Employee``.

    Wire names are the field aliases (``corrId``, ``orgId``, ...). Always
    serialize with ``by_alias=True``; :class:`EventSerializer` does this.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    corr_id: str | None = Field(
        default=None,
        alias="corrId",
        description="Correlation id, assigned once at creation",
    )
    action: str | None = Field(
        default=None, description="Command to execute, e.g. 'GET_ALL_EMPLOYEES'"
    )
    status: Status | None = None
    time: int = Field(default=0, description="Creation time, epoch milliseconds")
    org_id: str | None = Field(default=None, alias="orgId")
    source: str | None = Field(
        default=None, description="Subsystem the exchange is destined for"
    )
    client: str | None = Field(
        default=None, description="API token name of the caller, or 'CACHE'"
    )
    message: str | None = Field(
        default=None, description="Diagnostic detail, set on failure paths"
    )
    data: tuple[T, ...] = ()

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def new(
        cls,
        org_id: str,
        source: str,
        action: str,
        client: str,
        *,
        id_generator: IIDGenerator | None = None,
    ) -> Event[T]:
        """Create a ``NEW`` envelope with a fresh correlation id and timestamp."""
        generator = id_generator or _default_id_generator
        return cls(
            corr_id=generator.next_id(),
            action=action,
            status=Status.NEW,
            time=_now_millis(),
            org_id=org_id,
            source=source,
            client=client,
        )

    @classmethod
    def copy_of(cls, event: Event[Any]) -> Event[T]:
        """Return a copy of *event* equal to it under structural equality.

        The copy is shallow: the ``data`` tuple itself is shared when *event*
        is already of this class, and items are shared unless they have to be
        validated into ``T``. This is
        safe because ``data`` is a tuple and every mutator returns a new one.
        """
        if type(event) is cls:
            return event.model_copy()
        return cls.model_validate(_field_values(event))

    # ── Copy-on-transition mutators ─────────────────────────────────

    def replace(self, **changes: Any) -> Event[T]:
        """Return a validated copy with *changes* applied by attribute name."""
        values = _field_values(self)
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown Event fields: {sorted(unknown)}")
        values.update(changes)
        return type(self).model_validate(values)

    def with_status(self, status: Status, *, message: str | None = None) -> Event[T]:
        """Return a copy carrying *status* (and *message*, when given)."""
        if message is None:
            return self.replace(status=status)
        return self.replace(status=status, message=message)

    def fail(self, message: str, *, status: Status = Status.ERROR) -> Event[T]:
        """Return a copy in a terminal failure state with diagnostic *message*."""
        return self.replace(status=status, message=message)

    def append_data(self, item: T) -> Event[T]:
        """Return a copy with *item* added after the existing payload items."""
        return self.replace(data=(*self.data, item))

    def with_data(self, items: Iterable[T]) -> Event[T]:
        """Return a copy whose payload is exactly *items*."""
        return self.replace(data=tuple(items))

    # ── Derived, never serialized ───────────────────────────────────

    @property
    def is_health_check(self) -> bool:
        """Return *True* if this exchange is a liveness probe."""
        return self.action == DefaultActions.HEALTH.value

    @property
    def is_terminal(self) -> bool:
        """Return *True* once the exchange has reached a final status."""
        return self.status is not None and self.status.is_terminal

    @property
    def is_cache_originated(self) -> bool:
        """Return *True* if the cache, not an API client, created the exchange."""
        return self.client == CACHE_CLIENT

    def __hash__(self) -> int:
        # Payload items are often dicts, so only the scalar fields take part.
        return hash(
            (
                self.corr_id,
                self.action,
                self.status,
                self.time,
                self.org_id,
                self.source,
                self.client,
                self.message,
            )
        )


def _field_values(event: BaseModel) -> dict[str, Any]:
    return {name: getattr(event, name) for name in Event.model_fields}
