"""PayloadTypeRegistry — maps action names to payload item types for hydration."""

from __future__ import annotations

from typing import Any


class PayloadTypeRegistry:
    """Registry for mapping ``action: str`` → payload item type.

    Used by :class:`EventSerializer` to decode the ``data`` items of an
    incoming envelope into typed objects instead of plain JSON values.

    **Explicit registration** is required via ``register(action, payload_type)``.
    Create instances per application context for isolation.

    Usage::

        registry = PayloadTypeRegistry()
        registry.register("GET_ALL_EMPLOYEES", Employee)
        event = EventSerializer(registry=registry).deserialize(raw)
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    def register(self, action: str, payload_type: Any) -> None:
        """Register the payload item type used by *action*."""
        self._registry[action] = payload_type

    def get(self, action: str | None) -> Any | None:
        """Look up the payload item type for *action*."""
        if action is None:
            return None
        return self._registry.get(action)

    def has(self, action: str) -> bool:
        """Return ``True`` if *action* is registered."""
        return action in self._registry

    def list_registered(self) -> list[str]:
        """Return all registered action names."""
        return list(self._registry.keys())

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._registry.clear()
