"""EventSerializer — JSON wire codec with PayloadTypeRegistry hydration."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from .envelope import Event
from .exceptions import EnvelopeSerializationError

if TYPE_CHECKING:
    from .registry import PayloadTypeRegistry

logger = logging.getLogger(__name__)


class EventSerializer:
    """Serialize/deserialize :class:`Event` to/from its JSON wire form.

    The wire form uses the stable field aliases (``corrId``, ``orgId``, ...)
    and never contains derived predicates such as ``is_health_check``.
    Payload items are typed, in order of precedence, by the explicit
    ``payload_type`` argument, by the registry entry for the envelope's
    action, or left as plain JSON values.
    """

    def __init__(self, registry: PayloadTypeRegistry | None = None) -> None:
        """Optionally pass a shared PayloadTypeRegistry for deserialization."""
        self._registry = registry

    def to_dict(self, event: Event[Any]) -> dict[str, Any]:
        """Encode envelope to a JSON-compatible dict keyed by wire names."""
        try:
            return event.model_dump(mode="json", by_alias=True)
        except (TypeError, ValueError) as e:
            raise EnvelopeSerializationError(str(e)) from e

    def serialize(self, event: Event[Any]) -> bytes:
        """Encode envelope to UTF-8 JSON bytes."""
        data = self.to_dict(event)
        try:
            return json.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EnvelopeSerializationError(str(e)) from e

    def from_dict(
        self, data: dict[str, Any], payload_type: Any | None = None
    ) -> Event[Any]:
        """Decode a wire-form dict to an Event."""
        if not isinstance(data, dict):
            raise EnvelopeSerializationError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        try:
            model = self._resolve_model(data.get("action"), payload_type)
            return model.model_validate(data)
        except (TypeError, ValueError) as e:
            raise EnvelopeSerializationError(str(e)) from e

    def deserialize(
        self, raw: bytes | str, payload_type: Any | None = None
    ) -> Event[Any]:
        """Decode JSON bytes (or text) to an Event."""
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise EnvelopeSerializationError(str(e)) from e
        return self.from_dict(data, payload_type)

    def _resolve_model(
        self, action: Any, payload_type: Any | None
    ) -> type[Event[Any]]:
        if payload_type is None and self._registry is not None:
            key = action if isinstance(action, str) else None
            payload_type = self._registry.get(key)
            if payload_type is not None:
                logger.debug(
                    "Using registered payload type %r for %s", payload_type, key
                )
        if payload_type is None:
            return Event
        return Event[payload_type]  # type: ignore[valid-type]
