"""Reserved action and client names shared by every collaborator on the bus."""

from __future__ import annotations

from enum import Enum


class DefaultActions(str, Enum):
    """Actions every collaborator understands, regardless of its domain.

    The business vocabulary (``GET_ALL_EMPLOYEES``, ...) is owned by each
    subsystem and travels as a plain string.
    """

    HEALTH = "HEALTH"


# Client name used when the cache, not an API token holder, originated the exchange.
CACHE_CLIENT = "CACHE"
