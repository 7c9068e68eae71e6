import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Protocol for correlation id strategies.
    Any generator whose collision probability is negligible over the
    lifetime of the bus is acceptable (UUIDv4, UUIDv7, ...).
    """

    def next_id(self) -> str:
        """Generates the next unique correlation id."""
        ...


class UUID4Generator(IIDGenerator):
    """
    Correlation ids used by ``Event.new`` unless another generator is passed.
    Each id carries 122 random bits.
    """

    def next_id(self) -> str:
        """Returns a fresh random UUIDv4 in its canonical hyphenated form."""
        return str(uuid.uuid4())
