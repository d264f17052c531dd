"""Abstract base class for all entropy sources.

Every entropy source implements this interface. The ABC owns the byte
contract shared by all of them: ``get_random_bytes(n)`` validates *n*,
answers ``n == 0`` without touching the facility, and rejects short output
from ``_generate()``. Subclasses provide ``name``, ``kind``,
``is_available``, ``_generate()`` and ``close()``.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any

from secure_random.exceptions import InvalidArgumentError, PartialReadError


class SourceKind(enum.Enum):
    """The two kinds of secure entropy source, in default priority order."""

    OS_DEVICE = "os_device"
    CRYPTO_LIBRARY = "crypto_library"


def validate_byte_count(n: object, what: str = "byte count") -> int:
    """Return *n* if it is a usable byte count.

    Args:
        n: Candidate byte count.
        what: Noun used in error messages (e.g. ``"count"``).

    Returns:
        *n* unchanged.

    Raises:
        InvalidArgumentError: If *n* is not an ``int`` (``bool`` excluded) or is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"{what} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"negative {what}: {n}")
    return n


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations must return exactly the requested number of secure bytes
    or raise. A source never pads, truncates, retries, or substitutes data
    from a weaker generator.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'os_device'``)."""

    @property
    @abstractmethod
    def kind(self) -> SourceKind:
        """The tagged variant this source implements."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy. ``b""`` when *n* is zero, without
            calling the underlying facility.

        Raises:
            InvalidArgumentError: If *n* is negative or not an integer.
            NoSecureSourceError: If the facility cannot provide bytes.
            PartialReadError: If the facility returned fewer than *n* bytes.
        """
        validate_byte_count(n)
        if n == 0:
            return b""
        data = self._generate(n)
        if len(data) != n:
            raise PartialReadError(len(data), n)
        return data

    @abstractmethod
    def _generate(self, n: int) -> bytes:
        """Ask the facility for *n* bytes (``n > 0``); may return fewer."""

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, library state)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'``, ``'kind'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "kind": self.kind.value, "healthy": self.is_available}
