"""Cryptographic library entropy source backed by pycryptodome.

Wraps ``Crypto.Random.get_random_bytes``. The ``pycryptodome`` package is
optional — this module imports cleanly when it is not installed and the
source reports itself unavailable at construction time instead.
"""

from __future__ import annotations

import logging

from secure_random.entropy.base import EntropySource, SourceKind
from secure_random.entropy.registry import register_entropy_source
from secure_random.exceptions import CryptoLibraryUnavailableError

logger = logging.getLogger("secure_random")

# ---------------------------------------------------------------------------
# Import guard — no crash when pycryptodome is not installed
# ---------------------------------------------------------------------------

try:
    from Crypto.Random import get_random_bytes

    _PYCRYPTODOME_AVAILABLE = True
except ImportError:
    _PYCRYPTODOME_AVAILABLE = False


@register_entropy_source(SourceKind.CRYPTO_LIBRARY)
class CryptoLibrarySource(EntropySource):
    """Secure bytes from pycryptodome's RNG.

    The library must be installed separately::

        pip install secure-random[crypto]
    """

    def __init__(self) -> None:
        """Initialize the library source.

        Raises:
            CryptoLibraryUnavailableError: If ``pycryptodome`` is not installed.
        """
        if not _PYCRYPTODOME_AVAILABLE:
            raise CryptoLibraryUnavailableError(
                "pycryptodome package not installed. Install with: pip install pycryptodome"
            )
        self._closed = False
        logger.debug("pycryptodome RNG loaded")

    @property
    def name(self) -> str:
        """Return ``'crypto_library'``."""
        return "crypto_library"

    @property
    def kind(self) -> SourceKind:
        return SourceKind.CRYPTO_LIBRARY

    @property
    def is_available(self) -> bool:
        return _PYCRYPTODOME_AVAILABLE and not self._closed

    def _generate(self, n: int) -> bytes:
        if self._closed:
            raise CryptoLibraryUnavailableError("CryptoLibrarySource is closed")
        return bytes(get_random_bytes(n))

    def close(self) -> None:
        """Mark the source as closed (idempotent)."""
        self._closed = True
