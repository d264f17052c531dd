"""Entropy source subsystem for secure-random.

Re-exports the ABC, registry, selection helpers and both built-in source
implementations for convenient access::

    from secure_random.entropy import EntropySource, SourceKind
    from secure_random.entropy import OsDeviceSource, CryptoLibrarySource
"""

from secure_random.entropy.base import EntropySource, SourceKind, validate_byte_count
from secure_random.entropy.crypto_library import CryptoLibrarySource
from secure_random.entropy.os_device import OsDeviceSource
from secure_random.entropy.registry import EntropySourceRegistry, register_entropy_source
from secure_random.entropy.selection import (
    Candidate,
    SourceSelection,
    candidates_from_config,
    select_source,
)

__all__ = [
    "Candidate",
    "CryptoLibrarySource",
    "EntropySource",
    "EntropySourceRegistry",
    "OsDeviceSource",
    "SourceKind",
    "SourceSelection",
    "candidates_from_config",
    "register_entropy_source",
    "select_source",
    "validate_byte_count",
]
