"""secure-random: a process-wide interface to a secure random generator.

Selects the best available secure entropy source once (the OS random device,
then pycryptodome's RNG), refuses to fall back to anything weaker, and layers
hex, base64, URL-safe base64, uniform numbers, alphabet sampling and UUIDs on
top of the raw bytes::

    import secure_random

    secure_random.hex(16)
    secure_random.urlsafe_base64()
    secure_random.uuid()
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("secure-random")
except PackageNotFoundError:
    __version__ = "0.0.0"

from secure_random.api import (
    alphanumeric,
    base64,
    bytes,
    choose,
    gen_random,
    get_default,
    health_check,
    hex,
    rand,
    random_bytes,
    random_number,
    urlsafe_base64,
    uuid,
    uuid_v4,
    uuid_v7,
)
from secure_random.config import SecureRandomConfig
from secure_random.entropy.base import SourceKind
from secure_random.exceptions import (
    ConfigValidationError,
    CryptoLibraryUnavailableError,
    InvalidArgumentError,
    NoSecureSourceError,
    PartialReadError,
    RandomDeviceUnavailableError,
    SecureRandomError,
)
from secure_random.formatter import ALPHANUMERIC, NumericRange, SecureRandom
from secure_random.source import RandomSource

__all__ = [
    "ALPHANUMERIC",
    "ConfigValidationError",
    "CryptoLibraryUnavailableError",
    "InvalidArgumentError",
    "NoSecureSourceError",
    "NumericRange",
    "PartialReadError",
    "RandomDeviceUnavailableError",
    "RandomSource",
    "SecureRandom",
    "SecureRandomConfig",
    "SecureRandomError",
    "SourceKind",
    "__version__",
    "alphanumeric",
    "base64",
    "bytes",
    "choose",
    "gen_random",
    "get_default",
    "health_check",
    "hex",
    "rand",
    "random_bytes",
    "random_number",
    "urlsafe_base64",
    "uuid",
    "uuid_v4",
    "uuid_v7",
]
