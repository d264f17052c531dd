"""Exception hierarchy for secure-random.

All exceptions derive from SecureRandomError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class SecureRandomError(Exception):
    """Base exception for all secure-random errors."""


class NoSecureSourceError(SecureRandomError):
    """No secure entropy facility can provide bytes.

    Raised by a source whose facility is missing, and by every call on a
    :class:`~secure_random.source.RandomSource` whose selection found no
    usable candidate. Never answered by a weaker generator.
    """


class RandomDeviceUnavailableError(NoSecureSourceError):
    """The operating system random device is missing or inaccessible."""


class CryptoLibraryUnavailableError(NoSecureSourceError):
    """The cryptographic library providing an RNG cannot be loaded."""


class PartialReadError(SecureRandomError):
    """A source returned fewer bytes than requested.

    The truncated buffer is discarded; callers decide whether to retry.

    Attributes:
        received: Number of bytes the source actually produced.
        requested: Number of bytes that were asked for.
    """

    def __init__(self, received: int, requested: int) -> None:
        self.received = received
        self.requested = requested
        super().__init__(
            f"partial read from random device: got {received} of {requested} requested bytes"
        )


class InvalidArgumentError(SecureRandomError, ValueError):
    """An operation received a negative count, bad bound, or empty range/alphabet."""


class ConfigValidationError(SecureRandomError):
    """Configuration field validation failed.

    Raised when the source order names an unknown source, the log level is
    not recognised, or the default byte count is negative.
    """
