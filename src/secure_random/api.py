"""Module-level functions backed by one process-wide SecureRandom.

The default instance is built lazily on first use, under a lock, from the
environment configuration. Callers that need different settings build their
own :class:`~secure_random.source.RandomSource` and
:class:`~secure_random.formatter.SecureRandom` instead.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from secure_random.formatter import SecureRandom

if TYPE_CHECKING:
    from collections.abc import Sequence

    from secure_random.formatter import Number, NumericRange

_default: SecureRandom | None = None
_default_lock = threading.Lock()


def get_default() -> SecureRandom:
    """Return the process-wide SecureRandom, creating it on first call."""
    global _default
    instance = _default
    if instance is not None:
        return instance
    with _default_lock:
        if _default is None:
            _default = SecureRandom()
        return _default


def _reset_default() -> None:
    """Drop the process-wide instance. **Test-only** — not part of public API."""
    global _default
    with _default_lock:
        _default = None


def _bytes(n: int) -> bytes:
    """Return exactly *n* secure random bytes."""
    return get_default().bytes(n)


def random_bytes(n: int | None = None) -> bytes:
    """Return *n* (default 16) secure random bytes."""
    return get_default().random_bytes(n)


def _hex(n: int | None = None) -> str:
    """Return a random lowercase hex string of ``2 * n`` characters."""
    return get_default().hex(n)


def base64(n: int | None = None) -> str:
    """Return a random standard base64 string."""
    return get_default().base64(n)


def urlsafe_base64(n: int | None = None, padding: bool = False) -> str:
    """Return a random URL-safe base64 string."""
    return get_default().urlsafe_base64(n, padding)


def random_number(n: Number | range | NumericRange | None = None) -> Number:
    """Return a uniformly distributed random number; see :meth:`SecureRandom.random_number`."""
    return get_default().random_number(n)


rand = random_number


def choose(source: Sequence[Any], n: int) -> str | list[Any]:
    """Return *n* elements drawn uniformly from *source*."""
    return get_default().choose(source, n)


def alphanumeric(n: int | None = None, chars: str | None = None) -> str:
    """Return a random alphanumeric string of length *n* (default 16)."""
    if chars is None:
        return get_default().alphanumeric(n)
    return get_default().alphanumeric(n, chars)


def uuid() -> str:
    """Return a random version 4 UUID string."""
    return get_default().uuid()


uuid_v4 = uuid


def uuid_v7(timestamp_ms: int | None = None) -> str:
    """Return a time-ordered version 7 UUID string."""
    return get_default().uuid_v7(timestamp_ms)


def health_check() -> dict[str, Any]:
    """Return the default source's status dictionary."""
    return get_default().source.health_check()


# Public names matching the SecureRandom methods. Bound last so the
# builtins they shadow stay usable above.
bytes = _bytes  # noqa: A001
hex = _hex  # noqa: A001
gen_random = _bytes
