"""Shared pytest fixtures for secure-random tests.

Provides quiet configuration objects, a factory for scriptable entropy
source doubles, and candidate lists used across multiple test modules.
"""

from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING, Any

import pytest

from secure_random.config import SecureRandomConfig
from secure_random.entropy.base import EntropySource, SourceKind
from secure_random.entropy.selection import Candidate
from secure_random.exceptions import RandomDeviceUnavailableError
from secure_random.formatter import SecureRandom
from secure_random.source import RandomSource

if TYPE_CHECKING:
    from collections.abc import Callable


class _ScriptedSource(EntropySource):
    """Test double: returns bytes from ``os.urandom``, a pattern, or a script.

    Args:
        kind: Variant to report.
        pattern: If set, every byte equals this value.
        values: If set, bytes are taken from this list in order.
        short_by: Number of bytes to withhold from a read.
        missing: Raise ``RandomDeviceUnavailableError`` on a read.
        full_reads: Reads served normally before ``short_by``/``missing`` apply.
    """

    def __init__(
        self,
        kind: SourceKind = SourceKind.OS_DEVICE,
        pattern: int | None = None,
        values: list[int] | None = None,
        short_by: int = 0,
        missing: bool = False,
        full_reads: int = 0,
    ) -> None:
        self._kind = kind
        self._pattern = pattern
        self._values = list(values) if values is not None else None
        self._short_by = short_by
        self._missing = missing
        self._full_reads = full_reads
        self._lock = threading.Lock()
        self.calls: list[int] = []
        self.closed = False

    @property
    def name(self) -> str:
        return f"scripted_{self._kind.value}"

    @property
    def kind(self) -> SourceKind:
        return self._kind

    @property
    def is_available(self) -> bool:
        return not self._missing

    def _generate(self, n: int) -> bytes:
        with self._lock:
            self.calls.append(n)
            scripted = len(self.calls) > self._full_reads
        if scripted and self._missing:
            raise RandomDeviceUnavailableError("no random device available")
        size = max(n - self._short_by, 0) if scripted else n
        if self._values is not None:
            return bytes(self._values.pop(0) for _ in range(size))
        if self._pattern is not None:
            return bytes([self._pattern] * size)
        return os.urandom(size)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_source() -> Callable[..., Any]:
    """Return a factory building scripted entropy source doubles.

    Accepts ``kind``, ``pattern``, ``values``, ``short_by``, ``missing`` and
    ``full_reads``. Built sources record requested sizes in ``calls`` and
    set ``closed`` on ``close()``.
    """
    return _ScriptedSource


@pytest.fixture
def quiet_config() -> SecureRandomConfig:
    """Return a config with default values, no .env file and no log output."""
    return SecureRandomConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def scripted_source(make_source: Callable[..., Any]) -> Any:
    """Return a working scripted source backed by ``os.urandom``."""
    return make_source()


@pytest.fixture
def random_source(quiet_config: SecureRandomConfig, scripted_source: Any) -> RandomSource:
    """Return a RandomSource whose only candidate is ``scripted_source``."""
    return RandomSource(quiet_config, [Candidate("scripted", lambda: scripted_source)])


@pytest.fixture
def secure_random(random_source: RandomSource) -> SecureRandom:
    """Return a SecureRandom over ``random_source``."""
    return SecureRandom(random_source)


@pytest.fixture
def failed_source(
    quiet_config: SecureRandomConfig, make_source: Callable[..., Any]
) -> RandomSource:
    """Return a RandomSource whose every candidate is missing."""
    return RandomSource(
        quiet_config,
        [
            Candidate("os_device", lambda: make_source(missing=True)),
            Candidate(
                "crypto_library",
                lambda: make_source(SourceKind.CRYPTO_LIBRARY, missing=True),
            ),
        ],
    )
