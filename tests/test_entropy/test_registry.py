"""Tests for EntropySourceRegistry."""

from __future__ import annotations

import pytest

from secure_random.entropy.base import EntropySource, SourceKind
from secure_random.entropy.crypto_library import CryptoLibrarySource
from secure_random.entropy.os_device import OsDeviceSource
from secure_random.entropy.registry import EntropySourceRegistry


class _DummySource(EntropySource):
    """Minimal concrete source for registry tests."""

    @property
    def name(self) -> str:
        return "dummy"

    @property
    def kind(self) -> SourceKind:
        return SourceKind.OS_DEVICE

    @property
    def is_available(self) -> bool:
        return True

    def _generate(self, n: int) -> bytes:
        return b"\x00" * n

    def close(self) -> None:
        pass


class TestEntropySourceRegistry:
    """Tests for the decorator-based registry."""

    def setup_method(self) -> None:
        """Save registry state before each test."""
        self._saved_registry = dict(EntropySourceRegistry._registry)

    def teardown_method(self) -> None:
        """Restore registry state after each test."""
        EntropySourceRegistry._registry.clear()
        EntropySourceRegistry._registry.update(self._saved_registry)

    def test_builtins_registered(self) -> None:
        assert EntropySourceRegistry.get(SourceKind.OS_DEVICE) is OsDeviceSource
        assert EntropySourceRegistry.get(SourceKind.CRYPTO_LIBRARY) is CryptoLibrarySource

    def test_list_available(self) -> None:
        assert EntropySourceRegistry.list_available() == ["crypto_library", "os_device"]

    def test_register_replaces_kind(self) -> None:
        @EntropySourceRegistry.register(SourceKind.OS_DEVICE)
        class Replacement(_DummySource):
            pass

        assert EntropySourceRegistry.get(SourceKind.OS_DEVICE) is Replacement

    def test_get_unknown_raises_key_error(self) -> None:
        EntropySourceRegistry._reset()
        with pytest.raises(KeyError, match="os_device"):
            EntropySourceRegistry.get(SourceKind.OS_DEVICE)

    def test_reset_clears_state(self) -> None:
        EntropySourceRegistry._reset()
        assert EntropySourceRegistry.list_available() == []
