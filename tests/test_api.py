"""Tests for the module-level API and the process-wide default instance."""

from __future__ import annotations

import re
import threading
from collections.abc import Iterator
from concurrent import futures

import pytest

import secure_random
from secure_random import api
from secure_random.exceptions import InvalidArgumentError
from secure_random.formatter import SecureRandom


@pytest.fixture(autouse=True)
def _fresh_default(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SECURE_RANDOM_LOG_LEVEL", "none")
    api._reset_default()
    yield
    api._reset_default()


class TestModuleFunctions:
    """Each module-level function routes through the default instance."""

    def test_bytes(self) -> None:
        assert len(secure_random.bytes(10)) == 10
        assert secure_random.bytes(0) == b""

    def test_gen_random(self) -> None:
        assert api.gen_random is api.bytes
        assert len(secure_random.gen_random(12)) == 12
        with pytest.raises(InvalidArgumentError):
            secure_random.gen_random(-1)

    def test_random_bytes_default(self) -> None:
        assert len(secure_random.random_bytes()) == 16

    def test_hex(self) -> None:
        assert re.fullmatch(r"[0-9a-f]{20}", secure_random.hex(10))

    def test_base64(self) -> None:
        assert len(secure_random.base64(16)) == 24

    def test_urlsafe_base64(self) -> None:
        assert len(secure_random.urlsafe_base64(16)) == 22
        assert secure_random.urlsafe_base64(16, padding=True).endswith("==")

    def test_random_number(self) -> None:
        assert 0 <= secure_random.random_number(10) < 10
        assert 0.0 <= secure_random.rand() < 1.0

    def test_choose(self) -> None:
        assert set(secure_random.choose("ab", 10)) <= {"a", "b"}

    def test_alphanumeric(self) -> None:
        assert re.fullmatch(r"[A-Za-z0-9]{16}", secure_random.alphanumeric())
        assert set(secure_random.alphanumeric(8, chars="xy")) <= {"x", "y"}

    def test_uuids(self) -> None:
        assert secure_random.uuid()[14] == "4"
        assert secure_random.uuid_v4()[14] == "4"
        assert secure_random.uuid_v7()[14] == "7"

    def test_health_check(self) -> None:
        health = secure_random.health_check()
        assert health["healthy"] is True
        assert health["source"] == "os_device"

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            secure_random.random_bytes(-1)
        with pytest.raises(InvalidArgumentError):
            secure_random.hex(-1)

    def test_builtins_untouched(self) -> None:
        assert api.bytes is not bytes
        assert bytes(2) == b"\x00\x00"
        assert hex(255) == "0xff"


class TestDefaultInstance:
    """Lazy, idempotent, race-safe construction of the default instance."""

    def test_same_instance(self) -> None:
        first = secure_random.get_default()
        assert isinstance(first, SecureRandom)
        assert secure_random.get_default() is first

    def test_concurrent_first_use(self) -> None:
        workers = 16
        barrier = threading.Barrier(workers)

        def first_call(_: int) -> int:
            barrier.wait()
            return id(secure_random.get_default())

        with futures.ThreadPoolExecutor(max_workers=workers) as pool:
            ids = set(pool.map(first_call, range(workers)))

        assert len(ids) == 1

    def test_env_config_applies(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SECURE_RANDOM_DEFAULT_BYTE_COUNT", "4")
        assert len(secure_random.random_bytes()) == 4

    def test_version(self) -> None:
        assert isinstance(secure_random.__version__, str)
