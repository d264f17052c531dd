"""Operating system entropy source.

Reads from the OS CSPRNG via ``os.urandom()`` by default, or from a random
device file such as ``/dev/urandom`` when a path is configured. Each call is
an independent read; nothing is buffered between calls.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from secure_random.entropy.base import EntropySource, SourceKind
from secure_random.entropy.registry import register_entropy_source
from secure_random.exceptions import RandomDeviceUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable


@register_entropy_source(SourceKind.OS_DEVICE)
class OsDeviceSource(EntropySource):
    """OS random device wrapper.

    Args:
        device_path: Device file to read. Empty means ``os.urandom()``.
        reader: Replacement read function taking a byte count. Used to wire
            in a different OS facility; takes precedence over *device_path*.
    """

    def __init__(
        self,
        device_path: str = "",
        reader: Callable[[int], bytes | None] | None = None,
    ) -> None:
        self._device_path = device_path
        self._reads_file = reader is None and bool(device_path)
        if reader is not None:
            self._reader = reader
        elif device_path:
            self._reader = self._read_device
        else:
            self._reader = os.urandom

    @property
    def name(self) -> str:
        """Return ``'os_device'``."""
        return "os_device"

    @property
    def kind(self) -> SourceKind:
        return SourceKind.OS_DEVICE

    @property
    def device_path(self) -> str:
        """Configured device file, or ``''`` for ``os.urandom()``."""
        return self._device_path

    @property
    def is_available(self) -> bool:
        """Whether the device looks readable. Does not consume entropy."""
        if self._reads_file:
            return os.access(self._device_path, os.R_OK)
        return True

    def _generate(self, n: int) -> bytes:
        """Read up to *n* bytes from the OS facility.

        Raises:
            RandomDeviceUnavailableError: If the facility is missing,
                inaccessible or yields nothing.
        """
        try:
            data = self._reader(n)
        except (OSError, NotImplementedError) as e:
            raise RandomDeviceUnavailableError(f"no random device available: {e}") from e
        if data is None:
            raise RandomDeviceUnavailableError("no random device available")
        return data

    def _read_device(self, n: int) -> bytes | None:
        # Single unbuffered read: a short read must be visible, not hidden by io buffering.
        with open(self._device_path, "rb", buffering=0) as device:
            return device.read(n)

    def close(self) -> None:
        """No-op — the device is opened per call."""

    def health_check(self) -> dict[str, object]:
        """Return a status dictionary including the device path."""
        health = super().health_check()
        health["device_path"] = self._device_path or "os.urandom"
        return health
