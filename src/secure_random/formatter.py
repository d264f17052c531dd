"""SecureRandom — formatting operations layered on one RandomSource.

Every operation here is a pure function of ``RandomSource.bytes()`` output.
None of them open another source, and none catch or downgrade the errors
the source raises.

Integer draws use rejection sampling: raw values are masked to the bit
length of the bound and redrawn when they land at or above it, so every
result is equally likely.
"""

from __future__ import annotations

import binascii
import builtins
import math
import string
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union
from uuid import UUID

from secure_random.entropy.base import validate_byte_count
from secure_random.exceptions import InvalidArgumentError
from secure_random.source import RandomSource

if TYPE_CHECKING:
    from collections.abc import Sequence

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits

_FLOAT_BITS = 53
_FLOAT_SCALE = 2.0**-_FLOAT_BITS
_URLSAFE_TABLE = str.maketrans("+/", "-_")
_UUID7_MAX_TIMESTAMP = 1 << 48

Number = Union[int, float]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _interpolate(low: float, high: float, u: float) -> float:
    # high - low can overflow to inf for ends near the double limits.
    return low * (1.0 - u) + high * u


@dataclass(frozen=True)
class NumericRange:
    """Numeric interval for :meth:`SecureRandom.random_number`.

    ``NumericRange(1, 6)`` covers ``1..6`` inclusive; with ``exclusive=True``
    the upper end is left out. Two ints give an int result, anything else a
    float.

    Raises:
        InvalidArgumentError: If an end is not a finite number or the range is empty.
    """

    low: Number
    high: Number
    exclusive: bool = False

    def __post_init__(self) -> None:
        if not (_is_number(self.low) and _is_number(self.high)):
            raise InvalidArgumentError(
                f"range ends must be numbers, got {self.low!r} and {self.high!r}"
            )
        if any(isinstance(end, float) and not math.isfinite(end) for end in (self.low, self.high)):
            raise InvalidArgumentError(f"range ends must be finite: {self!r}")
        if self.high < self.low or (self.exclusive and self.high == self.low):
            raise InvalidArgumentError(f"empty range: {self!r}")

    @property
    def is_integral(self) -> bool:
        return isinstance(self.low, int) and isinstance(self.high, int)


class SecureRandom:
    """Secure random formatter.

    Args:
        source: Handle supplying raw bytes. A new :class:`RandomSource` built
            from the environment is used when omitted.
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source = source if source is not None else RandomSource()

    @property
    def source(self) -> RandomSource:
        return self._source

    # ------------------------------------------------------------------
    # Bytes and encodings
    # ------------------------------------------------------------------

    def bytes(self, n: int) -> builtins.bytes:
        """Return exactly *n* secure random bytes."""
        return self._source.bytes(n)

    gen_random = bytes

    def random_bytes(self, n: int | None = None) -> builtins.bytes:
        """Return *n* random bytes; ``None`` means ``config.default_byte_count`` (16).

        Raises:
            InvalidArgumentError: If *n* is negative or not an integer.
        """
        if n is None:
            n = self._source.config.default_byte_count
        return self._source.bytes(n)

    def hex(self, n: int | None = None) -> str:
        """Return ``2 * n`` lowercase hex characters."""
        return self.random_bytes(n).hex()

    def base64(self, n: int | None = None) -> str:
        """Return standard base64 of *n* random bytes, padded, no line breaks.

        The result may contain A-Z, a-z, 0-9, ``+``, ``/`` and ``=``.
        """
        return binascii.b2a_base64(self.random_bytes(n), newline=False).decode("ascii")

    def urlsafe_base64(self, n: int | None = None, padding: bool = False) -> str:
        """Return URL-safe base64 of *n* random bytes.

        ``+`` and ``/`` become ``-`` and ``_``. Padding ``=`` is stripped
        unless *padding* is true, since ``=`` may act as a URL delimiter.
        """
        encoded = self.base64(n).translate(_URLSAFE_TABLE)
        if not padding:
            encoded = encoded.rstrip("=")
        return encoded

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def random_number(self, n: Number | range | NumericRange | None = None) -> Number:
        """Return a uniformly distributed random number.

        Args:
            n: What to draw from:

                * ``None`` or ``0`` — float in ``[0, 1)``
                * positive int *k* — int in ``[0, k)``
                * positive float *x* — float in ``[0, x)``
                * ``range`` — one of its elements
                * :class:`NumericRange` — value in the interval

        Raises:
            InvalidArgumentError: For negative or non-finite bounds, empty
                ranges, booleans and unsupported types.
        """
        if n is None:
            return self._random_float()
        if isinstance(n, NumericRange):
            return self._random_in_range(n)
        if isinstance(n, range):
            # len() overflows past sys.maxsize elements.
            step = n.step
            size = max(0, (n.stop - n.start + step - (1 if step > 0 else -1)) // step)
            if size == 0:
                raise InvalidArgumentError(f"empty range: {n!r}")
            return n.start + step * self._random_below(size)
        if not _is_number(n):
            raise InvalidArgumentError(f"unsupported bound: {n!r}")
        if (isinstance(n, float) and not math.isfinite(n)) or n < 0:
            raise InvalidArgumentError(f"invalid bound: {n!r}")
        if n == 0:
            return self._random_float()
        if isinstance(n, int):
            return self._random_below(n)
        return self._scale_exclusive(0.0, float(n))

    rand = random_number

    def _random_float(self) -> float:
        return (int.from_bytes(self.bytes(7), "big") >> 3) * _FLOAT_SCALE

    def _random_unit_inclusive(self) -> float:
        return self._random_below((1 << _FLOAT_BITS) + 1) * _FLOAT_SCALE

    def _scale_exclusive(self, low: float, high: float) -> float:
        value = max(_interpolate(low, high, self._random_float()), low)
        # Rounding can land exactly on the open end.
        return value if value < high else math.nextafter(high, low)

    def _random_in_range(self, interval: NumericRange) -> Number:
        if interval.is_integral:
            span = interval.high - interval.low + (0 if interval.exclusive else 1)
            return interval.low + self._random_below(span)
        low, high = float(interval.low), float(interval.high)
        if interval.exclusive:
            return self._scale_exclusive(low, high)
        return min(max(_interpolate(low, high, self._random_unit_inclusive()), low), high)

    def _random_below(self, bound: int) -> int:
        return self._random_indices(bound, 1)[0]

    def _random_indices(self, bound: int, count: int) -> list[int]:
        """Draw *count* independent ints in ``[0, bound)`` by rejection sampling."""
        bits = (bound - 1).bit_length()
        width = (bits + 7) // 8
        mask = (1 << bits) - 1
        indices: list[int] = []
        while True:
            raw = self.bytes(width * (count - len(indices)))
            if width == 0:
                return [0] * count
            for offset in range(0, len(raw), width):
                value = int.from_bytes(raw[offset : offset + width], "big") & mask
                if value < bound:
                    indices.append(value)
            if len(indices) == count:
                return indices

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def choose(self, source: Sequence[str] | Sequence[object], n: int) -> str | list[object]:
        """Return *n* elements drawn independently and uniformly from *source*.

        A ``str`` source yields a ``str``; any other sequence yields a ``list``.

        Raises:
            InvalidArgumentError: If *source* is empty or *n* is negative.
        """
        validate_byte_count(n, "count")
        if len(source) == 0:
            raise InvalidArgumentError("choose() needs a non-empty sequence of symbols")
        picks = [source[i] for i in self._random_indices(len(source), n)]
        if isinstance(source, str):
            return "".join(picks)
        return picks

    def alphanumeric(self, n: int | None = None, chars: str = ALPHANUMERIC) -> str:
        """Return *n* characters from ``[A-Za-z0-9]`` (or *chars*); default length 16."""
        if n is None:
            n = self._source.config.default_byte_count
        return "".join(self.choose(chars, n))

    # ------------------------------------------------------------------
    # UUIDs
    # ------------------------------------------------------------------

    def uuid(self) -> str:
        """Return a random (version 4) UUID string, e.g. ``'2d931510-d99f-494a-8c67-87feb05e1594'``."""
        return str(UUID(bytes=self.bytes(16), version=4))

    uuid_v4 = uuid

    def uuid_v7(self, timestamp_ms: int | None = None) -> str:
        """Return a time-ordered (version 7) UUID string.

        The first 48 bits hold the Unix time in milliseconds; the remaining
        bits, apart from version and variant, are random.

        Args:
            timestamp_ms: Milliseconds since the epoch; current time when omitted.

        Raises:
            InvalidArgumentError: If the timestamp does not fit in 48 bits.
        """
        if timestamp_ms is None:
            timestamp_ms = time.time_ns() // 1_000_000
        if (
            isinstance(timestamp_ms, bool)
            or not isinstance(timestamp_ms, int)
            or not 0 <= timestamp_ms < _UUID7_MAX_TIMESTAMP
        ):
            raise InvalidArgumentError(f"timestamp_ms out of range: {timestamp_ms!r}")
        value = (timestamp_ms << 80) | int.from_bytes(self.bytes(10), "big")
        value &= ~(0xF000 << 64)
        value |= 7 << 76
        value &= ~(0xC000 << 48)
        value |= 0x8000 << 48
        return str(UUID(int=value))
