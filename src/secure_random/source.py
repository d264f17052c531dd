"""RandomSource — the explicit handle to one selected entropy source.

Selection happens lazily on the first ``bytes()`` call and exactly once per
handle. Concurrent first callers wait on a lock and all observe the same
outcome. After that, ``bytes()`` runs without locking; the selected source is
never replaced, and a failed selection stays failed.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from secure_random.config import SecureRandomConfig, validate_config
from secure_random.entropy.base import validate_byte_count
from secure_random.entropy.selection import candidates_from_config, select_source
from secure_random.exceptions import NoSecureSourceError
from secure_random.logging.logger import SelectionLogger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from secure_random.entropy.base import EntropySource, SourceKind
    from secure_random.entropy.selection import Candidate, SourceSelection
    from secure_random.logging.types import SelectionRecord

logger = logging.getLogger("secure_random")

_NO_SOURCE_MESSAGE = "no secure random source available"


class RandomSource:
    """Process- or caller-scoped handle around a once-selected entropy source.

    Args:
        config: Configuration; loaded from the environment when omitted.
        candidates: Explicit candidates in priority order. When omitted they
            are built from ``config.source_order``.

    Raises:
        ConfigValidationError: If *config* holds unusable values.
    """

    def __init__(
        self,
        config: SecureRandomConfig | None = None,
        candidates: Sequence[Candidate] | None = None,
    ) -> None:
        self._config = config if config is not None else SecureRandomConfig()
        kinds = validate_config(self._config)
        if candidates is None:
            candidates = candidates_from_config(self._config, kinds)
        self._candidates: tuple[Candidate, ...] = tuple(candidates)
        self._selection_logger = SelectionLogger(self._config.log_level)
        self._lock = threading.Lock()
        self._selection: SourceSelection | None = None

    @property
    def config(self) -> SecureRandomConfig:
        """The configuration this handle was built with."""
        return self._config

    @property
    def is_selected(self) -> bool:
        """Whether selection has already run (successfully or not)."""
        return self._selection is not None

    @property
    def selected(self) -> EntropySource:
        """The selected source, selecting on first access.

        Raises:
            NoSecureSourceError: If no candidate qualified.
        """
        source = self._ensure_selected().source
        if source is None:
            raise NoSecureSourceError(_NO_SOURCE_MESSAGE)
        return source

    @property
    def kind(self) -> SourceKind:
        """Kind of the selected source."""
        return self.selected.kind

    @property
    def selection_record(self) -> SelectionRecord:
        """Diagnostic record of the selection, selecting on first access."""
        return self._ensure_selected().record

    def _ensure_selected(self) -> SourceSelection:
        selection = self._selection
        if selection is not None:
            return selection
        with self._lock:
            if self._selection is None:
                selection = select_source(self._candidates)
                self._selection_logger.log_selection(selection.record)
                self._selection = selection
            return self._selection

    def bytes(self, n: int) -> bytes:
        """Return exactly *n* secure random bytes from the selected source.

        Args:
            n: Number of bytes, ``>= 0``.

        Returns:
            *n* bytes; ``b""`` for zero without calling the source.

        Raises:
            InvalidArgumentError: If *n* is negative or not an integer.
            NoSecureSourceError: If no secure source could be selected, or the
                selected one became unavailable.
            PartialReadError: If the source returned fewer than *n* bytes.
        """
        validate_byte_count(n)
        source = self.selected
        return source.get_random_bytes(n)

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for the selected source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        selection = self._ensure_selected()
        if selection.source is None:
            return {
                "source": None,
                "healthy": False,
                "reason": _NO_SOURCE_MESSAGE,
                "failures": list(selection.record.failures),
            }
        return selection.source.health_check()

    def close(self) -> None:
        """Close the selected source, if any. The selection itself is kept."""
        selection = self._selection
        if selection is not None and selection.source is not None:
            selection.source.close()

    def __repr__(self) -> str:
        selection = self._selection
        if selection is None:
            state = "unselected"
        else:
            state = selection.record.selected_source or "failed"
        return f"{type(self).__name__}({state})"
