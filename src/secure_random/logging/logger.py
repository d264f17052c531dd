"""Logger for entropy source selection events.

Uses the standard ``logging`` module with the ``"secure_random"`` logger.
No ``print()`` statements. Byte requests are never logged; only the
once-per-handle selection is.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secure_random.logging.types import SelectionRecord

logger = logging.getLogger("secure_random")


class SelectionLogger:
    """Selection event logger.

    Log levels:
        ``"none"``: No logging output.

        ``"summary"``: One line naming the selected source, the candidates
        tried and the elapsed time.

        ``"full"``: Full JSON dump of all record fields.

    A selection with no usable source is logged at ERROR for both
    ``"summary"`` and ``"full"``.
    """

    def __init__(self, log_level: str = "summary") -> None:
        self._log_level = log_level

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the selection.
        """
        if self._log_level == "none":
            return

        level = logging.INFO if record.succeeded else logging.ERROR
        if self._log_level == "summary":
            if record.succeeded:
                logger.log(
                    level,
                    "entropy source selected: %s (candidates=%s, %.2fms)",
                    record.selected_source,
                    ",".join(record.candidates),
                    record.selection_ms,
                )
            else:
                logger.log(
                    level,
                    "no secure random source available (candidates=%s): %s",
                    ",".join(record.candidates),
                    "; ".join(record.failures),
                )
        elif self._log_level == "full":
            logger.log(level, "selection_record: %s", json.dumps(asdict(record), default=str))
