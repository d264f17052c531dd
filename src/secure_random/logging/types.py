"""Data types for the selection logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of one entropy source selection.

    Attributes:
        timestamp_ns: Wall-clock time of selection (nanoseconds since epoch).
        selection_ms: Time spent constructing and probing candidates (ms).
        selected_source: Name of the chosen source, or ``None`` if none qualified.
        candidates: Source names tried, in priority order.
        failures: ``"<name>: <reason>"`` for every disqualified candidate.
    """

    timestamp_ns: int
    selection_ms: float
    selected_source: str | None
    candidates: tuple[str, ...]
    failures: tuple[str, ...]

    @property
    def succeeded(self) -> bool:
        """Whether a source was selected."""
        return self.selected_source is not None
