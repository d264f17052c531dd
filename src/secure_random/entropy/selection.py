"""Ordered try-and-select over candidate entropy sources.

Each candidate is constructed and asked for a single byte. The first one
that answers is selected. Candidates that are missing (``NoSecureSourceError``)
or that return a short first read (``PartialReadError``) are skipped; any other
exception propagates. If nothing qualifies the selection records a permanent
failure and no source is returned; there is no non-cryptographic fallback.
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from secure_random.entropy.base import EntropySource, SourceKind
from secure_random.entropy.registry import EntropySourceRegistry
from secure_random.exceptions import NoSecureSourceError, PartialReadError
from secure_random.logging.types import SelectionRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from secure_random.config import SecureRandomConfig

logger = logging.getLogger("secure_random")

# Bytes requested from each candidate to confirm it works.
_TRIAL_READ_SIZE = 1


@dataclass(frozen=True)
class Candidate:
    """A named way to build one entropy source."""

    name: str
    factory: Callable[[], EntropySource]


@dataclass(frozen=True)
class SourceSelection:
    """Outcome of a selection: the chosen source, or ``None`` on failure."""

    source: EntropySource | None
    record: SelectionRecord


def candidates_from_config(
    config: SecureRandomConfig,
    kinds: Sequence[SourceKind],
) -> list[Candidate]:
    """Build candidates for *kinds* in order, wiring in config values.

    Args:
        config: Supplies ``device_path`` for the OS device source.
        kinds: Source kinds in priority order.

    Returns:
        One candidate per kind.
    """
    candidates: list[Candidate] = []
    for kind in kinds:
        source_cls = EntropySourceRegistry.get(kind)
        if kind is SourceKind.OS_DEVICE:
            factory: Callable[[], EntropySource] = functools.partial(
                source_cls, config.device_path
            )
        else:
            factory = source_cls
        candidates.append(Candidate(kind.value, factory))
    return candidates


def _try_candidate(candidate: Candidate) -> EntropySource:
    source = candidate.factory()
    try:
        source.get_random_bytes(_TRIAL_READ_SIZE)
    except (NoSecureSourceError, PartialReadError):
        source.close()
        raise
    return source


def select_source(candidates: Sequence[Candidate]) -> SourceSelection:
    """Select the first candidate that constructs and serves a trial read.

    Args:
        candidates: Candidates in priority order.

    Returns:
        The selection. ``source`` is ``None`` when no candidate qualified.
    """
    timestamp_ns = time.time_ns()
    start = time.perf_counter()
    tried: list[str] = []
    failures: list[str] = []
    selected: EntropySource | None = None

    for candidate in candidates:
        tried.append(candidate.name)
        try:
            selected = _try_candidate(candidate)
        except (NoSecureSourceError, PartialReadError) as e:
            logger.warning("Entropy source %r unusable: %s", candidate.name, e)
            failures.append(f"{candidate.name}: {e}")
            continue
        break

    record = SelectionRecord(
        timestamp_ns=timestamp_ns,
        selection_ms=(time.perf_counter() - start) * 1000.0,
        selected_source=selected.name if selected is not None else None,
        candidates=tuple(tried),
        failures=tuple(failures),
    )
    return SourceSelection(source=selected, record=record)
