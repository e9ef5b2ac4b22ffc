"""Artifact name generators driven by an injectable clock."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


Clock = Callable[[], float]

ARTIFACT_PREFIX = "bulk"
ARTIFACT_SUFFIX = ".log"


def artifact_name(epoch_seconds: int, sequence: int = 0) -> str:
    """Return ``bulk<epoch_seconds>.log``, or ``bulk<epoch_seconds>_<n>.log`` for n > 0."""
    if sequence:
        return f"{ARTIFACT_PREFIX}{epoch_seconds}_{sequence}{ARTIFACT_SUFFIX}"
    return f"{ARTIFACT_PREFIX}{epoch_seconds}{ARTIFACT_SUFFIX}"


class EpochSecondsNamer:
    """
    Names artifacts by wall-clock epoch seconds.

    Two flushes within the same second get the same name, so the later
    artifact replaces the earlier one.
    """

    def __init__(self, clock: Clock = time.time):
        self._clock = clock

    def __call__(self) -> str:
        return artifact_name(int(self._clock()))


class UniqueEpochNamer(EpochSecondsNamer):
    """Epoch-seconds naming with a counter suffix for same-second flushes."""

    def __init__(self, clock: Clock = time.time):
        super().__init__(clock)
        self._last_second: int | None = None
        self._sequence = 0

    def __call__(self) -> str:
        second = int(self._clock())
        if second == self._last_second:
            self._sequence += 1
            logger.debug(
                "UniqueEpochNamer: collision at %d, using sequence %d", second, self._sequence
            )
        else:
            self._last_second = second
            self._sequence = 0
        return artifact_name(second, self._sequence)
