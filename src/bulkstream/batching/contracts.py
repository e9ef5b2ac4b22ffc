"""ABC contract for command batching engines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bulkstream.commands import Token


class BulkEngineABC(ABC):
    """Contract for engines that group input lines into bulks."""

    @abstractmethod
    def submit(self, line: str | Token) -> None:
        """Process one input line (or classified token)."""
        raise NotImplementedError

    @abstractmethod
    def finalize(self) -> None:
        """Flush whatever remains once input is exhausted."""
        raise NotImplementedError
