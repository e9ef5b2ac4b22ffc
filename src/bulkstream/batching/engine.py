"""Size- and block-driven batching engine for command streams."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Sequence

from bulkstream.batching.contracts import BulkEngineABC
from bulkstream.commands import Token, TokenKind, classify
from bulkstream.config import NonPositiveBulkSizeError

logger = logging.getLogger(__name__)


FlushFn = Callable[[Sequence[str]], None]


class Mode(Enum):
    """Batching mode: size-driven or inside a dynamic block."""

    NORMAL = "normal"
    DYNAMIC_BLOCK = "dynamic_block"


class EngineClosedError(RuntimeError):
    """Raised when the engine is used after ``finalize``."""


class BulkEngine(BulkEngineABC):
    """
    Accumulates commands and hands them to ``flush_fn`` as bulks.

    In NORMAL mode a bulk is flushed as soon as it holds ``bulk_size``
    commands. A ``{`` line flushes any partial bulk and opens a dynamic
    block; everything up to the matching ``}`` becomes one bulk regardless
    of size. Blocks do not nest: a ``{`` inside a block and a ``}`` outside
    one are ignored.
    """

    def __init__(self, *, bulk_size: int, flush_fn: FlushFn):
        if bulk_size <= 0:
            raise NonPositiveBulkSizeError(str(bulk_size))
        self._bulk_size = bulk_size
        self._flush_fn = flush_fn
        self._mode = Mode.NORMAL
        self._pending: list[str] = []
        self._flush_count = 0
        self._closed = False

    @property
    def bulk_size(self) -> int:
        return self._bulk_size

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    @property
    def flush_count(self) -> int:
        return self._flush_count

    def submit(self, line: str | Token) -> None:
        if self._closed:
            raise EngineClosedError("submit() called after finalize()")

        token = line if isinstance(line, Token) else classify(line)

        if token.kind is TokenKind.OPEN:
            self._open_block()
        elif token.kind is TokenKind.CLOSE:
            self._close_block()
        else:
            self._pending.append(token.text)
            if self._mode is Mode.NORMAL and len(self._pending) == self._bulk_size:
                self.flush()

    def finalize(self) -> None:
        if self._closed:
            raise EngineClosedError("finalize() called twice")
        if self._mode is Mode.DYNAMIC_BLOCK:
            logger.debug("BulkEngine: input ended inside an open block")
        try:
            self.flush()
        finally:
            self._closed = True

    def run(self, lines: Iterable[str | Token]) -> int:
        """Submit every line, finalize, and return the number of flushes."""
        for line in lines:
            self.submit(line)
        self.finalize()
        return self._flush_count

    def flush(self) -> None:
        """Emit the pending bulk, if any, and clear it."""
        drained = self._drain()
        if drained is None:
            return
        self._flush_count += 1
        self._flush_fn(drained)

    def _open_block(self) -> None:
        if self._mode is Mode.DYNAMIC_BLOCK:
            return
        self.flush()
        self._mode = Mode.DYNAMIC_BLOCK
        logger.debug("BulkEngine: dynamic block opened")

    def _close_block(self) -> None:
        if self._mode is not Mode.DYNAMIC_BLOCK:
            return
        self._mode = Mode.NORMAL
        logger.debug("BulkEngine: dynamic block closed with %d commands", len(self._pending))
        self.flush()

    def _drain(self) -> tuple[str, ...] | None:
        if not self._pending:
            return None
        drained = tuple(self._pending)
        self._pending = []
        return drained
