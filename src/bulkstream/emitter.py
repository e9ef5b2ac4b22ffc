"""
Dual-sink emitter for bulks.

Renders and encodes a buffer snapshot once and delivers the same bytes to
the console sink and to a freshly named file artifact.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from bulkstream.commands import encode_text
from bulkstream.naming import EpochSecondsNamer
from bulkstream.sinks import BulkSink, ConsoleSink, FileSink

logger = logging.getLogger(__name__)


BULK_PREFIX = "bulk: "
COMMAND_SEPARATOR = ", "
LINE_TERMINATOR = "\n"

NameGenerator = Callable[[], str]


def render_bulk(commands: Sequence[str]) -> str:
    """Render commands as ``bulk: cmd1, cmd2, ...`` followed by a newline."""
    return f"{BULK_PREFIX}{COMMAND_SEPARATOR.join(commands)}{LINE_TERMINATOR}"


def encode_bulk(commands: Sequence[str]) -> bytes:
    """Rendered bulk as the exact bytes written to every sink."""
    return encode_text(render_bulk(commands))


class BulkEmitter:
    """
    Flush callback writing each bulk to a console sink and an artifact sink.

    The console is written first. An ``OSError`` from the artifact sink is
    logged and counted in ``failed_writes``; the bulk has already reached the
    console and processing continues. Console errors propagate.
    """

    def __init__(
        self,
        *,
        console: BulkSink | None = None,
        artifacts: BulkSink | None = None,
        namer: NameGenerator | None = None,
    ):
        self.console = console if console is not None else ConsoleSink()
        self.artifacts = artifacts if artifacts is not None else FileSink()
        self.namer = namer if namer is not None else EpochSecondsNamer()
        self.emitted = 0
        self.failed_writes = 0

    def __call__(self, commands: Sequence[str]) -> None:
        self.flush(commands)

    def flush(self, commands: Sequence[str]) -> None:
        if not commands:
            return

        name = self.namer()
        data = encode_bulk(commands)

        self.console.write(name, data)
        try:
            self.artifacts.write(name, data)
        except OSError as exc:
            self.failed_writes += 1
            logger.error("BulkEmitter: could not write artifact %s: %s", name, exc)

        self.emitted += 1
        logger.debug("BulkEmitter: emitted %d commands as %s", len(commands), name)
