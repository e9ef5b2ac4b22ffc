"""Console sink writing bulks to a live byte stream."""

import sys
from typing import BinaryIO, Optional

from bulkstream.sinks.base import BulkSink


class ConsoleSink(BulkSink):
    """Writes each bulk to a binary stream (stdout's buffer by default) and flushes it."""

    _sink_type = "console"

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        # Resolved lazily so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout.buffer

    def write(self, name: str, data: bytes) -> None:
        stream = self.stream
        stream.write(data)
        stream.flush()
