"""File sink writing one log artifact per bulk."""

import logging
from pathlib import Path
from typing import Union

from bulkstream.sinks.base import BulkSink

logger = logging.getLogger(__name__)


class FileSink(BulkSink):
    """
    Writes each bulk to its own artifact under ``directory``.

    The artifact is created fresh (an existing file of the same name is
    truncated) and closed before ``write`` returns. Bytes are written as
    given, so the file matches the console output exactly.
    """

    _sink_type = "file"

    def __init__(self, directory: Union[str, Path] = "."):
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / name

    def write(self, name: str, data: bytes) -> None:
        path = self.path_for(name)
        with open(path, "wb") as handle:
            handle.write(data)
        logger.debug("FileSink: wrote %d bytes to %s", len(data), path)
