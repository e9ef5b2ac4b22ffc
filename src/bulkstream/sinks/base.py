"""
Base class for bulk output sinks.

Sinks receive fully rendered, encoded bulk lines and deliver them
somewhere. Concrete sinks auto-register by ``_sink_type`` so they can be built by key.
"""

from abc import abstractmethod
from typing import Any, Dict, Optional, Type

from bulkstream.registry import AutoRegisterMeta


class BulkSink(metaclass=AutoRegisterMeta):
    """
    Abstract destination for rendered bulks.

    Example:
        class MemorySink(BulkSink):
            _sink_type = "memory"

            def write(self, name, data):
                ...
    """

    __registry_key__ = '_sink_type'
    __registry__: Dict[str, Type["BulkSink"]]
    _sink_type: Optional[str] = None

    @abstractmethod
    def write(self, name: str, data: bytes) -> None:
        """
        Deliver one rendered bulk.

        Args:
            name: Artifact name derived for this flush
            data: Encoded bulk line, terminator included
        """
        raise NotImplementedError


def create_sink(sink_type: str, **kwargs: Any) -> BulkSink:
    """Instantiate a registered sink by its ``_sink_type`` key."""
    try:
        sink_cls = BulkSink.__registry__[sink_type]
    except KeyError:
        raise ValueError(
            f"Unknown sink type {sink_type!r}, registered: {sorted(BulkSink.__registry__)}"
        ) from None
    return sink_cls(**kwargs)
