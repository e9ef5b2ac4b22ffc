"""Command batching engine."""

from bulkstream.batching.contracts import BulkEngineABC
from bulkstream.batching.engine import BulkEngine, EngineClosedError, Mode

__all__ = ["BulkEngineABC", "BulkEngine", "EngineClosedError", "Mode"]
