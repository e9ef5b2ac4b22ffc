"""
Output sinks for rendered bulks.

Importing this package registers the built-in sinks with ``BulkSink``.
"""

from bulkstream.sinks.base import BulkSink, create_sink
from bulkstream.sinks.console import ConsoleSink
from bulkstream.sinks.file import FileSink

__all__ = ["BulkSink", "ConsoleSink", "FileSink", "create_sink"]
