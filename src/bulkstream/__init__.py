"""
Command bulk logger.

Groups a stream of text commands into bulks by size or by explicit
``{`` ... ``}`` blocks, and emits each bulk to the console and to a
timestamped log artifact.
"""

from bulkstream.batching import BulkEngine, BulkEngineABC, EngineClosedError, Mode
from bulkstream.commands import CLOSE, OPEN, Token, TokenKind, classify, decode_line
from bulkstream.config import (
    BulkConfig,
    BulkSizeOutOfRangeError,
    ConfigurationError,
    InvalidBulkSizeError,
    NonPositiveBulkSizeError,
    parse_bulk_size,
)
from bulkstream.emitter import BulkEmitter, encode_bulk, render_bulk
from bulkstream.naming import EpochSecondsNamer, UniqueEpochNamer, artifact_name
from bulkstream.sinks import BulkSink, ConsoleSink, FileSink, create_sink

__all__ = [
    'BulkEngine',
    'BulkEngineABC',
    'EngineClosedError',
    'Mode',
    'Token',
    'TokenKind',
    'OPEN',
    'CLOSE',
    'classify',
    'decode_line',
    'BulkConfig',
    'ConfigurationError',
    'InvalidBulkSizeError',
    'BulkSizeOutOfRangeError',
    'NonPositiveBulkSizeError',
    'parse_bulk_size',
    'BulkEmitter',
    'render_bulk',
    'encode_bulk',
    'EpochSecondsNamer',
    'UniqueEpochNamer',
    'artifact_name',
    'BulkSink',
    'ConsoleSink',
    'FileSink',
    'create_sink',
]
