"""
Command-line entry point.

Reads commands from stdin, one per line, and prints each bulk to stdout
while writing it to a ``bulk<epoch_seconds>.log`` artifact.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Iterable, Iterator, Optional, Sequence

from bulkstream.batching import BulkEngine
from bulkstream.commands import decode_line
from bulkstream.config import COLLISION_OVERWRITE, COLLISION_POLICIES, BulkConfig, ConfigurationError
from bulkstream.emitter import BulkEmitter
from bulkstream.naming import Clock, EpochSecondsNamer, UniqueEpochNamer
from bulkstream.sinks import create_sink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bulk",
        description="Group commands read from stdin into bulks.",
    )
    parser.add_argument("bulk_size", help="number of commands per bulk (positive integer)")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory for bulk<epoch_seconds>.log artifacts (default: current directory)",
    )
    parser.add_argument(
        "--on-collision",
        choices=COLLISION_POLICIES,
        default=COLLISION_OVERWRITE,
        help="artifact naming when two bulks land in the same second",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="diagnostic log level, written to stderr",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def build_emitter(
    config: BulkConfig,
    *,
    stdout: Optional[BinaryIO] = None,
    clock: Optional[Clock] = None,
) -> BulkEmitter:
    """Wire console and file sinks with the configured naming policy."""
    if config.collision_policy == COLLISION_OVERWRITE:
        namer_cls = EpochSecondsNamer
    else:
        namer_cls = UniqueEpochNamer
    namer = namer_cls(clock) if clock is not None else namer_cls()
    return BulkEmitter(
        console=create_sink("console", stream=stdout),
        artifacts=create_sink("file", directory=config.output_dir),
        namer=namer,
    )


def read_commands(stream: Iterable[bytes]) -> Iterator[str]:
    for raw in stream:
        yield decode_line(raw)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    clock: Optional[Clock] = None,
) -> int:
    """Run the bulk logger and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = BulkConfig.from_args(args)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1

    emitter = build_emitter(config, stdout=stdout, clock=clock)
    engine = BulkEngine(bulk_size=config.bulk_size, flush_fn=emitter)

    flushes = engine.run(read_commands(stdin if stdin is not None else sys.stdin.buffer))

    logger.info("bulk: %d bulks emitted, %d artifact writes failed", flushes, emitter.failed_writes)
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
