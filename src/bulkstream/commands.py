"""Classification of raw input lines into typed tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

# Commands are opaque: undecodable input bytes round-trip through surrogate escapes
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class TokenKind(Enum):
    """Kinds of input line understood by the batching engine."""

    OPEN = "open"
    CLOSE = "close"
    PAYLOAD = "payload"


@dataclass(frozen=True)
class Token:
    """A classified input line. ``text`` is the command for payload tokens."""

    kind: TokenKind
    text: str = ""

    @classmethod
    def payload(cls, text: str) -> "Token":
        return cls(TokenKind.PAYLOAD, text)


OPEN = Token(TokenKind.OPEN, BLOCK_OPEN)
CLOSE = Token(TokenKind.CLOSE, BLOCK_CLOSE)


def classify(line: str) -> Token:
    """Map a line to a token. Only exact ``{`` and ``}`` lines are control tokens."""
    if line == BLOCK_OPEN:
        return OPEN
    if line == BLOCK_CLOSE:
        return CLOSE
    return Token.payload(line)


def decode_line(raw: bytes) -> str:
    """
    Decode one raw input line into a command.

    A single trailing newline is dropped and the rest is kept verbatim.
    Bytes that are not valid UTF-8 survive as surrogate escapes, so
    encoding the command again with ``encode_text`` restores them exactly.
    """
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    return raw.decode(TEXT_ENCODING, TEXT_ERRORS)


def encode_text(text: str) -> bytes:
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)
