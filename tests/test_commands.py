from bulkstream.commands import CLOSE, OPEN, TokenKind, classify, decode_line, encode_text


def test_classify_control_tokens_exact_match_only() -> None:
    assert classify("{") is OPEN
    assert classify("}") is CLOSE
    assert classify("{ ").kind is TokenKind.PAYLOAD
    assert classify(" }").kind is TokenKind.PAYLOAD
    assert classify("{}").kind is TokenKind.PAYLOAD


def test_classify_payload_keeps_text_verbatim() -> None:
    token = classify("  cmd  ")
    assert token.kind is TokenKind.PAYLOAD
    assert token.text == "  cmd  "


def test_decode_line_removes_only_newline() -> None:
    assert decode_line(b"cmd\n") == "cmd"
    assert decode_line(b"cmd") == "cmd"
    assert decode_line(b"cmd \r\n") == "cmd \r"
    assert decode_line(b"\n") == ""


def test_undecodable_bytes_round_trip() -> None:
    raw = b"caf\xc3\xa9 \xff\xfe"

    command = decode_line(raw + b"\n")

    assert command.startswith("caf\u00e9 ")
    assert encode_text(command) == raw
