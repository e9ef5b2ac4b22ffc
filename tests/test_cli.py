from __future__ import annotations

import io
from pathlib import Path

import pytest

from bulkstream.cli import main


def _run(tmp_path: Path, argv: list[str], stdin_bytes: bytes, clock=lambda: 1000.0) -> tuple[int, bytes]:
    stdout = io.BytesIO()
    status = main(
        [*argv, "--output-dir", str(tmp_path)],
        stdin=io.BytesIO(stdin_bytes),
        stdout=stdout,
        clock=clock,
    )
    return status, stdout.getvalue()


def test_cli_size_batching(tmp_path: Path) -> None:
    ticks = iter([1000.0, 1001.0, 1002.0])

    status, out = _run(tmp_path, ["3"], b"a\nb\nc\nd\ne\nf\ng\n", clock=lambda: next(ticks))

    assert status == 0
    assert out == b"bulk: a, b, c\nbulk: d, e, f\nbulk: g\n"
    assert (tmp_path / "bulk1000.log").read_bytes() == b"bulk: a, b, c\n"
    assert (tmp_path / "bulk1002.log").read_bytes() == b"bulk: g\n"


def test_cli_dynamic_block_and_missing_final_newline(tmp_path: Path) -> None:
    ticks = iter([1.0, 2.0])

    status, out = _run(tmp_path, ["2"], b"a\n{\nb\nc\nd\n}", clock=lambda: next(ticks))

    assert status == 0
    assert out == b"bulk: a\nbulk: b, c, d\n"
    assert (tmp_path / "bulk2.log").read_bytes() == b"bulk: b, c, d\n"


def test_cli_empty_input(tmp_path: Path) -> None:
    status, out = _run(tmp_path, ["5"], b"")

    assert status == 0
    assert out == b""
    assert list(tmp_path.iterdir()) == []


def test_cli_suffix_policy_keeps_every_artifact(tmp_path: Path) -> None:
    status, _ = _run(tmp_path, ["1", "--on-collision", "suffix"], b"a\nb\n")

    assert status == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["bulk1000.log", "bulk1000_1.log"]


def test_cli_default_policy_overwrites_same_second(tmp_path: Path) -> None:
    status, out = _run(tmp_path, ["1"], b"a\nb\n")

    assert status == 0
    assert out == b"bulk: a\nbulk: b\n"
    assert [p.name for p in tmp_path.iterdir()] == ["bulk1000.log"]
    assert (tmp_path / "bulk1000.log").read_bytes() == b"bulk: b\n"


@pytest.mark.parametrize(
    "raw, message",
    [
        ("abc", "Invalid bulk size: abc"),
        ("-3", "Invalid bulk size: -3"),
        ("99999999999999999999999", "Bulk size out of range: 99999999999999999999999"),
        ("0", "Bulk size must be positive: 0"),
    ],
)
def test_cli_bad_bulk_size(tmp_path: Path, capsys: pytest.CaptureFixture[str], raw: str, message: str) -> None:
    stdin = io.BytesIO(b"a\n")

    status = main([raw, "--output-dir", str(tmp_path)], stdin=stdin, stdout=io.BytesIO())

    assert status == 1
    assert message in capsys.readouterr().err
    assert stdin.tell() == 0
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("argv", [[], ["1", "2"]])
def test_cli_wrong_positional_count_is_usage_error(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    stdin = io.BytesIO(b"a\n")

    with pytest.raises(SystemExit) as excinfo:
        main(argv, stdin=stdin, stdout=io.BytesIO())

    assert excinfo.value.code != 0
    assert "usage: bulk" in capsys.readouterr().err
    assert stdin.tell() == 0


def test_cli_passes_undecodable_bytes_through(tmp_path: Path) -> None:
    ticks = iter([3.0, 4.0])

    status, out = _run(tmp_path, ["1"], b"ok\n\xff\xfe\n", clock=lambda: next(ticks))

    assert status == 0
    assert out == b"bulk: ok\nbulk: \xff\xfe\n"
    assert (tmp_path / "bulk4.log").read_bytes() == b"bulk: \xff\xfe\n"
