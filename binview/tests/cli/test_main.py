from __future__ import annotations

import struct
import sys
from pathlib import Path

import pytest

from binview.cli.main import main


def _bin(tmp_path: Path, data: bytes) -> str:
    p = tmp_path / "data.bin"
    p.write_bytes(data)
    return str(p)


def test_u16_little_endian(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01\x00")
    assert main(["u16", f, "-n", "1"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_u16_big_endian(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01\x00")
    assert main(["u16", f, "-b", "big-endian"]) == 0
    assert capsys.readouterr().out == "256\n"


def test_i8_negative(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\xFF")
    assert main(["i8", f]) == 0
    assert capsys.readouterr().out == "-1\n"


def test_f32_big_endian(tmp_path: Path, capsys):
    f = _bin(tmp_path, bytes.fromhex("3F800000"))
    assert main(["f32", f, "--byte-order", "big-endian"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_short_file_prints_nothing_and_succeeds(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01\x02\x03")
    assert main(["u32", f]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_offset_at_end_prints_nothing_and_succeeds(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01\x02\x03")
    assert main(["u8", f, "-o", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_offset_number_and_rows(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x00\x00" + struct.pack("<6i", 1, -2, 3, -4, 5, -6))
    assert main(["i32", f, "-o", "2", "-n", "5", "-r", "2"]) == 0
    assert capsys.readouterr().out == "1 -2\n3 -4\n5\n"


def test_missing_file_fails_with_message(tmp_path: Path, capsys):
    assert main(["u8", str(tmp_path / "nope.bin")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR:" in captured.err
    assert "Hint:" in captured.err


def test_directory_fails(tmp_path: Path, capsys):
    assert main(["u8", str(tmp_path)]) == 1
    assert "directory" in capsys.readouterr().err


def test_unknown_type_exits_2(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x00")
    with pytest.raises(SystemExit) as ei:
        main(["u7", f])
    assert ei.value.code == 2
    assert capsys.readouterr().out == ""


def test_profile_supplies_defaults(tmp_path: Path, capsys):
    f = _bin(tmp_path, struct.pack(">3H", 10, 20, 30))
    prof = tmp_path / "layout.yml"
    prof.write_text("byte_order: big-endian\noffset: 2\n", encoding="utf-8")
    assert main(["u16", f, "--profile", str(prof)]) == 0
    assert capsys.readouterr().out == "20\n30\n"


def test_cli_flag_beats_profile(tmp_path: Path, capsys):
    f = _bin(tmp_path, struct.pack(">3H", 10, 20, 30))
    prof = tmp_path / "layout.yml"
    prof.write_text("byte_order: big-endian\noffset: 2\n", encoding="utf-8")
    assert main(["u16", f, "--profile", str(prof), "-o", "0", "-n", "1"]) == 0
    assert capsys.readouterr().out == "10\n"


def test_bad_profile_fails(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x00")
    prof = tmp_path / "layout.yml"
    prof.write_text("colour: red\n", encoding="utf-8")
    assert main(["u8", f, "--profile", str(prof)]) == 1
    err = capsys.readouterr().err
    assert "unknown keys" in err
    assert "Hint:" in err


def test_log_file_receives_run_events(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01\x02")
    log_path = tmp_path / "logs" / "binview.log"
    assert main(["u8", f, "--log-file", str(log_path)]) == 0
    assert capsys.readouterr().out == "1\n2\n"
    assert "DUMP_DONE values=2" in log_path.read_text(encoding="utf-8")


def test_verbose_logs_go_to_stderr_only(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x07")
    assert main(["u8", f, "-vv"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "7\n"


class _ClosedPipeStdout:
    """stdout whose reader has gone away; fileno() is a real descriptor."""
    def __init__(self, backing):
        self._backing = backing

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")

    def fileno(self) -> int:
        return self._backing.fileno()


def test_closed_stdout_ends_quietly(tmp_path: Path, capsys, monkeypatch):
    f = _bin(tmp_path, bytes(range(16)))
    with open(tmp_path / "stdout.txt", "w", encoding="utf-8") as backing:
        monkeypatch.setattr(sys, "stdout", _ClosedPipeStdout(backing))
        assert main(["u8", f]) == 0
        monkeypatch.undo()
    err = capsys.readouterr().err
    assert "Traceback" not in err
    assert "ERROR" not in err


def test_log_dir_that_cannot_be_created_is_reported(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    assert main(["u8", f, "--log-file", str(blocker / "logs" / "run.log")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: Cannot create log directory" in captured.err
    assert "Hint:" in captured.err


def test_log_file_that_cannot_be_opened_is_reported(tmp_path: Path, capsys):
    f = _bin(tmp_path, b"\x01")
    log_dir = tmp_path / "is_a_dir.log"
    log_dir.mkdir()
    assert main(["u8", f, "--log-file", str(log_dir)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: Cannot open log file" in captured.err
