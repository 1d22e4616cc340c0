from pathlib import Path

import pytest

from goboscript.cli import build_parser, main
from goboscript.fmt import format_source

ORIGINAL = b"%define A \\\n1\n"


def test_parser_reads_fmt_input():
    args = build_parser().parse_args(["fmt", "--input", "project"])
    assert args.command == "fmt"
    assert args.input == Path("project")


def test_parser_fmt_input_defaults_to_none():
    args = build_parser().parse_args(["fmt"])
    assert args.input is None


def test_missing_command_is_rejected():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_fmt_formats_a_file(tmp_path: Path, capsys):
    path = tmp_path / "main.gs"
    path.write_bytes(ORIGINAL)
    assert main(["fmt", "--input", str(path)]) == 0
    assert path.read_bytes() == format_source(ORIGINAL)
    assert "Finished" in capsys.readouterr().err


def test_fmt_formats_a_directory(tmp_path: Path):
    nested = tmp_path / "lib" / "util.gs"
    nested.parent.mkdir()
    nested.write_bytes(ORIGINAL)
    assert main(["fmt", "-i", str(tmp_path)]) == 0
    assert nested.read_bytes() == format_source(ORIGINAL)


def test_fmt_defaults_to_current_directory(tmp_path: Path, monkeypatch):
    path = tmp_path / "stage.gs"
    path.write_bytes(ORIGINAL)
    monkeypatch.chdir(tmp_path)
    assert main(["fmt"]) == 0
    assert path.read_bytes() == format_source(ORIGINAL)


def test_fmt_reports_io_errors(tmp_path: Path, capsys):
    (tmp_path / "odd.gs").mkdir()
    assert main(["fmt", "-i", str(tmp_path)]) == 1
    assert "error:" in capsys.readouterr().err