"""Tests for the command-line interface.

WHY: The CLI is the file-system collaborator of the core: it reads the
input, creates the output directory, names the output file and turns
conversion errors into exit codes. Mistakes here lose or overwrite data.

HOW: Calls main() with explicit argv against files under tmp_path and
inspects the written files, stdout/stderr (capsys) and SystemExit codes.

RULES:
- Successful conversions write {stem}.{format} into the output directory
- Failures exit with status 1 and print "Error: ..." to stderr
- Status messages never go to stdout
"""

import json
from pathlib import Path

import pytest

from file_converter.cli import _resolve_output_path, build_parser, main
from file_converter.config import DEFAULT_OUTPUT_DIR


@pytest.fixture
def input_file(tmp_path, people_json):
    path = tmp_path / "people.json"
    path.write_bytes(people_json)
    return path


class TestConvertCommand:
    """`convert` subcommand."""

    def test_writes_converted_file(self, tmp_path, input_file, people_csv):
        out_dir = tmp_path / "out"
        main(["convert", "-i", str(input_file), "-f", "csv", "-o", str(out_dir)])
        assert (out_dir / "people.csv").read_bytes() == people_csv

    def test_creates_nested_output_directory(self, tmp_path, input_file):
        out_dir = tmp_path / "a" / "b" / "c"
        main(["convert", "-i", str(input_file), "-f", "xml", "-o", str(out_dir)])
        assert (out_dir / "people.xml").is_file()

    def test_format_name_case_insensitive(self, tmp_path, input_file):
        out_dir = tmp_path / "out"
        main(["convert", "-i", str(input_file), "-f", "TXT", "-o", str(out_dir)])
        assert (out_dir / "people.txt").is_file()

    def test_conflict_adds_numeric_suffix(self, tmp_path, input_file):
        out_dir = tmp_path / "out"
        argv = ["convert", "-i", str(input_file), "-f", "json", "-o", str(out_dir)]
        main(argv)
        main(argv)
        assert (out_dir / "people.json").is_file()
        assert (out_dir / "people-2.json").is_file()

    def test_input_format_flag(self, tmp_path):
        source = tmp_path / "rows.dat"
        source.write_bytes(b"a,b\n1,2\n")
        out_dir = tmp_path / "out"
        main([
            "convert", "-i", str(source), "-f", "json",
            "-o", str(out_dir), "--input-format", "txt",
        ])
        data = json.loads((out_dir / "rows.json").read_bytes())
        assert data == [{"line": "a,b"}, {"line": "1,2"}]

    def test_status_goes_to_stderr(self, tmp_path, input_file, capsys):
        main(["convert", "-i", str(input_file), "-f", "csv", "-o", str(tmp_path / "out")])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved:" in captured.err

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(tmp_path / "nope.json"), "-f", "csv"])
        assert excinfo.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unsupported_output_format(self, tmp_path, input_file, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(input_file), "-f", "yaml", "-o", str(tmp_path / "out")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Unsupported output format: 'yaml'" in err
        assert "json, csv, xml, txt" in err
        assert not (tmp_path / "out").exists()

    def test_decode_error_writes_nothing(self, tmp_path, capsys):
        source = tmp_path / "broken.json"
        source.write_bytes(b'[{"a": ')
        out_dir = tmp_path / "out"
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(source), "-f", "csv", "-o", str(out_dir)])
        assert excinfo.value.code == 1
        assert "Failed to parse JSON input" in capsys.readouterr().err
        assert list(out_dir.iterdir()) == []

    def test_encode_error(self, tmp_path, capsys):
        source = tmp_path / "empty.json"
        source.write_bytes(b"[]")
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(source), "-f", "csv", "-o", str(tmp_path / "out")])
        assert excinfo.value.code == 1
        assert "Failed to write CSV output" in capsys.readouterr().err

    def test_unreadable_input(self, tmp_path, input_file, capsys, monkeypatch):
        def deny(self):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", deny)
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(input_file), "-f", "csv", "-o", str(tmp_path / "out")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Cannot read" in err
        assert "Permission denied" in err

    def test_write_failure(self, tmp_path, input_file, capsys, monkeypatch):
        def disk_full(self, data):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(Path, "write_bytes", disk_full)
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "-i", str(input_file), "-f", "csv", "-o", str(tmp_path / "out")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Cannot write" in err
        assert "No space left on device" in err


class TestListCommand:
    """`list` subcommand."""

    def test_lists_all_formats(self, capsys):
        main(["list"])
        out = capsys.readouterr().out
        for ext, content_type in [
            ("json", "application/json"),
            ("csv", "text/csv"),
            ("xml", "application/xml"),
            ("txt", "text/plain"),
        ]:
            assert ext in out
            assert content_type in out


class TestParser:
    """Argument parser construction."""

    def test_convert_requires_input_and_format(self):
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["convert", "-f", "csv"])
        with pytest.raises(SystemExit):
            parser.parse_args(["convert", "-i", "x.json"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_default_output_dir(self):
        args = build_parser().parse_args(["convert", "-i", "x.json", "-f", "csv"])
        assert args.output == DEFAULT_OUTPUT_DIR
        assert args.input_format is None


class TestResolveOutputPath:
    """Conflict-free output naming."""

    def test_free_name(self, tmp_path):
        assert _resolve_output_path("data", "csv", tmp_path) == tmp_path / "data.csv"

    def test_counter_increments(self, tmp_path):
        (tmp_path / "data.csv").write_text("x")
        (tmp_path / "data-2.csv").write_text("x")
        assert _resolve_output_path("data", "csv", tmp_path) == tmp_path / "data-3.csv"
