"""Tests for the command-line entry point"""

import json

import pyperclip
import pytest

from textsearch_lib import __main__ as cli


@pytest.fixture
def sample(tmp_path):
    fp = tmp_path / "sample.txt"
    fp.write_text("foo\nFOO bar\nbaz\n", encoding="utf-8")
    return fp


class TestSearchCommand:
    def test_text_output(self, sample, capsys):
        code = cli.main(["search", str(sample), "foo"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Found 2 match(es):" in out
        assert "  Lines: 3" in out

    def test_context_and_no_stats(self, sample, capsys):
        code = cli.main(["search", str(sample), "FOO bar", "--context", "--no-stats"])
        out = capsys.readouterr().out
        assert code == 0
        assert "File Information:" not in out
        assert "Context Before: foo" in out

    def test_json_output(self, sample, capsys):
        code = cli.main(["search", str(sample), "foo", "-f", "json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["total_matches"] == 2
        assert data["matches"][1]["line_number"] == 2

    def test_output_file(self, sample, tmp_path, capsys):
        out_file = tmp_path / "out.csv"
        code = cli.main(["search", str(sample), "foo", "-f", "csv", "-o", str(out_file)])
        assert code == 0
        assert "Wrote 2 matches" in capsys.readouterr().out
        assert "FOO bar" in out_file.read_text(encoding="utf-8")

    def test_copy(self, sample, monkeypatch, capsys):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        code = cli.main(["search", str(sample), "baz", "--copy"])
        assert code == 0
        assert copied == [capsys.readouterr().out]

    def test_missing_file(self, tmp_path, capsys):
        code = cli.main(["search", str(tmp_path / "missing.txt"), "foo"])
        captured = capsys.readouterr()
        assert code == 1
        assert "does not exist" in captured.err
        assert captured.out == ""

    def test_empty_query(self, sample, capsys):
        code = cli.main(["search", str(sample), "  "])
        assert code == 2
        assert "Search term" in capsys.readouterr().err

    def test_output_file_respects_no_stats(self, sample, tmp_path, monkeypatch):
        out_file = tmp_path / "out.txt"
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        code = cli.main(["search", str(sample), "foo", "--no-stats", "-o", str(out_file), "--copy"])
        text = out_file.read_text(encoding="utf-8")
        assert code == 0
        assert "File Information:" not in text
        assert "Found 2 match(es):" in text
        assert copied == [text]


class TestStatsCommand:
    def test_text(self, sample, capsys):
        assert cli.main(["stats", str(sample)]) == 0
        out = capsys.readouterr().out
        assert "  Words: 4" in out
        assert "  Characters: 13" in out

    def test_json(self, sample, capsys):
        assert cli.main(["stats", str(sample), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["lines"] == 3

    def test_missing(self, tmp_path, capsys):
        assert cli.main(["stats", str(tmp_path / "missing.txt")]) == 1


class TestInteractiveDefault:
    def test_no_command_starts_session(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "exit")
        assert cli.main([]) == 0
        assert "Total files searched: 0" in capsys.readouterr().out
