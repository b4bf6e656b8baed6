"""Tests for textsearch_lib/session.py"""

import io

import pytest

from textsearch_lib.session import run_session


def scripted(*answers):
    """Return an input function that replays answers, then raises EOFError."""
    replies = iter(answers)
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    input_fn.prompts = prompts
    return input_fn


@pytest.fixture
def sample(tmp_path):
    fp = tmp_path / "sample.txt"
    fp.write_text("foo\nFOO bar\nbaz\n", encoding="utf-8")
    return fp


class TestSession:
    def test_exit_immediately(self):
        out = io.StringIO()
        assert run_session(scripted("exit"), out) == 0
        assert "Total files searched: 0" in out.getvalue()

    def test_search_then_exit(self, sample):
        out = io.StringIO()
        count = run_session(scripted(str(sample), "foo", "n", "EXIT"), out)
        text = out.getvalue()
        assert count == 1
        assert "Found 2 match(es):" in text
        assert "Match 2 - Line 2: FOO bar" in text
        assert "Context Before" not in text
        assert "Total files searched: 1" in text

    def test_context_answer(self, sample):
        out = io.StringIO()
        run_session(scripted(str(sample), "FOO bar", "yes", "exit"), out)
        text = out.getvalue()
        assert "Context Before: foo" in text
        assert "Context After:  baz" in text

    def test_help(self):
        out = io.StringIO()
        run_session(scripted("help", "exit"), out)
        assert out.getvalue().count("Universal File Search Instructions:") == 2

    def test_empty_path(self):
        out = io.StringIO()
        inputs = scripted("", "exit")
        run_session(inputs, out)
        assert "Error: File path cannot be empty." in out.getvalue()
        assert len(inputs.prompts) == 2

    def test_empty_query_skips_search(self, sample):
        out = io.StringIO()
        inputs = scripted(str(sample), "   ", "exit")
        count = run_session(inputs, out)
        assert count == 0
        assert "Search term contains only whitespace" in out.getvalue()
        assert "Include context lines? (y/n): " not in inputs.prompts

    def test_missing_file_continues(self, tmp_path, sample):
        out = io.StringIO()
        count = run_session(
            scripted(str(tmp_path / "missing.txt"), "foo", "n", str(sample), "baz", "n", "exit"),
            out,
        )
        text = out.getvalue()
        assert count == 2
        assert "does not exist" in text
        assert "File Information:" in text
        assert "Match 1 - Line 3: baz" in text

    def test_end_of_input_ends_session(self, sample):
        out = io.StringIO()
        assert run_session(scripted(str(sample), "foo", "n"), out) == 1
        assert "Total files searched: 1" in out.getvalue()

    def test_end_of_input_mid_prompt(self, sample):
        out = io.StringIO()
        assert run_session(scripted(str(sample)), out) == 0
        assert "Search session ended." in out.getvalue()
