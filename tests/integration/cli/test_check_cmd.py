"""Integration tests for the check and extract commands"""

import json

import pytest
from typer.testing import CliRunner

from doccheck.cli.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no doccheck.yaml is picked up."""
    monkeypatch.chdir(tmp_path)


def test_check_clean_document(tmp_path, tutorial_md):
    """A consistent document exits 0 with a summary line."""
    (tmp_path / "ctor.md").write_text(tutorial_md)
    result = runner.invoke(app, ["check", "ctor.md"])
    assert result.exit_code == 0, result.output
    assert "Checked 1 document(s) - 0 warning(s), 0 malformed" in result.output


def test_check_mismatch_exits_1(tmp_path, mismatch_md):
    """A warning fails the run by default and is printed with its location."""
    (tmp_path / "singleton.md").write_text(mismatch_md)
    result = runner.invoke(app, ["check", "singleton.md"])
    assert result.exit_code == 1
    assert "singleton.md:3: warning: [Singleton] block 0:" in result.output


def test_check_no_fail_on_warning(tmp_path, mismatch_md):
    """--no-fail-on-warning reports warnings but exits 0."""
    (tmp_path / "singleton.md").write_text(mismatch_md)
    result = runner.invoke(app, ["check", "singleton.md", "--no-fail-on-warning"])
    assert result.exit_code == 0, result.output
    assert "1 warning(s)" in result.output


def test_check_malformed_exits_1(tmp_path):
    """An unterminated fence is reported and fails the run."""
    (tmp_path / "bad.md").write_text("# Bad\n\n```\nnever closed\n")
    result = runner.invoke(app, ["check", "bad.md", "--no-fail-on-warning"])
    assert result.exit_code == 1
    assert "Unterminated code fence opened at bad.md:3" in result.output


def test_check_json_format(tmp_path, mismatch_md):
    """--format json prints structured records."""
    (tmp_path / "singleton.md").write_text(mismatch_md)
    result = runner.invoke(app, ["check", "singleton.md", "--format", "json"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data[0]["path"] == "singleton.md"
    assert data[0]["findings"][0]["severity"] == "warning"


def test_check_invalid_format():
    """An unsupported output format is a configuration error."""
    result = runner.invoke(app, ["check", ".", "--format", "xml"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_check_stdin(mismatch_md):
    """'-' reads the document from stdin."""
    result = runner.invoke(app, ["check", "-"], input=mismatch_md)
    assert result.exit_code == 1
    assert "<stdin>:3: warning:" in result.output


def test_check_verbose_lists_blocks(tmp_path, tutorial_md):
    """--verbose echoes each code block's classification."""
    (tmp_path / "ctor.md").write_text(tutorial_md)
    result = runner.invoke(app, ["check", "ctor.md", "--verbose"])
    assert result.exit_code == 0, result.output
    assert "declaration" in result.output
    assert "error-transcript" in result.output


def test_check_no_files(tmp_path):
    """A directory with no markdown files exits 1."""
    (tmp_path / "notes.txt").write_text("nothing")
    result = runner.invoke(app, ["check", str(tmp_path)])
    assert result.exit_code == 1
    assert "No markdown files found" in result.output


def test_check_directory_mixed(tmp_path, tutorial_md):
    """A malformed file does not stop the other files from being checked."""
    (tmp_path / "a.md").write_text(tutorial_md)
    (tmp_path / "b.md").write_text("```\nopen\n")
    result = runner.invoke(app, ["check", str(tmp_path)])
    assert result.exit_code == 1
    assert "Checked 2 document(s) - 0 warning(s), 1 malformed" in result.output


def test_extract_outputs_document_json(tmp_path, tutorial_md):
    """extract prints sections and classified blocks as JSON."""
    (tmp_path / "ctor.md").write_text(tutorial_md)
    result = runner.invoke(app, ["extract", "ctor.md"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    sections = data[0]["sections"]
    assert sections[1]["title"] == "Default constructor"
    code = [b for s in sections for b in s["blocks"] if b["kind"] == "code"]
    assert [b["sub_kind"] for b in code] == ["declaration", "constructor-call", "error-transcript"]


def test_extract_malformed_fails(tmp_path):
    """extract reports the failing file and exits 1."""
    (tmp_path / "bad.md").write_text("```\nopen\n")
    result = runner.invoke(app, ["extract", "bad.md"])
    assert result.exit_code == 1
    assert "Failed to extract bad.md" in result.output
