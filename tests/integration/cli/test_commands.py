"""Integration tests for the CLI commands against a file-backed SQLite store"""

import json

import pytest
from typer.testing import CliRunner

from sidediff.cli.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Isolated working directory and database per test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SIDEDIFF_DB_URL", f"sqlite:///{tmp_path}/test.db")
    (tmp_path / "old.txt").write_text("hello world\n")
    (tmp_path / "new.txt").write_text("hello there\n")
    return tmp_path


def _invoke(*args, **kwargs):
    return runner.invoke(app, list(args), **kwargs)


def test_init_creates_database(workspace):
    result = _invoke("init")
    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output
    assert (workspace / "test.db").exists()


def test_add_list_and_stats():
    assert _invoke("add", "1", "old.txt").exit_code == 0
    result = _invoke("add", "2", "new.txt")
    assert result.exit_code == 0, result.output
    assert "Added item 2 to Modified" in result.output

    listing = _invoke("list", "1")
    assert "hello world" in listing.output

    stats = _invoke("stats")
    assert "Original: 1, Modified: 1, total: 2" in stats.output


def test_add_from_stdin_is_clipboard():
    result = _invoke("add", "1", "-", input="pasted text")
    assert result.exit_code == 0, result.output
    assert "clipboard" in _invoke("list", "1").output


def test_add_empty_file_fails(workspace):
    (workspace / "empty.txt").write_text("")
    result = _invoke("add", "1", "empty.txt")
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_add_rejects_bad_panel():
    result = _invoke("add", "3", "old.txt")
    assert result.exit_code != 0


def test_compare_words_plain():
    _invoke("add", "1", "old.txt")
    _invoke("add", "2", "new.txt")
    result = _invoke("compare", "1", "2", "--plain")
    assert result.exit_code == 0, result.output
    assert "hello [~world]" in result.output
    assert "hello [~there]" in result.output
    assert "4 unchanged, 1 modified, 0 added, 0 deleted (segments); 5/5 segments" in result.output


def test_compare_bytes_writes_json(workspace):
    _invoke("add", "1", "old.txt")
    _invoke("add", "2", "new.txt")
    result = _invoke("compare", "1", "2", "--mode", "bytes", "--plain", "--json", "out/result.json")
    assert result.exit_code == 0, result.output
    assert "7 unchanged, 5 modified" in result.output

    data = json.loads((workspace / "out" / "result.json").read_text())
    assert (data["id1"], data["id2"]) == (1, 2)
    assert data["source1"] == "old.txt"
    assert [d["kind"] for d in data["diffs1"]] == ["unchanged", "modified", "unchanged"]


def test_compare_missing_item_fails():
    _invoke("add", "1", "old.txt")
    result = _invoke("compare", "1", "9")
    assert result.exit_code == 1
    assert "Item 9 not found in Modified" in result.output


def test_compare_uses_default_mode_from_env(monkeypatch):
    _invoke("add", "1", "old.txt")
    _invoke("add", "2", "new.txt")
    monkeypatch.setenv("SIDEDIFF_DEFAULT_MODE", "bytes")
    result = _invoke("compare", "1", "2", "--plain")
    assert "(chars)" in result.output


def test_diff_files_without_store(workspace):
    result = _invoke("diff", "old.txt", "new.txt", "--plain", "--mode", "words")
    assert result.exit_code == 0, result.output
    assert "[~world]" in result.output
    assert not (workspace / "test.db").exists()


def test_diff_missing_file_fails():
    result = _invoke("diff", "old.txt", "nope.txt")
    assert result.exit_code == 1
    assert "Cannot read nope.txt" in result.output


def test_show_prints_item_text():
    _invoke("add", "2", "new.txt")
    result = _invoke("show", "2", "1")
    assert result.exit_code == 0
    assert result.output == "hello there\n"


def test_remove_and_clear():
    _invoke("add", "1", "old.txt")
    _invoke("add", "1", "new.txt")
    _invoke("add", "2", "new.txt")

    assert _invoke("remove", "1", "1").exit_code == 0
    missing = _invoke("remove", "1", "1")
    assert missing.exit_code == 1
    assert "Item 1 not found in Original" in missing.output

    cleared = _invoke("clear", "2")
    assert "Cleared 1 item(s) from Modified" in cleared.output
    assert "Original: 1, Modified: 0, total: 1" in _invoke("stats").output


def test_init_reset_clears_items():
    _invoke("add", "1", "old.txt")
    result = _invoke("init", "--reset")
    assert "Existing data cleared." in result.output
    assert "No items in Original." in _invoke("list", "1").output


def test_invalid_config_yaml_reports_error(workspace):
    (workspace / "config.yaml").write_text("key: [unclosed\n")
    result = _invoke("stats")
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_diff_keeps_undecodable_bytes_distinct(workspace):
    """Files that differ only in one non-UTF-8 byte are reported as different."""
    (workspace / "a.bin").write_bytes(b"caf\xe9")
    (workspace / "b.bin").write_bytes(b"caf\xe8")
    result = _invoke("diff", "a.bin", "b.bin", "--mode", "bytes", "--plain")
    assert result.exit_code == 0, result.output
    assert "3 unchanged, 1 modified, 0 added, 0 deleted (chars)" in result.output
    assert "caf[~\\xe9]" in result.output
    assert "caf[~\\xe8]" in result.output


def test_add_and_show_non_utf8_file(workspace):
    (workspace / "latin1.txt").write_bytes(b"na\xefve\n")
    assert _invoke("add", "1", "latin1.txt").exit_code == 0
    result = _invoke("show", "1", "1")
    assert result.exit_code == 0
    assert result.output == "na\\xefve\n"
