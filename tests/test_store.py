"""Tests for settings and backup file storage."""

import json
import tempfile
from pathlib import Path
from unittest import mock

import pytest

from ccnudge.errors import ParseError, WriteError
from ccnudge.settings.store import (
    BackupStore,
    SettingsStore,
    get_backup_path,
    get_settings_path,
)


def test_get_settings_path():
    """Returns ~/.claude/settings.json path."""
    with mock.patch.dict("os.environ", {"HOME": "/home/testuser"}):
        result = get_settings_path()
        assert result == Path("/home/testuser/.claude/settings.json")


def test_get_backup_path_uses_claude_dir():
    """Backup lives next to settings.json."""
    result = get_backup_path(Path("/tmp/claude"))
    assert result == Path("/tmp/claude/.ccnudge-backup.json")


def test_read_settings_returns_empty_dict_when_missing():
    """Returns empty dict when settings.json doesn't exist."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = SettingsStore(Path(tmpdir) / "settings.json")
        assert store.read() == {}


def test_read_settings_parses_existing_file():
    """Parses existing settings.json."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        path.write_text('{"hooks": {}, "other": "value"}')
        assert SettingsStore(path).read() == {"hooks": {}, "other": "value"}


def test_read_settings_rejects_malformed_json():
    """Malformed settings.json raises ParseError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        path.write_text("{not json")
        with pytest.raises(ParseError, match="Invalid JSON"):
            SettingsStore(path).read()


def test_read_settings_rejects_non_object():
    """A JSON array is not a settings document."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        path.write_text("[1, 2]")
        with pytest.raises(ParseError):
            SettingsStore(path).read()


def test_read_settings_rejects_non_object_hooks():
    """hooks must be a mapping."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        path.write_text('{"hooks": []}')
        with pytest.raises(ParseError, match="hooks"):
            SettingsStore(path).read()


def test_write_settings_creates_directory():
    """write creates missing parent directories."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "a" / "b" / "settings.json"
        SettingsStore(path).write({"model": "opus"})

        assert json.loads(path.read_text()) == {"model": "opus"}
        assert not path.with_suffix(".json.tmp").exists()


def test_write_settings_is_pretty_printed():
    """Settings are written with two-space indentation."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        SettingsStore(path).write({"a": {"b": 1}})
        assert path.read_text() == '{\n  "a": {\n    "b": 1\n  }\n}\n'


def test_write_settings_wraps_os_errors():
    """OS failures surface as WriteError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        blocker = Path(tmpdir) / "file"
        blocker.write_text("")
        store = SettingsStore(blocker / "settings.json")
        with pytest.raises(WriteError):
            store.write({})


def test_read_backup_returns_none_when_missing():
    """Missing backup reads as None."""
    with tempfile.TemporaryDirectory() as tmpdir:
        assert BackupStore(Path(tmpdir) / "backup.json").read() is None


def test_read_backup_returns_none_when_malformed():
    """An unparsable backup is treated as absent."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "backup.json"
        path.write_text("{oops")
        assert BackupStore(path).read() is None

        path.write_text('"a string"')
        assert BackupStore(path).read() is None


def test_backup_write_and_delete():
    """Backup can be written, read back and deleted."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = BackupStore(Path(tmpdir) / "backup.json")
        store.write({"Stop": [{"hooks": []}]})
        assert store.read() == {"Stop": [{"hooks": []}]}

        store.delete()
        assert store.read() is None
        assert not store.path.exists()


def test_backup_delete_missing_is_not_an_error():
    """Deleting an absent backup does nothing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        BackupStore(Path(tmpdir) / "backup.json").delete()


def test_read_settings_null_hooks_is_absent():
    """"hooks": null reads as if there were no hooks."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "settings.json"
        path.write_text('{"model": "x", "hooks": null}')
        assert SettingsStore(path).read() == {"model": "x"}
