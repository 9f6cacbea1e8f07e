"""Claude Code settings.json and backup file access."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ccnudge.errors import ParseError, WriteError

logger = logging.getLogger(__name__)

BACKUP_FILENAME = ".ccnudge-backup.json"


def get_claude_dir() -> Path:
    """Get the Claude Code configuration directory."""
    return Path.home() / ".claude"


def get_settings_path(claude_dir: Optional[Path] = None) -> Path:
    """Get the path to Claude Code settings.json."""
    return (claude_dir or get_claude_dir()) / "settings.json"


def get_backup_path(claude_dir: Optional[Path] = None) -> Path:
    """Get the path to the ccnudge backup file."""
    return (claude_dir or get_claude_dir()) / BACKUP_FILENAME


def _write_json(path: Path, data: dict[str, Any]) -> None:
    """Write JSON atomically, creating parent directories.

    Raises:
        WriteError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first, then rename (atomic on POSIX)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        temp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        raise WriteError(f"Could not write {path}: {e}") from e
    logger.debug(f"Wrote {path}")


class SettingsStore:
    """Read/write access to Claude Code settings.json.

    Nothing is cached: every read goes to disk so that edits made by
    Claude Code or the user between calls are never overwritten with
    stale data.
    """

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> dict[str, Any]:
        """Read settings, returning an empty dict if the file is missing.

        Raises:
            ParseError: If the file is not a JSON object, or its "hooks"
                value is not an object
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"{self.path} not found, using empty settings")
            return {}
        except OSError as e:
            raise ParseError(f"Could not read {self.path}: {e}") from e

        try:
            settings = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(settings, dict):
            raise ParseError(f"{self.path} must contain a JSON object")
        if "hooks" in settings and settings["hooks"] is None:
            del settings["hooks"]
        if not isinstance(settings.get("hooks", {}), dict):
            raise ParseError(f'"hooks" in {self.path} must be a JSON object')
        return settings

    def write(self, settings: dict[str, Any]) -> None:
        """Write settings with pretty formatting."""
        _write_json(self.path, settings)


class BackupStore:
    """Single-generation snapshot of ccnudge-managed hooks."""

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> Optional[dict[str, Any]]:
        """Read the backup, or None if it is missing or unreadable."""
        try:
            backup = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable backup {self.path}: {e}")
            return None

        if not isinstance(backup, dict):
            logger.warning(f"Ignoring backup {self.path}: not a JSON object")
            return None
        return backup

    def write(self, backup: dict[str, Any]) -> None:
        """Overwrite the backup."""
        _write_json(self.path, backup)

    def delete(self) -> None:
        """Remove the backup; a missing file is not an error."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise WriteError(f"Could not remove {self.path}: {e}") from e
        logger.debug(f"Removed {self.path}")
