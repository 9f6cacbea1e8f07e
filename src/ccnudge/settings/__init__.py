"""Settings and backup file storage."""

from .store import (
    SettingsStore,
    BackupStore,
    get_claude_dir,
    get_settings_path,
    get_backup_path,
)

__all__ = [
    "SettingsStore",
    "BackupStore",
    "get_claude_dir",
    "get_settings_path",
    "get_backup_path",
]
