"""Setup, enable, disable, remove and status of ccnudge hooks."""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from ccnudge.errors import PlaybackError
from ccnudge.hooks.builder import (
    MANAGED_EVENTS,
    build_hooks,
    find_sound,
    has_desktop_notify,
    hook_group,
    resolve_sound,
    sound_commands,
)
from ccnudge.platforms.notifier import Notifier
from ccnudge.platforms.platform import Platform, detect_platform
from ccnudge.settings.store import (
    BackupStore,
    SettingsStore,
    get_backup_path,
    get_settings_path,
)

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of an enable, disable or remove call."""
    APPLIED = "applied"
    NO_BACKUP = "no_backup"
    NOTHING_CONFIGURED = "nothing_configured"
    EVENT_NOT_FOUND = "event_not_found"


@dataclass
class ChangeResult:
    """What a mutating operation did, and to which events."""

    outcome: Outcome
    events: list[str] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return self.outcome == Outcome.APPLIED


class State(Enum):
    """Overall configuration state."""
    ENABLED = "enabled"
    DISABLED = "disabled"
    NOT_CONFIGURED = "not_configured"


@dataclass
class EventStatus:
    """Recovered configuration of one enabled event."""

    event: str
    sound: Optional[str]
    desktop_notifications: bool


@dataclass
class Status:
    """Snapshot reported by ConfigManager.status()."""

    state: State
    events: list[EventStatus] = field(default_factory=list)
    backup_events: list[str] = field(default_factory=list)


def managed_events_in(hooks: dict[str, Any]) -> list[str]:
    """Managed events with a hook configuration, in canonical order."""
    return [e for e in MANAGED_EVENTS if hooks.get(e)]


def _prune_hooks(settings: dict[str, Any]) -> None:
    """Drop an empty "hooks" mapping; Claude Code never sees "hooks": {}."""
    if "hooks" in settings and not settings["hooks"]:
        del settings["hooks"]


class ConfigManager:
    """Reversible management of ccnudge hooks in Claude Code settings.

    Every operation reads settings.json fresh and writes it at most once,
    as its last step, so a failing call leaves both files unchanged.
    """

    def __init__(
        self,
        settings: SettingsStore,
        backup: BackupStore,
        platform: Optional[Platform] = None,
        notifier: Optional[Notifier] = None,
        exists: Callable[[str], bool] = os.path.exists,
    ):
        self.settings = settings
        self.backup = backup
        self._platform = platform
        self._notifier = notifier
        self._exists = exists

    @classmethod
    def for_claude_dir(cls, claude_dir: Optional[Path] = None, **kwargs) -> "ConfigManager":
        """Manager for the settings in claude_dir (default: ~/.claude)."""
        return cls(
            SettingsStore(get_settings_path(claude_dir)),
            BackupStore(get_backup_path(claude_dir)),
            **kwargs,
        )

    @property
    def platform(self) -> Platform:
        # Only setup and the test commands need OS templates
        if self._platform is None:
            self._platform = detect_platform()
        return self._platform

    @property
    def notifier(self) -> Notifier:
        if self._notifier is None:
            self._notifier = Notifier(self.platform)
        return self._notifier

    def resolve_sound(self, sound: Optional[str]) -> str:
        return resolve_sound(sound, self.platform, self._exists)

    def backup_all(self) -> bool:
        """Snapshot every managed event currently in settings.

        Returns:
            True if a backup was written. An empty snapshot leaves any
            previous backup in place.
        """
        hooks = self.settings.read().get("hooks", {})
        snapshot = {e: hooks[e] for e in managed_events_in(hooks)}
        if not snapshot:
            return False

        self.backup.write(snapshot)
        logger.debug(f"Backed up {len(snapshot)} event(s): {', '.join(snapshot)}")
        return True

    def setup(
        self,
        event: str,
        sound: Optional[str] = None,
        desktop_notify: bool = False,
    ) -> str:
        """Configure event to play a sound, replacing any existing hooks.

        Args:
            event: Managed event name
            sound: Sound name or path (None for the platform default)
            desktop_notify: Also raise a desktop banner

        Returns:
            The resolved sound path

        Raises:
            SoundNotFoundError: If sound cannot be resolved
        """
        sound_path = self.resolve_sound(sound)
        hooks = build_hooks(sound_path, desktop_notify, self.platform)

        self.backup_all()

        settings = self.settings.read()
        settings.setdefault("hooks", {})[event] = hook_group(hooks)
        self.settings.write(settings)

        logger.info(
            f"Configured {event}: sound={sound_path} desktop_notify={desktop_notify}"
        )
        return sound_path

    def enable(self, event: Optional[str] = None) -> ChangeResult:
        """Restore hooks from the backup.

        Args:
            event: Restore only this event (default: every backed-up event)
        """
        backup = self.backup.read()
        if not backup:
            logger.debug("No backup to restore")
            return ChangeResult(Outcome.NO_BACKUP)

        if event is not None:
            if not backup.get(event):
                logger.debug(f"No backup for {event}")
                return ChangeResult(Outcome.EVENT_NOT_FOUND, [event])
            restore = {event: backup[event]}
        else:
            restore = backup

        settings = self.settings.read()
        settings.setdefault("hooks", {}).update(restore)
        _prune_hooks(settings)
        self.settings.write(settings)

        logger.info(f"Enabled {len(restore)} event(s): {', '.join(restore)}")
        return ChangeResult(Outcome.APPLIED, list(restore))

    def disable(self, event: Optional[str] = None) -> ChangeResult:
        """Remove managed hooks, keeping them in the backup for enable().

        The backup always covers every active event, even when only one
        is being disabled.

        Args:
            event: Disable only this event (default: all managed events)
        """
        settings = self.settings.read()
        configured = managed_events_in(settings.get("hooks", {}))
        if not configured:
            logger.debug("No managed hooks configured")
            return ChangeResult(Outcome.NOTHING_CONFIGURED)

        self.backup_all()

        if event is not None:
            if event not in configured:
                logger.debug(f"{event} is not configured")
                return ChangeResult(Outcome.EVENT_NOT_FOUND, [event])
            targets = [event]
        else:
            targets = configured

        for target in targets:
            del settings["hooks"][target]
        _prune_hooks(settings)
        self.settings.write(settings)

        logger.info(f"Disabled {len(targets)} event(s): {', '.join(targets)}")
        return ChangeResult(Outcome.APPLIED, targets)

    def remove(self, event: str) -> ChangeResult:
        """Remove an event's hooks and discard the backup entirely."""
        settings = self.settings.read()
        hooks = settings.get("hooks", {})
        if event not in hooks:
            logger.debug(f"{event} is not configured")
            return ChangeResult(Outcome.EVENT_NOT_FOUND, [event])

        del hooks[event]
        _prune_hooks(settings)
        self.backup.delete()
        self.settings.write(settings)

        logger.info(f"Removed {event}")
        return ChangeResult(Outcome.APPLIED, [event])

    def status(self) -> Status:
        """Report what is configured without modifying anything."""
        hooks = self.settings.read().get("hooks", {})
        configured = managed_events_in(hooks)
        if configured:
            return Status(
                State.ENABLED,
                events=[
                    EventStatus(
                        event=e,
                        sound=find_sound(hooks[e]),
                        desktop_notifications=has_desktop_notify(hooks[e]),
                    )
                    for e in configured
                ],
            )

        backup = self.backup.read()
        if backup:
            return Status(State.DISABLED, backup_events=list(backup))
        return Status(State.NOT_CONFIGURED)

    def test_sound(self, sound: Optional[str] = None) -> Optional[str]:
        """Play a sound so the user can hear it.

        With no sound, plays the sounds configured for the Stop event,
        falling back to the platform default.

        Returns:
            The sound path played, or None if the configured Stop
            commands were played

        Raises:
            SoundNotFoundError: If sound cannot be resolved
            PlaybackError: If the player command fails
        """
        if sound is None:
            commands = sound_commands(self.settings.read().get("hooks", {}).get("Stop"))
            if commands:
                for command in commands:
                    if not self.notifier.run_command(command):
                        raise PlaybackError(f"Failed to play sound: {command}")
                return None

        sound_path = self.resolve_sound(sound)
        if not self.notifier.play(sound_path):
            raise PlaybackError(f"Failed to play sound: {sound_path}")
        return sound_path

    def test_desktop_notification(self) -> bool:
        """Raise a sample desktop banner. Returns True on success."""
        return self.notifier.notify()
