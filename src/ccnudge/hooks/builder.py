"""Hook entry construction and recovery for ccnudge-managed events."""

import os
import re
import shlex
from typing import Any, Callable, Optional

from ccnudge.errors import SoundNotFoundError
from ccnudge.platforms.platform import NOTIFY_MARKERS, SOUND_MARKERS, Platform

# Claude Code events ccnudge may create or remove hooks for
MANAGED_EVENTS = {
    "Stop": "When Claude finishes responding",
    "SubagentStop": "When subagent tasks complete",
    "PostToolUse": "After tool calls complete",
    "PreToolUse": "Before tool calls (advanced)",
    "UserPromptSubmit": "When user submits a prompt",
    "Notification": "When Claude sends notifications",
    "SessionStart": "When session starts/resumes",
    "SessionEnd": "When session ends",
    "PreCompact": "Before compact operations",
}

AUDIO_EXTENSIONS = ("aiff", "aif", "wav", "mp3", "oga", "ogg", "flac", "m4a", "caf")
AUDIO_SUFFIXES = tuple(f".{e}" for e in AUDIO_EXTENSIONS)

_EXT = "|".join(AUDIO_EXTENSIONS)
# Quoted paths first so Windows paths with spaces are captured whole
SOUND_PATH_RE = re.compile(
    rf"""'([^']+\.(?:{_EXT}))'|"([^"]+\.(?:{_EXT}))"|(/\S+\.(?:{_EXT}))"""
)


def hook_entry(command: str) -> dict[str, str]:
    return {"type": "command", "command": command}


def build_hooks(
    sound_path: str,
    desktop_notify: bool,
    platform: Platform,
) -> list[dict[str, str]]:
    """Build the hook entries for one event.

    Args:
        sound_path: Resolved absolute sound file path
        desktop_notify: Whether to append the desktop banner command
        platform: Command templates for the target OS

    Returns:
        Hook entries, sound first
    """
    hooks = [hook_entry(platform.sound_command(sound_path))]
    if desktop_notify:
        hooks.append(hook_entry(platform.notify_command))
    return hooks


def hook_group(entries: list[dict[str, str]]) -> list[dict[str, Any]]:
    """Wrap entries in the single-group list stored under hooks[event]."""
    return [{"hooks": entries}]


def resolve_sound(
    sound: Optional[str],
    platform: Platform,
    exists: Callable[[str], bool] = os.path.exists,
) -> str:
    """Resolve a sound name or path to an existing file.

    Args:
        sound: None for the platform default, an absolute path, a system
            sound name (e.g. "Glass"), or a path relative to the cwd
        platform: Supplies the default sound and system sounds directory
        exists: Filesystem probe

    Raises:
        SoundNotFoundError: If no candidate exists
    """
    if not sound:
        candidate = platform.default_sound
    elif platform.is_absolute(sound):
        candidate = sound
    else:
        candidate = platform.system_sound(sound)
        if not exists(candidate):
            candidate = os.path.abspath(sound)
            if not exists(candidate):
                raise SoundNotFoundError(sound)

    if not exists(candidate):
        raise SoundNotFoundError(candidate)
    return candidate


def group_entries(groups: Any) -> list[dict[str, Any]]:
    """Entries of the first hook group, or [] if the shape is unexpected."""
    if not groups or not isinstance(groups, list) or not isinstance(groups[0], dict):
        return []
    entries = groups[0].get("hooks")
    if not isinstance(entries, list):
        return []
    return [e for e in entries if isinstance(e, dict)]


def _command(entry: dict[str, Any]) -> str:
    command = entry.get("command")
    return command if isinstance(command, str) else ""


def is_sound_command(command: str) -> bool:
    return any(marker in command for marker in SOUND_MARKERS)


def is_notify_command(command: str) -> bool:
    return any(marker in command for marker in NOTIFY_MARKERS)


def sound_commands(groups: Any) -> list[str]:
    """Sound playback commands configured in an event's hook groups."""
    commands = [_command(e) for e in group_entries(groups)]
    return [c for c in commands if is_sound_command(c)]


def extract_sound_path(command: str) -> Optional[str]:
    """Recover the sound file path embedded in a playback command."""
    # POSIX players take one shell-quoted argument
    if not command.startswith("powershell"):
        try:
            words = shlex.split(command)
        except ValueError:
            words = []
        if len(words) == 2 and words[1].lower().endswith(AUDIO_SUFFIXES):
            return words[1]

    match = SOUND_PATH_RE.search(command)
    if match is None:
        return None
    return next(g for g in match.groups() if g)


def find_sound(groups: Any) -> Optional[str]:
    """Sound path of an event, or the raw command if no path is recognized."""
    for command in sound_commands(groups):
        return extract_sound_path(command) or command
    return None


def has_desktop_notify(groups: Any) -> bool:
    return any(is_notify_command(_command(e)) for e in group_entries(groups))
