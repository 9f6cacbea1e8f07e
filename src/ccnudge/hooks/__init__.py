"""Hook entry construction for managed Claude Code events."""

from .builder import (
    MANAGED_EVENTS,
    build_hooks,
    hook_group,
    resolve_sound,
    find_sound,
    has_desktop_notify,
    sound_commands,
)

__all__ = [
    "MANAGED_EVENTS",
    "build_hooks",
    "hook_group",
    "resolve_sound",
    "find_sound",
    "has_desktop_notify",
    "sound_commands",
]
