"""Sound and desktop notifications for Claude Code events."""

from .errors import (
    CCNudgeError,
    ParseError,
    WriteError,
    SoundNotFoundError,
    UnsupportedPlatformError,
    PlaybackError,
)
from .manager import ConfigManager, ChangeResult, Outcome, State, Status, EventStatus

__version__ = "1.0.0"

__all__ = [
    "ConfigManager",
    "ChangeResult",
    "Outcome",
    "State",
    "Status",
    "EventStatus",
    "CCNudgeError",
    "ParseError",
    "WriteError",
    "SoundNotFoundError",
    "UnsupportedPlatformError",
    "PlaybackError",
]
