"""Exception types raised by ccnudge."""


class CCNudgeError(Exception):
    """Base exception for all ccnudge errors."""

    pass


class ParseError(CCNudgeError):
    """Raised when settings.json cannot be parsed as a JSON object."""

    pass


class WriteError(CCNudgeError):
    """Raised when a settings or backup file cannot be written or removed."""

    pass


class SoundNotFoundError(CCNudgeError):
    """Raised when a requested sound cannot be resolved to an existing file."""

    def __init__(self, sound: str):
        super().__init__(f"Sound file not found: {sound}")
        self.sound = sound


class UnsupportedPlatformError(CCNudgeError):
    """Raised when no command templates exist for the running OS."""

    def __init__(self, platform: str):
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class PlaybackError(CCNudgeError):
    """Raised when a sound test command fails."""

    pass
