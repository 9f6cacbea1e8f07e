"""Per-OS command templates for sound playback and desktop banners."""

import shlex
import sys
from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional

from ccnudge.errors import UnsupportedPlatformError

NOTIFY_TITLE = "CCNudge"
NOTIFY_MESSAGE = "Claude Code has finished"


@dataclass(frozen=True)
class Platform:
    """Command templates for one operating system."""

    name: str
    player: str
    default_sound: str
    sounds_dir: str
    extension: str
    notify_command: str
    path_type: type = PurePosixPath
    player_suffix: str = ""

    def sound_command(self, sound_path: str) -> str:
        """Build the shell command that plays sound_path."""
        if self.path_type is PureWindowsPath:
            return f"{self.player} '{sound_path}'{self.player_suffix}"
        return f"{self.player} {shlex.quote(sound_path)}{self.player_suffix}"

    def system_sound(self, name: str) -> str:
        """Path of a named sound in the system sounds directory."""
        return str(self.path_type(self.sounds_dir) / f"{name}{self.extension}")

    def is_absolute(self, path: str) -> bool:
        return self.path_type(path).is_absolute()


DARWIN = Platform(
    name="darwin",
    player="afplay",
    default_sound="/System/Library/Sounds/Glass.aiff",
    sounds_dir="/System/Library/Sounds",
    extension=".aiff",
    # Empty sound name suppresses the default notification beep
    notify_command=(
        f"osascript -e 'display notification \"{NOTIFY_MESSAGE}\" "
        f"with title \"{NOTIFY_TITLE}\" sound name \"\"'"
    ),
)

LINUX = Platform(
    name="linux",
    player="paplay",
    default_sound="/usr/share/sounds/freedesktop/stereo/complete.oga",
    sounds_dir="/usr/share/sounds",
    extension=".oga",
    notify_command=f'notify-send "{NOTIFY_TITLE}" "{NOTIFY_MESSAGE}"',
)

WIN32 = Platform(
    name="win32",
    player="powershell -c (New-Object Media.SoundPlayer",
    player_suffix=").PlaySync()",
    default_sound="C:\\Windows\\Media\\Windows Notify System Generic.wav",
    sounds_dir="C:\\Windows\\Media",
    extension=".wav",
    notify_command=(
        f"powershell -c \"New-BurntToastNotification -Text "
        f"'{NOTIFY_TITLE}', '{NOTIFY_MESSAGE}'\""
    ),
    path_type=PureWindowsPath,
)

PLATFORMS = {p.name: p for p in (DARWIN, LINUX, WIN32)}

# Substrings identifying hook commands written by any platform
SOUND_MARKERS = ("afplay", "paplay", "Media.SoundPlayer")
NOTIFY_MARKERS = ("osascript", "notify-send", "New-BurntToastNotification")


def detect_platform(system: Optional[str] = None) -> Platform:
    """Select the Platform for the running OS.

    Args:
        system: Platform identifier (default: sys.platform)

    Raises:
        UnsupportedPlatformError: If there are no templates for this OS
    """
    system = system or sys.platform
    if system.startswith("linux"):
        system = "linux"
    try:
        return PLATFORMS[system]
    except KeyError:
        raise UnsupportedPlatformError(system) from None
