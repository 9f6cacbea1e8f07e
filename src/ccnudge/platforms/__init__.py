"""Platform command templates and notification delivery."""

from .platform import Platform, DARWIN, LINUX, WIN32, detect_platform
from .notifier import Notifier

__all__ = ["Platform", "DARWIN", "LINUX", "WIN32", "detect_platform", "Notifier"]
