"""Sound playback and desktop notifications."""

import logging
import subprocess

try:
    import dbus
except ImportError:
    dbus = None  # Falls back to the platform notify command

from .platform import NOTIFY_MESSAGE, NOTIFY_TITLE, Platform

logger = logging.getLogger(__name__)


class DBusNotifier:
    """Desktop notifications via org.freedesktop.Notifications."""

    def __init__(self):
        if dbus is None:
            raise RuntimeError("dbus-python not installed")

        self._bus = dbus.SessionBus()
        self._notify_obj = self._bus.get_object(
            "org.freedesktop.Notifications",
            "/org/freedesktop/Notifications",
        )
        self._notify_interface = dbus.Interface(
            self._notify_obj,
            "org.freedesktop.Notifications",
        )

    def show(self, summary: str, body: str, timeout_ms: int = 5000) -> int:
        """
        Show a transient notification.

        Args:
            summary: Notification title
            body: Notification text
            timeout_ms: Auto-dismiss timeout in milliseconds

        Returns:
            Notification ID
        """
        hints = {
            "urgency": dbus.Byte(1),  # Normal
            "category": dbus.String("im.received"),
        }

        notif_id = self._notify_interface.Notify(
            NOTIFY_TITLE,         # app_name
            0,                    # replaces_id
            "dialog-information", # icon
            summary,
            body,
            [],                   # actions
            hints,
            timeout_ms,
        )

        return int(notif_id)


class Notifier:
    """Plays sounds and raises desktop banners for one platform.

    Commands run through the shell and are awaited without a timeout,
    exactly as Claude Code would run the installed hooks.
    """

    def __init__(self, platform: Platform):
        self.platform = platform

    def run_command(self, command: str) -> bool:
        """Run a hook command. Returns True on success."""
        logger.debug(f"Running: {command}")
        try:
            subprocess.run(command, shell=True, check=True, capture_output=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.warning(f"Command failed: {command}: {e}")
            return False

    def play(self, sound_path: str) -> bool:
        """Play a sound file. Returns True on success."""
        return self.run_command(self.platform.sound_command(sound_path))

    def notify(self) -> bool:
        """Raise the desktop banner. Returns True on success."""
        if self.platform.name == "linux" and dbus is not None:
            try:
                DBusNotifier().show(NOTIFY_TITLE, NOTIFY_MESSAGE)
                return True
            except dbus.DBusException as e:
                logger.warning(f"D-Bus notification failed, using notify-send: {e}")
        return self.run_command(self.platform.notify_command)
