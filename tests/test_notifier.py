"""Tests for sound playback and desktop notifications."""

import subprocess
from unittest import mock
from unittest.mock import MagicMock, patch

from ccnudge.platforms.notifier import DBusNotifier, Notifier
from ccnudge.platforms.platform import DARWIN, LINUX


def mock_dbus_interface(mock_dbus):
    mock_interface = MagicMock()
    mock_interface.Notify.return_value = 7
    mock_dbus.SessionBus.return_value.get_object.return_value = MagicMock()
    mock_dbus.Interface.return_value = mock_interface
    mock_dbus.Byte = lambda x: x
    mock_dbus.String = lambda x: x
    mock_dbus.DBusException = RuntimeError
    return mock_interface


@patch("ccnudge.platforms.notifier.dbus")
def test_dbus_show_notification(mock_dbus):
    """Sends a transient notification with normal urgency."""
    mock_interface = mock_dbus_interface(mock_dbus)

    notif_id = DBusNotifier().show("CCNudge", "Claude Code has finished")

    assert notif_id == 7
    args = mock_interface.Notify.call_args[0]
    assert args[0] == "CCNudge"
    assert args[3] == "CCNudge"
    assert args[4] == "Claude Code has finished"
    assert args[6].get("urgency") == 1


def test_play_runs_sound_command():
    """play runs the platform sound command through the shell."""
    with mock.patch("subprocess.run") as mock_run:
        assert Notifier(DARWIN).play("/System/Library/Sounds/Glass.aiff") is True
        mock_run.assert_called_once_with(
            "afplay /System/Library/Sounds/Glass.aiff",
            shell=True,
            check=True,
            capture_output=True,
        )


def test_play_failure():
    """play returns False when the player exits non-zero."""
    with mock.patch(
        "subprocess.run", side_effect=subprocess.CalledProcessError(1, "afplay")
    ):
        assert Notifier(DARWIN).play("/x.aiff") is False


def test_notify_uses_command_off_linux():
    """Non-Linux platforms run their notify command."""
    with mock.patch("subprocess.run") as mock_run:
        assert Notifier(DARWIN).notify() is True
        assert mock_run.call_args[0][0] == DARWIN.notify_command


@patch("ccnudge.platforms.notifier.dbus")
def test_notify_prefers_dbus_on_linux(mock_dbus):
    """Linux sends the banner over D-Bus when available."""
    mock_interface = mock_dbus_interface(mock_dbus)

    with mock.patch("subprocess.run") as mock_run:
        assert Notifier(LINUX).notify() is True
        mock_run.assert_not_called()
    mock_interface.Notify.assert_called_once()


@patch("ccnudge.platforms.notifier.dbus")
def test_notify_falls_back_to_notify_send(mock_dbus):
    """A D-Bus failure falls back to notify-send."""
    mock_dbus_interface(mock_dbus)
    mock_dbus.SessionBus.side_effect = RuntimeError("no session bus")

    with mock.patch("subprocess.run") as mock_run:
        assert Notifier(LINUX).notify() is True
        assert mock_run.call_args[0][0] == LINUX.notify_command


@patch("ccnudge.platforms.notifier.dbus", None)
def test_notify_without_dbus_python():
    """Without dbus-python, Linux uses notify-send."""
    with mock.patch("subprocess.run") as mock_run:
        assert Notifier(LINUX).notify() is True
        assert mock_run.call_args[0][0] == LINUX.notify_command
