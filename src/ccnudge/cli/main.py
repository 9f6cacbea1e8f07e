"""ccnudge command line entry point."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ccnudge import __version__
from ccnudge.cli.prompts import ask_events, ask_sound, ask_yes_no
from ccnudge.errors import CCNudgeError
from ccnudge.hooks.builder import MANAGED_EVENTS
from ccnudge.manager import ConfigManager, Outcome, State

logger = logging.getLogger(__name__)

EVENT_CHOICES = list(MANAGED_EVENTS)


def configure_event(
    manager: ConfigManager,
    event: str,
    sound: Optional[str],
    desktop_notify: bool,
) -> None:
    sound_path = manager.setup(event, sound, desktop_notify)
    print(f"Configured {event} event to play: {sound_path}")
    if desktop_notify:
        print("Desktop notifications enabled")
    print(f"Settings saved to: {manager.settings.path}")


def interactive_setup(manager: ConfigManager) -> int:
    """Prompt for events and sounds, then configure each event."""
    print("Welcome to CCNudge setup!\n")
    print("Get notified when Claude Code triggers different events.\n")

    events = ask_events()
    default_sound = manager.platform.default_sound

    for index, event in enumerate(events):
        print(f"\nConfiguring {event} event:")
        sound = ask_sound(event, default_sound)
        test = ask_yes_no("Test this sound?", default=index == 0)
        desktop_notify = ask_yes_no(
            f"Enable desktop notifications for {event}?", default=False
        )

        if test:
            print("Testing sound...")
            try:
                manager.test_sound(sound or default_sound)
            except CCNudgeError as e:
                print(f"Error testing sound: {e}", file=sys.stderr)

        if desktop_notify:
            print("Testing desktop notification...")
            manager.test_desktop_notification()

        configure_event(manager, event, sound, desktop_notify)

    print(f"\nSetup complete! CCNudge is now active for {len(events)} event(s).\n")
    print("Commands:")
    print("  ccnudge stop    - Temporarily disable all notifications")
    print("  ccnudge start   - Re-enable all notifications")
    print("  ccnudge status  - Check current status")
    return 0


def cmd_setup(manager: ConfigManager, args: argparse.Namespace) -> int:
    if args.event is None:
        return interactive_setup(manager)
    configure_event(manager, args.event, args.sound, args.desktop_notify)
    return 0


def cmd_start(manager: ConfigManager, args: argparse.Namespace) -> int:
    result = manager.enable(args.event)
    if result.outcome == Outcome.NO_BACKUP:
        print('No previous configuration found. Please run "ccnudge setup" first.')
    elif result.outcome == Outcome.EVENT_NOT_FOUND:
        print(f"No backup found for {args.event} event.")
    elif args.event:
        print(f"{args.event} event notifications enabled")
    else:
        print(f"Notifications enabled for {len(result.events)} event(s)")
    return 0


def cmd_stop(manager: ConfigManager, args: argparse.Namespace) -> int:
    result = manager.disable(args.event)
    if result.outcome == Outcome.NOTHING_CONFIGURED:
        print("No notifications currently configured.")
    elif result.outcome == Outcome.EVENT_NOT_FOUND:
        print(f"No notification configured for {args.event} event.")
    elif args.event:
        print(
            f"{args.event} event notifications disabled "
            "(configuration saved for re-enabling)"
        )
    else:
        print(
            f"Notifications disabled for {len(result.events)} event(s) "
            "(configuration saved for re-enabling)"
        )
    return 0


def cmd_status(manager: ConfigManager, args: argparse.Namespace) -> int:
    status = manager.status()
    print("\nCCNudge Status:\n")

    if status.state == State.ENABLED:
        print(f"Status: ENABLED for {len(status.events)} event(s)\n")
        for event in status.events:
            print(f"Event: {event.event}")
            if event.sound:
                print(f"  Sound: {event.sound}")
            notify = "Enabled" if event.desktop_notifications else "Disabled"
            print(f"  Desktop Notifications: {notify}\n")
    elif status.state == State.DISABLED:
        print(
            f"Status: DISABLED ({len(status.backup_events)} event(s) can be "
            're-enabled with "ccnudge start")'
        )
        print(f"Events: {', '.join(status.backup_events)}\n")
    else:
        print('Status: NOT CONFIGURED (run "ccnudge setup" to get started)\n')
    return 0


def cmd_test(manager: ConfigManager, args: argparse.Namespace) -> int:
    played = manager.test_sound(args.sound)
    print(f"Played {played or 'configured Stop sound'}")
    return 0


def cmd_notify(manager: ConfigManager, args: argparse.Namespace) -> int:
    print("Testing notification...\n")
    manager.test_sound()
    if manager.test_desktop_notification():
        print("Desktop notification sent!")
    else:
        print("WARNING: Could not send desktop notification")
    print("\nNotification test complete!")
    return 0


def cmd_remove(manager: ConfigManager, args: argparse.Namespace) -> int:
    if not args.yes and not ask_yes_no(
        "Are you sure you want to remove CCNudge configuration?", default=False
    ):
        print("Cancelled.")
        return 0

    result = manager.remove(args.event)
    if result.outcome == Outcome.EVENT_NOT_FOUND:
        print(f"No notification configured for {args.event} event.")
    else:
        print(f"Removed notification for {args.event} event.")
    return 0


COMMANDS = {
    "setup": cmd_setup,
    "start": cmd_start,
    "stop": cmd_stop,
    "status": cmd_status,
    "test": cmd_test,
    "notify": cmd_notify,
    "remove": cmd_remove,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccnudge",
        description="Configure sound and desktop notifications for Claude Code events",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--claude-dir",
        type=Path,
        default=None,
        help="Claude Code configuration directory (default: ~/.claude)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    setup_parser = subparsers.add_parser(
        "setup", help="Configure notifications (interactive without --event)"
    )
    setup_parser.add_argument("-e", "--event", choices=EVENT_CHOICES)
    setup_parser.add_argument(
        "-s", "--sound", help="System sound name or path (default: platform sound)"
    )
    setup_parser.add_argument(
        "--desktop-notify",
        action="store_true",
        help="Also show a desktop notification",
    )

    start_parser = subparsers.add_parser(
        "start", help="Re-enable notifications from the saved configuration"
    )
    start_parser.add_argument(
        "-e", "--event", choices=EVENT_CHOICES,
        help="Specific event to enable (enables all if not specified)",
    )

    stop_parser = subparsers.add_parser(
        "stop", help="Disable notifications (keeps configuration)"
    )
    stop_parser.add_argument(
        "-e", "--event", choices=EVENT_CHOICES,
        help="Specific event to disable (disables all if not specified)",
    )

    subparsers.add_parser("status", help="Show current status")

    test_parser = subparsers.add_parser("test", help="Test the notification sound")
    test_parser.add_argument("-s", "--sound", help="Sound to test (optional)")

    subparsers.add_parser("notify", help="Test sound and desktop notification")

    remove_parser = subparsers.add_parser(
        "remove", help="Remove an event's configuration and the saved backup"
    )
    remove_parser.add_argument(
        "-e", "--event", choices=EVENT_CHOICES, default="Stop",
        help="Event to remove notification from (default: Stop)",
    )
    remove_parser.add_argument(
        "-y", "--yes", action="store_true", help="Do not ask for confirmation"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ccnudge command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    manager = ConfigManager.for_claude_dir(args.claude_dir)
    try:
        return COMMANDS[args.command](manager, args)
    except CCNudgeError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
