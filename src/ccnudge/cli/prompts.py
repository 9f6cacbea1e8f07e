"""Interactive prompts for ccnudge setup."""

from typing import Callable, Optional

from ccnudge.hooks.builder import MANAGED_EVENTS

InputFunc = Callable[[str], str]


def ask_yes_no(question: str, default: bool, input_func: Optional[InputFunc] = None) -> bool:
    """Ask a yes/no question, returning default on a blank answer."""
    input_func = input_func or input
    hint = "Y/n" if default else "y/N"
    while True:
        answer = input_func(f"{question} [{hint}] ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer y or n.")


def ask_events(input_func: Optional[InputFunc] = None) -> list[str]:
    """Ask which events to configure (comma-separated, default Stop)."""
    input_func = input_func or input
    print("Which events would you like to configure?")
    for name, description in MANAGED_EVENTS.items():
        print(f"  {name:<18} {description}")

    while True:
        answer = input_func("Events (comma-separated) [Stop]: ").strip()
        if not answer:
            return ["Stop"]

        events = [e.strip() for e in answer.split(",") if e.strip()]
        unknown = [e for e in events if e not in MANAGED_EVENTS]
        if unknown:
            print(f"Unknown event(s): {', '.join(unknown)}")
            continue
        # Keep first occurrence order
        return list(dict.fromkeys(events))


def ask_sound(
    event: str,
    default_sound: str,
    input_func: Optional[InputFunc] = None,
) -> Optional[str]:
    """Ask for a sound name or path. Returns None for the default."""
    input_func = input_func or input
    answer = input_func(
        f"Sound for {event} (name or path, blank for {default_sound}): "
    ).strip()
    return answer or None
