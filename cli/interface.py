"""
Terminal rendering and prompting helpers for the chess-club CLI.
"""

import getpass
from typing import Optional

from club_platform.models import SubmissionResult
from club_platform.schemas import FieldSpec, RecordKind


def print_header(title: str):
    """Print a screen header."""
    print("\n" + "=" * 60)
    print(title.upper())
    print("=" * 60)


def print_result(result: SubmissionResult):
    """Print the outcome of a submission the way a dialog would show it."""
    mark = "✓" if result.ok else "✗"
    print(f"  {mark} {result.message}")


def print_records(kind: RecordKind, records: list[dict]):
    """Print saved records of a kind as a small table."""
    print(f"\nSaved records — {kind.label} ({len(records)})")
    if not records:
        print("  [none yet]")
        return

    for i, record in enumerate(records, 1):
        if "raw" in record:
            print(f"  {i:>3}. (unparsed) {record['raw']}")
            continue
        parts = []
        for spec in kind.fields:
            value = record.get(spec.name, "")
            if spec.secret:
                value = "*" * len(value)
            parts.append(f"{spec.label}: {value}")
        print(f"  {i:>3}. " + " | ".join(parts))


def print_menu(options: list[tuple[str, str]]):
    """Print numbered menu options (action id, label)."""
    print()
    for i, (_action, label) in enumerate(options, 1):
        print(f"  [{i}] {label}")
    print("  [q] Quit")


def prompt_menu(options: list[tuple[str, str]]) -> Optional[str]:
    """Ask for a menu choice and return its action id.

    Returns None when the user quits (``q`` or end of input).
    """
    print_menu(options)
    while True:
        try:
            choice = input("\n> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            return None

        if choice in ("q", "quit", "exit"):
            return None
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1][0]
        for action, label in options:
            if choice in (action, label.lower()):
                return action
        print(f"  Unknown option '{choice}'. Enter 1-{len(options)} or q.")


def prompt_field(spec: FieldSpec) -> str:
    """Prompt for one form field. Raises EOFError/KeyboardInterrupt on abort."""
    if spec.secret:
        return getpass.getpass(f"  {spec.label}: ")
    if spec.choices:
        options = ", ".join(f"{i}={c}" for i, c in enumerate(spec.choices, 1))
        raw = input(f"  {spec.label} ({options}): ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(spec.choices):
            return spec.choices[int(raw) - 1]
        return raw
    return input(f"  {spec.label}: ").strip()


def prompt_fields(kind: RecordKind) -> Optional[list[str]]:
    """Prompt for every field of *kind* in order.

    Returns None if input is aborted part-way.
    """
    values = []
    try:
        for spec in kind.fields:
            values.append(prompt_field(spec))
    except (EOFError, KeyboardInterrupt):
        print("\n  Cancelled.")
        return None
    return values
