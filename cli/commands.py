"""
CLI subcommand implementations for the chess-club system.

Subcommands::

    chess-club app      [--start registration|login]
    chess-club register --username U --email E --password P --elo N
    chess-club login    --username U --password P
    chess-club submit   KIND --field name=value [--field ...]
    chess-club records list KIND
    chess-club config show
    chess-club config set-data-dir PATH

Every subcommand accepts ``--data-dir`` (or CHESS_CLUB_DATA_DIR).
"""

import argparse
import logging
import sys
from pathlib import Path

from club_platform import __version__
from club_platform.config import DATA_DIR_ENV_VAR, resolve_data_dir
from club_platform.navigation import LOGIN, REGISTRATION, greeting
from club_platform.persistence import RecordStoreError
from club_platform.schemas import FORM_KINDS, get_record_kind
from club_platform.services import (
    list_records,
    login,
    register_account,
    submit_record,
)
from club_platform.user_config import get_data_dir, get_user_config_path, set_data_dir

from .interface import print_records, print_result
from .screen_loop import run_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def _data_dir(args) -> Path:
    return resolve_data_dir(getattr(args, "data_dir", None))


# ---------------------------------------------------------------------------
# Subcommand: app
# ---------------------------------------------------------------------------

def cmd_app(args):
    """Run the interactive registration/login/dashboard flow."""
    run_app(_data_dir(args), start=args.start)


# ---------------------------------------------------------------------------
# Subcommands: register / login
# ---------------------------------------------------------------------------

def cmd_register(args):
    """Register a single account non-interactively."""
    result = register_account(
        _data_dir(args), args.username, args.email, args.password, args.elo,
    )
    print_result(result)
    if not result.ok:
        sys.exit(1)


def cmd_login(args):
    """Check credentials and print the dashboard greeting."""
    outcome = login(_data_dir(args), args.username, args.password)
    if not outcome.ok:
        print(f"  ✗ {outcome.message}")
        sys.exit(1)
    print(f"  ✓ {greeting(outcome.username)}")


# ---------------------------------------------------------------------------
# Subcommand: submit
# ---------------------------------------------------------------------------

def _parse_field_args(items: list[str]) -> dict[str, str]:
    values = {}
    for item in items or []:
        if "=" not in item:
            print(f"Error: Invalid --field '{item}'. Expected format name=value (e.g. id=7)")
            sys.exit(1)
        name, value = item.split("=", 1)
        values[name.strip()] = value.strip()
    return values


def cmd_submit(args):
    """Submit one dashboard form non-interactively."""
    kind = get_record_kind(args.kind)
    values = _parse_field_args(args.field)

    unknown = sorted(set(values) - set(kind.field_names))
    if unknown:
        print(f"Error: Unknown field(s) for {kind.key}: {', '.join(unknown)}")
        print(f"  Expected: {', '.join(kind.field_names)}")
        sys.exit(1)

    result = submit_record(_data_dir(args), kind.key, values)
    print_result(result)
    if not result.ok:
        sys.exit(1)


# ---------------------------------------------------------------------------
# Subcommand: records
# ---------------------------------------------------------------------------

def cmd_records(args):
    """Inspect saved records."""
    if args.records_action == "list":
        kind = get_record_kind(args.kind)
        try:
            records = list_records(_data_dir(args), kind.key)
        except RecordStoreError as e:
            logger.error("Failed to read %s records: %s", kind.key, e, exc_info=e.cause)
            print(f"Error: {e}")
            sys.exit(1)
        print_records(kind, records)


# ---------------------------------------------------------------------------
# Subcommand: config
# ---------------------------------------------------------------------------

def cmd_config(args):
    """Show or change user-level configuration."""
    if args.config_action == "show":
        print(f"\nConfig file:    {get_user_config_path()}")
        print(f"Saved data dir: {get_data_dir() or '(not set)'}")
        print(f"Effective:      {_data_dir(args)}")

    elif args.config_action == "set-data-dir":
        path = Path(args.path).expanduser()
        if path.exists() and not path.is_dir():
            print(f"Error: Not a directory: {path}")
            sys.exit(1)
        set_data_dir(str(path.resolve()))
        print(f"✓ Saved data directory to user config: {path.resolve()}")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="chess-club",
        description="Chess club desk: accounts, lessons, puzzles, games and coaching",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        help=f"Directory holding the record files (or set {DATA_DIR_ENV_VAR})",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- app ---
    p_app = subparsers.add_parser("app", help="Run the interactive app (default)")
    p_app.add_argument(
        "--start", choices=[REGISTRATION, LOGIN], default=REGISTRATION,
        help="Screen to start on (default: registration)",
    )

    # --- register ---
    p_register = subparsers.add_parser("register", help="Register an account")
    p_register.add_argument("--username", required=True)
    p_register.add_argument("--email", required=True)
    p_register.add_argument("--password", required=True)
    p_register.add_argument("--elo", required=True, help="Elo rating (whole number)")

    # --- login ---
    p_login = subparsers.add_parser("login", help="Check account credentials")
    p_login.add_argument("--username", required=True)
    p_login.add_argument("--password", required=True)

    # --- submit ---
    p_submit = subparsers.add_parser("submit", help="Submit a dashboard form")
    p_submit.add_argument("kind", choices=FORM_KINDS)
    p_submit.add_argument(
        "--field",
        action="append",
        help="Form field, format name=value (repeatable)",
    )

    # --- records ---
    p_records = subparsers.add_parser("records", help="Inspect saved records")
    sp_records = p_records.add_subparsers(dest="records_action", required=True)

    sp_list = sp_records.add_parser("list", help="List saved records of a kind")
    sp_list.add_argument("kind", choices=("accounts",) + FORM_KINDS)

    # --- config ---
    p_config = subparsers.add_parser("config", help="Manage user configuration")
    sp_config = p_config.add_subparsers(dest="config_action", required=True)

    sp_config.add_parser("show", help="Show configuration")
    sp_set = sp_config.add_parser("set-data-dir", help="Save the data directory")
    sp_set.add_argument("path")

    return parser


def main(argv=None):
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command in (None, "app"):
        if args.command is None:
            args.start = REGISTRATION
        cmd_app(args)
    elif args.command == "register":
        cmd_register(args)
    elif args.command == "login":
        cmd_login(args)
    elif args.command == "submit":
        cmd_submit(args)
    elif args.command == "records":
        cmd_records(args)
    elif args.command == "config":
        cmd_config(args)
