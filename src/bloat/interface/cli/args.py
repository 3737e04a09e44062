from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
import os
from typing import Any, Dict, List, Optional

from bloat.infra.logging import get_default_log_path
from bloat.utils.i18n import i18n

PROG_NAME = "bloat"

# First-argument spellings that request help instead of a scan
HELP_FLAGS = ("--help", "-h", "/?")

# -----------------------------------------------------------------------------
# VALUE TYPES
# -----------------------------------------------------------------------------

def log_file_path(value: str) -> str:
    """Accept a log file path; an existing directory is refused."""
    if os.path.isdir(value):
        raise argparse.ArgumentTypeError(i18n.t("cli.errors.log_file_is_dir", path=value))
    return value

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the bloat CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=PROG_NAME,
        usage=i18n.t("app.usage", default="{prog} [DIR]...", prog=PROG_NAME),
        description=i18n.t("app.description"),
        epilog=i18n.t("app.example", prog=PROG_NAME),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    p.add_argument(
        "dirs",
        nargs="*",
        metavar="DIR",
        help=i18n.t("cli.args.dirs"),
    )

    # --- Output ---
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help=i18n.t("cli.args.quiet"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--top",
        type=int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.top"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.use_defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save_config"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        type=log_file_path,
        default=None,
        metavar="PATH",
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--log",
        dest="log_default",
        action="store_true",
        help=i18n.t("cli.args.log"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p


def wants_help(argv: List[str]) -> bool:
    """True when no argument is given or the first one asks for help."""
    return not argv or argv[0] in HELP_FLAGS

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually passed appear in the result, so that
    persisted preferences survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.quiet:
        overrides["echo_progress"] = False
    if args.json_output:
        overrides["json_output"] = True
    if args.top is not None:
        overrides["top"] = args.top
    if args.log_file:
        overrides["log_file"] = args.log_file
    elif args.log_default:
        overrides["log_file"] = get_default_log_path()
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def roots_from_args(args: argparse.Namespace) -> Optional[List[str]]:
    """Return the directory arguments, or None when none were given."""
    return list(args.dirs) if args.dirs else None
