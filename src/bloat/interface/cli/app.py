from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: help handling, merging of configuration
sources (defaults, persisted preferences and CLI overrides), logging
bootstrap, the scan itself and report rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from bloat.core.engine import run_scan
from bloat.core.services.reporter import render_report_lines, summary_to_dict
from bloat.core.validator import validate_config
from bloat.domain.config import get_config_path, get_default_config, load_config, save_config
from bloat.domain.errors import TraversalError
from bloat.domain.models import ScanSummary
from bloat.infra.fs import normalize_path
from bloat.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from bloat.interface.cli import args as cli_args
from bloat.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name.
              Defaults to sys.argv[1:].

    Returns:
        int: Process exit code (0 success, 1 fatal error, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    argv = list(sys.argv[1:] if argv is None else argv)

    # 1. Help short-circuit (no arguments, -h, --help, /?)
    parser = cli_args.build_parser()
    if cli_args.wants_help(argv):
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults or persisted preferences + overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, plus optional rotating file)
    log_file = normalize_path(conf["log_file"], "") if conf["log_file"] else None
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=log_file))

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.dump_config:
            print(json.dumps(conf, ensure_ascii=False, indent=2))
            return 0

        if args.save_config:
            save_config(conf)
            print(i18n.t("cli.status.config_saved", path=get_config_path()), file=sys.stderr)

        roots = cli_args.roots_from_args(args)
        if not roots:
            if not args.save_config:
                parser.print_help()
            return 0

        return _run(roots, conf)
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(roots: List[str], conf: Dict[str, Any]) -> int:
    """Scan the roots and print the report; returns the exit code."""
    progress = _echo_path if conf["echo_progress"] else None

    try:
        summary = run_scan(roots, progress=progress, on_root_error=_report_root_error)
    except KeyboardInterrupt:
        msg = i18n.t("cli.errors.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    if not summary.ok:
        print(summary.error, file=sys.stderr)
        return 1

    if conf["json_output"]:
        print(json.dumps(summary_to_dict(summary, conf["top"]), ensure_ascii=False, indent=2))
    else:
        _print_report(summary, conf["top"])

    return 0


def _echo_path(path: str) -> None:
    print(path)


def _report_root_error(root: str, error: TraversalError) -> None:
    """Tell the user a root was abandoned; the run goes on."""
    print(i18n.t("cli.errors.scan_root", root=root, detail=error.report_detail), file=sys.stderr)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge CLI overrides into the base configuration.

    Only known keys are merged, and None never replaces a value.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_report(summary: ScanSummary, top: int) -> None:
    for line in render_report_lines(summary.directories, top):
        print(line)


if __name__ == "__main__":
    sys.exit(main())
