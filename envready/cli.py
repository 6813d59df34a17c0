"""
envready CLI - Thin entrypoint for the readiness checker.

Usage:
    envready                                   # Run every check with defaults
    envready --test-api-host api.example.com   # Also probe outbound HTTPS
    envready --required-ram-gb 16 --required-free-disk-gb 50
    envready --version                         # Print version only

Exit Codes:
    0: Ready (no blocking check failed)
    1: Not ready (at least one blocking check failed)
    2: Invalid configuration
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import DEFAULT_REQUIRED_FREE_DISK_GB, DEFAULT_REQUIRED_RAM_GB, ReadinessConfig
from .console import TerminalReporter
from .readiness_report import run_checks

logger = logging.getLogger(__name__)

EXIT_READY = 0
EXIT_NOT_READY = 1
EXIT_CONFIG_ERROR = 2

BANNER_TITLE = "ENVIRONMENT READINESS CHECK"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envready",
        description="Check whether this machine can run a Python workload that calls a remote HTTPS API",
    )
    parser.add_argument(
        "--test-api-host",
        default="",
        metavar="HOST",
        help="Hostname (no scheme) to probe on port 443; omit to skip the network check",
    )
    parser.add_argument(
        "--required-ram-gb",
        type=int,
        default=DEFAULT_REQUIRED_RAM_GB,
        help=f"Minimum installed RAM in GB (default: {DEFAULT_REQUIRED_RAM_GB})",
    )
    parser.add_argument(
        "--required-free-disk-gb",
        type=int,
        default=DEFAULT_REQUIRED_FREE_DISK_GB,
        help=f"Minimum free space on the system drive in GB (default: {DEFAULT_REQUIRED_FREE_DISK_GB})",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log probe details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(config: ReadinessConfig, reporter: TerminalReporter) -> bool:
    """
    Run every check, printing each line as it completes.

    Returns:
        True if ready, False otherwise
    """
    reporter.banner(BANNER_TITLE)
    report = run_checks(config, on_result=reporter.result)
    reporter.verdict(report)
    return report.ready


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ReadinessConfig(
            api_host=args.test_api_host,
            required_ram_gb=args.required_ram_gb,
            required_free_disk_gb=args.required_free_disk_gb,
        )
    except ValidationError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    color = not args.no_color and sys.stdout.isatty()
    reporter = TerminalReporter(color=color)
    logger.debug("Running readiness checks with %s", config)
    return EXIT_READY if run(config, reporter) else EXIT_NOT_READY


if __name__ == "__main__":
    sys.exit(main())
