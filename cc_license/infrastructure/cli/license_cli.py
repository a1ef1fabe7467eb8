"""
cc-license Command-Line Interface.

Provides commands for:
- parse: Parse license URLs and print their canonical or short form
- check: Validate a list of URLs read from a file or stdin
- list: Show recognized rights and versions
- config: Show configuration
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from cc_license.domain.license_value_objects import RightsCode, VersionCode
from cc_license.infrastructure.adapters.license_report import LicenseReport
from cc_license.infrastructure.adapters.license_url_parser import parse_licenses
from cc_license.infrastructure.cli.license_config import (
    AVAILABLE_FORMATS,
    LicenseCliConfig,
)
from cc_license.infrastructure.logging.license_logger import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the cc-license CLI."""
    parser = argparse.ArgumentParser(
        prog="cc-license",
        description="Parse and validate Creative Commons license URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s parse https://creativecommons.org/licenses/by-nc-sa/4.0/
  %(prog)s parse --format short https://creativecommons.org/licenses/by/3.0
  %(prog)s check urls.txt
  cat urls.txt | %(prog)s check --format json
  %(prog)s list
        """,
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse license URLs",
        description="Parse one or more license URLs and print their description",
    )
    parse_parser.add_argument(
        "urls",
        nargs="+",
        metavar="URL",
        help="Creative Commons license URL",
    )
    _add_format_argument(parse_parser)

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Validate URLs from a file or stdin",
        description="Validate license URLs, one per line. Blank lines and '#' comments are ignored.",
    )
    check_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File with one URL per line (default: stdin)",
    )
    _add_format_argument(check_parser)

    # List command
    subparsers.add_parser(
        "list",
        help="List recognized rights and versions",
    )

    # Config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )

    return parser


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        type=str,
        choices=AVAILABLE_FORMATS,
        default=None,
        help=f"Output format: {', '.join(AVAILABLE_FORMATS)} (default: from config)",
    )


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def setup_logging(
    config: LicenseCliConfig,
    verbose: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    """Configure logging for CLI. Flags take precedence over the config level."""
    level = "DEBUG" if verbose else ("ERROR" if quiet else config.log_level)
    log_file = Path(config.log_file) if config.log_file else None
    return configure_logging(level=level, json_output=config.log_json, log_file=log_file)


def format_report(report: LicenseReport, output_format: str) -> str:
    """Render a report as a single output line."""
    if output_format == "json":
        return report.model_dump_json()
    if not report.valid:
        return f"{report.url}: {report.error}"
    if output_format == "short":
        return report.short_form
    return report.canonical_text


def _read_urls(lines: Iterable[str]) -> List[str]:
    urls = []
    for line in lines:
        url = line.strip()
        if url and not url.startswith("#"):
            urls.append(url)
    return urls


def _emit(reports: List[LicenseReport], output_format: str) -> int:
    """Print reports; invalid ones go to stderr unless output is JSON."""
    for report in reports:
        line = format_report(report, output_format)
        if report.valid or output_format == "json":
            print(line)
        else:
            print(line, file=sys.stderr)
    return 0 if all(report.valid for report in reports) else 1


def run_parse(
    args: argparse.Namespace,
    config: LicenseCliConfig,
    logger: logging.Logger,
) -> int:
    """Execute the parse command."""
    output_format = args.format or config.output_format
    reports = parse_licenses(args.urls)

    for report in reports:
        if not report.valid:
            logger.info(f"Rejected {report.url}", extra={"error_kind": report.error_kind})

    return _emit(reports, output_format)


def run_check(
    args: argparse.Namespace,
    config: LicenseCliConfig,
    logger: logging.Logger,
) -> int:
    """Execute the check command."""
    output_format = args.format or config.output_format

    source = "<stdin>" if args.file == "-" else args.file
    try:
        if args.file == "-":
            urls = _read_urls(sys.stdin)
        else:
            path = Path(args.file)
            if not path.is_file():
                reason = "not a file" if path.exists() else "file not found"
                logger.error(f"{reason.capitalize()}: {path}")
                print(f"cc-license: {reason}: {path}", file=sys.stderr)
                return 2
            urls = _read_urls(path.read_text(encoding="utf-8").splitlines())
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {source}: {e}")
        print(f"cc-license: cannot read {source}: {e}", file=sys.stderr)
        return 2

    logger.info(f"Checking {len(urls)} URL(s)")
    reports = parse_licenses(urls)
    status = _emit(reports, output_format)

    invalid = sum(1 for report in reports if not report.valid)
    logger.info(f"{len(reports) - invalid} valid, {invalid} invalid")
    if output_format != "json":
        print(f"{len(reports) - invalid} valid, {invalid} invalid", file=sys.stderr)

    return status


def run_list(
    args: argparse.Namespace,
    config: LicenseCliConfig,
    logger: logging.Logger,
) -> int:
    """Execute the list command."""
    print("Rights:")
    for rights in RightsCode:
        print(f"  {rights.token:<9} {rights.abbreviation:<12} {rights.full_text}")
    print("Versions:")
    print("  " + ", ".join(version.text for version in VersionCode))
    return 0


def run_config(
    args: argparse.Namespace,
    config: LicenseCliConfig,
    logger: logging.Logger,
) -> int:
    """Execute the config command."""
    if args.show:
        for key, value in config.to_dict().items():
            print(f"{key}: {value}")
    else:
        print("Use --show to display the current configuration")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed_args = parse_args(args)

    if not parsed_args.command:
        create_parser().print_help()
        return 0

    try:
        config = LicenseCliConfig.from_env()
    except ValueError as e:
        print(f"cc-license: {e}", file=sys.stderr)
        return 2

    try:
        logger = setup_logging(
            config,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
    except OSError as e:
        print(f"cc-license: cannot open log file: {e}", file=sys.stderr)
        return 2

    # Dispatch to command handler
    command_handlers = {
        "parse": run_parse,
        "check": run_check,
        "list": run_list,
        "config": run_config,
    }

    handler = command_handlers[parsed_args.command]
    return handler(parsed_args, config, logger)


if __name__ == "__main__":
    sys.exit(main())
