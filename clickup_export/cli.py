#!/usr/bin/env python3
"""
ClickUp Docs Exporter command line.

Usage:
    clickup-docs-export --token pk_xxx --workspace 9012345
    clickup-docs-export -t pk_xxx -w 9012345 -o ./backup --doc 8cdu4-123 --verbose
"""

import argparse
import logging
import sys
from typing import Optional

from clickup_export import __version__
from clickup_export.clickup_api import ClickUpAPI
from clickup_export.config import TOKEN_ENV_VAR, WORKSPACE_ENV_VAR, env_default, load_config
from clickup_export.errors import ClickUpAPIError, ConfigError, ErrorKind, ExporterError
from clickup_export.exporter import ClickUpExporter
from clickup_export.filename_utils import generate_slug
from clickup_export.logging_config import get_log_dir, setup_logging
from clickup_export.models import ExportOptions, ExportResult

MAX_WARNINGS_SHOWN = 5
TOKEN_SETTINGS_URL = "https://app.clickup.com/settings/apps"


def mask_token(token: str) -> str:
    """Show only the ends of a token (pk_123...abcd)."""
    if len(token) > 12:
        return f"{token[:6]}...{token[-4:]}"
    return "***"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickup-docs-export",
        description="Export ClickUp Docs and Wikis to markdown files",
    )
    parser.add_argument(
        "-t", "--token",
        default=env_default(TOKEN_ENV_VAR),
        help=f"ClickUp API token (pk_xxx or personal token; default: ${TOKEN_ENV_VAR})",
    )
    parser.add_argument(
        "-w", "--workspace",
        default=env_default(WORKSPACE_ENV_VAR),
        help=f"ClickUp Workspace ID (default: ${WORKSPACE_ENV_VAR})",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output directory (default: ./clickup-docs)",
    )
    parser.add_argument("-d", "--doc", help="Export single doc by ID (optional)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--page-delay",
        type=float,
        help="Seconds to wait between page fetches (default: 0.1)",
    )
    parser.add_argument("-c", "--config", help="JSON config file")
    parser.add_argument("--log-dir", help="Also write logs to this directory (default: $LOG_DIR)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_summary(result: ExportResult):
    """Print the export summary with a sample of warnings."""
    print()
    print("Export Summary")
    print("-" * 40)
    print(f"  Docs exported: {result.total_docs}")
    print(f"  Pages exported: {result.total_pages}")
    print(f"  Output directory: {result.output_dir}")

    if result.errors:
        print()
        print(f"  {len(result.errors)} warning(s):")
        for error in result.errors[:MAX_WARNINGS_SHOWN]:
            print(f"    - {error}")
        if len(result.errors) > MAX_WARNINGS_SHOWN:
            print(f"    ... and {len(result.errors) - MAX_WARNINGS_SHOWN} more")
    print()


def print_failure(error: Exception):
    """Print a fatal error, with a hint for rejected tokens."""
    print(file=sys.stderr)
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, ClickUpAPIError) and error.kind is ErrorKind.UNAUTHORIZED:
        print(file=sys.stderr)
        print("Tip: Make sure your API token is valid.", file=sys.stderr)
        print(f"Get your token at: {TOKEN_SETTINGS_URL}", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.token:
        parser.error(f"the following arguments are required: -t/--token (or set {TOKEN_ENV_VAR})")
    if not args.workspace:
        parser.error(f"the following arguments are required: -w/--workspace (or set {WORKSPACE_ENV_VAR})")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print_failure(e)
        return 1

    api_config = config["api"]
    export_config = config["export"]

    options = ExportOptions(
        token=args.token,
        workspace_id=args.workspace,
        output_dir=args.output or export_config["output_dir"],
        doc_id=args.doc,
        verbose=args.verbose,
        page_delay=(
            args.page_delay if args.page_delay is not None
            else export_config["page_delay_seconds"]
        ),
    )

    logger = setup_logging(
        name="clickup_export",
        workspace_id=generate_slug(options.workspace_id),
        log_dir=args.log_dir or get_log_dir(config["logging"]["log_dir"]),
        level=logging.DEBUG if options.verbose else logging.INFO,
    )

    print()
    print("ClickUp Docs Exporter")
    print("-" * 40)
    print(f"  Token: {mask_token(options.token)}")
    print(f"  Workspace: {options.workspace_id}")
    print(f"  Output: {options.output_dir}")
    if options.doc_id:
        print(f"  Doc ID: {options.doc_id}")
    print()

    api = ClickUpAPI(
        token=options.token,
        base_url=api_config["base_url"],
        legacy_base_url=api_config["legacy_base_url"],
        delay=api_config["request_delay_seconds"],
        timeout=api_config["timeout_seconds"],
        max_server_retries=api_config["max_server_retries"],
        user_agent=api_config["user_agent"],
        logger=logger,
    )

    try:
        result = ClickUpExporter(options, api=api, logger=logger).export()
    except (ExporterError, OSError) as e:
        logger.error("Export failed")
        print_failure(e)
        return 1

    logger.info("Export complete!")
    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
