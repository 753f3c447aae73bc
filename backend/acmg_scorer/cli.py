"""
Command line entry point.

    acmg info "PVS1, PS1, PM2_Supporting"
    acmg codes
"""
import argparse
import sys
from typing import List, Optional

from .core.config import settings
from .core.constants import APP_NAME, APP_VERSION
from .core.exceptions import EvidenceError
from .core.logging_config import configure_logging, get_logger
from .services.acmg_scorer import ACMGScorer
from .services.report_formatter import format_code_table, format_result

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="ACMG evidence code scoring")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="structlog level for diagnostics on stderr (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser(
        "info",
        help="Shows info about ACMG codes",
        description="Calculates ACMG score and classifies pathogenicity from ACMG evidence codes",
    )
    info.add_argument("acmg_evidence", help="ACMG evidence string, e.g 'PVS1, PM2_Supporting'")
    info.add_argument("--format", dest="output_format", choices=["text", "json"],
                      default=settings.output_format, help="Output format (default: %(default)s)")

    subparsers.add_parser("codes", help="Lists all ACMG evidence codes and their default points")
    return parser


def run_info_command(acmg_evidence: str, output_format: str = "text") -> int:
    try:
        result = ACMGScorer().score(acmg_evidence)
    except EvidenceError as e:
        logger.error("Unable to score evidence", evidence=acmg_evidence, token=e.token)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(format_result(result, output_format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    if args.command == "info":
        return run_info_command(args.acmg_evidence, args.output_format)
    print(format_code_table())
    return 0


if __name__ == "__main__":
    sys.exit(main())
