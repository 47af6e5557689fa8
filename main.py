"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from core.errors import ConfigurationError
from core.logging.config import bootstrap_logging, shutdown_logging
from core.logging.logger import get_logger
from config import settings
from application import PollerConfig
from presentation.cli import ReportCommand, ReportOptions


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleet-health",
        description="Poll every host's status endpoint and report success rates per application version.",
    )
    parser.add_argument("--hosts-file", type=Path, default=settings.HOSTS_FILE,
                        help="file with one host per line (default: %(default)s)")
    parser.add_argument("--report", type=Path, default=settings.REPORT_FILE,
                        help="where to write the JSON report (default: %(default)s)")
    parser.add_argument("--no-report", action="store_true", help="do not write the JSON report file")
    parser.add_argument("--timeout", type=float, help="per-request timeout in seconds (HTTP_TIMEOUT)")
    parser.add_argument("--delay-ms", type=int, help="pacing delay per request in milliseconds (REQUEST_DELAY)")
    parser.add_argument("--concurrency", type=int, help="maximum requests in flight (MAX_CONCURRENCY)")
    parser.add_argument("--max-rps", type=int, help="global cap on requests per second, 0 disables")
    parser.add_argument("--batch-timeout", type=float, help="cancel the whole batch after N seconds, 0 disables")
    parser.add_argument("--json", action="store_true", help="print the JSON report instead of text")
    parser.add_argument("--strict", action="store_true", help="exit with status 2 if any host failed")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    return parser


def _config_from_args(args: argparse.Namespace) -> PollerConfig:
    base = PollerConfig.from_env()
    overrides = {
        "fetch_timeout_s": args.timeout,
        "request_delay_ms": args.delay_ms,
        "max_concurrency": args.concurrency,
        "max_requests_per_second": args.max_rps,
        "batch_timeout_s": args.batch_timeout,
    }
    return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings.create_directories()
    bootstrap_logging(
        service="fleet",
        level=args.log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="fleet.jsonl",
    )
    log = get_logger(__name__, service="cli")
    try:
        try:
            config = _config_from_args(args)
        except ConfigurationError as e:
            log.critical(lambda: f"invalid configuration: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        options = ReportOptions(
            hosts_file=args.hosts_file,
            report_file=None if args.no_report else args.report,
            json_out=args.json,
            strict=args.strict,
        )
        return asyncio.run(ReportCommand(config, options).run())
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
