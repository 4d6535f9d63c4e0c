"""Command-line entrypoint for the forex news sentiment signal.

Flow:
1) load the theme/currency catalog
2) fetch both currencies' headlines from GDELT
3) weight, aggregate and decide; print the report
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import requests
from dotenv import load_dotenv

from .fetchers import NewsFetchError
from .output.report_formatter import format_report
from .pipeline.analysis_pipeline import InputValidationError, analyze_pair
from .utils.config_loader import ConfigError, load_catalog
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import AnalysisSettings

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Derive a bullish/bearish/neutral forex signal from weighted news sentiment"
    )
    parser.add_argument("--pair", help="Six-letter currency pair, e.g. EURUSD")
    parser.add_argument(
        "--timespan",
        default=None,
        help="GDELT look-back window such as 15min, 24h, 7d (default: DEFAULT_TIMESPAN or 24h)",
    )
    parser.add_argument(
        "--config",
        default="config/catalog.yaml",
        help="Path to the theme/currency catalog (YAML)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format written to stdout",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Articles requested per currency (overrides GDELT_MAX_RECORDS)",
    )
    parser.add_argument(
        "--list-pairs",
        action="store_true",
        help="Print the configured pairs and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("fxs.cli")

    try:
        catalog = load_catalog(Path(args.config))
    except ConfigError as exc:
        logger.error("Failed to load catalog: %s", exc)
        return EXIT_FAILURE

    if args.list_pairs:
        if args.format == "json":
            print(json.dumps({"pairs": list(catalog.pairs)}))
        else:
            print("\n".join(catalog.pairs))
        return EXIT_OK

    if not args.pair:
        logger.error("--pair is required unless --list-pairs is given")
        return EXIT_INVALID_INPUT

    settings = AnalysisSettings.from_env()
    if args.max_records is not None:
        if args.max_records <= 0:
            logger.error("--max-records must be positive")
            return EXIT_INVALID_INPUT
        settings = replace(settings, max_records=args.max_records)

    try:
        result = analyze_pair(args.pair, args.timespan, catalog=catalog, settings=settings)
    except InputValidationError as exc:
        logger.error("Invalid request: %s", exc)
        if args.format == "json":
            print(json.dumps({"error": str(exc)}))
        return EXIT_INVALID_INPUT
    except (NewsFetchError, requests.RequestException) as exc:
        logger.error("News retrieval failed: %s", exc)
        if args.format == "json":
            print(json.dumps({"error": str(exc)}))
        return EXIT_FAILURE

    if args.format == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(format_report(result))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
