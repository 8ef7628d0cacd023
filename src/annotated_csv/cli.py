"""
Command-line interface for annotated-csv.

Usage:
    annotated-csv --input report.csv --output report.json
    annotated-csv --input report.tsv --output report.json --delimiter "\t"
    annotated-csv --input report.csv --output report.json --config parser.yaml --debug

The JSON result is written to --output and printed to stdout, whether or not
the document parsed cleanly. Content errors exit with 0 unless
--fail-on-error is given. An --output that cannot be written is reported as
a usage error (status 2) after the JSON has been printed.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from annotated_csv.config import ParserConfig, load_config
from annotated_csv.observability.base import (
    LoggingMetricsHook,
    MetricsHook,
    NoOpMetricsHook,
)
from annotated_csv.parsers.annotated_csv import annotate_csv

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONTENT_ERROR = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="annotated-csv",
        description="Convert an annotated CSV document to JSON.",
    )
    parser.add_argument("--input", required=True, help="Annotated CSV file to read")
    parser.add_argument("--output", required=True, help="JSON file to write")
    parser.add_argument(
        "--delimiter",
        default=None,
        help="CSV delimiter (default: ',' or the config file's value)",
    )
    parser.add_argument("--config", default=None, help="YAML parser config file")
    parser.add_argument(
        "--debug", action="store_true", help="Log raw rows and metrics to stderr"
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 when the document has errors",
    )
    return parser


def _resolve_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> ParserConfig:
    try:
        config = load_config(args.config) if args.config else ParserConfig()
    except (OSError, ValueError, ValidationError) as e:
        # argparse exits with status 2 and prints usage
        parser.error(f"invalid config: {e}")

    overrides: dict = {}
    if args.delimiter is not None:
        overrides["delimiter"] = _unescape(args.delimiter)
    if args.debug:
        overrides["debug"] = True
    if not overrides:
        return config

    try:
        return ParserConfig(**{**config.model_dump(), **overrides})
    except ValidationError as e:
        parser.error(f"invalid option: {e}")


def _unescape(delimiter: str) -> str:
    # shells make a literal tab awkward to pass
    return "\t" if delimiter == "\\t" else delimiter


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("annotated_csv").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    config = _resolve_config(args, parser)
    if config.debug and not args.debug:
        # debug enabled from the config file
        _configure_logging(True)

    metrics_hook: MetricsHook = LoggingMetricsHook() if config.debug else NoOpMetricsHook()
    document = asyncio.run(annotate_csv(args.input, config, metrics_hook))

    payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    print(payload)

    try:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write %s: %s", args.output, e)
        # argparse exits with status 2
        parser.error(f"cannot write output '{args.output}': {e}")
    logger.info("Wrote %s", args.output)

    if document.has_error and args.fail_on_error:
        return EXIT_CONTENT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
