"""searchwords — report search-engine keywords found in access-log referrers."""

import logging
import sys
import zlib
from argparse import ArgumentParser

from searchwords.config import REPORT_ALIASES, ConfigError, load_config, load_yaml_config
from searchwords.pipeline import run_pipeline
from searchwords.reader import read_files, read_stream, resolve_inputs
from searchwords.reports import build_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [SEARCHWORDS] %(levelname)s %(message)s"


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    reports = ", ".join(f"{name}|{short}" for short, name in REPORT_ALIASES.items())
    parser = ArgumentParser(
        prog="searchwords",
        description="Extract search queries from access-log referrers and report on their keywords.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Log file path(s) or glob pattern(s); reads stdin if none given",
    )
    parser.add_argument(
        "-e", "--emit",
        help=f"Report to produce: {reports} (default: querytable)",
    )
    parser.add_argument(
        "-m", "--min",
        type=int,
        help="Hide entries counted fewer than N times (default: 0)",
    )
    parser.add_argument(
        "--dot-with-counts",
        action="store_true",
        help="dot: label nodes with their counts",
    )
    parser.add_argument(
        "--dot-url",
        help="dot: node URL template, %%s is replaced by the word",
    )
    parser.add_argument(
        "--dot-linked-only",
        action="store_true",
        help="dot: leave out words that never appear with another word",
    )
    parser.add_argument(
        "--config",
        help="YAML file with default values for the options above",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    return parser


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args, load_yaml_config(args.config))
        paths = resolve_inputs(args.files)
    except ConfigError as e:
        logger.error("%s", e)
        return 2
    logger.info("Config: report=%s, min=%d, inputs=%s",
                config.report, config.min_count, len(paths) or "stdin")

    if paths:
        lines = read_files(paths)
    else:
        sys.stdin.reconfigure(errors="replace")
        lines = read_stream()

    try:
        run_pipeline(lines, build_report(config))
    except BrokenPipeError:
        raise
    except (OSError, EOFError, zlib.error) as e:
        # Input that passed the up-front checks but fails part way, e.g. a truncated .gz
        logger.error("Failed reading input: %s", e)
        return 2
    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
