"""Feeds log lines through record parsing, query extraction, and a report."""

import logging
from dataclasses import dataclass
from typing import Iterable

from searchwords.query import extract_query
from searchwords.records import parse_record
from searchwords.reports import Report

logger = logging.getLogger(__name__)


@dataclass
class PipelineStats:
    lines: int = 0
    parsed: int = 0
    queries: int = 0


def run_pipeline(lines: Iterable[str], report: Report) -> PipelineStats:
    """Consume every search line in order, then emit the report once."""
    stats = PipelineStats()

    for line in lines:
        stats.lines += 1
        record = parse_record(line)
        if not record.parsed:
            logger.debug("Skipping unparseable line %d", stats.lines)
            continue
        stats.parsed += 1

        extracted = extract_query(record)
        if not extracted.present:
            continue
        stats.queries += 1
        report.consume(extracted)

    report.emit()
    logger.info(
        "Processed %d lines: %d parsed, %d with search queries",
        stats.lines, stats.parsed, stats.queries,
    )
    return stats
