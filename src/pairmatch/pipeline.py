# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Scoring, sorting and matching of parsed input lines."""

import logging
import time
from dataclasses import dataclass

from pairmatch.matcher import NOT_FOUND, find_match
from pairmatch.model import EnglishRecord, RussianRecord
from pairmatch.parser import ParseError, parse_english, parse_russian
from pairmatch.scorer import score_records
from pairmatch.sorter import sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Represent the lookup outcome for one Russian record.

    Attributes:
        record: Scored Russian record.
        match: Matching English record, or ``None`` when nothing is within
            tolerance.
    """

    record: RussianRecord
    match: EnglishRecord | None

    @property
    def matched(self) -> bool:
        return self.match is not None


@dataclass(frozen=True)
class PipelineResult:
    """Represent the outcome of one run.

    Attributes:
        results: One entry per Russian record, in sorted order.
        english: Scored English records, in sorted order.
        errors: Malformed English lines that were skipped.
        elapsed_ms: Wall-clock time spent scoring, sorting and matching.
    """

    results: list[MatchResult]
    english: list[EnglishRecord]
    errors: list[ParseError]
    elapsed_ms: float

    @property
    def matched_count(self) -> int:
        return sum(1 for result in self.results if result.matched)


def match_records(
    russian: list[RussianRecord], english: list[EnglishRecord]
) -> list[MatchResult]:
    """Look up every Russian record in the sorted English list.

    Args:
        russian: Scored Russian records.
        english: Scored English records sorted by combined score.

    Returns:
        Match results in the order of ``russian``.
    """
    results: list[MatchResult] = []
    for record in russian:
        position = find_match(record.index, english)
        match = None if position == NOT_FOUND else english[position]
        results.append(MatchResult(record=record, match=match))
    return results


def run_pipeline(russian_lines: list[str], english_lines: list[str]) -> PipelineResult:
    """Parse, score, sort and match the two corpora.

    Args:
        russian_lines: Raw Russian lines.
        english_lines: Raw English ``text|comment`` lines.

    Returns:
        Structured run result.
    """
    russian = parse_russian(russian_lines)
    english, errors = parse_english(english_lines)
    logger.info(
        f"Parsed input (russian={len(russian)} english={len(english)} errors={len(errors)})"
    )

    started_at = time.perf_counter()
    scored_russian: list[RussianRecord] = sort_records(score_records(russian))
    scored_english: list[EnglishRecord] = sort_records(score_records(english))
    results = match_records(scored_russian, scored_english)
    elapsed_ms = (time.perf_counter() - started_at) * 1000.0

    result = PipelineResult(
        results=results,
        english=scored_english,
        errors=errors,
        elapsed_ms=elapsed_ms,
    )
    logger.info(
        f"Matching completed (records={len(results)} matched={result.matched_count} "
        f"elapsed_ms={elapsed_ms:.3f})"
    )
    return result
