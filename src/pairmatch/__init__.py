# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for affinity index matching."""

from pairmatch.loader import InputAccessError, load_corpora, load_lines
from pairmatch.matcher import NOT_FOUND, find_match
from pairmatch.model import TOLERANCE, EnglishRecord, Record, RussianRecord
from pairmatch.parser import ParseError, parse_english, parse_russian
from pairmatch.pipeline import MatchResult, PipelineResult, run_pipeline
from pairmatch.scorer import (
    UnsupportedLanguageError,
    affinity_index,
    comment_index,
    score_record,
)
from pairmatch.sorter import sort_records

__all__ = [
    "EnglishRecord",
    "InputAccessError",
    "MatchResult",
    "NOT_FOUND",
    "ParseError",
    "PipelineResult",
    "Record",
    "RussianRecord",
    "TOLERANCE",
    "UnsupportedLanguageError",
    "affinity_index",
    "comment_index",
    "find_match",
    "load_corpora",
    "load_lines",
    "parse_english",
    "parse_russian",
    "run_pipeline",
    "score_record",
    "sort_records",
]
