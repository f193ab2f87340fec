# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Affinity index computation.

The index of a string is a weighted letter count: the first letter weighs
0.5 and every following letter weighs one more than the previous one. The
weights are summed and the sum is multiplied by the number of letters.
Non-letter characters are skipped and do not advance the weight.
"""

import re
from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar, cast

from pairmatch.model import EnglishRecord, Record, RussianRecord

INITIAL_WEIGHT = 0.5
MAX_COMMENT_TOKENS = 5
WORD_PATTERN = re.compile(r"(?:[^\W_]|['-])+")

RecordT = TypeVar("RecordT", RussianRecord, EnglishRecord)


class UnsupportedLanguageError(TypeError):
    """Represent a record that is neither Russian nor English."""


def _weighted_letter_score(chunks: Iterable[str]) -> float:
    weight = INITIAL_WEIGHT
    accumulator = 0.0
    letters = 0
    for chunk in chunks:
        for char in chunk:
            if not char.isalpha():
                continue
            accumulator += weight
            weight += 1
            letters += 1
    return accumulator * letters


def affinity_index(text: str) -> float:
    """Compute the affinity index of a string.

    Args:
        text: Any string.

    Returns:
        Non-negative score; ``0.0`` when ``text`` has no letters.
    """
    return _weighted_letter_score([text])


def comment_index(comment: str) -> float:
    """Compute the affinity index of a comment over its leading words.

    Only the first ``MAX_COMMENT_TOKENS`` word tokens are scanned. The weight
    carries over from one token to the next.

    Args:
        comment: Comment text.

    Returns:
        Non-negative score; ``0.0`` when the scanned tokens have no letters.
    """
    tokens = WORD_PATTERN.findall(comment)[:MAX_COMMENT_TOKENS]
    return _weighted_letter_score(tokens)


def score_record(record: Record) -> Record:
    """Return a copy of ``record`` with its scores filled in.

    Raises:
        UnsupportedLanguageError: If ``record`` is not a known record type.
    """
    if isinstance(record, EnglishRecord):
        return replace(
            record,
            index=affinity_index(record.text),
            comment_index=comment_index(record.comment),
        )
    if isinstance(record, RussianRecord):
        return replace(record, index=affinity_index(record.text))
    raise UnsupportedLanguageError(
        f"Language was not russian or english: {type(record).__name__}"
    )


def score_records(records: list[RecordT]) -> list[RecordT]:
    """Score every record, preserving order."""
    return [cast(RecordT, score_record(record)) for record in records]
