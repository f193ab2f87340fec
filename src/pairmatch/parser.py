# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Conversion of raw input lines into records."""

import logging
from dataclasses import dataclass

from pairmatch.model import EnglishRecord, RussianRecord

logger = logging.getLogger(__name__)

DELIMITER = "|"


@dataclass(frozen=True)
class ParseError:
    """Represent one English line that could not be parsed.

    Attributes:
        line_number: Line number in the input file (1-based).
        line: Raw line content.
        message: Human-readable reason.
    """

    line_number: int
    line: str
    message: str


def parse_russian(lines: list[str]) -> list[RussianRecord]:
    """Build one Russian record per input line."""
    return [RussianRecord(text=line) for line in lines]


def parse_english(lines: list[str]) -> tuple[list[EnglishRecord], list[ParseError]]:
    """Split English lines into text and comment.

    Each line is split on the first ``|``; anything after it, further
    delimiters included, becomes the comment. Lines without a delimiter are
    reported and skipped.

    Args:
        lines: Raw English lines.

    Returns:
        Parsed records and errors for malformed lines.
    """
    records: list[EnglishRecord] = []
    errors: list[ParseError] = []
    for line_number, line in enumerate(lines, start=1):
        fields = line.split(DELIMITER, 1)
        if len(fields) < 2:
            logger.warning(
                f"English line has no comment field (line_number={line_number} line={line!r})"
            )
            errors.append(
                ParseError(
                    line_number=line_number,
                    line=line,
                    message=f"missing '{DELIMITER}' delimiter",
                )
            )
            continue
        text, comment = fields
        records.append(EnglishRecord(text=text, comment=comment))
    return records, errors
