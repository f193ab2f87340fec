# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for scored text records."""

from dataclasses import dataclass
from typing import ClassVar, Literal

Language = Literal["ru", "en"]

TOLERANCE = 0.01


@dataclass(frozen=True)
class RussianRecord:
    """Represent one Russian input line.

    Attributes:
        text: Full input line.
        index: Affinity index of ``text``; zero until scored.
    """

    language: ClassVar[Language] = "ru"

    text: str
    index: float = 0.0

    @property
    def sort_key(self) -> float:
        """Return the value used for ordering and searching."""
        return self.index

    def __str__(self) -> str:
        return f"--> {self.text} ({self.index})"


@dataclass(frozen=True)
class EnglishRecord:
    """Represent one English input line split into text and comment.

    Attributes:
        text: First field of the input line.
        comment: Second field of the input line.
        index: Affinity index of ``text``; zero until scored.
        comment_index: Affinity index of ``comment``; zero until scored.
    """

    language: ClassVar[Language] = "en"

    text: str
    comment: str
    index: float = 0.0
    comment_index: float = 0.0

    @property
    def sort_key(self) -> float:
        """Return the combined score of text and comment."""
        return self.index + self.comment_index

    def __str__(self) -> str:
        return f"--> {self.text} ({self.index}) {self.comment} ({self.comment_index})"


Record = RussianRecord | EnglishRecord


def within_tolerance(left: float, right: float) -> bool:
    """Return whether two scores are considered equal."""
    return abs(left - right) < TOLERANCE
