# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import pytest

from pairmatch.matcher import NOT_FOUND, find_match
from pairmatch.model import EnglishRecord, TOLERANCE


def _records(*keys: float) -> list[EnglishRecord]:
    return [
        EnglishRecord(text=f"t{position}", comment="", index=key)
        for position, key in enumerate(keys)
    ]


def test_find_match_returns_not_found_for_empty_list() -> None:
    assert find_match(0.0, []) == NOT_FOUND
    assert find_match(13.5, []) == NOT_FOUND


def test_find_match_checks_single_element() -> None:
    records = _records(13.5)

    assert find_match(13.5, records) == 0
    assert find_match(4.0, records) == NOT_FOUND


def test_find_match_checks_both_elements_of_pair() -> None:
    records = _records(4.0, 13.5)

    assert find_match(4.0, records) == 0
    assert find_match(13.5, records) == 1
    assert find_match(32.0, records) == NOT_FOUND


@pytest.mark.parametrize("size", [3, 4, 5, 6, 7, 10])
def test_find_match_locates_every_element(size: int) -> None:
    records = _records(*[n**3 / 2 for n in range(size)])

    for record in records:
        position = find_match(record.sort_key, records)
        assert position != NOT_FOUND
        assert abs(records[position].sort_key - record.sort_key) < TOLERANCE


def test_find_match_uses_combined_score() -> None:
    records = [
        EnglishRecord(text="a", comment="", index=0.5, comment_index=0.0),
        EnglishRecord(text="b", comment="c", index=0.5, comment_index=0.5),
        EnglishRecord(text="d", comment="ef", index=0.5, comment_index=4.0),
    ]

    assert find_match(1.0, records) == 1
    assert find_match(4.5, records) == 2


def test_find_match_accepts_values_within_tolerance() -> None:
    records = _records(0.0, 4.0, 13.5, 32.0, 62.5)

    assert find_match(13.505, records) == 2
    assert find_match(13.52, records) == NOT_FOUND


@pytest.mark.parametrize("target", [-5.0, 1.0, 20.0, 1000.0])
def test_find_match_returns_not_found_for_missing_target(target: float) -> None:
    records = _records(0.0, 4.0, 13.5, 32.0, 62.5, 108.0)

    assert find_match(target, records) == NOT_FOUND
