# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pairmatch.model import EnglishRecord, RussianRecord
from pairmatch.scorer import score_records
from pairmatch.sorter import compare_records, sort_records


def test_compare_records_treats_close_keys_as_equal() -> None:
    left = RussianRecord(text="a", index=1.0)
    right = RussianRecord(text="b", index=1.005)

    assert compare_records(left, right) == 0
    assert compare_records(right, left) == 0


def test_compare_records_orders_ascending() -> None:
    low = RussianRecord(text="a", index=1.0)
    high = RussianRecord(text="b", index=1.5)

    assert compare_records(low, high) == -1
    assert compare_records(high, low) == 1


def test_sort_records_orders_russian_records_by_index() -> None:
    records = score_records(
        [RussianRecord(text="abc"), RussianRecord(text="1"), RussianRecord(text="ab")]
    )

    ordered = sort_records(records)

    assert [record.text for record in ordered] == ["1", "ab", "abc"]


def test_sort_records_orders_english_records_by_combined_score() -> None:
    records = score_records(
        [
            EnglishRecord(text="a", comment="abcd"),
            EnglishRecord(text="abc", comment="42"),
            EnglishRecord(text="", comment="ab"),
        ]
    )

    ordered = sort_records(records)

    assert [record.sort_key for record in ordered] == [4.0, 13.5, 32.5]


def test_sort_records_is_stable_within_tolerance() -> None:
    first = RussianRecord(text="first", index=2.005)
    second = RussianRecord(text="second", index=2.0)
    third = RussianRecord(text="third", index=0.5)

    ordered = sort_records([first, second, third])

    assert [record.text for record in ordered] == ["third", "first", "second"]


def test_sort_records_handles_empty_and_single_lists() -> None:
    single = [RussianRecord(text="a", index=0.5)]

    assert sort_records([]) == []
    assert sort_records(single) == single


def test_sorted_adjacent_pairs_respect_tolerance() -> None:
    texts = ["мир", "привет", "", "слово и дело", "a", "да", "нет", "абв"]
    ordered = sort_records(score_records([RussianRecord(text=text) for text in texts]))

    for left, right in zip(ordered, ordered[1:]):
        assert left.index <= right.index + 0.01
