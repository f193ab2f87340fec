# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Tolerance-aware ordering of records."""

from functools import cmp_to_key
from typing import TypeVar

from pairmatch.model import Record, within_tolerance

RecordT = TypeVar("RecordT", bound=Record)


def compare_records(left: Record, right: Record) -> int:
    """Compare two records by their sort keys.

    Keys closer than the tolerance compare equal. The relation is therefore
    not transitive for long chains of near-equal keys.

    Returns:
        ``-1``, ``0`` or ``1`` for ascending order.
    """
    if within_tolerance(left.sort_key, right.sort_key):
        return 0
    return -1 if left.sort_key < right.sort_key else 1


def sort_records(records: list[RecordT]) -> list[RecordT]:
    """Return records sorted ascending by sort key.

    The sort is stable: records that compare equal keep their input order.
    """
    return sorted(records, key=cmp_to_key(compare_records))
