# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Approximate binary search over sorted records."""

import logging
from collections.abc import Sequence

from pairmatch.model import Record, within_tolerance

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def find_match(target: float, records: Sequence[Record]) -> int:
    """Find a record whose sort key is within tolerance of ``target``.

    The search narrows ``[left, right]`` until the bounds are adjacent. If no
    probe matched on the way, the last probe and both final bounds are
    checked in that order.

    Args:
        target: Score to look for.
        records: Records sorted ascending by ``sort_key``.

    Returns:
        Position of a matching record, or ``NOT_FOUND``.
    """
    if not records:
        return NOT_FOUND

    left = 0
    right = len(records) - 1
    middle = (left + right) // 2
    while left < right - 1:
        middle = (left + right) // 2
        score = records[middle].sort_key
        if within_tolerance(score, target):
            return middle
        if score < target:
            left = middle
        else:
            right = middle

    for candidate in (middle, left, right):
        if within_tolerance(records[candidate].sort_key, target):
            return candidate
    logger.debug(f"No record within tolerance (target={target} size={len(records)})")
    return NOT_FOUND
