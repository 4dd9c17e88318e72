"""
Footprint aggregation.

Turns extracted pallet rows into the figure the planner works with.
Each row describes `count` identical items of `height x width x length`
inches; the pallet total is the summed volume divided by 1728 (cubic
inches per cubic foot) and rounded up.  Rows missing one of the four
columns, or holding an unreadable cell, are skipped rather than counted
as zero.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..normalize.schema import ExtractionResult

logger = logging.getLogger(__name__)

CUBIC_INCHES_PER_CUBIC_FOOT = 12 ** 3


@dataclass(frozen=True)
class AreaKeys:
    """Column keys read by the aggregator."""

    height: str = "height"
    width: str = "width"
    length: str = "length"
    count: str = "pallet"


DEFAULT_KEYS = AreaKeys()


def _number(value: object) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def row_cubic_inches(row: Mapping[str, object], keys: AreaKeys = DEFAULT_KEYS) -> Optional[float]:
    """Return `height * width * length * count` for a row, or None if any is missing."""
    factors = []
    for key in (keys.height, keys.width, keys.length, keys.count):
        value = _number(row.get(key))
        if value is None:
            return None
        factors.append(value)
    return math.prod(factors)


def square_feet(rows: Iterable[Mapping[str, object]], keys: AreaKeys = DEFAULT_KEYS) -> int:
    """Aggregate rows into the rounded-up footprint figure of one pallet."""
    total: float = 0
    skipped = 0
    for row in rows:
        volume = row_cubic_inches(row, keys)
        if volume is None:
            skipped += 1
            continue
        total += volume
    if skipped:
        logger.debug("Skipped %d rows with missing dimensions", skipped)
    return math.ceil(total / CUBIC_INCHES_PER_CUBIC_FOOT)


def total_square_feet(results: Iterable[ExtractionResult], keys: AreaKeys = DEFAULT_KEYS) -> int:
    """Sum the per-pallet figures of several extraction results."""
    return sum(square_feet(result.rows, keys) for result in results)
