"""
Report Layer - Ordered row views for the two console reports.

Ties between equal counts in the ranked report keep the histogram's
insertion order; no secondary key is applied.
"""

from __future__ import annotations

import math
import ntpath
from dataclasses import dataclass
from typing import Dict, List, Optional

from .histogram import ReferenceHistogram


BAR_BUDGET = 50


@dataclass(frozen=True)
class RankedReferenceRow:
    name: str
    count: int


@dataclass(frozen=True)
class FrequencyBarRow:
    count: int
    bar_length: int

    def bar(self, marker: str = "*") -> str:
        return marker * self.bar_length


def display_name(key: str) -> str:
    """Final path component of a reference with double quotes removed."""
    return ntpath.basename(key).replace('"', "")


def rank(histogram: ReferenceHistogram, limit: Optional[int] = None) -> List[RankedReferenceRow]:
    """Rows ordered by count descending, truncated to `limit` when given."""
    # sorted() is stable, so equal counts stay in insertion order
    ordered = sorted(histogram.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ordered = ordered[:max(0, limit)]
    return [RankedReferenceRow(display_name(name), count) for name, count in ordered]


def normalization_factor(frequency: Dict[int, int], budget: int = BAR_BUDGET) -> int:
    if not frequency:
        return 0
    return math.ceil(max(frequency.values()) / float(budget))


def distribution(frequency: Dict[int, int], budget: int = BAR_BUDGET) -> List[FrequencyBarRow]:
    """Bucketed bars for each count, widest bar at most `budget` characters.

    Rows whose bar would be 0 or 1 characters long are dropped.
    """
    factor = normalization_factor(frequency, budget)
    if factor == 0:
        return []

    rows = []
    for count in sorted(frequency, reverse=True):
        bar_length = frequency[count] // factor
        if bar_length > 1:
            rows.append(FrequencyBarRow(count, bar_length))
    return rows
