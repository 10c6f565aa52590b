"""
Histogram Layer - Reference counting across compiler invocations.

Folds extracted reference tokens into a case-insensitive name -> count
histogram and derives the count -> frequency histogram used by the
distribution report.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Tuple

from .extract import extract_references


def _fold(name: str) -> str:
    """Upper-case one character at a time; multi-character mappings such as ß are left alone."""
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in name)


class ReferenceHistogram:
    """Insertion-ordered, case-insensitive name -> count mapping.

    The display key keeps the casing of its first occurrence.
    """

    def __init__(self) -> None:
        self._keys: Dict[str, str] = {}
        self._counts: Dict[str, int] = {}

    def increment(self, name: str) -> None:
        folded = _fold(name)
        if folded in self._counts:
            self._counts[folded] += 1
        else:
            self._keys[folded] = name
            self._counts[folded] = 1

    def get(self, name: str, default: int = 0) -> int:
        return self._counts.get(_fold(name), default)

    def items(self) -> Iterator[Tuple[str, int]]:
        for folded, count in self._counts.items():
            yield self._keys[folded], count

    def keys(self) -> list[str]:
        return list(self._keys.values())

    def __getitem__(self, name: str) -> int:
        return self._counts[_fold(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _fold(name) in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"ReferenceHistogram({dict(self.items())!r})"


class HistogramAggregator:
    """Accumulates reference tokens for a single run."""

    def __init__(self) -> None:
        self._histogram = ReferenceHistogram()

    @property
    def histogram(self) -> ReferenceHistogram:
        return self._histogram

    @property
    def unique_count(self) -> int:
        return len(self._histogram)

    def accumulate(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self._histogram.increment(token)

    def build_count_frequency(self) -> Dict[int, int]:
        return build_count_frequency(self._histogram)


def build_count_frequency(histogram: ReferenceHistogram) -> Dict[int, int]:
    """Map each count value to the number of names sharing it."""
    frequency: Dict[int, int] = {}
    for _, count in histogram.items():
        frequency[count] = frequency.get(count, 0) + 1
    return frequency


def run(invocations: Iterable[str]) -> Tuple[ReferenceHistogram, Dict[int, int]]:
    """Aggregate every invocation into a fresh histogram.

    Args:
        invocations: Materialised compiler command lines

    Returns:
        Tuple of (reference histogram, count -> frequency histogram)
    """
    aggregator = HistogramAggregator()
    for command_line in invocations:
        aggregator.accumulate(extract_references(command_line))
    return aggregator.histogram, aggregator.build_count_frequency()
