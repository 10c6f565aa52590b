from refstats.core.histogram import ReferenceHistogram
from refstats.core.report import (
    FrequencyBarRow,
    RankedReferenceRow,
    display_name,
    distribution,
    normalization_factor,
    rank,
)


def _histogram(counts):
    histogram = ReferenceHistogram()
    for name, count in counts:
        for _ in range(count):
            histogram.increment(name)
    return histogram


def test_rank_with_limit():
    histogram = _histogram([("A", 5), ("B", 3), ("C", 3), ("D", 1)])
    rows = rank(histogram, limit=2)
    assert len(rows) == 2
    assert rows[0] == RankedReferenceRow("A", 5)
    assert rows[1].count == 3
    assert rows[1].name in ("B", "C")


def test_rank_ties_keep_insertion_order():
    histogram = _histogram([("D", 1), ("C", 3), ("B", 3), ("A", 5)])
    assert [row.name for row in rank(histogram)] == ["A", "C", "B", "D"]


def test_rank_without_limit_and_zero_limit():
    histogram = _histogram([("A", 1), ("B", 2)])
    assert len(rank(histogram)) == 2
    assert rank(histogram, limit=0) == []


def test_display_name():
    assert display_name('"C:\\Program Files\\ref\\System.Core.dll"') == "System.Core.dll"
    assert display_name("/usr/lib/mono/System.dll") == "System.dll"
    assert display_name("Plain.dll") == "Plain.dll"


def test_distribution_scaling_and_filter():
    frequency = {1: 100, 2: 3, 3: 1}
    assert normalization_factor(frequency) == 2
    assert distribution(frequency) == [FrequencyBarRow(1, 50)]


def test_distribution_orders_by_count_descending():
    frequency = {1: 10, 4: 3, 2: 7}
    rows = distribution(frequency)
    assert [row.count for row in rows] == [4, 2, 1]
    assert rows[0].bar() == "***"


def test_empty_reports():
    assert rank(ReferenceHistogram()) == []
    assert normalization_factor({}) == 0
    assert distribution({}) == []
