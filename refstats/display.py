"""
Output formatting for refstats reports.
Renders ranked reference rows and frequency bars as aligned text tables.
"""

from typing import List, Sequence

from .core.report import FrequencyBarRow, RankedReferenceRow


UNDERLINE_ON = "\x1b[4m"
UNDERLINE_OFF = "\x1b[24m"
COLUMN_GAP = "  "

REFERENCE_HEADERS = ("Assembly Name", "Times Projects Referenced This Assembly")
FREQUENCY_HEADERS = ("# of References", "Frequency")


def _header_cell(text: str, width: int, underline: bool) -> str:
    padding = " " * (width - len(text))
    if underline:
        return f"{UNDERLINE_ON}{text}{UNDERLINE_OFF}{padding}"
    return text + padding


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]], underline: bool = False) -> str:
    """Format rows under headers with left-aligned, padded columns."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_cells = [_header_cell(h, widths[i], underline) for i, h in enumerate(headers)]
    lines = [COLUMN_GAP.join(header_cells).rstrip()]
    for row in rows:
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row)]
        lines.append(COLUMN_GAP.join(cells).rstrip())
    return "\n".join(lines)


def format_reference_table(rows: List[RankedReferenceRow], underline: bool = False) -> str:
    cells = [(row.name, str(row.count)) for row in rows]
    return format_table(REFERENCE_HEADERS, cells, underline)


def format_frequency_table(rows: List[FrequencyBarRow], underline: bool = False, marker: str = "*") -> str:
    cells = [(str(row.count), row.bar(marker)) for row in rows]
    return format_table(FREQUENCY_HEADERS, cells, underline)


def format_unique_count(unique_count: int) -> str:
    return f"Number of unique references: {unique_count}"
