from __future__ import annotations

import re
from dataclasses import dataclass


SHOW_ALL = "*"
_NON_NEGATIVE_INT = re.compile(r"^\+?\d+$")


@dataclass(frozen=True)
class TopSelection:
    show: bool
    limit: int | None
    valid: bool = True


def parse_top(value: str | None) -> TopSelection:
    if value is None:
        return TopSelection(show=False, limit=None)
    text = value.strip()
    if text == SHOW_ALL:
        return TopSelection(show=True, limit=None)
    if _NON_NEGATIVE_INT.match(text):
        return TopSelection(show=True, limit=int(text))
    # Unrecognised values disable the ranked report, the caller decides how loudly
    return TopSelection(show=False, limit=None, valid=False)


def format_elapsed(seconds: float) -> str:
    hundredths = int(max(0.0, seconds) * 100)
    total_seconds, fraction = divmod(hundredths, 100)
    minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{fraction:02d}"
