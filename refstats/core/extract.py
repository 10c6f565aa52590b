from __future__ import annotations


REFERENCE_MARKER = "/reference:"


def extract_references(command_line: str) -> list[str]:
    """Return the reference tokens of one compiler command line, in order.

    Tokens are kept verbatim apart from surrounding whitespace; duplicates are
    not removed. The final token is cut at the next `/` flag.
    """
    segments = command_line.split(REFERENCE_MARKER)[1:]
    if not segments:
        return []
    segments[-1] = segments[-1].split("/")[0]
    return [segment.strip() for segment in segments]
