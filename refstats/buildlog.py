"""
Build Log Layer - Read compiler invocations out of a text build log.

Every compiler command line is materialised before aggregation starts, so a
missing or unreadable log fails the run before any report is produced.
"""

import gzip
import re
import zlib
from pathlib import Path
from typing import List, Union


class BuildLogError(Exception):
    """Exception raised when a build log cannot be used."""
    pass


class BuildLogNotFoundError(BuildLogError):
    """Exception raised when the build log path does not exist."""
    pass


class BuildLogReadError(BuildLogError):
    """Exception raised when the build log cannot be read or decoded."""
    pass


# csc / vbc, bare, quoted or path qualified, with an optional .exe/.dll suffix
COMPILER_RE = re.compile(
    r'(?:^|[\s"\\/])(?:csc|vbc)(?:\.exe|\.dll)?"?(?:\s|$)',
    re.IGNORECASE,
)


def is_compiler_invocation(line: str) -> bool:
    """Check if a log line runs the C# or VB compiler."""
    return COMPILER_RE.search(line) is not None


def _open_log(path: Path):
    if path.suffix.lower() == ".gz":
        return gzip.open(path, "rt", encoding="utf-8-sig")
    return open(path, "r", encoding="utf-8-sig")


def read_invocations(path: Union[str, Path]) -> List[str]:
    """Read all compiler command lines from a build log.

    Args:
        path: Path to a text (optionally gzip-compressed) build log

    Returns:
        List of command lines with log indentation removed

    Raises:
        BuildLogNotFoundError: If the path is missing or is a directory
        BuildLogReadError: If the file cannot be read or decoded
    """
    log_path = Path(path)
    if not log_path.exists():
        raise BuildLogNotFoundError(f"Build log not found: {log_path}")
    if log_path.is_dir():
        raise BuildLogNotFoundError(f"Build log is a directory: {log_path}")

    invocations = []
    try:
        with _open_log(log_path) as f:
            for line in f:
                if is_compiler_invocation(line):
                    invocations.append(line.strip())
    except (OSError, EOFError, zlib.error) as e:
        raise BuildLogReadError(f"Failed to read build log {log_path}: {e}")
    except UnicodeDecodeError as e:
        raise BuildLogReadError(f"Build log is not valid UTF-8 text: {log_path} ({e.reason})")

    return invocations
