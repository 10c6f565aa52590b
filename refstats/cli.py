from __future__ import annotations

import argparse
import os
import sys
import time

from refstats import buildlog
from refstats import display
from refstats import watcher
from refstats.core.histogram import run
from refstats.core.report import distribution, rank
from refstats.core.util import SHOW_ALL, TopSelection, format_elapsed, parse_top


VERSION = "0.1.0"


def _die(msg: str) -> None:
    print(msg)
    sys.exit(1)


def _warn(msg: str) -> None:
    print(f"warning: {msg}", file=sys.stderr)


def _use_underline(args: argparse.Namespace) -> bool:
    if args.no_underline:
        return False
    return sys.stdout.isatty()


def print_report(log_path: str, selection: TopSelection, underline: bool) -> None:
    """Read the build log and print the summary and both tables.

    Raises:
        buildlog.BuildLogError: If the log cannot be read; nothing is printed
            past the reading banner in that case.
    """
    name = os.path.basename(log_path)
    print(f"Reading in '{name}'")
    started = time.perf_counter()
    invocations = buildlog.read_invocations(log_path)
    print(f"Read '{name}' in {format_elapsed(time.perf_counter() - started)}")

    histogram, frequency = run(invocations)

    print()
    print(display.format_unique_count(len(histogram)))
    print()
    if selection.show:
        print(display.format_reference_table(rank(histogram, selection.limit), underline))
        print()

    print()
    print(display.format_frequency_table(distribution(frequency), underline))
    print()


def cmd_report(args: argparse.Namespace) -> None:
    selection = parse_top(args.top)
    if not selection.valid:
        _warn(
            f"ignoring --top {args.top!r} (expected a non-negative integer or '{SHOW_ALL}'); "
            "most referenced assemblies will not be listed"
        )
    underline = _use_underline(args)

    try:
        print_report(args.build_log, selection, underline)
    except buildlog.BuildLogError as exc:
        _die(str(exc))

    if not args.watch:
        return

    def rerun() -> None:
        print()
        try:
            print_report(args.build_log, selection, underline)
        except buildlog.BuildLogError as exc:
            # The log may be mid-rewrite; keep watching for the next change
            _warn(str(exc))

    try:
        watcher.watch_build_log(args.build_log, rerun, args.idle_timeout)
    except RuntimeError as exc:
        _die(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refstats",
        description="Summarize how often assemblies are referenced by the compiler invocations in a build log.",
    )
    parser.add_argument(
        "--version", action="version", version=f"refstats {VERSION}"
    )
    parser.add_argument("build_log", help="Path to a text build log (optionally .gz)")
    parser.add_argument(
        "--top",
        default=None,
        help=f"Number of references to list (use '{SHOW_ALL}' to show all)",
    )
    parser.add_argument("--no-underline", action="store_true", help="Do not underline table headers")
    parser.add_argument("--watch", action="store_true", help="Re-run a full, fresh report whenever the build log changes")
    parser.add_argument(
        "--idle-timeout",
        type=float,
        default=1.0,
        help="Seconds the build log must stay unchanged before a watched re-run",
    )
    parser.set_defaults(func=cmd_report)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
