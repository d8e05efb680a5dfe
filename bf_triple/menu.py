"""Interactive menu for screening files and single strings against a known-bad list.

Run with:

    python -m bf_triple.menu [known_bad_path]

The filter is built once from the known-bad list (one entry per line) and the
menu then loops until the user exits or input ends.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from . import config
from .bloom_filter import HASH_NAMES, BloomFilter, ScanReport
from .loader import read_lines


logger = logging.getLogger(__name__)

CHOICE_ERROR = "Please enter a number between 1 and 3."


def build_filter(path: str, err: TextIO = sys.stderr) -> BloomFilter:
    """Build a filter from ``path``; an unreadable file yields an empty filter."""
    bloom = BloomFilter()
    try:
        added = bloom.update(read_lines(path))
    except OSError as exc:
        print(f"Unable to open file: {path} ({exc.strerror or exc})", file=err)
        return bloom
    logger.info(
        "loaded %d entries from %s (%d bits set, est. FPR %.2e)",
        added, path, bloom.bits_set, bloom.estimated_false_positive_rate(),
    )
    return bloom


def print_report(report: ScanReport, out: TextIO = sys.stdout) -> None:
    """Print per-item verdicts, totals and the matched entries."""
    for item, hit in report.results:
        print(f"Checking {item} : {'possibly malicious' if hit else 'not malicious'}", file=out)
    print(f"Total Positives: {report.positives}", file=out)
    print(f"Total Negatives: {report.negatives}", file=out)

    if report.matched:
        print("\nMalicious URLs:", file=out)
        for item in report.matched:
            print(item, file=out)
    else:
        print("\nNo malicious URLs found.", file=out)


def scan_file(bloom: BloomFilter, path: str, out: TextIO = sys.stdout, err: TextIO = sys.stderr) -> Optional[ScanReport]:
    """Scan every line of ``path`` and print the report; None if unreadable."""
    try:
        report = bloom.scan(read_lines(path))
    except OSError as exc:
        print(f"Unable to open file: {path} ({exc.strerror or exc})", file=err)
        return None
    print_report(report, out)
    return report


def show_menu(bloom: BloomFilter, out: TextIO) -> None:
    print("\n--- Bloom Filter Menu ---", file=out)
    print(f"Bitset size: {bloom.capacity}", file=out)
    print(f"Hash functions used: {', '.join(HASH_NAMES)}", file=out)
    print("1. Test a file", file=out)
    print("2. Test a website string", file=out)
    print("3. Exit", file=out)


def run_menu(
    bloom: BloomFilter,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
) -> None:
    """Loop over the menu until the user exits or input is exhausted."""
    while True:
        show_menu(bloom, out)
        try:
            raw = input_fn("Enter your choice: ")
        except EOFError:
            return

        try:
            choice = int(raw.strip())
        except ValueError:
            print(f"Invalid input. {CHOICE_ERROR}", file=out)
            continue

        try:
            if choice == 1:
                path = input_fn("Enter the file name to test: ").strip()
                scan_file(bloom, path, out, err)
            elif choice == 2:
                website = input_fn("Enter the website URL to test: ").strip()
                verdict = "possibly malicious." if bloom.contains(website) else "not malicious."
                print(f"The website {website} is {verdict}", file=out)
            elif choice == 3:
                return
            else:
                print(f"Invalid choice. {CHOICE_ERROR}", file=out)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    path = args[0] if args else config.KNOWN_BAD_PATH
    bloom = build_filter(path)
    try:
        run_menu(bloom)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
