"""List subcommand: scan a tree and report files sharing a name."""

from __future__ import annotations

import logging
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..report.filter import filter_groups
from ..report.grouping import FileGroup, FileRecord, group_by_name
from ..report.summary import Summary, summarize
from ..utils.walker import WalkPolicy, walk_with_policy

logger = logging.getLogger(__name__)

SEPARATOR = '-' * 40


@dataclass
class ListOptions:
    """Options for a scan and the report printed from it.

    Attributes:
        pattern: Regular expression a filename must end with to be scanned
        skip_pattern: Regular expression excluding filenames; empty skips nothing
        min_group_total_size: Hide groups whose total size in bytes is below this
        verbose: Echo the compiled patterns and include single-file groups
        use_bytes: Print sizes in bytes instead of megabytes
    """
    pattern: str = '.*'
    skip_pattern: str = ''
    min_group_total_size: int = 0
    verbose: bool = False
    use_bytes: bool = False


def to_mb(size_bytes: int) -> float:
    return size_bytes / 1024.0 / 1024.0


def format_size(size_bytes: int, use_bytes: bool = False, width: int = 0) -> str:
    """Format a byte count as megabytes with three decimals, or as raw bytes.

    Args:
        size_bytes: Size in bytes
        use_bytes: Show the integer byte count instead of megabytes
        width: Minimum field width, right aligned
    """
    text = str(size_bytes) if use_bytes else f"{to_mb(size_bytes):.3f}"
    return text.rjust(width)


def display_text(text: str) -> str:
    """Make a filesystem name printable, replacing bytes that are not valid UTF-8.

    Undecodable bytes reach Python as lone surrogates, which most streams refuse to encode.
    """
    return os.fsencode(text).decode('utf-8', 'replace')


def collect_file_records(root: Path, policy: WalkPolicy) -> list[FileRecord]:
    """Materialize a FileRecord for every regular file under root accepted by policy."""
    records = []
    for _, context in walk_with_policy(root, policy):
        records.append(FileRecord(context.name, context.stat.st_size, root / context.relative_path))
    return records


def print_summary(summary: Summary, elapsed_ms: int, use_bytes: bool = False,
                  output: TextIO | None = None) -> None:
    output = output if output is not None else sys.stdout
    unit = 'bytes' if use_bytes else 'MB'

    print(f"found {summary.total_records} files in {elapsed_ms} ms", file=output)
    print(file=output)
    print(f"total size for {summary.total_records} files is         "
          f"{format_size(summary.total_size, use_bytes)} {unit}", file=output)
    print(f"total size for duplicated files is {format_size(summary.duplicated_size, use_bytes)} {unit}",
          file=output)
    print(file=output)


def print_groups(groups: list[FileGroup], use_bytes: bool = False, output: TextIO | None = None) -> None:
    """Print each group header followed by its members, largest first."""
    output = output if output is not None else sys.stdout

    for group in groups:
        print(file=output)
        print(f"{display_text(group.name)} * {group.count}, totalSize: {format_size(group.total_size, use_bytes)}",
              file=output)
        print(SEPARATOR, file=output)
        for member in group.members:
            print(f"{format_size(member.size, use_bytes, width=6)}   {display_text(str(member.path))}", file=output)

    print(file=output)


def do_list(root: Path, options: ListOptions | None = None, output: TextIO | None = None) -> Summary:
    """Scan root, group files by name and print the report.

    Args:
        root: Directory to scan
        options: Patterns, thresholds and display flags
        output: Stream receiving the report, sys.stdout by default

    Returns:
        The summary computed over every scanned file

    Raises:
        re.error: A pattern is not a valid regular expression
        ValueError: min_group_total_size is negative
    """
    if options is None:
        options = ListOptions()
    output = output if output is not None else sys.stdout

    policy = WalkPolicy.from_strings(options.pattern, options.skip_pattern)
    if options.verbose:
        print(f"pattern regex is: {policy.pattern!r}", file=output)
        print(f"filter regex is: {policy.skip_pattern!r}", file=output)

    start = time.perf_counter()
    logger.info(f"Scanning {root}")
    records = collect_file_records(root, policy)
    grouping = group_by_name(records)
    summary = summarize(records, grouping)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info(f"Scanned {summary.total_records} files into {len(grouping)} groups in {elapsed_ms} ms")

    reported = filter_groups(grouping, options.verbose, options.min_group_total_size)

    print_summary(summary, elapsed_ms, options.use_bytes, output)
    print_groups(reported, options.use_bytes, output)

    return summary
