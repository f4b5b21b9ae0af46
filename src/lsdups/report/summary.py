"""Aggregate sizes over a scan."""

from dataclasses import dataclass
from typing import Sequence

from .grouping import FileGroup, FileRecord, checked_sum


@dataclass(frozen=True)
class Summary:
    """Totals reported ahead of the group listing.

    Attributes:
        total_records: Number of files scanned
        total_size: Sum of all file sizes, computed from the records themselves
        duplicated_size: Sum of total_size over groups with two or more members
    """
    total_records: int = 0
    total_size: int = 0
    duplicated_size: int = 0


def summarize(records: Sequence[FileRecord], grouping: Sequence[FileGroup]) -> Summary:
    return Summary(
        total_records=len(records),
        total_size=checked_sum(r.size for r in records),
        duplicated_size=checked_sum(g.total_size for g in grouping if len(g.members) >= 2),
    )
