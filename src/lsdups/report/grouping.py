"""FileRecord, FileGroup and grouping of file records by filename."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

MAX_SIZE = 2 ** 64 - 1


def checked_sum(sizes: Iterable[int]) -> int:
    """Sum byte sizes, refusing to exceed the unsigned 64-bit range.

    Raises:
        OverflowError: The running total exceeds MAX_SIZE
    """
    total = 0
    for size in sizes:
        total += size
        if total > MAX_SIZE:
            raise OverflowError(f"size total exceeds {MAX_SIZE} bytes")
    return total


@dataclass(frozen=True)
class FileRecord:
    """A regular file discovered during a scan.

    Attributes:
        name: Filename component only, used as the grouping key
        size: Size in bytes, within the unsigned 64-bit range
        path: Full path to the file as it was discovered
    """
    name: str
    size: int
    path: Path

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"size must be an integer, got {self.size!r}")
        if not 0 <= self.size <= MAX_SIZE:
            raise ValueError(f"size out of range: {self.size}")


@dataclass(frozen=True)
class FileGroup:
    """All records sharing one filename.

    Attributes:
        name: The shared filename
        total_size: Sum of member sizes
        members: Records ordered by size descending; equal sizes keep discovery order
    """
    name: str
    total_size: int
    members: tuple[FileRecord, ...]

    def __post_init__(self):
        if not self.members:
            raise ValueError(f"group {self.name!r} has no members")

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def is_duplicate(self) -> bool:
        """Whether more than one file carries this name."""
        return len(self.members) >= 2


def group_by_name(records: Sequence[FileRecord]) -> list[FileGroup]:
    """Partition records by exact filename and rank the resulting groups.

    Names are compared case-sensitively. Groups are ordered by total size
    descending; groups with equal totals keep the order in which their name
    first appeared in ``records``. Python's sort is stable, which provides
    both tie-breaks.

    Args:
        records: File records in discovery order, in any size order

    Returns:
        Groups ordered by total size descending. Empty when records is empty.
    """
    buckets: dict[str, list[FileRecord]] = {}
    for record in records:
        buckets.setdefault(record.name, []).append(record)

    groups = []
    for name, members in buckets.items():
        members.sort(key=lambda r: r.size, reverse=True)
        groups.append(FileGroup(name, checked_sum(r.size for r in members), tuple(members)))

    # reverse=True keeps the relative order of equal keys
    groups.sort(key=lambda g: g.total_size, reverse=True)
    return groups
