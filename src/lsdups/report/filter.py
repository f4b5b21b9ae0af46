"""Selection of the groups shown in a report."""

from typing import Iterable

from .grouping import FileGroup


def is_group_reported(group: FileGroup, verbose: bool = False, min_group_total_size: int = 0) -> bool:
    """Check whether a group belongs in the report.

    Single-file groups only appear in verbose mode. The size threshold applies
    in every mode, so a small duplicate group stays hidden even when verbose.
    """
    return (verbose or len(group.members) >= 2) and group.total_size >= min_group_total_size


def filter_groups(grouping: Iterable[FileGroup], verbose: bool = False,
                  min_group_total_size: int = 0) -> list[FileGroup]:
    """Return the reported groups in their original order.

    Args:
        grouping: Ranked groups from group_by_name
        verbose: Include groups with a single member
        min_group_total_size: Minimum group total size in bytes; 0 disables the threshold

    Raises:
        ValueError: min_group_total_size is negative
    """
    if min_group_total_size < 0:
        raise ValueError(f"min_group_total_size must be non-negative, got {min_group_total_size}")

    return [g for g in grouping if is_group_reported(g, verbose, min_group_total_size)]
