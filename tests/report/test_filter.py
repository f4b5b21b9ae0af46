"""Tests for filter_groups and is_group_reported."""
import itertools
import unittest
from pathlib import Path

from lsdups.report.filter import filter_groups, is_group_reported
from lsdups.report.grouping import FileRecord, group_by_name


class FilterGroupsTest(unittest.TestCase):
    """Tests for the verbose and minimum size filters."""

    def setUp(self):
        records = [
            FileRecord('a.txt', 100, Path('/x/a.txt')),
            FileRecord('a.txt', 200, Path('/y/a.txt')),
            FileRecord('b.txt', 50, Path('/x/b.txt')),
        ]
        self.grouping = group_by_name(records)

    def names(self, groups):
        return [g.name for g in groups]

    def test_default_hides_single_files(self):
        self.assertEqual(['a.txt'], self.names(filter_groups(self.grouping)))

    def test_verbose_shows_single_files(self):
        self.assertEqual(['a.txt', 'b.txt'], self.names(filter_groups(self.grouping, verbose=True)))

    def test_threshold_applies_in_verbose_mode(self):
        result = filter_groups(self.grouping, verbose=True, min_group_total_size=100)

        self.assertEqual(['a.txt'], self.names(result))

    def test_threshold_hides_small_duplicates(self):
        self.assertEqual([], filter_groups(self.grouping, verbose=True, min_group_total_size=301))

    def test_threshold_is_inclusive(self):
        self.assertEqual(['a.txt'], self.names(filter_groups(self.grouping, min_group_total_size=300)))

    def test_large_single_file_needs_verbose(self):
        grouping = group_by_name([FileRecord('huge.iso', 10 ** 9, Path('/huge.iso'))])

        self.assertEqual([], filter_groups(grouping, verbose=False, min_group_total_size=0))
        self.assertEqual(['huge.iso'], self.names(filter_groups(grouping, verbose=True)))

    def test_preserves_order_and_input(self):
        snapshot = list(self.grouping)

        filter_groups(self.grouping, verbose=True)

        self.assertEqual(snapshot, self.grouping)

    def test_negative_threshold_raises(self):
        with self.assertRaises(ValueError):
            filter_groups(self.grouping, min_group_total_size=-1)

    def test_empty_grouping(self):
        self.assertEqual([], filter_groups([], verbose=True))

    def test_predicate_matches_every_combination(self):
        """Kept groups are exactly those satisfying the predicate."""
        records = [FileRecord(f'n{i % 7}', i * 13 % 97, Path(f'/{i}')) for i in range(60)]
        records += [FileRecord(f'solo{i}', i * 60, Path(f'/solo{i}')) for i in range(5)]
        grouping = group_by_name(records)

        for verbose, threshold in itertools.product((False, True), (0, 1, 50, 100, 200, 10 ** 6)):
            kept = filter_groups(grouping, verbose, threshold)
            expected = [g for g in grouping
                        if (verbose or len(g.members) >= 2) and g.total_size >= threshold]
            self.assertEqual(expected, kept)
            self.assertEqual(kept, [g for g in grouping if is_group_reported(g, verbose, threshold)])


if __name__ == '__main__':
    unittest.main()
