"""Tests for report module.

Test Files and Coverage:
========================

| Test File          | Test Classes                                   | Tested Constructs                   | Tested Functionalities                 |
|--------------------|------------------------------------------------|-------------------------------------|----------------------------------------|
| test_grouping.py   | FileRecordTest, FileGroupTest, CheckedSumTest  | FileRecord, FileGroup, checked_sum  | Validation, immutability, overflow     |
|                    | GroupByNameTest, GroupByNamePropertiesTest     | group_by_name()                     | Partition, ordering, tie-breaks        |
| test_summary.py    | SummarizeTest                                  | summarize(), Summary                | Total and duplicated size              |
| test_filter.py     | FilterGroupsTest                               | filter_groups(), is_group_reported()| Verbose and minimum size composition   |
"""
