"""Tests for command implementation modules.

Test Files and Coverage:
========================

| Test File                | Test Classes            | Tested Constructs                       | Tested Functionalities                |
|--------------------------|-------------------------|-----------------------------------------|---------------------------------------|
| test_list_duplicates.py  | FormatSizeTest          | format_size(), to_mb()                  | Megabyte and byte formatting          |
|                          | CollectFileRecordsTest  | collect_file_records()                  | Record fields, pattern filtering      |
|                          | DisplayTextTest         | display_text()                          | Names that are not valid UTF-8        |
|                          | PrintReportTest         | print_summary(), print_groups()         | Report layout                         |
|                          | DoListTest              | do_list(), ListOptions                  | End-to-end scans, verbose, thresholds |
"""
