"""Report module for name-based duplicate grouping.

This package contains:
- grouping: FileRecord, FileGroup and the filename grouping engine
- summary: Summary and the aggregate size computation
- filter: Predicates selecting which groups are reported
"""
