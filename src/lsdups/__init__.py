from .report.grouping import FileRecord, FileGroup, group_by_name
from .report.summary import Summary, summarize
from .report.filter import filter_groups, is_group_reported
from .commands.list_duplicates import ListOptions, collect_file_records, do_list
from .utils.walker import WalkPolicy
