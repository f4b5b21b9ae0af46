import functools
import logging
import os
import re
import stat
from pathlib import Path
from typing import Generator, Iterator, NamedTuple

logger = logging.getLogger(__name__)


class FileContext:
    """Context object for a file or directory during traversal.

    To get the full path of an entry, join the root path passed to walk() with
    the relative_path property:
        full_path = root / context.relative_path

    Stat information is read lazily with lstat(), so symbolic links are reported
    as links and never as their targets.
    """
    def __init__(self, parent, name: str | None, path: Path | None = None, st: os.stat_result | None = None):
        self._parent: FileContext | None = parent
        self._name: str | None = name
        self._stat: os.stat_result | None = st
        self._path: Path | None = path

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def stat(self) -> os.stat_result:
        if self._stat is None:
            if self._path is None:
                raise LookupError("stat not available and path not provided")
            self._stat = self._path.lstat()
        return self._stat

    @functools.cached_property
    def relative_path(self) -> Path | None:
        """Get the relative path from the root context.

        Built recursively from the parent's cached result.
        """
        if self._name is None:
            # Root context with no name
            return None

        if self._parent is None:
            return Path(self._name)

        parent_path = self._parent.relative_path
        if parent_path is None:
            return Path(self._name)

        return parent_path / self._name

    def is_file(self):
        return stat.S_ISREG(self.stat.st_mode)

    def is_dir(self):
        return stat.S_ISDIR(self.stat.st_mode)


def walk(path: Path, parent: FileContext) -> Generator[tuple[Path, FileContext], None, None]:
    """Recursively traverse a directory in name order.

    Directories that cannot be listed and entries whose metadata cannot be read
    are logged and skipped.
    """
    try:
        children = sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Skipping unreadable directory {path}: {e}")
        return

    child: Path
    for child in children:
        try:
            st = child.lstat()
        except OSError as e:
            logger.warning(f"Skipping {child}: {e}")
            continue

        context = FileContext(parent, child.name, path=child, st=st)
        yield child, context

        if context.is_dir():
            yield from walk(child, context)


def compile_name_pattern(pattern: str) -> re.Pattern:
    """Compile a filename pattern anchored at the end of the name, ignoring case.

    The pattern is searched for, not matched from the start, so 'txt' selects
    every name ending in 'txt'.

    Raises:
        re.error: pattern is not a valid regular expression
    """
    return re.compile(pattern + '$', re.IGNORECASE)


class WalkPolicy(NamedTuple):
    """Policy controlling which files a traversal reports.

    Attributes:
        pattern: Compiled pattern a filename must match to be included
        skip_pattern: Compiled pattern excluding matching filenames, or None to skip nothing
    """
    pattern: re.Pattern
    skip_pattern: re.Pattern | None = None

    @classmethod
    def from_strings(cls, pattern: str = '.*', skip_pattern: str = '') -> 'WalkPolicy':
        """Build a policy from pattern strings. An empty skip pattern skips nothing."""
        return cls(
            compile_name_pattern(pattern),
            compile_name_pattern(skip_pattern) if skip_pattern else None
        )

    def accepts(self, name: str) -> bool:
        if self.skip_pattern is not None and self.skip_pattern.search(name):
            return False
        return self.pattern.search(name) is not None


def walk_with_policy(path: Path, policy: WalkPolicy) -> Iterator[tuple[Path, FileContext]]:
    """Walk a tree and yield only the regular files accepted by policy.

    Args:
        path: Root directory to walk
        policy: WalkPolicy instance selecting files by name

    Yields:
        Tuples of (absolute_path, file_context) for each accepted regular file

    Example:
        policy = WalkPolicy.from_strings(r'\\.jpe?g', skip_pattern='^thumb')
        for file_path, context in walk_with_policy(root, policy):
            print(file_path, context.stat.st_size)
    """
    root = FileContext(None, None, path)
    for file_path, file_context in walk(path, root):
        if file_context.is_file() and policy.accepts(file_context.name):
            yield file_path, file_context
