import os
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]


SETTINGS_FILE_NAME = '.lsdups.toml'
SETTINGS_ENVIRONMENT_VARIABLE = 'LSDUPS_CONFIG'

# Settings key constants
SETTING_PATTERN = 'scan.pattern'
SETTING_SKIP_PATTERN = 'scan.filter'
SETTING_MIN_SIZE = 'report.size'
SETTING_VERBOSE = 'report.verbose'
SETTING_USE_BYTES = 'report.bytes'
SETTING_LOG_PATH = 'logging.path'
SETTING_LOG_LEVEL = 'logging.level'


class ScanSettings:
    """Read-only view of an lsdups TOML settings file.

    A missing file behaves like an empty one, so every get() call returns its default.
    Values are not validated here; callers interpret them.

    Example:
        settings = ScanSettings(Path('.lsdups.toml'))
        pattern = settings.get(SETTING_PATTERN, '.*')
    """

    def __init__(self, settings_file: Path | None = None):
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None and settings_file.is_file():
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting value by dot-separated key path.

        Returns default if any component of the path is missing or an
        intermediate value is not a table.

        Examples:
            >>> settings.get('scan.pattern', '.*')
            '\\\\.txt'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


def find_settings_file(root: Path, explicit: str | os.PathLike | None = None) -> Path | None:
    """Locate the settings file to use for a scan of root.

    An explicit path wins, then the LSDUPS_CONFIG environment variable, then
    a .lsdups.toml file directly inside root.
    """
    if explicit is not None:
        return Path(explicit)

    from_environment = os.environ.get(SETTINGS_ENVIRONMENT_VARIABLE)
    if from_environment:
        return Path(from_environment)

    candidate = root / SETTINGS_FILE_NAME
    if candidate.is_file():
        return candidate
    return None
