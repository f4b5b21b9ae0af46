"""Optional cProfile capture around the lsdups entry point.

Set LSDUPS_PROFILE to a directory and every run writes its statistics to
<directory>/lsdups_<start time in ms>_<pid>.prof, readable with pstats.
"""
import cProfile
import functools
import os
import time
from pathlib import Path

PROFILE_ENVIRONMENT_VARIABLE = 'LSDUPS_PROFILE'


def profile_output_path() -> Path | None:
    directory = os.environ.get(PROFILE_ENVIRONMENT_VARIABLE)
    if not directory:
        return None
    return Path(directory) / f"lsdups_{int(time.time() * 1000)}_{os.getpid()}.prof"


def profile_main(func):
    """Run func under cProfile when LSDUPS_PROFILE is set.

    Statistics are written even if func exits through SystemExit or an exception.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        output_path = profile_output_path()
        if output_path is None:
            return func(*args, **kwargs)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        profiler = cProfile.Profile()
        try:
            return profiler.runcall(func, *args, **kwargs)
        finally:
            profiler.dump_stats(str(output_path))

    return wrapper
