"""Profiling support for filehasher using cProfile.

When the FILEHASHER_PROFILE environment variable is set to a directory path,
the profiled entry point saves its statistics below that directory in a
session subdirectory named after the start time and PID.
"""
import cProfile
import functools
import itertools
import os
import time
from pathlib import Path
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec('P')
T = TypeVar('T')

PROFILE_ENVIRONMENT_VARIABLE = 'FILEHASHER_PROFILE'

# Global counter for generating unique sequence numbers within the same process
_profile_counter = itertools.count()


def get_profile_dir() -> Path | None:
    """Get the profile directory from the environment.

    Returns:
        Path to a session subdirectory {timestamp_ms}_{pid} below FILEHASHER_PROFILE,
        or None if the variable is not set.
    """
    profile_path = os.environ.get(PROFILE_ENVIRONMENT_VARIABLE)
    if profile_path:
        timestamp_ms = int(time.time() * 1000)
        return Path(profile_path) / f"{timestamp_ms}_{os.getpid()}"
    return None


def generate_profile_filename(prefix: str = "profile") -> str:
    """Generate a unique profile filename like "main_54398_0.prof"."""
    current_pid = os.getpid()
    seq = next(_profile_counter)

    return f"{prefix}_{current_pid}_{seq}.prof"


def profile_function(func: Callable[P, T], prefix: str = "profile") -> Callable[P, T]:
    """Wrap func so that it is profiled if FILEHASHER_PROFILE is set."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        profile_dir = get_profile_dir()

        if profile_dir is None:
            return func(*args, **kwargs)

        profile_dir.mkdir(parents=True, exist_ok=True)
        profile_file = profile_dir / generate_profile_filename(prefix)

        profiler = cProfile.Profile()
        try:
            profiler.enable()
            return func(*args, **kwargs)
        finally:
            profiler.disable()
            profiler.dump_stats(str(profile_file))

    return wrapper


def profile_main(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator for the main entry point, profiling with the "main" prefix."""
    return profile_function(func, prefix="main")
