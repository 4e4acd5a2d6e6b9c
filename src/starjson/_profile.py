"""
Opt-in hot-path profiling for the encoder, parser and indenter.

Set ``STARJSON_PROFILE`` to any value other than ``""`` or ``"0"`` before
importing starjson to record, per profiled section, how often it ran, how
long it took and how many characters it was handed. Only ProfileContext
changes with the setting; when profiling is off it does nothing and the
statistics table stays empty.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and os.environ.get(
    "STARJSON_PROFILE", "0"
) not in ("", "0")


@dataclass
class HotPathStats:
    """Accumulated timings of one profiled section."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count


_hot_path_stats: dict[str, HotPathStats] = {}


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics, keyed by section name."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times the enclosed block and adds it to the section's stats."""

        __slots__ = ("name", "chars", "start_ns")

        def __init__(self, name: str, chars: int = 0) -> None:
            self.name = name
            self.chars = chars
            self.start_ns = 0

        def __enter__(self) -> "ProfileContext":
            self.start_ns = time.perf_counter_ns()
            return self

        def __exit__(self, *exc_info: Any) -> None:
            duration = time.perf_counter_ns() - self.start_ns
            stats = _hot_path_stats.get(self.name)
            if stats is None:
                stats = _hot_path_stats[self.name] = HotPathStats(self.name)
            stats.record_call(duration, self.chars)

else:

    class ProfileContext:  # type: ignore[no-redef]
        __slots__ = ()

        def __init__(self, name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, *exc_info: Any) -> None:
            pass
