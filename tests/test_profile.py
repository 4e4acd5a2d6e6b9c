"""
Profiling hook tests.

Profiling is only active when STARJSON_PROFILE is set at import time, so
these tests check the public hooks behave the same either way.
"""

import starjson


def test_hot_path_stats_hooks() -> None:
    """
    Validates statistics can be read and cleared around normal use.
    """
    starjson.clear_hot_path_stats()
    starjson.decode('{"a": [1, "b"]}')

    stats = starjson.get_hot_path_stats()
    assert isinstance(stats, dict)
    for name, entry in stats.items():
        assert isinstance(entry, starjson.HotPathStats)
        assert entry.function_name == name
        assert entry.call_count >= 1

    starjson.clear_hot_path_stats()
    assert starjson.get_hot_path_stats() == {}


def test_hot_path_stats_record_call() -> None:
    """
    Validates accumulation of call counts, durations and characters.
    """
    stats = starjson.HotPathStats("scan_string")
    stats.record_call(100, 5)
    stats.record_call(50)

    assert stats.call_count == 2
    assert stats.total_time_ns == 150
    assert stats.chars_processed == 5
    assert stats.mean_time_ns == 75.0
    assert starjson.HotPathStats("idle").mean_time_ns == 0.0
