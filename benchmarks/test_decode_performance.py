"""
JSON decoding benchmarks comparing starjson against other libraries.

starjson validates strictly and builds an intermediate tree, so the
interesting number is its ratio to the stdlib, not to orjson.
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import starjson
from benchmarks.data_generators import DATA_TYPES
from benchmarks.data_generators import generate_test_data

DECODERS = [
    ("stdlib_json", json.loads),
    ("orjson", orjson.loads),
    ("ujson", ujson.loads),
    ("starjson", starjson.decode),
]


@pytest.mark.parametrize("data_type", DATA_TYPES)
@pytest.mark.parametrize("library,decode_func", DECODERS)
def test_decode(
    benchmark: Any,
    library: str,
    decode_func: Callable[[Any], Any],
    data_type: str,
) -> None:
    """Benchmarks decoding of each data shape."""
    benchmark.group = f"decode-{data_type}"
    test_data = generate_test_data(data_type)

    if library == "orjson":
        # orjson expects bytes for optimal performance
        result = benchmark(decode_func, test_data.encode("utf-8"))
    else:
        result = benchmark(decode_func, test_data)

    assert result is not None


@pytest.mark.benchmark(group="indent")
def test_indent(benchmark: Any) -> None:
    """Benchmarks pretty-printing a list of records."""
    test_data = generate_test_data("record_list")
    result = benchmark(starjson.indent, test_data)
    assert result.startswith("[\n\t{")
