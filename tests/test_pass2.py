"""
JSON specification pass2 test from json.org test suite.

Validates parsing of deeply nested array structure to ensure
parser can handle significant nesting levels.
"""

import pytest

import starjson

# from https://json.org/JSON_checker/test/pass2.json
JSON = r"""
[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]
"""


def test_parse() -> None:
    """
    Validates JSON parsing and round-trip encoding for deeply nested arrays.

    Tests the parser's handling of 19 nesting levels and proper
    reconstruction through encoding.
    """
    res = starjson.decode(JSON)

    out = starjson.encode(res)
    assert out == JSON.strip()
    assert res == starjson.decode(out)


def test_nesting_limit() -> None:
    """
    Validates the same document against a nesting limit it exceeds.
    """
    with pytest.raises(starjson.JSONDecodeError) as exc_info:
        starjson.decode(JSON, max_depth=18)
    assert exc_info.value.msg == "Exceeded maximum nesting depth of 18"

    assert starjson.decode(JSON, max_depth=19) is not None
