"""
Test data generators for JSON benchmarks.

Builds Python values of different shapes and renders them as JSON text:
- Flat records and long record lists
- Deep nesting within the default depth limit
- Strings that force the escaping slow path
"""

import json
import random
import string
from typing import Any

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPABLE = ['"', "\\", "\n", "\t", "\x01", " ", "\U0001f600"]

DATA_TYPES = [
    "small_object",
    "record_list",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_value(data_type: str) -> Any:
    """Builds a reproducible Python value of the named shape."""
    generators = {
        "small_object": _small_object,
        "record_list": _record_list,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def generate_test_data(data_type: str) -> str:
    """Renders the named value shape as JSON text."""
    return json.dumps(generate_test_value(data_type), ensure_ascii=False)


def _small_object(rng: random.Random) -> dict[str, Any]:
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", "ops"],
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _record_list(rng: random.Random) -> list[dict[str, Any]]:
    return [
        {
            "id": f"txn_{i:06d}",
            "amount": round(rng.uniform(1.0, 1000.0), 2),
            "count": rng.randint(-(2**40), 2**40),
            "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
            "settled": rng.choice([True, False, None]),
            "memo": _random_string(rng, 20),
        }
        for i in range(300)
    ]


def _mixed_array(rng: random.Random) -> list[Any]:
    choices = [
        lambda: rng.randint(-1000, 1000),
        lambda: round(rng.uniform(-100.0, 100.0), 3),
        lambda: _random_string(rng, rng.randint(5, 30)),
        lambda: rng.choice([True, False]),
        lambda: None,
        lambda: [rng.random(), _random_string(rng, 4)],
    ]
    return [rng.choice(choices)() for _ in range(1000)]


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    def create(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}
        return {
            "level": depth,
            "items": [create(depth - 1) for _ in range(3)],
            "next": create(depth - 1),
        }

    return create(7)


def _string_heavy(rng: random.Random) -> dict[str, Any]:
    def escaped_string() -> str:
        return "".join(
            rng.choice(_ESCAPABLE)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + " ")
            for _ in range(60)
        )

    return {
        "plain": [_random_string(rng, 60) for _ in range(100)],
        "escaped": [escaped_string() for _ in range(100)],
        "accented": ["caf\xe9 na\xefve r\xe9sum\xe9" * 4 for _ in range(50)],
    }


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
