"""
Decoder: converts the intermediate JSON tree into values.

Objects become dicts (source key order, last duplicate wins), arrays become
tuples, and numbers become int when they are integer literals inside the
signed 64-bit range, float otherwise. Integer literals beyond that range
are therefore approximated by the nearest float.
"""

import math
from typing import Any

from ._config import ParseConfig
from ._errors import JSONDecodeError
from ._parser import JsonNode
from ._parser import NodeKind
from ._parser import parse_document
from ._profile import ProfileContext

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
# No 64-bit integer has more digits than this
_INT64_MAX_DIGITS = 19


def _is_integer_literal(text: str) -> bool:
    return not any(c in ".eE" for c in text)


def convert_number(node: JsonNode, doc: str) -> int | float:
    """Applies the numeric policy to a NUMBER node."""
    text = node.raw
    digits = len(text.lstrip("-"))
    if _is_integer_literal(text) and digits <= _INT64_MAX_DIGITS:
        n = int(text)
        if _INT64_MIN <= n <= _INT64_MAX:
            return n

    value = float(text)
    if math.isinf(value):
        raise JSONDecodeError(f"number {text} overflows float", doc, node.pos)
    return value


def to_value(node: JsonNode, doc: str) -> Any:
    """Converts a tree node, and everything below it, into a value."""
    kind = node.kind

    if kind is NodeKind.OBJECT:
        result: dict[str, Any] = {}
        for key, child in node.value:
            try:
                result[key.value] = to_value(child, doc)
            except JSONDecodeError as err:
                err.add_context(f"in object field .{key.value}")
                raise
        return result
    elif kind is NodeKind.ARRAY:
        items = []
        for i, child in enumerate(node.value):
            try:
                items.append(to_value(child, doc))
            except JSONDecodeError as err:
                err.add_context(f"at array index {i}")
                raise
        return tuple(items)
    elif kind is NodeKind.NUMBER:
        return convert_number(node, doc)
    else:
        return node.value


def decode_document(text: str, config: ParseConfig) -> Any:
    """Parses JSON text and converts it into a value."""
    with ProfileContext("decode", len(text)):
        tree = parse_document(text, config)
        return to_value(tree, text)
