"""
JSON encoding, decoding and pretty-printing for dynamically-typed values.

Provides three stateless operations:

- ``encode(x)`` renders a value as compact JSON text.
- ``decode(s)`` parses JSON text into values: dicts for objects, tuples for
  arrays, int or float for numbers.
- ``indent(s, prefix="", indent="\\t")`` pretty-prints JSON text.

Errors inside nested structures carry the path from the root value to the
failure point.
"""

import logging
from typing import Any

from ._config import DEFAULT_MAX_DEPTH
from ._config import EncodeConfig
from ._config import IndentConfig
from ._config import ParseConfig
from ._decoder import decode_document
from ._encoder import encode_value
from ._errors import CycleError
from ._errors import InternalInvariantError
from ._errors import JSONDecodeError
from ._errors import JSONEncodeError
from ._errors import NestingDepthError
from ._errors import NonFiniteFloatError
from ._errors import NonStringKeyError
from ._errors import UnencodableTypeError
from ._indent import indent_text
from ._parser import JsonNode
from ._parser import NodeKind
from ._parser import parse_document
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._quote import quote
from .values import HasAttrs
from .values import Marshaler
from .values import Struct

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def encode(x: Any, **kwargs: Any) -> str:
    """
    Serializes a value to compact JSON text.

    Keyword arguments configure the encoder (see EncodeConfig). Raises a
    JSONEncodeError subclass, annotated with the path to the offending
    value, when some part of x has no JSON encoding.
    """
    config = EncodeConfig(**kwargs)
    return encode_value(x, config)


def decode(x: str, **kwargs: Any) -> Any:
    """
    Parses JSON text into values with strict standards compliance.

    Keyword arguments configure the parser (see ParseConfig).
    """
    if not isinstance(x, str):
        raise TypeError(
            f"the JSON object must be str, not {type(x).__name__}"
        )

    config = ParseConfig(**kwargs)
    return decode_document(x, config)


def indent(
    s: str, /, *, prefix: str = "", indent: str = "\t", **kwargs: Any
) -> str:
    """
    Pretty-prints valid JSON text.

    Each array element and object member goes on its own line, beginning
    with prefix followed by one copy of indent per nesting level. Raises
    JSONDecodeError, naming the offending character, if s is not valid
    JSON.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    config = IndentConfig(prefix=prefix, indent=indent, **kwargs)
    return indent_text(s, config)


def parse(s: str, **kwargs: Any) -> JsonNode:
    """Parses JSON text into the intermediate tree without converting it."""
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )
    return parse_document(s, ParseConfig(**kwargs))


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CycleError",
    "EncodeConfig",
    "HasAttrs",
    "HotPathStats",
    "IndentConfig",
    "InternalInvariantError",
    "JSONDecodeError",
    "JSONEncodeError",
    "JsonNode",
    "Marshaler",
    "NestingDepthError",
    "NodeKind",
    "NonFiniteFloatError",
    "NonStringKeyError",
    "ParseConfig",
    "Struct",
    "UnencodableTypeError",
    "clear_hot_path_stats",
    "decode",
    "encode",
    "get_hot_path_stats",
    "indent",
    "parse",
    "quote",
]
