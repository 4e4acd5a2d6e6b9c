"""
Encoder: renders values as compact JSON text.

Values are matched against an ordered list of capabilities and the first
match decides the encoding:

1. Marshaler (``to_json`` on the value's type): output copied verbatim
2. None, bool, int, float
3. str
4. Mapping: JSON object, in the mapping's iteration order
5. any other iterable: JSON array
6. attribute object (HasAttrs, dataclass, SimpleNamespace): JSON object
   with the attribute names sorted
7. anything else: UnencodableTypeError
"""

import dataclasses
import logging
import math
import sys
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any

from ._config import EncodeConfig
from ._errors import CycleError
from ._errors import InternalInvariantError
from ._errors import JSONEncodeError
from ._errors import NestingDepthError
from ._errors import NonFiniteFloatError
from ._errors import NonStringKeyError
from ._errors import UnencodableTypeError
from ._profile import ProfileContext
from ._quote import quote
from .values import has_attrs
from .values import is_marshaler

logger = logging.getLogger(__name__)

# Exact built-in types never carry a to_json method, so they skip the
# Marshaler lookup.
_BUILTIN_TYPES = frozenset(
    {type(None), bool, int, float, str, list, tuple, dict}
)

# Binary data is iterable but has no JSON array meaning
_BINARY_TYPES = (bytes, bytearray, memoryview)


def _type_name(value: Any) -> str:
    return type(value).__name__


def format_int(n: int) -> str:
    """
    Returns the exact decimal digits of n.

    Integers too long for the interpreter's int-to-str digit limit are split
    into halves by powers of ten and converted piecewise.
    """
    limit = sys.get_int_max_str_digits()
    # 3 bits per digit under-counts, so this stays below the limit
    if limit == 0 or n.bit_length() < 3 * limit:
        return int.__repr__(n)
    if n < 0:
        return "-" + format_int(-n)

    digits = int(n.bit_length() * math.log10(2)) + 1
    half = digits // 2
    high, low = divmod(n, 10**half)
    if not high:
        return format_int(low)
    return format_int(high) + format_int(low).zfill(half)


def format_float(x: float) -> str:
    """Returns the shortest text that reads back as the same finite float."""
    if not math.isfinite(x):
        raise NonFiniteFloatError(f"cannot encode non-finite float {x!r}")
    return float.__repr__(x)


def _attribute_source(
    value: Any,
) -> tuple[list[str], Callable[[str], Any]] | None:
    """Returns the attribute names and a fetch function, or None."""
    if has_attrs(value):
        return list(value.attr_names()), value.attr
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [field.name for field in dataclasses.fields(value)]
        return names, lambda name: getattr(value, name)
    if isinstance(value, SimpleNamespace):
        namespace = vars(value)
        return list(namespace), namespace.__getitem__
    return None


class JsonEncoder:
    """
    Emits one value into an accumulating buffer.

    Tracks container nesting depth and, when check_circular is set, the
    identities of the containers currently being emitted.
    """

    def __init__(self, config: EncodeConfig):
        self.config = config
        self.chunks: list[str] = []
        self.depth = 0
        self._active: set[int] = set()

    def encode(self, value: Any) -> str:
        with ProfileContext("encode"):
            self.emit(value)
            return "".join(self.chunks)

    def _quote(self, s: str) -> str:
        return quote(s, self.config.ensure_ascii)

    @contextmanager
    def _container(self, value: Any) -> Iterator[None]:
        if self.depth >= self.config.max_depth:
            raise NestingDepthError(
                f"nesting depth exceeds {self.config.max_depth}"
            )
        marker = id(value)
        if self.config.check_circular:
            if marker in self._active:
                raise CycleError("cycle in JSON structure")
            self._active.add(marker)

        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
            self._active.discard(marker)

    def emit(self, value: Any) -> None:
        """Appends the JSON encoding of value to the buffer."""
        if type(value) not in _BUILTIN_TYPES and is_marshaler(value):
            self._emit_marshaled(value)
        elif value is None:
            self.chunks.append("null")
        elif value is True:
            self.chunks.append("true")
        elif value is False:
            self.chunks.append("false")
        elif isinstance(value, int):
            self.chunks.append(format_int(value))
        elif isinstance(value, float):
            self.chunks.append(format_float(value))
        elif isinstance(value, str):
            self.chunks.append(self._quote(value))
        elif isinstance(value, Mapping):
            self._emit_mapping(value)
        elif isinstance(value, Iterable) and not isinstance(
            value, _BINARY_TYPES
        ):
            self._emit_sequence(value)
        else:
            source = _attribute_source(value)
            if source is None:
                raise UnencodableTypeError(
                    f"cannot encode {_type_name(value)} as JSON"
                )
            self._emit_attributes(value, *source)

    def _emit_marshaled(self, value: Any) -> None:
        data = value.to_json()
        if isinstance(data, bytes | bytearray):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise JSONEncodeError(
                    f"{_type_name(value)}.to_json returned invalid UTF-8"
                ) from e
        if not isinstance(data, str):
            raise JSONEncodeError(
                f"{_type_name(value)}.to_json returned "
                f"{_type_name(data)}, want str or bytes"
            )
        self.chunks.append(data)

    def _emit_mapping(self, mapping: Mapping[Any, Any]) -> None:
        with self._container(mapping):
            self.chunks.append("{")
            for i, key in enumerate(mapping):
                if i > 0:
                    self.chunks.append(",")
                if not isinstance(key, str):
                    raise NonStringKeyError(
                        f"{_type_name(mapping)} has {_type_name(key)} key, "
                        "want string"
                    )
                try:
                    value = mapping[key]
                except KeyError as e:
                    logger.error(
                        "mapping %s yields key %r but value lookup fails",
                        _type_name(mapping),
                        key,
                    )
                    raise InternalInvariantError(
                        f"internal error: mapping {_type_name(mapping)} has "
                        f"{key!r} among keys but value lookup fails"
                    ) from e

                self.chunks.append(self._quote(key))
                self.chunks.append(":")
                try:
                    self.emit(value)
                except JSONEncodeError as err:
                    err.add_context(f"in {_type_name(mapping)} key {key!r}")
                    raise
            self.chunks.append("}")

    def _emit_sequence(self, sequence: Iterable[Any]) -> None:
        with self._container(sequence):
            self.chunks.append("[")
            for i, element in enumerate(sequence):
                if i > 0:
                    self.chunks.append(",")
                try:
                    self.emit(element)
                except JSONEncodeError as err:
                    err.add_context(f"at {_type_name(sequence)} index {i}")
                    raise
            self.chunks.append("]")

    def _emit_attributes(
        self, obj: Any, names: list[str], fetch: Callable[[str], Any]
    ) -> None:
        with self._container(obj):
            self.chunks.append("{")
            for i, name in enumerate(sorted(names)):
                try:
                    value = fetch(name)
                except (AttributeError, KeyError) as e:
                    logger.error(
                        "%s lists attribute %r but has no .%s field",
                        _type_name(obj),
                        name,
                        name,
                    )
                    raise InternalInvariantError(
                        f"internal error: {_type_name(obj)} lists {name!r} "
                        f"among its attributes but has no .{name} field"
                    ) from e

                if i > 0:
                    self.chunks.append(",")
                self.chunks.append(self._quote(name))
                self.chunks.append(":")
                try:
                    self.emit(value)
                except JSONEncodeError as err:
                    err.add_context(f"in field .{name}")
                    raise
            self.chunks.append("}")


def encode_value(value: Any, config: EncodeConfig) -> str:
    """Encodes a value as compact JSON text."""
    return JsonEncoder(config).encode(value)
