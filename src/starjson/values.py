"""
Value-model contracts understood by the encoder.

Besides the built-in atoms and containers, the encoder recognises two
capabilities, both looked up on the value's type rather than the instance:

- ``Marshaler``: the value renders its own JSON text.
- ``HasAttrs``: the value exposes a fixed set of named attributes and is
  encoded as an object with the names in sorted order.

``Struct`` is a ready-made immutable ``HasAttrs`` value.
"""

from collections.abc import Iterable
from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class Marshaler(Protocol):
    """A value that defines its own JSON encoding."""

    def to_json(self) -> str | bytes: ...


@runtime_checkable
class HasAttrs(Protocol):
    """A value exposing a fixed, enumerable set of named attributes."""

    def attr_names(self) -> Iterable[str]: ...

    def attr(self, name: str) -> Any: ...


def is_marshaler(value: Any) -> bool:
    """Reports whether the value's type defines ``to_json``."""
    return callable(getattr(type(value), "to_json", None))


def has_attrs(value: Any) -> bool:
    """Reports whether the value's type implements the HasAttrs contract."""
    value_type = type(value)
    return callable(getattr(value_type, "attr_names", None)) and callable(
        getattr(value_type, "attr", None)
    )


class Struct:
    """
    Immutable record of named fields.

        >>> s = Struct(y="two", x=1)
        >>> s.x
        1
        >>> s
        struct(x=1, y='two')

    Field order is irrelevant: two structs with the same fields compare
    equal, and the encoder always emits the fields sorted by name.
    """

    __slots__ = ("_fields",)

    def __init__(self, **fields: Any) -> None:
        object.__setattr__(self, "_fields", dict(fields))

    def __getattr__(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"struct has no .{name} attribute") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot set .{name}: struct is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete .{name}: struct is immutable")

    def attr_names(self) -> list[str]:
        return list(self._fields)

    def attr(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"struct has no .{name} attribute") from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Struct):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._fields.items())))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in sorted(self._fields.items())
        )
        return f"struct({fields})"
