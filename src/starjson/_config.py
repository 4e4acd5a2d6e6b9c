"""Immutable configuration objects built from entry-point keyword arguments."""

from dataclasses import dataclass

# Each level of nesting costs a couple of interpreter frames in the
# recursive passes, so the default stays well inside the recursion limit.
DEFAULT_MAX_DEPTH = 256


def _check_max_depth(max_depth: int) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError("max_depth must be an integer")
    if max_depth < 1:
        raise ValueError("max_depth must be positive")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    ensure_ascii escapes every non-ASCII character; check_circular turns on
    cycle detection for containers; max_depth bounds container nesting.
    """

    ensure_ascii: bool = False
    check_circular: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.check_circular, bool):
            raise TypeError("check_circular must be a boolean")
        _check_max_depth(self.max_depth)


@dataclass(frozen=True)
class ParseConfig:
    """Configures JSON parsing; max_depth bounds array and object nesting."""

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        _check_max_depth(self.max_depth)


@dataclass(frozen=True)
class IndentConfig:
    """
    Configures pretty-printing of JSON text.

    Every line after the first starts with prefix followed by one copy of
    indent per nesting level.
    """

    prefix: str = ""
    indent: str = "\t"
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str):
            raise TypeError(
                f"prefix must be a string, not {type(self.prefix).__name__}"
            )
        if not isinstance(self.indent, str):
            raise TypeError(
                f"indent must be a string, not {type(self.indent).__name__}"
            )
        _check_max_depth(self.max_depth)

    @property
    def parse_config(self) -> ParseConfig:
        return ParseConfig(max_depth=self.max_depth)
