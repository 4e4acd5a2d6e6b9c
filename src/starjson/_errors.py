"""
Exception taxonomy shared by the encoder, decoder and indenter.

Encode and decode failures raised inside nested containers are annotated
in place: every enclosing frame prepends a path fragment to the same
exception object and re-raises it, so the final message traces the path
from the root value down to the failure point.
"""

from typing import TypeAlias

Position: TypeAlias = int


class JSONDecodeError(ValueError):
    """
    Reports malformed JSON text with position and context information.

    Carries the character offset, line/column numbers and UTF-8 byte offset
    of the failure, plus any path fragments added while converting the
    parsed tree into values.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.context: list[str] = []

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1
        self.byte_offset = len(doc[:pos].encode("utf-8", "surrogatepass"))

        super().__init__(self._format())

    def _format(self) -> str:
        text = ", ".join([*self.context, self.msg])
        return f"{text} at line {self.lineno}, column {self.colno}"

    def add_context(self, fragment: str) -> None:
        """Prepends a path fragment such as ``at array index 3``."""
        self.context.insert(0, fragment)
        self.args = (self._format(),)


class JSONEncodeError(ValueError):
    """
    Base class for values that cannot be rendered as JSON.

    ``reason`` describes the failure at the innermost value; ``path`` holds
    the fragments leading to it, outermost first.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        self.path: list[str] = []
        super().__init__(reason)

    def add_context(self, fragment: str) -> None:
        """Prepends a path fragment such as ``in dict key 'x'``."""
        self.path.insert(0, fragment)
        self.args = (": ".join([*self.path, self.reason]),)


class UnencodableTypeError(JSONEncodeError, TypeError):
    """Value matches none of the encodable capabilities."""


class NonStringKeyError(JSONEncodeError, TypeError):
    """Mapping key is not a string."""


class NonFiniteFloatError(JSONEncodeError):
    """NaN or an infinity was passed to the encoder."""


class CycleError(JSONEncodeError):
    """A container was reached again while it was still being encoded."""


class NestingDepthError(JSONEncodeError):
    """Containers are nested deeper than the configured limit."""


class InternalInvariantError(RuntimeError):
    """
    A value broke its own container contract.

    Raised when a mapping yields a key it cannot then look up, or an
    attribute object lists a name it cannot fetch. This is a defect in the
    value's implementation, not bad input, and is deliberately not a
    JSONEncodeError.
    """
