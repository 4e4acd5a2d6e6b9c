"""
Indenter: pretty-prints JSON text.

The text is parsed first, so invalid input fails before anything is
written. Each array element and object member then starts on a new line
made of the prefix followed by one indent unit per nesting level; the first
line carries neither. Number, string and literal tokens are copied exactly
as they appear in the input, and whitespace after the top-level value is
preserved.
"""

from ._config import IndentConfig
from ._parser import WHITESPACE
from ._parser import JsonNode
from ._parser import NodeKind
from ._parser import parse_document
from ._profile import ProfileContext


class JsonIndenter:
    """Writes a parsed tree back out in indented form."""

    def __init__(self, config: IndentConfig):
        self.prefix = config.prefix
        self.unit = config.indent
        self.chunks: list[str] = []

    def newline(self, depth: int) -> None:
        self.chunks.append("\n")
        self.chunks.append(self.prefix)
        self.chunks.append(self.unit * depth)

    def write(self, node: JsonNode, depth: int = 0) -> None:
        kind = node.kind

        if kind is NodeKind.ARRAY:
            if not node.value:
                self.chunks.append("[]")
                return
            self.chunks.append("[")
            for i, child in enumerate(node.value):
                if i > 0:
                    self.chunks.append(",")
                self.newline(depth + 1)
                self.write(child, depth + 1)
            self.newline(depth)
            self.chunks.append("]")
        elif kind is NodeKind.OBJECT:
            if not node.value:
                self.chunks.append("{}")
                return
            self.chunks.append("{")
            for i, (key, child) in enumerate(node.value):
                if i > 0:
                    self.chunks.append(",")
                self.newline(depth + 1)
                self.chunks.append(key.raw)
                self.chunks.append(": ")
                self.write(child, depth + 1)
            self.newline(depth)
            self.chunks.append("}")
        else:
            self.chunks.append(node.raw)


def indent_text(text: str, config: IndentConfig) -> str:
    """Validates JSON text and returns it re-emitted in indented form."""
    with ProfileContext("indent", len(text)):
        tree = parse_document(text, config.parse_config)

        indenter = JsonIndenter(config)
        indenter.write(tree)
        indenter.chunks.append(text[len(text.rstrip(WHITESPACE)) :])
        return "".join(indenter.chunks)
