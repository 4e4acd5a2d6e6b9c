"""
Generic JSON text parser.

JsonLexer splits text into tokens, decoding string escapes as it goes, and
JsonParser assembles the tokens into a tree of JsonNode records by
recursive descent. Nodes keep their raw token text, so the tree can be
written back out unchanged, and their position, for error reporting.

Only RFC 8259 JSON is accepted: no comments, trailing commas, single
quotes, or NaN/Infinity literals.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._config import ParseConfig
from ._errors import JSONDecodeError
from ._errors import Position
from ._profile import ProfileContext


class TokenKind(Enum):
    """Lexical token categories of JSON text."""

    BEGIN_OBJECT = "{"
    END_OBJECT = "}"
    BEGIN_ARRAY = "["
    END_ARRAY = "]"
    COMMA = ","
    COLON = ":"
    STRING = "string"
    NUMBER = "number"
    LITERAL = "literal"
    INVALID = "invalid"
    EOF = "eof"


class NodeKind(Enum):
    """Node categories of the intermediate JSON tree."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class JsonToken:
    """
    Represents a JSON token with position information.

    raw is the exact source text of the token; value is the decoded string
    for STRING tokens and the Python constant for LITERAL tokens.
    """

    kind: TokenKind
    raw: str
    start: Position
    end: Position
    value: Any = None


@dataclass(frozen=True, slots=True)
class JsonNode:
    """
    One node of the intermediate JSON tree.

    value holds, by kind: None or a bool for literals, the numeric text for
    NUMBER, the decoded text for STRING, a tuple of child nodes for ARRAY,
    and a tuple of (key node, value node) pairs in source order for OBJECT.
    """

    kind: NodeKind
    value: Any
    raw: str = ""
    pos: Position = 0


_STRUCTURAL = {
    "{": TokenKind.BEGIN_OBJECT,
    "}": TokenKind.END_OBJECT,
    "[": TokenKind.BEGIN_ARRAY,
    "]": TokenKind.END_ARRAY,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_LITERALS = {"t": ("true", True), "f": ("false", False), "n": ("null", None)}

WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"

# Run of string characters that need no further inspection
_STRING_CHUNK = re.compile(r'[^"\\\x00-\x1f]*')


class JsonLexer:
    """
    Tokenizes JSON input for the recursive-descent parser.

    Handles whitespace, strings, numbers, literals, and structural tokens.
    Characters that cannot start a token come back as INVALID tokens so the
    parser can report them with the context it was in.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def error_at(self, pos: Position, context: str) -> JSONDecodeError:
        """Builds the error for an unexpected character or end of input."""
        if pos >= self.length:
            return JSONDecodeError(
                "unexpected end of JSON input", self.text, self.length
            )
        return JSONDecodeError(
            f"invalid character {self.text[pos]!r} {context}", self.text, pos
        )

    def skip_whitespace(self) -> None:
        """Skips whitespace characters as defined by RFC 8259."""
        with ProfileContext("skip_whitespace"):
            while self.pos < self.length and self.text[self.pos] in WHITESPACE:
                self.pos += 1

    def _unterminated(self, start: Position) -> JSONDecodeError:
        return JSONDecodeError(
            "Unterminated string starting at", self.text, start
        )

    def scan_string(self) -> JsonToken:
        """Scans a JSON string token including quotes."""
        with ProfileContext("scan_string"):
            start = self.pos
            self.pos += 1
            chunks: list[str] = []

            while True:
                match = _STRING_CHUNK.match(self.text, self.pos)
                chunk_end = match.end() if match else self.pos
                if chunk_end > self.pos:
                    chunks.append(self.text[self.pos : chunk_end])
                    self.pos = chunk_end

                if self.pos >= self.length:
                    raise self._unterminated(start)

                char = self.text[self.pos]
                if char == '"':
                    self.pos += 1
                    return JsonToken(
                        TokenKind.STRING,
                        self.text[start : self.pos],
                        start,
                        self.pos,
                        "".join(chunks),
                    )
                elif char == "\\":
                    chunks.append(self._scan_escape(start))
                else:
                    raise self.error_at(self.pos, "in string literal")

    def _scan_escape(self, start: Position) -> str:
        """Decodes one escape sequence; pos is on the backslash."""
        self.pos += 1
        if self.pos >= self.length:
            raise self._unterminated(start)

        char = self.text[self.pos]
        if char in _ESCAPES:
            self.pos += 1
            return _ESCAPES[char]
        if char != "u":
            raise self.error_at(self.pos, "in string escape code")

        code = self._scan_hex4(start)
        # A high surrogate escape directly followed by a low one is a pair
        if 0xD800 <= code <= 0xDBFF and self.text.startswith("\\u", self.pos):
            resume = self.pos
            self.pos += 1
            low = self._scan_hex4(start)
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self.pos = resume
        return chr(code)

    def _scan_hex4(self, start: Position) -> int:
        """Reads the four hex digits of a \\u escape; pos is on the 'u'."""
        first = self.pos + 1
        for i in range(first, first + 4):
            if i >= self.length:
                raise self._unterminated(start)
            if self.text[i] not in _HEX_DIGITS:
                raise self.error_at(i, "in \\u hexadecimal character escape")
        self.pos = first + 4
        return int(self.text[first : self.pos], 16)

    def _scan_digits(self) -> None:
        """Scans one or more ASCII digits."""
        if self.peek() not in _DIGITS:
            raise self.error_at(self.pos, "in numeric literal")
        while self.peek() in _DIGITS:
            self.pos += 1

    def scan_number(self) -> JsonToken:
        """Scans a JSON number token."""
        with ProfileContext("scan_number"):
            start = self.pos
            if self.peek() == "-":
                self.pos += 1

            # Leading zeros are not allowed, so a 0 ends the integer part
            if self.peek() == "0":
                self.pos += 1
            else:
                self._scan_digits()

            if self.peek() == ".":
                self.pos += 1
                self._scan_digits()

            if self.peek() in ("e", "E"):
                self.pos += 1
                if self.peek() in ("+", "-"):
                    self.pos += 1
                self._scan_digits()

            return JsonToken(
                TokenKind.NUMBER, self.text[start : self.pos], start, self.pos
            )

    def scan_literal(self) -> JsonToken:
        """Scans literal tokens: true, false, null."""
        start = self.pos
        word, value = _LITERALS[self.text[start]]
        for offset, expected in enumerate(word):
            pos = start + offset
            if pos >= self.length or self.text[pos] != expected:
                raise self.error_at(
                    pos, f"in literal {word} (expecting {expected!r})"
                )

        self.pos = start + len(word)
        return JsonToken(TokenKind.LITERAL, word, start, self.pos, value)

    def next_token(self) -> JsonToken:
        """Returns the next token, or an EOF token at the end of input."""
        self.skip_whitespace()

        start = self.pos
        if start >= self.length:
            return JsonToken(TokenKind.EOF, "", start, start)

        char = self.text[start]
        structural = _STRUCTURAL.get(char)
        if structural is not None:
            self.pos += 1
            return JsonToken(structural, char, start, self.pos)
        elif char == '"':
            return self.scan_string()
        elif char == "-" or char in _DIGITS:
            return self.scan_number()
        elif char in _LITERALS:
            return self.scan_literal()

        self.pos += 1
        return JsonToken(TokenKind.INVALID, char, start, self.pos)


class JsonParser:
    """
    Recursive-descent parser building the intermediate JSON tree.

    Enforces the configured nesting limit and shares one decoded string per
    distinct object key spelling.
    """

    def __init__(self, lexer: JsonLexer, config: ParseConfig):
        self.lexer = lexer
        self.config = config
        self.current_token = JsonToken(TokenKind.EOF, "", 0, 0)
        self.depth = 0
        self._string_cache: dict[str, str] = {}

    def advance_token(self) -> JsonToken:
        """Advances to next token and returns it."""
        self.current_token = self.lexer.next_token()
        return self.current_token

    def unexpected(self, context: str) -> JSONDecodeError:
        """Builds the error for the current token in the given context."""
        return self.lexer.error_at(self.current_token.start, context)

    def parse_document(self) -> JsonNode:
        """Parses the whole input as exactly one JSON value."""
        text = self.lexer.text
        with ProfileContext("parse_document", len(text)):
            if text.startswith("\ufeff"):
                raise JSONDecodeError(
                    "JSON input should not contain BOM (Byte Order Mark)",
                    text,
                    0,
                )

            self.advance_token()
            node = self.parse_value()
            if self.current_token.kind is not TokenKind.EOF:
                raise self.unexpected("after top-level value")
            return node

    def parse_value(self) -> JsonNode:
        """Parses any JSON value starting at the current token."""
        token = self.current_token
        kind = token.kind

        if kind is TokenKind.BEGIN_OBJECT:
            return self.parse_object()
        elif kind is TokenKind.BEGIN_ARRAY:
            return self.parse_array()
        elif kind is TokenKind.STRING:
            node = JsonNode(
                NodeKind.STRING, token.value, token.raw, token.start
            )
        elif kind is TokenKind.NUMBER:
            node = JsonNode(NodeKind.NUMBER, token.raw, token.raw, token.start)
        elif kind is TokenKind.LITERAL:
            node_kind = NodeKind.NULL if token.value is None else NodeKind.BOOL
            node = JsonNode(node_kind, token.value, token.raw, token.start)
        else:
            raise self.unexpected("looking for beginning of value")

        self.advance_token()
        return node

    def _enter(self, token: JsonToken) -> None:
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise JSONDecodeError(
                f"Exceeded maximum nesting depth of {self.config.max_depth}",
                self.lexer.text,
                token.start,
            )

    def _intern_string(self, token: JsonToken) -> str:
        """Returns one shared string object per distinct raw key."""
        return self._string_cache.setdefault(token.raw, token.value)

    def _parse_object_key(self) -> JsonNode:
        token = self.current_token
        if token.kind is not TokenKind.STRING:
            raise self.unexpected("looking for beginning of object key string")

        self.advance_token()
        if self.current_token.kind is not TokenKind.COLON:
            raise self.unexpected("after object key")
        self.advance_token()

        return JsonNode(
            NodeKind.STRING, self._intern_string(token), token.raw, token.start
        )

    def parse_object(self) -> JsonNode:
        """Parses a JSON object; members keep their source order."""
        with ProfileContext("parse_object"):
            open_token = self.current_token
            self._enter(open_token)
            self.advance_token()

            members: list[tuple[JsonNode, JsonNode]] = []
            if self.current_token.kind is TokenKind.END_OBJECT:
                self.advance_token()
            else:
                while True:
                    key = self._parse_object_key()
                    members.append((key, self.parse_value()))

                    token = self.current_token
                    if token.kind is TokenKind.END_OBJECT:
                        self.advance_token()
                        break
                    if token.kind is not TokenKind.COMMA:
                        raise self.unexpected("after object key:value pair")

                    self.advance_token()

            self.depth -= 1
            return JsonNode(
                NodeKind.OBJECT, tuple(members), "", open_token.start
            )

    def parse_array(self) -> JsonNode:
        """Parses a JSON array."""
        with ProfileContext("parse_array"):
            open_token = self.current_token
            self._enter(open_token)
            self.advance_token()

            elements: list[JsonNode] = []
            if self.current_token.kind is TokenKind.END_ARRAY:
                self.advance_token()
            else:
                while True:
                    elements.append(self.parse_value())

                    token = self.current_token
                    if token.kind is TokenKind.END_ARRAY:
                        self.advance_token()
                        break
                    if token.kind is not TokenKind.COMMA:
                        raise self.unexpected("after array element")

                    self.advance_token()

            self.depth -= 1
            return JsonNode(
                NodeKind.ARRAY, tuple(elements), "", open_token.start
            )


def parse_document(text: str, config: ParseConfig) -> JsonNode:
    """Parses JSON text into the intermediate tree."""
    parser = JsonParser(JsonLexer(text), config)
    return parser.parse_document()
