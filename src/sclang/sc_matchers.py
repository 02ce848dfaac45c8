"""
Leaf matchers: the primitive rules that read raw characters.

Every matcher has the signature `(config, stream) -> (node | MISMATCH, consumed)`.
It first skips leading whitespace, then tries to read one token. Whatever the
outcome, `consumed` is the exact number of characters it took from the stream,
skipped whitespace included, so that the caller can `rewind(consumed)` after a
mismatch. Matchers never rewind on their own.

Matchers:
    lex_identifier: [A-Za-z_][A-Za-z0-9_]*
    lex_integer: digits not followed by `.` or `f` (those belong to floats)
    lex_float: digits followed by `f`, or digits `.` digits
    lex_string: a double-quoted string, escapes kept raw
    lex_char: a single-quoted character, escapes decoded
    lex_literal: exact text configured by a `LiteralSpec`

Fatal conditions (`FatalInputError`) are raised, not reported: a token longer
than the configured maximum, and an unterminated string or character literal.
"""

from collections.abc import Callable
from typing import Any

from sclang.sc_ast import (
    CharNode,
    FloatNode,
    IdentifierNode,
    IntegerNode,
    LiteralNode,
    Node,
    StringNode,
)
from sclang.sc_constants import (
    DIGITS,
    IDENT_CONTINUE,
    IDENT_START,
    MAX_TOKEN_LENGTH,
    WHITESPACE,
    char_escapes,
)
from sclang.sc_stream import EOF, FatalInputError, InputStream


class Mismatch:
    """Sentinel for a recoverable "no match here" outcome. Always falsy."""

    _instance: "Mismatch | None" = None

    def __new__(cls) -> "Mismatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISMATCH"


MISMATCH = Mismatch()

MatchResult = tuple[Node | Mismatch, int]
Matcher = Callable[[Any, InputStream], MatchResult]


class LiteralSpec:
    """Configuration of a literal matcher.

    Attributes:
        text (str): Exact text to match.
        tag (str): Kind of the emitted `LiteralNode`.
        keyword (bool): True when the text looks like an identifier. A keyword
            must not be followed by an identifier character.
    """

    def __init__(self, text: str, tag: str) -> None:
        if not text:
            raise ValueError("Literal text must not be empty.")
        self.text = text
        self.tag = tag
        self.keyword = text[0] in IDENT_START and all(c in IDENT_CONTINUE for c in text)

    def __repr__(self) -> str:
        return f"LiteralSpec({self.text!r}, {self.tag!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, LiteralSpec)
            and self.text == other.text
            and self.tag == other.tag
        )


def _printable(char: str) -> bool:
    return char != EOF and 32 <= ord(char) <= 126


def _limit(max_length: int | None) -> int:
    return MAX_TOKEN_LENGTH if max_length is None else max_length


def _skip_blank(stream: InputStream) -> None:
    stream.skip(WHITESPACE)


def _read_digits(
    stream: InputStream, buffer: list[str], limit: int, matcher: str
) -> None:
    while stream.peek() in DIGITS:
        if len(buffer) >= limit:
            raise FatalInputError(
                f"{matcher} too long", stream.line, stream.column, matcher
            )
        buffer.append(stream.next())


def lex_identifier(max_length: int | None, stream: InputStream) -> MatchResult:
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    if stream.peek() not in IDENT_START:
        return MISMATCH, stream.position - start
    limit = _limit(max_length)
    buffer: list[str] = []
    while stream.peek() in IDENT_CONTINUE:
        if len(buffer) >= limit:
            raise FatalInputError(
                "identifier too long", line, col, "identifier"
            )
        buffer.append(stream.next())
    return IdentifierNode("".join(buffer), line, col), stream.position - start


def lex_integer(max_length: int | None, stream: InputStream) -> MatchResult:
    """Matches a decimal integer.

    Digits directly followed by `.` or `f` are refused so that the float
    matcher, tried later, can claim them.
    """
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    if stream.peek() not in DIGITS:
        return MISMATCH, stream.position - start
    buffer: list[str] = []
    _read_digits(stream, buffer, _limit(max_length), "integer")
    if stream.peek() in (".", "f"):
        return MISMATCH, stream.position - start
    return IntegerNode(int("".join(buffer)), line, col), stream.position - start


def lex_float(max_length: int | None, stream: InputStream) -> MatchResult:
    """Matches `123f` or `123.45`. The `f` suffix is consumed."""
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    if stream.peek() not in DIGITS:
        return MISMATCH, stream.position - start
    limit = _limit(max_length)
    buffer: list[str] = []
    _read_digits(stream, buffer, limit, "float")
    if stream.peek() == "f":
        stream.next()
    elif stream.peek() == ".":
        buffer.append(stream.next())
        if stream.peek() not in DIGITS:
            return MISMATCH, stream.position - start
        _read_digits(stream, buffer, limit, "float")
    else:
        return MISMATCH, stream.position - start
    return FloatNode(float("".join(buffer)), line, col), stream.position - start


def lex_string(max_length: int | None, stream: InputStream) -> MatchResult:
    """Matches a double-quoted string of printable characters.

    A backslash protects the next character; both are kept in the payload.

    Raises:
        FatalInputError: If the closing quote is missing or the text is too long.
    """
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    if stream.peek() != '"':
        return MISMATCH, stream.position - start
    stream.next()
    limit = _limit(max_length)
    buffer: list[str] = []
    while True:
        char = stream.peek()
        if not _printable(char):
            raise FatalInputError(
                'string not properly ended (missing ")', line, col, "string"
            )
        stream.next()
        if char == '"':
            break
        buffer.append(char)
        if char == "\\":
            escaped = stream.peek()
            if not _printable(escaped):
                raise FatalInputError(
                    'string not properly ended (missing ")', line, col, "string"
                )
            buffer.append(stream.next())
        if len(buffer) > limit:
            raise FatalInputError("string too long", line, col, "string")
    return StringNode("".join(buffer), line, col), stream.position - start


def lex_char(config: Any, stream: InputStream) -> MatchResult:
    """Matches a single-quoted character such as `'a'` or `'\\n'`.

    Raises:
        FatalInputError: Once the opening quote is read, on anything other than
            one character (or one known escape) and a closing quote.
    """
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    if stream.peek() != "'":
        return MISMATCH, stream.position - start
    stream.next()
    char = stream.next()
    if not _printable(char) or char == "'":
        raise FatalInputError("malformed character literal", line, col, "char")
    if char == "\\":
        escape = stream.next()
        if escape not in char_escapes:
            raise FatalInputError(
                f"unknown escape sequence in character literal: {escape!r}",
                line,
                col,
                "char",
            )
        char = char_escapes[escape]
    if stream.next() != "'":
        raise FatalInputError(
            "character literal not properly ended (missing ')", line, col, "char"
        )
    return CharNode(char, line, col), stream.position - start


def lex_literal(spec: LiteralSpec, stream: InputStream) -> MatchResult:
    """Matches `spec.text` exactly.

    Keyword-like literals additionally refuse a following identifier
    character, so `if` does not match the start of `ifx`.
    """
    start = stream.position
    _skip_blank(stream)
    line, col = stream.line, stream.column
    for expected in spec.text:
        if stream.peek() != expected:
            return MISMATCH, stream.position - start
        stream.next()
    if spec.keyword and stream.peek() in IDENT_CONTINUE:
        return MISMATCH, stream.position - start
    return LiteralNode(spec.tag, spec.text, line, col), stream.position - start


__all__ = [
    "MISMATCH",
    "LiteralSpec",
    "MatchResult",
    "Matcher",
    "Mismatch",
    "lex_char",
    "lex_float",
    "lex_identifier",
    "lex_integer",
    "lex_literal",
    "lex_string",
]
