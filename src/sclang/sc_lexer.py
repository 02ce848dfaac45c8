"""
Token-level lexer for SC-Lang, built on the combinator engine.

The token grammar is a single ordered alternative, tried as:
operators -> keywords -> identifier -> integer -> float -> string -> char.
Operators are listed longest-first, and the integer matcher refuses digits
followed by `.` or `f`, so `3.14` and `2f` fall through to the float matcher.

Classes:
    Lexer: Produces one token node per call and keeps a token history so a
        parser can push tokens back with `rewind(n)` and look ahead with `peek()`.

Functions:
    token_grammar(): Builds the alternative described above.
    tokenize(source): Returns every token of a string.

Example:
    >>> tokenize("if (x >= 2.5f)")
    [Literal(IF, 'if'), Literal(L_R_B, '('), Identifier('x'), Literal(GE_OP, '>='), ...]
"""

from collections.abc import Iterator

from sclang.sc_ast import Node
from sclang.sc_builder import (
    match_any,
    match_char,
    match_float,
    match_identifier,
    match_integer,
    match_literal,
    match_string,
)
from sclang.sc_combinator import Combinator, parse
from sclang.sc_constants import WHITESPACE, keyword_tokens, operator_tokens
from sclang.sc_stream import InputStream


def token_grammar() -> Combinator:
    """Builds the ordered alternative that recognizes a single token."""
    operators = [match_literal(text, tag) for text, tag in operator_tokens.items()]
    keywords = [match_literal(text, tag) for text, tag in keyword_tokens.items()]
    return match_any(
        *operators,
        *keywords,
        match_identifier(),
        match_integer(),
        match_float(),
        match_string(),
        match_char(),
    )


class Lexer:
    """Lexical analyzer for SC-Lang.

    Attributes:
        stream (InputStream): The source stream to tokenize.
        grammar (Combinator): Rule used to read one token.
    """

    def __init__(self, stream: InputStream, grammar: Combinator | None = None) -> None:
        self.stream = stream
        self.grammar = grammar or token_grammar()
        # tokens handed out so far, oldest first
        self._history: list[Node] = []
        # rewound tokens waiting to be replayed, next one last
        self._pending: list[Node] = []

    @property
    def current(self) -> Node | None:
        """The most recently returned token, or None before the first one."""
        return self._history[-1] if self._history else None

    def next_token(self) -> Node | None:
        """Returns the next token.

        Returns:
            Node | None: The token, or None when the input is exhausted or no
            token matches at the current position. `at_end()` tells the two
            apart.

        Raises:
            FatalInputError: Propagated from the matchers.
        """
        if self._pending:
            token = self._pending.pop()
            self._history.append(token)
            return token
        if self.stream.skip(WHITESPACE) is None:
            return None
        token = parse(self.grammar, self.stream)
        if token is not None:
            self._history.append(token)
        return token

    def rewind(self, count: int) -> None:
        """Pushes the last `count` tokens back. Stops quietly at the first token."""
        for _ in range(count):
            if not self._history:
                return
            self._pending.append(self._history.pop())

    def peek(self) -> Node | None:
        """Returns the next token without consuming it."""
        token = self.next_token()
        if token is not None:
            self.rewind(1)
        return token

    def at_end(self) -> bool:
        """True when no tokens are pending and only whitespace is left."""
        if self._pending:
            return False
        return all(char in WHITESPACE for char in self.stream.source[self.stream.position :])

    def __iter__(self) -> Iterator[Node]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def tokenize(source: str) -> list[Node]:
    """Tokenizes a whole string, stopping early at unrecognized input."""
    return list(Lexer(InputStream(source)))


__all__ = ["Lexer", "token_grammar", "tokenize"]
