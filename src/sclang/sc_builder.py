"""
Construction API for combinator trees.

A grammar is assembled once from these helpers and then used for any number of
`parse` calls:

    >>> call = match_all(
    ...     match_identifier(),
    ...     match_literal("(", "L_R_B"),
    ...     match_integer(),
    ...     match_literal(")", "R_R_B"),
    ...     fold=lambda nodes: SequenceNode([nodes[0], nodes[2]], kind="CALL"),
    ... )
    >>> parse(call, InputStream("foo(42)"))
    Sequence(CALL, [Identifier('foo'), Integer(42)])

Rules that refer to themselves are built empty and completed with `append`:

    expr = match_any()
    append(expr, match_all(match_literal("(", "L_R_B"), expr, match_literal(")", "R_R_B")))
    append(expr, match_integer())
"""

from typing import Any

from sclang.sc_combinator import Alternative, Combinator, Fold, Leaf, Sequence
from sclang.sc_matchers import (
    LiteralSpec,
    Matcher,
    lex_char,
    lex_float,
    lex_identifier,
    lex_integer,
    lex_literal,
    lex_string,
)


def leaf(matcher: Matcher, config: Any = None) -> Leaf:
    """Wraps any leaf matcher together with its configuration."""
    return Leaf(matcher, config)


def match_identifier(max_length: int | None = None) -> Leaf:
    return Leaf(lex_identifier, max_length)


def match_integer(max_length: int | None = None) -> Leaf:
    return Leaf(lex_integer, max_length)


def match_float(max_length: int | None = None) -> Leaf:
    return Leaf(lex_float, max_length)


def match_string(max_length: int | None = None) -> Leaf:
    return Leaf(lex_string, max_length)


def match_char() -> Leaf:
    return Leaf(lex_char)


def match_literal(text: str, tag: str | None = None) -> Leaf:
    """
    Builds a leaf matching exact text.

    Args:
        text (str): Keyword, operator or punctuation to match.
        tag (str, optional): Kind of the emitted node. Defaults to the text itself.

    Raises:
        ValueError: If `text` is empty.
    """
    return Leaf(lex_literal, LiteralSpec(text, tag if tag is not None else text))


def match_any(*children: Combinator) -> Alternative:
    return Alternative(children)


def match_all(*children: Combinator, fold: Fold | None = None) -> Sequence:
    """Builds a sequence; without `fold` the children are wrapped in a SequenceNode."""
    return Sequence(children, fold)


def append(combinator: Combinator, *children: Combinator) -> Combinator:
    """
    Appends children to an existing Alternative or Sequence.

    Earlier children keep their order. Results already returned by `parse` are
    not affected; only later calls see the new children.

    Returns:
        Combinator: The same combinator, for chaining.

    Raises:
        TypeError: If `combinator` is a Leaf (or not a combinator at all), or a
            child is not a combinator.
    """
    if not isinstance(combinator, (Alternative, Sequence)):
        raise TypeError(f"Cannot append children to {combinator!r}")
    combinator.append(*children)
    return combinator


__all__ = [
    "append",
    "leaf",
    "match_all",
    "match_any",
    "match_char",
    "match_float",
    "match_identifier",
    "match_integer",
    "match_literal",
    "match_string",
]
