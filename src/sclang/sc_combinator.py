"""
Backtracking combinator engine.

Classes:
    Combinator: Base class; `match(stream)` returns `(node | MISMATCH, consumed)`.
    Leaf: Wraps a leaf matcher and the configuration it is called with.
    Alternative: Ordered choice. The first child that matches wins.
    Sequence: All children must match in order; their nodes are folded into one.

Functions:
    parse(combinator, stream): Top-level entry point. Returns the root node, or
        None when the combinator does not match (the stream is then exactly
        where it was).
    default_fold(nodes): Wraps the matched children in a `SequenceNode`.

Consumption contract:
    After a mismatch the caller rewinds the stream by the reported count. A leaf
    reports everything it read, whitespace included. Composites rewind their
    own children before reporting a mismatch, so they always report zero.

Ambiguity is resolved only by the order in which alternatives are listed;
there is no longest-match rule.

Example:
    >>> call = Sequence([Leaf(lex_identifier), Leaf(lex_literal, LiteralSpec("(", "L_R_B"))])
    >>> parse(call, InputStream("foo("))
    Sequence([Identifier('foo'), Literal(L_R_B, '(')])
"""

from collections.abc import Callable, Iterable
from typing import Any

from sclang.sc_ast import Node, SequenceNode
from sclang.sc_matchers import MISMATCH, Matcher, MatchResult
from sclang.sc_stream import InputStream

Fold = Callable[[list[Node]], Node]


def default_fold(nodes: list[Node]) -> Node:
    """Keeps every matched child, wrapped in a generic sequence node."""
    return SequenceNode(nodes)


class Combinator:
    """Base class of every combinator."""

    def match(self, stream: InputStream) -> MatchResult:  # pragma: no cover
        raise NotImplementedError()


class Leaf(Combinator):
    """
    A combinator that delegates to a single leaf matcher.

    Attributes:
        matcher (Matcher): Function called as `matcher(config, stream)`.
        config (Any): Value bound at construction time (a `LiteralSpec`, a
            maximum token length, or None).
    """

    def __init__(self, matcher: Matcher, config: Any = None) -> None:
        self.matcher = matcher
        self.config = config

    def match(self, stream: InputStream) -> MatchResult:
        return self.matcher(self.config, stream)

    def __repr__(self) -> str:
        name = getattr(self.matcher, "__name__", repr(self.matcher))
        if self.config is None:
            return f"Leaf({name})"
        return f"Leaf({name}, {self.config!r})"


class _Composite(Combinator):
    def __init__(self, children: Iterable[Combinator]) -> None:
        self.children: list[Combinator] = []
        self.append(*children)

    def append(self, *children: Combinator) -> None:
        """Adds children after the existing ones.

        Raises:
            TypeError: If a child is not a combinator.
        """
        for child in children:
            if not isinstance(child, Combinator):
                raise TypeError(
                    f"{type(self).__name__} children must be combinators, got {child!r}"
                )
        self.children.extend(children)

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.children)
        return f"{type(self).__name__}([{inner}])"


class Alternative(_Composite):
    """Tries each child in order and returns the first match."""

    def match(self, stream: InputStream) -> MatchResult:
        # iterate over a snapshot: appending mid-parse only affects later calls
        for child in tuple(self.children):
            node, consumed = child.match(stream)
            if node is not MISMATCH:
                return node, consumed
            stream.rewind(consumed)
        return MISMATCH, 0


class Sequence(_Composite):
    """
    Matches every child in order and folds the results into one node.

    If a child mismatches, the nodes produced so far are destroyed and the
    stream is rewound to where the sequence started. The fold only ever sees
    a complete list of children, in grammar order, and owns them from then on.

    Attributes:
        children (list[Combinator]): Child combinators, in order.
        fold (Fold): Builds the result node from the matched children.
    """

    def __init__(self, children: Iterable[Combinator], fold: Fold | None = None) -> None:
        super().__init__(children)
        self.fold: Fold = fold or default_fold

    def match(self, stream: InputStream) -> MatchResult:
        nodes: list[Node] = []
        total = 0
        for child in tuple(self.children):
            node, consumed = child.match(stream)
            total += consumed
            if node is MISMATCH:
                for partial in nodes:
                    partial.destroy()
                stream.rewind(total)
                return MISMATCH, 0
            nodes.append(node)  # type: ignore[arg-type]
        return self.fold(nodes), total


def parse(combinator: Combinator, stream: InputStream) -> Node | None:
    """
    Runs a combinator tree against the stream.

    Args:
        combinator (Combinator): Root of the tree.
        stream (InputStream): Input, read from its current position.

    Returns:
        Node | None: The root node, owned by the caller, or None on mismatch.
        On mismatch the stream position is unchanged.

    Raises:
        TypeError: If `combinator` is not a Combinator.
        FatalInputError: Propagated untouched from matchers or the stream.
    """
    if not isinstance(combinator, Combinator):
        raise TypeError(f"Expected a combinator, got {combinator!r}")
    node, consumed = combinator.match(stream)
    if node is MISMATCH:
        stream.rewind(consumed)
        return None
    return node  # type: ignore[return-value]


__all__ = [
    "Alternative",
    "Combinator",
    "Fold",
    "Leaf",
    "Sequence",
    "default_fold",
    "parse",
]
