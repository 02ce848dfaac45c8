"""
Tagged syntax-tree nodes produced by the SC-Lang matchers and combinators.

Classes:
    Node:
        Base tagged value. Every node has a `kind` (its tag), a payload
        exposed as `value`, and the 1-based source location where its text
        started (after any skipped whitespace).
    IdentifierNode, IntegerNode, FloatNode, StringNode, CharNode:
        Lexical variants emitted by the leaf matchers.
    LiteralNode:
        A keyword, operator or punctuation match. Its kind is the tag the
        literal matcher was configured with (e.g. "IF", "L_R_B").
    SequenceNode:
        An ordered list of child nodes, the default result of a sequence fold.

Ownership:
    A node owns its payload and a SequenceNode owns its children. `destroy()`
    releases them (recursively for sequences) and may be called any number of
    times. Reading `value` or `children` afterwards raises `ReferenceError`.
    The combinator engine destroys the partial results of a failed sequence,
    so a node that reaches the caller was never handed out anywhere else.

Location is metadata only: two nodes compare equal when their classes, kinds
and payloads are equal, wherever they came from.
"""

from typing import Any, TypedDict

from sclang.sc_constants import CHAR, FLOAT, IDENTIFIER, INTEGER, SEQUENCE, STRING


class NodeDict(TypedDict, total=False):
    """Plain-dict form of a node, as produced by `Node.to_dict()`."""

    kind: str
    value: Any
    line: int
    col: int
    children: list["NodeDict"]


class Node:
    """
    Base class for every tagged node.

    Args:
        kind (str): The node's tag.
        value (Any): Variant-specific payload.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).
    """

    label = "Node"

    def __init__(self, kind: str, value: Any = None, line: int = 0, col: int = 0):
        self.kind = kind
        self._value = value
        self.line = line
        self.col = col
        self._destroyed = False

    @property
    def value(self) -> Any:
        self._check_alive()
        return self._value

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """Releases the payload. Safe to call more than once."""
        self._value = None
        self._destroyed = True

    def _check_alive(self) -> None:
        if self._destroyed:
            raise ReferenceError(f"{self.label} node used after destroy")

    def _payload_repr(self) -> str:
        return repr(self._value)

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{self.label}(<destroyed>)"
        return f"{self.label}({self._payload_repr()})"

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return (
            self.kind == other.kind
            and self._destroyed == other._destroyed
            and self._value == other._value
        )

    def to_dict(self) -> NodeDict:
        return {
            "kind": self.kind,
            "value": self.value,
            "line": self.line,
            "col": self.col,
        }


class IdentifierNode(Node):
    label = "Identifier"

    def __init__(self, text: str, line: int = 0, col: int = 0):
        super().__init__(IDENTIFIER, text, line, col)


class IntegerNode(Node):
    label = "Integer"

    def __init__(self, value: int, line: int = 0, col: int = 0):
        super().__init__(INTEGER, value, line, col)


class FloatNode(Node):
    label = "Float"

    def __init__(self, value: float, line: int = 0, col: int = 0):
        super().__init__(FLOAT, value, line, col)


class StringNode(Node):
    label = "String"

    def __init__(self, text: str, line: int = 0, col: int = 0):
        super().__init__(STRING, text, line, col)


class CharNode(Node):
    label = "Char"

    def __init__(self, value: str, line: int = 0, col: int = 0):
        super().__init__(CHAR, value, line, col)


class LiteralNode(Node):
    """A matched keyword or operator; `kind` is the configured tag, `value` the text."""

    label = "Literal"

    def __init__(self, tag: str, text: str, line: int = 0, col: int = 0):
        super().__init__(tag, text, line, col)

    def _payload_repr(self) -> str:
        return f"{self.kind}, {self._value!r}"


class SequenceNode(Node):
    """
    An ordered container of child nodes.

    Args:
        children (list[Node]): Child nodes in grammar order. Ownership moves
            into the new node.
        kind (str, optional): Tag for the composite. Defaults to "SEQUENCE".
        line (int, optional): Defaults to the first child's line.
        col (int, optional): Defaults to the first child's column.
    """

    label = "Sequence"

    def __init__(
        self,
        children: list[Node] | None = None,
        kind: str = SEQUENCE,
        line: int | None = None,
        col: int | None = None,
    ):
        children = list(children or [])
        first = children[0] if children else None
        super().__init__(
            kind,
            children,
            line if line is not None else (first.line if first else 0),
            col if col is not None else (first.col if first else 0),
        )

    @property
    def children(self) -> list[Node]:
        self._check_alive()
        return self._value  # type: ignore[no-any-return]

    def destroy(self) -> None:
        if self._destroyed:
            return
        for child in self._value:
            child.destroy()
        super().destroy()

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]

    def _payload_repr(self) -> str:
        preview = ", ".join(repr(c) for c in self._value[:3])
        if len(self._value) > 3:
            preview += ", ..."
        if self.kind != SEQUENCE:
            return f"{self.kind}, [{preview}]"
        return f"[{preview}]"

    def to_dict(self) -> NodeDict:
        return {
            "kind": self.kind,
            "value": None,
            "line": self.line,
            "col": self.col,
            "children": [c.to_dict() for c in self.children],
        }


__all__ = [
    "CharNode",
    "FloatNode",
    "IdentifierNode",
    "IntegerNode",
    "LiteralNode",
    "Node",
    "NodeDict",
    "SequenceNode",
    "StringNode",
]
