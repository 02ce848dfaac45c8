import pytest
from hypothesis import given
from hypothesis import strategies as st

from sclang.sc_ast import (
    CharNode,
    FloatNode,
    IdentifierNode,
    IntegerNode,
    LiteralNode,
    StringNode,
)
from sclang.sc_matchers import (
    MISMATCH,
    LiteralSpec,
    Mismatch,
    lex_char,
    lex_float,
    lex_identifier,
    lex_integer,
    lex_literal,
    lex_string,
)
from sclang.sc_stream import FatalInputError, InputStream


def test_mismatch_is_falsy_singleton() -> None:
    assert not MISMATCH
    assert Mismatch() is MISMATCH
    assert repr(MISMATCH) == "MISMATCH"


# Identifier


def test_identifier_match() -> None:
    stream = InputStream("  foo_1 bar")
    node, consumed = lex_identifier(None, stream)
    assert node == IdentifierNode("foo_1")
    assert consumed == 7
    assert stream.peek() == " "


def test_identifier_records_location_after_whitespace() -> None:
    node, _ = lex_identifier(None, InputStream("\n   x"))
    assert (node.line, node.col) == (2, 4)


def test_identifier_mismatch_counts_only_whitespace() -> None:
    stream = InputStream("   9abc")
    node, consumed = lex_identifier(None, stream)
    assert node is MISMATCH
    assert consumed == 3
    assert stream.position == 3


def test_identifier_too_long_is_fatal() -> None:
    with pytest.raises(FatalInputError) as exc:
        lex_identifier(4, InputStream("abcde"))
    assert exc.value.matcher == "identifier"


def test_zero_length_limit_is_honored() -> None:
    with pytest.raises(FatalInputError):
        lex_identifier(0, InputStream("abc"))
    with pytest.raises(FatalInputError):
        lex_integer(0, InputStream("7"))


def test_identifier_at_limit_is_fine() -> None:
    node, consumed = lex_identifier(4, InputStream("abcd;"))
    assert node == IdentifierNode("abcd")
    assert consumed == 4


def test_identifier_empty_input() -> None:
    assert lex_identifier(None, InputStream("")) == (MISMATCH, 0)


# Integer


def test_integer_stops_at_letter() -> None:
    stream = InputStream("123abc")
    node, consumed = lex_integer(None, stream)
    assert node == IntegerNode(123)
    assert consumed == 3
    assert stream.peek() == "a"


def test_integer_at_end_of_input() -> None:
    node, consumed = lex_integer(None, InputStream(" 7"))
    assert node == IntegerNode(7)
    assert consumed == 2


@pytest.mark.parametrize("source", ["3.14", "2f", "10."])  # type: ignore[misc]
def test_integer_defers_to_float(source: str) -> None:
    stream = InputStream(source)
    node, consumed = lex_integer(None, stream)
    assert node is MISMATCH
    assert consumed == stream.position


def test_integer_requires_digit() -> None:
    assert lex_integer(None, InputStream(" x")) == (MISMATCH, 1)


def test_integer_too_long_is_fatal() -> None:
    with pytest.raises(FatalInputError):
        lex_integer(3, InputStream("1234"))


# Float


def test_float_with_fraction() -> None:
    stream = InputStream("3.14xyz")
    node, consumed = lex_float(None, stream)
    assert node == FloatNode(3.14)
    assert consumed == 4
    assert stream.peek() == "x"


def test_float_with_suffix() -> None:
    stream = InputStream("2f;")
    node, consumed = lex_float(None, stream)
    assert node == FloatNode(2.0)
    assert consumed == 2
    assert stream.peek() == ";"


def test_float_fraction_then_suffix_leaves_suffix() -> None:
    stream = InputStream("1.5f")
    node, _ = lex_float(None, stream)
    assert node == FloatNode(1.5)
    assert stream.peek() == "f"


@pytest.mark.parametrize("source", ["12", "12;", "12.", "12.x", "x"])  # type: ignore[misc]
def test_float_mismatch(source: str) -> None:
    stream = InputStream(source)
    node, consumed = lex_float(None, stream)
    assert node is MISMATCH
    assert consumed == stream.position


def test_float_too_long_is_fatal() -> None:
    with pytest.raises(FatalInputError):
        lex_float(4, InputStream("12.345"))


# String


def test_string_match() -> None:
    stream = InputStream(' "hello world";')
    node, consumed = lex_string(None, stream)
    assert node == StringNode("hello world")
    assert consumed == 14
    assert stream.peek() == ";"


def test_string_keeps_escapes_raw() -> None:
    node, _ = lex_string(None, InputStream(r'"a\"b\\"'))
    assert node == StringNode(r"a\"b\\")


def test_string_requires_quote() -> None:
    assert lex_string(None, InputStream("  abc")) == (MISMATCH, 2)


@pytest.mark.parametrize("source", ['"abc', '"ab\ncd"', '"abc\\'])  # type: ignore[misc]
def test_unterminated_string_is_fatal(source: str) -> None:
    with pytest.raises(FatalInputError) as exc:
        lex_string(None, InputStream(source))
    assert exc.value.matcher == "string"


def test_string_too_long_is_fatal() -> None:
    with pytest.raises(FatalInputError):
        lex_string(3, InputStream('"abcd"'))


# Char


@pytest.mark.parametrize(  # type: ignore[misc]
    "source,expected",
    [("'a'", "a"), ("'\\n'", "\n"), ("'\\''", "'"), ("'\\\\'", "\\"), ("' '", " ")],
)
def test_char_match(source: str, expected: str) -> None:
    node, consumed = lex_char(None, InputStream(source))
    assert node == CharNode(expected)
    assert consumed == len(source)


def test_char_requires_quote() -> None:
    assert lex_char(None, InputStream(" a")) == (MISMATCH, 1)


@pytest.mark.parametrize("source", ["'", "''", "'ab'", "'\\q'", "'a"])  # type: ignore[misc]
def test_malformed_char_is_fatal(source: str) -> None:
    with pytest.raises(FatalInputError):
        lex_char(None, InputStream(source))


# Literal


def test_literal_spec_keyword_detection() -> None:
    assert LiteralSpec("if", "IF").keyword
    assert LiteralSpec("_x1", "X").keyword
    assert not LiteralSpec(">>=", "RIGHT_ASSIGN").keyword
    assert not LiteralSpec("1x", "X").keyword


def test_literal_spec_rejects_empty_text() -> None:
    with pytest.raises(ValueError):
        LiteralSpec("", "EMPTY")


def test_keyword_match() -> None:
    stream = InputStream("if ")
    node, consumed = lex_literal(LiteralSpec("if", "KW_IF"), stream)
    assert node == LiteralNode("KW_IF", "if")
    assert consumed == 2


def test_keyword_boundary() -> None:
    stream = InputStream("ifx")
    node, consumed = lex_literal(LiteralSpec("if", "KW_IF"), stream)
    assert node is MISMATCH
    assert consumed == 2


def test_keyword_at_end_of_input() -> None:
    node, _ = lex_literal(LiteralSpec("while", "WHILE"), InputStream("while"))
    assert node == LiteralNode("WHILE", "while")


def test_operator_has_no_boundary_check() -> None:
    node, consumed = lex_literal(LiteralSpec("+", "PLUS"), InputStream(" +x"))
    assert node == LiteralNode("PLUS", "+")
    assert consumed == 2


def test_literal_partial_mismatch_reports_consumed() -> None:
    stream = InputStream("  >>x")
    node, consumed = lex_literal(LiteralSpec(">>=", "RIGHT_ASSIGN"), stream)
    assert node is MISMATCH
    assert consumed == 4
    assert stream.position == 4


@given(st.text(alphabet=" \t\n0123456789abcxyz_.f", max_size=20))  # type: ignore[misc]
def test_matchers_report_exact_consumption(source: str) -> None:
    for matcher in (lex_identifier, lex_integer, lex_float):
        stream = InputStream(source)
        _, consumed = matcher(None, stream)
        assert consumed == stream.position
        stream.rewind(consumed)
        assert stream.position == 0
