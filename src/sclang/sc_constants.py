"""
Shared lexical constants for the SC-Lang front end.

Tables:
    keyword_tokens: Keyword text mapped to its output tag.
    operator_tokens: Operator/punctuation text mapped to its output tag,
        ordered longest-first so an ordered alternative never claims a
        prefix of a longer operator.

Limits:
    MAX_TOKEN_LENGTH: Longest identifier, number or string payload a matcher
        accepts. Exceeding it is fatal, never a mismatch.
"""

MAX_TOKEN_LENGTH = 1024

WHITESPACE = frozenset(" \t\r\n\v\f")

DIGITS = frozenset("0123456789")
IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
IDENT_CONTINUE = IDENT_START | DIGITS

# Node kinds for the generic (non-literal) variants
IDENTIFIER = "IDENTIFIER"
INTEGER = "INTEGER"
FLOAT = "FLOAT"
STRING = "STRING"
CHAR = "CHAR"
SEQUENCE = "SEQUENCE"

keyword_tokens: dict[str, str] = {
    "break": "BREAK",
    "case": "CASE",
    "const": "CONST",
    "continue": "CONTINUE",
    "else": "ELSE",
    "elif": "ELIF",
    "if": "IF",
    "while": "WHILE",
    "sizeof": "SIZEOF",
    "void": "VOID",
}

operator_tokens: dict[str, str] = {
    "...": "ELLIPSIS",
    ">>=": "RIGHT_ASSIGN",
    "<<=": "LEFT_ASSIGN",
    "+=": "ADD_ASSIGN",
    "-=": "SUB_ASSIGN",
    "*=": "MUL_ASSIGN",
    "/=": "DIV_ASSIGN",
    "%=": "MOD_ASSIGN",
    "&=": "AND_ASSIGN",
    "^=": "XOR_ASSIGN",
    "|=": "OR_ASSIGN",
    ">>": "RIGHT_OP",
    "<<": "LEFT_OP",
    "++": "INC_OP",
    "--": "DEC_OP",
    "->": "PTR_OP",
    "&&": "AND_OP",
    "||": "OR_OP",
    "<=": "LE_OP",
    ">=": "GE_OP",
    "==": "EQ_OP",
    "!=": "NE_OP",
    ";": "SEMICOLON",
    "{": "L_C_B",
    "}": "R_C_B",
    "(": "L_R_B",
    ")": "R_R_B",
    "[": "L_S_B",
    "]": "R_S_B",
    ",": "COMMA",
    ":": "COLON",
    "=": "EQUALS",
    ".": "DOT",
    "&": "AND",
    "!": "NOT",
    "~": "BIT_NOT",
    "+": "PLUS",
    "-": "MINUS",
    "*": "ASTERIX",
    "/": "DIV",
    "%": "MOD",
    "<": "LESS",
    ">": "GREATER",
    "^": "BIT_XOR",
    "|": "BIT_OR",
    "?": "QUESTION",
}

# Escapes accepted inside a character literal
char_escapes: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

__all__ = [
    "CHAR",
    "DIGITS",
    "FLOAT",
    "IDENTIFIER",
    "IDENT_CONTINUE",
    "IDENT_START",
    "INTEGER",
    "MAX_TOKEN_LENGTH",
    "SEQUENCE",
    "STRING",
    "WHITESPACE",
    "char_escapes",
    "keyword_tokens",
    "operator_tokens",
]
