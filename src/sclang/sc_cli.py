"""
SC-Lang CLI Entrypoint.

Runs the SC-Lang front end over a source file or an inline string and dumps
the recognized tokens, one per line or as JSON.

Example usage:
    sc hello.sc
    sc -s "if (x >= 2) x += 1;" --json
    sc hello.sc -o hello.tokens -p

Functions:
    run_sc(source: str, is_string: bool = False, out: Optional[str] = None,
           as_json: bool = False, pretty: bool = False) -> int:
        Tokenizes the source and writes the dump. Returns the exit status.

    main(argv: Optional[list[str]] = None) -> None:
        Parses CLI arguments and exits with the status of `run_sc`.

Diagnostics are written to stderr as `|Error| - <message>`. Fatal input errors
and unrecognized input both give exit status 1.
"""

import argparse
import json
import sys

from sclang.sc_ast import Node
from sclang.sc_lexer import Lexer
from sclang.sc_stream import FatalInputError, InputStream

BANNER = """+---------------------------+
| Starting SC-Lang Compiler |
| Version: 0.0.1            |
+---------------------------+"""


def error(message: str) -> None:
    print(f"|Error| - {message}", file=sys.stderr)


def format_token(token: Node) -> str:
    return f"{token.line}:{token.col}\t{token!r}"


def run_sc(
    source: str,
    is_string: bool = False,
    out: str | None = None,
    as_json: bool = False,
    pretty: bool = False,
) -> int:
    """
    Tokenize SC-Lang source and print or write the token dump.

    Args:
        source (str): The source text or path to a `.sc` file.
        is_string (bool): If True, treats `source` as raw code. Defaults to False.
        out (str | None): Optional path to write the dump to instead of stdout.
        as_json (bool): Dump tokens as a JSON list of node dicts. Defaults to False.
        pretty (bool): Print the start-up banner. Defaults to False.

    Returns:
        int: 0 on success, 1 if the input could not be fully tokenized.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.sc'.
    """
    if not is_string and not source.endswith(".sc"):
        raise ValueError("Only .sc files are supported.")
    if pretty:
        print(BANNER)

    if is_string:
        stream = InputStream(source)
    else:
        with open(source, encoding="utf-8") as f:
            stream = InputStream.from_file(f)

    lexer = Lexer(stream)
    tokens: list[Node] = []
    status = 0
    try:
        tokens.extend(lexer)
    except FatalInputError as e:
        error(str(e))
        status = 1
    else:
        if not lexer.at_end():
            error(
                f"unrecognized input at line {stream.line}, col {stream.column}"
            )
            status = 1

    if as_json:
        dump = json.dumps([t.to_dict() for t in tokens], indent=2)
    else:
        dump = "\n".join(format_token(t) for t in tokens)

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(dump + "\n")
        if pretty:
            print(f"(wrote to {out})")
    elif dump:
        print(dump)
    return status


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the SC-Lang CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-o`, `--out`: Write the token dump to a file.
        - `-j`, `--json`: Dump tokens as JSON.
        - `-p`, `--pretty`: Show the start-up banner.
    """
    parser = argparse.ArgumentParser(prog="sc")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-j", "--json", dest="as_json", action="store_true", help="Dump tokens as JSON"
    )
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show the start-up banner"
    )

    args = parser.parse_args(argv)

    try:
        status = run_sc(
            source=args.source,
            is_string=args.string,
            out=args.out,
            as_json=args.as_json,
            pretty=args.pretty,
        )
    except (ValueError, OSError) as e:
        error(str(e))
        status = 1
    sys.exit(status)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
