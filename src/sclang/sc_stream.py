"""
Character-level input for the SC-Lang front end.

Classes:
    InputStream: Cursor over a character source with next/peek/rewind/skip.
    FatalInputError: Unrecoverable input or matcher misuse.

The stream never owns an open file: `InputStream.from_file` reads the text of
a file object the caller opened, and the caller remains responsible for
closing it.

Rewinding is exact. After consuming `n` characters, `rewind(n)` restores the
cursor, line and column to what they were. Rewinding before the start of the
buffer raises `FatalInputError`; it is never a recoverable mismatch.

Example:
    >>> stream = InputStream("  foo")
    >>> stream.skip(" ")
    2
    >>> stream.next()
    'f'
    >>> stream.rewind(3)
    >>> stream.position
    0
"""

from collections.abc import Container
from typing import TextIO

EOF = ""
"""End-of-stream marker returned by `next()` and `peek()`."""


class FatalInputError(SyntaxError):
    """Unrecoverable error raised by a matcher or by the stream itself.

    Covers token length overflow, unterminated string or character literals
    and rewinds past the start of the stream. The combinator engine never
    catches it.

    Attributes:
        line (int): 1-based line where the problem was detected.
        col (int): 1-based column where the problem was detected.
        matcher (str | None): Name of the matcher that raised, if any.
    """

    def __init__(
        self, message: str, line: int = 0, col: int = 0, matcher: str | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.col = col
        self.matcher = matcher
        self.lineno = line
        self.offset = col

    def __str__(self) -> str:
        where = f"line {self.line}, col {self.col}"
        if self.matcher:
            return f"{self.msg} [{self.matcher}] at {where}"
        return f"{self.msg} at {where}"


class InputStream:
    """
    A cursor over a buffered character source with exact rewind support.

    Attributes:
        source (str): The buffered input text.
        position (int): Index of the next character to be read.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0):
        """
        Initializes the stream.

        Args:
            source (str): The input text.
            position (int, optional): Starting index. Defaults to 0.
        """
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1
        for _ in range(position):
            self.next()

    @classmethod
    def from_file(cls, file: TextIO) -> "InputStream":
        """Buffers the remaining text of an already-open file.

        The file is left open; closing it is the caller's job.
        """
        return cls(file.read())

    def next(self) -> str:
        """
        Consumes and returns the next character.

        Returns:
            str: The next character, or `EOF` if the stream is exhausted. Reading
            at the end does not move the cursor.
        """
        if self.position >= len(self.source):
            return EOF
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the cursor without consuming it.

        Args:
            offset (int, optional): Number of characters to look ahead. Defaults to 0.

        Returns:
            str: The character at the offset, or `EOF` if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return EOF
        return self.source[index]

    def rewind(self, count: int) -> None:
        """
        Moves the cursor back by `count` characters.

        Args:
            count (int): Number of characters to give back.

        Raises:
            FatalInputError: If `count` is negative or would move before the start.
        """
        if count < 0 or count > self.position:
            raise FatalInputError(
                f"cannot rewind {count} characters from position {self.position}",
                self.line,
                self.column,
            )
        if count == 0:
            return
        start = self.position - count
        segment = self.source[start : self.position]
        self.position = start
        newlines = segment.count("\n")
        if newlines:
            self.line -= newlines
            self.column = start - self.source.rfind("\n", 0, start)
        else:
            self.column -= count

    def skip(self, chars: Container[str]) -> int | None:
        """
        Consumes characters while they belong to `chars`.

        Args:
            chars (Container[str]): The set of characters to skip.

        Returns:
            int | None: Number of characters skipped, or None if the stream ran
            out while skipping. In that case the cursor is left at the end and
            the skipped count is still reflected in `position`.
        """
        count = 0
        while True:
            char = self.peek()
            if char == EOF:
                return None
            if char not in chars:
                return count
            self.next()
            count += 1

    def end_of_file(self) -> bool:
        """Checks if every character has been consumed.

        Returns:
            bool: True if the cursor is at the end of the source.
        """
        return self.position >= len(self.source)

    def __repr__(self) -> str:
        return f"InputStream(position={self.position}, line={self.line}, col={self.column})"


__all__ = ["EOF", "FatalInputError", "InputStream"]
