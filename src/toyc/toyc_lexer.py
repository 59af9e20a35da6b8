"""
Lexical analyzer for the TOYC language.

This module provides core components for converting raw source text into a token stream:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Immutable token with type, value, and source location.
    Lexer: Converts a CharacterStream into a lazy sequence of tokens.

Features:
    - Skips whitespace between tokens
    - Recognizes:
        * Keywords `int` and `if`
        * Identifiers (letter or `_`, then letters, digits, `_`)
        * Unsigned decimal integers
        * `==` (matched greedily before `=`), `=`, `+`, `-`, `{`, `}`, `;`
    - Any other character becomes an UNKNOWN token
    - Terminates with exactly one EOF token

Raises:
    LexicalError: If a lexeme exceeds the maximum length or input bytes are not UTF-8.

Example:
    >>> lexer = Lexer(CharacterStream("int x;"))
    >>> lexer.next_token()
    Token(INT, )

Exports:
    - CharacterStream
    - Token
    - Lexer
    - token_hashmap
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO

from toyc.toyc_constants import (
    EOF,
    IDENT,
    MAX_LEXEME_LEN,
    NUMBER,
    UNKNOWN,
    keyword_tokens,
    symbol_tokens,
    token_hashmap,
)
from toyc.toyc_errors import LexicalError


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    @classmethod
    def from_file(cls, handle: IO[str] | IO[bytes]) -> "CharacterStream":
        """Builds a stream from an open text or binary handle.

        Binary content is decoded as UTF-8. The handle is read but not closed.

        Raises:
            LexicalError: If binary content is not valid UTF-8.
        """
        data = handle.read()
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise LexicalError(
                    f"input is not valid UTF-8 (byte offset {e.start})"
                ) from e
        return cls(data)

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            LexicalError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise LexicalError(
                f"attempted to read past end of source at position {self.position}",
                self.line,
                self.column,
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        """Checks if the stream has consumed all characters."""
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token in the TOYC language.

    Attributes:
        type (str): The token type (e.g. 'IDENT', 'NUMBER', 'EOF').
        value (str): The identifier name, digits, or unknown character;
            empty for keywords, fixed symbols and EOF.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    type: str
    value: str
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"


class Lexer:
    """Lexical analyzer for the TOYC language.

    Tokens are produced on demand by `next_token()`; iterating the lexer yields
    every remaining token up to and including EOF.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
        max_len (int): Longest identifier or number accepted.
    """

    def __init__(self, stream: CharacterStream, max_len: int = MAX_LEXEME_LEN) -> None:
        if max_len < 1:
            raise ValueError(f"max_len must be positive, got {max_len}")
        self.stream = stream
        self.max_len = max_len

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek().isspace():
            self.advance()

    def read_run(self, accept: str, line: int, col: int) -> str:
        """Consumes a maximal run of characters satisfying `accept`.

        Args:
            accept: "word" for identifier characters, "digit" for ASCII digits.
            line: Line of the run's first character, for error reporting.
            col: Column of the run's first character, for error reporting.

        Raises:
            LexicalError: As soon as the run grows past `max_len`.
        """
        run = ""
        while not self.stream.end_of_file():
            ch = self.peek()
            if accept == "word":
                ok = ch.isalnum() or ch == "_"
            else:
                ok = ch in "0123456789"
            if not ok:
                break
            if len(run) == self.max_len:
                raise LexicalError(
                    f"lexeme {run[:16]!r}... exceeds maximum length of {self.max_len}",
                    line,
                    col,
                )
            run += self.advance()
        return run

    def match_operator(self) -> Token | None:
        """Attempts to match the longest symbol at the current position.

        Fixed-symbol tokens carry no text; their type identifies them.
        """
        line, col = self.stream.line, self.stream.column
        for size in (2, 1):
            candidate = "".join(self.stream.peek(i) for i in range(size))
            # peek() returns "" past the end, so a short candidate is no match
            if len(candidate) == size and candidate in symbol_tokens:
                for _ in range(size):
                    self.advance()
                return Token(symbol_tokens[candidate], "", line, col)
        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexicalError: If an identifier or number exceeds `max_len`.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return Token(EOF, "", self.stream.line, self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Identifier or keyword
        if ch.isalpha() or ch == "_":
            word = self.read_run("word", line, col)
            if word in keyword_tokens:
                return Token(keyword_tokens[word], "", line, col)
            return Token(IDENT, word, line, col)

        # 2. Number
        if ch in "0123456789":
            return Token(NUMBER, self.read_run("digit", line, col), line, col)

        # 3. Symbol
        token = self.match_operator()
        if token:
            return token

        # 4. Unknown character, left for the parser to reject
        return Token(UNKNOWN, self.advance(), line, col)


__all__ = ["CharacterStream", "Lexer", "Token", "token_hashmap"]
