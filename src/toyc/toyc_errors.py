"""
Error types raised while lexing and parsing TOYC source.

Classes:
    ToycError: Base class; carries a message and the 1-based source position.
    LexicalError: Unrecognized character, oversized lexeme, or undecodable input.
    ParseError: Current token does not match what the grammar requires.

Both errors are fatal for the parse that raised them. `ParseError` also derives
from the builtin `SyntaxError`, so existing `except SyntaxError` handlers catch it.
"""


class ToycError(Exception):
    """Base class for all TOYC front-end errors.

    Attributes:
        message (str): Human-readable description without position.
        line (int): 1-based line of the offending input (0 if unknown).
        col (int): 1-based column of the offending input (0 if unknown).
    """

    def __init__(self, message: str, line: int = 0, col: int = 0) -> None:
        self.message = message
        self.line = line
        self.col = col
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.line:
            return f"line {self.line}, col {self.col}: {self.message}"
        return self.message


class LexicalError(ToycError):
    """Raised for input the tokenizer cannot turn into a valid token."""


class ParseError(ToycError, SyntaxError):
    """Raised when a grammar rule finds a token kind it does not accept.

    Attributes:
        expected (tuple[str, ...]): Token types the rule would have accepted.
        actual (str): Token type actually found.
    """

    def __init__(
        self,
        expected: str | tuple[str, ...],
        actual: str,
        line: int = 0,
        col: int = 0,
    ) -> None:
        if isinstance(expected, str):
            expected = (expected,)
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {' or '.join(expected)} but got {actual}", line, col
        )
