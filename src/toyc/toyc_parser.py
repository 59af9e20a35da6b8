"""
TOYC Language Parser

Parses TOYC tokens into abstract syntax trees (ASTs).

The parser pulls tokens from a `Lexer` one at a time and keeps exactly one token of
lookahead. Every grammar rule is a method; no rule backtracks, and the current
token's type alone decides which production to take.

Grammar
-------
    Program     := { Statement } EOF
    Statement   := Declaration | Conditional | Assignment
    Declaration := "int" Identifier ";"
    Assignment  := Identifier "=" Expression ";"
    Conditional := "if" "{" Expression "==" Expression "}" "{" Assignment "}"
    Expression  := Factor { ("+" | "-") Factor }
    Factor      := Number | Identifier

Parser Behavior
---------------
- Fail-fast: the first mismatch raises and aborts the whole parse; no partial
  tree is returned and no recovery is attempted.
- `+` and `-` share one precedence tier and associate to the left.
- UNKNOWN tokens are reported as `LexicalError` wherever they are reached.

Entry Points
------------
- `parse()`: Parse a full program into a list of top-level AST nodes.
- `parse_statement()`: Parse a single statement.
- `parse_expression()`: Parse a single additive expression.
- module-level `parse(source)`: Lex and parse a string or readable handle.

Raises
------
ParseError
    When the current token does not match what a grammar rule requires.
LexicalError
    When the lexer rejects the input or an unrecognized character is reached.
"""

from __future__ import annotations

import logging
from typing import IO

from toyc.toyc_ast import ASTNode
from toyc.toyc_constants import (
    ADDITIVE_TOKENS,
    ASSIGN,
    EOF,
    EQUAL,
    FACTOR_TOKENS,
    IDENT,
    IF,
    INT,
    LBRACE,
    MAX_LEXEME_LEN,
    NUMBER,
    PLUS,
    RBRACE,
    SEMICOLON,
    STATEMENT_START_TOKENS,
    UNKNOWN,
    token_text,
)
from toyc.toyc_errors import LexicalError, ParseError
from toyc.toyc_lexer import CharacterStream, Lexer, Token

logger = logging.getLogger(__name__)


class Parser:
    """
    TOYC Parser Class

    Holds the per-parse state: the token source and the single current token.
    A Parser instance is good for one parse; build a new one for each input.

    Attributes
    ----------
    lexer : Lexer
        The token source.
    current : Token
        The one token of lookahead.

    Methods
    -------
    parse() -> list[ASTNode]
        Parse a complete TOYC program.
    parse_statement() -> ASTNode
        Dispatch on the current token to a declaration, conditional or assignment.
    parse_declaration() -> ASTNode
    parse_assignment() -> ASTNode
    parse_conditional() -> ASTNode
    parse_expression() -> ASTNode
    parse_factor() -> ASTNode
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer: Lexer = lexer
        self.current: Token = lexer.next_token()

    @classmethod
    def from_source(
        cls, source: str | IO[str] | IO[bytes], max_len: int = MAX_LEXEME_LEN
    ) -> Parser:
        """Builds a parser over a source string or an open readable handle."""
        if isinstance(source, str):
            stream = CharacterStream(source)
        else:
            stream = CharacterStream.from_file(source)
        return cls(Lexer(stream, max_len=max_len))

    def advance(self) -> Token:
        """Consumes the current token and returns it."""
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    def fail(self, *expected: str) -> ParseError:
        """Builds the error for the current token not being one of `expected`.

        Raises:
            LexicalError: Directly, if the current token is UNKNOWN.
        """
        tok = self.current
        if tok.type == UNKNOWN:
            raise LexicalError(f"unrecognized character {tok.value!r}", tok.line, tok.col)
        return ParseError(expected, tok.type, tok.line, tok.col)

    def expect(self, kind: str) -> Token:
        """Consumes the current token if it has type `kind`, else raises ParseError."""
        if self.current.type == kind:
            return self.advance()
        raise self.fail(kind)

    def parse(self) -> list[ASTNode]:
        """Parse a full TOYC program and return its top-level statements in order."""
        program: list[ASTNode] = []
        while self.current.type != EOF:
            stmt = self.parse_statement()
            logger.debug(
                "parsed %s statement at line %d, col %d", stmt.kind, stmt.line, stmt.col
            )
            program.append(stmt)
        return program

    def parse_statement(self) -> ASTNode:
        kind = self.current.type
        if kind == INT:
            return self.parse_declaration()
        if kind == IF:
            return self.parse_conditional()
        if kind == IDENT:
            return self.parse_assignment()
        raise self.fail(*STATEMENT_START_TOKENS)

    def parse_declaration(self) -> ASTNode:
        """Parse `int NAME ;` into a childless declaration node."""
        self.expect(INT)
        name = self.expect(IDENT)
        self.expect(SEMICOLON)
        return ASTNode("declaration", name.value, line=name.line, col=name.col)

    def parse_assignment(self) -> ASTNode:
        """Parse `NAME = Expression ;`; the expression becomes the right child."""
        name = self.expect(IDENT)
        self.expect(ASSIGN)
        rhs = self.parse_expression()
        self.expect(SEMICOLON)
        return ASTNode("assignment", name.value, right=rhs, line=name.line, col=name.col)

    def parse_conditional(self) -> ASTNode:
        """Parse `if { a == b } { Assignment }`.

        The left child is a "compare" node holding both sides of `==`; the right
        child is the single body assignment.
        """
        if_tok = self.expect(IF)
        self.expect(LBRACE)
        lhs = self.parse_expression()
        eq_tok = self.expect(EQUAL)
        rhs = self.parse_expression()
        self.expect(RBRACE)
        cond = ASTNode(
            "compare",
            token_text[EQUAL],
            left=lhs,
            right=rhs,
            line=eq_tok.line,
            col=eq_tok.col,
        )

        self.expect(LBRACE)
        body = self.parse_assignment()
        self.expect(RBRACE)
        return ASTNode(
            "conditional", "if", left=cond, right=body, line=if_tok.line, col=if_tok.col
        )

    def parse_expression(self) -> ASTNode:
        """Parse a left-associative chain of `+`/`-` over factors."""
        node = self.parse_factor()
        while self.current.type in ADDITIVE_TOKENS:
            op = self.advance()
            kind = "add" if op.type == PLUS else "subtract"
            node = ASTNode(
                kind,
                token_text[op.type],
                left=node,
                right=self.parse_factor(),
                line=op.line,
                col=op.col,
            )
        return node

    def parse_factor(self) -> ASTNode:
        tok = self.current
        if tok.type not in FACTOR_TOKENS:
            raise self.fail(*FACTOR_TOKENS)
        self.advance()
        kind = "number" if tok.type == NUMBER else "identifier"
        return ASTNode(kind, tok.value, line=tok.line, col=tok.col)


def parse(source: str | IO[str] | IO[bytes], max_len: int = MAX_LEXEME_LEN) -> list[ASTNode]:
    """Lex and parse `source` (a string or readable handle) into top-level statements."""
    return Parser.from_source(source, max_len=max_len).parse()


__all__ = ["Parser", "parse"]
