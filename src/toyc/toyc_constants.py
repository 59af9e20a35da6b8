"""
Token vocabulary for the TOYC language.

Exports:
    - Token type names (INT, IDENT, NUMBER, ...)
    - token_hashmap: keyword and symbol lexemes mapped to their token types
    - STATEMENT_START_TOKENS, FACTOR_TOKENS, ADDITIVE_TOKENS: token groups
      the parser dispatches on
    - MAX_TOKEN_LEN, MAX_LEXEME_LEN: lexeme size bound
"""

INT = "INT"
IDENT = "IDENT"
NUMBER = "NUMBER"
ASSIGN = "ASSIGN"
PLUS = "PLUS"
MINUS = "MINUS"
IF = "IF"
EQUAL = "EQUAL"
LBRACE = "LBRACE"
RBRACE = "RBRACE"
SEMICOLON = "SEMICOLON"
EOF = "EOF"
UNKNOWN = "UNKNOWN"

TOKEN_TYPES: tuple[str, ...] = (
    INT,
    IDENT,
    NUMBER,
    ASSIGN,
    PLUS,
    MINUS,
    IF,
    EQUAL,
    LBRACE,
    RBRACE,
    SEMICOLON,
    EOF,
    UNKNOWN,
)

keyword_tokens: dict[str, str] = {
    "int": INT,
    "if": IF,
}

symbol_tokens: dict[str, str] = {
    "==": EQUAL,
    "=": ASSIGN,
    "+": PLUS,
    "-": MINUS,
    "{": LBRACE,
    "}": RBRACE,
    ";": SEMICOLON,
}

token_hashmap: dict[str, str] = {**keyword_tokens, **symbol_tokens}

# Canonical spelling per token type, used when re-serializing trees.
token_text: dict[str, str] = {v: k for k, v in token_hashmap.items()}

STATEMENT_START_TOKENS: tuple[str, ...] = (INT, IF, IDENT)
FACTOR_TOKENS: tuple[str, ...] = (NUMBER, IDENT)
ADDITIVE_TOKENS: tuple[str, ...] = (PLUS, MINUS)

# Size of the fixed lexeme buffer, terminator included.
MAX_TOKEN_LEN = 100
MAX_LEXEME_LEN = MAX_TOKEN_LEN - 1
