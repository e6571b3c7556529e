"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # fooVar
    STRING = auto()  # "foobar"
    NUMBER = auto()  # 42, 4.2

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# Reserved spellings. Read-only so no scan can alter another's view.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)

# Lexemes that are exactly one character and need no lookahead.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
)

# Operators that become a two-character token when followed by "=".
# Maps the first character to (alone, with "=").
EQUAL_SUFFIX_TOKENS: Mapping[str, tuple[TokenType, TokenType]] = MappingProxyType(
    {
        "!": (TokenType.BANG, TokenType.BANG_EQUAL),
        "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
        "<": (TokenType.LESS, TokenType.LESS_EQUAL),
        ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    }
)

LiteralValue = str | float | None


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based code point offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned lexeme.

    ``literal`` holds the eagerly evaluated value: the text between the
    quotes for STRING, a float for NUMBER, and None for every other type.
    """

    type: TokenType
    lexeme: str
    literal: LiteralValue
    span: Span

    @property
    def line(self) -> int:
        """Line on which the lexeme begins."""
        return self.span.start.line

    def __str__(self) -> str:
        literal = "null" if self.literal is None else str(self.literal)
        return f"{self.type.name} {self.lexeme} {literal}"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch can start an identifier: [a-zA-Z_]."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_alpha_numeric(ch: str) -> bool:
    """Return True if ch can continue an identifier: [a-zA-Z0-9_]."""
    return is_alpha(ch) or is_digit(ch)
