"""Lox scanner — converts source text into a flat token stream."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from loxscan.errors import Diagnostic, DiagnosticKind
from loxscan.tokens import (
    EQUAL_SUFFIX_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    LiteralValue,
    Position,
    Span,
    Token,
    TokenType,
    is_alpha,
    is_alpha_numeric,
    is_digit,
)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens and diagnostics from one scan.

    Unpacks as ``tokens, diagnostics = scan(source)``.
    """

    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...]
    filename: str = "input.lox"

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def __iter__(self) -> Iterator[tuple[Token, ...] | tuple[Diagnostic, ...]]:
        yield self.tokens
        yield self.diagnostics

    def format_diagnostics(self) -> str:
        """Render every diagnostic with source context, blank-line separated."""
        return "\n\n".join(d.format(self.filename) for d in self.diagnostics)


class Scanner:
    """Scan Lox source text into Tokens, collecting Diagnostics on the way.

    A Scanner holds the cursor for a single pass over one source text:
    ``_start`` is the first character of the lexeme being recognized and
    ``_current`` the next unconsumed character. Malformed input never stops
    the scan; it is recorded and scanning resumes at the next character.
    """

    def __init__(self, source: str, filename: str = "input.lox") -> None:
        self._source = source
        self._filename = filename
        self._start = 0
        self._current = 0
        self._line = 1
        self._line_start = 0  # offset of the first character on the current line
        self._start_pos = Position(1, 1, 0)
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []
        self._done = False

    def scan(self) -> ScanResult:
        """Scan the full source and return its tokens and diagnostics."""
        if self._done:
            raise RuntimeError("Scanner has already been run; create a new one per source")
        self._done = True

        while not self._is_at_end():
            self._mark_start()
            self._scan_token()

        self._mark_start()
        self._add_token(TokenType.EOF)
        return ScanResult(tuple(self._tokens), tuple(self._diagnostics), self._filename)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _current_pos(self) -> Position:
        return Position(self._line, self._current - self._line_start + 1, self._current)

    def _mark_start(self) -> None:
        self._start = self._current
        self._start_pos = self._current_pos()

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
            self._line_start = self._current
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._advance()
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _add_token(self, tt: TokenType, literal: LiteralValue = None) -> None:
        lexeme = self._source[self._start : self._current]
        span = Span(self._start_pos, self._current_pos())
        self._tokens.append(Token(tt, lexeme, literal, span))

    def _report(self, kind: DiagnosticKind, message: str) -> None:
        lexeme = self._source[self._start : self._current]
        span = Span(self._start_pos, self._current_pos())
        self._diagnostics.append(Diagnostic(kind, message, span, lexeme, self._source))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
            return

        if ch in EQUAL_SUFFIX_TOKENS:
            alone, with_equal = EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(with_equal if self._match("=") else alone)
            return

        if ch == "/":
            if self._match("/"):
                # Comment runs to the end of the line; the newline itself is
                # left for the main loop.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        # Newlines are counted by _advance.
        if ch in " \r\t\n":
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._report(DiagnosticKind.UNEXPECTED_CHARACTER, f"unexpected character {ch!r}")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            self._advance()

        if self._is_at_end():
            self._report(DiagnosticKind.UNTERMINATED_STRING, "unterminated string")
            return

        self._advance()  # closing quote

        # No escape processing: the value is the raw text between the quotes.
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the dot, so
        # "123." is NUMBER followed by DOT.
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, filename: str = "input.lox") -> ScanResult:
    """Convenience function: scan source text and return tokens and diagnostics."""
    return Scanner(source, filename).scan()
