"""Scanner diagnostics with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from loxscan.tokens import Position, Span


class DiagnosticKind(Enum):
    UNEXPECTED_CHARACTER = auto()
    UNTERMINATED_STRING = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal scanning problem.

    Diagnostics are collected while scanning and returned alongside the
    tokens; they are never raised. ``span`` starts where the offending
    lexeme started and ``lexeme`` is the text that was skipped.
    """

    kind: DiagnosticKind
    message: str
    span: Span
    lexeme: str
    source: str = field(repr=False, compare=False)

    @property
    def position(self) -> Position:
        return self.span.start

    @property
    def line(self) -> int:
        return self.span.start.line

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def format(self, filename: str = "input.lox") -> str:
        """Render the diagnostic with the offending source line underlined."""
        col = self.span.start.column

        # Lines end only at "\n", the same rule the scanner counts by.
        line_start = self.span.start.offset - (col - 1)
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[line_start:line_end].rstrip("\r")

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
