"""Human-readable token dump."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from loxscan.tokens import Token


def format_token(token: Token) -> str:
    """Return ``line:col TYPE lexeme literal`` for a single token."""
    start = token.span.start
    return f"{start.line}:{start.column} {token}"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one formatted token per line to *file*."""
    for token in tokens:
        file.write(format_token(token) + "\n")
