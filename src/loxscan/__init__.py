"""Lexical scanner for the Lox scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.scanner import ScanResult

__version__ = "0.1.0"


def scan(source: str, filename: str = "input.lox") -> ScanResult:
    """Scan Lox source into tokens and diagnostics."""
    from loxscan.scanner import scan as _scan

    return _scan(source, filename)
