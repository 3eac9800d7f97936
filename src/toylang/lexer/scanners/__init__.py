"""Category-specific scanners for the toylang scanner.

Each scanner is a mixin that consumes one token category starting at a
given position and moves the cursor past it.
"""

from __future__ import annotations

from toylang.lexer.scanners.identifier import IdentifierScannerMixin
from toylang.lexer.scanners.integer import INT64_MAX, IntegerScannerMixin
from toylang.lexer.scanners.symbol import SymbolScannerMixin

__all__ = [
    "INT64_MAX",
    "IdentifierScannerMixin",
    "IntegerScannerMixin",
    "SymbolScannerMixin",
]
