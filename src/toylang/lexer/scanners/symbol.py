"""Operator and delimiter scanner mixin."""

from __future__ import annotations

from toylang.tokens import DELIMITERS, OPERATORS, Delimiter, Operator


class SymbolScannerMixin:
    """Mixin providing single-character operator/delimiter scanning."""

    _source: str
    _pos: int

    def _scan_symbol(self, start: int) -> Operator | Delimiter | None:
        """Try to scan the operator or delimiter at ``start``.

        Every symbol in the language is one character, so no further
        lookahead is needed.

        Returns:
            The token if the character is a symbol, None otherwise
            (cursor untouched).
        """
        char = self._source[start]

        operator = OPERATORS.get(char)
        if operator is not None:
            self._pos = start + 1
            return Operator(operator, offset=start, end_offset=start + 1)

        delimiter = DELIMITERS.get(char)
        if delimiter is not None:
            self._pos = start + 1
            return Delimiter(delimiter, offset=start, end_offset=start + 1)

        return None
