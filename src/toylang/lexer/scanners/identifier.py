"""Identifier scanner mixin."""

from __future__ import annotations

from toylang.charsets import IDENTIFIER_CHARS
from toylang.tokens import Identifier


class IdentifierScannerMixin:
    """Mixin providing identifier scanning.

    There is no keyword table: every identifier-shaped run becomes an
    Identifier regardless of spelling.

    """

    _source: str
    _source_len: int
    _pos: int

    def _scan_identifier(self, start: int) -> Identifier:
        """Scan an identifier whose first character is at ``start``.

        The caller has already checked the first character against
        IDENTIFIER_START; the rest is a maximal run of IDENTIFIER_CHARS.
        """
        source = self._source
        end = start + 1
        while end < self._source_len and source[end] in IDENTIFIER_CHARS:
            end += 1

        self._pos = end
        return Identifier(source[start:end], offset=start, end_offset=end)
