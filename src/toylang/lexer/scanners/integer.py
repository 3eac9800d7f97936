"""Integer literal scanner mixin."""

from __future__ import annotations

from toylang.charsets import ASCII_DIGITS
from toylang.errors import NumericLiteralOverflowError
from toylang.tokens import Integer

INT64_MAX = 2**63 - 1

# Digits in INT64_MAX; longer significant runs overflow without parsing
_INT64_MAX_DIGITS = len(str(INT64_MAX))


class IntegerScannerMixin:
    """Mixin providing integer literal scanning."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _source_file: str | None

    def _scan_integer(self, start: int) -> Integer:
        """Scan a maximal run of ASCII digits starting at ``start``.

        Leading zeros are accepted (``"003"`` is ``Integer(3)``).

        Args:
            start: Position of the first digit

        Returns:
            Integer token spanning the whole digit run.

        Raises:
            NumericLiteralOverflowError: Value exceeds 2**63 - 1. The cursor
                stays at ``start``.
        """
        source = self._source
        end = start
        while end < self._source_len and source[end] in ASCII_DIGITS:
            end += 1

        literal = source[start:end]
        # Parse without leading zeros: int() refuses very long digit strings
        digits = literal.lstrip("0") or "0"
        if len(digits) > _INT64_MAX_DIGITS:
            raise NumericLiteralOverflowError(literal, start, self._source_file)

        value = int(digits)
        if value > INT64_MAX:
            raise NumericLiteralOverflowError(literal, start, self._source_file)

        self._pos = end
        return Integer(value, offset=start, end_offset=end)
