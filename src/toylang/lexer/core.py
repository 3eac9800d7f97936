"""Single-pass scanner with one character of lookahead.

Each call to ``produce_next_token`` skips whitespace, looks at exactly one
character, and dispatches to the scanner mixin for that category. Every
branch that returns a token other than EndOfInput advances the cursor by at
least one character, so a scan always terminates in O(n).

No regex in the hot path. No backtracking.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from toylang.charsets import ASCII_DIGITS, IDENTIFIER_START, is_whitespace
from toylang.config import get_scan_config
from toylang.errors import InvalidCharacterError, LexError
from toylang.lexer.scanners import (
    IdentifierScannerMixin,
    IntegerScannerMixin,
    SymbolScannerMixin,
)
from toylang.tokens import EndOfInput, Token, TokenType
from toylang.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    IntegerScannerMixin,
    IdentifierScannerMixin,
    SymbolScannerMixin,
):
    """Tokenizer for the toy arithmetic-and-assignment language.

    Usage:
        >>> scanner = Scanner("x = 1 + 2;")
        >>> scanner.scan_all()
        [Identifier('x'), Operator(Equals), Integer(1), Operator(Plus), Integer(2), Delimiter(Semicolon), EndOfInput]

    Errors are fatal: the first character that matches no rule raises
    InvalidCharacterError and the cursor stays on it.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
        "_unicode_whitespace",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        The active ScanConfig is read once here.

        Args:
            source: Program source text
            source_file: Optional source file path for error messages
        """
        config = get_scan_config()

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._unicode_whitespace = config.unicode_whitespace

    @property
    def source(self) -> str:
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def position(self) -> int:
        """Cursor offset into the source. Never decreases."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def produce_next_token(self) -> Token:
        """Scan and return the next token.

        Once the end of the source is reached, every further call returns
        EndOfInput without moving the cursor.

        Raises:
            InvalidCharacterError: The current character starts no token.
            NumericLiteralOverflowError: An integer literal exceeds 64 bits.
        """
        self._skip_whitespace()

        start = self._pos
        if start >= self._source_len:
            return EndOfInput(offset=start, end_offset=start)

        char = self._source[start]

        # Digits first; a leading underscore goes to the identifier path
        if char in ASCII_DIGITS:
            return self._scan_integer(start)

        if char in IDENTIFIER_START:
            return self._scan_identifier(start)

        token = self._scan_symbol(start)
        if token is None:
            raise InvalidCharacterError(char, start, self._source_file)
        return token

    def scan_all(self) -> list[Token]:
        """Scan the rest of the source into a list ending with EndOfInput.

        Complexity: O(n) where n = len(source)

        Raises:
            LexError: On the first lexical error. Tokens scanned before the
                error are not returned.
        """
        tokens: list[Token] = []
        try:
            while True:
                token = self.produce_next_token()
                tokens.append(token)
                if token.type is TokenType.EOF:
                    break
        except LexError as e:
            logger.debug("Scan of %s stopped: %s", self._describe_source(), e.message)
            raise

        logger.debug("Scanned %d tokens from %s", len(tokens), self._describe_source())
        return tokens

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Move the cursor past all whitespace."""
        source = self._source
        pos = self._pos
        while pos < self._source_len and is_whitespace(
            source[pos], unicode=self._unicode_whitespace
        ):
            pos += 1
        self._pos = pos

    def _describe_source(self) -> str:
        return self._source_file or "<string>"
