"""Exception classes for toylang.

Provides standardized exceptions for error handling throughout toylang.
"""

from __future__ import annotations


class ToyError(Exception):
    """Base exception for all toylang errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(ToyError):
    """Error during scanning.

    Raised when the scanner cannot classify the input at the cursor.
    Scanning stops at the first LexError; there is no recovery.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            offset: Character offset where the error occurred (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        # Build formatted message
        text = message
        if offset is not None:
            text += f" at offset {offset}"
        if source_file:
            text = f"{source_file}: {text}"

        super().__init__(text)


class InvalidCharacterError(LexError):
    """A character matched none of the classification rules."""

    def __init__(self, character: str, offset: int, source_file: str | None = None) -> None:
        self.character = character
        super().__init__(f"invalid character {character!r}", offset, source_file)


class NumericLiteralOverflowError(LexError):
    """An integer literal does not fit a signed 64-bit integer."""

    def __init__(self, literal: str, offset: int, source_file: str | None = None) -> None:
        """Initialize overflow error.

        Args:
            literal: The digit run as written in the source
            offset: Offset of the first digit
            source_file: Path to source file (optional)
        """
        self.literal = literal
        super().__init__(
            f"integer literal {literal} does not fit in 64 bits", offset, source_file
        )
