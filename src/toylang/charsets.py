"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifiers and integers are ASCII-only. Whitespace may be Unicode-aware
(see ``is_whitespace``).

Usage:
    from toylang.charsets import ASCII_DIGITS

    if char in ASCII_DIGITS:  # O(1) lookup
        ...
"""

import string

from toylang.tokens import DELIMITERS, OPERATORS

ASCII_DIGITS: frozenset[str] = frozenset(string.digits)

ASCII_LETTERS: frozenset[str] = frozenset(string.ascii_letters)

# First character of an identifier
IDENTIFIER_START: frozenset[str] = ASCII_LETTERS | frozenset("_")

# Remaining characters of an identifier
IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | ASCII_DIGITS

# Whitespace when Unicode whitespace is disabled
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Information separators U+001C..U+001F: str.isspace() accepts them but they
# are not Unicode White_Space
INFORMATION_SEPARATORS: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")

# Single-character operators and delimiters
SYMBOL_CHARS: frozenset[str] = frozenset(OPERATORS) | frozenset(DELIMITERS)


def is_whitespace(char: str, *, unicode: bool = True) -> bool:
    """Check if a single character is whitespace.

    With ``unicode=True`` any character with the Unicode White_Space
    property counts (U+00A0, U+3000 and friends). That is ``str.isspace``
    minus the INFORMATION_SEPARATORS. Otherwise only ASCII whitespace counts.

    """
    if unicode:
        return char.isspace() and char not in INFORMATION_SEPARATORS
    return char in ASCII_WHITESPACE
