"""Scanner for the toylang arithmetic-and-assignment language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + dispatch)
└── scanners/            # Category-specific scanners
    ├── integer.py       # Digit runs -> Integer
    ├── identifier.py    # [A-Za-z_][A-Za-z0-9_]* -> Identifier
    └── symbol.py        # + - * / = ( ) ; -> Operator / Delimiter

Usage:
    >>> from toylang.lexer import Scanner
    >>> Scanner("1 + 2;").scan_all()
    [Integer(1), Operator(Plus), Integer(2), Delimiter(Semicolon), EndOfInput]

"""

from toylang.lexer.core import Scanner

__all__ = ["Scanner"]
