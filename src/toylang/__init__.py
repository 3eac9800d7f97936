"""
toylang: tokenizer for a tiny arithmetic-and-assignment language

Integers, ASCII identifiers, the operators ``+ - * / =`` and the delimiters
``( ) ;``. Whitespace separates tokens and is otherwise ignored.

Quick Start:
    >>> from toylang import scan
    >>> scan("x = (1 + 2) * y;")
    [Identifier('x'), Operator(Equals), Delimiter(LeftParenthesis), Integer(1), Operator(Plus), Integer(2), Delimiter(RightParenthesis), Operator(Multiply), Identifier('y'), Delimiter(Semicolon), EndOfInput]

    >>> # Or drive the scanner one token at a time
    >>> from toylang import Scanner
    >>> scanner = Scanner("a;")
    >>> scanner.produce_next_token()
    Identifier('a')

Command line:
    toylang scan program.toy
"""

from toylang.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from toylang.errors import (
    InvalidCharacterError,
    LexError,
    NumericLiteralOverflowError,
    ToyError,
)
from toylang.lexer import Scanner
from toylang.tokens import (
    Delimiter,
    DelimiterKind,
    EndOfInput,
    Identifier,
    Integer,
    Operator,
    OperatorKind,
    Token,
    TokenType,
)

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan source into a list of tokens ending with EndOfInput.

    Args:
        source: Program source text
        source_file: Optional source file path for error messages
        config: Scan configuration for this call (uses the active one if None)

    Returns:
        All tokens, the last one being EndOfInput

    Raises:
        LexError: On the first lexical error (no partial result)

    Example:
        >>> scan("1 + 2;")
        [Integer(1), Operator(Plus), Integer(2), Delimiter(Semicolon), EndOfInput]
    """
    if config is None:
        return Scanner(source, source_file).scan_all()

    with scan_config_context(config):
        scanner = Scanner(source, source_file)
    return scanner.scan_all()


__all__ = [
    # Main API
    "scan",
    "Scanner",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "ToyError",
    "LexError",
    "InvalidCharacterError",
    "NumericLiteralOverflowError",
    # Tokens
    "Token",
    "TokenType",
    "Integer",
    "Identifier",
    "Operator",
    "OperatorKind",
    "Delimiter",
    "DelimiterKind",
    "EndOfInput",
    "__version__",
]
