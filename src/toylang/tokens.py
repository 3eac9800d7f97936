"""Token definitions for the toylang scanner.

The scanner produces a list of Token objects that a parser would consume.
Tokens form a closed hierarchy with an enum discriminant:

Token (base)
├── Integer      123
├── Identifier   foo, _x, bar42
├── Operator     + - * / =
├── Delimiter    ( ) ;
└── EndOfInput   (sentinel, always last)

Each token remembers the half-open span of source characters it consumed
(``offset``/``end_offset``). Spans are excluded from equality, so tests and
consumers compare tokens by classification and payload only.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
The kind enums are inherently immutable.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TokenType(Enum):
    """Discriminant for the token hierarchy."""

    INTEGER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    DELIMITER = auto()
    EOF = auto()


class _SymbolKind(Enum):
    """Shared accessors for single-character token kinds."""

    @property
    def symbol(self) -> str:
        """The source character for this kind."""
        return self.value

    @property
    def label(self) -> str:
        """CamelCase name used in debug output (``LEFT_PARENTHESIS`` -> ``LeftParenthesis``)."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class OperatorKind(_SymbolKind):
    """Operator classification. No precedence or associativity at this layer."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUALS = "="


class DelimiterKind(_SymbolKind):
    """Delimiter classification."""

    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"
    SEMICOLON = ";"


# Single-character lookup tables used by the symbol scanner
OPERATORS: dict[str, OperatorKind] = {kind.symbol: kind for kind in OperatorKind}
DELIMITERS: dict[str, DelimiterKind] = {kind.symbol: kind for kind in DelimiterKind}


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Attributes:
        offset: Start position of the token in the source (character index)
        end_offset: Position one past the last consumed character

    """

    type: ClassVar[TokenType]

    offset: int = field(default=0, kw_only=True, compare=False, hash=False)
    end_offset: int = field(default=0, kw_only=True, compare=False, hash=False)

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(offset, end_offset)`` span in the source."""
        return (self.offset, self.end_offset)


@dataclass(frozen=True, slots=True)
class Integer(Token):
    """Integer literal. The value always fits a signed 64-bit integer."""

    type: ClassVar[TokenType] = TokenType.INTEGER

    value: int

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@dataclass(frozen=True, slots=True)
class Identifier(Token):
    """Identifier, holding the source text verbatim."""

    type: ClassVar[TokenType] = TokenType.IDENTIFIER

    text: str

    def __repr__(self) -> str:
        return f"Identifier({self.text!r})"


@dataclass(frozen=True, slots=True)
class Operator(Token):
    type: ClassVar[TokenType] = TokenType.OPERATOR

    kind: OperatorKind

    def __repr__(self) -> str:
        return f"Operator({self.kind.label})"


@dataclass(frozen=True, slots=True)
class Delimiter(Token):
    type: ClassVar[TokenType] = TokenType.DELIMITER

    kind: DelimiterKind

    def __repr__(self) -> str:
        return f"Delimiter({self.kind.label})"


@dataclass(frozen=True, slots=True)
class EndOfInput(Token):
    """End-of-input sentinel. Its span is empty and sits at the end of the source."""

    type: ClassVar[TokenType] = TokenType.EOF

    def __repr__(self) -> str:
        return "EndOfInput"
