"""
Token definitions for the Monkey lexer.

This module defines every token kind the lexer can produce:
- Symbols (punctuation and operators, no attached text)
- Literals (identifiers and integers, carry the matched text)
- Keywords (reserved identifier-shaped words)
- Illegal (anything the lexer does not recognize)

A token kind is a small tagged union: a category plus the variant enum
member for that category.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional, Union


class SymbolKind(Enum):
    """Fixed punctuation and operators."""

    # Single character
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    LT = auto()                     # <
    GT = auto()                     # >
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # Two character
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=


class LiteralKind(Enum):
    """Token kinds that carry their source text."""
    IDENTIFIER = auto()             # x, add, foo_bar1
    INTEGER = auto()                # 0, 42


class KeywordKind(Enum):
    """Reserved words."""
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


class TokenCategory(Enum):
    SYMBOL = auto()
    LITERAL = auto()
    KEYWORD = auto()
    ILLEGAL = auto()


Variant = Union[SymbolKind, LiteralKind, KeywordKind]

_VARIANT_TYPES = {
    TokenCategory.SYMBOL: SymbolKind,
    TokenCategory.LITERAL: LiteralKind,
    TokenCategory.KEYWORD: KeywordKind,
}


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


@dataclass(frozen=True)
class TokenKind:
    """
    Kind of a token: one of Symbol(...), Literal(...), Keyword(...) or Illegal.

    The variant must be a member of the enum that belongs to the category;
    ILLEGAL has no variant.
    """
    category: TokenCategory
    variant: Optional[Variant] = None

    def __post_init__(self):
        expected = _VARIANT_TYPES.get(self.category)
        if expected is None:
            if self.variant is not None:
                raise ValueError("Illegal token kind takes no variant")
        elif not isinstance(self.variant, expected):
            raise ValueError(
                f"{self.category.name} token kind needs a {expected.__name__}, "
                f"got {self.variant!r}"
            )

    @classmethod
    def symbol(cls, kind: SymbolKind) -> "TokenKind":
        return cls(TokenCategory.SYMBOL, kind)

    @classmethod
    def literal(cls, kind: LiteralKind) -> "TokenKind":
        return cls(TokenCategory.LITERAL, kind)

    @classmethod
    def keyword(cls, kind: KeywordKind) -> "TokenKind":
        return cls(TokenCategory.KEYWORD, kind)

    @classmethod
    def illegal(cls) -> "TokenKind":
        return cls(TokenCategory.ILLEGAL)

    def __str__(self) -> str:
        category = _camel(self.category.name)
        if self.variant is None:
            return category
        return f"{category}({_camel(self.variant.name)})"

    def __repr__(self) -> str:
        return f"TokenKind.{self}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token of the Monkey language.

    `text` is only set for literal tokens. `line` is zero-based and refers to
    the line holding the token's first character. `start`/`end` locate the
    token in the source (half-open) and are ignored by equality.
    """
    kind: TokenKind
    text: Optional[str]
    line: int
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.text is not None:
            return f"{self.kind} {self.text!r} [line {self.line}]"
        return f"{self.kind} [line {self.line}]"

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.line})"

    @property
    def is_symbol(self) -> bool:
        return self.kind.category is TokenCategory.SYMBOL

    @property
    def is_literal(self) -> bool:
        """Check if this token carries source text."""
        return self.kind.category is TokenCategory.LITERAL

    @property
    def is_keyword(self) -> bool:
        return self.kind.category is TokenCategory.KEYWORD

    @property
    def is_identifier(self) -> bool:
        return self.kind.variant is LiteralKind.IDENTIFIER

    @property
    def is_illegal(self) -> bool:
        return self.kind.category is TokenCategory.ILLEGAL


@dataclass(frozen=True)
class TokenMatch:
    """
    Classifier answer: the kind of token starting at some offset and the
    offset just past its end. Holds no text.
    """
    kind: TokenKind
    end: int

    def token(self, text: Optional[str], line: int, start: int) -> Token:
        return Token(self.kind, text, line, start, self.end)


ILLEGAL = TokenKind.illegal()

# Lookup tables used by the classifier

# Every character that can start a symbol
SYMBOL_CHARS = "=+-!*/<>,;(){}"

SYMBOLS = {
    "=": TokenKind.symbol(SymbolKind.ASSIGN),
    "+": TokenKind.symbol(SymbolKind.PLUS),
    "-": TokenKind.symbol(SymbolKind.MINUS),
    "!": TokenKind.symbol(SymbolKind.BANG),
    "*": TokenKind.symbol(SymbolKind.ASTERISK),
    "/": TokenKind.symbol(SymbolKind.SLASH),
    "<": TokenKind.symbol(SymbolKind.LT),
    ">": TokenKind.symbol(SymbolKind.GT),
    ",": TokenKind.symbol(SymbolKind.COMMA),
    ";": TokenKind.symbol(SymbolKind.SEMICOLON),
    "(": TokenKind.symbol(SymbolKind.LPAREN),
    ")": TokenKind.symbol(SymbolKind.RPAREN),
    "{": TokenKind.symbol(SymbolKind.LBRACE),
    "}": TokenKind.symbol(SymbolKind.RBRACE),
}

# Checked before SYMBOLS at the same position
MULTI_CHAR_SYMBOLS = {
    "==": TokenKind.symbol(SymbolKind.EQUAL),
    "!=": TokenKind.symbol(SymbolKind.NOT_EQUAL),
}

KEYWORDS = {
    "fn": TokenKind.keyword(KeywordKind.FUNCTION),
    "let": TokenKind.keyword(KeywordKind.LET),
    "true": TokenKind.keyword(KeywordKind.TRUE),
    "false": TokenKind.keyword(KeywordKind.FALSE),
    "if": TokenKind.keyword(KeywordKind.IF),
    "else": TokenKind.keyword(KeywordKind.ELSE),
    "return": TokenKind.keyword(KeywordKind.RETURN),
}
