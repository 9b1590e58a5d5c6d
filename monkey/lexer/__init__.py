"""
Monkey Lexer Package

Lexical analyzer for the Monkey language. Turns source text into a lazy
stream of tokens, tracking the line each token starts on.

Key Features:
- Symbols, identifiers, integer literals and reserved words
- Two-character operators (==, !=) take precedence over their prefixes
- Pull-based scanning: nothing is computed until the next token is requested
- Fail-fast handling of unrecognized characters with structured diagnostics
"""

from .tokens import (
    Token, TokenKind, TokenMatch, TokenCategory,
    SymbolKind, LiteralKind, KeywordKind,
)
from .lexer import Lexer, Scanner, TokenClassifier, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Scanner",
    "TokenClassifier",
    "Token",
    "TokenKind",
    "TokenMatch",
    "TokenCategory",
    "SymbolKind",
    "LiteralKind",
    "KeywordKind",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
