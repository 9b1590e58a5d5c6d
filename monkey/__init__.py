"""
Monkey Interpreter Package

Front end of an interpreter for the Monkey programming language. Only the
lexical stage lives here for now, together with a small REPL that prints
the tokens of each line it reads.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    └── repl.py          # Interactive token printer

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenKind",

    # Version info
    "__version__",
    "__license__",
]
