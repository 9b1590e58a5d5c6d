"""
Error handling for the Monkey lexer.

The token stream itself never raises: an unrecognized character becomes a
single Illegal token. The scanner also records a LexerError describing the
character so callers that want an exception (tokenize_string, the REPL file
mode) can raise or report it.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A lexer problem with its source position."""
    message: str
    line: int                       # zero-based, like Token.line
    offset: int
    severity: str = "error"         # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    filename: str = "<unknown>"

    @property
    def location(self) -> str:
        # Reported one-based, the way editors count lines
        return f"{self.filename}:{self.line + 1}"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location} (offset {self.offset})\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception describing an unrecognized character in the input.

    Wraps a Diagnostic for reporting.
    """

    def __init__(
        self,
        message: str,
        line: int,
        offset: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        filename: str = "<unknown>",
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            offset=offset,
            severity="error",
            code=code,
            help_text=help_text,
            filename=filename,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Illegal character",
}


def create_illegal_character_error(
    char: str, line: int, offset: int, filename: str = "<unknown>"
) -> LexerError:
    """Create an error for a character no token rule accepts."""
    if char.isascii() and char.isprintable():
        help_text = f"The character '{char}' cannot start a Monkey token."
    else:
        help_text = (
            f"Character U+{ord(char):04X} is outside the ASCII letters, digits "
            f"and punctuation the lexer accepts."
        )
    help_text += " The rest of the input was not scanned."

    return LexerError(
        message=f"{ERROR_CODES['L001']}: {char!r}",
        line=line,
        offset=offset,
        code="L001",
        help_text=help_text,
        filename=filename,
    )
