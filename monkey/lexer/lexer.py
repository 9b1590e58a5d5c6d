"""
Monkey Lexer - turns source text into tokens

Two pieces: a TokenClassifier that answers "what token starts at this
offset, and where does it end?" without touching any state, and a Scanner
that walks one input string with it, skipping whitespace and counting
lines as it goes.

An unrecognized character ends the scan: one Illegal token is produced and
the rest of the input is dropped.
"""

import re
from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenKind, TokenMatch, TokenCategory, LiteralKind, ILLEGAL,
    SYMBOL_CHARS, SYMBOLS, MULTI_CHAR_SYMBOLS, KEYWORDS,
)
from .errors import LexerError, create_illegal_character_error


# str.isspace() accepts the ASCII information separators; they are not
# whitespace in Monkey source
NON_WHITESPACE_SEPARATORS = "\x1c\x1d\x1e\x1f"


class TokenClassifier:
    """
    Stateless token matching rules.

    Rules are tried in priority order: symbols (two-character operators
    before their one-character prefixes), then the identifier pattern with
    keyword resolution, then the integer pattern. Compiled patterns live on
    the class and are shared by every instance.
    """

    IDENTIFIER_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9_]*')
    INTEGER_PATTERN = re.compile(r'[0-9]+')

    # Tried in this order, first match wins
    WORD_PATTERNS = (
        (LiteralKind.IDENTIFIER, IDENTIFIER_PATTERN),
        (LiteralKind.INTEGER, INTEGER_PATTERN),
    )

    def match(self, source: str, start: int) -> Optional[TokenMatch]:
        """Classify the token starting at `start`, if any."""
        if start >= len(source):
            return None
        return (self.match_symbol(source, start, source[start])
                or self.match_word(source, start))

    def match_symbol(self, source: str, start: int, char: str) -> Optional[TokenMatch]:
        """
        Match punctuation at `start`, where `char` is the character found there.

        Only looks further when `char` is itself a symbol character, so the
        two-character check can never fire on anything else.
        """
        if len(char) != 1 or char not in SYMBOL_CHARS:
            return None

        for pattern, kind in MULTI_CHAR_SYMBOLS.items():
            if pattern[0] == char and source.startswith(pattern, start):
                return TokenMatch(kind, start + len(pattern))

        return TokenMatch(SYMBOLS[char], start + 1)

    def match_word(self, source: str, start: int) -> Optional[TokenMatch]:
        """Match an identifier, keyword or integer at `start`."""
        for literal_kind, pattern in self.WORD_PATTERNS:
            match = pattern.match(source, start)
            if match is None:
                continue

            end = match.end()
            if literal_kind is LiteralKind.IDENTIFIER:
                # Whole-token comparison: "lettuce" stays an identifier
                keyword = KEYWORDS.get(match.group(0))
                if keyword is not None:
                    return TokenMatch(keyword, end)

            return TokenMatch(TokenKind.literal(literal_kind), end)

        return None


class Scanner:
    """
    Lazy, one-shot token stream over a single input string.

    Each call to next_token() (or next() on the iterator) does just enough
    work to produce one token. Once the stream is exhausted, either at the
    end of input or after an Illegal token, it stays exhausted.
    """

    def __init__(self, source: str, classifier: TokenClassifier, filename: str = "<unknown>"):
        self.source = source
        self.classifier = classifier
        self.filename = filename
        self.pos = 0
        self.line = 0
        self.done = False
        self.errors: List[LexerError] = []

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """Produce the next token, or None when the stream is finished."""
        if self.done:
            return None

        char = self._skip_whitespace()
        match = None
        if char is not None:
            match = self.classifier.match_symbol(self.source, self.pos, char)
            if match is None:
                match = self.classifier.match_word(self.source, self.pos)

        if match is not None:
            return self._produce(match)

        return self._illegal_or_none()

    def _skip_whitespace(self) -> Optional[str]:
        """Move past whitespace and return the first other character, if any."""
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if not char.isspace() or char in NON_WHITESPACE_SEPARATORS:
                return char
            if char == '\n':
                self.line += 1
            self.pos += 1
        return None

    def _produce(self, match: TokenMatch) -> Token:
        start = self.pos
        self.pos = match.end

        # Only literals carry their text
        text = None
        if match.kind.category is TokenCategory.LITERAL:
            text = self.source[start:match.end]

        return match.token(text, self.line, start)

    def _illegal_or_none(self) -> Optional[Token]:
        """Finish the stream, emitting one Illegal token if input is left over."""
        self.done = True
        if self.pos >= len(self.source):
            return None

        start = self.pos
        self.errors.append(create_illegal_character_error(
            self.source[start], self.line, start, self.filename
        ))
        # Fail fast: the rest of the input is not scanned
        self.pos = len(self.source)
        return Token(ILLEGAL, None, self.line, start, self.pos)

    def has_errors(self) -> bool:
        """Check if the scan hit an illegal character."""
        return len(self.errors) > 0


class Lexer:
    """
    Monkey lexical analyzer.

    Holds the matching rules; every call to tokenize() starts an independent
    Scanner, so one Lexer can serve any number of inputs.
    """

    def __init__(self, classifier: Optional[TokenClassifier] = None):
        self.classifier = classifier or TokenClassifier()

    def tokenize(self, source: str, filename: str = "<unknown>") -> Scanner:
        """
        Start scanning `source`.

        Returns:
            Scanner yielding tokens on demand
        """
        return Scanner(source, self.classifier, filename)

    def match_token(self, source: str, start: int) -> Optional[TokenMatch]:
        return self.classifier.match(source, start)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the source contains an illegal character
    """
    scanner = Lexer().tokenize(source, filename)
    tokens = list(scanner)

    if scanner.has_errors():
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If the file contains an illegal character
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
