"""
Interactive token printer for Monkey.

Reads a line, runs it through a fresh scanner and prints every token on its
own line. Nothing is parsed or evaluated.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .lexer import Lexer, LexerError, tokenize_file


PROMPT = "λ >> "


class Repl:
    """Read-tokenize-print loop."""

    def __init__(self, lexer: Optional[Lexer] = None, prompt: str = PROMPT):
        self.lexer = lexer or Lexer()
        self.prompt = prompt

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        """Loop until the input stream is exhausted."""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout

        while True:
            stdout.write(self.prompt)
            stdout.flush()

            line = stdin.readline()
            if not line:
                stdout.write("\n")
                break

            for token in self.lexer.tokenize(line, "<stdin>"):
                print(token, file=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""

    parser = argparse.ArgumentParser(
        description="Print the tokens of Monkey source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey-repl                     # Interactive prompt
    monkey-repl --prompt '> '       # Custom prompt
    monkey-repl program.monkey      # Tokenize a file
        """
    )
    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize instead of starting the prompt')
    parser.add_argument('--prompt', default=PROMPT,
                        help='Prompt shown before each line (default: %(default)r)')

    args = parser.parse_args(argv)

    if args.file:
        try:
            tokens = tokenize_file(args.file)
        except LexerError as e:
            print(e, file=sys.stderr, end="")
            return 1
        except OSError as e:
            print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1

        for token in tokens:
            print(token)
        return 0

    try:
        Repl(prompt=args.prompt).run()
    except KeyboardInterrupt:
        print()
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
