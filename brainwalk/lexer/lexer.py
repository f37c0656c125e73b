"""
brainwalk Lexer - turns raw program text into primitive operations

Only the eight command characters mean anything; everything else
(whitespace, newlines, prose) is skipped without complaint, so the lexer
has no error path at all.

xwest
"""

import logging
from typing import List, Iterator

from .tokens import Token, OpCode, SourceLocation, SYMBOL_TABLE


logger = logging.getLogger(__name__)


class Lexer:
    """
    brainwalk lexical analyzer.

    Converts source code text into a list of tokens, tracking line and
    column for each one so later stages can report precise locations.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete program text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, one per recognized character, in source order
        """
        self.tokens = list(self._scan())
        logger.debug(
            "Lexed %d operations from %d characters of %s",
            len(self.tokens), len(self.source), self.filename
        )
        return self.tokens

    def operations(self) -> List[OpCode]:
        """Tokenize and return only the operation tags."""
        return [token.type for token in self.tokenize()]

    def _scan(self) -> Iterator[Token]:
        line = 1
        column = 1

        for offset, char in enumerate(self.source):
            op = SYMBOL_TABLE.get(char)
            if op is not None:
                yield Token(op, char, SourceLocation(self.filename, line, column, offset))

            if char == '\n':
                line += 1
                column = 1
            else:
                column += 1


def lex(source: str, filename: str = "<unknown>") -> List[OpCode]:
    """Convenience wrapper returning the operation sequence for `source`."""
    return Lexer(source, filename).operations()
