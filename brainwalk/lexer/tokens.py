"""
Token definitions for the brainwalk lexer.

The language has exactly eight primitive operations, one per recognized
source character. Every other character is commentary and never becomes a
token.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class OpCode(Enum):
    """Primitive operations, one per recognized source character."""

    # Pointer movement
    MOVE_RIGHT = auto()             # >
    MOVE_LEFT = auto()              # <

    # Cell arithmetic (wraps modulo 256)
    INCREMENT = auto()              # +
    DECREMENT = auto()              # -

    # I/O
    WRITE = auto()                  # .
    READ = auto()                   # ,

    # Structural markers, consumed by the parser
    LOOP_START = auto()             # [
    LOOP_END = auto()               # ]

    @property
    def symbol(self) -> str:
        """Source character for this operation."""
        return OPCODE_SYMBOLS[self]

    @property
    def is_bracket(self) -> bool:
        return self in (OpCode.LOOP_START, OpCode.LOOP_END)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting so that a fatal parse or runtime error can
    point back at the offending character.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A recognized source character.

    Contains the operation, the lexeme (the raw character) and where it
    was found.
    """
    type: OpCode
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"


# Lookup table used by the lexer
SYMBOL_TABLE: Dict[str, OpCode] = {
    ">": OpCode.MOVE_RIGHT,
    "<": OpCode.MOVE_LEFT,
    "+": OpCode.INCREMENT,
    "-": OpCode.DECREMENT,
    ".": OpCode.WRITE,
    ",": OpCode.READ,
    "[": OpCode.LOOP_START,
    "]": OpCode.LOOP_END,
}

OPCODE_SYMBOLS: Dict[OpCode, str] = {op: char for char, op in SYMBOL_TABLE.items()}
