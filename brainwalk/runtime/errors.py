"""
Runtime error handling for brainwalk.

Both runtime errors halt execution immediately at the offending
instruction. Cell arithmetic wraparound is defined behaviour, not an error.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import SourceLocation
from ..errors import BrainwalkError


class InterpreterRuntimeError(BrainwalkError):
    """Base class for errors raised while executing an instruction tree."""

    def __init__(self, message: str, pointer: int,
                 location: Optional[SourceLocation] = None, **kwargs):
        super().__init__(message, location=location, **kwargs)
        self.pointer = pointer


class TapeOverflowError(InterpreterRuntimeError):
    """The data pointer would leave the tape. Underflow reports the same way."""

    def __init__(self, pointer: int, target: int, tape_size: int,
                 location: Optional[SourceLocation] = None):
        super().__init__(
            f"Tape overflow: pointer cannot move from cell {pointer} to cell {target}",
            pointer=pointer,
            location=location,
            code="R001",
            help_text=f"The tape holds cells 0 to {tape_size - 1}.",
            suggestions=["Start the pointer elsewhere (--pointer)", "Use a larger tape (--tape-size)"]
        )
        self.target = target
        self.tape_size = tape_size


class InputExhaustedError(InterpreterRuntimeError):
    """A READ instruction found no byte left in the input source."""

    def __init__(self, pointer: int, location: Optional[SourceLocation] = None):
        super().__init__(
            "Input exhausted: no byte available for read",
            pointer=pointer,
            location=location,
            code="R002",
            help_text="The program asked for more input than was supplied.",
            suggestions=["Supply more input (--input or stdin)"]
        )
