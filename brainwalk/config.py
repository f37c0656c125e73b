"""
Interpreter configuration.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .parser.parser import DEFAULT_MAX_DEPTH
from .runtime.tape import DEFAULT_TAPE_SIZE, Tape


@dataclass
class InterpreterConfig:
    """Settings for one interpreter run."""
    tape_size: int = DEFAULT_TAPE_SIZE
    initial_pointer: Optional[int] = None  # None means the tape midpoint
    max_nesting_depth: int = DEFAULT_MAX_DEPTH
    stream_output: bool = True

    def __post_init__(self):
        if self.tape_size < 1:
            raise ConfigurationError(
                f"Tape size must be at least 1, got {self.tape_size}",
                help_text="Pass a positive cell count."
            )
        if self.initial_pointer is not None and not 0 <= self.initial_pointer < self.tape_size:
            raise ConfigurationError(
                f"Initial pointer {self.initial_pointer} is outside a tape of {self.tape_size} cells",
                help_text=f"Choose a pointer between 0 and {self.tape_size - 1}."
            )
        if self.max_nesting_depth < 0:
            raise ConfigurationError(
                f"Maximum nesting depth cannot be negative, got {self.max_nesting_depth}"
            )

    @property
    def resolved_pointer(self) -> int:
        if self.initial_pointer is None:
            return self.tape_size // 2
        return self.initial_pointer

    def create_tape(self) -> Tape:
        return Tape(self.tape_size, self.resolved_pointer)
