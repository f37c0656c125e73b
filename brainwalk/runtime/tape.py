"""
Fixed-size byte tape with a bounds-checked data pointer.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import SourceLocation
from .errors import TapeOverflowError


DEFAULT_TAPE_SIZE = 1024


class Tape:
    """
    A fixed row of unsigned 8-bit cells, all starting at zero.

    The tape never grows. Pointer moves are checked against the bounds
    before they happen, so a failed move leaves the pointer where it was.
    """

    def __init__(self, size: int = DEFAULT_TAPE_SIZE, pointer: Optional[int] = None):
        if size < 1:
            raise ValueError(f"tape size must be positive, got {size}")
        if pointer is None:
            pointer = size // 2
        if not 0 <= pointer < size:
            raise ValueError(f"pointer {pointer} is outside a tape of {size} cells")

        self.cells = bytearray(size)
        self.pointer = pointer

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def current(self) -> int:
        """Value of the selected cell."""
        return self.cells[self.pointer]

    @current.setter
    def current(self, value: int):
        self.cells[self.pointer] = value & 0xFF

    def move(self, delta: int, location: Optional[SourceLocation] = None):
        """Move the pointer by `delta` cells, failing if that leaves the tape."""
        target = self.pointer + delta
        if not 0 <= target < len(self.cells):
            raise TapeOverflowError(self.pointer, target, len(self.cells), location)
        self.pointer = target

    def increment(self):
        self.cells[self.pointer] = (self.cells[self.pointer] + 1) % 256

    def decrement(self):
        self.cells[self.pointer] = (self.cells[self.pointer] - 1) % 256

    def snapshot(self, start: int = 0, end: Optional[int] = None) -> bytes:
        """Copy of the cells in [start, end)."""
        return bytes(self.cells[start:end])

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Tape(size={len(self.cells)}, pointer={self.pointer})"
