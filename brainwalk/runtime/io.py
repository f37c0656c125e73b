"""
Input sources and output sinks used by the evaluator.

An input source hands out one byte per `read_byte()` call and returns None
once it is exhausted. An output sink receives each byte as it is written.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterable, Optional, Union


class InputSource(ABC):
    """Supplies program input one byte at a time."""

    @abstractmethod
    def read_byte(self) -> Optional[int]:
        """Return the next byte, or None when no more input exists."""
        pass


class BytesInput(InputSource):
    """In-memory input, consumed front to back."""

    def __init__(self, data: Union[bytes, str, Iterable[int]] = b""):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = bytes(data)
        self.position = 0

    def read_byte(self) -> Optional[int]:
        if self.position >= len(self.data):
            return None
        byte = self.data[self.position]
        self.position += 1
        return byte

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position


class StreamInput(InputSource):
    """Reads from a binary file-like object such as ``sys.stdin.buffer``."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        chunk = self.stream.read(1)
        if not chunk:
            return None
        return chunk[0]


class OutputSink(ABC):
    """Receives output bytes in execution order."""

    @abstractmethod
    def write_byte(self, value: int):
        pass


class StreamOutput(OutputSink):
    """Writes each byte straight through to a binary stream and flushes it."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_byte(self, value: int):
        self.stream.write(bytes((value,)))
        self.stream.flush()


def as_input_source(value: Union[InputSource, bytes, str, None]) -> InputSource:
    """Wrap raw bytes/str (or nothing) in a BytesInput; pass sources through."""
    if isinstance(value, InputSource):
        return value
    if value is None:
        return BytesInput(b"")
    return BytesInput(value)
