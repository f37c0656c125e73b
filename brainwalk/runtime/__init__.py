"""
brainwalk Runtime Package

The tape, the I/O adapters and the tree-walking evaluator.

Author: xwest
"""

from .tape import Tape, DEFAULT_TAPE_SIZE
from .io import InputSource, BytesInput, StreamInput, OutputSink, StreamOutput
from .evaluator import Evaluator, evaluate
from .errors import InterpreterRuntimeError, TapeOverflowError, InputExhaustedError

__all__ = [
    "Tape",
    "DEFAULT_TAPE_SIZE",
    "InputSource",
    "BytesInput",
    "StreamInput",
    "OutputSink",
    "StreamOutput",
    "Evaluator",
    "evaluate",
    "InterpreterRuntimeError",
    "TapeOverflowError",
    "InputExhaustedError",
]
