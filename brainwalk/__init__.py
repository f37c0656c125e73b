"""
brainwalk Interpreter Package

A tree-walking interpreter for the eight-command tape language. Source text
flows through three stages, each consuming the previous one's output:

Architecture:
    brainwalk/
    ├── lexer/           # Source text -> primitive operations
    ├── parser/          # Operations -> nested instruction tree
    └── runtime/         # Tape, I/O and the tree-walking evaluator

Author: xwest
License: MIT
"""

import logging

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@brainwalk.org"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .errors import BrainwalkError, ConfigurationError, Diagnostic
from .lexer import Lexer, OpCode, Token, lex
from .parser import Parser, ParseError, parse, flatten, to_source
from .runtime import (
    Tape, Evaluator, BytesInput, StreamInput, StreamOutput,
    TapeOverflowError, InputExhaustedError,
)
from .config import InterpreterConfig
from .pipeline import run_source, run_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",
    "Tape",
    "InterpreterConfig",

    # Convenience functions
    "lex",
    "parse",
    "flatten",
    "to_source",
    "run_source",
    "run_file",

    # Tokens and I/O
    "OpCode",
    "Token",
    "BytesInput",
    "StreamInput",
    "StreamOutput",

    # Errors
    "BrainwalkError",
    "ConfigurationError",
    "Diagnostic",
    "ParseError",
    "TapeOverflowError",
    "InputExhaustedError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
