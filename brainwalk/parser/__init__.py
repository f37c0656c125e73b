"""
brainwalk Parser Package

Builds the nested instruction tree from the lexer's flat operation
sequence, resolving bracket pairs into Loop nodes.

Author: xwest
"""

from .ast_nodes import (
    Instruction, InstructionType, InstructionVisitor,
    MoveRight, MoveLeft, Increment, Decrement, Write, Read, Loop,
    flatten, to_source, format_tree,
)
from .parser import Parser, parse, DEFAULT_MAX_DEPTH
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "DEFAULT_MAX_DEPTH",

    # Instruction nodes
    "Instruction", "InstructionType", "InstructionVisitor",
    "MoveRight", "MoveLeft", "Increment", "Decrement", "Write", "Read", "Loop",
    "flatten", "to_source", "format_tree",

    # Error handling
    "ParseError",
]
