"""
brainwalk Parser Implementation

Resolves matched brackets in the flat operation sequence into nested Loop
nodes. A single left-to-right scan keeps the currently open loops on a
stack; closing a bracket wraps the collected body in a Loop and hands it to
the enclosing level.

Author: xwest
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..lexer.tokens import Token, OpCode, SourceLocation
from .ast_nodes import Instruction, Loop, LEAF_INSTRUCTIONS
from .errors import (
    create_unbalanced_loop_end_error,
    create_unbalanced_loop_start_error, create_recursion_limit_error
)


logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


class Parser:
    """
    brainwalk bracket-matching parser.

    Accepts tokens from the lexer or bare OpCodes. Tokens give errors and
    instruction nodes a source location; bare OpCodes only give indices.
    """

    def __init__(self, operations: Sequence[Union[Token, OpCode]],
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize parser with an operation sequence.

        Args:
            operations: Tokens (or OpCodes) from the lexer
            max_depth: Deepest loop nesting accepted before giving up
        """
        self.operations: List[OpCode] = []
        self.locations: List[Optional[SourceLocation]] = []
        for op in operations:
            if isinstance(op, Token):
                self.operations.append(op.type)
                self.locations.append(op.location)
            else:
                self.operations.append(op)
                self.locations.append(None)
        self.max_depth = max_depth

    def parse(self) -> List[Instruction]:
        """
        Parse the whole operation sequence in one pass.

        Open loops are kept on an explicit stack, so nesting depth is not
        bounded by the Python stack. Errors are reported in scan order: a
        top-level loop that nests too deep fails when it closes, a stray ']'
        fails where it is found, and a '[' still open at the end fails last.

        Returns:
            Top-level instruction list

        Raises:
            ParseError: on unbalanced brackets or excessive nesting
        """
        program: List[Instruction] = []
        # Each entry is (index of '[', body collected so far)
        open_loops: List[Tuple[int, List[Instruction]]] = []
        too_deep: Optional[int] = None

        for i, op in enumerate(self.operations):
            if op == OpCode.LOOP_START:
                if len(open_loops) == self.max_depth and too_deep is None:
                    too_deep = i
                open_loops.append((i, []))
            elif op == OpCode.LOOP_END:
                if not open_loops:
                    raise create_unbalanced_loop_end_error(i, self.locations[i])
                open_index, body = open_loops.pop()
                loop = Loop(body, self.locations[open_index])
                if open_loops:
                    open_loops[-1][1].append(loop)
                elif too_deep is not None:
                    raise create_recursion_limit_error(too_deep, self.max_depth,
                                                       self.locations[too_deep])
                else:
                    program.append(loop)
            else:
                node = LEAF_INSTRUCTIONS[op](self.locations[i])
                if open_loops:
                    open_loops[-1][1].append(node)
                else:
                    program.append(node)

        if open_loops:
            start = open_loops[0][0]
            raise create_unbalanced_loop_start_error(start, self.locations[start])

        logger.debug("Parsed %d operations into %d top-level instructions",
                     len(self.operations), len(program))
        return program


def parse(operations: Sequence[Union[Token, OpCode]],
          max_depth: int = DEFAULT_MAX_DEPTH) -> List[Instruction]:
    """Convenience wrapper: parse `operations` into an instruction tree."""
    return Parser(operations, max_depth).parse()
