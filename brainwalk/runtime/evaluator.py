"""
brainwalk Evaluator - tree-walking execution

Walks the instruction tree with the visitor pattern. Loop bodies are run
from an explicit frame stack rather than by recursion, so nesting depth is
not bounded by the Python stack. A body repeats for as long as the current
cell is nonzero; there is no iteration limit.

Author: xwest
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..parser.ast_nodes import (
    Instruction, InstructionVisitor, MoveRight, MoveLeft,
    Increment, Decrement, Write, Read, Loop
)
from .tape import Tape
from .io import InputSource, OutputSink, as_input_source
from .errors import InputExhaustedError


logger = logging.getLogger(__name__)


class Evaluator(InstructionVisitor):
    """
    Executes instruction trees against a tape.

    Output bytes are always collected into a buffer; when an output sink is
    given, each byte is also passed to it as soon as it is written.
    """

    def __init__(self, tape: Optional[Tape] = None,
                 input_source: Union[InputSource, bytes, str, None] = None,
                 output_sink: Optional[OutputSink] = None):
        """
        Args:
            tape: Tape to run against (a fresh default tape if omitted)
            input_source: Where READ gets bytes from; raw bytes/str are wrapped
            output_sink: Optional live destination for WRITE
        """
        self.tape = tape if tape is not None else Tape()
        self.input_source = as_input_source(input_source)
        self.output_sink = output_sink
        self.output = bytearray()
        self._frames: List[Tuple[Optional[Loop], Iterator[Instruction]]] = []

    def execute(self, program: Iterable[Instruction]) -> bytes:
        """
        Run `program` to completion.

        Returns:
            All bytes written during this call

        Raises:
            TapeOverflowError: if the pointer would leave the tape
            InputExhaustedError: if READ finds no input left
        """
        start = len(self.output)
        self._run(program)
        produced = bytes(self.output[start:])
        logger.debug("Execution finished with %d output bytes, pointer at %d",
                     len(produced), self.tape.pointer)
        return produced

    def _run(self, program: Iterable[Instruction]):
        # Each frame is (loop, iterator over its body); the outermost loop is None.
        self._frames = [(None, iter(program))]

        while self._frames:
            loop, body = self._frames[-1]
            node = next(body, None)
            if node is not None:
                node.accept(self)
            elif loop is not None and self.tape.current != 0:
                self._frames[-1] = (loop, iter(loop.body))
            else:
                self._frames.pop()

    # ========================================================================
    # Instruction handlers
    # ========================================================================

    def visit_move_right(self, node: MoveRight):
        self.tape.move(1, node.location)

    def visit_move_left(self, node: MoveLeft):
        self.tape.move(-1, node.location)

    def visit_increment(self, node: Increment):
        self.tape.increment()

    def visit_decrement(self, node: Decrement):
        self.tape.decrement()

    def visit_write(self, node: Write):
        value = self.tape.current
        self.output.append(value)
        if self.output_sink is not None:
            self.output_sink.write_byte(value)

    def visit_read(self, node: Read):
        value = self.input_source.read_byte()
        if value is None:
            raise InputExhaustedError(self.tape.pointer, node.location)
        self.tape.current = value

    def visit_loop(self, node: Loop):
        if self.tape.current != 0:
            self._frames.append((node, iter(node.body)))


def evaluate(program: List[Instruction], tape: Optional[Tape] = None,
             input_data: Union[InputSource, bytes, str, None] = None,
             output_sink: Optional[OutputSink] = None) -> bytes:
    """Convenience wrapper: run `program` and return its output bytes."""
    return Evaluator(tape, input_data, output_sink).execute(program)
