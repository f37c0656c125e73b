"""
Instruction tree node definitions for brainwalk.

The parser turns the flat operation sequence into a tree of these nodes.
Six of them are leaves; Loop owns an ordered body of further nodes. Bracket
markers never appear in the tree. Each node supports the visitor pattern,
which is how the evaluator walks it.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Iterable, Iterator, Tuple
from enum import Enum

from ..lexer.tokens import SourceLocation, OpCode


class InstructionType(Enum):
    """Enumeration of all instruction node types."""

    MOVE_RIGHT = "MoveRight"
    MOVE_LEFT = "MoveLeft"
    INCREMENT = "Increment"
    DECREMENT = "Decrement"
    WRITE = "Write"
    READ = "Read"
    LOOP = "Loop"


class InstructionVisitor(ABC):
    """Abstract visitor interface for walking instruction trees."""

    @abstractmethod
    def visit_move_right(self, node: 'MoveRight') -> Any:
        pass

    @abstractmethod
    def visit_move_left(self, node: 'MoveLeft') -> Any:
        pass

    @abstractmethod
    def visit_increment(self, node: 'Increment') -> Any:
        pass

    @abstractmethod
    def visit_decrement(self, node: 'Decrement') -> Any:
        pass

    @abstractmethod
    def visit_write(self, node: 'Write') -> Any:
        pass

    @abstractmethod
    def visit_read(self, node: 'Read') -> Any:
        pass

    @abstractmethod
    def visit_loop(self, node: 'Loop') -> Any:
        pass


class Instruction(ABC):
    """
    Base class for all instruction nodes.

    Equality is structural: two trees are equal when they hold the same
    instructions in the same shape, wherever in the source they came from.
    """

    def __init__(self, instruction_type: InstructionType,
                 location: Optional[SourceLocation] = None):
        self.instruction_type = instruction_type
        self.location = location

    @abstractmethod
    def accept(self, visitor: InstructionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    def children(self) -> Tuple['Instruction', ...]:
        """Get all child nodes."""
        return ()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Instruction):
            return NotImplemented
        return flatten([self]) == flatten([other])

    def __hash__(self) -> int:
        return hash(tuple(flatten([self])))

    def __str__(self) -> str:
        return self.instruction_type.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# ============================================================================
# Leaf instructions
# ============================================================================

class MoveRight(Instruction):
    """Move the data pointer one cell to the right."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.MOVE_RIGHT, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_move_right(self)


class MoveLeft(Instruction):
    """Move the data pointer one cell to the left."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.MOVE_LEFT, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_move_left(self)


class Increment(Instruction):
    """Add one to the current cell."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.INCREMENT, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_increment(self)


class Decrement(Instruction):
    """Subtract one from the current cell."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.DECREMENT, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_decrement(self)


class Write(Instruction):
    """Emit the current cell as one output byte."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.WRITE, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_write(self)


class Read(Instruction):
    """Store one input byte in the current cell."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.READ, location)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_read(self)


# ============================================================================
# Compound instruction
# ============================================================================

class Loop(Instruction):
    """Repeat `body` while the current cell is nonzero."""
    body: Tuple[Instruction, ...]

    def __init__(self, body: Iterable[Instruction],
                 location: Optional[SourceLocation] = None):
        super().__init__(InstructionType.LOOP, location)
        self.body = tuple(body)

    def accept(self, visitor: InstructionVisitor) -> Any:
        return visitor.visit_loop(self)

    def children(self) -> Tuple[Instruction, ...]:
        return self.body

    def __str__(self) -> str:
        return f"Loop[{', '.join(str(node) for node in self.body)}]"

    def __repr__(self) -> str:
        return f"Loop({list(self.body)!r})"


# Leaf operations map one-to-one onto leaf instruction classes
LEAF_INSTRUCTIONS = {
    OpCode.MOVE_RIGHT: MoveRight,
    OpCode.MOVE_LEFT: MoveLeft,
    OpCode.INCREMENT: Increment,
    OpCode.DECREMENT: Decrement,
    OpCode.WRITE: Write,
    OpCode.READ: Read,
}

INSTRUCTION_OPCODES = {cls: op for op, cls in LEAF_INSTRUCTIONS.items()}


def flatten(program: Iterable[Instruction]) -> List[OpCode]:
    """
    Turn an instruction tree back into its flat operation sequence.

    Each Loop becomes LOOP_START, its flattened body, LOOP_END.
    """
    operations: List[OpCode] = []
    pending: List[Iterator[Instruction]] = [iter(program)]

    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            if pending:
                operations.append(OpCode.LOOP_END)
        elif isinstance(node, Loop):
            operations.append(OpCode.LOOP_START)
            pending.append(iter(node.body))
        else:
            operations.append(INSTRUCTION_OPCODES[type(node)])
    return operations


def to_source(program: Iterable[Instruction]) -> str:
    """Render an instruction tree as canonical program text."""
    return "".join(op.symbol for op in flatten(program))


def format_tree(program: Iterable[Instruction], indent: str = "  ") -> str:
    """Pretty-print an instruction tree, one node per line."""
    lines: List[str] = []
    pending: List[Iterator[Instruction]] = [iter(program)]

    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            continue
        where = f"  @ {node.location}" if node.location is not None else ""
        lines.append(f"{indent * (len(pending) - 1)}{node.instruction_type.value}{where}")
        if isinstance(node, Loop):
            pending.append(iter(node.body))

    return "\n".join(lines)
