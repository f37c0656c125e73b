"""
Error handling for the brainwalk parser.

Structural errors are always fatal: the parser stops at the first one and
returns no partial tree.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..errors import BrainwalkError


class ParseError(BrainwalkError):
    """
    Exception raised when the operation sequence is structurally malformed.

    `index` is the position of the offending operation in the complete,
    top-level operation sequence.
    """

    def __init__(
        self,
        message: str,
        index: int,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message,
            location=location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.index = index


# Helper functions for creating common parser errors

def create_unbalanced_loop_end_error(index: int,
                                     location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for a ']' with no matching '['."""
    return ParseError(
        message=f"Unbalanced loop end at operation #{index}",
        index=index,
        location=location,
        code="P001",
        help_text="This ']' closes a loop that was never opened.",
        suggestions=["Remove the stray ']'", "Add the missing '[' earlier in the program"]
    )


def create_unbalanced_loop_start_error(index: int,
                                       location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for a '[' still open at the end of input."""
    return ParseError(
        message=f"Unbalanced loop start at operation #{index}",
        index=index,
        location=location,
        code="P002",
        help_text="The program ended while this '[' was still open.",
        suggestions=["Add a closing ']'"]
    )


def create_recursion_limit_error(index: int, max_depth: int,
                                 location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for loops nested deeper than the configured limit."""
    return ParseError(
        message=f"Recursion limit exceeded: loop at operation #{index} nests deeper than {max_depth}",
        index=index,
        location=location,
        code="P003",
        help_text=f"Loops may be nested at most {max_depth} levels deep.",
        suggestions=["Raise the maximum nesting depth (--max-depth)"]
    )
