"""
Shared error handling for brainwalk.

Every fatal condition raised by the lexer, parser or runtime carries a
Diagnostic record with source location information and a short help text,
so that the CLI (or any embedding application) can render it uniformly.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .lexer.tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error report (message, where it happened, how to fix it)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class BrainwalkError(Exception):
    """
    Base class for every fatal brainwalk error.

    There is no recovery path: whoever catches this is expected to stop the
    run and report ``str(error)``.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ConfigurationError(BrainwalkError):
    """Raised when an InterpreterConfig holds an unusable value."""

    def __init__(self, message: str, help_text: Optional[str] = None):
        super().__init__(message, code="C001", help_text=help_text)


# Error codes for categorization
ERROR_CODES = {
    "C001": "Invalid interpreter configuration",
    "P001": "Unbalanced loop end",
    "P002": "Unbalanced loop start",
    "P003": "Loop nesting recursion limit exceeded",
    "R001": "Tape overflow",
    "R002": "Input exhausted",
}
