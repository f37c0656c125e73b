"""
brainwalk Lexer Package

Implements the lexical scanner: raw program text in, a flat sequence of
primitive operations out. Unrecognized characters are dropped silently.

Author: xwest
"""

from .tokens import Token, OpCode, SourceLocation, SYMBOL_TABLE
from .lexer import Lexer, lex

__all__ = [
    "Lexer",
    "lex",
    "Token",
    "OpCode",
    "SourceLocation",
    "SYMBOL_TABLE",
]
