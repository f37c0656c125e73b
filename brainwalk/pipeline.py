"""
End-to-end helpers: lex, parse and evaluate in one call.

Author: xwest
"""

import logging
from typing import Optional, Union

from .config import InterpreterConfig
from .lexer import Lexer
from .parser import Parser
from .runtime import Evaluator, InputSource, OutputSink


logger = logging.getLogger(__name__)


def run_source(source: str,
               input_data: Union[InputSource, bytes, str, None] = b"",
               config: Optional[InterpreterConfig] = None,
               output_sink: Optional[OutputSink] = None,
               filename: str = "<string>") -> bytes:
    """
    Run a complete program held in memory.

    Args:
        source: Program text
        input_data: Bytes (or an InputSource) consumed by READ
        config: Tape size, start pointer and nesting limit
        output_sink: Live destination for output, if any
        filename: Name used in error locations

    Returns:
        Every byte the program wrote
    """
    config = config or InterpreterConfig()

    tokens = Lexer(source, filename).tokenize()
    program = Parser(tokens, config.max_nesting_depth).parse()

    tape = config.create_tape()
    logger.debug("Running %s on %d cells starting at %d",
                 filename, tape.size, tape.pointer)
    evaluator = Evaluator(tape, input_data, output_sink)
    return evaluator.execute(program)


def run_file(path: str,
             input_data: Union[InputSource, bytes, str, None] = b"",
             config: Optional[InterpreterConfig] = None,
             output_sink: Optional[OutputSink] = None) -> bytes:
    """Read `path` as UTF-8 text (undecodable bytes replaced) and run it with `run_source`."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        source = f.read()
    return run_source(source, input_data, config, output_sink, filename=path)
