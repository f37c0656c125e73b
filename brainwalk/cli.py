#!/usr/bin/env python3
"""
Command-line front end for brainwalk.

Author: xwest
"""

import argparse
import logging
import os
import sys
from typing import BinaryIO, List, Optional

from . import __version__
from .config import InterpreterConfig
from .errors import BrainwalkError, ERROR_CODES
from .lexer import Lexer
from .parser import Parser, format_tree
from .runtime import BytesInput, Evaluator, StreamInput, StreamOutput


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brainwalk",
        description="Tree-walking interpreter for the eight-command tape language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    brainwalk hello.bf                       # Run a program, input from stdin
    brainwalk echo.bf --input "abc"          # Supply program input inline
    brainwalk hello.bf --tape-size 30000     # Use a larger tape
    brainwalk hello.bf --dump-tree           # Show the parsed instruction tree

Error codes:
""" + "\n".join(f"    {code}  {meaning}" for code, meaning in ERROR_CODES.items())
    )

    parser.add_argument('file', help='Program source file')
    parser.add_argument('--input', default=None,
                        help='Program input as text (default: read stdin)')

    # Configuration options
    parser.add_argument('--tape-size', type=int, default=InterpreterConfig.tape_size,
                        help='Number of cells on the tape (default: %(default)s)')
    parser.add_argument('--pointer', type=int, default=None,
                        help='Initial pointer position (default: tape midpoint)')
    parser.add_argument('--max-depth', type=int, default=InterpreterConfig.max_nesting_depth,
                        help='Maximum loop nesting depth (default: %(default)s)')
    parser.add_argument('--no-stream', action='store_true',
                        help='Buffer output and write it once the program finishes')

    # Output options
    parser.add_argument('--dump-tree', action='store_true',
                        help='Print the parsed instruction tree instead of running it')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    if not os.path.exists(args.file):
        print(f"File {args.file} does not exist!", file=sys.stderr)
        return 1
    if not os.path.isfile(args.file):
        print(f"{args.file} is not a regular file!", file=sys.stderr)
        return 1

    # Undecodable bytes can only sit in commentary, which the lexer drops
    try:
        with open(args.file, "r", encoding="utf-8", errors="replace") as f:
            source = f.read()
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    logger.debug("Loaded %d characters from %s", len(source), args.file)

    try:
        config = InterpreterConfig(
            tape_size=args.tape_size,
            initial_pointer=args.pointer,
            max_nesting_depth=args.max_depth,
            stream_output=not args.no_stream,
        )

        tokens = Lexer(source, args.file).tokenize()
        program = Parser(tokens, config.max_nesting_depth).parse()

        if args.dump_tree:
            stdout.write((format_tree(program) + "\n").encode("utf-8"))
            stdout.flush()
            return 0

        input_source = BytesInput(args.input) if args.input is not None else StreamInput(stdin)
        sink = StreamOutput(stdout) if config.stream_output else None
        output = Evaluator(config.create_tape(), input_source, sink).execute(program)

        if sink is None:
            stdout.write(output)
            stdout.flush()
    except BrainwalkError as e:
        stdout.flush()
        print(str(e), file=sys.stderr, end="")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
