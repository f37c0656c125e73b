"""
Test suite for the brainwalk runtime: tape, I/O adapters and evaluator.

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from brainwalk.lexer import Lexer, SourceLocation, lex
from brainwalk.parser import Parser, parse, Increment, Decrement, Loop, Write
from brainwalk.runtime import (
    Tape, Evaluator, BytesInput, StreamInput, StreamOutput, evaluate,
    TapeOverflowError, InputExhaustedError, DEFAULT_TAPE_SIZE,
)


def run(source: str, tape: Tape = None, input_data=b"", sink=None) -> bytes:
    return Evaluator(tape, input_data, sink).execute(parse(lex(source)))


def run_with_depth(source: str, max_depth: int) -> bytes:
    return Evaluator(Tape()).execute(parse(lex(source), max_depth=max_depth))


class TestTape(unittest.TestCase):
    """Test cases for the tape."""

    def test_defaults(self):
        tape = Tape()
        self.assertEqual(tape.size, DEFAULT_TAPE_SIZE)
        self.assertEqual(tape.size, 1024)
        self.assertEqual(tape.pointer, 512)
        self.assertEqual(tape.snapshot(), bytes(1024))

    def test_increment_wraps(self):
        tape = Tape(4)
        tape.current = 255
        tape.increment()
        self.assertEqual(tape.current, 0)

    def test_decrement_wraps(self):
        tape = Tape(4)
        tape.decrement()
        self.assertEqual(tape.current, 255)

    def test_move_checks_before_moving(self):
        tape = Tape(3, pointer=0)
        with self.assertRaises(TapeOverflowError) as ctx:
            tape.move(-1)
        self.assertEqual(tape.pointer, 0)
        self.assertEqual(ctx.exception.target, -1)

        tape.move(2)
        with self.assertRaises(TapeOverflowError):
            tape.move(1)
        self.assertEqual(tape.pointer, 2)

    def test_move_error_carries_location(self):
        location = SourceLocation("t.bf", 1, 4, 3)
        tape = Tape(2, pointer=1)
        with self.assertRaises(TapeOverflowError) as ctx:
            tape.move(1, location)
        self.assertIs(ctx.exception.location, location)
        self.assertIn("t.bf:1:4", str(ctx.exception))

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Tape(0)
        with self.assertRaises(ValueError):
            Tape(8, pointer=8)


class TestIO(unittest.TestCase):
    """Test cases for the input sources and output sinks."""

    def test_bytes_input(self):
        source = BytesInput("hi")
        self.assertEqual(source.read_byte(), ord("h"))
        self.assertEqual(source.remaining, 1)
        self.assertEqual(source.read_byte(), ord("i"))
        self.assertIsNone(source.read_byte())

    def test_stream_input(self):
        source = StreamInput(io.BytesIO(b"\x00\xff"))
        self.assertEqual(source.read_byte(), 0)
        self.assertEqual(source.read_byte(), 255)
        self.assertIsNone(source.read_byte())

    def test_stream_output(self):
        stream = io.BytesIO()
        sink = StreamOutput(stream)
        sink.write_byte(65)
        sink.write_byte(10)
        self.assertEqual(stream.getvalue(), b"A\n")


class TestEvaluator(unittest.TestCase):
    """Test cases for the evaluator."""

    def test_hello_world(self):
        source = """++++++++++
            [
                >+++++++
                >++++++++++
                >+++
                >+<<<<-
            ]   >++.>+.+++++++..+++.>++.<<+++++++++++++++.>.+++.------.
            --------.>+.>."""
        tape = Tape(1024, 512)
        self.assertEqual(run(source, tape), b"Hello World!\n")

    def test_256_increments_is_noop(self):
        for start in (0, 1, 128, 255):
            tape = Tape(8)
            tape.current = start
            run("+" * 256, tape)
            self.assertEqual(tape.current, start)

    def test_increment_then_decrement_restores(self):
        tape = Tape(8)
        run("+" * 256 + "-" * 256, tape)
        self.assertEqual(tape.current, 0)

    def test_decrement_below_zero_wraps(self):
        self.assertEqual(run("-."), b"\xff")

    def test_loop_runs_until_zero(self):
        tape = Tape(8, pointer=0)
        run("+++++[->++<]", tape)
        self.assertEqual(tape.snapshot(0, 2), bytes([0, 10]))
        self.assertEqual(tape.pointer, 0)

    def test_loop_skipped_when_zero(self):
        self.assertEqual(run("[.]"), b"")

    def test_echo_input(self):
        self.assertEqual(run(",.,.", input_data=b"ok"), b"ok")

    def test_input_exhausted(self):
        tokens = Lexer(",.,", "echo.bf").tokenize()
        evaluator = Evaluator(Tape(), BytesInput(b"A"))

        with self.assertRaises(InputExhaustedError) as ctx:
            evaluator.execute(Parser(tokens).parse())

        self.assertEqual(ctx.exception.code, "R002")
        self.assertEqual(ctx.exception.location.column, 3)
        self.assertEqual(bytes(evaluator.output), b"A")

    def test_missing_input_source_is_empty(self):
        with self.assertRaises(InputExhaustedError):
            Evaluator(Tape()).execute(parse(lex(",")))

    def test_move_below_zero(self):
        tape = Tape(4, pointer=0)
        with self.assertRaises(TapeOverflowError) as ctx:
            run("<", tape)
        self.assertEqual(ctx.exception.pointer, 0)
        self.assertEqual(ctx.exception.code, "R001")

    def test_overflow_halts_output(self):
        tape = Tape(4, pointer=0)
        evaluator = Evaluator(tape)
        with self.assertRaises(TapeOverflowError) as ctx:
            evaluator.execute(parse(lex("+.>>>>+.")))
        self.assertEqual(bytes(evaluator.output), b"\x01")
        self.assertEqual(ctx.exception.target, 4)
        self.assertEqual(tape.pointer, 3)

    def test_overflow_location(self):
        tokens = Lexer("\n>>", "move.bf").tokenize()
        with self.assertRaises(TapeOverflowError) as ctx:
            Evaluator(Tape(2, pointer=0)).execute(Parser(tokens).parse())
        self.assertEqual(str(ctx.exception.location), "move.bf:2:2")

    def test_sink_receives_bytes_and_buffer_keeps_them(self):
        stream = io.BytesIO()
        output = run("+++.+.", sink=StreamOutput(stream))
        self.assertEqual(output, b"\x03\x04")
        self.assertEqual(stream.getvalue(), b"\x03\x04")

    def test_hand_built_tree(self):
        tape = Tape(4)
        program = [Increment(), Increment(), Loop([Write(), Decrement()])]
        self.assertEqual(Evaluator(tape).execute(program), b"\x02\x01")

    def test_nested_loop_side_effect_order(self):
        tape = Tape(8, pointer=0)
        self.assertEqual(run("++[>+++[>+.<-]<-]", tape), bytes([1, 2, 3, 4, 5, 6]))
        self.assertEqual(tape.pointer, 0)

    def test_deeply_nested_loops(self):
        """Loop nesting far beyond the Python recursion limit still runs."""
        for depth in (400, 5000):
            tape = Tape()
            program = parse(lex("+" + "[" * depth + "-" + "]" * depth), max_depth=depth)
            self.assertEqual(Evaluator(tape).execute(program), b"")
            self.assertEqual(tape.current, 0)

    def test_deep_loop_output_after_exit(self):
        depth = 2000
        source = "+" + "[" * depth + "-" + "]" * depth + "+++."
        self.assertEqual(run_with_depth(source, depth), b"\x03")

    def test_evaluate_wrapper(self):
        tape = Tape(8, pointer=0)
        output = evaluate(parse(lex(",+.")), tape, b"a")
        self.assertEqual(output, b"b")
        self.assertEqual(tape.current, ord("b"))

    def test_evaluate_default_tape(self):
        self.assertEqual(evaluate(parse(lex("+++."))), b"\x03")

    def test_execute_returns_only_new_output(self):
        evaluator = Evaluator(Tape())
        self.assertEqual(evaluator.execute(parse(lex("+."))), b"\x01")
        self.assertEqual(evaluator.execute(parse(lex("+."))), b"\x02")
        self.assertEqual(bytes(evaluator.output), b"\x01\x02")


if __name__ == '__main__':
    unittest.main()
