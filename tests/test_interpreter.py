'''
Tests for the tape interpreter
'''

import io
import unittest

from meowlang.errors import InputExhausted, UnmatchedLoopEnd
from meowlang.isa import Instruction
from meowlang.pipeline import parse_glyph_text
from meowlang.vm import Interpreter, Tape, TAPE_SIZE, run_program, stream_sink, stream_source


def make_interpreter(text: str, data: bytes = b''):
    out = io.BytesIO()
    interp = Interpreter(parse_glyph_text(text), stream_sink(out), stream_source(io.BytesIO(data)))
    return interp, out


class CountingInterpreter(Interpreter):
    '''Counts executed increments and decrements'''

    def __init__(self, *args):
        super().__init__(*args)
        self.increments = 0
        self.decrements = 0
        self._handlers[Instruction.INCREMENT] = self._count_increment
        self._handlers[Instruction.DECREMENT] = self._count_decrement

    def _count_increment(self):
        self.increments += 1
        self._increment()

    def _count_decrement(self):
        self.decrements += 1
        self._decrement()


class TestTape(unittest.TestCase):

    def test_initial_state(self):
        tape = Tape()
        self.assertEqual(len(tape), TAPE_SIZE)
        self.assertEqual(tape.pointer, 0)
        self.assertFalse(any(tape.cells))

    def test_pointer_wraps_right(self):
        '''Pointer 65535 moved right lands on 0'''
        tape = Tape()
        tape.pointer = 65535
        tape.move(1)
        self.assertEqual(tape.pointer, 0)

    def test_pointer_wraps_left(self):
        tape = Tape()
        tape.move(-1)
        self.assertEqual(tape.pointer, 65535)

    def test_cell_wraps(self):
        '''255 + 1 == 0 and 0 - 1 == 255'''
        tape = Tape()
        tape.current = 255
        tape.add(1)
        self.assertEqual(tape.current, 0)
        tape.add(-1)
        self.assertEqual(tape.current, 255)


class TestStepSemantics(unittest.TestCase):

    def test_move_right_from_last_cell(self):
        interp, _ = make_interpreter('>')
        interp.tape.pointer = 65535
        interp.run()
        self.assertEqual(interp.pointer, 0)

    def test_move_left_from_first_cell(self):
        interp, _ = make_interpreter('<+')
        interp.run()
        self.assertEqual(interp.pointer, 65535)
        self.assertEqual(interp.tape[65535], 1)

    def test_increment_wraps(self):
        interp, _ = make_interpreter('+')
        interp.tape.current = 255
        interp.run()
        self.assertEqual(interp.tape.current, 0)

    def test_decrement_wraps(self):
        interp, _ = make_interpreter('-')
        interp.run()
        self.assertEqual(interp.tape.current, 255)

    def test_nop_does_nothing(self):
        interp, out = make_interpreter('hello world')
        self.assertEqual(interp.run(), len('hello world'))
        self.assertEqual(out.getvalue(), b'')
        self.assertFalse(any(interp.tape.cells))

    def test_step_reports_running(self):
        interp, _ = make_interpreter('++')
        self.assertTrue(interp.step())
        self.assertFalse(interp.step())
        self.assertTrue(interp.halted)
        self.assertFalse(interp.step())
        self.assertEqual(interp.tape.current, 2)


class TestLoops(unittest.TestCase):

    def test_loop_on_zero_cell_is_skipped(self):
        '''[+] on a zero cell never increments'''
        interp = CountingInterpreter(parse_glyph_text('[+]'), lambda b: None, lambda: None)
        interp.run()
        self.assertEqual(interp.increments, 0)
        self.assertEqual(interp.tape.current, 0)
        self.assertTrue(interp.halted)

    def test_nested_loop_skipped_whole(self):
        interp, out = make_interpreter('[[+]+.]+.')
        interp.run()
        self.assertEqual(out.getvalue(), b'\x01')

    def test_loop_repeats_until_zero(self):
        '''+++[-] decrements exactly three times'''
        interp = CountingInterpreter(parse_glyph_text('+++[-]'), lambda b: None, lambda: None)
        steps = interp.run()
        self.assertEqual(interp.decrements, 3)
        self.assertEqual(interp.tape.current, 0)
        self.assertEqual(steps, 10)
        self.assertEqual(interp.loop_stack, [])

    def test_back_jump_does_not_push_again(self):
        '''The loop stack never grows past one entry for a single loop'''
        interp, _ = make_interpreter('+++[-]')
        depths = []
        while interp.step():
            depths.append(len(interp.loop_stack))
        self.assertEqual(max(depths), 1)

    def test_nested_loops(self):
        '''2 * 3 computed with a nested loop'''
        interp, out = make_interpreter('++[>+++[>+<-]<-]>>.')
        interp.run()
        self.assertEqual(out.getvalue(), bytes([6]))

    def test_unmatched_loop_start_halts(self):
        '''An unclosed [ on a zero cell skips off the end without error'''
        interp, out = make_interpreter('.[+.')
        interp.run()
        self.assertTrue(interp.halted)
        self.assertEqual(out.getvalue(), b'\x00')

    def test_orphan_loop_end_on_zero_cell(self):
        '''] alone on a fresh tape is a no-op'''
        interp, _ = make_interpreter(']')
        self.assertEqual(interp.run(), 1)
        self.assertEqual(interp.loop_stack, [])

    def test_orphan_loop_end_on_nonzero_cell(self):
        interp, _ = make_interpreter('+]')
        with self.assertRaises(UnmatchedLoopEnd) as cm:
            interp.run()
        self.assertEqual(cm.exception.pc, 1)

    def test_orphan_loop_end_with_preset_cell(self):
        interp, _ = make_interpreter(']')
        interp.tape.current = 7
        with self.assertRaises(UnmatchedLoopEnd):
            interp.run()


class TestIO(unittest.TestCase):

    def test_echo(self):
        ''',. echoes the input byte'''
        self.assertEqual(run_program(parse_glyph_text(',.'), b'A'), b'A')

    def test_input_exhausted(self):
        with self.assertRaises(InputExhausted) as cm:
            run_program(parse_glyph_text('.,'), b'')
        self.assertEqual(cm.exception.pc, 1)

    def test_cat_until_zero_byte(self):
        self.assertEqual(run_program(parse_glyph_text(',[.,]'), b'meow\x00'), b'meow')

    def test_hello(self):
        program = parse_glyph_text('++++++++[>++++++++<-]>+.+.')
        self.assertEqual(run_program(program), b'AB')

    def test_stream_source_flushes_output_first(self):
        '''Pending output is flushed before every read'''
        raw = io.BytesIO()
        out = io.BufferedWriter(raw)
        seen = []

        class Input(io.BytesIO):
            def read(self, size = -1):
                seen.append(raw.getvalue())
                return super().read(size)

        interp = Interpreter(parse_glyph_text('+.,+.'), stream_sink(out), stream_source(Input(b'\x05'), flush = out))
        interp.run()
        out.flush()
        self.assertEqual(seen, [b'\x01'])
        self.assertEqual(raw.getvalue(), b'\x01\x06')

    def test_callable_io(self):
        '''Any callables can serve as sink and source'''
        written = []
        data = iter([3])
        interp = Interpreter(parse_glyph_text(',[.-]'), written.append, lambda: next(data, None))
        interp.run()
        self.assertEqual(written, [3, 2, 1])


class TestCancellation(unittest.TestCase):

    def test_should_stop_checked_between_steps(self):
        '''An infinite loop stops once the caller says so'''
        interp, _ = make_interpreter('+[]')
        steps = interp.run(should_stop=lambda: interp.steps >= 50)
        self.assertEqual(steps, 50)
        self.assertFalse(interp.halted)

    def test_resume_after_stop(self):
        interp, _ = make_interpreter('+++')
        interp.run(should_stop=lambda: interp.steps >= 1)
        self.assertEqual(interp.run(), 2)
        self.assertEqual(interp.tape.current, 3)


if __name__ == '__main__':
    unittest.main()
