"""
Tape interpreter
================

Executes a Program against a Tape, a program counter and a loop stack.

Loops follow a peek-then-pop discipline:

- LOOP_START on a zero cell scans forward to the matching LOOP_END (or past
  the end of the program when there is none, which halts normally).
- LOOP_START on a nonzero cell pushes its own position.
- LOOP_END on a zero cell pops (an empty stack is left alone).
- LOOP_END on a nonzero cell jumps back to the top of the stack without
  popping; an empty stack is fatal.

Every step then advances the counter by one, so a backward jump resumes at
the instruction right after the LOOP_START. The zero test for each repeat
happens at LOOP_END only.
"""

import io
import logging
from typing import BinaryIO, Callable, Dict, List, Optional

from ..errors import InputExhausted, UnmatchedLoopEnd
from ..isa import Instruction, Program, make_program, require_exhaustive
from .tape import Tape

logger = logging.getLogger(__name__)

ByteSink = Callable[[int], None]
ByteSource = Callable[[], Optional[int]]


def stream_sink(stream: BinaryIO) -> ByteSink:
    """Adapt a binary stream into a byte sink; the stream is not closed"""
    def sink(value: int):
        stream.write(bytes((value,)))
    return sink


def stream_source(stream: BinaryIO, flush: Optional[BinaryIO] = None) -> ByteSource:
    """Adapt a binary stream into a byte source; None once it is exhausted

    ``flush`` is flushed before every read so pending output is visible while
    the read blocks.
    """
    def source() -> Optional[int]:
        if flush is not None:
            flush.flush()
        data = stream.read(1)
        return data[0] if data else None
    return source


class Interpreter:
    """Single-run executor; owns its tape and loop stack exclusively"""

    def __init__(self, program: Program, sink: ByteSink, source: ByteSource):
        self.program = make_program(program)
        self.sink = sink
        self.source = source

        self.tape = Tape()
        self.pc = 0
        self.loop_stack: List[int] = []
        self.steps = 0

        self._handlers: Dict[Instruction, Callable[[], None]] = {
            Instruction.MOVE_RIGHT: self._move_right,
            Instruction.MOVE_LEFT: self._move_left,
            Instruction.INCREMENT: self._increment,
            Instruction.DECREMENT: self._decrement,
            Instruction.OUTPUT: self._output,
            Instruction.INPUT: self._input,
            Instruction.LOOP_START: self._loop_start,
            Instruction.LOOP_END: self._loop_end,
            Instruction.NOP: self._nop,
        }
        require_exhaustive(self._handlers, 'interpreter')

    @property
    def pointer(self) -> int:
        return self.tape.pointer

    @property
    def halted(self) -> bool:
        return self.pc >= len(self.program)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        if self.halted:
            return False

        self._handlers[self.program[self.pc]]()
        self.pc += 1
        self.steps += 1
        return not self.halted

    def run(self, should_stop: Optional[Callable[[], bool]] = None) -> int:
        """Step until the program ends or ``should_stop()`` turns true.

        Returns the number of steps executed by this call.
        """
        logger.debug('run: %d instructions, pc=%d', len(self.program), self.pc)
        start = self.steps

        while not self.halted:
            if should_stop is not None and should_stop():
                logger.debug('run: stopped by caller at pc=%d', self.pc)
                break
            self.step()

        logger.debug('run: finished after %d steps', self.steps - start)
        return self.steps - start

    # Instruction handlers

    def _move_right(self):
        self.tape.move(1)

    def _move_left(self):
        self.tape.move(-1)

    def _increment(self):
        self.tape.add(1)

    def _decrement(self):
        self.tape.add(-1)

    def _output(self):
        self.sink(self.tape.current)

    def _input(self):
        value = self.source()
        if value is None:
            raise InputExhausted(self.pc)
        self.tape.current = value

    def _nop(self):
        pass

    def _loop_start(self):
        if self.tape.current != 0:
            self.loop_stack.append(self.pc)
            return

        # Skip to the matching LOOP_END, or off the end if unmatched
        depth = 1
        while depth > 0:
            self.pc += 1
            if self.pc >= len(self.program):
                logger.debug('unmatched loop start, skipping to end of program')
                return

            instr = self.program[self.pc]
            if instr is Instruction.LOOP_START:
                depth += 1
            elif instr is Instruction.LOOP_END:
                depth -= 1

    def _loop_end(self):
        if self.tape.current == 0:
            if self.loop_stack:
                self.loop_stack.pop()
            return

        if not self.loop_stack:
            raise UnmatchedLoopEnd(self.pc)

        self.pc = self.loop_stack[-1]


def run_program(program: Program, data: bytes = b'') -> bytes:
    """Run a program over in-memory input and return everything it printed"""
    out = io.BytesIO()
    interpreter = Interpreter(program, stream_sink(out), stream_source(io.BytesIO(data)))
    interpreter.run()
    return out.getvalue()
