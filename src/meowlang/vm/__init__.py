from .tape import Tape, TAPE_SIZE, CELL_MODULUS
from .interpreter import Interpreter, ByteSink, ByteSource, stream_sink, stream_source, run_program
