from .instruction import Instruction, Program, make_program, require_exhaustive
