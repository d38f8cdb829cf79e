"""
Fixed-size wraparound byte memory.
"""

TAPE_SIZE = 0x10000     # 16-bit pointer
CELL_MODULUS = 0x100    # 8-bit cells


class Tape:
    """65536 zero-initialized byte cells and a wrapping 16-bit pointer"""

    __slots__ = ('cells', 'pointer')

    def __init__(self):
        self.cells = bytearray(TAPE_SIZE)
        self.pointer = 0

    def move(self, delta: int):
        self.pointer = (self.pointer + delta) % TAPE_SIZE

    def add(self, delta: int):
        self.cells[self.pointer] = (self.cells[self.pointer] + delta) % CELL_MODULUS

    @property
    def current(self) -> int:
        return self.cells[self.pointer]

    @current.setter
    def current(self, value: int):
        self.cells[self.pointer] = value % CELL_MODULUS

    def __getitem__(self, index: int) -> int:
        return self.cells[index % TAPE_SIZE]

    def __setitem__(self, index: int, value: int):
        self.cells[index % TAPE_SIZE] = value % CELL_MODULUS

    def __len__(self):
        return TAPE_SIZE

    def __repr__(self):
        return f'Tape(pointer={self.pointer}, current={self.current})'
