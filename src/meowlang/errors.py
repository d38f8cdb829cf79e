'''
Error kinds raised by the meowlang core and the command line wrapper.

Every error is fatal for the caller; nothing here is retried or recovered.
'''


class MeowError(Exception):
    '''Base class for all meowlang errors'''

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(MeowError):
    '''Wrong command line shape'''


class InvalidMode(MeowError):
    '''Mode argument is not compile, transpile or run'''

    def __init__(self, mode: str):
        super().__init__(f'invalid mode: {mode!r} (expected compile, transpile or run)')
        self.mode = mode


class MalformedSurfaceToken(MeowError):
    '''Unrecognized symbol name in surface text'''

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class TruncatedSurfaceStream(MalformedSurfaceToken):
    '''Surface text holds an odd number of symbols'''

    def __init__(self, count: int):
        super().__init__(f'surface text has an odd number of symbols ({count}); a trailing symbol has no partner')
        self.count = count


class FileUnreadable(MeowError):
    '''Underlying I/O failure while reading a source file'''

    def __init__(self, path, reason: str):
        super().__init__(f'cannot read {path}: {reason}')
        self.path = path


class InputExhausted(MeowError):
    '''Input instruction executed with no byte available'''

    def __init__(self, pc: int):
        super().__init__(f'input exhausted at instruction {pc}')
        self.pc = pc


class UnmatchedLoopEnd(MeowError):
    '''Loop end reached with a nonzero cell and no open loop'''

    def __init__(self, pc: int):
        super().__init__(f'unmatched loop end at instruction {pc}')
        self.pc = pc
