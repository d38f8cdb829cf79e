#!/usr/bin/env python3
"""
meowlang command line interface

meowlang <mode> <file>

  compile    surface notation -> glyph notation on stdout
  transpile  glyph notation -> surface notation on stdout
  run        execute surface notation with stdin/stdout as the byte streams
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .common.config import get_config
from .errors import FileUnreadable, InvalidMode, MeowError, UsageError
from .pipeline.transpiler import Transpiler, parse_surface_text
from .vm.interpreter import Interpreter, stream_sink, stream_source

logger = logging.getLogger(__name__)

USAGE = 'usage: meowlang <mode: compile | transpile | run> <file>'

RUN = 'run'
MODES = Transpiler.MODES + [RUN]


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def read_source(path: str, encoding: str) -> str:
    """Read a whole source file as text"""
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadable(path, str(e)) from e


def read_glyph_source(path: str) -> str:
    """Read glyph notation as one character per byte; foreign bytes become NOP"""
    try:
        return Path(path).read_bytes().decode('latin-1')
    except OSError as e:
        raise FileUnreadable(path, str(e)) from e


def translate_file(mode: str, path: str) -> str:
    if mode == Transpiler.TRANSPILE:
        text = read_glyph_source(path)
    else:
        text = read_source(path, get_config().encoding)
    return Transpiler().translate(mode, text)


def run_file(path: str) -> int:
    """Execute a surface notation file against stdin/stdout"""
    config = get_config()
    program = parse_surface_text(read_source(path, config.encoding))

    stdout = sys.stdout.buffer
    interpreter = Interpreter(program, stream_sink(stdout), stream_source(sys.stdin.buffer, flush=stdout))
    try:
        interpreter.run()
    finally:
        stdout.flush()

    logger.info('%s: %d steps', path, interpreter.steps)
    return interpreter.steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='meowlang',
        usage=USAGE[len('usage: '):],
        description='Meow surface notation toolchain'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    parser.add_argument('args', nargs='*', metavar='mode file', help=f"one of {', '.join(MODES)}, then a source file")
    return parser


def dispatch(args: List[str]):
    if len(args) != 2:
        raise UsageError(USAGE)

    mode, path = args[0].lower(), args[1]

    if mode == RUN:
        run_file(path)
    elif mode in Transpiler.MODES:
        result = translate_file(mode, path)
        end = '\n' if get_config().trailing_newline else ''
        sys.stdout.write(result + end)
        sys.stdout.flush()
    else:
        raise InvalidMode(args[0])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    config = get_config()
    config.reset()
    config.load_defaults()
    rest = config.parse_args(sys.argv[1:] if argv is None else argv)

    args = build_parser().parse_args(rest)
    setup_logging('DEBUG' if args.verbose else config.log_level)

    try:
        dispatch(args.args)
    except MeowError as e:
        print(f'meowlang: error: {e}', file=sys.stderr)
        return 2 if isinstance(e, (UsageError, InvalidMode)) else 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
