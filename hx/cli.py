"""
Hex dump of a file, or of standard input when no file is given.

Usage:
  hx [INPUTFILE] [-c COLS] [-l LEN] [-f {o,x,X,b}] [-t {0,1}] [-r {0,1}]
  hx [INPUTFILE] -a {r,c,g,p,k,j,s,f}
  hx -u LENGTH [-p PLACES]

Examples:
  cat Cargo.toml | hx -c 16
  hx image.png -l 64 -f b
  hx image.png -a c > image.h
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, TextIO

from . import __version__
from .array_output import ARRAY_FORMATS, render_array
from .buffer import chunk
from .config import DEFAULT_COLUMN_WIDTH, DEFAULT_PLACES, HexConfig, OutputMode
from .format import FormatError
from .function_output import output_function
from .output import render_dump

NO_INPUT_MESSAGE = "No input provided, run with --help for list of options"


def eprint(message: str) -> None:
    print(message, file=sys.stderr)


class HexArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def build_parser() -> HexArgumentParser:
    languages = ", ".join(f"{name} ({code})" for code, name in ARRAY_FORMATS.items())
    parser = HexArgumentParser(
        prog="hx",
        description="Futuristic take on hexdump.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "file",
        nargs="?",
        metavar="INPUTFILE",
        help="File to dump (reads stdin if omitted).",
    )
    parser.add_argument(
        "-c",
        "--cols",
        type=positive_int,
        default=DEFAULT_COLUMN_WIDTH,
        metavar="columns",
        help=f"Set column length (default: {DEFAULT_COLUMN_WIDTH}).",
    )
    parser.add_argument(
        "-l",
        "--len",
        type=non_negative_int,
        default=0,
        metavar="len",
        help="Set <len> bytes to read (default: 0, read everything).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["o", "x", "X", "b"],
        default="x",
        help="Set format of octet: Octal (o), LowerHex (x), UpperHex (X), Binary (b).",
    )
    parser.add_argument(
        "-t",
        "--color",
        choices=["0", "1"],
        default=None,
        help="Set color tint terminal output. 0 to disable, 1 to enable.",
    )
    parser.add_argument(
        "-r",
        "--prefix",
        choices=["0", "1"],
        default=None,
        help="Include prefix in output (e.g. 0x/0b/0o). 0 to disable, 1 to enable.",
    )
    parser.add_argument(
        "-a",
        "--array",
        choices=list(ARRAY_FORMATS),
        default=None,
        metavar="array_format",
        help=f"Set source code format output: {languages}.",
    )
    parser.add_argument(
        "-u",
        "--func",
        type=non_negative_int,
        default=None,
        metavar="func_length",
        help="Set function wave length.",
    )
    parser.add_argument(
        "-p",
        "--places",
        type=non_negative_int,
        default=DEFAULT_PLACES,
        metavar="func_places",
        help=f"Set function wave output decimal places (default: {DEFAULT_PLACES}).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write log messages to this file instead of stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logger(log_path: Optional[Path], verbose: bool) -> logging.Logger:
    logger = logging.getLogger("hx")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()
    logger.propagate = False
    if log_path is not None:
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    elif verbose:
        handler = logging.StreamHandler(sys.stderr)
    else:
        # Errors already reach stderr through eprint.
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def run(
    config: HexConfig,
    file_arg: Optional[str],
    stdin: BinaryIO,
    stdout: TextIO,
    logger: logging.Logger,
) -> None:
    mode = config.mode
    logger.debug("Output mode: %s", mode.value)
    if mode is OutputMode.WAVE:
        output_function(config.func or 0, config.places, stdout)
        return

    if file_arg is None:
        logger.debug("Reading standard input")
        page = chunk(stdin, config.truncate_len, config.column_width)
    else:
        path = Path(file_arg).expanduser()
        logger.debug("Reading %s", path)
        with path.open("rb") as reader:
            page = chunk(reader, config.truncate_len, config.column_width)

    if mode is OutputMode.ARRAY:
        render_array(page, config.array or "", stdout)
    else:
        render_dump(page, config, stdout)


def _silence_stdout() -> None:
    # Python exits with an error flushing a broken stdout unless it is replaced.
    with contextlib.suppress(OSError, ValueError):
        devnull = os.open(os.devnull, os.O_WRONLY)
        try:
            os.dup2(devnull, sys.stdout.fileno())
        finally:
            os.close(devnull)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    try:
        logger = configure_logger(args.log_file, args.verbose)
    except OSError as exc:
        eprint(f"error: {exc}")
        return 1
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout
    config = HexConfig.from_args(args, os.environ, stdout)

    if args.file is None and config.mode is not OutputMode.WAVE and stdin.isatty():
        logger.error(NO_INPUT_MESSAGE)
        eprint(f"error: {NO_INPUT_MESSAGE}")
        return 1

    try:
        run(config, args.file, stdin, stdout, logger)
        stdout.flush()
    except BrokenPipeError:
        logger.debug("Output pipe closed early")
        if stdout is sys.stdout:
            _silence_stdout()
        return 0
    except (OSError, FormatError) as exc:
        logger.error("%s", exc)
        eprint(f"error: {exc}")
        return 1
    return 0
