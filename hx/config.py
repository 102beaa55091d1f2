"""
Resolved run configuration handed from the command line to the renderers.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, TextIO

from .format import Format

DEFAULT_COLUMN_WIDTH = 10
DEFAULT_PLACES = 4
NO_COLOR_ENV = "NO_COLOR"


class OutputMode(Enum):
    DUMP = "dump"
    ARRAY = "array"
    WAVE = "wave"


def resolve_colorize(
    explicit: Optional[bool],
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Decide once whether output gets colour escapes.

    An explicit choice wins. Otherwise colour is off when NO_COLOR is set to
    a non-empty value or when ``stream`` is not a terminal.
    """
    if explicit is not None:
        return explicit
    if environ is None:
        environ = os.environ
    if environ.get(NO_COLOR_ENV):
        return False
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value == "1"


@dataclass
class HexConfig:
    column_width: int = DEFAULT_COLUMN_WIDTH
    truncate_len: int = 0
    format: Format = Format.LOWER_HEX
    colorize: bool = True
    prefix: bool = True
    array: Optional[str] = None
    func: Optional[int] = None
    places: int = DEFAULT_PLACES

    @property
    def mode(self) -> OutputMode:
        if self.func is not None:
            return OutputMode.WAVE
        if self.array is not None:
            return OutputMode.ARRAY
        return OutputMode.DUMP

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
    ) -> "HexConfig":
        prefix = _flag(args.prefix)
        return cls(
            column_width=args.cols,
            truncate_len=args.len,
            format=Format.from_code(args.format),
            colorize=resolve_colorize(_flag(args.color), environ, stdout),
            prefix=True if prefix is None else prefix,
            array=args.array,
            func=args.func,
            places=args.places,
        )
