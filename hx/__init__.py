"""
hx: hex dump of files or standard input, with source-array and wave output modes.
"""

from __future__ import annotations

from .array_output import ARRAY_FORMATS, render_array
from .buffer import MAX_ARRAY_SIZE, chunk
from .config import HexConfig, OutputMode, resolve_colorize
from .format import Format, FormatError
from .function_output import output_function, wave
from .models import Line, Page
from .output import append_ascii, byte_to_color, offset, print_byte, print_offset, render_dump

__version__ = "0.6.0"

__all__ = [
    "ARRAY_FORMATS",
    "Format",
    "FormatError",
    "HexConfig",
    "Line",
    "MAX_ARRAY_SIZE",
    "OutputMode",
    "Page",
    "append_ascii",
    "byte_to_color",
    "chunk",
    "offset",
    "output_function",
    "print_byte",
    "print_offset",
    "render_array",
    "render_dump",
    "resolve_colorize",
    "wave",
]
