"""
Offset / byte / ASCII triptych rendering of a Page.

Each row is an 8 character offset, the bytes of one line in the configured
numeric format, padding for a short final line and the printable column:

    0x000000: 0x30 0x31 0x32                                    012
       bytes: 3
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, TextIO

from rich.color import Color, ColorSystem, ColorType
from rich.style import Style

from .format import Format
from .models import Page, printable

if TYPE_CHECKING:
    from .config import HexConfig

# Width reserved per missing byte on a short line ("0xXX " plus one).
PAD_PER_BYTE = 5
ZERO_BYTE_COLOR = 0x16


def offset(value: int) -> str:
    return f"{value:#08x}"


def print_offset(writer: TextIO, value: int) -> None:
    writer.write(f"{offset(value)}: ")


def byte_to_color(value: int) -> int:
    """Palette index for ``value``; zero gets a colour visible on dark terminals."""
    if value < 1:
        return ZERO_BYTE_COLOR
    return value


def paint(text: str, value: int) -> str:
    # Always the 256 colour palette, also for indexes below 16.
    index = byte_to_color(value)
    style = Style(color=Color(f"color({index})", ColorType.EIGHT_BIT, number=index))
    return style.render(text, color_system=ColorSystem.EIGHT_BIT)


def print_byte(
    writer: TextIO,
    value: int,
    fmt: Format,
    colorize: bool,
    prefix: bool = True,
) -> None:
    token = fmt.format(value, prefix)
    if colorize:
        token = paint(token, value)
    writer.write(f"{token} ")


def append_ascii(target: List[str], value: int, colorize: bool) -> None:
    char = printable(value)
    target.append(paint(char, value) if colorize else char)


def render_dump(page: Page, config: HexConfig, writer: TextIO) -> None:
    offset_counter = 0
    for line in page.body:
        print_offset(writer, offset_counter)
        ascii_column: List[str] = []
        for value in line.hex_body:
            offset_counter += 1
            print_byte(writer, value, config.format, config.colorize, config.prefix)
            append_ascii(ascii_column, value, config.colorize)

        if line.bytes < config.column_width:
            writer.write(" " * (PAD_PER_BYTE * (config.column_width - line.bytes)))
        writer.write("".join(ascii_column))
        writer.write("\n")
    writer.write(f"   bytes: {page.bytes}\n")
