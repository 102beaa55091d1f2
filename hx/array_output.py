"""
Emit a Page as a byte array literal for a handful of programming languages.

| Code | Language | Opening                       |
|------|----------|-------------------------------|
| r    | Rust     | let ARRAY: [u8; N] = [        |
| c    | C        | unsigned char ARRAY[N] = {    |
| g    | Go       | a := [N]byte{                 |
| p    | Python   | a = [                         |
| k    | Kotlin   | val a = byteArrayOf(          |
| j    | Java     | byte[] a = new byte[]{        |
| s    | Swift    | let a: [UInt8] = [            |
| f    | F#       | let a = [|                    |

Bytes are always written as lowercase hex with a 0x prefix, whatever format
the dump would use.
"""

from __future__ import annotations

from typing import Dict, TextIO, Tuple

from .format import Format
from .models import Page

UNKNOWN_ARRAY_FORMAT = "unknown array format"
INDENT = "    "

ARRAY_FORMATS: Dict[str, str] = {
    "r": "rust",
    "c": "C",
    "g": "golang",
    "p": "python",
    "k": "kotlin",
    "j": "java",
    "s": "swift",
    "f": "fsharp",
}

_DELIMITERS: Dict[str, Tuple[str, str]] = {
    "r": ("let ARRAY: [u8; {n}] = [", "];"),
    "c": ("unsigned char ARRAY[{n}] = {{", "};"),
    "g": ("a := [{n}]byte{{", "}"),
    "p": ("a = [", "]"),
    "k": ("val a = byteArrayOf(", ")"),
    "j": ("byte[] a = new byte[]{{", "};"),
    "s": ("let a: [UInt8] = [", "]"),
    "f": ("let a = [|", "|]"),
}


def opening_line(language_code: str, total: int) -> str:
    delimiters = _DELIMITERS.get(language_code)
    if delimiters is None:
        return UNKNOWN_ARRAY_FORMAT
    return delimiters[0].format(n=total)


def closing_line(language_code: str) -> str:
    delimiters = _DELIMITERS.get(language_code)
    if delimiters is None:
        return UNKNOWN_ARRAY_FORMAT
    return delimiters[1]


def render_array(page: Page, language_code: str, writer: TextIO) -> None:
    """
    Write ``page`` as an array literal in the language named by ``language_code``.

    An unknown code is not an error: the opening and closing lines become a
    diagnostic text and the bytes are still listed. The last byte of the page
    carries no separator, except in Go where the trailing comma is kept.
    """
    fsharp = language_code == "f"
    suffix = "uy" if fsharp else ""
    separator = "uy; " if fsharp else ", "

    writer.write(opening_line(language_code, page.bytes) + "\n")
    count = 0
    for line in page.body:
        writer.write(INDENT)
        for value in line.hex_body:
            count += 1
            token = Format.LOWER_HEX.format(value, True)
            if count == page.bytes and language_code != "g":
                writer.write(token + suffix)
            else:
                writer.write(token + separator)
        writer.write("\n")
    writer.write(closing_line(language_code) + "\n")
