"""
Page and Line containers produced by the chunker and read by the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

PRINTABLE_FIRST = 32
PRINTABLE_LAST = 126


def printable(value: int) -> str:
    if PRINTABLE_FIRST <= value <= PRINTABLE_LAST:
        return chr(value)
    return "."


@dataclass
class Line:
    """One row of the dump: up to ``column_width`` raw byte values."""

    offset: int = 0
    hex_body: Union[bytearray, bytes] = field(default_factory=bytearray)
    bytes: int = 0

    def append(self, value: int) -> None:
        self.hex_body.append(value)
        self.bytes += 1

    @property
    def ascii(self) -> str:
        return "".join(printable(value) for value in self.hex_body)

    def __len__(self) -> int:
        return self.bytes


@dataclass
class Page:
    """All lines read from one input stream plus the running byte total."""

    body: List[Line] = field(default_factory=list)
    bytes: int = 0

    def push(self, line: Line) -> None:
        # Lines are frozen once attached.
        line.hex_body = bytes(line.hex_body)
        self.body.append(line)

    def data(self) -> bytes:
        return b"".join(line.hex_body for line in self.body)
