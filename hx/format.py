"""
Numeric bases used to render a single byte.

Only octal, hexadecimal and binary have a rendering rule. The remaining
variants are valid selections that fail with FormatError when used.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class FormatError(ValueError):
    """Raised when a byte is rendered with a format that has no rule."""

    def __init__(self, fmt: "Format") -> None:
        super().__init__(f"format {fmt.name} is not implemented")
        self.format = fmt


class Format(Enum):
    OCTAL = "o"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    POINTER = "p"
    BINARY = "b"
    LOWER_EXP = "e"
    UPPER_EXP = "E"
    UNKNOWN = "?"

    @classmethod
    def from_code(cls, code: str) -> "Format":
        for member in cls:
            if member.value == code and member is not cls.UNKNOWN:
                return member
        return cls.UNKNOWN

    def format(self, data: int, prefix: bool = True) -> str:
        try:
            base_prefix, spec = _SPECS[self]
        except KeyError:
            raise FormatError(self) from None
        digits = f"{data:{spec}}"
        return base_prefix + digits if prefix else digits


# Digit widths are fixed by the 8-bit byte; the prefix is always lowercase.
_SPECS: Dict[Format, Tuple[str, str]] = {
    Format.OCTAL: ("0o", "04o"),
    Format.LOWER_HEX: ("0x", "02x"),
    Format.UPPER_HEX: ("0x", "02X"),
    Format.BINARY: ("0b", "08b"),
}
