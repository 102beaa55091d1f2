"""
Quarter sine wave sample generator.
"""

from __future__ import annotations

import math
from typing import TextIO

VALUES_PER_LINE = 10


def wave(length: int, places: int = 4) -> str:
    """
    Return ``sin(y / length * pi / 2)`` for ``y`` in ``range(length)``.

    Each value is followed by a comma, ten values per line, and the text
    always ends with a newline. A zero length yields only the newline.
    """
    parts = []
    for y in range(length):
        x = math.sin(((y / length) * math.pi) / 2.0)
        parts.append(f"{x:.{places}f},")
        if y % VALUES_PER_LINE == VALUES_PER_LINE - 1:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def output_function(length: int, places: int, writer: TextIO) -> None:
    writer.write(wave(length, places))
