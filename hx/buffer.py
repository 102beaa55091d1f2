"""
Split a byte stream into fixed-width lines collected in a single page.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from .models import Line, Page

# Stops reading only when passed as the truncation length; unlimited reads
# have no ceiling.
MAX_ARRAY_SIZE = 0xFFFF
READ_CHUNK_SIZE = 8192

logger = logging.getLogger(__name__)


def _limit_reached(page: Page, truncate_len: int) -> bool:
    return truncate_len > 0 and page.bytes == truncate_len


def chunk(reader: BinaryIO, truncate_len: int = 0, column_width: int = 10) -> Page:
    """
    Read ``reader`` into a Page of lines holding ``column_width`` bytes each.

    Reading stops at end of input or once ``truncate_len`` bytes have been
    read (0 means no limit). The last line is always pushed, even when it is
    empty, so a page never has an empty body. Read errors propagate.
    """
    if column_width < 1:
        raise ValueError(f"column width must be positive, got {column_width}")

    page = Page()
    line = Line()
    done = False
    while not done:
        size = READ_CHUNK_SIZE
        if truncate_len > 0:
            size = min(size, truncate_len - page.bytes)
        data = reader.read(size)
        if not data:
            break
        for value in data:
            line.append(value)
            page.bytes += 1
            if line.bytes >= column_width:
                page.push(line)
                line = Line(offset=page.bytes)
            if _limit_reached(page, truncate_len):
                done = True
                break
    page.push(line)
    logger.debug("Chunked %d bytes into %d lines", page.bytes, len(page.body))
    return page
