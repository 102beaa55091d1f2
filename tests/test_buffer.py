"""
Tests for the byte stream chunker.
"""

import io

import pytest

from hx.buffer import MAX_ARRAY_SIZE, chunk


class FailingReader(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("read failed")


def test_empty_input_has_one_empty_line():
    """An empty stream still yields a page with a single empty line."""
    page = chunk(io.BytesIO(b""), 0, 10)
    assert page.bytes == 0
    assert len(page.body) == 1
    assert page.body[0].hex_body == b""


def test_exact_multiple_keeps_trailing_empty_line():
    data = bytes(range(1, 11))
    page = chunk(io.BytesIO(data), 0, 10)
    assert page.bytes == 10
    assert len(page.body) == 2
    assert page.body[0].hex_body == data
    assert page.body[1].bytes == 0


def test_column_width_one():
    """Every byte gets its own line, plus the trailing empty one."""
    page = chunk(io.BytesIO(b"\x01\x02\x03"), 0, 1)
    assert page.bytes == 3
    assert len(page.body) == 4
    assert [line.hex_body for line in page.body] == [b"\x01", b"\x02", b"\x03", b""]


def test_multiple_lines_with_partial_tail():
    page = chunk(io.BytesIO(bytes(range(12))), 0, 5)
    assert page.bytes == 12
    assert [line.bytes for line in page.body] == [5, 5, 2]
    assert [line.offset for line in page.body] == [0, 5, 10]


def test_single_byte():
    page = chunk(io.BytesIO(b"\x42"), 0, 10)
    assert page.bytes == 1
    assert len(page.body) == 1
    assert page.body[0].hex_body[0] == 0x42


def test_truncation_stops_reading():
    """Bytes past the truncation length stay in the stream."""
    stream = io.BytesIO(bytes(range(1, 11)))
    page = chunk(stream, 5, 10)
    assert page.bytes == 5
    assert page.data() == b"\x01\x02\x03\x04\x05"
    assert stream.read() == b"\x06\x07\x08\x09\x0a"


def test_truncation_on_line_boundary():
    page = chunk(io.BytesIO(bytes(20)), 10, 5)
    assert page.bytes == 10
    assert [line.bytes for line in page.body] == [5, 5, 0]


def test_truncation_longer_than_input():
    page = chunk(io.BytesIO(b"abc"), 100, 10)
    assert page.bytes == 3


def test_hard_cap_as_truncation_length():
    data = bytes(MAX_ARRAY_SIZE + 100)
    page = chunk(io.BytesIO(data), MAX_ARRAY_SIZE, 16)
    assert page.bytes == MAX_ARRAY_SIZE


def test_no_hard_cap_without_truncation():
    data = bytes(range(256)) * 300
    page = chunk(io.BytesIO(data), 0, 16)
    assert page.bytes == len(data)
    assert page.data() == data


def test_line_byte_counts_add_up():
    data = b"The quick brown fox jumps over the lazy dog"
    page = chunk(io.BytesIO(data), 0, 7)
    assert sum(line.bytes for line in page.body) == page.bytes == len(data)
    assert page.data() == data


def test_lines_are_frozen():
    page = chunk(io.BytesIO(b"abcd"), 0, 2)
    assert all(isinstance(line.hex_body, bytes) for line in page.body)


def test_read_error_propagates():
    with pytest.raises(OSError, match="read failed"):
        chunk(FailingReader(), 0, 10)


def test_invalid_column_width():
    with pytest.raises(ValueError):
        chunk(io.BytesIO(b"abc"), 0, 0)
