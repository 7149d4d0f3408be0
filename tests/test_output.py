import os

import pytest

from tinylib.numbers import format_long
from tinylib.output import (
    put_char,
    put_endl,
    put_lstr,
    put_nbr,
    put_nchar,
    put_str,
)


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_put_str_writes_all(pipe):
    count = put_str("hello", pipe[1])
    assert count == len("hello")
    assert _drain(pipe) == b"hello"


def test_put_str_bytes(pipe):
    put_str(b"raw", pipe[1])
    assert _drain(pipe) == b"raw"


def test_put_char(pipe):
    assert put_char("z", pipe[1]) == 1
    assert _drain(pipe) == b"z"


def test_put_char_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char("ab", pipe[1])


def test_put_endl_appends_newline(pipe):
    count = put_endl("line", pipe[1])
    data = _drain(pipe)
    assert data == b"line\n"
    assert count == len(data)


def test_put_lstr_writes_prefix(pipe):
    assert put_lstr("abcdef", pipe[1], 3) == 3
    assert _drain(pipe) == b"abc"


def test_put_lstr_too_long(pipe):
    with pytest.raises(IndexError):
        put_lstr("ab", pipe[1], 5)


@pytest.mark.parametrize("value", [0, -42, 1234567, -(2**63)])
def test_put_nbr_round_trip(pipe, value):
    count = put_nbr(value, pipe[1])
    data = _drain(pipe)
    assert data == format_long(value).encode()
    assert count == len(data)
    assert int(data) == value


def test_put_nchar_repeats(pipe):
    assert put_nchar("-", pipe[1], 4) == 4
    assert _drain(pipe) == b"----"


def test_put_nchar_zero_times(pipe):
    assert put_nchar("x", pipe[1], 0) == 0
    assert _drain(pipe) == b""


def test_put_nchar_negative(pipe):
    with pytest.raises(ValueError):
        put_nchar("x", pipe[1], -1)


def test_write_to_closed_descriptor_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        put_str("data", write_fd)