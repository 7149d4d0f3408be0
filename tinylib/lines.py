"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 64


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Bytes read past the end of a line are kept for the next call.
    """

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        self.fd = fd
        self._stash = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line with its newline, the last line without one,
        or None at end of input.

        A failed read clears the kept bytes and raises OSError.
        """
        line = self._stash
        try:
            os.read(self.fd, 0)
            while b"\n" not in line:
                chunk = os.read(self.fd, BUFFER_SIZE)
                if not chunk:
                    break
                line += chunk
        except OSError:
            self._stash = bytearray()
            raise
        if not line:
            return None
        end = line.find(b"\n")
        if end < 0:
            result, self._stash = bytes(line), bytearray()
        else:
            result, self._stash = bytes(line[: end + 1]), bytearray(line[end + 1 :])
        return result.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping leftover bytes per descriptor."""
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    return reader.read_line()