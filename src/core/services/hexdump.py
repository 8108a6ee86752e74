"""Hex dump rendering.

The layout is fixed: each byte is printed as ``" %02X"``, every 4th byte of
a 16-byte row (except the 16th) gets one extra trailing space as a column
separator, and a line break closes each row. Positions are counted from the
start of the requested range, not from the start of the file.

Example (17 bytes)::

     00 01 02 03  04 05 06 07  08 09 0A 0B  0C 0D 0E 0F
     10

The renderer streams: `iter_dump_lines` pulls bytes lazily from any
iterable of ints and yields each row as soon as it is complete.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

BYTES_PER_LINE = 16
BYTES_PER_GROUP = 4


@dataclass(frozen=True)
class DumpLine:
    """One row of the dump (at most 16 bytes).

    An empty row renders as a bare line break; it appears when the source
    runs out exactly on a row boundary.
    """

    data: bytes

    def render(self) -> str:
        return format_line(self.data)


def format_line(data: bytes) -> str:
    cells = []
    for index, byte in enumerate(data, start=1):
        if index % BYTES_PER_GROUP == 0 and index % BYTES_PER_LINE != 0:
            cells.append(f" {byte:02X} ")
        else:
            cells.append(f" {byte:02X}")
    return "".join(cells) + "\n"


def iter_dump_lines(source: Iterable[int], length: int) -> Iterator[DumpLine]:
    """Yield the rows for the first `length` bytes of `source`.

    If `source` is exhausted early, the pending (possibly empty) row is
    closed and iteration stops, without padding.
    """

    row = bytearray()
    count = 0
    it = iter(source)

    while count < length:
        try:
            byte = next(it)
        except StopIteration:
            yield DumpLine(bytes(row))
            return

        row.append(byte)
        count += 1
        if count == length or len(row) == BYTES_PER_LINE:
            yield DumpLine(bytes(row))
            row.clear()


def render(data: Iterable[int], length: int | None = None) -> str:
    """Render a whole byte sequence as dump text.

    `length` defaults to ``len(data)``; a larger value makes the dump stop
    early with a trailing line break, as when a file is shorter than the
    requested range.
    """

    if length is None:
        data = bytes(data)
        length = len(data)
    return "".join(line.render() for line in iter_dump_lines(data, length))
