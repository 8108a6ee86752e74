"""File operation driver.

This module composes the parsers and the dump renderer with one file
operation each: read a range as a hex dump, write a decoded hex payload,
or fill a range with one repeated byte. The CLI only translates argument
shapes into the request objects below and prints what comes back, which
keeps the order of validation (and therefore which error wins) in one
place.

Keywords resolved here rather than in the number parser:
- offset ``append`` (any case): the current end of the file.
- length ``all`` (any case) or any value below 1: the rest of the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from adapters.local_file import LocalFile
from core.config import AppSettings
from core.domain.models import WriteReport
from core.errors import EmptyArgumentError, InvalidLengthError, OffsetOutOfRangeError
from core.interfaces.target import ByteTarget
from core.parsers import decode_payload, parse_literal, parse_number, resolve_byte_spec
from core.services.hexdump import DumpLine, iter_dump_lines

logger = logging.getLogger(__name__)

APPEND = "append"
ALL = "all"

Opener = Callable[..., ByteTarget]


@dataclass
class ReadRequest:
    """Dump `length` bytes of `path` starting at `offset`."""

    path: str | Path
    offset: str = "0"
    length: str = ALL


@dataclass
class WriteRequest:
    """Write the hex digits in `data` at `offset`."""

    path: str | Path
    offset: str
    data: str


@dataclass
class FillRequest:
    """Write the byte described by `char` `length` times at `offset`."""

    path: str | Path
    offset: str
    length: str
    char: str


def is_keyword(text: str, keyword: str) -> bool:
    return text.lower() == keyword


def _parse_offset(text: str) -> int:
    literal = parse_literal(text)
    logger.debug("offset %s read as %s %d", text, literal.base.label(), literal.value)
    return literal.value


def _seek_for_write(target: ByteTarget, text: str) -> int:
    if is_keyword(text, APPEND):
        return target.seek_end()
    return target.seek(_parse_offset(text))


def read_range(
    request: ReadRequest,
    *,
    settings: AppSettings | None = None,
    opener: Opener = LocalFile,
) -> Iterator[DumpLine]:
    """Stream the requested range as dump rows.

    The file stays open while the generator is consumed and is closed when
    it finishes, fails or is closed early.
    """

    settings = settings or AppSettings()
    with opener(request.path, writable=False, chunk_size=settings.read_chunk_size) as target:
        size = target.size()
        offset = size if is_keyword(request.offset, APPEND) else _parse_offset(request.offset)
        if offset >= size:
            raise OffsetOutOfRangeError(offset, size)
        target.seek(offset)

        length = 0 if is_keyword(request.length, ALL) else parse_number(request.length)
        if length < 1:
            length = size - offset

        logger.debug("dumping %d bytes of %s from offset %d", length, request.path, offset)
        yield from iter_dump_lines(target.iter_bytes(length), length)


def write_payload(
    request: WriteRequest,
    *,
    settings: AppSettings | None = None,
    opener: Opener = LocalFile,
) -> WriteReport:
    """Decode `request.data` and write it as one contiguous block."""

    if request.data == "":
        raise EmptyArgumentError()
    payload = decode_payload(request.data)

    settings = settings or AppSettings()
    with opener(request.path, writable=True, create_mode=settings.create_mode) as target:
        offset = _seek_for_write(target, request.offset)
        written = target.write(payload.data)

    logger.debug("wrote %d bytes to %s at offset %d", written, request.path, offset)
    return WriteReport(path=os.fspath(request.path), offset=offset, bytes_written=written)


def fill_range(
    request: FillRequest,
    *,
    settings: AppSettings | None = None,
    opener: Opener = LocalFile,
) -> WriteReport:
    """Write one byte `length` times, one write call per byte.

    An I/O error in the middle leaves the bytes already written in place.
    """

    length = parse_number(request.length)
    if length < 1:
        raise InvalidLengthError(request.length)
    spec = resolve_byte_spec(request.char)
    logger.debug("fill byte 0x%02X from %s notation", spec.value, spec.notation.value)

    settings = settings or AppSettings()
    with opener(request.path, writable=True, create_mode=settings.create_mode) as target:
        offset = _seek_for_write(target, request.offset)
        written = target.write_repeated(spec.value, length)

    logger.debug("filled %d bytes of %s at offset %d", written, request.path, offset)
    return WriteReport(path=os.fspath(request.path), offset=offset, bytes_written=written)
