"""Fichero local sobre un descriptor del sistema operativo.

Por qué está en adapters:
- `os.open`/`os.lseek`/`os.write` son detalles de infraestructura.
- El Core solo conoce el contrato `core.interfaces.target.ByteTarget`.

Cada `OSError` se traduce a `FileOperationError` con el nombre de la llamada
que falló, para que el mensaje diga qué paso de I/O se rompió.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from core.errors import FileOperationError

logger = logging.getLogger(__name__)

DEFAULT_CREATE_MODE = 0o664
DEFAULT_CHUNK_SIZE = 4096


class LocalFile:
    """Binary file opened for one hexedit operation."""

    def __init__(
        self,
        path: str | Path,
        *,
        writable: bool = False,
        create_mode: int = DEFAULT_CREATE_MODE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.path = str(path)
        self.writable = writable
        self.create_mode = create_mode
        self.chunk_size = chunk_size
        self._fd: int | None = None

    def __enter__(self) -> "LocalFile":
        flags = os.O_RDWR | os.O_CREAT if self.writable else os.O_RDONLY
        flags |= getattr(os, "O_BINARY", 0)
        try:
            self._fd = os.open(self.path, flags, self.create_mode)
        except OSError as exc:
            raise FileOperationError.from_os_error("open", self.path, exc) from exc
        logger.debug("opened %s (%s)", self.path, "rw" if self.writable else "ro")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    @property
    def fd(self) -> int:
        if self._fd is None:
            raise RuntimeError("File not open. Use as context manager.")
        return self._fd

    def _lseek(self, offset: int, whence: int) -> int:
        try:
            return os.lseek(self.fd, offset, whence)
        except OSError as exc:
            raise FileOperationError.from_os_error("lseek", self.path, exc) from exc

    def size(self) -> int:
        pos = self._lseek(0, os.SEEK_CUR)
        size = self._lseek(0, os.SEEK_END)
        self._lseek(pos, os.SEEK_SET)
        return size

    def seek(self, offset: int) -> int:
        return self._lseek(offset, os.SEEK_SET)

    def seek_end(self) -> int:
        return self._lseek(0, os.SEEK_END)

    def iter_bytes(self, count: int) -> Iterator[int]:
        remaining = count
        while remaining > 0:
            try:
                chunk = os.read(self.fd, min(self.chunk_size, remaining))
            except OSError as exc:
                raise FileOperationError.from_os_error("read", self.path, exc) from exc
            if not chunk:
                return
            remaining -= len(chunk)
            yield from chunk

    def write(self, data: bytes) -> int:
        written = self._write(data)
        if written != len(data):
            raise FileOperationError("write", self.path, f"short write ({written} of {len(data)} bytes)")
        return written

    def write_repeated(self, value: int, count: int) -> int:
        one = bytes((value,))
        for _ in range(count):
            if self._write(one) != 1:
                raise FileOperationError("write", self.path, "short write")
        return count

    def _write(self, data: bytes) -> int:
        try:
            return os.write(self.fd, data)
        except OSError as exc:
            raise FileOperationError.from_os_error("write", self.path, exc) from exc
