"""Extension based registry for file I/O.

Application records are read from ``.json``, ``.yml`` and ``.yaml`` files and
encoded documents are written to ``.pdf`` files.  The registry dispatches on
the lower-cased file extension.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..record import ApplicationRecord
from ..utils.errors import UnsupportedFormatError
from .readers.json_reader import read_json_record
from .readers.yaml_reader import read_yaml_record
from .writers.pdf_writer import write_pdf

ReaderFunc = Callable[[str | os.PathLike[str]], ApplicationRecord]
WriterFunc = Callable[[str | os.PathLike[str], bytes], None]

_READERS: dict[str, Callable[..., ApplicationRecord]] = {}
_WRITERS: dict[str, Callable[..., None]] = {}


def register_reader(ext: str, func: Callable[..., ApplicationRecord]) -> None:
    """Register a record reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".json"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns an :class:`ApplicationRecord`.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_record(path: str | os.PathLike[str], **kwargs: Any) -> ApplicationRecord:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], data: bytes, **kwargs: Any) -> None:
    """Write ``data`` to ``path`` using the registered writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, data, **kwargs)


register_reader(".json", read_json_record)
register_reader(".yml", read_yaml_record)
register_reader(".yaml", read_yaml_record)
register_writer(".pdf", write_pdf)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_record",
    "write_file",
]
