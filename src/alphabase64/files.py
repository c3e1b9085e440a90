"""File sources and sinks for the stream encoder.

The codec itself never touches the filesystem. These helpers read a file in
fixed-size chunks, feed them to :class:`~alphabase64.stream.StreamEncoder`
and either return the text or write it to another file. Filesystem problems
surface as :class:`~alphabase64.errors.CodecIOError` subclasses, never as
codec errors.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Union

from .alphabet import STANDARD, AlphabetLike, as_alphabet
from .errors import (
    DestinationWriteError,
    EmptyInputError,
    SourceNotFoundError,
    SourceReadError,
    SourceTooLargeError,
)
from .stream import DEFAULT_CHUNK_SIZE, StreamEncoder

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _check_source(path: Path, max_size: Optional[int]) -> int:
    try:
        stat = path.stat()
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise SourceReadError(f"Cannot stat input file {path}: {exc}") from exc

    if not path.is_file():
        raise SourceReadError(f"Input path is not a regular file: {path}")
    if max_size and stat.st_size > max_size:
        raise SourceTooLargeError(
            f"Input file {path} is {stat.st_size} bytes, above the {max_size} byte limit"
        )
    return stat.st_size


def _same_file(source: Path, destination: Path) -> bool:
    if source.resolve() == destination.resolve():
        return True
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


def read_chunks(path: PathLike, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the contents of ``path`` in ``chunk_size`` byte pieces."""
    source = Path(path)
    try:
        with source.open("rb") as handle:
            while True:
                chunk = handle.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Input file not found: {source}") from exc
    except OSError as exc:
        raise SourceReadError(f"Failed to read {source}: {exc}") from exc


def encode_file(
    path: PathLike,
    alphabet: AlphabetLike = STANDARD,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_size: Optional[int] = None,
) -> str:
    """Encode the contents of a file and return the Base64 text.

    The alphabet is validated before the file is opened.

    Raises:
        InvalidAlphabetError: ``alphabet`` is rejected.
        EmptyInputError: the file holds no bytes.
        CodecIOError: the file is missing, unreadable or above ``max_size``.
    """
    encoder = StreamEncoder(as_alphabet(alphabet), chunk_size)
    source = Path(path)
    size = _check_source(source, max_size)
    if size == 0:
        raise EmptyInputError()

    for chunk in read_chunks(source, encoder.chunk_size_hint):
        encoder.process_chunk(chunk)

    text = encoder.finalize()
    logger.info("file_encoded path=%s bytes=%d chars=%d", source, size, len(text))
    return text


def encode_file_to_file(
    src: PathLike,
    dst: PathLike,
    alphabet: AlphabetLike = STANDARD,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_size: Optional[int] = None,
) -> int:
    """Stream-encode ``src`` into ``dst`` and return the number of characters written.

    Encoded fragments are written as they are produced, so neither the input
    nor the output is held in memory as a whole. A partially written
    ``dst`` is removed when encoding fails, unless it existed before the call.
    ``dst`` must not be the same file as ``src``.
    """
    encoder = StreamEncoder(as_alphabet(alphabet), chunk_size)
    source = Path(src)
    destination = Path(dst)
    size = _check_source(source, max_size)
    if size == 0:
        raise EmptyInputError()

    if _same_file(source, destination):
        raise DestinationWriteError(f"Output file {destination} is the same file as the input")

    created = not destination.exists()
    written = 0
    try:
        handle = destination.open("w", encoding="ascii", newline="")
    except OSError as exc:
        raise DestinationWriteError(f"Cannot open output file {destination}: {exc}") from exc

    try:
        with handle:
            for fragment in encoder.iter_encoded(read_chunks(source, encoder.chunk_size_hint)):
                try:
                    handle.write(fragment)
                except OSError as exc:
                    raise DestinationWriteError(f"Failed to write {destination}: {exc}") from exc
                written += len(fragment)
    except Exception:
        if created:
            destination.unlink(missing_ok=True)
        raise

    logger.info("file_encoded path=%s output=%s bytes=%d chars=%d", source, destination, size, written)
    return written


__all__ = ["encode_file", "encode_file_to_file", "read_chunks"]
