"""Chunked Base64 encoding for inputs that arrive in pieces."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from .alphabet import STANDARD, AlphabetLike, as_alphabet
from .codec import BytesLike, encode_groups, ensure_bytes
from .errors import EmptyInputError, StreamClosedError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 48 * 1024


def aligned_chunk_size(size: int) -> int:
    """Round ``size`` down to a multiple of 3 (minimum 3)."""
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return max(3, size - size % 3)


class StreamEncoder:
    """Stateful Base64 encoder fed by successive byte chunks.

    Up to two trailing bytes of each chunk are carried into the next call,
    so the concatenated output equals ``encode`` on the whole input for any
    chunking. Padding is only written by :meth:`finalize`.
    """

    def __init__(self, alphabet: AlphabetLike = STANDARD, chunk_size_hint: int = DEFAULT_CHUNK_SIZE) -> None:
        self.alphabet = as_alphabet(alphabet)
        self.chunk_size_hint = aligned_chunk_size(chunk_size_hint)
        self._parts: List[str] = []
        self._carry = b""
        self._bytes_in = 0
        self._chunks = 0
        self._finalized = False

    @property
    def pending(self) -> int:
        """Number of carried bytes not yet encoded (0-2)."""
        return len(self._carry)

    @property
    def bytes_processed(self) -> int:
        return self._bytes_in

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self) -> None:
        if self._finalized:
            raise StreamClosedError()

    def encode_chunk(self, data: BytesLike) -> str:
        """Encode ``data`` and return the text it completes, without buffering it."""
        self._check_open()
        chunk = ensure_bytes(data)
        if not chunk:
            return ""
        self._bytes_in += len(chunk)
        self._chunks += 1

        working = self._carry + chunk
        whole = len(working) - len(working) % 3
        self._carry = working[whole:]
        return encode_groups(working[:whole], self.alphabet.symbols)

    def process_chunk(self, data: BytesLike) -> None:
        """Append the encoding of ``data`` to the output buffer."""
        text = self.encode_chunk(data)
        if text:
            self._parts.append(text)

    def flush(self) -> str:
        """Encode the carried tail with padding and close the encoder."""
        self._check_open()
        if self._bytes_in == 0:
            raise EmptyInputError()
        tail = encode_groups(self._carry, self.alphabet.symbols)
        self._carry = b""
        self._finalized = True
        logger.debug(
            "stream_finalized alphabet=%s chunks=%d bytes=%d",
            self.alphabet.name,
            self._chunks,
            self._bytes_in,
        )
        return tail

    def finalize(self) -> str:
        """Return all accumulated text and release the buffer."""
        tail = self.flush()
        if tail:
            self._parts.append(tail)
        text = "".join(self._parts)
        self._parts = []
        return text

    def iter_encoded(self, chunks: Iterable[BytesLike]) -> Iterator[str]:
        """Yield encoded fragments for ``chunks`` in order, ending with the padded tail."""
        for chunk in chunks:
            text = self.encode_chunk(chunk)
            if text:
                yield text
        tail = self.flush()
        if tail:
            yield tail


__all__ = ["StreamEncoder", "DEFAULT_CHUNK_SIZE", "aligned_chunk_size"]
