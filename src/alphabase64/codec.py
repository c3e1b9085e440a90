"""One-shot Base64 encode/decode (RFC 4648) over a configurable alphabet."""

from __future__ import annotations

from typing import Union

from .alphabet import INVALID, PAD, STANDARD, AlphabetLike, DecodeTable, as_alphabet
from .errors import EmptyInputError, InvalidCharacterError, InvalidLengthError

BytesLike = Union[bytes, bytearray, memoryview]
TextLike = Union[str, bytes, bytearray, memoryview]


def ensure_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return bytes(data)


def encode_groups(data: bytes, symbols: str) -> str:
    """Encode ``data`` with ``symbols``, padding the final partial group.

    No validation happens here; callers check the input and alphabet first.
    """
    size = len(data)
    whole = size - size % 3
    out = []
    for i in range(0, whole, 3):
        chunk = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(
            symbols[(chunk >> 18) & 0x3F]
            + symbols[(chunk >> 12) & 0x3F]
            + symbols[(chunk >> 6) & 0x3F]
            + symbols[chunk & 0x3F]
        )

    remainder = size - whole
    if remainder == 1:
        chunk = data[whole] << 16
        out.append(symbols[(chunk >> 18) & 0x3F] + symbols[(chunk >> 12) & 0x3F] + PAD + PAD)
    elif remainder == 2:
        chunk = (data[whole] << 16) | (data[whole + 1] << 8)
        out.append(
            symbols[(chunk >> 18) & 0x3F]
            + symbols[(chunk >> 12) & 0x3F]
            + symbols[(chunk >> 6) & 0x3F]
            + PAD
        )
    return "".join(out)


def encode(data: BytesLike, alphabet: AlphabetLike = STANDARD) -> str:
    """Encode raw bytes to Base64 text.

    Args:
        data: Bytes to encode. Must not be empty.
        alphabet: An :class:`~alphabase64.alphabet.Alphabet` or a 64-symbol string.

    Returns:
        ASCII text whose length is ``ceil(len(data) / 3) * 4``.

    Raises:
        EmptyInputError: ``data`` is empty (checked before the alphabet).
        InvalidAlphabetError: ``alphabet`` is rejected by validation.
    """
    payload = ensure_bytes(data)
    if not payload:
        raise EmptyInputError()
    active = as_alphabet(alphabet)
    return encode_groups(payload, active.symbols)


def _lookup(table: DecodeTable, symbol: str, position: int) -> int:
    code = ord(symbol)
    value = table[code] if code < len(table) else INVALID
    if value == INVALID:
        raise InvalidCharacterError(position, symbol)
    return value


def decode(text: TextLike, alphabet: AlphabetLike = STANDARD) -> bytes:
    """Decode Base64 text back into bytes.

    Checks run in a fixed order: empty input, alphabet, length, then each
    symbol. The third and fourth symbol of any group may be the padding
    symbol, in which case the matching output byte is skipped.

    Raises:
        EmptyInputError: ``text`` is empty.
        InvalidAlphabetError: ``alphabet`` is rejected by validation.
        InvalidLengthError: ``len(text)`` is not a multiple of 4.
        InvalidCharacterError: a symbol is outside the alphabet or misplaced padding.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        # latin-1 keeps a 1:1 byte -> code point mapping so offsets stay exact
        text = bytes(text).decode("latin-1")
    if not text:
        raise EmptyInputError()
    active = as_alphabet(alphabet)
    if len(text) % 4 != 0:
        raise InvalidLengthError(len(text))

    table = active.decode_table()
    out = bytearray()
    for i in range(0, len(text), 4):
        v0 = _lookup(table, text[i], i)
        v1 = _lookup(table, text[i + 1], i + 1)
        pad2 = text[i + 2] == PAD
        pad3 = text[i + 3] == PAD
        v2 = 0 if pad2 else _lookup(table, text[i + 2], i + 2)
        v3 = 0 if pad3 else _lookup(table, text[i + 3], i + 3)

        chunk = (v0 << 18) | (v1 << 12) | (v2 << 6) | v3
        out.append((chunk >> 16) & 0xFF)
        if not pad2:
            out.append((chunk >> 8) & 0xFF)
        if not pad3:
            out.append(chunk & 0xFF)
    return bytes(out)


def encoded_length(size: int) -> int:
    """Length of the encoded text for ``size`` input bytes."""
    return ((size + 2) // 3) * 4


__all__ = ["encode", "decode", "encode_groups", "ensure_bytes", "encoded_length", "BytesLike", "TextLike"]
