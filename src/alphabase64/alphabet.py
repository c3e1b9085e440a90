"""Alphabets: the 64-symbol tables shared by encode and decode."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .errors import (
    InvalidAlphabetCharacterError,
    InvalidAlphabetLengthError,
    InvalidAlphabetPaddingError,
)

PAD = "="
ALPHABET_SIZE = 64
INVALID = 0xFF

DecodeTable = Tuple[int, ...]


def validate_alphabet(symbols: str) -> None:
    """Check a candidate symbol string, length first, then padding."""
    if len(symbols) != ALPHABET_SIZE:
        raise InvalidAlphabetLengthError()
    if PAD in symbols:
        raise InvalidAlphabetPaddingError()
    if not symbols.isascii() or len(set(symbols)) != ALPHABET_SIZE:
        raise InvalidAlphabetCharacterError()


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of 64 symbols; symbol ``i`` encodes the 6-bit value ``i``."""

    symbols: str
    name: str = field(default="custom", compare=False)

    def __post_init__(self) -> None:
        validate_alphabet(self.symbols)

    def __str__(self) -> str:
        return self.symbols

    def decode_table(self) -> DecodeTable:
        return build_decode_table(self.symbols)


STANDARD = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/", "standard")
URL_SAFE = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_", "url-safe")

BUILTIN_ALPHABETS: Dict[str, Alphabet] = {
    "standard": STANDARD,
    "url-safe": URL_SAFE,
    "url_safe": URL_SAFE,
    "urlsafe": URL_SAFE,
}

AlphabetLike = Union[Alphabet, str]


def _make_table(symbols: str) -> DecodeTable:
    table = [INVALID] * 256
    for value, symbol in enumerate(symbols):
        table[ord(symbol)] = value
    return tuple(table)


_BUILTIN_TABLES: Dict[str, DecodeTable] = {
    STANDARD.symbols: _make_table(STANDARD.symbols),
    URL_SAFE.symbols: _make_table(URL_SAFE.symbols),
}


def build_decode_table(symbols: str) -> DecodeTable:
    """Return the byte -> 6-bit lookup for ``symbols``.

    Entries not in the alphabet, including the padding symbol, hold
    ``INVALID``. Tables for the built-in alphabets are reused; any other
    alphabet gets a fresh table.
    """
    cached = _BUILTIN_TABLES.get(symbols)
    if cached is not None:
        return cached
    return _make_table(symbols)


def as_alphabet(alphabet: AlphabetLike) -> Alphabet:
    """Validate ``alphabet`` and return it as an :class:`Alphabet`."""
    if isinstance(alphabet, Alphabet):
        validate_alphabet(alphabet.symbols)
        return alphabet
    return Alphabet(alphabet)


def resolve_alphabet(value: str) -> Alphabet:
    """Map a name (``standard``, ``url-safe``) or a literal 64-symbol string to an alphabet."""
    builtin = BUILTIN_ALPHABETS.get(value.strip().lower())
    if builtin is not None:
        return builtin
    return Alphabet(value)


__all__ = [
    "PAD",
    "ALPHABET_SIZE",
    "INVALID",
    "Alphabet",
    "AlphabetLike",
    "DecodeTable",
    "STANDARD",
    "URL_SAFE",
    "BUILTIN_ALPHABETS",
    "validate_alphabet",
    "build_decode_table",
    "as_alphabet",
    "resolve_alphabet",
]
