"""Error types raised by the codec, the stream encoder and the file helpers."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Codec error kinds, one per validation failure."""

    EMPTY_INPUT = "empty_input"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"
    INVALID_ALPHABET_LENGTH = "invalid_alphabet_length"
    INVALID_ALPHABET_PADDING_USED = "invalid_alphabet_padding_used"
    INVALID_ALPHABET_CHARACTER = "invalid_alphabet_character"
    STREAM_CLOSED = "stream_closed"


class Base64Error(ValueError):
    """Base class for codec validation failures."""

    kind: ErrorKind
    default_message = "Base64 error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class EmptyInputError(Base64Error):
    """Raised when encode or decode receives zero-length input."""

    kind = ErrorKind.EMPTY_INPUT
    default_message = "Input data is empty"


class InvalidLengthError(Base64Error):
    """Raised when encoded text is not a multiple of 4 symbols long."""

    kind = ErrorKind.INVALID_LENGTH
    default_message = "Invalid input length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"{self.default_message}: {length} is not a multiple of 4")


class InvalidCharacterError(Base64Error):
    """Raised when encoded text holds a symbol outside the active alphabet."""

    kind = ErrorKind.INVALID_CHARACTER
    default_message = "Invalid character in input"

    def __init__(self, position: int, symbol: str) -> None:
        self.position = position
        self.symbol = symbol
        super().__init__(f"{self.default_message}: {symbol!r} at offset {position}")


class InvalidAlphabetError(Base64Error):
    """Base class for rejected alphabets."""


class InvalidAlphabetLengthError(InvalidAlphabetError):
    kind = ErrorKind.INVALID_ALPHABET_LENGTH
    default_message = "Character set must be 64 characters"


class InvalidAlphabetPaddingError(InvalidAlphabetError):
    kind = ErrorKind.INVALID_ALPHABET_PADDING_USED
    default_message = "Padding character '=' is not allowed in character set"


class InvalidAlphabetCharacterError(InvalidAlphabetError):
    """Raised for non-ASCII or repeated symbols in an alphabet."""

    kind = ErrorKind.INVALID_ALPHABET_CHARACTER
    default_message = "Character set must hold 64 distinct ASCII characters"


class StreamClosedError(Base64Error):
    """Raised when a finalized stream encoder is used again."""

    kind = ErrorKind.STREAM_CLOSED
    default_message = "Stream encoder has already been finalized"


class CodecIOError(OSError):
    """Base class for file source/sink failures, disjoint from codec errors."""


class SourceNotFoundError(CodecIOError):
    """Raised when the input file does not exist."""


class SourceTooLargeError(CodecIOError):
    """Raised when the input file exceeds the configured size limit."""


class SourceReadError(CodecIOError):
    """Raised when the input file cannot be opened or read."""


class DestinationWriteError(CodecIOError):
    """Raised when the output file cannot be written."""


class ConfigError(RuntimeError):
    """Raised when environment configuration cannot be parsed."""


__all__ = [
    "ErrorKind",
    "Base64Error",
    "EmptyInputError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "InvalidAlphabetError",
    "InvalidAlphabetLengthError",
    "InvalidAlphabetPaddingError",
    "InvalidAlphabetCharacterError",
    "StreamClosedError",
    "CodecIOError",
    "SourceNotFoundError",
    "SourceTooLargeError",
    "SourceReadError",
    "DestinationWriteError",
    "ConfigError",
]
