"""Base64 codec with configurable alphabets and a streaming encoder."""

from importlib.metadata import PackageNotFoundError, version

from .alphabet import PAD, STANDARD, URL_SAFE, Alphabet, build_decode_table, resolve_alphabet, validate_alphabet
from .codec import decode, encode, encoded_length
from .errors import (
    Base64Error,
    CodecIOError,
    ConfigError,
    DestinationWriteError,
    EmptyInputError,
    ErrorKind,
    InvalidAlphabetCharacterError,
    InvalidAlphabetError,
    InvalidAlphabetLengthError,
    InvalidAlphabetPaddingError,
    InvalidCharacterError,
    InvalidLengthError,
    SourceNotFoundError,
    SourceReadError,
    SourceTooLargeError,
    StreamClosedError,
)
from .files import encode_file, encode_file_to_file
from .stream import DEFAULT_CHUNK_SIZE, StreamEncoder

try:
    __version__ = version("alphabase64")
except PackageNotFoundError:  # pragma: no cover - fallback during local execution
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "PAD",
    "STANDARD",
    "URL_SAFE",
    "Alphabet",
    "build_decode_table",
    "resolve_alphabet",
    "validate_alphabet",
    "encode",
    "decode",
    "encoded_length",
    "StreamEncoder",
    "DEFAULT_CHUNK_SIZE",
    "encode_file",
    "encode_file_to_file",
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
