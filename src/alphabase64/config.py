"""Configuration helpers for the alphabase64 command-line tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .alphabet import STANDARD, Alphabet, resolve_alphabet
from .errors import ConfigError, InvalidAlphabetError
from .stream import DEFAULT_CHUNK_SIZE

ALPHABET_ENV = "ALPHABASE64_ALPHABET"
CHUNK_SIZE_ENV = "ALPHABASE64_CHUNK_SIZE"
MAX_FILE_SIZE_ENV = "ALPHABASE64_MAX_FILE_SIZE"
LOG_LEVEL_ENV = "ALPHABASE64_LOG_LEVEL"


def _int_from_env(name: str, default: int, *, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid value for {name}: {raw}") from exc
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class CodecSettings:
    """Defaults applied by the CLI when no option overrides them."""

    alphabet: Alphabet = STANDARD
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_file_size: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, *, dotenv_path: Optional[str] = None) -> "CodecSettings":
        """Load settings from environment variables, optionally loading a .env file first."""
        load_dotenv(dotenv_path)

        alphabet_raw = os.getenv(ALPHABET_ENV, "standard")
        try:
            alphabet = resolve_alphabet(alphabet_raw)
        except InvalidAlphabetError as exc:
            raise ConfigError(f"Invalid value for {ALPHABET_ENV}: {exc}") from exc

        chunk_size = _int_from_env(CHUNK_SIZE_ENV, DEFAULT_CHUNK_SIZE, minimum=1)
        max_file_size = _int_from_env(MAX_FILE_SIZE_ENV, 0, minimum=0)
        log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()

        return cls(
            alphabet=alphabet,
            chunk_size=chunk_size,
            max_file_size=max_file_size or None,
            log_level=log_level,
        )


__all__ = [
    "CodecSettings",
    "ALPHABET_ENV",
    "CHUNK_SIZE_ENV",
    "MAX_FILE_SIZE_ENV",
    "LOG_LEVEL_ENV",
]
