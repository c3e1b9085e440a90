"""Unit tests for environment-driven codec settings."""

import os

import pytest

from alphabase64.alphabet import STANDARD, URL_SAFE
from alphabase64.config import (
    ALPHABET_ENV,
    CHUNK_SIZE_ENV,
    LOG_LEVEL_ENV,
    MAX_FILE_SIZE_ENV,
    CodecSettings,
)
from alphabase64.errors import ConfigError
from alphabase64.stream import DEFAULT_CHUNK_SIZE


@pytest.fixture
def empty_dotenv(tmp_path):
    path = tmp_path / ".env"
    path.write_text("", encoding="utf-8")
    return str(path)


class TestCodecSettingsFromEnv:
    """Tests for CodecSettings.from_env."""

    def test_defaults_when_unset(self, empty_dotenv):
        settings = CodecSettings.from_env(dotenv_path=empty_dotenv)
        assert settings.alphabet is STANDARD
        assert settings.chunk_size == DEFAULT_CHUNK_SIZE
        assert settings.max_file_size is None
        assert settings.log_level == "INFO"

    def test_named_alphabet(self, empty_dotenv):
        os.environ[ALPHABET_ENV] = "url-safe"
        settings = CodecSettings.from_env(dotenv_path=empty_dotenv)
        assert settings.alphabet is URL_SAFE

    def test_literal_alphabet(self, empty_dotenv):
        os.environ[ALPHABET_ENV] = STANDARD.symbols[::-1]
        settings = CodecSettings.from_env(dotenv_path=empty_dotenv)
        assert settings.alphabet.symbols == STANDARD.symbols[::-1]

    def test_invalid_alphabet(self, empty_dotenv):
        os.environ[ALPHABET_ENV] = "ABC"
        with pytest.raises(ConfigError, match=ALPHABET_ENV):
            CodecSettings.from_env(dotenv_path=empty_dotenv)

    def test_integer_values(self, empty_dotenv):
        os.environ[CHUNK_SIZE_ENV] = "3072"
        os.environ[MAX_FILE_SIZE_ENV] = "1048576"
        os.environ[LOG_LEVEL_ENV] = "debug"
        settings = CodecSettings.from_env(dotenv_path=empty_dotenv)
        assert settings.chunk_size == 3072
        assert settings.max_file_size == 1048576
        assert settings.log_level == "DEBUG"

    def test_zero_max_file_size_means_unlimited(self, empty_dotenv):
        os.environ[MAX_FILE_SIZE_ENV] = "0"
        assert CodecSettings.from_env(dotenv_path=empty_dotenv).max_file_size is None

    def test_blank_chunk_size_uses_default(self, empty_dotenv):
        os.environ[CHUNK_SIZE_ENV] = "  "
        assert CodecSettings.from_env(dotenv_path=empty_dotenv).chunk_size == DEFAULT_CHUNK_SIZE

    def test_non_integer_chunk_size(self, empty_dotenv):
        os.environ[CHUNK_SIZE_ENV] = "big"
        with pytest.raises(ConfigError, match="Invalid value for ALPHABASE64_CHUNK_SIZE"):
            CodecSettings.from_env(dotenv_path=empty_dotenv)

    def test_chunk_size_must_be_positive(self, empty_dotenv):
        os.environ[CHUNK_SIZE_ENV] = "0"
        with pytest.raises(ConfigError, match="at least 1"):
            CodecSettings.from_env(dotenv_path=empty_dotenv)

    def test_negative_max_file_size(self, empty_dotenv):
        os.environ[MAX_FILE_SIZE_ENV] = "-1"
        with pytest.raises(ConfigError):
            CodecSettings.from_env(dotenv_path=empty_dotenv)

    def test_values_loaded_from_dotenv_file(self, tmp_path):
        dotenv = tmp_path / "codec.env"
        dotenv.write_text(f"{ALPHABET_ENV}=url_safe\n{CHUNK_SIZE_ENV}=300\n", encoding="utf-8")
        settings = CodecSettings.from_env(dotenv_path=str(dotenv))
        assert settings.alphabet is URL_SAFE
        assert settings.chunk_size == 300

    def test_environment_wins_over_dotenv_file(self, tmp_path):
        dotenv = tmp_path / "codec.env"
        dotenv.write_text(f"{CHUNK_SIZE_ENV}=300\n", encoding="utf-8")
        os.environ[CHUNK_SIZE_ENV] = "600"
        assert CodecSettings.from_env(dotenv_path=str(dotenv)).chunk_size == 600
