"""Command-line interface for the alphabase64 codec."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.traceback import install as install_rich_traceback

from .alphabet import Alphabet, resolve_alphabet
from .codec import decode as decode_text
from .codec import encode as encode_bytes
from .config import CodecSettings
from .errors import Base64Error, CodecIOError, ConfigError
from .files import encode_file, encode_file_to_file
from .logging_setup import configure_logging

install_rich_traceback(suppress=[typer])

app = typer.Typer(help="Base64 encoder/decoder with configurable alphabets.")
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

EXIT_CODEC_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_IO_ERROR = 3

ALPHABET_HELP = "Alphabet to use: 'standard', 'url-safe' or 64 literal symbols."


def _settings(ctx: typer.Context) -> CodecSettings:
    settings = ctx.obj
    if not isinstance(settings, CodecSettings):
        settings = CodecSettings()
    return settings


def _pick_alphabet(ctx: typer.Context, alphabet: Optional[str]) -> Alphabet:
    if alphabet is None:
        return _settings(ctx).alphabet
    try:
        return resolve_alphabet(alphabet)
    except Base64Error as exc:
        err_console.print(f"[bold red]Invalid alphabet:[/bold red] {exc}")
        raise typer.Exit(code=EXIT_CODEC_ERROR) from exc


def _fail(exc: Exception) -> typer.Exit:
    if isinstance(exc, CodecIOError):
        err_console.print(f"[bold red]I/O error:[/bold red] {exc}")
        return typer.Exit(code=EXIT_IO_ERROR)
    err_console.print(f"[bold red]{type(exc).__name__}:[/bold red] {exc}")
    return typer.Exit(code=EXIT_CODEC_ERROR)


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to ALPHABASE64_LOG_LEVEL or INFO).",
    ),
    dotenv_path: Optional[Path] = typer.Option(
        None,
        "--dotenv-path",
        help="Optional path to a .env file with ALPHABASE64_* settings.",
    ),
) -> None:
    """Load settings and configure logging before running a command."""
    try:
        settings = CodecSettings.from_env(dotenv_path=str(dotenv_path) if dotenv_path else None)
    except ConfigError as exc:
        err_console.print(f"[bold red]Configuration error:[/bold red] {exc}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@app.command()
def encode(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to encode (UTF-8)."),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", "-a", help=ALPHABET_HELP),
) -> None:
    """Encode a UTF-8 string and print the Base64 text."""
    active = _pick_alphabet(ctx, alphabet)
    try:
        encoded = encode_bytes(text.encode("utf-8"), active)
    except Base64Error as exc:
        raise _fail(exc) from exc
    typer.echo(encoded)


@app.command()
def decode(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Base64 text to decode."),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", "-a", help=ALPHABET_HELP),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        writable=True,
        help="Write decoded bytes to this file instead of stdout.",
    ),
) -> None:
    """Decode Base64 text and write the raw bytes to stdout or a file."""
    active = _pick_alphabet(ctx, alphabet)
    try:
        data = decode_text(text, active)
    except Base64Error as exc:
        raise _fail(exc) from exc

    if output is None:
        typer.echo(data, nl=False)
        return

    try:
        output.write_bytes(data)
    except OSError as exc:
        raise _fail(CodecIOError(f"Failed to write {output}: {exc}")) from exc
    logger.info("decoded_to_file path=%s bytes=%d", output, len(data))


@app.command("encode-file")
def encode_file_command(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="File to encode."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write the encoded text to this file instead of stdout.",
    ),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", "-a", help=ALPHABET_HELP),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        min=1,
        help="Read buffer size in bytes (defaults to ALPHABASE64_CHUNK_SIZE or 49152).",
    ),
) -> None:
    """Stream-encode a file to stdout or to another file."""
    settings = _settings(ctx)
    active = _pick_alphabet(ctx, alphabet)
    size = chunk_size or settings.chunk_size

    try:
        if output is None:
            typer.echo(encode_file(input_file, active, size, settings.max_file_size))
        else:
            written = encode_file_to_file(input_file, output, active, size, settings.max_file_size)
            err_console.print(f"[green]Wrote {written} characters to {output}[/green]")
    except (Base64Error, CodecIOError) as exc:
        raise _fail(exc) from exc


def main() -> None:  # pragma: no cover - entrypoint wrapper
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
