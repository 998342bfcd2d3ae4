"""Command line interface for ccChaCha.

Provides:
- encrypt / decrypt of files or stdin/stdout
- keystream and hexdump inspection
- RFC 7539 self test
- Configuration display
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ccchacha import __version__
from ccchacha.cli.config_commands import config as config_group
from ccchacha.ciphers import ChaCha20Cipher
from ccchacha.config import ConfigManager
from ccchacha.core.keystream import chacha20_xor, keystream
from ccchacha.core.parallel import parallel_chacha20_xor
from ccchacha.core.state import KEY_SIZE, NONCE_SIZE
from ccchacha.core.vectors import run_self_test
from ccchacha.exceptions import ChaChaError
from ccchacha.logging_config import LoggingContext, log_exception
from ccchacha.models import CipherBackend, CipherConfig, LogLevel
from ccchacha.utils.hexdump import format_hex

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def _get_config_from_context(ctx: click.Context) -> ConfigManager:
    """Return the ConfigManager stored on the root context."""
    ctx.ensure_object(dict)
    manager = ctx.obj.get("config_manager")
    if manager is None:
        manager = ConfigManager(ctx.obj.get("config_file"))
        ctx.obj["config_manager"] = manager
    return manager


def _parse_hex(value: str, expected: int, what: str) -> bytes:
    try:
        raw = bytes.fromhex(value)
    except ValueError as e:
        msg = f"{what} is not valid hex: {e}"
        raise click.BadParameter(msg) from e
    if len(raw) != expected:
        msg = f"{what} must be {expected} bytes ({expected * 2} hex digits), got {len(raw)}"
        raise click.BadParameter(msg)
    return raw


def _load_key(key_hex: str | None, key_file: Path | None) -> bytes:
    if (key_hex is None) == (key_file is None):
        msg = "Provide exactly one of --key-hex or --key-file"
        raise click.UsageError(msg)
    if key_file is not None:
        key = key_file.read_bytes()
        if len(key) != KEY_SIZE:
            msg = f"Key file must hold exactly {KEY_SIZE} bytes, got {len(key)}"
            raise click.BadParameter(msg, param_hint="--key-file")
        return key
    return _parse_hex(key_hex, KEY_SIZE, "Key")


def _run_cipher(
    cipher_config: CipherConfig,
    key: bytes,
    counter: int,
    nonce: bytes,
    data: bytes,
    workers: int | None,
) -> bytes:
    if cipher_config.backend is CipherBackend.CRYPTOGRAPHY:
        with ChaCha20Cipher(
            key,
            nonce,
            counter,
            rounds=cipher_config.rounds,
            backend=cipher_config.backend,
        ) as cipher:
            return cipher.encrypt(data)

    workers = workers or cipher_config.parallel_workers
    threshold = cipher_config.parallel_threshold_kib * 1024
    if workers > 1 and len(data) >= threshold:
        return parallel_chacha20_xor(
            key,
            counter,
            nonce,
            data,
            workers=workers,
            blocks_per_task=cipher_config.blocks_per_task,
            rounds=cipher_config.rounds,
        )
    return bytes(
        chacha20_xor(
            key,
            counter,
            nonce,
            data,
            rounds=cipher_config.rounds,
            wipe=cipher_config.wipe_state,
        )
    )


def _cipher_command(
    ctx: click.Context,
    operation: str,
    input_file: BinaryIO,
    output_file: BinaryIO,
    key_hex: str | None,
    key_file: Path | None,
    nonce_hex: str,
    counter: int,
    workers: int | None,
) -> None:
    key = _load_key(key_hex, key_file)
    nonce = _parse_hex(nonce_hex, NONCE_SIZE, "Nonce")
    cipher_config = _get_config_from_context(ctx).config.cipher

    data = input_file.read()
    try:
        with LoggingContext(operation, logger=logger, length=len(data)):
            result = _run_cipher(cipher_config, key, counter, nonce, data, workers)
    except ChaChaError as e:
        log_exception(logger, e, f"{operation} failed")
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.Abort from e

    output_file.write(result)
    output_file.flush()


_cipher_options = [
    click.argument("input_file", type=click.File("rb")),
    click.argument("output_file", type=click.File("wb")),
    click.option("--key-hex", help="32-byte key as 64 hex digits"),
    click.option(
        "--key-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="File holding the raw 32-byte key",
    ),
    click.option("--nonce-hex", required=True, help="12-byte nonce as 24 hex digits"),
    click.option(
        "--counter",
        type=click.IntRange(0, 0xFFFFFFFF),
        default=0,
        show_default=True,
        help="Initial block counter",
    ),
    click.option(
        "--workers",
        type=click.IntRange(1, 64),
        default=None,
        help="Parallel workers (overrides configuration)",
    ),
]


def _apply_cipher_options(func):
    for option in reversed(_cipher_options):
        func = option(func)
    return func


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to ccchacha.toml",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="ccchacha")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    """ccChaCha - ChaCha20 stream cipher tool."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    try:
        manager = ConfigManager(config_file)
    except ChaChaError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise click.Abort from e
    if verbose:
        manager.config.observability.log_level = LogLevel.DEBUG
        manager._setup_logging()
    ctx.obj["config_manager"] = manager


@cli.command()
@_apply_cipher_options
@click.pass_context
def encrypt(ctx, input_file, output_file, key_hex, key_file, nonce_hex, counter, workers):
    """Encrypt INPUT_FILE into OUTPUT_FILE ("-" for stdin/stdout)."""
    _cipher_command(
        ctx, "encrypt", input_file, output_file, key_hex, key_file, nonce_hex, counter, workers
    )


@cli.command()
@_apply_cipher_options
@click.pass_context
def decrypt(ctx, input_file, output_file, key_hex, key_file, nonce_hex, counter, workers):
    """Decrypt INPUT_FILE into OUTPUT_FILE ("-" for stdin/stdout)."""
    _cipher_command(
        ctx, "decrypt", input_file, output_file, key_hex, key_file, nonce_hex, counter, workers
    )


@cli.command("keystream")
@click.option("--key-hex", help="32-byte key as 64 hex digits")
@click.option(
    "--key-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File holding the raw 32-byte key",
)
@click.option("--nonce-hex", required=True, help="12-byte nonce as 24 hex digits")
@click.option("--counter", type=click.IntRange(0, 0xFFFFFFFF), default=0, show_default=True)
@click.option("--length", type=click.IntRange(0), default=64, show_default=True)
@click.option("--width", type=click.IntRange(1), default=16, show_default=True)
@click.pass_context
def keystream_cmd(ctx, key_hex, key_file, nonce_hex, counter, length, width) -> None:
    """Print raw keystream bytes as hex."""
    key = _load_key(key_hex, key_file)
    nonce = _parse_hex(nonce_hex, NONCE_SIZE, "Nonce")
    cipher_config = _get_config_from_context(ctx).config.cipher
    try:
        if cipher_config.backend is CipherBackend.CRYPTOGRAPHY:
            stream = _run_cipher(cipher_config, key, counter, nonce, bytes(length), None)
        else:
            stream = keystream(key, counter, nonce, length, rounds=cipher_config.rounds)
    except ChaChaError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.Abort from e
    click.echo(format_hex(stream, width=width))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--start", type=int, default=0, show_default=True)
@click.option("--end", type=int, default=None, help="Stop offset (default: end of file)")
@click.option("--width", type=click.IntRange(1), default=16, show_default=True)
def hexdump(path: Path, start: int, end: int | None, width: int) -> None:
    """Print a byte range of PATH as hex."""
    click.echo(format_hex(path.read_bytes(), start, end, width=width))


@cli.command()
@click.pass_context
def selftest(ctx: click.Context) -> None:
    """Run the RFC 7539 known-answer tests."""
    results = run_self_test()

    table = Table(title="ChaCha20 known-answer tests", show_header=True)
    table.add_column("Vector", style="cyan")
    table.add_column("Result")
    for result in results:
        table.add_row(
            result.name, "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        )
    console.print(table)

    if not all(result.passed for result in results):
        ctx.exit(1)


cli.add_command(config_group)


def main() -> None:
    """Console script entry point."""
    cli(obj={})
