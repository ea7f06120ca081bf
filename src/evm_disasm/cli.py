"""CLI entry point for evm-disasm."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .bytecode.decoder import disassemble
from .bytecode.errors import HexDecodeError
from .bytecode.hexcodec import decode_hex, strip_hex_prefix
from .report.listing import ListingGenerator

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("evm_disasm")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def _read_input(code: str | None, file: str | None, binary: bool) -> tuple[bytes, str]:
    if code is not None and file is not None:
        raise click.UsageError("Pass either CODE or --file, not both.")
    if binary and file is None:
        raise click.UsageError("--binary requires --file.")

    if file is not None:
        path = Path(file)
        if binary:
            return path.read_bytes(), path.stem
        text, name = path.read_text(encoding="ascii", errors="replace"), path.stem
    elif code is None or code == "-":
        text, name = sys.stdin.read(), "stdin"
    else:
        text, name = code, "bytecode"

    logger.debug("decoding %d hex characters from %s", len(text), name)
    return decode_hex(strip_hex_prefix(text)), name


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """EVM bytecode disassembler."""


@main.command()
@click.argument("code", required=False)
@click.option("--file", "-f", "file", type=click.Path(exists=True, dir_okay=False), help="Read bytecode from a file")
@click.option("--binary", is_flag=True, default=False, help="Treat --file as raw bytes instead of hex text")
@click.option("--output", "-o", type=click.Path(), help="Output file path")
@click.option("--format", "fmt", type=click.Choice(["text", "json", "markdown"]), default="text")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def disasm(
    code: str | None,
    file: str | None,
    binary: bool,
    output: str | None,
    fmt: str,
    verbose: bool,
) -> None:
    """Disassemble hex-encoded EVM bytecode (CODE, --file, or stdin)."""
    _configure_logging(verbose)

    try:
        bytecode, name = _read_input(code, file, binary)
    except HexDecodeError as exc:
        err_console.print(f"[red]Failed to decode hex input: {escape(str(exc))}[/]")
        sys.exit(1)

    result = disassemble(bytecode)
    logger.debug("decoded %d instructions from %d bytes", len(result), result.size)

    gen = ListingGenerator(name)
    if fmt == "json":
        listing = gen.to_json(result)
    elif fmt == "markdown":
        listing = gen.to_markdown(result)
    else:
        listing = gen.to_text(result)

    if output:
        Path(output).write_text(listing + "\n")
        console.print(f"[green]Listing saved to {escape(output)}[/] ({len(result)} instructions)")
    elif listing:
        console.print(listing, markup=False, highlight=False, soft_wrap=True)

    if result.error is not None:
        err_console.print(f"[red]Disassembly stopped: {escape(str(result.error))}[/]")
        sys.exit(3)


if __name__ == "__main__":
    main()
