"""Shared CLI utilities for imflags commands.

Provides common Typer options and standardised output / error helpers so
every command reports errors, parses mask values and prints JSON the same
way.

Usage in a command module::

    import typer
    from imflags.cli import JsonOption, error_exit, json_print, resolve_family

    app = typer.Typer()

    @app.command()
    def main(family: str, json_output: bool = JsonOption) -> None:
        cls = resolve_family(family, json_mode=json_output)
        ...
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
from rich.console import Console

from imflags.bitflags import NATIVE_BITS, NATIVE_MAX, NATIVE_MIN
from imflags.flags import lookup_family

# Re-usable Typer option for --json
JsonOption: bool = typer.Option(False, "--json", help="Output results as JSON.")

# ---------------------------------------------------------------------------
# Standardised output helpers
# ---------------------------------------------------------------------------

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {msg}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


def parse_mask(text: str, *, json_mode: bool = False) -> int:
    """Parse a mask value, exiting on invalid input.

    Accepts decimal, ``0x`` hex and ``0b`` binary.  Unsigned values up to
    the full native width are folded into the signed range, so ``0xFFFFFFFF``
    means ``-1``.
    """
    try:
        value = int(text.strip().replace("_", ""), 0)
    except ValueError:
        error_exit(f"Invalid mask value: {text!r}", json_mode=json_mode)
    if NATIVE_MAX < value < (1 << NATIVE_BITS):
        value -= 1 << NATIVE_BITS
    if not NATIVE_MIN <= value <= NATIVE_MAX:
        error_exit(
            f"Mask value {text!r} does not fit a {NATIVE_BITS}-bit native int",
            json_mode=json_mode,
        )
    return value


def resolve_family(name: str, *, json_mode: bool = False) -> type:
    """Look up a flag family by name, exiting with the known names on failure."""
    try:
        return lookup_family(name)
    except KeyError as e:
        error_exit(str(e.args[0]), json_mode=json_mode)


def hex_bits(value: int) -> str:
    """Format *value* as unsigned hex over the native width."""
    return f"0x{value & ((1 << NATIVE_BITS) - 1):X}"
