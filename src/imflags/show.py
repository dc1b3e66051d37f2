"""show.py – Tabulate flag families and their constants.

Usage::

    imflags show                    # every family with its defined mask
    imflags show ComboFlags         # constants, bits and composite makeup
    imflags show ImGuiHoveredFlags --json
"""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from imflags.bitflags import Composite
from imflags.cli import JsonOption, hex_bits, json_print, resolve_family
from imflags.flags import FAMILIES

app = typer.Typer(
    help="Show flag families and their constants.",
    rich_markup_mode="rich",
)


def _part_name(cls: type, part: Any) -> str:
    """Name one constituent of a composite declared on *cls*."""
    if isinstance(part, Composite):
        for name, comp in cls.__flag_composites__.items():
            if comp is part:
                return name
        return hex_bits(part.bits)
    if isinstance(part, int):
        for name, bit in cls.__flag_members__.items():
            if bit == part:
                return name
        return hex_bits(part)
    # Constant borrowed from another family
    return " | ".join(f"{type(part).__name__}.{name}" for name in part.names())


def family_rows(cls: type) -> list[dict[str, Any]]:
    """One row per constant of *cls*: single bits first, then composites."""
    rows: list[dict[str, Any]] = []
    for name, bit in cls.__flag_members__.items():
        rows.append(
            {
                "name": name,
                "kind": "bit",
                "value": bit,
                "hex": hex_bits(bit),
                "bit": bit.bit_length() - 1 if bit else None,
            }
        )
    for name, comp in cls.__flag_composites__.items():
        rows.append(
            {
                "name": name,
                "kind": "composite",
                "value": comp.bits,
                "hex": hex_bits(comp.bits),
                "parts": [_part_name(cls, part) for part in comp.parts],
            }
        )
    return rows


def family_summary(cls: type) -> dict[str, Any]:
    return {
        "family": cls.__name__,
        "bits": len(cls.__flag_members__),
        "composites": len(cls.__flag_composites__),
        "mask": hex_bits(cls.__flag_all__),
    }


def _print_families() -> None:
    table = Table(title="Flag families")
    table.add_column("Family", style="cyan")
    table.add_column("Bits", justify="right")
    table.add_column("Composites", justify="right")
    table.add_column("Defined mask", justify="right")
    for cls in FAMILIES.values():
        info = family_summary(cls)
        table.add_row(info["family"], str(info["bits"]), str(info["composites"]), info["mask"])
    Console().print(table)


def _print_family(cls: type) -> None:
    table = Table(title=cls.__name__)
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Hex", justify="right")
    table.add_column("Bit / parts")
    for row in family_rows(cls):
        if row["kind"] == "bit":
            detail = "-" if row["bit"] is None else str(row["bit"])
        else:
            detail = " | ".join(row["parts"])
        table.add_row(row["name"], str(row["value"]), row["hex"], detail)
    Console().print(table)


@app.command()
def main(
    family: str | None = typer.Argument(None, help="Family name, e.g. ComboFlags."),
    json_output: bool = JsonOption,
) -> None:
    """Show all flag families, or the constants of one family."""
    if family is None:
        if json_output:
            json_print([family_summary(cls) for cls in FAMILIES.values()])
        else:
            _print_families()
        return

    cls = resolve_family(family, json_mode=json_output)
    if json_output:
        json_print({**family_summary(cls), "constants": family_rows(cls)})
    else:
        _print_family(cls)


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
