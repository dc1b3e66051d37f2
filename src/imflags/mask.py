"""imflags mask: Convert between constant names and native mask values.

Usage::

    imflags mask encode ComboFlags HeightSmall NoPreview
    imflags mask encode HoveredFlags RectOnly --json
    imflags mask decode TreeNodeFlags 0x1A
    imflags mask decode DragDropFlags 3072 --json
"""

from __future__ import annotations

import typer

from imflags.cli import JsonOption, error_exit, hex_bits, json_print, parse_mask, resolve_family

app = typer.Typer(
    help="Encode constant names into a mask, or decode a mask into names.",
    rich_markup_mode="rich",
)


@app.command()
def encode(
    family: str = typer.Argument(..., help="Family name, e.g. ComboFlags."),
    names: list[str] = typer.Argument(..., help="Constant names to OR together."),
    json_output: bool = JsonOption,
) -> None:
    """OR named constants of FAMILY into a single mask."""
    cls = resolve_family(family, json_mode=json_output)
    try:
        value = cls.from_names(*names)
    except KeyError as e:
        error_exit(str(e.args[0]), json_mode=json_output)

    if json_output:
        json_print(
            {
                "family": cls.__name__,
                "names": list(names),
                "value": value.bits,
                "hex": hex_bits(value.bits),
            }
        )
    else:
        print(f"{value.bits} ({hex_bits(value.bits)})")


@app.command()
def decode(
    family: str = typer.Argument(..., help="Family name, e.g. ComboFlags."),
    value: str = typer.Argument(..., help="Mask value: decimal, 0x hex or 0b binary."),
    json_output: bool = JsonOption,
) -> None:
    """List the constants of FAMILY set in VALUE."""
    cls = resolve_family(family, json_mode=json_output)
    flags = cls.from_native(parse_mask(value, json_mode=json_output))
    composites = [
        name
        for name in cls.__flag_composites__
        if flags.contains(getattr(cls, name)) and getattr(cls, name)
    ]

    if json_output:
        json_print(
            {
                "family": cls.__name__,
                "value": flags.bits,
                "hex": hex_bits(flags.bits),
                "names": flags.names(),
                "composites": composites,
                "unknown": hex_bits(flags.unknown_bits) if flags.unknown_bits else None,
            }
        )
        return

    print(repr(flags))
    if composites:
        print(f"  includes: {', '.join(composites)}")
    if flags.unknown_bits:
        print(f"  unknown bits: {hex_bits(flags.unknown_bits)}")
