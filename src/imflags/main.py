"""main.py – Umbrella CLI entry point for imflags.

Lazily imports and registers all subcommand typer apps so that a module
failing to import doesn't prevent the entire CLI from loading.

Single-command modules are registered as flat ``app.command()`` entries;
multi-command modules (currently only ``mask``) use ``add_typer()``.
"""

import importlib
import sys
from collections.abc import Callable

import typer

app = typer.Typer(
    help="Typed option flags and legacy-call shim for the cimgui engine.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]
  imflags show                               List every flag family
  imflags show ComboFlags                    Constants, bits and composites
  imflags mask encode ComboFlags HeightSmall Name(s) -> mask value
  imflags mask decode TreeNodeFlags 0x1A     Mask value -> names
  imflags doctor                             Check imflags.toml and the library""",
)

# ---------------------------------------------------------------------------
# Subcommand registry
# ---------------------------------------------------------------------------

# Single-command modules – registered as flat commands via app.command().
_SINGLE_COMMANDS: list[tuple[str, str, str]] = [
    ("show", "imflags.show", "Show flag families and their constants."),
    ("doctor", "imflags.doctor", "Check imflags.toml and the cimgui library."),
]

# Multi-command modules – registered as groups via app.add_typer().
_MULTI_COMMANDS: list[tuple[str, str, str]] = [
    ("mask", "imflags.mask", "Encode names into a mask, or decode a mask into names."),
]


def _make_stub_cmd(mod_name: str, err: ImportError) -> Callable[[], None]:
    """Create a stub command function that reports a failed import."""

    def _stub() -> None:
        print(f"Error: could not load '{mod_name}': {err}", file=sys.stderr)
        raise typer.Exit(code=1)

    return _stub


def _make_stub_app(mod_name: str, err: ImportError) -> typer.Typer:
    """Create a stub Typer app that reports a failed import."""
    stub = typer.Typer(help=f"(unavailable) {mod_name}")

    @stub.callback(invoke_without_command=True)
    def _stub_main() -> None:
        print(f"Error: could not load '{mod_name}': {err}", file=sys.stderr)
        raise typer.Exit(code=1)

    return stub


for _name, _module, _help in _SINGLE_COMMANDS:
    try:
        _mod = importlib.import_module(_module)
        app.command(name=_name, help=_help)(_mod.main)
    except ImportError as _exc:
        app.command(name=_name, help=f"(unavailable) {_help}")(_make_stub_cmd(_module, _exc))

for _name, _module, _help in _MULTI_COMMANDS:
    try:
        _mod = importlib.import_module(_module)
        app.add_typer(_mod.app, name=_name, help=_help)
    except ImportError as _exc:
        app.add_typer(_make_stub_app(_module, _exc), name=_name, help=f"(unavailable) {_help}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
