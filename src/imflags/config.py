"""Engine configuration loader for imflags.

Reads ``imflags.toml`` from the project root and exposes where the cimgui
shared library lives and which legacy struct-return spelling it exports.

Example ``imflags.toml``::

    [engine]
    library = "lib/libcimgui.so"
    convention = "out_param"    # or "by_value"

Usage::

    from imflags.config import load_config
    cfg = load_config()
    cfg.library      # Path object, resolved against the project root
    cfg.convention   # "out_param"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_NAME = "imflags.toml"

# Legacy struct-return spellings exported by cimgui builds:
#   out_param: igGetWindowSize_nonUDT(ImVec2* pOut)
#   by_value:  ImVec2_Simple igGetWindowSize_nonUDT2(void)
CONVENTIONS: dict[str, str] = {
    "out_param": "_nonUDT",
    "by_value": "_nonUDT2",
}


@dataclass
class EngineConfig:
    """Parsed engine configuration with resolved paths."""

    # Root directory (where imflags.toml lives)
    root: Path

    library: Path = field(default_factory=lambda: Path())
    convention: str = "out_param"

    @property
    def symbol_suffix(self) -> str:
        """Suffix of the legacy coordinate getters for this convention."""
        return CONVENTIONS[self.convention]


def _resolve(root: Path, rel: str) -> Path:
    """Resolve a path relative to project root."""
    p = Path(rel)
    if p.is_absolute():
        return p
    return root / p


def _find_root(start: Optional[Path] = None) -> Path:
    """Walk up from *start* (or cwd) to find imflags.toml."""
    if start is not None:
        return start
    candidate = Path.cwd().resolve()
    while candidate != candidate.parent:
        if (candidate / CONFIG_NAME).exists():
            return candidate
        candidate = candidate.parent
    raise FileNotFoundError(
        f"Could not find {CONFIG_NAME} in any parent of the current directory. "
        "Create one with an [engine] section pointing at the cimgui library."
    )


def load_config(root: Optional[Path] = None) -> EngineConfig:
    """Load imflags.toml.

    Args:
        root: Project root directory.  Auto-detected if ``None``.
    """
    root = _find_root(root)
    toml_path = root / CONFIG_NAME
    if not toml_path.exists():
        raise FileNotFoundError(f"Config not found: {toml_path}")

    with open(toml_path, "rb") as f:
        raw = tomllib.load(f)

    if "engine" not in raw:
        raise KeyError(f"{CONFIG_NAME} has no [engine] section")
    engine = raw["engine"]

    if "library" not in engine:
        raise KeyError(f"{CONFIG_NAME} [engine] section has no 'library' key")

    convention = engine.get("convention", "out_param")
    if convention not in CONVENTIONS:
        raise ValueError(
            f"Unknown struct-return convention {convention!r} "
            f"(known: {', '.join(CONVENTIONS)})"
        )

    return EngineConfig(
        root=root,
        library=_resolve(root, engine["library"]),
        convention=convention,
    )
