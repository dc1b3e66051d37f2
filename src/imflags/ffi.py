"""ffi.py – ctypes boundary to the cimgui shared library.

Declares the prototypes of the handful of engine entry points this package
calls, loads the library, and adapts the legacy struct-return convention
into plain ``(x, y)`` tuples.

cimgui cannot return ``ImVec2`` through the C ABI on every platform, so its
coordinate getters come in two legacy spellings:

* ``igGetWindowSize_nonUDT(ImVec2* pOut)`` writes through a hidden output
  slot (``"out_param"``);
* ``igGetWindowSize_nonUDT2()`` returns a plain ``ImVec2_Simple`` struct
  (``"by_value"``).

:func:`read_vec2` is the only place that knows about either.
"""

from __future__ import annotations

import ctypes
from collections.abc import Callable
from pathlib import Path
from typing import Any

from imflags.config import CONVENTIONS, EngineConfig


class ImVec2(ctypes.Structure):
    """Two floats, laid out as the engine's ``ImVec2``/``ImVec2_Simple``."""

    _fields_ = [("x", ctypes.c_float), ("y", ctypes.c_float)]


# Coordinate getters, without their legacy suffix.
VEC2_GETTERS: tuple[str, ...] = (
    "igGetWindowSize",
    "igGetWindowPos",
    "igGetContentRegionMax",
    "igGetContentRegionAvail",
    "igGetWindowContentRegionMin",
    "igGetWindowContentRegionMax",
)


def _build_prototypes() -> dict[str, tuple[Any, list[Any]]]:
    """Return ``{symbol: (restype, argtypes)}`` for every symbol we call."""
    protos: dict[str, tuple[Any, list[Any]]] = {
        "igIsWindowFocused": (ctypes.c_bool, [ctypes.c_int]),
        "igIsWindowHovered": (ctypes.c_bool, [ctypes.c_int]),
        "igIsItemHovered": (ctypes.c_bool, [ctypes.c_int]),
        "igBeginDragDropSource": (ctypes.c_bool, [ctypes.c_int]),
        "igAcceptDragDropPayload": (ctypes.c_void_p, [ctypes.c_char_p, ctypes.c_int]),
    }
    for name in VEC2_GETTERS:
        protos[name + CONVENTIONS["out_param"]] = (None, [ctypes.POINTER(ImVec2)])
        protos[name + CONVENTIONS["by_value"]] = (ImVec2, [])
    return protos


PROTOTYPES = _build_prototypes()


def load_library(path: Path) -> ctypes.CDLL:
    """Load the cimgui shared library and bind prototypes for known symbols.

    Symbols the build does not export are left unbound; calling them raises
    ``AttributeError`` from ctypes.
    """
    if not path.exists():
        raise FileNotFoundError(f"cimgui library not found: {path}")
    lib = ctypes.CDLL(str(path))
    for name, (restype, argtypes) in PROTOTYPES.items():
        try:
            func = getattr(lib, name)
        except AttributeError:
            continue
        func.restype = restype
        func.argtypes = argtypes
    return lib


def read_vec2(getter: Callable[..., Any], convention: str = "out_param") -> tuple[float, float]:
    """Call a legacy coordinate getter and return its result as ``(x, y)``."""
    if convention == "out_param":
        out = ImVec2()
        getter(ctypes.pointer(out))
    elif convention == "by_value":
        out = getter()
    else:
        raise ValueError(
            f"Unknown struct-return convention {convention!r} "
            f"(known: {', '.join(CONVENTIONS)})"
        )
    return (out.x, out.y)


class Engine:
    """Thin handle on a loaded engine library.

    *lib* is anything exposing the engine symbols as attributes: normally a
    ``ctypes.CDLL`` from :func:`load_library`.  Every method issues exactly
    one foreign call and adds no locking; callers stay on the thread that
    owns the current frame.
    """

    def __init__(self, lib: Any, convention: str = "out_param") -> None:
        if convention not in CONVENTIONS:
            raise ValueError(
                f"Unknown struct-return convention {convention!r} "
                f"(known: {', '.join(CONVENTIONS)})"
            )
        self.lib = lib
        self.convention = convention

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> Engine:
        """Load the library named by *cfg*."""
        return cls(load_library(cfg.library), cfg.convention)

    def has(self, name: str) -> bool:
        """True if the library exports *name*."""
        try:
            getattr(self.lib, name)
        except AttributeError:
            return False
        return True

    def call(self, name: str, *args: Any) -> Any:
        return getattr(self.lib, name)(*args)

    def vec2(self, name: str) -> tuple[float, float]:
        """Read coordinate getter *name* (e.g. ``"igGetWindowSize"``)."""
        getter = getattr(self.lib, name + CONVENTIONS[self.convention])
        return read_vec2(getter, self.convention)
