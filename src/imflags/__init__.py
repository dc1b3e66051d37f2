"""imflags — typed option flags and a legacy-call shim for cimgui.

Strongly-typed bit-mask families for the engine's widget options, a small
ctypes boundary to the cimgui shared library, and a deprecated
compatibility layer (:mod:`imflags.legacy`) for callers still on the old
entry point names.
"""

from imflags.ffi import Engine, ImVec2
from imflags.flags import (
    FAMILIES,
    ColorEditFlags,
    ComboFlags,
    DragDropFlags,
    DrawCornerFlags,
    DrawListFlags,
    FocusedFlags,
    HoveredFlags,
    InputTextFlags,
    SelectableFlags,
    TreeNodeFlags,
    WindowFlags,
    lookup_family,
)
from imflags.ui import Ui
from imflags.widgets import ProgressBar, Window

__version__ = "0.2.0"

__all__ = [
    "FAMILIES",
    "ColorEditFlags",
    "ComboFlags",
    "DragDropFlags",
    "DrawCornerFlags",
    "DrawListFlags",
    "Engine",
    "FocusedFlags",
    "HoveredFlags",
    "ImVec2",
    "InputTextFlags",
    "ProgressBar",
    "SelectableFlags",
    "TreeNodeFlags",
    "Ui",
    "Window",
    "WindowFlags",
    "lookup_family",
]
