"""legacy.py – Compatibility layer for the pre-0.2 public API.

Callers written against the old names keep working through
:class:`LegacyUi` and the ``ImGui*`` type aliases below.  Every entry
warns with ``DeprecationWarning`` and then forwards to exactly one call on
the current API; none of them keeps state.

The whole module is scheduled for removal in :data:`REMOVED_IN`.  Nothing
else in the package imports it, so it can be deleted without touching the
flag families.

Migration::

    ui.get_window_size()          ->  ui.window_size()
    ui.is_root_window_focused()   ->  ui.is_window_focused(FocusedFlags.RootWindow)
    ui.progress_bar(0.5)          ->  ProgressBar(0.5)
"""

from __future__ import annotations

import functools
import warnings
from collections.abc import Callable
from typing import Any, TypeVar

from imflags.flags import (
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
)
from imflags.ui import Ui
from imflags.widgets import ProgressBar, Window

DEPRECATED_SINCE = "0.2.0"
REMOVED_IN = "0.3.0"

_C = TypeVar("_C", bound=Callable[..., Any])


def deprecated(use: str, since: str = DEPRECATED_SINCE) -> Callable[[_C], _C]:
    """Mark a legacy entry point; calling it warns and points at *use*."""

    def decorator(func: _C) -> _C:
        message = (
            f"{func.__qualname__} is deprecated since {since} and will be removed "
            f"in {REMOVED_IN}; use {use} instead"
        )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        wrapper.__deprecated__ = message  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


# ---------------------------------------------------------------------------
# Old type names
# ---------------------------------------------------------------------------

ImGuiColorEditFlags = ColorEditFlags
ImGuiComboFlags = ComboFlags
ImGuiDragDropFlags = DragDropFlags
ImDrawCornerFlags = DrawCornerFlags
ImDrawListFlags = DrawListFlags
ImGuiFocusedFlags = FocusedFlags
ImGuiHoveredFlags = HoveredFlags
ImGuiInputTextFlags = InputTextFlags
ImGuiSelectableFlags = SelectableFlags
ImGuiTreeNodeFlags = TreeNodeFlags

_DEPRECATED_ALIASES: dict[str, tuple[type, str]] = {
    "ImGuiWindowFlags": (WindowFlags, "imflags.WindowFlags"),
}


def __getattr__(name: str) -> Any:
    if name in _DEPRECATED_ALIASES:
        target, use = _DEPRECATED_ALIASES[name]
        warnings.warn(
            f"{name} is deprecated since {DEPRECATED_SINCE} and will be removed "
            f"in {REMOVED_IN}; use {use} instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return target
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# ---------------------------------------------------------------------------
# Old entry points
# ---------------------------------------------------------------------------


class LegacyUi(Ui):
    """:class:`Ui` plus the entry points it replaced."""

    @deprecated("imflags.Window(...)")
    def window(self, name: str) -> Window:
        return Window(name)

    @deprecated("imflags.ProgressBar(...)")
    def progress_bar(self, fraction: float) -> ProgressBar:
        return ProgressBar(fraction)

    @deprecated("Ui.window_size")
    def get_window_size(self) -> tuple[float, float]:
        return self.window_size()

    @deprecated("Ui.window_pos")
    def get_window_pos(self) -> tuple[float, float]:
        return self.window_pos()

    @deprecated("Ui.content_region_max")
    def get_content_region_max(self) -> tuple[float, float]:
        return self.content_region_max()

    @deprecated("Ui.content_region_avail")
    def get_content_region_avail(self) -> tuple[float, float]:
        return self.content_region_avail()

    @deprecated("Ui.window_content_region_min")
    def get_window_content_region_min(self) -> tuple[float, float]:
        return self.window_content_region_min()

    @deprecated("Ui.window_content_region_max")
    def get_window_content_region_max(self) -> tuple[float, float]:
        return self.window_content_region_max()

    @deprecated("Ui.is_window_focused(FocusedFlags.RootWindow)")
    def is_root_window_focused(self) -> bool:
        return self.is_window_focused(FocusedFlags.RootWindow)

    @deprecated("Ui.is_window_focused(FocusedFlags.ChildWindows)")
    def is_child_window_focused(self) -> bool:
        return self.is_window_focused(FocusedFlags.ChildWindows)
