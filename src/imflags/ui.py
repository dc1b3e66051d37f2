"""ui.py – Current public API over the engine boundary.

:class:`Ui` is the per-frame handle callers use to query the engine.  Flag
parameters take the family types from :mod:`imflags.flags`; passing a value
of another family (or a raw int) raises ``TypeError`` before the engine is
touched.
"""

from __future__ import annotations

from typing import Any

from imflags.ffi import Engine
from imflags.flags import DragDropFlags, FocusedFlags, HoveredFlags


def _expect(flags: Any, family: type) -> Any:
    if type(flags) is not family:
        raise TypeError(f"expected {family.__name__}, got {type(flags).__name__}")
    return flags.to_native()


class Ui:
    """Frame-scoped access to the engine.

    All calls must happen while the engine has an active frame; that
    precondition belongs to the engine and is not checked here.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    # -- coordinate accessors -----------------------------------------------

    def window_size(self) -> tuple[float, float]:
        """Size of the current window."""
        return self.engine.vec2("igGetWindowSize")

    def window_pos(self) -> tuple[float, float]:
        """Screen position of the current window."""
        return self.engine.vec2("igGetWindowPos")

    def content_region_max(self) -> tuple[float, float]:
        """Current content boundaries, in window coordinates."""
        return self.engine.vec2("igGetContentRegionMax")

    def content_region_avail(self) -> tuple[float, float]:
        """Space left from the cursor to the content region maximum."""
        return self.engine.vec2("igGetContentRegionAvail")

    def window_content_region_min(self) -> tuple[float, float]:
        return self.engine.vec2("igGetWindowContentRegionMin")

    def window_content_region_max(self) -> tuple[float, float]:
        return self.engine.vec2("igGetWindowContentRegionMax")

    # -- flag-driven queries ------------------------------------------------

    def is_window_focused(self, flags: FocusedFlags | None = None) -> bool:
        """True if the current window (or the scope in *flags*) has focus."""
        if flags is None:
            flags = FocusedFlags.empty()
        return bool(self.engine.call("igIsWindowFocused", _expect(flags, FocusedFlags)))

    def is_window_hovered(self, flags: HoveredFlags | None = None) -> bool:
        if flags is None:
            flags = HoveredFlags.empty()
        return bool(self.engine.call("igIsWindowHovered", _expect(flags, HoveredFlags)))

    def is_item_hovered(self, flags: HoveredFlags | None = None) -> bool:
        if flags is None:
            flags = HoveredFlags.empty()
        return bool(self.engine.call("igIsItemHovered", _expect(flags, HoveredFlags)))

    def begin_drag_drop_source(self, flags: DragDropFlags | None = None) -> bool:
        """Start a drag from the last item; True while it is being dragged."""
        if flags is None:
            flags = DragDropFlags.empty()
        return bool(self.engine.call("igBeginDragDropSource", _expect(flags, DragDropFlags)))

    def accept_drag_drop_payload(
        self, payload_type: str, flags: DragDropFlags | None = None
    ) -> bool:
        """True if the current drop target accepts a payload of *payload_type*."""
        if flags is None:
            flags = DragDropFlags.empty()
        native = _expect(flags, DragDropFlags)
        payload = self.engine.call(
            "igAcceptDragDropPayload", payload_type.encode("utf-8"), native
        )
        return payload is not None
