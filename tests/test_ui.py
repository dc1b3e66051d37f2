"""Tests for the current API (imflags.ui) and widget descriptors."""

import dataclasses

import pytest
from fake_engine import WINDOW_STATE, FakeEngineLib

from imflags import (
    DragDropFlags,
    FocusedFlags,
    HoveredFlags,
    ProgressBar,
    TreeNodeFlags,
    Ui,
    Window,
    WindowFlags,
)
from imflags.ffi import Engine


@pytest.fixture
def ui(engine: Engine) -> Ui:
    return Ui(engine)


# ---------------------------------------------------------------------------
# Coordinate accessors
# ---------------------------------------------------------------------------


_ACCESSORS = [
    ("window_size", "igGetWindowSize"),
    ("window_pos", "igGetWindowPos"),
    ("content_region_max", "igGetContentRegionMax"),
    ("content_region_avail", "igGetContentRegionAvail"),
    ("window_content_region_min", "igGetWindowContentRegionMin"),
    ("window_content_region_max", "igGetWindowContentRegionMax"),
]


class TestCoordinateAccessors:
    @pytest.mark.parametrize("method, symbol", _ACCESSORS)
    def test_out_param(self, ui: Ui, fake_lib: FakeEngineLib, method: str, symbol: str) -> None:
        assert getattr(ui, method)() == WINDOW_STATE[symbol]
        assert fake_lib.calls == [(symbol + "_nonUDT", ())]

    @pytest.mark.parametrize("method, symbol", _ACCESSORS)
    def test_by_value(
        self, by_value_engine: Engine, fake_lib: FakeEngineLib, method: str, symbol: str
    ) -> None:
        ui = Ui(by_value_engine)
        assert getattr(ui, method)() == WINDOW_STATE[symbol]
        assert fake_lib.calls == [(symbol + "_nonUDT2", ())]


# ---------------------------------------------------------------------------
# Flag-driven queries
# ---------------------------------------------------------------------------


class TestQueries:
    def test_is_window_focused_default(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        assert ui.is_window_focused() is True
        assert fake_lib.calls == [("igIsWindowFocused", (0,))]

    def test_is_window_focused_composite(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        ui.is_window_focused(FocusedFlags.RootAndChildWindows)
        assert fake_lib.calls == [("igIsWindowFocused", (3,))]

    def test_is_window_hovered(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        assert ui.is_window_hovered(HoveredFlags.AnyWindow) is False
        assert fake_lib.calls == [("igIsWindowHovered", (4,))]

    def test_is_item_hovered_rect_only(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        assert ui.is_item_hovered(HoveredFlags.RectOnly) is True
        assert fake_lib.calls == [("igIsItemHovered", (0b1101000,))]

    def test_begin_drag_drop_source(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        flags = DragDropFlags.SourceAllowNullID | DragDropFlags.SourceNoPreviewTooltip
        assert ui.begin_drag_drop_source(flags) is False
        assert fake_lib.calls == [("igBeginDragDropSource", (9,))]

    def test_accept_drag_drop_payload(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        assert ui.accept_drag_drop_payload("COLOR", DragDropFlags.AcceptPeekOnly) is False
        fake_lib.payload = 0x1000
        assert ui.accept_drag_drop_payload("COLOR") is True
        assert fake_lib.calls == [
            ("igAcceptDragDropPayload", (b"COLOR", 3072)),
            ("igAcceptDragDropPayload", (b"COLOR", 0)),
        ]

    def test_contradictory_bits_pass_through(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        ui.is_window_focused(FocusedFlags.all())
        assert fake_lib.calls == [("igIsWindowFocused", (7,))]

    def test_unknown_bits_pass_through(self, ui: Ui, fake_lib: FakeEngineLib) -> None:
        ui.is_window_focused(FocusedFlags.from_native(-1))
        assert fake_lib.calls == [("igIsWindowFocused", (-1,))]

    @pytest.mark.parametrize(
        "flags",
        [HoveredFlags.RootWindow, TreeNodeFlags.Selected, 2],
        ids=["other-family", "unrelated-family", "raw-int"],
    )
    def test_wrong_family_rejected(self, ui: Ui, fake_lib: FakeEngineLib, flags) -> None:
        with pytest.raises(TypeError, match="expected FocusedFlags"):
            ui.is_window_focused(flags)
        assert fake_lib.calls == []


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class TestWindow:
    def test_defaults(self) -> None:
        window = Window("Debug")
        assert window.name == "Debug"
        assert window.flags.is_empty()
        assert window.size is None
        assert window.position is None

    def test_builders_return_new_values(self) -> None:
        base = Window("Debug")
        built = (
            base.with_flags(WindowFlags.NoResize | WindowFlags.NoNav)
            .with_size((300, 200))
            .with_position((10, 20.5))
        )
        assert base == Window("Debug")
        assert built.flags == WindowFlags.NoResize | WindowFlags.NoNav
        assert built.size == (300.0, 200.0)
        assert built.position == (10.0, 20.5)

    def test_flags_family_checked(self) -> None:
        with pytest.raises(TypeError):
            Window("Debug").with_flags(TreeNodeFlags.Framed)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Window("Debug").name = "Other"


class TestProgressBar:
    def test_defaults(self) -> None:
        bar = ProgressBar(0.25)
        assert bar.fraction == 0.25
        assert bar.size == (-1.0, 0.0)
        assert bar.overlay_text is None

    def test_builders(self) -> None:
        bar = ProgressBar(0.5).with_size((120, 0)).with_overlay_text("50%")
        assert bar == ProgressBar(0.5, (120.0, 0.0), "50%")
