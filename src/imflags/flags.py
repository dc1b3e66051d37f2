"""Engine option flag families.

Each class is an independent bit-mask type (see :mod:`imflags.bitflags`).
Bit positions follow the engine's C headers exactly; composites are always
declared with :func:`composite` so they track their constituents.

Some groups are meant to be used one at a time (color model, display format,
picker shape, combo height) but nothing here enforces that.  The engine
decides precedence when it receives a contradictory combination.
"""

from imflags.bitflags import bitflags, composite


@bitflags
class ColorEditFlags:
    """Flags for ColorEdit, ColorPicker and ColorButton."""

    # ColorEdit, ColorPicker, ColorButton: ignore Alpha component (read 3 components).
    NoAlpha = 1
    # ColorEdit: disable picker when clicking on colored square.
    NoPicker = 1 << 2
    # ColorEdit: disable toggling options menu when right-clicking on inputs/small preview.
    NoOptions = 1 << 3
    # ColorEdit, ColorPicker: disable colored square preview next to the inputs.
    NoSmallPreview = 1 << 4
    # ColorEdit, ColorPicker: disable inputs sliders/text widgets.
    NoInputs = 1 << 5
    # ColorEdit, ColorPicker, ColorButton: disable tooltip when hovering the preview.
    NoTooltip = 1 << 6
    # ColorEdit, ColorPicker: disable display of inline text label.
    NoLabel = 1 << 7
    # ColorPicker: use small colored square preview instead of the bigger side preview.
    NoSidePreview = 1 << 8
    # ColorEdit: disable drag and drop target. ColorButton: disable drag and drop source.
    NoDragDrop = 1 << 9

    # ColorEdit, ColorPicker: show vertical alpha bar/gradient in picker.
    AlphaBar = 1 << 16
    # Display preview as a transparent color over a checkerboard, instead of opaque.
    AlphaPreview = 1 << 17
    # Display half opaque / half checkerboard, instead of opaque.
    AlphaPreviewHalf = 1 << 18
    # (WIP) ColorEdit: disable 0.0f..1.0f limits in RGBA edition.
    HDR = 1 << 19
    # ColorEdit: choose one among RGB/HSV/HEX. ColorPicker: any combination.
    RGB = 1 << 20
    HSV = 1 << 21
    HEX = 1 << 22
    # Display values formatted as 0..255.
    Uint8 = 1 << 23
    # Display values formatted as 0.0f..1.0f floats instead of 0..255 integers.
    Float = 1 << 24
    # ColorPicker: bar for Hue, rectangle for Sat/Value.
    PickerHueBar = 1 << 25
    # ColorPicker: wheel for Hue, triangle for Sat/Value.
    PickerHueWheel = 1 << 26


@bitflags
class ComboFlags:
    """Flags for combo boxes."""

    PopupAlignLeft = 1
    HeightSmall = 1 << 1  # max ~4 items visible
    HeightRegular = 1 << 2  # max ~8 items visible (default)
    HeightLarge = 1 << 3  # max ~20 items visible
    HeightLargest = 1 << 4  # as many fitting items as possible
    NoArrowButton = 1 << 5
    NoPreview = 1 << 6

    HeightMask = composite(HeightSmall, HeightRegular, HeightLarge, HeightLargest)


@bitflags
class DragDropFlags:
    """Flags for ``igBeginDragDropSource`` and ``igAcceptDragDropPayload``.

    ``Source*`` bits apply when starting a drag, ``Accept*`` bits on the
    receiving target.
    """

    # Don't open the preview tooltip a successful drag source normally shows.
    SourceNoPreviewTooltip = 1
    # Keep igIsItemHovered() true on the source item while dragging.
    SourceNoDisableHover = 1 << 1
    # Don't open tree nodes / collapsing headers by holding a source over them.
    SourceNoHoldToOpenOthers = 1 << 2
    # Allow items without a unique identifier (igText, igImage) as drag source.
    SourceAllowNullID = 1 << 3
    # External source (from outside of imgui); always returns true.
    SourceExtern = 1 << 4
    # Expire the payload if the source stops being submitted.
    SourceAutoExpirePayload = 1 << 5

    # igAcceptDragDropPayload() returns true before the mouse button is released.
    AcceptBeforeDelivery = 1 << 10
    # Don't draw the default highlight rectangle when hovering over target.
    AcceptNoDrawDefaultRect = 1 << 11
    # Hide the source tooltip from the target site.
    AcceptNoPreviewTooltip = 1 << 12

    # Peek ahead and inspect the payload before delivery.
    AcceptPeekOnly = composite(AcceptBeforeDelivery, AcceptNoDrawDefaultRect)


@bitflags
class DrawCornerFlags:
    """Which corners of a rectangle get rounded."""

    TopLeft = 1
    TopRight = 1 << 1
    BotLeft = 1 << 2
    BotRight = 1 << 3

    Top = composite(TopLeft, TopRight)
    Bot = composite(BotLeft, BotRight)
    Left = composite(TopLeft, BotLeft)
    Right = composite(TopRight, BotRight)
    All = composite(Top, Bot)


@bitflags
class DrawListFlags:
    AntiAliasedLines = 1
    AntiAliasedFill = 1 << 1


@bitflags
class FocusedFlags:
    """Flags for window focus checks."""

    # Return true if any children of the window is focused.
    ChildWindows = 1
    # Test from root window (top most parent of the current hierarchy).
    RootWindow = 1 << 1
    # Return true if any window is focused.
    AnyWindow = 1 << 2

    RootAndChildWindows = composite(RootWindow, ChildWindows)


@bitflags
class HoveredFlags:
    """Flags for window and item hover checks.

    The scope bits share their positions with :class:`FocusedFlags`, and
    ``RootAndChildWindows`` is built from the focus family's constants so
    the two can never drift apart.
    """

    # Window hover checks only: true if any children of the window is hovered.
    ChildWindows = 1
    # Window hover checks only: test from root window.
    RootWindow = 1 << 1
    # Window hover checks only: true if any window is hovered.
    AnyWindow = 1 << 2
    # True even if a popup window is normally blocking access to this item/window.
    AllowWhenBlockedByPopup = 1 << 3
    # True even if an active item is blocking access. Useful for drag and drop.
    AllowWhenBlockedByActiveItem = 1 << 5
    # True even if the position is overlapped by another window.
    AllowWhenOverlapped = 1 << 6
    # True even if the item is disabled.
    AllowWhenDisabled = 1 << 7

    RectOnly = composite(
        AllowWhenBlockedByPopup, AllowWhenBlockedByActiveItem, AllowWhenOverlapped
    )
    RootAndChildWindows = composite(FocusedFlags.RootWindow, FocusedFlags.ChildWindows)


@bitflags
class InputTextFlags:
    """Flags for text inputs."""

    CharsDecimal = 1  # allow 0123456789.+-*/
    CharsHexadecimal = 1 << 1  # allow 0123456789ABCDEFabcdef
    CharsUppercase = 1 << 2  # turn a..z into A..Z
    CharsNoBlank = 1 << 3  # filter out spaces, tabs
    AutoSelectAll = 1 << 4  # select entire text when first taking mouse focus
    EnterReturnsTrue = 1 << 5  # return true on Enter rather than on every edit
    CallbackCompletion = 1 << 6  # call user function on TAB
    CallbackHistory = 1 << 7  # call user function on Up/Down arrows
    CallbackAlways = 1 << 8  # call user function every time
    CallbackCharFilter = 1 << 9  # call user function to filter characters
    AllowTabInput = 1 << 10  # TAB inserts a '\t' character
    # In multi-line mode, unfocus with Enter and add new line with Ctrl+Enter.
    CtrlEnterForNewLine = 1 << 11
    NoHorizontalScroll = 1 << 12  # don't follow the cursor horizontally
    AlwaysInsertMode = 1 << 13
    ReadOnly = 1 << 14
    Password = 1 << 15  # display all characters as '*'
    NoUndoRedo = 1 << 16
    CharsScientific = 1 << 17  # allow 0123456789.+-*/eE
    # Allow buffer capacity resize and notify when the string wants to grow.
    CallbackResize = 1 << 18


@bitflags
class SelectableFlags:
    DontClosePopups = 1  # clicking doesn't close the parent popup
    SpanAllColumns = 1 << 1  # frame spans all columns
    AllowDoubleClick = 1 << 2  # press events on double clicks too
    Disabled = 1 << 3  # cannot be selected, greyed out text


@bitflags
class TreeNodeFlags:
    """Flags for trees and collapsing headers."""

    Selected = 1
    # Full colored frame (e.g. for collapsing header).
    Framed = 1 << 1
    # Hit testing to allow subsequent widgets to overlap this one.
    AllowItemOverlap = 1 << 2
    # Don't tree push when open: no extra indent nor pushing on ID stack.
    NoTreePushOnOpen = 1 << 3
    # Don't automatically open the node while logging is active.
    NoAutoOpenOnLog = 1 << 4
    DefaultOpen = 1 << 5
    OpenOnDoubleClick = 1 << 6
    # Only open when clicking on the arrow part.
    OpenOnArrow = 1 << 7
    # No collapsing, no arrow.
    Leaf = 1 << 8
    # Display a bullet instead of arrow.
    Bullet = 1 << 9
    # Use FramePadding to vertically align text baseline to regular widget height.
    FramePadding = 1 << 10
    NavLeftJumpsBackHere = 1 << 13

    CollapsingHeader = composite(Framed, NoTreePushOnOpen, NoAutoOpenOnLog)


@bitflags
class WindowFlags:
    """Flags for windows."""

    NoTitleBar = 1
    NoResize = 1 << 1
    NoMove = 1 << 2
    NoScrollbar = 1 << 3
    NoScrollWithMouse = 1 << 4
    NoCollapse = 1 << 5
    AlwaysAutoResize = 1 << 6
    NoSavedSettings = 1 << 8
    NoInputs = 1 << 9
    MenuBar = 1 << 10
    HorizontalScrollbar = 1 << 11
    NoFocusOnAppearing = 1 << 12
    NoBringToFrontOnFocus = 1 << 13
    AlwaysVerticalScrollbar = 1 << 14
    AlwaysHorizontalScrollbar = 1 << 15
    AlwaysUseWindowPadding = 1 << 16
    NoNavInputs = 1 << 18
    NoNavFocus = 1 << 19

    NoNav = composite(NoNavInputs, NoNavFocus)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

FAMILIES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
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
}


def lookup_family(name: str) -> type:
    """Resolve a family by name, ignoring case and any ``ImGui``/``Im`` prefix."""
    by_name = {key.lower(): cls for key, cls in FAMILIES.items()}
    wanted = name.strip().lower()
    for candidate in (wanted, wanted.removeprefix("imgui"), wanted.removeprefix("im")):
        if candidate in by_name:
            return by_name[candidate]
    raise KeyError(f"Unknown flag family {name!r}. Known families: {', '.join(FAMILIES)}")
