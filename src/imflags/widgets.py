"""Builder-style widget descriptors.

Descriptors are frozen values: every ``with_*`` method returns a new
descriptor and leaves the original untouched.
"""

from dataclasses import dataclass, field, replace

from imflags.flags import WindowFlags


@dataclass(frozen=True)
class Window:
    """A window to be begun by name, with its flags and placement."""

    name: str
    flags: WindowFlags = field(default_factory=WindowFlags.empty)
    size: tuple[float, float] | None = None
    position: tuple[float, float] | None = None

    def with_flags(self, flags: WindowFlags) -> "Window":
        if not isinstance(flags, WindowFlags):
            raise TypeError(f"expected WindowFlags, got {type(flags).__name__}")
        return replace(self, flags=flags)

    def with_size(self, size: tuple[float, float]) -> "Window":
        return replace(self, size=(float(size[0]), float(size[1])))

    def with_position(self, position: tuple[float, float]) -> "Window":
        return replace(self, position=(float(position[0]), float(position[1])))


@dataclass(frozen=True)
class ProgressBar:
    """A progress indicator filled to *fraction* (0.0 .. 1.0).

    The default size ``(-1.0, 0.0)`` asks the engine for full available
    width and the default frame height.
    """

    fraction: float
    size: tuple[float, float] = (-1.0, 0.0)
    overlay_text: str | None = None

    def with_size(self, size: tuple[float, float]) -> "ProgressBar":
        return replace(self, size=(float(size[0]), float(size[1])))

    def with_overlay_text(self, text: str) -> "ProgressBar":
        return replace(self, overlay_text=text)
