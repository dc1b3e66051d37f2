"""bitflags.py – Strongly-typed bit-mask families for engine option flags.

A *family* is a plain class body of ``int`` constants, turned into its own
value type by the :func:`bitflags` decorator::

    @bitflags
    class ComboFlags:
        HeightSmall = 1 << 1
        HeightRegular = 1 << 2
        HeightMask = composite(HeightSmall, HeightRegular)

Every family gets the same operations, but they are installed onto each
class individually: families share no base class, so ``ComboFlags`` and
``TreeNodeFlags`` values refuse to mix.

Values are immutable and always fit the engine's native ``int``
(:data:`NATIVE_INT`) so they cross the foreign boundary unchanged.
"""

from __future__ import annotations

import ctypes
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

NATIVE_INT = ctypes.c_int
NATIVE_BITS = ctypes.sizeof(NATIVE_INT) * 8
NATIVE_MIN = -(1 << (NATIVE_BITS - 1))
NATIVE_MAX = (1 << (NATIVE_BITS - 1)) - 1

_F = TypeVar("_F")


@dataclass(frozen=True)
class Composite:
    """A constant declared as the OR of other constants."""

    parts: tuple[Any, ...]

    @property
    def bits(self) -> int:
        value = 0
        for part in self.parts:
            value |= part if isinstance(part, int) else part.bits
        return value


def composite(*parts: Any) -> Composite:
    """Declare a composite constant inside a family body.

    Parts may be ``int`` constants of the same body, other composites, or
    values of an already-built family.
    """
    if not parts:
        raise TypeError("composite() needs at least one constituent")
    for part in parts:
        if isinstance(part, bool) or not (
            isinstance(part, (int, Composite)) or is_flag_family(type(part))
        ):
            raise TypeError(f"composite() constituent {part!r} is not a flag constant")
    return Composite(parts)


def is_flag_family(cls: type) -> bool:
    """True if *cls* was built by :func:`bitflags`."""
    return "__flag_members__" in vars(cls)


def _check_native(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"flag bits must be an int, got {type(value).__name__}")
    if not NATIVE_MIN <= value <= NATIVE_MAX:
        raise OverflowError(f"{value:#x} does not fit a {NATIVE_BITS}-bit native int")
    return value


# ---------------------------------------------------------------------------
# Operations installed on every family
# ---------------------------------------------------------------------------


def _init(self, bits: int = 0) -> None:
    object.__setattr__(self, "_bits", _check_native(bits))


def _setattr(self, name: str, value: Any) -> None:
    raise AttributeError(f"{type(self).__name__} values are immutable")


def _delattr(self, name: str) -> None:
    raise AttributeError(f"{type(self).__name__} values are immutable")


def _binary(op: Callable[[int, int], int]) -> Callable[[Any, Any], Any]:
    def method(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(op(self._bits, other._bits))

    return method


def _invert(self):
    cls = type(self)
    return cls(cls.__flag_all__ & ~self._bits)


def _eq(self, other) -> bool:
    if type(other) is not type(self):
        return NotImplemented
    return self._bits == other._bits


def _hash(self) -> int:
    return hash((type(self).__qualname__, self._bits))


def _bool(self) -> bool:
    return self._bits != 0


def _int(self) -> int:
    return self._bits


def _reduce(self):
    return (type(self), (self._bits,))


def _iter(self) -> Iterator[Any]:
    cls = type(self)
    for name, bit in sorted(cls.__flag_members__.items(), key=lambda item: item[1]):
        if bit and self._bits & bit == bit:
            yield getattr(cls, name)


def _contains(self, other) -> bool:
    if type(other) is not type(self):
        raise TypeError(
            f"cannot test {type(other).__name__} against {type(self).__name__}"
        )
    return self._bits & other._bits == other._bits


def _intersects(self, other) -> bool:
    if type(other) is not type(self):
        raise TypeError(
            f"cannot test {type(other).__name__} against {type(self).__name__}"
        )
    return self._bits & other._bits != 0


def _repr(self) -> str:
    cls = type(self)
    parts = self.names()
    unknown = self.unknown_bits
    if unknown:
        parts.append(f"0x{unknown & ((1 << NATIVE_BITS) - 1):X}")
    return f"{cls.__name__}({' | '.join(parts)})"


def _bits_property(self) -> int:
    return self._bits


def _unknown_bits(self) -> int:
    return self._bits & ~type(self).__flag_all__


def _names(self) -> list[str]:
    cls = type(self)
    return [
        name
        for name, bit in sorted(cls.__flag_members__.items(), key=lambda item: item[1])
        if bit and self._bits & bit == bit
    ]


def _to_native(self) -> ctypes.c_int:
    return NATIVE_INT(self._bits)


def _is_empty(self) -> bool:
    return self._bits == 0


def _is_all(self) -> bool:
    full = type(self).__flag_all__
    return self._bits & full == full


def _empty(cls):
    return cls(0)


def _all(cls):
    return cls(cls.__flag_all__)


def _from_native(cls, value):
    """Wrap a native int (or ``ctypes.c_int``) without dropping any bit."""
    if isinstance(value, NATIVE_INT):
        value = value.value
    return cls(value)


def _from_bits_truncate(cls, value: int):
    """Wrap *value*, keeping only the bits this family defines."""
    return cls(_check_native(value) & cls.__flag_all__)


def _from_names(cls, *names: str):
    """OR together the named constants (single-bit or composite)."""
    bits = 0
    for name in names:
        if name not in cls.__flag_members__ and name not in cls.__flag_composites__:
            raise KeyError(f"{cls.__name__} has no constant named {name!r}")
        bits |= getattr(cls, name)._bits
    return cls(bits)


_METHODS: dict[str, Any] = {
    "__init__": _init,
    "__setattr__": _setattr,
    "__delattr__": _delattr,
    "__or__": _binary(lambda a, b: a | b),
    "__and__": _binary(lambda a, b: a & b),
    "__xor__": _binary(lambda a, b: a ^ b),
    "__sub__": _binary(lambda a, b: a & ~b),
    "__invert__": _invert,
    "__eq__": _eq,
    "__hash__": _hash,
    "__bool__": _bool,
    "__int__": _int,
    "__reduce__": _reduce,
    "__iter__": _iter,
    "__contains__": _contains,
    "__repr__": _repr,
    "contains": _contains,
    "intersects": _intersects,
    "names": _names,
    "to_native": _to_native,
    "is_empty": _is_empty,
    "is_all": _is_all,
    "bits": property(_bits_property),
    "unknown_bits": property(_unknown_bits),
    "empty": classmethod(_empty),
    "all": classmethod(_all),
    "from_native": classmethod(_from_native),
    "from_bits_truncate": classmethod(_from_bits_truncate),
    "from_names": classmethod(_from_names),
}


# ---------------------------------------------------------------------------
# Family builder
# ---------------------------------------------------------------------------


def bitflags(cls: type[_F]) -> type[_F]:
    """Turn a class body of flag constants into a bit-mask value type.

    Raises ``TypeError`` when a single-bit constant is not a power of two
    (or zero), does not fit below the native sign bit, or reuses a bit
    already taken by another single-bit constant.
    """
    members: dict[str, int] = {}
    composites: dict[str, Composite] = {}
    for name, value in vars(cls).items():
        if name.startswith("_"):
            continue
        if isinstance(value, Composite):
            composites[name] = value
        elif isinstance(value, int) and not isinstance(value, bool):
            members[name] = value

    taken: dict[int, str] = {}
    for name, bit in members.items():
        if bit < 0 or bit & (bit - 1):
            raise TypeError(f"{cls.__name__}.{name} = {bit:#x} is not a single bit")
        if bit > NATIVE_MAX:
            raise TypeError(f"{cls.__name__}.{name} = {bit:#x} overflows the native int")
        if bit and bit in taken:
            raise TypeError(
                f"{cls.__name__}.{name} reuses bit {bit:#x} of {cls.__name__}.{taken[bit]}"
            )
        taken[bit] = name

    all_bits = 0
    for bit in members.values():
        all_bits |= bit

    for name, method in _METHODS.items():
        if name not in vars(cls):
            setattr(cls, name, method)
    type.__setattr__(cls, "__flag_members__", members)
    type.__setattr__(cls, "__flag_composites__", composites)
    type.__setattr__(cls, "__flag_all__", all_bits)

    for name, bit in members.items():
        setattr(cls, name, cls(bit))
    for name, comp in composites.items():
        setattr(cls, name, cls(comp.bits))
    return cls
