"""Tests for the bit-mask family machinery in imflags.bitflags."""

import copy
import ctypes
import pickle

import pytest

from imflags.bitflags import (
    NATIVE_BITS,
    NATIVE_MAX,
    NATIVE_MIN,
    Composite,
    bitflags,
    composite,
    is_flag_family,
)
from imflags.flags import ComboFlags


@bitflags
class Sample:
    A = 1
    B = 1 << 1
    C = 1 << 4
    AB = composite(A, B)


@bitflags
class Other:
    A = 1
    Borrowed = composite(Sample.A, Sample.B)


# ---------------------------------------------------------------------------
# Family construction
# ---------------------------------------------------------------------------


class TestFamilyDefinition:
    def test_constants_become_instances(self) -> None:
        assert isinstance(Sample.A, Sample)
        assert isinstance(Sample.AB, Sample)
        assert Sample.C.bits == 16

    def test_metadata(self) -> None:
        assert Sample.__flag_members__ == {"A": 1, "B": 2, "C": 16}
        assert list(Sample.__flag_composites__) == ["AB"]
        assert Sample.__flag_all__ == 0b10011

    def test_is_flag_family(self) -> None:
        assert is_flag_family(Sample)
        assert not is_flag_family(int)

    def test_no_shared_base(self) -> None:
        assert Sample.__mro__ == (Sample, object)
        assert Other.__mro__ == (Other, object)

    def test_rejects_multi_bit_constant(self) -> None:
        with pytest.raises(TypeError, match="not a single bit"):

            @bitflags
            class Bad:
                X = 3

    def test_rejects_negative_constant(self) -> None:
        with pytest.raises(TypeError, match="not a single bit"):

            @bitflags
            class Bad:
                X = -1

    def test_rejects_aliased_bits(self) -> None:
        with pytest.raises(TypeError, match="reuses bit"):

            @bitflags
            class Bad:
                X = 1 << 3
                Y = 1 << 3

    def test_rejects_sign_bit(self) -> None:
        with pytest.raises(TypeError, match="overflows"):

            @bitflags
            class Bad:
                X = 1 << (NATIVE_BITS - 1)

    def test_zero_default_allowed(self) -> None:
        @bitflags
        class WithDefault:
            Default = 0
            X = 1

        assert WithDefault.Default.is_empty()
        assert WithDefault.Default == WithDefault.empty()

    def test_private_names_ignored(self) -> None:
        @bitflags
        class WithPrivate:
            _scratch = 3
            X = 1

        assert WithPrivate.__flag_members__ == {"X": 1}

    def test_composite_requires_parts(self) -> None:
        with pytest.raises(TypeError):
            composite()

    def test_composite_rejects_non_flags(self) -> None:
        with pytest.raises(TypeError):
            composite("A")
        with pytest.raises(TypeError):
            composite(True)

    def test_composite_of_composites(self) -> None:
        c = composite(composite(1, 2), 8)
        assert isinstance(c, Composite)
        assert c.bits == 11

    def test_cross_family_composite(self) -> None:
        assert Other.Borrowed.bits == (Sample.A | Sample.B).bits
        parts = Other.__flag_composites__["Borrowed"].parts
        assert all(type(part) is Sample for part in parts)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class TestOperators:
    def test_or_and(self) -> None:
        ab = Sample.A | Sample.B
        assert ab == Sample.AB
        assert ab & Sample.A == Sample.A
        assert (Sample.A & Sample.C).is_empty()

    def test_xor_and_difference(self) -> None:
        assert Sample.AB ^ Sample.A == Sample.B
        assert Sample.AB - Sample.B == Sample.A
        assert Sample.A - Sample.C == Sample.A

    def test_invert_stays_within_defined_bits(self) -> None:
        assert ~Sample.A == Sample.B | Sample.C
        assert ~Sample.empty() == Sample.all()
        assert (~Sample.all()).is_empty()

    def test_invert_drops_unknown_bits(self) -> None:
        assert ~Sample.from_native(-1) == Sample.empty()

    def test_mixing_families_raises(self) -> None:
        with pytest.raises(TypeError):
            Sample.A | Other.A  # noqa: B018
        with pytest.raises(TypeError):
            Sample.A & Other.A  # noqa: B018

    def test_mixing_with_int_raises(self) -> None:
        with pytest.raises(TypeError):
            Sample.A | 1  # noqa: B018
        with pytest.raises(TypeError):
            1 | Sample.A  # noqa: B018

    def test_equality_across_families_is_false(self) -> None:
        assert Sample.A != Other.A
        assert Sample.A != 1

    def test_hash_follows_bits(self) -> None:
        assert len({Sample.A | Sample.B, Sample.AB, Sample.B | Sample.A}) == 1
        assert len({Sample.A, Other.A}) == 2

    def test_truthiness(self) -> None:
        assert not Sample()
        assert Sample.A
        assert Sample().is_empty()
        assert not Sample.A.is_empty()

    def test_is_all(self) -> None:
        assert Sample.all().is_all()
        assert Sample.from_native(-1).is_all()
        assert not Sample.AB.is_all()

    def test_contains_and_intersects(self) -> None:
        assert Sample.A in Sample.AB
        assert Sample.C not in Sample.AB
        assert Sample.AB.contains(Sample.AB)
        assert Sample.AB.intersects(Sample.A | Sample.C)
        assert not Sample.AB.intersects(Sample.C)

    def test_contains_other_family_raises(self) -> None:
        with pytest.raises(TypeError):
            Sample.AB.contains(Other.A)
        with pytest.raises(TypeError):
            Sample.AB.intersects(Other.A)

    def test_iteration_in_bit_order(self) -> None:
        assert list(Sample.C | Sample.A) == [Sample.A, Sample.C]
        assert (Sample.C | Sample.B).names() == ["B", "C"]
        assert list(Sample()) == []


# ---------------------------------------------------------------------------
# Native boundary
# ---------------------------------------------------------------------------


class TestNativeConversion:
    @pytest.mark.parametrize("value", [0, 1, 19, -1, NATIVE_MIN, NATIVE_MAX, 0x0F0F0F0F])
    def test_round_trip(self, value: int) -> None:
        flags = Sample.from_native(value)
        native = flags.to_native()
        assert isinstance(native, ctypes.c_int)
        assert native.value == value
        assert Sample.from_native(native) == flags

    def test_int_conversion(self) -> None:
        assert int(Sample.AB) == 3
        assert Sample.AB.bits == 3

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(OverflowError):
            Sample(NATIVE_MAX + 1)
        with pytest.raises(OverflowError):
            Sample.from_native(NATIVE_MIN - 1)

    def test_non_int_raises(self) -> None:
        with pytest.raises(TypeError):
            Sample(True)
        with pytest.raises(TypeError):
            Sample(1.0)

    def test_unknown_bits_kept(self) -> None:
        flags = Sample.from_native(0x101)
        assert flags.unknown_bits == 0x100
        assert flags.bits == 0x101
        assert flags.names() == ["A"]

    def test_from_bits_truncate(self) -> None:
        assert Sample.from_bits_truncate(0xFF) == Sample.all()
        assert Sample.from_bits_truncate(0x100).is_empty()

    def test_from_names(self) -> None:
        assert Sample.from_names("A", "C") == Sample.A | Sample.C
        assert Sample.from_names("AB") == Sample.AB
        assert Sample.from_names() == Sample.empty()

    def test_from_names_unknown(self) -> None:
        with pytest.raises(KeyError, match="Nope"):
            Sample.from_names("A", "Nope")


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------


class TestValueSemantics:
    def test_immutable(self) -> None:
        value = Sample.A | Sample.B
        with pytest.raises(AttributeError):
            value._bits = 16
        with pytest.raises(AttributeError):
            value.extra = 1
        with pytest.raises(AttributeError):
            del value._bits
        assert value == Sample.AB

    def test_constants_unchanged_by_operations(self) -> None:
        _ = Sample.A | Sample.C
        assert Sample.A.bits == 1

    def test_repr(self) -> None:
        assert repr(Sample.A | Sample.C) == "Sample(A | C)"
        assert repr(Sample()) == "Sample()"
        assert repr(Sample.from_native(0x101)) == "Sample(A | 0x100)"

    def test_repr_hex_matches_cli(self) -> None:
        # same spelling as hex_bits(): uppercase digits, 32-bit two's complement
        assert repr(Sample.from_native(0xFA1)) == "Sample(A | 0xFA0)"
        assert repr(Other.from_native(-2)) == "Other(0xFFFFFFFE)"

    def test_pickle_and_copy(self) -> None:
        value = ComboFlags.HeightLarge | ComboFlags.NoPreview
        assert pickle.loads(pickle.dumps(value)) == value
        assert copy.copy(value) == value
        assert copy.deepcopy(value) == value
