"""Arithmetic in prime fields, with the fields used by erasure codes and VDFs."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any


@dataclass(frozen=True)
class PrimeField:
    """The field of integers modulo a prime ``modulus``."""

    modulus: int
    name: str = dc_field(default="", compare=False)

    def __post_init__(self) -> None:
        if (
            isinstance(self.modulus, bool)
            or not isinstance(self.modulus, int)
            or self.modulus < 2
        ):
            raise ValueError(f"invalid field modulus: {self.modulus!r}")

    def __call__(self, value: Any) -> FieldElement:
        """Return ``value`` as an element of this field."""
        if isinstance(value, FieldElement):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot convert {value!r} to a field element")
        return FieldElement(value, self)

    def zero(self) -> FieldElement:
        """Additive identity."""
        return FieldElement(0, self)

    def one(self) -> FieldElement:
        """Multiplicative identity."""
        return FieldElement(1, self)

    def __repr__(self) -> str:
        return f"PrimeField({self.name or self.modulus})"


@dataclass(frozen=True)
class FieldElement:
    """An element of a :class:`PrimeField`, kept reduced."""

    value: int
    field: PrimeField

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % self.field.modulus)

    def _coerce(self, other: Any) -> int | None:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise ValueError("elements belong to different fields")
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _new(self, value: int) -> FieldElement:
        return FieldElement(value, self.field)

    def __add__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._new(self.value + value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._new(self.value - value)

    def __rsub__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._new(value - self.value)

    def __mul__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._new(self.value * value)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self * self._new(value).inverse()

    def __rtruediv__(self, other: Any) -> FieldElement:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._new(value) * self.inverse()

    def __neg__(self) -> FieldElement:
        return self._new(-self.value)

    def __pow__(self, exponent: int) -> FieldElement:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** -exponent
        return self._new(pow(self.value, exponent, self.field.modulus))

    def inverse(self) -> FieldElement:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._new(pow(self.value, -1, self.field.modulus))

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"FieldElement({self.value})"


BN254_FQ = PrimeField(
    21888242871839275222246405745257275088696311157297823662689037894645226208583,
    "bn254.Fq",
)
BN254_FR = PrimeField(
    21888242871839275222246405745257275088548364400416034343698204186575808495617,
    "bn254.Fr",
)
BLS12_377_FQ = PrimeField(
    258664426012969094010652733694893533536393512754914660539884262666720468348340822774968888139573360124440321458177,
    "bls12_377.Fq",
)
BLS12_381_FQ = PrimeField(
    0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB,
    "bls12_381.Fq",
)
BLS12_381_FR = PrimeField(
    52435875175126190479447740508185965837690552500527637822603658699938581184513,
    "bls12_381.Fr",
)
PALLAS_FR = PrimeField(
    28948022309329048855892746252171976963363056481941647379679742748393362948097,
    "pallas.Fr",
)