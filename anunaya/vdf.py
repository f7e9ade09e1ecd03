"""MinRoot verifiable delay function over prime fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from anunaya.field import BLS12_381_FR, BN254_FR, PALLAS_FR, FieldElement, PrimeField

_U64_MAX = 2**64 - 1

# Exponents computing a fifth root in each supported field.
_EXP_COEFFICIENTS = {
    # (4 * modulus - 3) / 5
    BN254_FR.modulus: 17510594297471420177797124596205820070838691520332827474958563349260646796493,
    # (2 * modulus - 1) / 5
    BLS12_381_FR.modulus: 20974350070050476191779096203274386335076221000211055129041463479975432473805,
    # (4 * modulus - 3) / 5
    PALLAS_FR.modulus: 23158417847463239084714197001737581570690445185553317903743794198714690358477,
}


class VDFError(Exception):
    """Error raised by a verifiable delay function."""


class VerificationError(VDFError):
    """A VDF output did not verify against its proof."""


@dataclass(frozen=True)
class MinRootParams:
    """Public parameters of MinRoot: the number of iterations."""

    difficulty: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.difficulty, bool) or not isinstance(self.difficulty, int):
            raise TypeError("difficulty must be an integer")
        if not 0 <= self.difficulty <= _U64_MAX:
            raise ValueError(f"difficulty out of range: {self.difficulty}")


@dataclass(frozen=True)
class MinRootElement:
    """A pair of field elements, the state of a MinRoot evaluation."""

    x: FieldElement
    y: FieldElement

    def __post_init__(self) -> None:
        if self.x.field != self.y.field:
            raise ValueError("coordinates belong to different fields")


class MinRoot:
    """MinRoot VDF over a field that has a known fifth-root exponent."""

    def __init__(self, field: PrimeField, exp_coef: int | None = None) -> None:
        if exp_coef is None:
            try:
                exp_coef = _EXP_COEFFICIENTS[field.modulus]
            except KeyError:
                raise ValueError(f"no MinRoot exponent for {field!r}") from None
        self.field = field
        self.exp_coef = exp_coef

    def setup(self, difficulty: int, rng: Any = None) -> MinRootParams:
        """Create public parameters; ``rng`` is accepted but not needed."""
        return MinRootParams(difficulty)

    def _iterate(self, element: MinRootElement, round_number: int) -> MinRootElement:
        x = element.x
        return MinRootElement((x + element.y) ** self.exp_coef, x + round_number)

    def eval(
        self, pp: MinRootParams, value: MinRootElement
    ) -> tuple[MinRootElement, MinRootElement]:
        """Run ``pp.difficulty`` iterations; return the output and its proof."""
        if value.x.field != self.field:
            raise VDFError("input belongs to a different field")
        output = value
        for round_number in range(pp.difficulty):
            output = self._iterate(output, round_number)
        return output, output

    def verify(
        self,
        pp: MinRootParams,
        value: MinRootElement,
        output: MinRootElement,
        proof: MinRootElement,
    ) -> None:
        """Raise VerificationError unless ``proof`` matches ``output``."""
        if proof != output:
            raise VerificationError(
                f'Expected: "{proof!r}", found "{output!r}" instead'
            )