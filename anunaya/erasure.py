"""Reed-Solomon erasure code over a prime field.

Data elements are the coefficients of a polynomial; shards are its
evaluations at 1..n. Decoding is Lagrange interpolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from anunaya.field import FieldElement


class ErasureCodeError(Exception):
    """Error raised by erasure coding."""


class InsufficientSharesError(ErasureCodeError):
    """Fewer shares were given than there are data elements."""


@dataclass(frozen=True)
class Shard:
    """One share of an encoded message: its index and evaluation."""

    index: int
    value: FieldElement


def encode(data: Sequence[FieldElement], parity_size: int) -> list[Shard]:
    """Encode ``data`` into ``len(data) + parity_size`` shards."""
    if parity_size < 0:
        raise ValueError("parity size must not be negative")
    num_shares = len(data) + parity_size
    if num_shares == 0:
        return []
    if not data:
        raise ValueError("cannot determine the field of empty data")
    field = data[0].field
    shards = []
    for index in range(1, num_shares + 1):
        point = field(index)
        value = field.zero()
        power = field.one()
        for coefficient in data:
            value += power * coefficient
            power *= point
        shards.append(Shard(index, value))
    return shards


def _vanishing_polynomial(points: list[FieldElement]) -> list[FieldElement]:
    """Coefficients, lowest first, of the product of (X - x_i)."""
    field = points[0].field
    poly = [field.one()]
    for x in points:
        shifted = [-x * poly[0]]
        shifted.extend(low - x * high for low, high in zip(poly, poly[1:]))
        shifted.append(poly[-1])
        poly = shifted
    return poly


def decode(shares: Sequence[Shard], data_size: int) -> list[FieldElement]:
    """Recover ``data_size`` data elements from at least that many shards."""
    if len(shares) < data_size:
        raise InsufficientSharesError(
            f"insufficient shares: got {len(shares)} expected at least {data_size}"
        )
    shares = list(shares[:data_size])
    if not shares:
        return []
    field = shares[0].value.field
    points = [field(shard.index) for shard in shares]

    if len(set(points)) != len(points):
        raise ErasureCodeError("shares have duplicate indices")

    vanishing = _vanishing_polynomial(points)
    result = [field.zero()] * len(shares)
    for i, (xi, shard) in enumerate(zip(points, shares)):
        denominator = field.one()
        for j, xj in enumerate(points):
            if i != j:
                denominator *= xi - xj
        weight = shard.value / denominator

        # Quotient of the vanishing polynomial by (X - x_i), highest first.
        quotient = [field.one()]
        for coefficient in reversed(vanishing[1:-1]):
            quotient.append(coefficient + xi * quotient[-1])
        quotient.reverse()

        result = [acc + weight * q for acc, q in zip(result, quotient)]
    return result