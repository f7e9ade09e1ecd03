import pytest

from anunaya.field import BLS12_381_FR, BN254_FQ, BN254_FR, PALLAS_FR
from anunaya.vdf import (
    MinRoot,
    MinRootElement,
    MinRootParams,
    VDFError,
    VerificationError,
)

FIELDS = [BN254_FR, BLS12_381_FR, PALLAS_FR]

LIMBS = {
    BN254_FR.modulus: [
        14981214993055009997,
        6006880321387387405,
        10624953561019755799,
        2789598613442376532,
    ],
    BLS12_381_FR.modulus: [
        3689348813023923405,
        2413663763415232921,
        16233882818423549954,
        3341406743785779740,
    ],
    PALLAS_FR.modulus: [
        15465117582000704717,
        5665212537877281354,
        3689348814741910323,
        3689348814741910323,
    ],
}


@pytest.mark.parametrize("f", FIELDS)
def test_minroot(f):
    vdf = MinRoot(f)
    start = MinRootElement(f.one(), f.one())
    pp = vdf.setup(100, None)
    assert pp == MinRootParams(100)
    output, proof = vdf.eval(pp, start)
    assert output == proof
    assert vdf.verify(pp, start, output, proof) is None
    tampered = MinRootElement(proof.x + 1, proof.y)
    with pytest.raises(VerificationError, match="Expected"):
        vdf.verify(pp, start, output, tampered)


@pytest.mark.parametrize("f", FIELDS)
def test_exponent_matches_limbs(f):
    vdf = MinRoot(f)
    limbs = LIMBS[f.modulus]
    assert sum(limb << (64 * i) for i, limb in enumerate(limbs)) == vdf.exp_coef


@pytest.mark.parametrize("f", FIELDS)
def test_exponent_is_fifth_root(f):
    vdf = MinRoot(f)
    assert (5 * vdf.exp_coef) % (f.modulus - 1) == 1


@pytest.mark.parametrize("f", FIELDS)
def test_iteration_invariants(f):
    vdf = MinRoot(f)
    start = MinRootElement(f(3), f(7))
    first, _ = vdf.eval(vdf.setup(1), start)
    assert first.x ** 5 == start.x + start.y
    assert first.y == start.x
    second, _ = vdf.eval(vdf.setup(2), start)
    assert second.x ** 5 == first.x + first.y
    assert second.y == first.x + f(1)


def test_zero_difficulty_returns_input():
    vdf = MinRoot(BN254_FR)
    start = MinRootElement(BN254_FR(5), BN254_FR(6))
    output, proof = vdf.eval(vdf.setup(0), start)
    assert output == start
    assert proof == start


def test_eval_is_deterministic():
    start = MinRootElement(PALLAS_FR.one(), PALLAS_FR.one())
    first_vdf = MinRoot(PALLAS_FR)
    second_vdf = MinRoot(PALLAS_FR)
    pp = first_vdf.setup(20)
    first_output, first_proof = first_vdf.eval(pp, start)
    second_output, second_proof = second_vdf.eval(pp, start)
    assert first_output == second_output
    assert first_proof == second_proof
    assert first_output == first_proof


def test_unsupported_field_rejected():
    with pytest.raises(ValueError):
        MinRoot(BN254_FQ)


def test_input_from_other_field_rejected():
    vdf = MinRoot(BN254_FR)
    start = MinRootElement(PALLAS_FR.one(), PALLAS_FR.one())
    with pytest.raises(VDFError):
        vdf.eval(vdf.setup(1), start)


def test_invalid_difficulty():
    vdf = MinRoot(BN254_FR)
    with pytest.raises(ValueError):
        vdf.setup(-1)
    with pytest.raises(ValueError):
        vdf.setup(2**64)


def test_element_coordinates_share_field():
    with pytest.raises(ValueError):
        MinRootElement(BN254_FR.one(), PALLAS_FR.one())