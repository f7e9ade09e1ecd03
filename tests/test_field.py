import pytest

from anunaya.field import (
    BLS12_377_FQ,
    BLS12_381_FQ,
    BLS12_381_FR,
    BN254_FQ,
    BN254_FR,
    PALLAS_FR,
    FieldElement,
    PrimeField,
)

ALL_FIELDS = [BN254_FQ, BN254_FR, BLS12_377_FQ, BLS12_381_FQ, BLS12_381_FR, PALLAS_FR]


@pytest.mark.parametrize("f", ALL_FIELDS)
def test_modulus_reduces_to_zero(f):
    assert FieldElement(f.modulus, f) == f.zero()
    assert FieldElement(-1, f) + f.one() == f.zero()


@pytest.mark.parametrize("f", ALL_FIELDS)
def test_fermat_little_theorem(f):
    assert FieldElement(2, f) ** (f.modulus - 1) == f.one()


@pytest.mark.parametrize("f", ALL_FIELDS)
def test_inverses(f):
    a = FieldElement(12345, f)
    b = FieldElement(678, f)
    assert a + (-a) == f.zero()
    assert a * a.inverse() == f.one()
    assert a / a == f.one()
    assert (a / b) * b == a
    assert a ** -1 == a.inverse()
    assert a ** 0 == f.one()


def test_int_coercion():
    f = BN254_FR
    a = f(987654321)
    assert a + 1 - 1 == a
    assert 2 * a == a + a
    assert 1 / a == a.inverse()
    assert 0 - a == -a
    assert int(f(5)) == 5


def test_small_field_product():
    f = PrimeField(7)
    assert f(3) * 5 == f(1)


def test_zero_has_no_inverse():
    f = BN254_FQ
    with pytest.raises(ZeroDivisionError):
        f.zero().inverse()
    with pytest.raises(ZeroDivisionError):
        f.one() / f.zero()


def test_mixed_fields_rejected():
    with pytest.raises(ValueError):
        BN254_FQ.one() + BN254_FR.one()
    with pytest.raises(ValueError):
        BN254_FQ(BN254_FR.one())


def test_invalid_inputs():
    with pytest.raises(ValueError):
        PrimeField(1)
    with pytest.raises(TypeError):
        BN254_FQ("1")


def test_element_is_reduced_on_construction():
    f = PrimeField(11)
    assert FieldElement(f.modulus + 4, f) == f(4)
    assert bool(f(f.modulus)) is False