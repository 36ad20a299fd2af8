from itertools import product

import numpy as np
import pytest

from f8 import F8, ONE, ZERO


canonical = [F8.new(sign, exponent, significand)
             for sign, exponent, significand in product((0, 1), range(7), range(1, 16, 2))]
canonical += [ZERO, -ZERO]


def test_identities():
    assert ZERO.to_f32() == 0.0
    assert ONE.to_f32() == 1.0
    assert F8.zero() == ZERO
    assert F8.one() == ONE
    assert ONE.bits == 0x21
    assert ZERO.is_zero() and not ONE.is_zero()
    assert ONE.is_one() and not ZERO.is_one()


def test_new_truncates():
    assert F8.new(3, 9, 17) == F8.new(1, 1, 1)
    assert F8.new(3, 9, 17).bits == 0x91


@pytest.mark.parametrize('bits', (-1, 256))
def test_bits_out_of_range(bits):
    with pytest.raises(ValueError):
        F8(bits)


def test_from_bits():
    assert F8.from_bits(np.uint8(0x21)) == ONE
    assert all(F8.from_bits(bits).bits == bits for bits in range(256))


def test_accessors():
    v = F8.new(1, 3, 5)
    assert v.sign_bit() == 1
    assert v.exponent() == 3
    assert v.significand() == 5
    assert v.is_sign_negative() and not v.is_sign_positive()
    assert v.integer_decode() == (5, 1, -1)


@pytest.mark.parametrize('value, sign', (
    (ZERO, 0),
    (-ZERO, 0),
    (F8.new(0, 5, 0), 0),
    (ONE, 1),
    (-ONE, -1),
    (F8.infinity(), 1),
    (F8.infinity(1), -1),
))
def test_sign(value, sign):
    assert value.sign() == sign


def test_negative_zero_is_distinct():
    negative_zero = -ZERO
    assert negative_zero.bits == 0x80
    assert negative_zero != ZERO
    assert negative_zero.to_f32() == ZERO.to_f32()
    assert not negative_zero.is_zero()


def test_hash_is_bit_pattern():
    assert len({ONE, F8.new(0, 2, 1), F8.from_bits(0x21)}) == 1
    assert len({ZERO, -ZERO}) == 2


def test_immutable():
    with pytest.raises(AttributeError):
        ONE.bits = 0


@pytest.mark.parametrize('value, result', (
    (F8.new(0, 0, 3), 0.75),
    (F8.new(0, 0, 1), 0.25),
    (F8.new(1, 6, 15), -240.0),
    (F8.new(0, 7, 1), 32.0),
    (F8.new(0, 3, 0), 0.0),
))
def test_to_f32(value, result):
    f = value.to_f32()
    assert isinstance(f, np.float32)
    assert f == result


def test_to_f32_infinity():
    assert np.isposinf(F8.infinity().to_f32())
    assert np.isneginf(F8.infinity(1).to_f32())


def test_float():
    assert float(ONE) == 1.0
    assert isinstance(float(ONE), float)


@pytest.mark.parametrize('value', canonical)
def test_exact_round_trip(value):
    assert F8.exact_from_f32(value.to_f32()) == value


def test_exact_picks_canonical_alias():
    assert F8.exact_from_f32(F8.new(0, 2, 2).to_f32()) == F8.new(0, 3, 1)
    assert F8.exact_from_f32(2.0) == F8.new(0, 3, 1)
    assert F8.exact_from_f32(1.0) == F8.new(0, 2, 1)


@pytest.mark.parametrize('value, bits', (
    (0.25, 0x01),
    (-0.75, 0x83),
    (0.0, 0x00),
    (-0.0, 0x80),
    (np.inf, 0x70),
    (-np.inf, 0xF0),
))
def test_exact_from_f32(value, bits):
    assert F8.exact_from_f32(value).bits == bits


@pytest.mark.filterwarnings('error')
@pytest.mark.parametrize('value', (0.012, 0.002, 0.125, 0.1, 17.0, 1e10, np.nan,
                                   1e40, -1e40, np.float64(1e39)))
def test_exact_from_f32_unrepresentable(value):
    assert F8.exact_from_f32(value) is None


@pytest.mark.parametrize('value, bits', (
    (2.0, 0x08),
    (1.0, 0x04),
    (-1.5, 0x86),
    (0.3, 0x01),
    (0.1, 0x00),
    (-0.0, 0x80),
    (4.0, 0x70),
    (1e10, 0x70),
    (-np.inf, 0xF0),
    (np.nan, 0x70),
))
def test_approx_from_f32(value, bits):
    assert F8.approx_from_f32(value).bits == bits


def test_approx_from_f32_values():
    assert F8.approx_from_f32(2.0).to_f32() == 2.0
    assert F8.approx_from_f32(0.3).to_f32() == 0.25
    assert F8.approx_from_f32(3.75).to_f32() == 3.75


def test_operand_types():
    with pytest.raises(TypeError):
        ONE + 1
    with pytest.raises(TypeError):
        ONE * 1.0
    with pytest.raises(TypeError):
        ONE - 'one'


def test_repr():
    assert repr(ONE) == 'F8(sign=0, exponent=2, significand=1)'


@pytest.mark.filterwarnings('error')
@pytest.mark.parametrize('value, bits', (
    (1e40, 0x70),
    (np.float64(-1e39), 0xF0),
))
def test_approx_from_f32_beyond_float32(value, bits):
    assert F8.approx_from_f32(value).bits == bits
