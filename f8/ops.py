from __future__ import annotations

from functools import lru_cache
from typing import Callable

import numpy as np

from .format import FORMAT
from .normalize import normalize
from .value import F8, ZERO


def negate(a: F8) -> F8:
	"""Flip the sign bit. Zero negates to the distinct negative-zero byte."""
	return F8(a.bits ^ FORMAT.sign_mask)


def add(a: F8, b: F8) -> F8:
	e0, m0 = a.exponent(), a.significand()
	e1, m1 = b.exponent(), b.significand()
	# Align on the larger exponent; the significand may outgrow its field until normalize.
	while e0 < e1:
		m0 <<= 1
		e0 += 1
	while e1 < e0:
		m1 <<= 1
		e1 += 1
	assert e0 == e1, "exponents not equal after alignment"

	signs = (a.is_sign_positive(), b.is_sign_positive())
	if signs == (True, True):
		return F8.new(0, *normalize(e0, m0 + m1))
	elif signs == (False, False):
		return F8.new(1, *normalize(e0, m0 + m1))
	elif signs == (True, False):
		if m0 == m1:
			return ZERO
		elif m0 > m1:
			return F8.new(0, *normalize(e0, m0 - m1))
		else:
			return F8.new(1, *normalize(e0, m1 - m0))
	else:
		if m1 == m0:
			return ZERO
		elif m1 > m0:
			return F8.new(0, *normalize(e0, m1 - m0))
		else:
			return F8.new(1, *normalize(e0, m0 - m1))


def subtract(a: F8, b: F8) -> F8:
	return add(a, negate(b))


def multiply(a: F8, b: F8) -> F8:
	sign = a.sign_bit() ^ b.sign_bit()
	exponent = a.exponent() + b.exponent() - FORMAT.exponent_bias
	if exponent < 0:
		# Below the smallest exponent: flush to a zero carrying the product's sign.
		return F8.new(sign, 0, 0)
	return F8.new(sign, *normalize(exponent, a.significand() * b.significand()))


@lru_cache(maxsize=None)
def _table(op: Callable[[F8, F8], F8]) -> np.ndarray:
	"""256x256 result table of a binary operator, indexed by the packed operands."""
	table = np.empty((256, 256), dtype=np.uint8)
	for i in range(256):
		a = F8(i)
		for j in range(256):
			table[i, j] = op(a, F8(j)).bits
	return table


def _binary_op(a_packed: np.ndarray, b_packed: np.ndarray, op: Callable[[F8, F8], F8]) -> np.ndarray:
	a = np.asarray(a_packed, dtype=np.uint8)
	b = np.asarray(b_packed, dtype=np.uint8)
	return _table(op)[a, b]


def add_packed(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, add)


def subtract_packed(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, subtract)


def multiply_packed(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, multiply)


def negate_packed(packed: np.ndarray) -> np.ndarray:
	return np.asarray(packed, dtype=np.uint8) ^ np.uint8(FORMAT.sign_mask)

