from __future__ import annotations

from typing import Tuple

import numpy as np

_F32_MANTISSA_BITS = 23
_F32_BIAS = 127


def integer_decode(value: float | np.floating) -> Tuple[int, int, int]:
	"""Split a float32 into (significand, exponent, sign) with value = sign * significand * 2^exponent.

	The significand carries the hidden bit for normal numbers; subnormals are scaled
	so the same exponent formula applies. Zero decodes to a zero significand.
	Infinities and NaN decode like any other bit pattern; callers check for them first.
	"""
	bits = int(np.asarray(value, dtype=np.float32).view(np.uint32))
	sign = -1 if bits >> 31 else 1
	exp_bits = (bits >> _F32_MANTISSA_BITS) & 0xFF
	fraction = bits & ((1 << _F32_MANTISSA_BITS) - 1)
	if exp_bits == 0:
		significand = fraction << 1
	else:
		significand = fraction | (1 << _F32_MANTISSA_BITS)
	return significand, exp_bits - (_F32_BIAS + _F32_MANTISSA_BITS), sign
